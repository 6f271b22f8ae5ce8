"""Insertion and deletion on dynamic arrays (Python lists)."""

from __future__ import annotations

from typing import Any, MutableSequence

__all__ = ["array_insert", "array_delete"]


def array_insert(items: MutableSequence[Any], index: int, value: Any) -> None:
    """Insert ``value`` at position ``index``, shifting later elements right.

    ``index`` may equal ``len(items)``, in which case the value is appended.
    Raises ``IndexError`` for any index outside ``0..len(items)``.
    """
    if not 0 <= index <= len(items):
        raise IndexError(f"insert index {index} out of range for size {len(items)}")
    items.insert(index, value)


def array_delete(items: MutableSequence[Any], index: int) -> None:
    """Remove the element at ``index``, shifting later elements left.

    An index outside the array leaves it untouched.
    """
    if 0 <= index < len(items):
        del items[index]
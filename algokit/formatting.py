"""Pretty-printing of sequences."""

from __future__ import annotations

from typing import Any, Iterable

__all__ = ["format_value", "format_sequence", "print_sequence"]


def format_value(value: Any) -> str:
    """Format a value; floats use six significant digits, as in ``%g``."""
    if isinstance(value, float):
        return format(value, "g")
    return str(value)


def format_sequence(items: Iterable[Any], prefix: str = "") -> str:
    """Return ``prefix`` followed by the items as ``[a, b, c]``."""
    return prefix + "[" + ", ".join(format_value(item) for item in items) + "]"


def print_sequence(items: Iterable[Any], prefix: str = "") -> None:
    """Print ``items`` in the form produced by :func:`format_sequence`."""
    print(format_sequence(items, prefix))
"""Comparison and counting sorts."""

from __future__ import annotations

from typing import Any, List, MutableSequence, Sequence

__all__ = ["insert", "insertion_sort", "merge", "merge_sort", "counting_sort"]


def insert(items: MutableSequence[Any], i: int) -> None:
    """Move ``items[i]`` left into place, assuming ``items[:i]`` is sorted."""
    if not 0 <= i < len(items):
        raise IndexError(f"index {i} out of range for size {len(items)}")
    j = i
    while j >= 1 and not items[j - 1] <= items[j]:
        items[j - 1], items[j] = items[j], items[j - 1]
        j -= 1


def insertion_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place by repeated insertion."""
    for i in range(1, len(items)):
        insert(items, i)


def merge(left: Sequence[Any], right: Sequence[Any]) -> List[Any]:
    """Merge two sorted sequences into a new sorted list (stable)."""
    merged: List[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def _merge_sorted(items: Sequence[Any]) -> List[Any]:
    if len(items) <= 1:
        return list(items)
    middle = len(items) // 2
    return merge(_merge_sorted(items[:middle]), _merge_sorted(items[middle:]))


def merge_sort(items: MutableSequence[Any]) -> None:
    """Sort ``items`` in place by merge sort."""
    items[:] = _merge_sorted(list(items))


def counting_sort(items: MutableSequence[int], k: int) -> None:
    """Sort integers drawn from ``range(k)`` in place by counting."""
    counts = [0] * k
    for value in items:
        if not 0 <= value < k:
            raise ValueError(f"value {value} outside range [0, {k})")
        counts[value] += 1
    position = 0
    for value, count in enumerate(counts):
        items[position:position + count] = [value] * count
        position += count
"""Binary heaps on lists, heap sort and priority queues."""

from __future__ import annotations

import operator
from typing import Any, Callable, List

from algokit.complete_tree import CompleteTree

__all__ = [
    "heap_sift_up",
    "heap_sift_down",
    "build_heap",
    "heap_sort",
    "priority_enqueue",
    "priority_dequeue",
]

Compare = Callable[[Any, Any], bool]


def heap_sift_up(tree: CompleteTree, compare: Compare = operator.gt) -> None:
    """Move the value at ``tree`` up while it beats its parent's."""
    parent = tree.parent
    while parent:
        if compare(tree.value, parent.value):
            tree.value, parent.value = parent.value, tree.value
        tree = parent
        parent = tree.parent


def heap_sift_down(tree: CompleteTree, compare: Compare = operator.gt) -> None:
    """Move the value at ``tree`` down while one of its children beats it."""
    while True:
        child = tree.left
        other = tree.right
        if not child or (other and compare(other.value, child.value)):
            child = other
        if not child:
            return
        if compare(child.value, tree.value):
            child.value, tree.value = tree.value, child.value
        tree = child


def build_heap(storage: List[Any], compare: Compare = operator.gt) -> None:
    """Rearrange ``storage`` into a heap ordered by ``compare``."""
    size = len(storage)
    for index in range(size // 2 - 1, -1, -1):
        heap_sift_down(CompleteTree(storage, index, size), compare)


def heap_sort(storage: List[Any], compare: Compare = operator.gt) -> None:
    """Sort ``storage`` in place; the default comparison sorts ascending."""
    build_heap(storage, compare)
    for back in range(len(storage) - 1, 0, -1):
        storage[0], storage[back] = storage[back], storage[0]
        heap_sift_down(CompleteTree(storage, 0, back), compare)


def priority_enqueue(storage: List[Any], value: Any, compare: Compare = operator.gt) -> None:
    """Add ``value`` to the heap held in ``storage``."""
    storage.append(value)
    heap_sift_up(CompleteTree(storage, len(storage) - 1), compare)


def priority_dequeue(storage: List[Any], compare: Compare = operator.gt) -> Any:
    """Remove and return the top of the heap held in ``storage``."""
    if not storage:
        raise IndexError("dequeue from empty priority queue")
    storage[0], storage[-1] = storage[-1], storage[0]
    top = storage.pop()
    heap_sift_down(CompleteTree(storage), compare)
    return top
"""Singly linked list with a sentinel head node."""

from __future__ import annotations

from typing import Any, Callable, Iterator, List, Optional

__all__ = ["Node"]


class Node:
    """A list node; a node used as a list head acts as a sentinel."""

    __slots__ = ("value", "next")

    def __init__(self, value: Any = None, next: Optional["Node"] = None) -> None:
        self.value = value
        self.next = next

    def __repr__(self) -> str:
        return f"Node({self.value!r})"

    def insert_after(self, value: Any) -> "Node":
        """Insert a new node holding ``value`` right after this one and return it."""
        self.next = Node(value, self.next)
        return self.next

    def find_predecessor(self, predicate: Callable[[Any], bool]) -> Optional["Node"]:
        """Return the node preceding the first following node whose value matches."""
        node: Optional[Node] = self
        while node is not None and node.next is not None:
            if predicate(node.next.value):
                return node
            node = node.next
        return None

    def to_list(self) -> List[Any]:
        """Return the values of the nodes after this one."""
        return list(self)

    def __iter__(self) -> Iterator[Any]:
        """Iterate over the values of the nodes after this one."""
        node = self.next
        while node is not None:
            yield node.value
            node = node.next
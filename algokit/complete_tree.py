"""A complete binary tree laid out in a list."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional

__all__ = ["CompleteTree"]


@dataclass
class CompleteTree:
    """View of the subtree rooted at index ``root`` of ``storage``.

    Only the first ``size`` elements of ``storage`` belong to the tree; a view
    whose root lies outside them is an empty tree and is falsy.
    """

    storage: List[Any]
    root: int = 0
    size: Optional[int] = None

    def __post_init__(self) -> None:
        if self.size is None:
            self.size = len(self.storage)

    @property
    def value(self) -> Any:
        """The value stored at the root of this subtree."""
        if not self:
            raise IndexError("empty subtree has no value")
        return self.storage[self.root]

    @value.setter
    def value(self, new_value: Any) -> None:
        if not self:
            raise IndexError("empty subtree has no value")
        self.storage[self.root] = new_value

    def subtree(self, root: int) -> "CompleteTree":
        """Return the subtree rooted at index ``root`` of the same storage."""
        return CompleteTree(self.storage, root, self.size)

    @property
    def parent(self) -> "CompleteTree":
        """The parent subtree; empty for the root."""
        if self.root == 0:
            return self.subtree(-1)
        return self.subtree((self.root - 1) // 2)

    @property
    def left(self) -> "CompleteTree":
        return self.subtree(2 * self.root + 1)

    @property
    def right(self) -> "CompleteTree":
        return self.subtree(2 * self.root + 2)

    def __bool__(self) -> bool:
        assert self.size is not None
        return 0 <= self.root < self.size
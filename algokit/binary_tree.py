"""Linked binary trees and binary search trees."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

__all__ = ["BinaryTree", "bst_search", "bst_insert"]


@dataclass
class BinaryTree:
    """A binary tree node; an empty tree is represented by ``None``."""

    value: Any
    left: Optional["BinaryTree"] = None
    right: Optional["BinaryTree"] = None


def bst_search(tree: Optional[BinaryTree], value: Any) -> Optional[BinaryTree]:
    """Return the node holding ``value``, or else the largest one below it.

    Returns ``None`` when every value in the tree exceeds ``value``.
    """
    best: Optional[BinaryTree] = None
    node = tree
    while node is not None:
        if value == node.value:
            return node
        if value < node.value:
            node = node.left
        else:
            best = node
            node = node.right
    return best


def bst_insert(tree: Optional[BinaryTree], value: Any) -> BinaryTree:
    """Insert ``value`` into a binary search tree and return its root.

    Values equal to a node's value go to its left subtree.
    """
    new_node = BinaryTree(value)
    if tree is None:
        return new_node
    node = tree
    while True:
        if value <= node.value:
            if node.left is None:
                node.left = new_node
                return tree
            node = node.left
        else:
            if node.right is None:
                node.right = new_node
                return tree
            node = node.right
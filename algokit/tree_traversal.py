"""Height and traversals of binary trees.

A tree is any object with ``value``, ``left`` and ``right`` attributes whose
empty subtrees are falsy.
"""

from __future__ import annotations

from collections import deque
from typing import Any, Callable

__all__ = ["height", "df_traversal", "bf_traversal"]


def height(tree: Any) -> int:
    """Return the height of ``tree``; an empty tree has height -1."""
    if not tree:
        return -1
    return 1 + max(height(tree.left), height(tree.right))


def df_traversal(tree: Any, action: Callable[[Any], Any]) -> None:
    """Call ``action`` on every non-empty subtree, depth first and in order."""
    if not tree:
        return
    df_traversal(tree.left, action)
    action(tree)
    df_traversal(tree.right, action)


def bf_traversal(tree: Any, action: Callable[[Any], Any]) -> None:
    """Call ``action`` on every non-empty subtree, level by level."""
    queue = deque([tree])
    while queue:
        current = queue.popleft()
        if current:
            action(current)
            queue.append(current.left)
            queue.append(current.right)
"""Text rendering of binary trees."""

from __future__ import annotations

from typing import Any, List

from algokit.formatting import format_value

__all__ = ["render_binary_tree", "print_binary_tree"]


def render_binary_tree(tree: Any) -> List[str]:
    """Render ``tree`` as lines of equal width.

    Each node's value is followed by an arrow reaching over its left subtree
    to the column where its right subtree starts; the left subtree is drawn
    directly beneath the value.
    """
    if not tree:
        return []
    text = format_value(tree.value)

    left_lines = render_binary_tree(tree.left)
    right_lines = render_binary_tree(tree.right)

    left_width = len(left_lines[0]) if left_lines else 0
    right_width = len(right_lines[0]) if right_lines else 0

    rows = max(len(left_lines), len(right_lines))
    left_lines += [" " * left_width] * (rows - len(left_lines))
    right_lines += [" " * right_width] * (rows - len(right_lines))

    padded_width = max(len(text) + 2, left_width)
    pad = " " * (padded_width - left_width)
    fill = "-" if right_width else " "
    text += " " + fill * (padded_width - len(text) - 1)
    if right_width:
        text += "v" + " " * (right_width - 1)

    return [text] + [left + pad + right for left, right in zip(left_lines, right_lines)]


def print_binary_tree(tree: Any) -> None:
    """Print the rendering of ``tree``."""
    for line in render_binary_tree(tree):
        print(line)
"""Text drawing of a binary tree, one row of boxes per level."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from .measures import height
from .node import Node


def render(tree: Optional[Node]) -> str:
    """Return the tree drawn as text, each line ending in a newline."""
    if tree is None:
        return ""
    rows: list[list[str]] = [[] for _ in range(height(tree) + 1)]

    def put(depth: int, col: int, char: str) -> None:
        if col < 0:
            return
        row = rows[depth]
        if col >= len(row):
            row.extend(" " * (col + 1 - len(row)))
        row[col] = char

    def layout(node: Optional[Node], offset: int, depth: int) -> int:
        if node is None:
            return 0
        is_left = node.parent is not None and node.parent.left is node
        box = f"({node.value:03d})"
        width = len(box)
        left = layout(node.left, offset, depth + 1)
        right = layout(node.right, offset + left + width, depth + 1)
        for i, char in enumerate(box):
            put(depth, offset + left + i, char)
        if depth:
            if is_left:
                start, count = offset + left + width // 2, width + right
            else:
                start, count = offset - width // 2, left + width
            for col in range(start, start + count):
                put(depth - 1, col, "-")
            put(depth - 1, offset + left + width // 2, ".")
        return left + width + right

    layout(tree, 0, 0)
    lines = []
    for row in rows:
        line = "".join(row).ljust(2)
        lines.append(line[:2] + line[2:].rstrip(" "))
    return "".join(f"{line}\n" for line in lines)


def print_tree(tree: Optional[Node], file: Optional[TextIO] = None) -> None:
    """Write the drawing of the tree to a file, standard output by default."""
    if file is None:
        file = sys.stdout
    file.write(render(tree))
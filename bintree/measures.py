"""Measurements and shape checks for binary trees."""

from __future__ import annotations

from typing import Iterator, Optional

from .node import Node


def _nodes(tree: Optional[Node]) -> Iterator[Node]:
    stack = [tree] if tree is not None else []
    while stack:
        node = stack.pop()
        yield node
        stack.extend(child for child in (node.left, node.right) if child is not None)


def _levels(tree: Optional[Node]) -> int:
    """Number of levels in the tree; 0 for an empty tree."""
    levels = 0
    level = [tree] if tree is not None else []
    while level:
        levels += 1
        level = [c for n in level for c in (n.left, n.right) if c is not None]
    return levels


def height(tree: Optional[Node]) -> int:
    """Return the number of edges on the longest downward path; 0 if empty."""
    return max(_levels(tree) - 1, 0)


def size(tree: Optional[Node]) -> int:
    """Return the number of nodes in the tree."""
    return sum(1 for _ in _nodes(tree))


def leaves(tree: Optional[Node]) -> int:
    """Return the number of nodes without children."""
    return sum(1 for node in _nodes(tree) if node.is_leaf())


def internal_nodes(tree: Optional[Node]) -> int:
    """Return the number of nodes with at least one child."""
    return sum(1 for node in _nodes(tree) if not node.is_leaf())


def balance(tree: Optional[Node]) -> int:
    """Return the left subtree's level count minus the right one's; 0 if empty."""
    if tree is None:
        return 0
    return _levels(tree.left) - _levels(tree.right)


def is_full(tree: Optional[Node]) -> bool:
    """Return True if every node has either zero or two children."""
    if tree is None:
        return False
    return all((node.left is None) == (node.right is None) for node in _nodes(tree))


def is_perfect(tree: Optional[Node]) -> bool:
    """Return True if every level of the tree is completely filled."""
    if tree is None:
        return False
    return size(tree) == (1 << (height(tree) + 1)) - 1
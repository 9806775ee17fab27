"""Worked examples that build small trees and print what the package reports."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Optional, Sequence, TextIO

from .measures import balance, height, internal_nodes, is_full, is_perfect, leaves, size
from .node import Node
from .render import print_tree
from .traversal import inorder, postorder, preorder


def _child(parent: Node, value: int, side: str) -> Node:
    node = Node(value, parent)
    setattr(parent, side, node)
    return node


def _three_nodes() -> Node:
    root = Node(98)
    _child(root, 12, "left")
    _child(root, 402, "right")
    return root


def _five_nodes() -> Node:
    root = _three_nodes()
    root.left.insert_right(54)
    root.insert_right(128)
    return root


def _seven_nodes(left_right: int) -> Node:
    root = _three_nodes()
    _child(root.left, 6, "left")
    _child(root.left, left_right, "right")
    _child(root.right, 256, "left")
    _child(root.right, 512, "right")
    return root


def _family() -> Node:
    root = Node(98)
    left = _child(root, 12, "left")
    right = _child(root, 128, "right")
    _child(left, 54, "right")
    far = _child(right, 402, "right")
    _child(left, 10, "left")
    _child(right, 110, "left")
    _child(far, 200, "left")
    _child(far, 512, "right")
    return root


def _pointer(node: Optional[Node]) -> str:
    return "(nil)" if node is None else str(node.value)


def _example_node(out: TextIO) -> None:
    print_tree(_seven_nodes(16), out)


def _example_insert_left(out: TextIO) -> None:
    root = _three_nodes()
    print_tree(root, out)
    print(file=out)
    root.right.insert_left(128)
    root.insert_left(54)
    print_tree(root, out)


def _example_insert_right(out: TextIO) -> None:
    root = _three_nodes()
    print_tree(root, out)
    print(file=out)
    root.left.insert_right(54)
    root.insert_right(128)
    print_tree(root, out)


def _example_delete(out: TextIO) -> None:
    root = _five_nodes()
    print_tree(root, out)
    root.delete()


def _example_is_leaf(out: TextIO) -> None:
    root = _five_nodes()
    print_tree(root, out)
    for node in (root, root.right, root.right.right):
        print(f"Is {node.value} a leaf: {int(node.is_leaf())}", file=out)


def _example_is_root(out: TextIO) -> None:
    root = _five_nodes()
    print_tree(root, out)
    for node in (root, root.right, root.right.right):
        print(f"Is {node.value} a root: {int(node.is_root())}", file=out)


def _traversal_example(walk: Callable[[Optional[Node]], object]) -> Callable[[TextIO], None]:
    def example(out: TextIO) -> None:
        root = _seven_nodes(56)
        print_tree(root, out)
        for value in walk(root):
            print(value, file=out)

    return example


def _measure_example(label: str, measure: Callable[[Optional[Node]], int]) -> Callable[[TextIO], None]:
    def example(out: TextIO) -> None:
        root = _five_nodes()
        print_tree(root, out)
        for node in (root, root.right, root.left.right):
            print(f"{label} {node.value}: {measure(node)}", file=out)

    return example


def _example_balance(out: TextIO) -> None:
    root = _five_nodes()
    root.insert_left(45)
    root.left.insert_right(50)
    root.left.left.insert_left(10)
    root.left.left.left.insert_left(8)
    print_tree(root, out)
    for node in (root, root.right, root.left.left.right):
        print(f"Balance of {node.value}: {balance(node):+d}", file=out)


def _example_is_full(out: TextIO) -> None:
    root = _five_nodes()
    _child(root.left, 10, "left")
    print_tree(root, out)
    for node in (root, root.left, root.right):
        print(f"Is {node.value} full: {int(is_full(node))}", file=out)


def _example_is_perfect(out: TextIO) -> None:
    root = _five_nodes()
    _child(root.left, 10, "left")
    _child(root.right, 10, "left")
    print_tree(root, out)
    print(f"Perfect: {int(is_perfect(root))}\n", file=out)
    _child(root.right.right, 10, "left")
    print_tree(root, out)
    print(f"Perfect: {int(is_perfect(root))}\n", file=out)
    _child(root.right.right, 10, "right")
    print_tree(root, out)
    print(f"Perfect: {int(is_perfect(root))}", file=out)


def _example_sibling(out: TextIO) -> None:
    root = _family()
    print_tree(root, out)
    for node in (root.left, root.right.left, root.left.right, root):
        print(f"Sibling of {node.value}: {_pointer(node.sibling())}", file=out)


def _example_uncle(out: TextIO) -> None:
    root = _family()
    print_tree(root, out)
    for node in (root.right.left, root.left.right, root.left):
        print(f"Uncle of {node.value}: {_pointer(node.uncle())}", file=out)


_EXAMPLES: dict[int, Callable[[TextIO], None]] = {
    0: _example_node,
    1: _example_insert_left,
    2: _example_insert_right,
    3: _example_delete,
    4: _example_is_leaf,
    5: _example_is_root,
    6: _traversal_example(preorder),
    7: _traversal_example(inorder),
    8: _traversal_example(postorder),
    9: _measure_example("Height from", height),
    10: _measure_example("Depth of", lambda node: node.depth()),
    11: _measure_example("Size of", size),
    12: _measure_example("Leaves in", leaves),
    13: _measure_example("Nodes in", internal_nodes),
    14: _example_balance,
    15: _example_is_full,
    16: _example_is_perfect,
    17: _example_sibling,
    18: _example_uncle,
}


def run_example(number: int, out: Optional[TextIO] = None) -> None:
    """Run the numbered example, writing its output to a file (stdout by default)."""
    try:
        example = _EXAMPLES[number]
    except KeyError:
        raise ValueError(f"no example numbered {number}") from None
    example(sys.stdout if out is None else out)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the examples named on the command line, or all of them."""
    parser = argparse.ArgumentParser(
        prog="bintree-demo", description="Run the binary tree examples."
    )
    parser.add_argument(
        "numbers",
        type=int,
        nargs="*",
        choices=sorted(_EXAMPLES),
        metavar="N",
        help="example numbers to run (default: all)",
    )
    args = parser.parse_args(argv)
    numbers = args.numbers or sorted(_EXAMPLES)
    for index, number in enumerate(numbers):
        if index:
            print()
        run_example(number, sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
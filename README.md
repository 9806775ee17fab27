# bintree

A small library for building and inspecting binary trees of integers.

## Building a tree

```python
from bintree.node import Node

root = Node(98)
root.insert_left(12)
root.insert_right(402)
root.left.insert_right(54)
root.insert_right(128)   # the old right child (402) moves down under 128
```

`insert_left` and `insert_right` create a new node, put it in place of the
current child on that side, and return it. If a child was already there, it
becomes the same-side child of the new node.

`Node(value, parent)` only records the parent on the new node; it does not
attach the node to the parent. Use the insert methods, or set `parent.left` /
`parent.right` yourself.

Each node has the attributes `value`, `parent`, `left` and `right`, and these
methods:

- `is_leaf()`: `True` if the node has no children.
- `is_root()`: `True` if the node has no parent.
- `depth()`: the number of edges up to the root.
- `sibling()`: the other child of the parent, or `None`.
- `uncle()`: the parent's sibling, or `None`.
- `delete()`: detaches the subtree from its parent and unlinks every node in it.

## Traversals

```python
from bintree.traversal import preorder, inorder, postorder

list(preorder(root))
list(inorder(root))
list(postorder(root))
```

Each traversal is a generator that yields the node values in its order. An
empty tree (`None`) yields nothing.

## Measures

```python
from bintree.measures import (
    height, size, leaves, internal_nodes, balance, is_full, is_perfect,
)
```

- `height`: the number of edges on the longest downward path. A single node
  and an empty tree both have height 0.
- `size`: the number of nodes.
- `leaves`: the number of nodes with no children.
- `internal_nodes`: the number of nodes with at least one child.
- `balance`: the number of levels in the left subtree minus the number of
  levels in the right subtree (an empty subtree has 0 levels).
- `is_full`: `True` if every node has either zero or two children.
- `is_perfect`: `True` if the node count is `2 ** (height + 1) - 1`, that is,
  every level is completely filled.

Each of these accepts `None` as an empty tree: the counts and `balance` give 0,
and `is_full` and `is_perfect` give `False`.

## Drawing

```python
from bintree.render import render, print_tree

text = render(root)   # every line ends in a newline
print_tree(root)      # writes the same text to standard output
```

`print_tree(tree, file)` writes to any text file object instead. Each node is
drawn as its value zero-padded to at least three digits in parentheses, such
as `(098)`. Dots and dashes join every node to its children, one row per level.
An empty tree renders as an empty string.

## Examples

The package comes with numbered examples, 0 to 18, that build sample trees and
print the drawing and the results of the operations above. Run some by number,
or all of them with no arguments:

```
bintree-demo 14
bintree-demo
```

When several examples run, a blank line separates them. From Python, use
`bintree.demo.run_example(number, out)`, which writes to `out` (standard output
by default) and raises `ValueError` for an unknown number.

## What it does not do

The trees are plain structures: values are never compared, so there is no
ordered (search tree) insertion, lookup or rebalancing.
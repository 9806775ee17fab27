import pytest

from bintree.node import Node


def build_basic():
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(402, root)
    return root


@pytest.fixture
def family():
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(128, root)
    root.left.right = Node(54, root.left)
    root.right.right = Node(402, root.right)
    root.left.left = Node(10, root.left)
    root.right.left = Node(110, root.right)
    root.right.right.left = Node(200, root.right.right)
    root.right.right.right = Node(512, root.right.right)
    return root


def test_new_node_fields():
    node = Node(98)
    assert node.value == 98
    assert node.parent is None
    assert node.left is None and node.right is None


def test_node_with_parent_keeps_link():
    root = Node(98)
    child = Node(12, root)
    assert child.parent is root
    assert root.left is None


def test_insert_left_pushes_existing_child_down():
    root = build_basic()
    old_left = root.left
    created = root.insert_left(54)
    assert root.left is created
    assert created.value == 54
    assert created.parent is root
    assert created.left is old_left
    assert old_left.parent is created
    assert created.right is None


def test_insert_left_on_empty_side():
    root = build_basic()
    created = root.right.insert_left(128)
    assert root.right.left is created
    assert created.parent is root.right
    assert created.is_leaf()


def test_insert_right_pushes_existing_child_down():
    root = build_basic()
    old_right = root.right
    created = root.insert_right(128)
    assert root.right is created
    assert created.right is old_right
    assert old_right.parent is created
    assert created.left is None


def test_insert_right_on_empty_side():
    root = build_basic()
    created = root.left.insert_right(54)
    assert root.left.right is created
    assert created.parent is root.left


def test_delete_subtree_detaches_from_parent():
    root = build_basic()
    left = root.left
    grandchild = left.insert_right(54)
    left.delete()
    assert root.left is None
    assert root.right is not None and root.right.value == 402
    assert left.parent is None and left.right is None
    assert grandchild.parent is None


def test_delete_whole_tree_unlinks_all():
    root = build_basic()
    left, right = root.left, root.right
    root.delete()
    assert root.left is None and root.right is None
    assert left.parent is None and right.parent is None


def test_is_leaf():
    root = build_basic()
    root.left.insert_right(54)
    root.insert_right(128)
    assert root.is_leaf() is False
    assert root.right.is_leaf() is False
    assert root.right.right.is_leaf() is True


def test_is_root():
    root = build_basic()
    root.insert_right(128)
    assert root.is_root() is True
    assert root.right.is_root() is False
    assert root.right.right.is_root() is False


def test_depth_counts_edges_to_root():
    root = build_basic()
    deep = root.left.insert_right(54)
    root.insert_right(128)
    assert root.depth() == 0
    assert root.right.depth() == root.depth() + 1
    assert deep.depth() == root.left.depth() + 1


def test_sibling(family):
    root = family
    assert root.left.sibling() is root.right
    assert root.right.left.sibling() is root.right.right
    assert root.left.right.sibling() is root.left.left
    assert root.sibling() is None


def test_sibling_of_only_child_is_none():
    root = Node(1)
    child = root.insert_left(2)
    assert child.sibling() is None


def test_uncle(family):
    root = family
    assert root.right.left.uncle() is root.left
    assert root.left.right.uncle() is root.right
    assert root.left.uncle() is None
    assert root.uncle() is None
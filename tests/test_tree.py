"""Tests for the tree built on the list and stack primitives."""

import pytest

from linkstructs import SENTINEL, value_compare
from linkstructs.errors import InvalidArgumentError, InvariantViolationError
from linkstructs.tree import (
    TreeNode,
    append_child,
    decrease_size,
    increase_size,
    insert_child,
    is_child,
    is_first_child,
    is_last_child,
    is_leaf,
    is_only_child,
    is_root,
    remove_child,
    tree_create,
    tree_depth,
    tree_iterator,
    tree_query,
)


def node(key: int, value: str = "") -> TreeNode:
    return tree_create(key=key, value=value)


def sizes_match_subtrees(root: TreeNode) -> bool:
    return all(n.size == sum(1 for _ in tree_iterator(n)) for n in tree_iterator(root))


def test_tree_create() -> None:
    """Test creating a detached tree node."""
    n = tree_create(key=1, value="a")

    assert n.key == 1
    assert n.value == "a"
    assert n.parent is SENTINEL
    assert n.next is SENTINEL
    assert n.previous is SENTINEL
    assert n.children.count == 0
    assert n.size == 1
    assert is_root(n)
    assert is_leaf(n)


def test_tree_create_link_fields_win() -> None:
    """Test that props cannot override the structural fields."""
    n = tree_create(size=10, parent="bogus")
    assert n.size == 1
    assert n.parent is SENTINEL


def test_size_propagation_chain() -> None:
    """Test sizes along a root, child, grandchild chain."""
    root, a, g = node(1), node(2), node(3)

    append_child(a, root)
    assert root.size == 2

    append_child(g, a)
    assert root.size == 3
    assert a.size == 2
    assert g.size == 1


def test_size_propagation_leaves_siblings_alone() -> None:
    """Test that inserting under one branch does not touch another."""
    root, left, right, leaf = node(1), node(2), node(3), node(4)
    append_child(left, root)
    append_child(right, root)

    append_child(leaf, left)

    assert root.size == 4
    assert left.size == 2
    assert right.size == 1
    assert sizes_match_subtrees(root)


def test_insert_subtree_adds_its_size() -> None:
    """Test that attaching a whole subtree adds its full size to ancestors."""
    root, a = node(1), node(2)
    append_child(a, root)

    sub, s1, s2 = node(10), node(11), node(12)
    append_child(s1, sub)
    append_child(s2, s1)
    assert sub.size == 3

    insert_child(sub, a)

    assert a.size == 4
    assert root.size == 5
    assert sizes_match_subtrees(root)


def test_insert_and_append_child_order() -> None:
    """Test children ordering for insert versus append."""
    parent, n1, n2, n3 = node(0), node(1), node(2), node(3)

    append_child(n1, parent)
    append_child(n2, parent)
    insert_child(n3, parent)

    assert list(parent.children) == [n3, n1, n2]
    assert all(child.parent is parent for child in parent.children)


def test_child_position_predicates() -> None:
    """Test first, last and only child predicates."""
    parent, n1, n2, n3 = node(0), node(1), node(2), node(3)
    append_child(n1, parent)

    assert is_only_child(n1, parent)

    append_child(n2, parent)
    append_child(n3, parent)

    assert is_first_child(n1, parent)
    assert not is_first_child(n2, parent)
    assert is_last_child(n3, parent)
    assert not is_last_child(n2, parent)
    assert not is_only_child(n1, parent)


def test_is_child() -> None:
    """Test the parent relation predicate."""
    parent, child, other = node(0), node(1), node(2)
    append_child(child, parent)

    assert is_child(child, parent)
    assert not is_child(child, other)
    assert not is_child(parent, child)


def test_is_child_with_value_compare() -> None:
    """Test that a comparator override applies per call."""
    parent, child = node(0), node(1)
    append_child(child, parent)

    def key_compare(a: TreeNode, b: TreeNode) -> int:
        return value_compare(a.key, b.key)

    assert is_child(child, node(0), key_compare)
    assert not is_child(child, node(0))


def test_root_and_leaf() -> None:
    """Test root and leaf predicates."""
    root, child = node(0), node(1)
    append_child(child, root)

    assert is_root(root)
    assert not is_root(child)
    assert not is_leaf(root)
    assert is_leaf(child)


def test_depth() -> None:
    """Test depth through the parent walk."""
    root, a, b, c = node(0), node(1), node(2), node(3)
    append_child(a, root)
    append_child(b, a)
    append_child(c, b)

    assert tree_depth(root) == 0
    assert tree_depth(a) == 1
    assert tree_depth(c) == 3


def test_increase_size_requires_positive_delta() -> None:
    """Test that non-positive deltas are rejected."""
    n = node(1)
    with pytest.raises(InvalidArgumentError):
        increase_size(n, 0)
    with pytest.raises(InvalidArgumentError):
        increase_size(n, -1)
    with pytest.raises(InvalidArgumentError):
        decrease_size(n, 0)
    with pytest.raises(ValueError):
        decrease_size(n, -3)
    assert n.size == 1


def test_increase_and_decrease_size() -> None:
    """Test explicit size adjustments along the ancestor chain."""
    root, a, b = node(0), node(1), node(2)
    append_child(a, root)
    append_child(b, a)

    increase_size(a, 5)
    assert (root.size, a.size, b.size) == (8, 7, 1)

    decrease_size(a, 5)
    assert (root.size, a.size, b.size) == (3, 2, 1)


def test_list_removal_leaves_sizes_stale() -> None:
    """Test that unlinking through the children list does not adjust sizes."""
    root, a, b = node(0), node(1), node(2)
    append_child(a, root)
    append_child(b, a)

    a.children.remove(b)
    assert a.size == 2
    assert root.size == 3

    decrease_size(a, b.size)
    assert a.size == 1
    assert root.size == 2


def test_remove_child_updates_sizes() -> None:
    """Test that remove_child detaches the subtree and shrinks ancestors."""
    root, a, b, c = node(0), node(1), node(2), node(3)
    append_child(a, root)
    append_child(b, a)
    append_child(c, b)

    remove_child(b, a)

    assert is_root(b)
    assert b.size == 2
    assert a.size == 1
    assert root.size == 2
    assert list(tree_iterator(root)) == [root, a]
    assert sizes_match_subtrees(root)

    append_child(b, root)
    assert root.size == 4


def test_remove_child_rejects_non_child() -> None:
    """Test that removing a node from the wrong parent fails."""
    root, a, b = node(0), node(1), node(2)
    append_child(a, root)
    append_child(b, a)

    with pytest.raises(InvariantViolationError):
        remove_child(b, root)
    assert root.size == 3


def test_insert_child_rejects_attached_node() -> None:
    """Test that a node with a parent cannot be inserted elsewhere."""
    root, a, other = node(0), node(1), node(2)
    append_child(a, root)

    with pytest.raises(InvariantViolationError):
        append_child(a, other)
    assert other.size == 1
    assert root.size == 2


def test_insert_child_rejects_cycle() -> None:
    """Test that a node cannot be inserted under itself or a descendant."""
    root, a = node(0), node(1)
    append_child(a, root)

    with pytest.raises(InvariantViolationError):
        append_child(root, a)
    with pytest.raises(InvariantViolationError):
        insert_child(root, root)
    assert root.size == 2


def test_iterator_pre_order() -> None:
    """Test depth-first pre-order traversal."""
    root = node(0)
    a, b = node(1), node(2)
    a1, a2, b1 = node(11), node(12), node(21)
    append_child(a, root)
    append_child(b, root)
    append_child(a1, a)
    append_child(a2, a)
    append_child(b1, b)

    assert list(tree_iterator(root)) == [root, a, a1, a2, b, b1]
    assert list(tree_iterator(a)) == [a, a1, a2]


def test_iterator_completeness() -> None:
    """Test that pre-order yields each node once with parents first."""
    root = node(0)
    nodes = [root]
    for i in range(1, 40):
        child = node(i)
        append_child(child, nodes[(i - 1) // 3])
        nodes.append(child)

    visited = list(tree_iterator(root))

    assert len(visited) == root.size == 40
    assert len({id(n) for n in visited}) == 40
    position = {id(n): i for i, n in enumerate(visited)}
    for n in visited:
        if not is_root(n):
            assert position[id(n.parent)] < position[id(n)]


def test_iterator_deep_tree() -> None:
    """Test that a very deep tree iterates without hitting the recursion limit."""
    root = node(0)
    current = root
    for i in range(1, 2000):
        child = node(i)
        append_child(child, current)
        current = child

    assert sum(1 for _ in tree_iterator(root)) == 2000
    assert tree_depth(current) == 1999


def test_query() -> None:
    """Test multi-predicate subtree query."""
    root = node(0, "root")
    n1, n2, n3, n4 = node(1, "a"), node(2, "b"), node(3, "c"), node(4, "d")
    append_child(n1, root)
    append_child(n2, root)
    append_child(n3, n1)
    append_child(n4, n1)

    assert tree_query(root, lambda n: n.key in (1, 3)) == {n1, n3}
    assert tree_query(root, lambda n: n.key == 1, lambda n: n.value in ("a", "b")) == {n1}
    assert tree_query(root, lambda n: n.key == 1, lambda n: n.value == "b") == set()
    assert tree_query(n1, is_leaf) == {n3, n4}

"""
Tree built from a LinkedList of children and the stack's parent walk.

Every node keeps ``size``, the number of nodes in the subtree it roots.
Inserting or appending a child adds the child's size to the parent and all
of its ancestors. Unlinking a child straight from ``parent.children`` does
not touch any size; use remove_child, or call decrease_size yourself.
"""

import logging
from collections.abc import Iterator
from typing import Any, TypeVar

from linkstructs.compare import identity_compare
from linkstructs.errors import InvalidArgumentError, InvariantViolationError
from linkstructs.linkedlist import LinkedList
from linkstructs.sentinel import SENTINEL
from linkstructs.stack import depth, iterate_from
from linkstructs.types import CompareFn, Predicate, Treeable

T = TypeVar("T", bound=Treeable)

logger = logging.getLogger(__name__)


class TreeNode:
    """A tree node carrying arbitrary caller fields next to its links."""

    def __init__(self, **fields: Any) -> None:
        self.__dict__.update(fields)
        self.parent: Any = SENTINEL
        self.next: Any = SENTINEL
        self.previous: Any = SENTINEL
        self.children: LinkedList[Any] = LinkedList()
        self.size = 1

    def __repr__(self) -> str:
        fields = ", ".join(
            f"{name}={value!r}"
            for name, value in vars(self).items()
            if name not in ("parent", "next", "previous", "children", "size")
        )
        return f"{type(self).__name__}({fields}, size={self.size})"


def tree_create(**props: Any) -> TreeNode:
    """Create a detached root node holding ``props``. Link fields always win over props."""
    return TreeNode(**props)


def _check_insertable(child: Treeable, parent: Treeable) -> None:
    if child.parent is not SENTINEL:
        logger.warning("Refusing to insert %r: node already has a parent", child)
        raise InvariantViolationError(f"Node {child!r} already has a parent")
    if any(ancestor is child for ancestor in iterate_from(parent)):
        logger.warning("Refusing to insert %r under its own descendant %r", child, parent)
        raise InvariantViolationError(f"Inserting {child!r} under {parent!r} would create a cycle")


def insert_child(child: T, parent: T) -> None:
    """Link child as the first child of parent and grow every ancestor's size."""
    _check_insertable(child, parent)
    parent.children.insert(child)
    child.parent = parent
    logger.debug("Inserted %r as first child of %r", child, parent)
    increase_size(parent, child.size)


def append_child(child: T, parent: T) -> None:
    """Link child as the last child of parent and grow every ancestor's size."""
    _check_insertable(child, parent)
    parent.children.append(child)
    child.parent = parent
    logger.debug("Appended %r as last child of %r", child, parent)
    increase_size(parent, child.size)


def remove_child(child: T, parent: T) -> None:
    """Unlink child from parent, making it a root, and shrink every ancestor's size."""
    if child.parent is not parent:
        logger.warning("Refusing to remove %r: not a child of %r", child, parent)
        raise InvariantViolationError(f"Node {child!r} is not a child of {parent!r}")
    parent.children.remove(child)
    child.parent = SENTINEL
    logger.debug("Removed %r from %r", child, parent)
    decrease_size(parent, child.size)


def increase_size(node: Treeable, delta: int) -> None:
    """Add delta to the size of node and each of its ancestors. O(depth)."""
    if delta <= 0:
        raise InvalidArgumentError(f"size delta must be greater than 0, got {delta}")
    for ancestor in iterate_from(node):
        ancestor.size += delta


def decrease_size(node: Treeable, delta: int) -> None:
    """Subtract delta from the size of node and each of its ancestors. O(depth)."""
    if delta <= 0:
        raise InvalidArgumentError(f"size delta must be greater than 0, got {delta}")
    for ancestor in iterate_from(node):
        ancestor.size -= delta


def tree_depth(node: Treeable) -> int:
    return depth(node)


def is_root(node: Treeable) -> bool:
    return node.parent is SENTINEL


def is_leaf(node: Treeable) -> bool:
    return node.children.count == 0


def is_child(node: T, parent: T, compare: CompareFn = identity_compare) -> bool:
    return node.parent is not SENTINEL and compare(node.parent, parent) == 0


def is_first_child(node: T, parent: T, compare: CompareFn = identity_compare) -> bool:
    return parent.children.is_first(node, compare)


def is_last_child(node: T, parent: T, compare: CompareFn = identity_compare) -> bool:
    return parent.children.is_last(node, compare)


def is_only_child(node: T, parent: T, compare: CompareFn = identity_compare) -> bool:
    return parent.children.is_first(node, compare) and parent.children.is_last(node, compare)


def tree_iterator(node: T) -> Iterator[T]:
    """
    Lazily yield the subtree rooted at node in depth-first pre-order.

    A parent is always yielded before its descendants, and children are
    visited in the order of the parent's children list. The walk keeps its
    own stack of child cursors, so depth is not bounded by the recursion
    limit.
    """
    yield node
    pending = [iter(node.children)]
    while pending:
        child = next(pending[-1], SENTINEL)
        if child is SENTINEL:
            pending.pop()
            continue
        yield child
        pending.append(iter(child.children))


def tree_query(node: T, *predicates: Predicate[T]) -> set[T]:
    """Return the set of nodes in the subtree for which every predicate holds.

    As with LinkedList.query, nodes must be hashable by identity.
    """
    return {
        member
        for member in tree_iterator(node)
        if all(predicate(member) for predicate in predicates)
    }

"""Intrusive doubly-linked list with sentinel termination and O(1) splicing."""

import logging
from collections.abc import Iterator
from typing import Any, Generic, TypeVar

from linkstructs.compare import identity_compare
from linkstructs.errors import ConcurrentModificationError, InvariantViolationError
from linkstructs.sentinel import SENTINEL
from linkstructs.types import CompareFn, Listable, Predicate

N = TypeVar("N", bound=Listable)

logger = logging.getLogger(__name__)


class ListNode:
    """A list node carrying arbitrary caller fields next to its two links."""

    def __init__(self, **fields: Any) -> None:
        self.__dict__.update(fields)
        self.previous: Any = SENTINEL
        self.next: Any = SENTINEL

    def __repr__(self) -> str:
        fields = ", ".join(
            f"{name}={value!r}"
            for name, value in vars(self).items()
            if name not in ("previous", "next")
        )
        return f"{type(self).__name__}({fields})"


def list_node_create(**fields: Any) -> ListNode:
    """Create a detached ListNode holding ``fields``."""
    return ListNode(**fields)


def _walk(node: Any, link: str) -> Iterator[Any]:
    # The successor is read before yielding so the caller may unlink the
    # node it was just handed.
    while node is not SENTINEL:
        following = getattr(node, link)
        yield node
        node = following


def iterate_to_next(node: N) -> Iterator[N]:
    """Yield ``node`` and every node after it up to the end of its list."""
    return _walk(node, "next")


def iterate_to_previous(node: N) -> Iterator[N]:
    """Yield ``node`` and every node before it back to the start of its list."""
    return _walk(node, "previous")


class LinkedList(Generic[N]):
    """
    Intrusive doubly-linked list.

    Nodes are threaded through their own ``previous``/``next`` attributes, so
    any object exposing them can be a member without inheriting from
    ListNode. Both ends are terminated by SENTINEL and a node belongs to at
    most one list at a time.

    Iterators are independent generators. Without ``fail_fast``, unlinking
    the node an iterator has just yielded is safe, and any other structural
    change while an iterator is alive gives unspecified ordering. With
    ``fail_fast`` set, every structural change after an iterator is created,
    including unlinking the node it just yielded, makes its next step raise
    ConcurrentModificationError.

    query() collects nodes into a set, so members must be hashable. Keep the
    default identity hash (plain classes, or ``@dataclass(eq=False)``);
    nodes that hash and compare by value would collapse into one entry.
    """

    def __init__(self, *, fail_fast: bool = False) -> None:
        """
        Initialize an empty list.

        Args:
            fail_fast: If True, iterators started from this list raise
                ConcurrentModificationError on their next step after any
                structural change to the list.
        """
        self.first: Any = SENTINEL
        self.last: Any = SENTINEL
        self.count = 0
        self._fail_fast = fail_fast
        self._version = 0

    def _changed(self, delta: int) -> None:
        self.count += delta
        self._version += 1

    def _check_detached(self, node: N) -> None:
        # A lone member of some other list also has sentinel links, which
        # cannot be told apart from a detached node in O(1).
        if node.previous is not SENTINEL or node.next is not SENTINEL or node is self.first:
            logger.warning("Refusing to link %r: node is already linked", node)
            raise InvariantViolationError(f"Node {node!r} is already linked into a list")

    def _check_member(self, node: N) -> None:
        if (node.previous is SENTINEL and node is not self.first) or (
            node.next is SENTINEL and node is not self.last
        ):
            logger.warning("Node %r is not a member of this list", node)
            raise InvariantViolationError(f"Node {node!r} is not a member of this list")

    def insert(self, node: N) -> None:
        """Link node as the new first node. O(1)."""
        self._check_detached(node)
        node.next = self.first
        if self.first is SENTINEL:
            self.last = node
        else:
            self.first.previous = node
        self.first = node
        self._changed(1)

    def append(self, node: N) -> None:
        """Link node as the new last node. O(1)."""
        self._check_detached(node)
        node.previous = self.last
        if self.last is SENTINEL:
            self.first = node
        else:
            self.last.next = node
        self.last = node
        self._changed(1)

    def insert_before(self, node: N, anchor: N) -> None:
        """Splice node directly before anchor, which must be a member. O(1)."""
        self._check_member(anchor)
        self._check_detached(node)
        previous = anchor.previous
        node.previous = previous
        node.next = anchor
        anchor.previous = node
        if previous is SENTINEL:
            self.first = node
        else:
            previous.next = node
        self._changed(1)

    def insert_after(self, node: N, anchor: N) -> None:
        """Splice node directly after anchor, which must be a member. O(1)."""
        self._check_member(anchor)
        self._check_detached(node)
        following = anchor.next
        node.previous = anchor
        node.next = following
        anchor.next = node
        if following is SENTINEL:
            self.last = node
        else:
            following.previous = node
        self._changed(1)

    def remove(self, node: N) -> None:
        """Unlink node from wherever it sits and reset its links. O(1)."""
        self._check_member(node)
        previous = node.previous
        following = node.next
        if previous is SENTINEL:
            self.first = following
        else:
            previous.next = following
        if following is SENTINEL:
            self.last = previous
        else:
            following.previous = previous
        node.previous = SENTINEL
        node.next = SENTINEL
        self._changed(-1)

    def remove_first(self) -> Any:
        """Remove and return the first node, or SENTINEL if the list is empty. O(1)."""
        node = self.first
        if node is not SENTINEL:
            self.remove(node)
        return node

    def remove_last(self) -> Any:
        """Remove and return the last node, or SENTINEL if the list is empty. O(1)."""
        node = self.last
        if node is not SENTINEL:
            self.remove(node)
        return node

    def remove_before(self, anchor: N) -> Any:
        """Remove and return the node before anchor, or SENTINEL if anchor is first. O(1)."""
        self._check_member(anchor)
        node = anchor.previous
        if node is not SENTINEL:
            self.remove(node)
        return node

    def remove_after(self, anchor: N) -> Any:
        """Remove and return the node after anchor, or SENTINEL if anchor is last. O(1)."""
        self._check_member(anchor)
        node = anchor.next
        if node is not SENTINEL:
            self.remove(node)
        return node

    def is_first(self, node: N, compare: CompareFn = identity_compare) -> bool:
        return self.first is not SENTINEL and compare(self.first, node) == 0

    def is_last(self, node: N, compare: CompareFn = identity_compare) -> bool:
        return self.last is not SENTINEL and compare(self.last, node) == 0

    def has(self, node: N) -> bool:
        """Return True if node is linked into this list. O(n)."""
        return any(member is node for member in _walk(self.first, "next"))

    def query(self, *predicates: Predicate[N]) -> set[N]:
        """Return the set of nodes for which every predicate holds. O(n*k).

        Nodes must be hashable, and should hash by identity so that
        distinct nodes with equal values are all kept.
        """
        return {
            node
            for node in self.iterate_from_first()
            if all(predicate(node) for predicate in predicates)
        }

    def _check_version(self, version: int) -> None:
        if version != self._version:
            raise ConcurrentModificationError("List was modified during iteration")

    def _iterate(self, start: Any, link: str, version: int) -> Iterator[N]:
        if not self._fail_fast:
            yield from _walk(start, link)
            return
        for node in _walk(start, link):
            self._check_version(version)
            yield node
        self._check_version(version)

    def iterate_from_first(self) -> Iterator[N]:
        """Lazily yield nodes from first to last."""
        # The start node and version are captured together when the
        # iterator is created, not when it is first advanced.
        return self._iterate(self.first, "next", self._version)

    def iterate_from_last(self) -> Iterator[N]:
        """Lazily yield nodes from last to first."""
        return self._iterate(self.last, "previous", self._version)

    def clear(self) -> None:
        """Unlink every node and empty the list. O(n)."""
        for node in _walk(self.first, "next"):
            node.previous = SENTINEL
            node.next = SENTINEL
        self.first = SENTINEL
        self.last = SENTINEL
        self.count = 0
        self._version += 1

    def __iter__(self) -> Iterator[N]:
        return self.iterate_from_first()

    def __contains__(self, node: Any) -> bool:
        return self.has(node)

    def __len__(self) -> int:
        """Return the number of nodes in the list."""
        return self.count

    def __bool__(self) -> bool:
        """Return True if the list is non-empty."""
        return self.count > 0

    def __repr__(self) -> str:
        return f"LinkedList(count={self.count})"

"""Type definitions for linkstructs."""

from collections.abc import Callable
from typing import Any, Protocol, TypeAlias, TypeVar, runtime_checkable

T = TypeVar("T")

# Three-way comparator: negative, zero or positive for less, equal, greater
CompareFn: TypeAlias = Callable[[Any, Any], int]

Predicate: TypeAlias = Callable[[T], bool]


@runtime_checkable
class Listable(Protocol):
    """Anything carrying sibling links can be threaded through a LinkedList.

    Members must keep the default identity hash to be usable with query().
    """

    previous: Any
    next: Any


@runtime_checkable
class Stackable(Protocol):
    """Anything carrying a parent link can be pushed on a Stack."""

    parent: Any


@runtime_checkable
class Treeable(Listable, Stackable, Protocol):
    """A tree node: sibling links, a parent link, a children list and a subtree size."""

    children: Any
    size: int

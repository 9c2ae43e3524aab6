"""Parent-linked stack and the upward walk shared with trees."""

import logging
from collections.abc import Iterator
from typing import Any, Generic, TypeVar

from linkstructs.errors import InvariantViolationError
from linkstructs.sentinel import SENTINEL
from linkstructs.types import Stackable

N = TypeVar("N", bound=Stackable)

logger = logging.getLogger(__name__)


class StackNode:
    """A stack node carrying arbitrary caller fields next to its parent link."""

    def __init__(self, **fields: Any) -> None:
        self.__dict__.update(fields)
        self.parent: Any = SENTINEL

    def __repr__(self) -> str:
        fields = ", ".join(
            f"{name}={value!r}" for name, value in vars(self).items() if name != "parent"
        )
        return f"{type(self).__name__}({fields})"


def stack_node_create(**fields: Any) -> StackNode:
    """Create a detached StackNode holding ``fields``."""
    return StackNode(**fields)


def iterate_from(node: N) -> Iterator[N]:
    """Yield ``node`` and then each ancestor reached through ``parent`` links."""
    while node is not SENTINEL:
        parent = node.parent
        yield node
        node = parent


def depth(node: Stackable) -> int:
    """Return the number of parent links between ``node`` and its root. O(depth)."""
    return sum(1 for _ in iterate_from(node)) - 1


class Stack(Generic[N]):
    """LIFO stack threaded through each node's ``parent`` attribute."""

    def __init__(self) -> None:
        self.top: Any = SENTINEL
        self.count = 0

    def push(self, node: N) -> None:
        """Push node on top of the stack. O(1)."""
        if node.parent is not SENTINEL or node is self.top:
            logger.warning("Refusing to push %r: node already has a parent link", node)
            raise InvariantViolationError(f"Node {node!r} is already linked")
        node.parent = self.top
        self.top = node
        self.count += 1

    def pop(self) -> Any:
        """Remove and return the top node, or SENTINEL if the stack is empty. O(1)."""
        node = self.top
        if node is SENTINEL:
            return SENTINEL
        self.top = node.parent
        node.parent = SENTINEL
        self.count -= 1
        return node

    def peek(self) -> Any:
        """Return the top node without removing it, or SENTINEL if empty."""
        return self.top

    def clear(self) -> None:
        """Unlink every node and empty the stack. O(n)."""
        for node in iterate_from(self.top):
            node.parent = SENTINEL
        self.top = SENTINEL
        self.count = 0

    def __iter__(self) -> Iterator[N]:
        return iterate_from(self.top)

    def __len__(self) -> int:
        return self.count

    def __bool__(self) -> bool:
        return self.count > 0

    def __repr__(self) -> str:
        return f"Stack(count={self.count})"

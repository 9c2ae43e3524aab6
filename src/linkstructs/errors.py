"""Exception classes for linkstructs."""


class LinkStructsError(Exception):
    """Base exception for all linkstructs errors."""


class InvalidArgumentError(LinkStructsError, ValueError):
    """Raised when an operation receives an argument outside its domain, e.g. a non-positive size delta."""


class InvariantViolationError(LinkStructsError):
    """Raised when a structural misuse is detected, such as inserting a node that is already linked."""


class ConcurrentModificationError(InvariantViolationError):
    """Raised by a fail-fast iterator when its list was structurally changed mid-iteration."""

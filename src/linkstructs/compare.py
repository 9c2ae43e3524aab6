"""Three-way comparator functions.

Every comparator returns a negative number when ``a`` orders before ``b``,
zero when they are equal and a positive number otherwise.
"""

from collections.abc import Mapping
from typing import Any


def _three_way(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def _key_of(record: Any) -> Any:
    if isinstance(record, Mapping):
        return record["key"]
    return record.key


def identity_compare(a: object, b: object) -> int:
    """Default structural comparator: equal only when ``a is b``."""
    if a is b:
        return 0
    return _three_way(id(a), id(b))


def value_compare(a: Any, b: Any) -> int:
    """Compare by the natural ordering of the values."""
    if a is b or a == b:
        return 0
    return 1 if a > b else -1


def string_compare(a: str, b: str) -> int:
    """Lexicographic comparison, so ``"77"`` orders before ``"a"`` and after ``"1"``."""
    return _three_way(a, b)


def numeric_compare(a: float, b: float) -> int:
    return _three_way(a, b)


def string_key_compare(a: Any, b: Any) -> int:
    """Compare two records by their ``key`` field as strings."""
    return string_compare(_key_of(a), _key_of(b))


def numeric_key_compare(a: Any, b: Any) -> int:
    """Compare two records by their ``key`` field as numbers."""
    return numeric_compare(_key_of(a), _key_of(b))

"""The shared "no link" marker used by every structure in linkstructs."""

from typing import Final


class _SentinelType:
    """Singleton marker type. Compared by identity, never dereferenced."""

    __slots__ = ()
    _instance: "_SentinelType | None" = None

    def __new__(cls) -> "_SentinelType":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "SENTINEL"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> "_SentinelType":
        return self

    def __deepcopy__(self, memo: object) -> "_SentinelType":
        return self

    def __reduce__(self) -> str:
        return "SENTINEL"


SENTINEL: Final = _SentinelType()

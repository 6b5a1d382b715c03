"""Exceptions raised by :class:`~sorted_linked_list.sorted_list.SortedLinkedList`.

Each error also derives from the closest builtin so callers may catch either
``SortedListError`` or the usual ``ValueError``/``IndexError``/... family.
"""


class SortedListError(Exception):
    """Base class for all sorted list errors."""


class InvalidValueError(SortedListError, ValueError):
    """Raised when ``None`` is offered for insertion."""

    def __init__(self, message: str = "Null values are not allowed in this list.") -> None:
        super().__init__(message)


class IndexOutOfRangeError(SortedListError, IndexError):
    """Raised by indexed access outside ``[0, size)``."""

    def __init__(self, index: int, size: int) -> None:
        self.index = index
        self.size = size
        super().__init__(f"Index: {index}, Size: {size}")


class EmptyListError(SortedListError, LookupError):
    """Raised by ``first()``/``last()`` on an empty list."""

    def __init__(self, message: str = "The list is empty.") -> None:
        super().__init__(message)


class ConcurrentModificationError(SortedListError, RuntimeError):
    """Raised when a list is structurally modified while a cursor is live."""


__all__ = [
    "SortedListError",
    "InvalidValueError",
    "IndexOutOfRangeError",
    "EmptyListError",
    "ConcurrentModificationError",
]

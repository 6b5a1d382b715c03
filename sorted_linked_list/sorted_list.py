"""A sorted singly-linked list.

Elements are kept in non-decreasing order using their own ``<`` operator.
Values that compare equal keep their insertion order. The list keeps a
reference to its last node so appending a new maximum and reading the
bounds are O(1); everything else walks the chain from the head.
"""
from __future__ import annotations

import operator
from typing import Any, Generic, Iterable, Iterator, List, Optional, Protocol, TypeVar

from .config import fail_fast_enabled
from .errors import (
    ConcurrentModificationError,
    EmptyListError,
    IndexOutOfRangeError,
    InvalidValueError,
)
from .observability import logger


class Ordered(Protocol):
    """Anything with a total order expressed through ``<``.

    Equality (``==``) must agree with the ordering: ``remove`` matches on
    "neither is less than the other" while ``contains`` uses ``==``.
    """

    def __lt__(self, other: Any) -> bool: ...


T = TypeVar("T", bound=Ordered)


class _Node(Generic[T]):
    __slots__ = ("value", "next")

    def __init__(self, value: T, next: Optional["_Node[T]"] = None) -> None:
        self.value = value
        self.next = next


def _compares_equal(a: Any, b: Any) -> bool:
    return not a < b and not b < a


class SortedLinkedListIterator(Generic[T]):
    """One-pass cursor over a :class:`SortedLinkedList`.

    Starts at the head the list had when the cursor was created. With
    fail-fast enabled, advancing after the list was structurally modified
    raises :class:`ConcurrentModificationError`.
    """

    def __init__(self, owner: "SortedLinkedList[T]") -> None:
        self._owner = owner
        self._current = owner._head
        self._expected_modifications = owner._modifications

    def has_next(self) -> bool:
        return self._current is not None

    def __iter__(self) -> "SortedLinkedListIterator[T]":
        return self

    def __next__(self) -> T:
        owner = self._owner
        if owner._fail_fast and owner._modifications != self._expected_modifications:
            raise ConcurrentModificationError("List modified during iteration")
        if self._current is None:
            raise StopIteration
        value = self._current.value
        self._current = self._current.next
        return value


class SortedLinkedList(Generic[T]):
    """Keep values sorted in a singly-linked chain of nodes."""

    def __init__(
        self, iterable: Iterable[T] | None = None, *, fail_fast: bool | None = None
    ) -> None:
        self._head: Optional[_Node[T]] = None
        self._tail: Optional[_Node[T]] = None
        self._size = 0
        self._modifications = 0
        self._fail_fast = fail_fast_enabled() if fail_fast is None else fail_fast
        if iterable is not None:
            values = list(iterable)
            if any(value is None for value in values):
                raise InvalidValueError()
            for value in values:
                self.insert(value)

    def insert(self, value: T) -> None:
        """Insert ``value`` after any equal values and before the first greater one.

        Raises :class:`InvalidValueError` for ``None``; the list is left untouched.
        """
        if value is None:
            logger.warning("Rejected None value", extra={"size": self._size})
            raise InvalidValueError()

        node = _Node(value)
        if self._head is None or value < self._head.value:
            node.next = self._head
            self._head = node
            if self._tail is None:
                self._tail = node
        elif not value < self._tail.value:
            self._tail.next = node
            self._tail = node
        else:
            # value < tail.value, so the walk stops before the tail
            current = self._head
            while current.next is not None and not value < current.next.value:
                current = current.next
            node.next = current.next
            current.next = node
        self._size += 1
        self._modifications += 1
        logger.debug("Inserted value", extra={"value": value, "size": self._size})

    add = insert

    def remove(self, value: T) -> bool:
        """Remove the first element comparing equal to ``value``.

        Returns ``False`` when nothing matched.
        """
        if value is None or self._head is None:
            return False

        if _compares_equal(self._head.value, value):
            self._head = self._head.next
            if self._head is None:
                self._tail = None
            self._removed(value)
            return True

        previous = self._head
        while previous.next is not None and not _compares_equal(previous.next.value, value):
            previous = previous.next
        if previous.next is None:
            return False

        previous.next = previous.next.next
        if previous.next is None:
            self._tail = previous
        self._removed(value)
        return True

    def _removed(self, value: T) -> None:
        self._size -= 1
        self._modifications += 1
        logger.debug("Removed value", extra={"value": value, "size": self._size})

    def contains(self, value: Any) -> bool:
        """Return whether any element equals ``value`` (using ``==``)."""
        current = self._head
        while current is not None:
            if current.value == value:
                return True
            current = current.next
        return False

    def get(self, index: int) -> T:
        """Return the element at zero-based ``index``.

        Negative indices are out of range; they do not count from the end.
        """
        index = operator.index(index)
        if index < 0 or index >= self._size:
            raise IndexOutOfRangeError(index, self._size)
        current = self._head
        for _ in range(index):
            current = current.next  # type: ignore[union-attr]
        return current.value  # type: ignore[union-attr]

    def first(self) -> T:
        if self._head is None:
            raise EmptyListError()
        return self._head.value

    def last(self) -> T:
        if self._tail is None:
            raise EmptyListError()
        return self._tail.value

    def is_empty(self) -> bool:
        return self._size == 0 and self._head is None

    def size(self) -> int:
        return self._size

    def iterator(self) -> SortedLinkedListIterator[T]:
        """Return a fresh cursor positioned at the current head."""
        return SortedLinkedListIterator(self)

    def _values(self) -> List[T]:
        values = []
        current = self._head
        while current is not None:
            values.append(current.value)
            current = current.next
        return values

    def __contains__(self, value: Any) -> bool:
        return self.contains(value)

    def __getitem__(self, index: int) -> T:
        return self.get(index)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        return self.iterator()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SortedLinkedList):
            return NotImplemented
        return self._size == other._size and self._values() == other._values()

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return "[" + ", ".join(str(value) for value in self._values()) + "]"

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"SortedLinkedList({self._values()!r})"


__all__ = ["Ordered", "SortedLinkedList", "SortedLinkedListIterator"]

"""A singly linked list of arbitrary items."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclass
class _Node(Generic[T]):
    item: T
    next: Optional["_Node[T]"] = None


class LinkedList(Generic[T]):
    """Items chained one after another, with cheap insertion at both ends."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._head: Optional[_Node[T]] = None
        self._tail: Optional[_Node[T]] = None
        self._size = 0
        for item in items:
            self.push_back(item)

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._head is not None

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.item
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LinkedList):
            return NotImplemented
        return list(self) == list(other)

    def push_front(self, item: T) -> None:
        """Insert ``item`` before the first item."""
        node = _Node(item, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def push_back(self, item: T) -> None:
        """Append ``item`` after the last item."""
        node = _Node(item)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def last(self) -> Optional[T]:
        """The last item, or None when the list is empty."""
        return None if self._tail is None else self._tail.item

    def clear(self, delete: Optional[Callable[[T], Any]] = None) -> None:
        """Remove every item, handing each to ``delete`` first, front to back."""
        node = self._head
        self._head = self._tail = None
        self._size = 0
        while node is not None:
            if delete is not None:
                delete(node.item)
            node = node.next

    def iterate(self, func: Callable[[T], Any]) -> None:
        """Call ``func`` on every item, front to back."""
        for item in self:
            func(item)

    def map(self, func: Callable[[T], U]) -> "LinkedList[U]":
        """A new list holding ``func(item)`` for every item, in order."""
        return LinkedList(func(item) for item in self)
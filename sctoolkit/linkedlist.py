"""A singly linked list with head, tail and positional insertion."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass(slots=True)
class _Node:
    value: Any
    next: Optional["_Node"] = None


class LinkedList:
    """Singly linked list; new values go to the head unless placed otherwise."""

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        self._head: _Node | None = None
        self._size = 0
        if items is not None:
            tail: _Node | None = None
            for value in items:
                node = _Node(value)
                if tail is None:
                    self._head = node
                else:
                    tail.next = node
                tail = node
                self._size += 1

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def add(self, value: Any) -> None:
        """Insert ``value`` at the head."""
        self._head = _Node(value, self._head)
        self._size += 1

    def add_last(self, value: Any) -> None:
        """Append ``value`` at the tail."""
        node = _Node(value)
        if self._head is None:
            self._head = node
        else:
            tail = self._head
            while tail.next is not None:
                tail = tail.next
            tail.next = node
        self._size += 1

    def insert(self, index: int, value: Any) -> None:
        """Insert ``value`` at ``index``; an index past the end appends."""
        if index < 0:
            raise IndexError(f"negative insert index {index}")
        if self._head is None or index == 0:
            self.add(value)
            return
        prev = self._head
        while prev.next is not None and index > 1:
            index -= 1
            prev = prev.next
        prev.next = _Node(value, prev.next)
        self._size += 1

    def find(self, predicate: Callable[[Any], bool]) -> Any:
        """Return the first value satisfying ``predicate``, or None."""
        return next((value for value in self if predicate(value)), None)

    def find_pop(self, predicate: Callable[[Any], bool]) -> Any:
        """Remove and return the first value satisfying ``predicate``, or None."""
        prev: _Node | None = None
        for node in self._nodes():
            if predicate(node.value):
                if prev is None:
                    self._head = node.next
                else:
                    prev.next = node.next
                self._size -= 1
                return node.value
            prev = node
        return None

    def get(self, index: int) -> Any:
        """Return the value at ``index``."""
        if index < 0:
            raise IndexError(f"negative index {index}")
        for position, value in enumerate(self):
            if position == index:
                return value
        raise IndexError(f"index {index} out of range for length {self._size}")

    def pop(self, index: int) -> Any:
        """Remove and return the value at ``index``."""
        if index < 0:
            raise IndexError(f"negative index {index}")
        if self._head is None:
            raise IndexError("pop from empty list")
        prev: _Node | None = None
        node: _Node | None = self._head
        while node is not None and index > 0:
            prev, node = node, node.next
            index -= 1
        if node is None:
            raise IndexError("pop index out of range")
        if prev is None:
            self._head = node.next
        else:
            prev.next = node.next
        self._size -= 1
        return node.value

    def front(self, value: Any = None) -> Any:
        """Return the value just before ``value``; with None, the last value."""
        node = self._head
        if node is None:
            return None
        if value is None:
            while node.next is not None:
                node = node.next
            return node.value
        while node.next is not None and node.next.value != value:
            node = node.next
        return node.value if node.next is not None else None

    def clear(self) -> None:
        """Remove every value."""
        self._head = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.value

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"
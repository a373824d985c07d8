"""Linear containers: a singly linked list, a stack, a queue and a growable array."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


@dataclass
class _Node(Generic[T]):
    data: T
    next: Optional["_Node[T]"] = None


class LinkedList(Generic[T]):
    """A singly linked list with insertion and removal at either end."""

    def __init__(self) -> None:
        self._head: Optional[_Node[T]] = None
        self._tail: Optional[_Node[T]] = None
        self._size = 0

    def push_front(self, value: T) -> None:
        """Insert ``value`` before the first element."""
        node = _Node(value, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def push_back(self, value: T) -> None:
        """Insert ``value`` after the last element."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def pop_front(self) -> T:
        """Remove and return the first element."""
        if self._head is None:
            raise IndexError("List is empty")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        return node.data

    def pop_back(self) -> T:
        """Remove and return the last element."""
        if self._head is None:
            raise IndexError("List is empty")
        if self._head.next is None:
            value = self._head.data
            self._head = self._tail = None
            self._size = 0
            return value
        current = self._head
        while current.next is not None and current.next.next is not None:
            current = current.next
        last = current.next
        assert last is not None
        current.next = None
        self._tail = current
        self._size -= 1
        return last.data

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        current = self._head
        while current is not None:
            yield current.data
            current = current.next

    def __bool__(self) -> bool:
        return self._head is not None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class Stack(Generic[T]):
    """A last-in, first-out stack."""

    def __init__(self) -> None:
        self._items: LinkedList[T] = LinkedList()

    def push(self, value: T) -> None:
        """Put ``value`` on top of the stack."""
        self._items.push_front(value)

    def pop(self) -> T:
        """Remove and return the top value."""
        return self._items.pop_front()

    def peek(self) -> T:
        """Return the top value without removing it."""
        for value in self._items:
            return value
        raise IndexError("List is empty")

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        """Iterate from the top of the stack to the bottom."""
        return iter(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class Queue(Generic[T]):
    """A first-in, first-out queue."""

    def __init__(self) -> None:
        self._items: LinkedList[T] = LinkedList()

    def enqueue(self, value: T) -> None:
        """Add ``value`` at the back of the queue."""
        self._items.push_back(value)

    def dequeue(self) -> T:
        """Remove and return the value at the front of the queue."""
        return self._items.pop_front()

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._items)!r})"


class DynamicArray(Generic[T]):
    """An array whose capacity starts at two and doubles when full."""

    _INITIAL_CAPACITY = 2

    def __init__(self) -> None:
        self._items: list[T] = []
        self._capacity = self._INITIAL_CAPACITY

    def _grow_if_full(self) -> None:
        if len(self._items) == self._capacity:
            self._capacity *= 2

    def push_back(self, value: T) -> None:
        """Append ``value`` at the end."""
        self._grow_if_full()
        self._items.append(value)

    def pop_back(self) -> None:
        """Drop the last element; does nothing when the array is empty."""
        if self._items:
            self._items.pop()

    def unshift(self, value: T) -> None:
        """Insert ``value`` at the front."""
        self._grow_if_full()
        self._items.insert(0, value)

    def shift(self) -> None:
        """Drop the first element."""
        if not self._items:
            raise IndexError("Array is empty")
        del self._items[0]

    def capacity(self) -> int:
        """Return how many elements fit before the array grows again."""
        return self._capacity

    def __getitem__(self, index: int) -> T:
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, DynamicArray):
            return self._items == other._items
        return NotImplemented

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"
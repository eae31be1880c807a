"""A singly linked list with tail appends and positional inserts."""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class _Node:
    value: Any
    next: Optional["_Node"] = None


class SinglyLinkedList:
    """Singly linked list keeping references to both its head and tail."""

    def __init__(self, values=()):
        self._head = None
        self._tail = None
        self._size = 0
        for value in values:
            self.append(value)

    def append(self, value):
        """Add value at the end of the list."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def insert_at(self, position, value):
        """Insert value so that it becomes the element at 1-based position.

        On an empty list the value is simply appended. Otherwise position
        must lie between 1 and len(self) + 1.
        """
        if self._head is None:
            self.append(value)
            return
        if not 1 <= position <= self._size + 1:
            raise IndexError(f"position {position} out of range 1..{self._size + 1}")
        if position == 1:
            self._head = _Node(value, self._head)
            self._size += 1
            return
        previous = self._head
        for _ in range(position - 2):
            previous = previous.next
        node = _Node(value, previous.next)
        previous.next = node
        if node.next is None:
            self._tail = node
        self._size += 1

    def is_empty(self):
        """Tell whether the list holds no elements."""
        return self._head is None

    def __iter__(self):
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self):
        return self._size

    def __str__(self):
        return " ".join(str(value) for value in self)

    def __repr__(self):
        return f"{type(self).__name__}({list(self)!r})"
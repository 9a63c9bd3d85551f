"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class ListNode:
    """One link of a :class:`LinkedList`."""

    content: Any
    next: Optional[ListNode] = None


class LinkedList:
    """A singly linked list with constant-time insertion at both ends."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Optional[ListNode] = None
        self._tail: Optional[ListNode] = None
        self._size = 0
        for item in items:
            self.add_back(item)

    def _nodes(self) -> Iterator[ListNode]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def add_front(self, content: Any) -> ListNode:
        """Insert ``content`` at the start of the list and return its node."""
        node = ListNode(content, self.head)
        self.head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return node

    def add_back(self, content: Any) -> ListNode:
        """Append ``content`` at the end of the list and return its node."""
        node = ListNode(content)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def last(self) -> Optional[ListNode]:
        """Return the last node, or None for an empty list."""
        return self._tail

    def clear(self, delete: Optional[Callable[[Any], Any]] = None) -> None:
        """Remove every node, passing each content to ``delete`` first if given."""
        if delete is not None:
            for node in self._nodes():
                delete(node.content)
        self.head = None
        self._tail = None
        self._size = 0

    def each(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on the content of every node, front to back."""
        for content in self:
            func(content)

    def map(self, func: Optional[Callable[[Any], Any]] = None) -> LinkedList:
        """Return a new list of ``func(content)`` for every node.

        Without ``func`` the contents are copied as they are.
        """
        if func is None:
            return LinkedList(self)
        return LinkedList(func(content) for content in self)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"
"""A singly linked list of arbitrary values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass
class _Node:
    content: Any
    next: Optional["_Node"] = None


class LinkedList:
    """Singly linked list supporting insertion at either end."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0
        for item in items:
            self.push_back(item)

    def push_front(self, content: Any) -> None:
        """Insert ``content`` at the head."""
        node = _Node(content, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def push_back(self, content: Any) -> None:
        """Append ``content`` at the tail."""
        node = _Node(content)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.content
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def last(self) -> Any:
        """Return the content of the last node."""
        if self._tail is None:
            raise IndexError("last() of an empty list")
        return self._tail.content

    def clear(self, delete: Optional[Callable[[Any], None]] = None) -> None:
        """Remove every node, passing each content to ``delete`` first."""
        if delete is not None:
            for content in self:
                delete(content)
        self._head = None
        self._tail = None
        self._size = 0

    def for_each(self, f: Callable[[Any], None]) -> None:
        """Call ``f`` on each content, head to tail."""
        for content in self:
            f(content)

    def map(self, f: Callable[[Any], Any]) -> "LinkedList":
        """Return a new list holding ``f`` applied to each content."""
        return LinkedList(f(content) for content in self)
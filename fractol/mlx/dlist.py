"""A doubly linked list with removal by predicate and sorting by key."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, List, Optional


@dataclass(eq=False)
class Node:
    """One entry of a doubly linked list."""

    content: Any
    next: Optional["Node"] = field(default=None, repr=False)
    prev: Optional["Node"] = field(default=None, repr=False)


class DoublyLinkedList:
    """Doubly linked list of arbitrary contents."""

    def __init__(self) -> None:
        self.head: Optional[Node] = None
        self._tail: Optional[Node] = None
        self._size = 0

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            following = node.next
            yield node
            node = following

    def append(self, content: Any) -> Node:
        """Add ``content`` at the tail and return its node."""
        node = Node(content, prev=self._tail)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def prepend(self, content: Any) -> Node:
        """Add ``content`` at the head and return its node."""
        node = Node(content, next=self.head)
        if self.head is None:
            self._tail = node
        else:
            self.head.prev = node
        self.head = node
        self._size += 1
        return node

    def remove(self, predicate: Callable[[Any], bool]) -> Optional[Node]:
        """Unlink and return the first node whose content satisfies ``predicate``.

        Returns None when no content matches.
        """
        for node in self._nodes():
            if not predicate(node.content):
                continue
            if node.prev is None:
                self.head = node.next
            else:
                node.prev.next = node.next
            if node.next is None:
                self._tail = node.prev
            else:
                node.next.prev = node.prev
            node.next = node.prev = None
            self._size -= 1
            return node
        return None

    def last(self) -> Any:
        """Return the content at the tail."""
        if self._tail is None:
            raise IndexError("last() of an empty list")
        return self._tail.content

    def clear(self, callback: Optional[Callable[[Any], None]] = None) -> None:
        """Remove every entry, passing each content to ``callback`` first."""
        for node in self._nodes():
            if callback is not None:
                callback(node.content)
            node.next = node.prev = None
        self.head = None
        self._tail = None
        self._size = 0

    def sort_by(self, key: Callable[[Any], Any]) -> None:
        """Order entries by ascending ``key``; among equal keys later entries come first.

        The existing nodes are relinked rather than replaced.
        """
        nodes: List[Node] = list(self._nodes())
        order = sorted(range(len(nodes)), key=lambda i: (key(nodes[i].content), -i))
        previous: Optional[Node] = None
        self.head = None
        for i in order:
            node = nodes[i]
            node.prev = previous
            node.next = None
            if previous is None:
                self.head = node
            else:
                previous.next = node
            previous = node
        self._tail = previous

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"


def equal_image(content: Any, value: Any) -> bool:
    """True when ``content`` is the very image ``value``."""
    return content is value


def equal_instance(content: Any, value: Any) -> bool:
    """True when the draw call ``content`` refers to the image ``value``."""
    return content.image is value
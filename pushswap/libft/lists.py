"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass(eq=False)
class ListNode:
    """One link of a LinkedList."""

    content: Any
    next: Optional["ListNode"] = None


class LinkedList:
    """A singly linked list holding arbitrary contents."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Optional[ListNode] = None
        for item in items:
            self.add_back(ListNode(item))

    def _nodes(self) -> Iterator[ListNode]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def add_front(self, node: Optional[ListNode]) -> None:
        """Put ``node`` at the front; None is ignored."""
        if node is None:
            return
        node.next = self.head
        self.head = node

    def add_back(self, node: Optional[ListNode]) -> None:
        """Put ``node`` at the end; None is ignored."""
        if node is None:
            return
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node

    def last(self) -> Optional[ListNode]:
        """Return the last node, or None for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def clear(self, delete: Optional[Callable[[Any], None]] = None) -> None:
        """Empty the list, passing each content to ``delete`` first when given."""
        if delete is not None:
            for content in self:
                delete(content)
        self.head = None

    def iterate(self, f: Callable[[Any], None]) -> None:
        """Call ``f`` on every content in order."""
        for content in self:
            f(content)

    def map(
        self,
        f: Callable[[Any], Any],
        delete: Optional[Callable[[Any], None]] = None,
    ) -> "LinkedList":
        """Return a new list of ``f(content)`` for every content.

        If ``f`` raises, the contents made so far are passed to ``delete``
        and the error propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.add_back(ListNode(f(content)))
        except Exception:
            result.clear(delete)
            raise
        return result
"""A singly linked list with positional and value-based editing."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, Optional

from singlylinked.nodes import Node, find_middle, format_nodes, has_cycle, reverse_nodes


class LinkedList:
    """A singly linked list; positions are counted from 1."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[Node] = None
        for value in values:
            self.append(value)

    def _nodes(self) -> Iterator[Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def append(self, value: Any) -> None:
        """Add ``value`` at the end of the list."""
        new_node = Node(value)
        if self._head is None:
            self._head = new_node
            return
        tail = self._head
        while tail.next is not None:
            tail = tail.next
        tail.next = new_node

    def insert_at(self, value: Any, pos: int) -> None:
        """Insert ``value`` so that it ends up at position ``pos``.

        Raises IndexError when ``pos`` lies beyond one past the end.
        """
        if pos < 1:
            raise IndexError("Out of bound")
        if pos == 1:
            self._head = Node(value, self._head)
            return
        previous = self._head
        for _ in range(pos - 2):
            if previous is None:
                break
            previous = previous.next
        if previous is None:
            raise IndexError("Out of bound")
        previous.next = Node(value, previous.next)

    def delete_value(self, value: Any) -> bool:
        """Remove the first node holding ``value``; return whether one was removed."""
        head = self._head
        if head is None:
            return False
        if head.data == value:
            self._head = head.next
            return True
        current = head
        while current.next is not None and current.next.data != value:
            current = current.next
        if current.next is None:
            return False
        current.next = current.next.next
        return True

    def delete_at(self, pos: int) -> Optional[Any]:
        """Remove the node at ``pos`` and return its value, or None if there is none."""
        head = self._head
        if head is None or pos < 1:
            return None
        if pos == 1:
            self._head = head.next
            return head.data
        current: Optional[Node] = head
        for _ in range(pos - 2):
            current = current.next  # type: ignore[union-attr]
            if current is None:
                return None
        removed = current.next  # type: ignore[union-attr]
        if removed is None:
            return None
        current.next = removed.next  # type: ignore[union-attr]
        return removed.data

    def reverse(self) -> None:
        """Reverse the list in place."""
        self._head = reverse_nodes(self._head)

    def middle(self) -> Optional[Any]:
        """Return the middle value (the later one for an even length), or None if empty."""
        node = find_middle(self._head)
        return None if node is None else node.data

    def has_loop(self) -> bool:
        """Tell whether the links of the list form a cycle."""
        return has_cycle(self._head)

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __str__(self) -> str:
        return format_nodes(self._head)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"
"""Nodes of a singly linked chain and algorithms that walk them."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(eq=False)
class Node:
    """A node holding a value and a link to the next node."""

    data: Any
    next: Optional[Node] = field(default=None, repr=False)

    def __iter__(self) -> Iterator[Any]:
        """Yield the values from this node to the end of the chain."""
        node: Optional[Node] = self
        while node is not None:
            yield node.data
            node = node.next


def _values(head: Optional[Node]) -> Iterator[Any]:
    return iter(head) if head is not None else iter(())


def format_nodes(head: Optional[Node], separator: str = "->") -> str:
    """Render a chain as its values joined by ``separator`` and ending in NULL."""
    return "".join(f"{value}{separator}" for value in _values(head)) + "NULL"


def reverse_nodes(head: Optional[Node]) -> Optional[Node]:
    """Reverse a chain in place and return its new head."""
    previous: Optional[Node] = None
    current = head
    while current is not None:
        following = current.next
        current.next = previous
        previous = current
        current = following
    return previous


def find_middle(head: Optional[Node]) -> Optional[Node]:
    """Return the middle node; for an even length, the second of the two."""
    if head is None:
        return None
    slow: Node = head
    fast: Optional[Node] = head
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[assignment]
        fast = fast.next.next
    return slow


def has_cycle(head: Optional[Node]) -> bool:
    """Tell whether following the links from ``head`` ever loops back."""
    slow = head
    fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next.next
        if slow is fast:
            return True
    return False
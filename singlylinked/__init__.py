"""A singly linked list with insertion, deletion, reversal, middle lookup and cycle detection."""

__version__ = "0.1.0"
__all__ = ["nodes", "linked_list", "demo"]
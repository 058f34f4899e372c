"""Command that walks through the linked list operations on sample data."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence
from typing import Optional

from singlylinked.linked_list import LinkedList


def _sample_list() -> LinkedList:
    items = LinkedList([20, 30, 80])
    items.insert_at(90, 3)
    items.insert_at(40, 2)
    return items


def _delete_demo() -> None:
    items = _sample_list()
    print(items)
    items.delete_value(20)
    items.delete_at(2)
    print(items)


def _loop_demo() -> None:
    items = _sample_list()
    print(items)
    print("has loop;)" if items.has_loop() else "no loop:(")


def _middle_demo() -> None:
    items = _sample_list()
    print(items)
    print(items.middle())


def _reverse_demo() -> None:
    items = LinkedList([20, 30, 90, 80, 40, 60])
    print(items)
    items.reverse()
    print(items)


_DEMOS: dict[str, Callable[[], None]] = {
    "delete": _delete_demo,
    "loop": _loop_demo,
    "middle": _middle_demo,
    "reverse": _reverse_demo,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the chosen demonstration, or all of them."""
    parser = argparse.ArgumentParser(
        prog="singlylinked",
        description="Show singly linked list operations on sample data.",
    )
    parser.add_argument(
        "demo",
        nargs="?",
        choices=[*_DEMOS, "all"],
        default="all",
        help="which demonstration to run (default: all)",
    )
    args = parser.parse_args(argv)
    selected = list(_DEMOS) if args.demo == "all" else [args.demo]
    for name in selected:
        _DEMOS[name]()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
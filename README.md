# singlylinked

This package is a small singly linked list of values. It supports the
classic operations: appending, inserting at a 1-based position,
deleting by value or by position, reversing in place, finding the
middle value and detecting a cycle.

## Installing

```
pip install .
```

## Using the list

```python
from singlylinked.linked_list import LinkedList

items = LinkedList([20, 30, 80])
items.insert_at(90, 3)
items.insert_at(40, 2)
print(items)            # 20->40->30->90->80->NULL

items.delete_value(20)  # True
items.delete_at(2)      # 30
print(list(items))      # [40, 90, 80]
print(len(items))       # 3

items.reverse()
print(items)            # 80->90->40->NULL
print(items.middle())   # 90
print(items.has_loop()) # False
```

`LinkedList` has the following behaviour:

- Positions count from 1.
- `insert_at(value, pos)` places `value` at position `pos`. It raises
  `IndexError` when `pos` is below 1 or more than one past the end.
- `delete_value(value)` removes the first node that holds `value`. It
  returns `True` if it removed one and `False` otherwise.
- `delete_at(pos)` removes the node at `pos` and returns its value. If
  there is no such position, it returns `None` and leaves the list as it
  was.
- `middle()` returns the middle value. For an even length it returns the
  later of the two middle values. For an empty list it returns `None`.
- `str(items)` renders the values joined by `->` and ending in `NULL`.
- `repr(items)` shows the values as a Python list.

## Working with nodes directly

`singlylinked.nodes` holds the `Node` dataclass, which has the fields
`data` and `next`. Iterating over a `Node` yields the values from that
node to the end of its chain. The module also has functions that work on
a chain of nodes:

- `format_nodes(head, separator="->")` renders a chain as its values,
  each followed by `separator`, and then `NULL`.
- `reverse_nodes(head)` reverses a chain in place and returns its new
  head.
- `find_middle(head)` returns the middle node. For an even length it
  returns the second of the two middle nodes. For an empty chain it
  returns `None`.
- `has_cycle(head)` tells whether following the links ever loops back.

You can link nodes by hand to build a chain with a cycle, and
`has_cycle` will detect it. Iterating over such a chain, or formatting
it, never ends.

## Demo

```
singlylinked-demo
```

This command builds small sample lists and prints them along with the
results of the operations. You can pick one demonstration: `delete`,
`loop`, `middle` or `reverse`. The default, `all`, runs each of them in
turn:

```
singlylinked-demo middle
```

The same command can also be started with `python -m singlylinked.demo`.

## Running the tests

```
pip install .[test]
pytest
```
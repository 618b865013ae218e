# singlylinked

A small singly linked list that holds unsigned 32-bit integers, with a
positional iterator that walks forward one node at a time.

## Installing

```
pip install .
```

## Using the list

```python
from singlylinked.linked_list import LinkedList

ll = LinkedList([1, 2, 3])
ll.insert_front(0)       # 0, 1, 2, 3
ll.insert_end(4)         # 0, 1, 2, 3, 4
ll.insert(2, 9)          # 0, 1, 9, 2, 3, 4
ll.remove(2)             # returns 9; list is 0, 1, 2, 3, 4

len(ll)                  # 5
list(ll)                 # [0, 1, 2, 3, 4]
ll.find(3)               # 3, the index of the first node holding 3
ll.clear()               # empties the list
```

Values must be integers from 0 to 2**32 - 1. A value that is not an `int`
(or is a `bool`) raises `TypeError`; one outside that range raises
`ValueError`.

`find` raises `ValueError` when no element matches. `insert` accepts an
index equal to the length of the list, which appends; `insert`, `remove`
and `iterator` raise `IndexError` for an index outside the list, and
`remove` raises `IndexError` on an empty list.

The nodes are `Node` dataclasses with `data` and `next` fields; the first
one is `LinkedList.head`, which is `None` for an empty list.

### The positional iterator

`LinkedList.iterator(index=0)` returns a `ListIterator` placed on the node
at `index`. Its `data` and `current_index` attributes describe that node.
`advance()` moves it to the next node and returns `True`, or returns
`False` once the end of the list has been reached and leaves the iterator
where it was. Creating an iterator on an empty list raises `IndexError`.

```python
ll = LinkedList([10, 20, 30])
it = ll.iterator(0)
it.data, it.current_index    # (10, 0)
it.advance()                 # True
it.data, it.current_index    # (20, 1)
```

The iterator is a simple one: it is not safe to use while the list is being
changed.

## Self-check

The package carries a short functional check of empty-list behaviour and of
insertion at both ends, in `singlylinked.selfcheck`. Run it with:

```
singlylinked-selfcheck
```

It prints each test and subtest as it runs and `PASS!` after each test. On
the first failure it prints `FAIL!` with the reason and exits with status 1.
The checks can also be called directly as
`check_empty_list_properties(out)` and `check_insertion_functionality(out)`,
which write to the given stream and raise `CheckFailed` on failure.

## Running the tests

```
pip install .[test]
pytest
```
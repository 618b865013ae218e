"""A singly linked list of unsigned integers with a simple cursor-style iterator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

_UINT_MAX = 2**32 - 1


def _check_data(data: int) -> int:
    if isinstance(data, bool) or not isinstance(data, int):
        raise TypeError(f"data must be an int, not {type(data).__name__}")
    if not 0 <= data <= _UINT_MAX:
        raise ValueError(f"data must be in range 0..{_UINT_MAX}, got {data}")
    return data


@dataclass
class Node:
    """A single link holding one value."""

    data: int
    next: Optional["Node"] = None


class LinkedList:
    """Singly linked list; an empty list has ``head`` set to ``None``."""

    def __init__(self, values: Optional[Iterable[int]] = None) -> None:
        self.head: Optional[Node] = None
        if values is not None:
            for value in values:
                self.insert_end(value)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[int]:
        return (node.data for node in self._nodes())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def _node_at(self, index: int) -> Node:
        if index < 0:
            raise IndexError(f"index {index} out of range")
        for position, node in enumerate(self._nodes()):
            if position == index:
                return node
        raise IndexError(f"index {index} out of range")

    def insert_end(self, data: int) -> None:
        """Append ``data`` after the last element."""
        new_node = Node(_check_data(data))
        last = None
        for last in self._nodes():
            pass
        if last is None:
            self.head = new_node
        else:
            last.next = new_node

    def insert_front(self, data: int) -> None:
        """Put ``data`` before the first element."""
        self.head = Node(_check_data(data), self.head)

    def insert(self, index: int, data: int) -> None:
        """Insert ``data`` so that it ends up at position ``index``.

        ``index`` may equal the length of the list, which appends.
        """
        _check_data(data)
        if index == 0:
            self.insert_front(data)
            return
        previous = self._node_at(index - 1)
        previous.next = Node(data, previous.next)

    def find(self, data: int) -> int:
        """Return the index of the first element equal to ``data``.

        Raises ValueError when no element matches.
        """
        for position, value in enumerate(self):
            if value == data:
                return position
        raise ValueError(f"{data!r} is not in the list")

    def remove(self, index: int) -> int:
        """Remove the element at ``index`` and return its value."""
        if self.head is None:
            raise IndexError("remove from empty list")
        if index == 0:
            removed = self.head
            self.head = removed.next
            return removed.data
        previous = self._node_at(index - 1)
        removed = previous.next
        if removed is None:
            raise IndexError(f"index {index} out of range")
        previous.next = removed.next
        return removed.data

    def clear(self) -> None:
        """Drop every element."""
        self.head = None

    def iterator(self, index: int = 0) -> "ListIterator":
        """Return an iterator positioned at ``index``."""
        return ListIterator(self, index)


class ListIterator:
    """Cursor over a list, exposing the current position and value.

    Not safe against modification of the list while in use.
    """

    def __init__(self, linked_list: LinkedList, index: int = 0) -> None:
        if linked_list.head is None:
            raise IndexError("cannot iterate over an empty list")
        self.linked_list = linked_list
        self._node = linked_list._node_at(index)
        self.current_index = index
        self.data = self._node.data

    def advance(self) -> bool:
        """Move to the next element; return False once the end is reached."""
        next_node = self._node.next
        if next_node is None:
            return False
        self._node = next_node
        self.current_index += 1
        self.data = next_node.data
        return True

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(index={self.current_index}, data={self.data})"
        )
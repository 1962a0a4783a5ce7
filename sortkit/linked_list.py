"""A singly linked list of integers with in-place sorting and run reversal."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import pairwise
from typing import Iterable, Iterator, Optional

EMPTY_MESSAGE = "Linked List is underflowed!!!"


@dataclass(eq=False)
class Node:
    """One cell of a linked list."""

    data: int
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list that appends at the tail in constant time."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.head: Optional[Node] = None
        self._tail: Optional[Node] = None
        self._length = 0
        for value in values:
            self.append(value)

    def append(self, value: int) -> None:
        """Add ``value`` at the end of the list."""
        node = Node(value)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        self._length += 1

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[int]:
        return (node.data for node in self._nodes())

    def __len__(self) -> int:
        return self._length

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def bubble_sort(self) -> None:
        """Sort the list in ascending order by swapping the data of neighbours."""
        swapped = True
        while swapped:
            swapped = False
            for left, right in pairwise(self._nodes()):
                if left.data > right.data:
                    left.data, right.data = right.data, left.data
                    swapped = True

    def reverse_even_runs(self) -> None:
        """Reverse, by relinking, every maximal run of consecutive even values."""
        previous: Optional[Node] = None
        node = self.head
        while node is not None:
            if node.data % 2:
                previous = node
                node = node.next
                continue
            run = []
            while node is not None and node.data % 2 == 0:
                run.append(node)
                node = node.next
            run.reverse()
            for left, right in pairwise(run):
                left.next = right
            run[-1].next = node
            if previous is None:
                self.head = run[0]
            else:
                previous.next = run[0]
            if node is None:
                self._tail = run[-1]
            previous = run[-1]

    def render(self) -> str:
        """Return the values separated by spaces, or a notice if the list is empty."""
        if self.head is None:
            return EMPTY_MESSAGE
        return " ".join(str(value) for value in self)
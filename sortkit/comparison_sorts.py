"""Selection, bubble and insertion sort, with per-pass snapshots."""

from __future__ import annotations

from bisect import bisect_right
from collections import deque
from typing import Any, Callable, Iterable, Iterator, List

_Passes = Callable[[List[Any]], Iterator[None]]


def _snapshots(passes: _Passes, items: Iterable[Any]) -> Iterator[List[Any]]:
    work = list(items)
    for _ in passes(work):
        yield list(work)


def _sorted(passes: _Passes, items: Iterable[Any]) -> List[Any]:
    work = list(items)
    deque(passes(work), maxlen=0)
    return work


def _selection_passes(work: List[Any]) -> Iterator[None]:
    for start in range(len(work) - 1):
        smallest = min(range(start, len(work)), key=work.__getitem__)
        work[start], work[smallest] = work[smallest], work[start]
        yield


def _bubble_passes(work: List[Any]) -> Iterator[None]:
    for end in range(len(work) - 1, 0, -1):
        for j in range(end):
            if work[j] > work[j + 1]:
                work[j], work[j + 1] = work[j + 1], work[j]
        yield


def _bubble_early_exit_passes(work: List[Any]) -> Iterator[None]:
    for end in range(len(work) - 1, -1, -1):
        swapped = False
        for j in range(end):
            if work[j] > work[j + 1]:
                work[j], work[j + 1] = work[j + 1], work[j]
                swapped = True
        if not swapped:
            return
        yield


def _insertion_passes(work: List[Any]) -> Iterator[None]:
    for i in range(1, len(work)):
        key = work[i]
        position = bisect_right(work, key, 0, i)
        del work[i]
        work.insert(position, key)
        yield


def selection_sort_steps(items: Iterable[Any]) -> Iterator[List[Any]]:
    """Yield the list after each selection pass (one per position but the last)."""
    return _snapshots(_selection_passes, items)


def selection_sort(items: Iterable[Any]) -> List[Any]:
    """Return a new list of ``items`` sorted by selection sort."""
    return _sorted(_selection_passes, items)


def bubble_sort_steps(items: Iterable[Any]) -> Iterator[List[Any]]:
    """Yield the list after each of the ``n - 1`` bubble passes."""
    return _snapshots(_bubble_passes, items)


def bubble_sort(items: Iterable[Any]) -> List[Any]:
    """Return a new list of ``items`` sorted by bubble sort."""
    return _sorted(_bubble_passes, items)


def bubble_sort_early_exit_steps(items: Iterable[Any]) -> Iterator[List[Any]]:
    """Yield the list after each bubble pass that swapped something.

    Sorting stops at the first pass that makes no swap; that pass is not yielded.
    """
    return _snapshots(_bubble_early_exit_passes, items)


def bubble_sort_early_exit(items: Iterable[Any]) -> List[Any]:
    """Return a new list of ``items`` sorted by bubble sort that stops early."""
    return _sorted(_bubble_early_exit_passes, items)


def insertion_sort_steps(items: Iterable[Any]) -> Iterator[List[Any]]:
    """Yield the list after each element from the second on is inserted."""
    return _snapshots(_insertion_passes, items)


def insertion_sort(items: Iterable[Any]) -> List[Any]:
    """Return a new list of ``items`` sorted by insertion sort."""
    return _sorted(_insertion_passes, items)
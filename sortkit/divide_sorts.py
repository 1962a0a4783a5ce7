"""Merge sort and quick sort, with snapshots after each merge or partition."""

from __future__ import annotations

from collections import deque
from heapq import merge
from typing import Any, Iterable, Iterator, List


def _merge_passes(work: List[Any], low: int, high: int) -> Iterator[None]:
    if low >= high:
        return
    mid = (low + high) // 2
    yield from _merge_passes(work, low, mid)
    yield from _merge_passes(work, mid + 1, high)
    work[low:high + 1] = list(merge(work[low:mid + 1], work[mid + 1:high + 1]))
    yield


def _partition(work: List[Any], low: int, high: int) -> int:
    pivot = work[high]
    boundary = low
    for j in range(low, high):
        if work[j] <= pivot:
            work[boundary], work[j] = work[j], work[boundary]
            boundary += 1
    work[boundary], work[high] = work[high], work[boundary]
    return boundary


def _quick_passes(work: List[Any]) -> Iterator[None]:
    pending = [(0, len(work) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        split = _partition(work, low, high)
        yield
        # Left part is handled first, as a depth-first recursion would.
        pending.append((split + 1, high))
        pending.append((low, split - 1))


def merge_sort_steps(items: Iterable[Any]) -> Iterator[List[Any]]:
    """Yield the whole list after every merge of two sorted halves."""
    work = list(items)
    for _ in _merge_passes(work, 0, len(work) - 1):
        yield list(work)


def merge_sort(items: Iterable[Any]) -> List[Any]:
    """Return a new list of ``items`` sorted by a stable merge sort."""
    work = list(items)
    deque(_merge_passes(work, 0, len(work) - 1), maxlen=0)
    return work


def quick_sort_steps(items: Iterable[Any]) -> Iterator[List[Any]]:
    """Yield the whole list after every partition around the last element."""
    work = list(items)
    for _ in _quick_passes(work):
        yield list(work)


def quick_sort(items: Iterable[Any]) -> List[Any]:
    """Return a new list of ``items`` sorted by quick sort."""
    work = list(items)
    deque(_quick_passes(work), maxlen=0)
    return work
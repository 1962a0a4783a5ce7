"""Counting, radix and bucket sort for non-negative integers."""

from __future__ import annotations

import operator
from collections import deque
from itertools import accumulate, chain
from typing import Iterable, Iterator, List


def _non_negative_ints(items: Iterable[int]) -> List[int]:
    values = [operator.index(v) for v in items]
    negatives = [v for v in values if v < 0]
    if negatives:
        raise ValueError(f"negative value {negatives[0]} cannot be sorted")
    return values


def counting_sort(items: Iterable[int]) -> List[int]:
    """Return the non-negative integers ``items`` in ascending order.

    Raises:
        ValueError: if a value is negative.
        TypeError: if a value is not an integer.
    """
    values = _non_negative_ints(items)
    if not values:
        return []
    counts = [0] * (max(values) + 1)
    for value in values:
        counts[value] += 1
    ends = list(accumulate(counts))
    output = [0] * len(values)
    for value in reversed(values):
        ends[value] -= 1
        output[ends[value]] = value
    return output


def _radix_passes(work: List[int]) -> Iterator[None]:
    if not work:
        return
    largest = max(work)
    place = 1
    while largest // place > 0:
        buckets: List[List[int]] = [[] for _ in range(10)]
        for value in work:
            buckets[value // place % 10].append(value)
        work[:] = chain.from_iterable(buckets)
        yield
        place *= 10


def radix_sort_steps(items: Iterable[int]) -> Iterator[List[int]]:
    """Yield the list after sorting on each decimal digit, least significant first.

    Raises:
        ValueError: if a value is negative.
        TypeError: if a value is not an integer.
    """
    work = _non_negative_ints(items)
    return _radix_snapshots(work)


def _radix_snapshots(work: List[int]) -> Iterator[List[int]]:
    for _ in _radix_passes(work):
        yield list(work)


def radix_sort(items: Iterable[int]) -> List[int]:
    """Return the non-negative integers ``items`` sorted by LSD radix sort."""
    work = _non_negative_ints(items)
    deque(_radix_passes(work), maxlen=0)
    return work


def bucket_sort(items: Iterable[int]) -> List[int]:
    """Return the non-negative integers ``items`` sorted with one bucket per value."""
    values = _non_negative_ints(items)
    if not values:
        return []
    buckets = [0] * (max(values) + 1)
    for value in values:
        buckets[value] += 1
    return [value for value, count in enumerate(buckets) for _ in range(count)]
"""Searching a sequence for a value."""

from __future__ import annotations

from typing import Any, Sequence


def binary_search(items: Sequence[Any], target: Any) -> int:
    """Return an index of ``target`` in the ascending sequence ``items``.

    The first middle element found equal to ``target`` wins, so with
    duplicates the index is not necessarily the leftmost one.

    Raises:
        ValueError: if ``target`` is not present.
    """
    low, high = 0, len(items) - 1
    while low <= high:
        mid = (low + high) // 2
        value = items[mid]
        if value == target:
            return mid
        if target > value:
            low = mid + 1
        else:
            high = mid - 1
    raise ValueError(f"{target!r} is not in the sequence")


def linear_search(items: Sequence[Any], target: Any) -> int:
    """Return the index of the first element of ``items`` equal to ``target``.

    Raises:
        ValueError: if ``target`` is not present.
    """
    for index, value in enumerate(items):
        if value == target:
            return index
    raise ValueError(f"{target!r} is not in the sequence")
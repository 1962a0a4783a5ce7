"""Command line: read a count and that many integers, then show, sort or search them."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from sortkit.comparison_sorts import (
    bubble_sort,
    bubble_sort_early_exit,
    bubble_sort_early_exit_steps,
    bubble_sort_steps,
    insertion_sort,
    insertion_sort_steps,
    selection_sort,
    selection_sort_steps,
)
from sortkit.distribution_sorts import (
    bucket_sort,
    counting_sort,
    radix_sort,
    radix_sort_steps,
)
from sortkit.divide_sorts import merge_sort, merge_sort_steps, quick_sort, quick_sort_steps
from sortkit.linked_list import LinkedList
from sortkit.searching import binary_search, linear_search

_SORTS: Dict[str, Tuple[Optional[Callable], Callable, str]] = {
    "selection": (selection_sort_steps, selection_sort, "Array after pass"),
    "bubble": (bubble_sort_steps, bubble_sort, "Array after pass"),
    "bubble-early": (bubble_sort_early_exit_steps, bubble_sort_early_exit, "Array after pass"),
    "insertion": (insertion_sort_steps, insertion_sort, "Array after iteration"),
    "merge": (merge_sort_steps, merge_sort, "Array after merge"),
    "quick": (quick_sort_steps, quick_sort, "Array after partitioning"),
    "counting": (None, counting_sort, ""),
    "radix": (radix_sort_steps, radix_sort, "Array after pass"),
    "bucket": (None, bucket_sort, ""),
}

_SEARCHES = {"binary": binary_search, "linear": linear_search}

_COMMANDS = ["show", *_SORTS, *_SEARCHES, "list-sort", "reverse-even"]


def _join(values: Sequence[int]) -> str:
    return " ".join(str(value) for value in values)


def _parse(text: str) -> Tuple[List[int], List[int]]:
    tokens = text.split()
    if not tokens:
        raise ValueError("missing element count")
    try:
        numbers = [int(token) for token in tokens]
    except ValueError as exc:
        raise ValueError(f"not an integer: {exc}") from None
    count, rest = numbers[0], numbers[1:]
    if count < 0:
        raise ValueError(f"element count must not be negative, got {count}")
    if len(rest) < count:
        raise ValueError(f"expected {count} elements, got {len(rest)}")
    return rest[:count], rest[count:]


def read_numbers(text: str) -> List[int]:
    """Return the elements announced by the leading count in ``text``.

    Raises:
        ValueError: on a missing or negative count, too few elements,
            or a token that is not an integer.
    """
    values, _ = _parse(text)
    return values


def _run(command: str, values: List[int], rest: List[int]) -> List[str]:
    if command == "show":
        return [_join(values)]
    if command in _SORTS:
        steps, sort, label = _SORTS[command]
        lines = []
        if steps is not None:
            lines = [
                f"{label} {number}: {_join(snapshot)}"
                for number, snapshot in enumerate(steps(values), start=1)
            ]
        lines.append(f"Sorted array: {_join(sort(values))}")
        return lines
    if command in _SEARCHES:
        if not rest:
            raise ValueError("missing element to search for")
        try:
            index = _SEARCHES[command](values, rest[0])
        except ValueError:
            return ["Element not found: -1"]
        return [f"Index of the element: {index}", f"Position of the element: {index + 1}"]
    linked = LinkedList(values)
    if command == "list-sort":
        before = linked.render()
        linked.bubble_sort()
        return [f"Before Sorting: {before}", f"After Sorting: {linked.render()}"]
    linked.reverse_even_runs()
    return [f"List: {linked.render()}"]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sortkit",
        description="Read a count followed by that many integers from standard input.",
    )
    parser.add_argument(
        "command",
        nargs="?",
        default="show",
        choices=_COMMANDS,
        help="what to do with the numbers (default: show)",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command line and return its exit status."""
    args = _build_parser().parse_args(argv)
    try:
        values, rest = _parse(sys.stdin.read())
        lines = _run(args.command, values, rest)
    except (ValueError, TypeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print("\n".join(lines))
    return 0
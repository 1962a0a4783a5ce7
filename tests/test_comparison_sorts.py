from collections import Counter

from hypothesis import given
from hypothesis import strategies as st

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

int_lists = st.lists(st.integers(-1000, 1000), max_size=30)


@given(values=int_lists)
def test_sorters_match_builtin(values):
    expected = sorted(values)
    assert selection_sort(values) == expected
    assert bubble_sort(values) == expected
    assert bubble_sort_early_exit(values) == expected
    assert insertion_sort(values) == expected


def test_sorters_leave_input_untouched():
    values = [5, 3, 9, 1]
    selection_sort(values)
    assert values == [5, 3, 9, 1]
    bubble_sort(values)
    assert values == [5, 3, 9, 1]
    bubble_sort_early_exit(values)
    assert values == [5, 3, 9, 1]
    insertion_sort(values)
    assert values == [5, 3, 9, 1]


def test_sorters_accept_iterables():
    assert selection_sort(iter((3, 1, 2))) == [1, 2, 3]
    assert bubble_sort(iter((3, 1, 2))) == [1, 2, 3]
    assert bubble_sort_early_exit(iter((3, 1, 2))) == [1, 2, 3]
    assert insertion_sort(iter((3, 1, 2))) == [1, 2, 3]


def _assert_steps_valid(steps, values):
    for step in steps:
        assert Counter(step) == Counter(values)
    if steps:
        assert steps[-1] == sorted(values)
    else:
        assert values == sorted(values)


@given(values=st.lists(st.integers(-1000, 1000), min_size=2, max_size=30))
def test_last_step_is_sorted_and_each_step_permutation(values):
    _assert_steps_valid(list(selection_sort_steps(values)), values)
    _assert_steps_valid(list(bubble_sort_steps(values)), values)
    _assert_steps_valid(list(bubble_sort_early_exit_steps(values)), values)
    _assert_steps_valid(list(insertion_sort_steps(values)), values)


@given(values=int_lists)
def test_selection_steps_fix_prefix(values):
    steps = list(selection_sort_steps(values))
    assert len(steps) == max(len(values) - 1, 0)
    expected = sorted(values)
    for done, step in enumerate(steps, start=1):
        assert step[:done] == expected[:done]


@given(values=int_lists)
def test_bubble_steps_fix_suffix(values):
    steps = list(bubble_sort_steps(values))
    assert len(steps) == max(len(values) - 1, 0)
    expected = sorted(values)
    for done, step in enumerate(steps, start=1):
        assert step[len(step) - done:] == expected[len(expected) - done:]


@given(values=int_lists)
def test_early_exit_never_takes_more_passes(values):
    full = list(bubble_sort_steps(values))
    early = list(bubble_sort_early_exit_steps(values))
    assert len(early) <= len(full)
    assert early == full[: len(early)]


@given(values=int_lists)
def test_early_exit_yields_nothing_for_sorted_input(values):
    assert list(bubble_sort_early_exit_steps(sorted(values))) == []


@given(values=int_lists)
def test_insertion_steps_sort_growing_prefix(values):
    steps = list(insertion_sort_steps(values))
    assert len(steps) == max(len(values) - 1, 0)
    for i, step in enumerate(steps, start=1):
        assert step[: i + 1] == sorted(values[: i + 1])
        assert step[i + 1:] == values[i + 1:]


def test_insertion_sort_is_stable():
    records = [(2, "a"), (1, "b"), (2, "c"), (1, "d")]

    class Key:
        def __init__(self, record):
            self.record = record

        def __gt__(self, other):
            return self.record[0] > other.record[0]

        def __lt__(self, other):
            return self.record[0] < other.record[0]

    result = [k.record for k in insertion_sort(Key(r) for r in records)]
    assert result == sorted(records, key=lambda r: r[0])
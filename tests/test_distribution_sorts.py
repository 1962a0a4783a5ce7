from collections import Counter

import pytest
from hypothesis import given
from hypothesis import strategies as st

from sortkit.distribution_sorts import (
    bucket_sort,
    counting_sort,
    radix_sort,
    radix_sort_steps,
)

naturals = st.lists(st.integers(0, 5000), max_size=40)


@given(values=naturals)
def test_sorters_match_builtin(values):
    expected = sorted(values)
    assert counting_sort(values) == expected
    assert radix_sort(values) == expected
    assert bucket_sort(values) == expected


def test_empty_input():
    assert counting_sort([]) == []
    assert radix_sort([]) == []
    assert bucket_sort([]) == []


def test_negative_values_rejected():
    with pytest.raises(ValueError):
        counting_sort([3, -1, 2])
    with pytest.raises(ValueError):
        radix_sort([3, -1, 2])
    with pytest.raises(ValueError):
        bucket_sort([3, -1, 2])


def test_non_integers_rejected():
    with pytest.raises(TypeError):
        counting_sort([1.5, 2])
    with pytest.raises(TypeError):
        radix_sort([1.5, 2])
    with pytest.raises(TypeError):
        bucket_sort([1.5, 2])


def test_input_untouched():
    values = [3, 0, 2]
    assert counting_sort(values) == [0, 2, 3]
    assert values == [3, 0, 2]
    assert radix_sort(values) == [0, 2, 3]
    assert values == [3, 0, 2]
    assert bucket_sort(values) == [0, 2, 3]
    assert values == [3, 0, 2]


@given(values=st.lists(st.integers(1, 99999), min_size=1, max_size=40))
def test_radix_pass_count_is_digit_count(values):
    steps = list(radix_sort_steps(values))
    assert len(steps) == len(str(max(values)))
    for step in steps:
        assert Counter(step) == Counter(values)
    assert steps[-1] == sorted(values)


@given(values=st.lists(st.integers(0, 999), min_size=1, max_size=40))
def test_radix_first_pass_orders_last_digit(values):
    first = next(radix_sort_steps(values), None)
    if max(values) == 0:
        assert first is None
    else:
        digits = [v % 10 for v in first]
        assert digits == sorted(digits)


def test_radix_all_zeros_has_no_passes():
    assert list(radix_sort_steps([0, 0, 0])) == []
    assert radix_sort([0, 0, 0]) == [0, 0, 0]


def test_radix_steps_rejects_negative_eagerly():
    with pytest.raises(ValueError):
        radix_sort_steps([5, -3])


def test_radix_first_pass_is_stable_by_digit():
    assert next(radix_sort_steps([21, 11, 30])) == [30, 21, 11]
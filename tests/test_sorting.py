from hypothesis import given
from hypothesis import strategies as st
import pytest

from dsakit.sorting import (
    bubble_sort,
    counting_sort_012,
    dutch_flag_sort,
    insertion_sort,
    selection_sort,
)

SOURCE_EXAMPLE = [4, 1, 5, 2, 3]
FLAG_EXAMPLE = [2, 0, 2, 1, 1, 0, 1, 2, 0, 0]

int_lists = st.lists(st.integers(-100, 100), max_size=40)
flag_lists = st.lists(st.sampled_from([0, 1, 2]), max_size=50)


def test_bubble_sort_source_example():
    values = list(SOURCE_EXAMPLE)
    assert bubble_sort(values) == [1, 2, 3, 4, 5]
    assert values == SOURCE_EXAMPLE


def test_insertion_sort_source_example():
    values = list(SOURCE_EXAMPLE)
    assert insertion_sort(values) == [1, 2, 3, 4, 5]
    assert values == SOURCE_EXAMPLE


def test_selection_sort_source_example():
    values = list(SOURCE_EXAMPLE)
    assert selection_sort(values) == [1, 2, 3, 4, 5]
    assert values == SOURCE_EXAMPLE


@given(values=int_lists)
def test_bubble_sort_matches_sorted(values):
    assert bubble_sort(values) == sorted(values)


@given(values=int_lists)
def test_insertion_sort_matches_sorted(values):
    assert insertion_sort(values) == sorted(values)


@given(values=int_lists)
def test_selection_sort_matches_sorted(values):
    assert selection_sort(values) == sorted(values)


def test_bubble_sort_already_sorted_and_empty():
    assert bubble_sort([]) == []
    assert bubble_sort([1, 2, 3]) == [1, 2, 3]


def test_insertion_sort_already_sorted_and_empty():
    assert insertion_sort([]) == []
    assert insertion_sort([1, 2, 3]) == [1, 2, 3]


def test_selection_sort_already_sorted_and_empty():
    assert selection_sort([]) == []
    assert selection_sort([1, 2, 3]) == [1, 2, 3]


def test_dutch_flag_sort_source_example():
    assert dutch_flag_sort(list(FLAG_EXAMPLE)) == [0, 0, 0, 0, 1, 1, 1, 2, 2, 2]


def test_counting_sort_012_source_example():
    assert counting_sort_012(list(FLAG_EXAMPLE)) == [0, 0, 0, 0, 1, 1, 1, 2, 2, 2]


@given(values=flag_lists)
def test_dutch_flag_sort_matches_sorted(values):
    assert dutch_flag_sort(values) == sorted(values)


@given(values=flag_lists)
def test_counting_sort_012_matches_sorted(values):
    assert counting_sort_012(values) == sorted(values)


def test_dutch_flag_sort_rejects_other_values():
    with pytest.raises(ValueError):
        dutch_flag_sort([0, 3, 1])


def test_counting_sort_012_rejects_other_values():
    with pytest.raises(ValueError):
        counting_sort_012([0, 3, 1])
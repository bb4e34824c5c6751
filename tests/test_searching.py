import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.searching import (
    allocate_books,
    binary_search,
    binary_search_recursive,
    can_allocate,
    can_paint,
    can_place_cows,
    largest_minimum_distance,
    min_paint_time,
    peak_index,
    search_rotated,
    single_element,
)

sorted_unique = st.lists(st.integers(-1000, 1000), unique=True).map(sorted)
positive_lists = st.lists(st.integers(1, 100), min_size=1, max_size=15)


@given(sorted_unique, st.integers(-1000, 1000))
def test_binary_search_finds_or_reports_missing(values, target):
    index = binary_search(values, target)
    if target in values:
        assert values[index] == target
    else:
        assert index is None


@given(sorted_unique, st.integers(-1000, 1000))
def test_recursive_agrees_with_iterative(values, target):
    assert binary_search_recursive(values, target) == binary_search(values, target)


def test_binary_search_empty():
    assert binary_search([], 3) is None
    assert binary_search_recursive([], 3) is None


def test_largest_minimum_distance_worked_example():
    assert largest_minimum_distance([1, 2, 8, 4, 9], 3) == 3


@given(st.data())
def test_largest_minimum_distance_is_tight(data):
    stalls = data.draw(st.lists(st.integers(0, 1000), min_size=2, max_size=20, unique=True))
    cows = data.draw(st.integers(2, len(stalls)))
    original = list(stalls)
    answer = largest_minimum_distance(stalls, cows)
    ordered = sorted(stalls)
    assert stalls == original
    assert answer >= 1
    assert can_place_cows(ordered, cows, answer)
    assert not can_place_cows(ordered, cows, answer + 1)


def test_largest_minimum_distance_too_many_cows():
    assert largest_minimum_distance([1, 5], 3) is None


def test_can_place_cows_empty_raises():
    with pytest.raises(ValueError):
        can_place_cows([], 2, 1)


def test_can_place_cows_single_stall_never_reaches_count():
    assert can_place_cows([4], 1, 1) is False


def test_allocate_books_worked_example():
    assert allocate_books([2, 1, 3, 4], 2) == 6


def test_allocate_books_more_students_than_books():
    assert allocate_books([15, 17, 20], 5) is None


@given(positive_lists)
def test_allocate_books_one_student_takes_all(pages):
    assert allocate_books(pages, 1) == sum(pages)


@given(st.data())
def test_allocate_books_is_minimal(data):
    pages = data.draw(positive_lists)
    students = data.draw(st.integers(1, len(pages)))
    answer = allocate_books(pages, students)
    assert answer >= max(pages)
    assert can_allocate(pages, students, answer)
    assert not can_allocate(pages, students, answer - 1)


def test_can_allocate_rejects_book_over_limit():
    assert can_allocate([5, 50], 2, 49) is False


def test_min_paint_time_worked_example():
    assert min_paint_time([40, 30, 10, 20], 2) == 60


def test_min_paint_time_too_many_painters():
    assert min_paint_time([10, 20], 3) is None


@given(st.data())
def test_min_paint_time_matches_book_allocation(data):
    boards = data.draw(positive_lists)
    painters = data.draw(st.integers(1, len(boards)))
    answer = min_paint_time(boards, painters)
    assert answer == allocate_books(boards, painters)
    assert can_paint(boards, painters, answer)
    assert not can_paint(boards, painters, answer - 1)


@given(
    st.lists(st.integers(0, 500), min_size=1, max_size=10, unique=True),
    st.lists(st.integers(0, 500), min_size=1, max_size=10, unique=True),
)
def test_peak_index_on_mountains(left, right):
    top = max(left + right) + 1
    mountain = sorted(left) + [top] + sorted(right, reverse=True)
    index = peak_index(mountain)
    assert mountain[index] == top


def test_peak_index_equal_neighbours_raises():
    with pytest.raises(ValueError):
        peak_index([0, 1, 1, 0])


def test_peak_index_too_short():
    assert peak_index([1, 2]) is None


@given(st.data())
def test_search_rotated(data):
    values = data.draw(st.lists(st.integers(-500, 500), min_size=1, max_size=30, unique=True).map(sorted))
    shift = data.draw(st.integers(0, len(values) - 1))
    rotated = values[shift:] + values[:shift]
    target = data.draw(st.integers(-600, 600))
    index = search_rotated(rotated, target)
    if target in rotated:
        assert rotated[index] == target
    else:
        assert index is None


@given(st.data())
def test_single_element(data):
    distinct = data.draw(st.lists(st.integers(-500, 500), min_size=1, max_size=15, unique=True).map(sorted))
    lonely = data.draw(st.sampled_from(distinct))
    values = [v for v in distinct for _ in range(1 if v == lonely else 2)]
    assert single_element(values) == lonely


def test_single_element_empty_raises():
    with pytest.raises(ValueError):
        single_element([])
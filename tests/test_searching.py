import math

import pytest
from hypothesis import given, strategies as st

from dsakit.searching import (
    aggressive_cows,
    binary_search,
    book_allocation,
    find_pivot,
    integer_sqrt,
    refine_sqrt,
    search_matrix,
    search_rotated,
)

distinct_sorted = st.lists(
    st.integers(-1000, 1000), min_size=1, max_size=30, unique=True
).map(sorted)


def test_aggressive_cows_example():
    assert aggressive_cows([1, 2, 4, 8, 9], 3) == 3


@given(st.lists(st.integers(0, 1000), min_size=2, max_size=20))
def test_two_cows_take_the_extremes(stalls):
    assert aggressive_cows(stalls, 2) == max(stalls) - min(stalls)


@given(st.lists(st.integers(0, 1000), min_size=2, max_size=20))
def test_cow_in_every_stall_uses_smallest_gap(stalls):
    ordered = sorted(stalls)
    gaps = [b - a for a, b in zip(ordered, ordered[1:])]
    assert aggressive_cows(stalls, len(stalls)) == min(gaps)


@pytest.mark.parametrize("cows", [1, 0, 6])
def test_aggressive_cows_rejects_bad_counts(cows):
    with pytest.raises(ValueError):
        aggressive_cows([1, 2, 4, 8, 9], cows)


@given(st.lists(st.integers(-50, 50), max_size=30).map(sorted), st.integers(-60, 60))
def test_binary_search_agrees_with_membership(values, key):
    assert binary_search(values, key) == (key in values)


SOURCE_MATRIX = [[1, 3, 5], [6, 7, 8], [10, 12, 16]]


def test_search_matrix_finds_every_element():
    for i, row in enumerate(SOURCE_MATRIX):
        for j, value in enumerate(row):
            assert search_matrix(SOURCE_MATRIX, value) == (i, j)


@pytest.mark.parametrize("key", [0, 4, 9, 17])
def test_search_matrix_absent(key):
    assert search_matrix(SOURCE_MATRIX, key) is None


def test_search_matrix_non_square():
    matrix = [[1, 2, 3, 4], [5, 6, 7, 8]]
    assert search_matrix(matrix, 7) == (1, 2)


def test_book_allocation_example():
    assert book_allocation([10, 20, 30, 40], 2) == 60


@given(st.lists(st.integers(1, 100), min_size=1, max_size=15))
def test_single_student_reads_everything(pages):
    assert book_allocation(pages, 1) == sum(pages)


@given(st.lists(st.integers(1, 100), min_size=1, max_size=15))
def test_enough_students_read_one_book_each(pages):
    assert book_allocation(pages, len(pages)) == max(pages)


def test_book_allocation_rejects_no_students():
    with pytest.raises(ValueError):
        book_allocation([1, 2], 0)


@given(distinct_sorted, st.integers(0, 100))
def test_find_pivot_locates_rotation(values, shift):
    shift %= len(values)
    rotated = values[shift:] + values[:shift]
    assert find_pivot(rotated) == (len(values) - shift) % len(values)


def test_find_pivot_empty():
    with pytest.raises(ValueError):
        find_pivot([])


@given(distinct_sorted, st.integers(0, 100))
def test_search_rotated_finds_every_element(values, shift):
    shift %= len(values)
    rotated = values[shift:] + values[:shift]
    for index, value in enumerate(rotated):
        assert search_rotated(rotated, value) == index


@given(distinct_sorted, st.integers(0, 100), st.integers(-1100, 1100))
def test_search_rotated_missing_key(values, shift, key):
    shift %= len(values)
    rotated = values[shift:] + values[:shift]
    result = search_rotated(rotated, key)
    if key in rotated:
        assert rotated[result] == key
    else:
        assert result is None


def test_search_rotated_empty():
    assert search_rotated([], 3) is None


@given(st.integers(0, 10**12))
def test_integer_sqrt_brackets_n(n):
    root = integer_sqrt(n)
    assert root * root <= n < (root + 1) * (root + 1)


def test_integer_sqrt_rejects_negative():
    with pytest.raises(ValueError):
        integer_sqrt(-4)


@given(st.integers(1, 10000), st.integers(1, 4))
def test_refine_sqrt_is_close(n, precision):
    whole = integer_sqrt(n)
    refined = refine_sqrt(n, whole, precision)
    assert refined >= whole
    assert abs(refined - math.sqrt(n)) < 10**-precision + 1e-6


def test_refine_sqrt_zero_precision_keeps_whole():
    assert refine_sqrt(50, 7, 0) == 7.0
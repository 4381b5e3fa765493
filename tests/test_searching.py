import bisect

import pytest

from algonotes.searching import (
    binary_search,
    binary_search_index,
    insert_sorted,
    linear_search,
    lower,
    remove_all_sorted,
    remove_last_sorted,
    remove_last_unsorted,
    sentinel_linear_search,
    upper,
)

WORDS = ["RSA", "Apple", "WWW", "While", "X"]


def test_linear_search_found():
    assert WORDS[linear_search("Apple", WORDS)] == "Apple"


def test_linear_search_missing_returns_length():
    assert linear_search("Algorithm", WORDS) == len(WORDS)


def test_linear_search_first_match():
    data = [3, 2, 1, 4, 1]
    assert linear_search(1, data) == data.index(1)


def test_sentinel_search_missing_restores_list():
    data = [3, 2, 1, 4, 5]
    original = list(data)
    assert sentinel_linear_search(9, data) == len(original)
    assert data == original


def test_sentinel_search_found():
    data = list(WORDS)
    assert sentinel_linear_search("Apple", data) == WORDS.index("Apple")
    assert data == WORDS


def test_binary_search_index():
    data = [1, 2, 3, 4, 5]
    assert data[binary_search_index(2, data)] == 2
    assert binary_search_index(0, data) == len(data)
    assert binary_search_index(2, []) == 0


def test_binary_search_index_on_suffix():
    suffix = [1, 2, 3, 4, 5][2:]
    assert binary_search_index(2, suffix) == len(suffix)


@pytest.mark.parametrize(
    "key, lo, hi, expected",
    [(2, 0, 5, True), (0, 0, 5, False), (2, 2, 5, False), (0, 0, 0, False), (5, 0, None, True)],
)
def test_binary_search(key, lo, hi, expected):
    assert binary_search(key, [1, 2, 3, 4, 5], lo, hi) is expected


@pytest.mark.parametrize("key", [0, 1, 2, 3, 4])
def test_lower_and_upper_match_bisect(key):
    data = [1, 2, 2, 2, 3]
    assert lower(key, data) == bisect.bisect_left(data, key)
    assert upper(key, data) == bisect.bisect_right(data, key)


def test_lower_upper_bound_run_of_equal_keys():
    data = [1, 2, 2, 2, 3]
    first, last = lower(2, data), upper(2, data)
    assert data[first:last] == [2] * data.count(2)


def test_sorted_vector_example():
    data = [1, 3, 6, 6, 8, 9]
    insert_sorted(data, 0)
    assert remove_last_sorted(data, 6) is True
    assert remove_all_sorted(data, 6) == 1
    assert data == [0, 1, 3, 8, 9]


def test_insert_sorted_keeps_order():
    data = [1, 3, 6, 6, 8, 9]
    position = insert_sorted(data, 6)
    assert data == sorted(data)
    assert position == upper(6, data) - 1


def test_remove_last_sorted_missing():
    data = [1, 3, 8]
    assert remove_last_sorted(data, 6) is False
    assert data == [1, 3, 8]


def test_unsorted_vector_example():
    data = [9, 6, 1, 3, 8, 6]
    data.append(0)
    assert remove_last_unsorted(data, 6) is True
    assert data == [9, 6, 1, 3, 8, 0]


def test_remove_last_unsorted_missing():
    data = [9, 1]
    assert remove_last_unsorted(data, 6) is False
    assert data == [9, 1]
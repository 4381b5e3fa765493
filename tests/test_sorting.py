import random

import pytest

from algonotes.sorting import (
    bucket_sort,
    counting_sort,
    histogram_sort,
    insertion_sort,
    merge_sort,
    merge_sorted,
    partition_lomuto,
    quickselect,
    quicksort,
    radix_sort_strings,
    randomized_quicksort,
    three_way_quicksort,
)


def _random_lists():
    rng = random.Random(2024)
    lists = [[], [1], [2, 1, 3, 4, 5], [2, 1, 2, 3, 4, 5, 3, 4, 5], list(range(50))]
    lists.append(list(range(50, 0, -1)))
    lists.extend([rng.randint(-20, 20) for _ in range(rng.randint(0, 80))] for _ in range(10))
    return lists


@pytest.mark.parametrize("values", _random_lists())
def test_comparison_sorts_match_sorted(values):
    original = list(values)
    expected = sorted(original)
    assert insertion_sort(values) == expected
    assert merge_sort(values) == expected
    assert quicksort(values) == expected
    assert randomized_quicksort(values, random.Random(7)) == expected
    assert three_way_quicksort(values, random.Random(7)) == expected
    assert randomized_quicksort(values) == expected
    assert three_way_quicksort(values) == expected
    assert values == original


def test_sorts_strings():
    words = ["www", "algorithm", "racer", "text", "wait"]
    expected = sorted(words)
    assert insertion_sort(words) == expected
    assert merge_sort(words) == expected
    assert quicksort(words) == expected
    assert randomized_quicksort(words, random.Random(7)) == expected
    assert three_way_quicksort(words, random.Random(7)) == expected
    assert randomized_quicksort(words) == expected
    assert three_way_quicksort(words) == expected


def test_merge_sorted_source_example():
    a, b = [1, 2, 3], [2, 4]
    assert merge_sorted(a, b) == sorted(a + b)


def test_merge_sorted_names():
    d = ["Kruskal", "Prim"]
    e = ["Dijkstra", "Floyd", "Warshall"]
    assert merge_sorted(d, e) == sorted(d + e)


def test_merge_sorted_prefers_first_on_ties():
    first, second = [1.0], [1]
    result = merge_sorted(first, second)
    assert result[0] is first[0]


def test_partition_lomuto_source_example():
    values = [5, 4, 3, 2, 1, 6, 7, 9, 0]
    original = sorted(values)
    p = partition_lomuto(values, 0, 2, len(values))
    assert values[p] == 3
    assert all(x < 3 for x in values[:p])
    assert all(x >= 3 for x in values[p + 1:])
    assert sorted(values) == original


def test_partition_lomuto_out_of_range_position():
    values = [3, 1, 2]
    assert partition_lomuto(values, 0, 3, 3) == 0
    assert values == [3, 1, 2]


@pytest.mark.parametrize("k", range(9))
def test_quickselect(k):
    values = [5, 4, 3, 2, 1, 6, 7, 9, 0]
    expected = sorted(values)
    assert quickselect(values, k) == expected[k]
    assert values[k] == expected[k]
    assert all(x <= values[k] for x in values[:k])
    assert all(x >= values[k] for x in values[k + 1:])


@pytest.mark.parametrize("k", [-1, 9])
def test_quickselect_out_of_range(k):
    with pytest.raises(IndexError):
        quickselect([5, 4, 3, 2, 1, 6, 7, 9, 0], k)


def test_counting_sort_source_example():
    values = [18, 2, 6, 15, 6, 32, 1, 25, 0, 27, 15]
    assert counting_sort(values, 42) == sorted(values)


def test_counting_sort_rejects_out_of_range():
    with pytest.raises(ValueError):
        counting_sort([1, 42], 42)
    with pytest.raises(ValueError):
        counting_sort([-1], 42)


def test_bucket_sorts_source_example():
    values = [0.8, 0.3, 0.6, 0.5, 0.4, 0.2, 0.1, 0.9, 0.0, 0.7]
    assert bucket_sort(values) == sorted(values)
    assert histogram_sort(values) == sorted(values)


def test_bucket_sorts_random():
    rng = random.Random(5)
    values = [rng.random() for _ in range(200)]
    assert bucket_sort(values) == sorted(values)
    assert histogram_sort(values) == sorted(values)
    assert bucket_sort([]) == []
    assert histogram_sort([]) == []


def test_bucket_sorts_reject_out_of_range():
    with pytest.raises(ValueError):
        bucket_sort([0.5, 1.0])
    with pytest.raises(ValueError):
        histogram_sort([0.5, 1.0])


def test_radix_sort_shuffled_phone_numbers():
    rng = random.Random(11)
    numbers = []
    for _ in range(300):
        digits = list("123456789")
        rng.shuffle(digits)
        numbers.append("".join(digits))
    assert radix_sort_strings(numbers, 9) == sorted(numbers)


def test_radix_sort_hex_strings():
    rng = random.Random(3)
    strings = ["".join(rng.choice("0123456789abcdef") for _ in range(4)) for _ in range(100)]
    assert radix_sort_strings(strings, 4, 16) == sorted(strings)


def test_radix_sort_rejects_short_strings():
    with pytest.raises(ValueError):
        radix_sort_strings(["123", "12"], 3)
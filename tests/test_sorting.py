import pytest
from hypothesis import given
from hypothesis import strategies as st

from algoshelf.sorting import (
    bubble_sort,
    counting_sort,
    heap_sort,
    insertion_sort,
    merge_sort,
    radix_sort,
)


def _all_results(data):
    return {
        "bubble": bubble_sort(data),
        "counting": counting_sort(data),
        "heap": heap_sort(data),
        "insertion": insertion_sort(data),
        "merge": merge_sort(data),
        "radix": radix_sort(data),
    }


def test_merge_sort_driver_example():
    data = [12, 11, 13, 5, 6, 7]
    expected = [5, 6, 7, 11, 12, 13]
    assert merge_sort(data) == expected
    assert bubble_sort(data) == expected
    assert heap_sort(data) == expected
    assert insertion_sort(data) == expected
    assert counting_sort(data) == expected
    assert radix_sort(data) == expected


def test_radix_sort_driver_example():
    data = [170, 45, 75, 90, 802, 24, 2, 66]
    expected = [2, 24, 45, 66, 75, 90, 170, 802]
    assert radix_sort(data) == expected
    assert counting_sort(data) == expected
    assert bubble_sort(data) == expected
    assert heap_sort(data) == expected
    assert insertion_sort(data) == expected
    assert merge_sort(data) == expected


@pytest.mark.parametrize("data", [[], [7], [3, 3, 3], [0, 0, 1, 0]])
def test_small_inputs(data):
    expected = sorted(data)
    for name, result in _all_results(data).items():
        assert result == expected, name


def test_input_is_not_mutated():
    data = [5, 1, 4, 2, 3]
    snapshot = list(data)
    results = _all_results(data)
    assert data == snapshot
    for name, result in results.items():
        assert result == [1, 2, 3, 4, 5], name


def test_accepts_any_iterable():
    data = (9, 8, 7, 1)
    expected = [1, 7, 8, 9]
    assert bubble_sort(iter(data)) == expected
    assert counting_sort(iter(data)) == expected
    assert heap_sort(iter(data)) == expected
    assert insertion_sort(iter(data)) == expected
    assert merge_sort(iter(data)) == expected
    assert radix_sort(iter(data)) == expected


@given(st.lists(st.integers(min_value=-1000, max_value=1000), max_size=60))
def test_general_sorts_match_sorted(data):
    expected = sorted(data)
    assert bubble_sort(data) == expected
    assert heap_sort(data) == expected
    assert insertion_sort(data) == expected
    assert merge_sort(data) == expected


@given(st.lists(st.integers(min_value=0, max_value=5000), max_size=60))
def test_non_negative_sorts_match_sorted(data):
    expected = sorted(data)
    assert counting_sort(data) == expected
    assert radix_sort(data) == expected


def test_general_sorts_handle_strings():
    data = ["pear", "apple", "fig", "banana"]
    expected = ["apple", "banana", "fig", "pear"]
    assert bubble_sort(data) == expected
    assert heap_sort(data) == expected
    assert insertion_sort(data) == expected
    assert merge_sort(data) == expected


def test_counting_sort_rejects_negative_values():
    with pytest.raises(ValueError):
        counting_sort([3, -1, 2])


def test_radix_sort_rejects_negative_values():
    with pytest.raises(ValueError):
        radix_sort([3, -1, 2])


class _Keyed:
    def __init__(self, key, tag):
        self.key = key
        self.tag = tag

    def __lt__(self, other):
        return self.key < other.key

    def __le__(self, other):
        return self.key <= other.key

    def __gt__(self, other):
        return self.key > other.key

    def __ge__(self, other):
        return self.key >= other.key


def _pairs(items):
    return [(item.key, item.tag) for item in items]


@given(st.lists(st.integers(min_value=0, max_value=5), max_size=40))
def test_stable_sorts_keep_equal_order(keys):
    items = [_Keyed(key, tag) for tag, key in enumerate(keys)]
    expected = _pairs(sorted(items, key=lambda item: item.key))
    assert _pairs(bubble_sort(items)) == expected
    assert _pairs(insertion_sort(items)) == expected
    assert _pairs(merge_sort(items)) == expected
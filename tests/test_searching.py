import pytest
from hypothesis import given
from hypothesis import strategies as st

from algoshelf.searching import (
    binary_search,
    linear_search,
    recursive_binary_search,
    recursive_linear_search,
    sorted_contains,
)

small_ints = st.integers(min_value=-50, max_value=50)
int_lists = st.lists(small_ints, max_size=60)


def test_linear_search_documented_example():
    assert linear_search([2, 3, 1, 4, 6], 1) == 2


def test_sorted_contains_documented_example():
    data = sorted([1, 5, 8, 9, 6, 7, 3, 4, 2, 0])
    assert sorted_contains(data, 2) is True
    assert sorted_contains(data, 10) is False


@pytest.mark.parametrize(
    "search",
    [binary_search, recursive_binary_search, linear_search, recursive_linear_search],
)
def test_empty_sequence_finds_nothing(search):
    assert search([], 4) is None


@pytest.mark.parametrize("search", [binary_search, recursive_binary_search])
@given(int_lists, small_ints)
def test_binary_searches_are_correct(search, data, key):
    values = sorted(data)
    result = search(values, key)
    if key in values:
        assert values[result] == key
    else:
        assert result is None


@given(int_lists, small_ints)
def test_iterative_and_recursive_binary_agree(data, key):
    values = sorted(data)
    assert binary_search(values, key) == recursive_binary_search(values, key)


@given(int_lists, small_ints)
def test_linear_search_finds_first_match(data, key):
    result = linear_search(data, key)
    if key in data:
        assert result == data.index(key)
    else:
        assert result is None


@given(int_lists, small_ints)
def test_recursive_linear_search_finds_last_match(data, key):
    result = recursive_linear_search(data, key)
    if key in data:
        assert data[result] == key
        assert key not in data[result + 1:]
    else:
        assert result is None


@given(int_lists, small_ints)
def test_sorted_contains_matches_membership(data, key):
    values = sorted(data)
    assert sorted_contains(values, key) == (key in values)


def test_searches_work_on_strings():
    words = sorted(["delta", "alpha", "charlie", "bravo"])
    assert words[binary_search(words, "charlie")] == "charlie"
    assert words[recursive_binary_search(words, "bravo")] == "bravo"
    assert binary_search(words, "echo") is None


def test_linear_searches_on_tuple():
    data = (4, 9, 4, 1)
    assert data[linear_search(data, 4)] == 4
    assert linear_search(data, 4) < recursive_linear_search(data, 4)
    assert recursive_linear_search(data, 7) is None
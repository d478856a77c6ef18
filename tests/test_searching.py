import pytest

from dsakit.searching import binary_search, count_at_most

SORTED = [1, 3, 5, 7, 9, 11, 13]


@pytest.mark.parametrize("index", range(len(SORTED)))
def test_binary_search_finds_every_element(index):
    assert binary_search(SORTED, SORTED[index]) == index


@pytest.mark.parametrize("target", [0, 2, 8, 14])
def test_binary_search_missing_returns_none(target):
    assert binary_search(SORTED, target) is None


def test_binary_search_empty_sequence():
    assert binary_search([], 5) is None


def test_binary_search_duplicates_points_at_a_match():
    items = [2, 4, 4, 4, 8]
    index = binary_search(items, 4)
    assert items[index] == 4


def test_binary_search_single_element():
    assert binary_search([42], 42) == 0
    assert binary_search([42], 41) is None


@pytest.mark.parametrize("index", range(len(SORTED)))
def test_count_at_most_on_each_element(index):
    assert count_at_most(SORTED, SORTED[index]) == index + 1


def test_count_at_most_below_and_above_range():
    assert count_at_most(SORTED, SORTED[0] - 1) == 0
    assert count_at_most(SORTED, SORTED[-1] + 100) == len(SORTED)


def test_count_at_most_unsorted_with_duplicates():
    assert count_at_most([5, 1, 3, 3, 9], 3) == 3


def test_count_at_most_empty():
    assert count_at_most([], 10) == 0


def test_count_at_most_does_not_modify_input():
    values = [4, 2, 8]
    count_at_most(values, 5)
    assert values == [4, 2, 8]
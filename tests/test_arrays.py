import itertools
import math

import pytest

from dsakit.arrays import (
    count_from,
    count_keys,
    four_sum,
    largest,
    longest_zero_run,
    next_permutation,
    permutations,
    swap_contents,
    with_longest_zero_run,
)


def test_four_sum_worked_example():
    assert four_sum([1, 0, -1, 0, -2, 2], 0) == [
        [-2, -1, 1, 2],
        [-2, 0, 0, 2],
        [-1, 0, 0, 1],
    ]


@pytest.mark.parametrize(
    "nums,target",
    [
        ([1, 0, -1, 0, -2, 2], 0),
        ([2, 2, 2, 2, 2], 8),
        ([5, -3, 7, 1, 1, 0, -2, 4, 4], 6),
        ([10**9, 10**9, 10**9, 10**9], 4 * 10**9),
    ],
)
def test_four_sum_invariants(nums, target):
    result = four_sum(nums, target)
    assert result
    for quad in result:
        assert sum(quad) == target
        assert quad == sorted(quad)
        for value in set(quad):
            assert quad.count(value) <= nums.count(value)
    assert len({tuple(q) for q in result}) == len(result)
    assert result == sorted(result)


def test_four_sum_too_few_numbers():
    assert four_sum([1, 2, 3], 6) == []


def test_four_sum_no_solution():
    assert four_sum([1, 2, 3, 4], 100) == []


def test_next_permutation_walks_lexicographic_order():
    start = [1, 2, 3, 4]
    expected = [list(p) for p in itertools.permutations(start)]
    current = start
    seen = []
    for _ in range(len(expected)):
        seen.append(current)
        current = next_permutation(current)
    assert seen == expected
    assert current == start


def test_next_permutation_last_wraps_to_sorted():
    assert next_permutation([5, 3, 1]) == [1, 3, 5]


def test_next_permutation_does_not_modify_input():
    data = [1, 3, 2]
    next_permutation(data)
    assert data == [1, 3, 2]


def test_next_permutation_with_duplicates_has_all_distinct_arrangements():
    start = [1, 1, 2]
    current = start
    distinct = set()
    for _ in range(3):
        distinct.add(tuple(current))
        current = next_permutation(current)
    assert distinct == set(itertools.permutations(start))
    assert current == start


def test_permutations_count_and_content():
    items = [4, 7, 9, 1]
    result = list(permutations(items))
    assert len(result) == math.factorial(len(items))
    assert {tuple(p) for p in result} == set(itertools.permutations(items))
    assert result[0] == items


def test_permutations_empty_yields_nothing():
    assert list(permutations([])) == []


def test_permutations_single():
    assert list(permutations(["x"])) == [["x"]]


def test_largest_of_source_array():
    assert largest([214, 2134, 3456, 54]) == 3456


def test_largest_with_negatives():
    values = [-7, -3, -10]
    assert largest(values) == -3


def test_largest_empty_raises():
    with pytest.raises(ValueError):
        largest([])


@pytest.mark.parametrize("power", range(12))
def test_longest_zero_run_powers_of_two(power):
    assert longest_zero_run(2**power) == power


@pytest.mark.parametrize("number", [0, -5])
def test_longest_zero_run_non_positive(number):
    assert longest_zero_run(number) == 0


def test_longest_zero_run_all_ones():
    assert longest_zero_run(2**10 - 1) == 0


def test_with_longest_zero_run_reverse_order():
    assert with_longest_zero_run([17, 8, 1]) == [8, 17]


def test_with_longest_zero_run_empty():
    assert with_longest_zero_run([]) == []


def test_swap_contents_source_arrays():
    first = [1, 2, 3, 4, 5, 6]
    second = [99, 88, 77, 66, 55, 44]
    swap_contents(first, second)
    assert first == [99, 88, 77, 66, 55, 44]
    assert second == [1, 2, 3, 4, 5, 6]


def test_swap_contents_single_values():
    a, b = [10], [20]
    swap_contents(a, b)
    assert (a, b) == ([20], [10])


def test_count_keys_case_sensitive():
    names = ["ann", "Ann", "ann", "bob"]
    counts = count_keys(names)
    assert counts["ann"] == 2
    assert counts["Ann"] == 1
    assert sum(counts.values()) == len(names)


def test_count_keys_empty():
    assert count_keys([]) == {}


def test_count_from_defaults_to_hundred():
    values = list(count_from(95))
    assert values[0] == 95
    assert values[-1] == 100
    assert len(values) == 6


def test_count_from_past_stop_is_empty():
    assert list(count_from(101)) == []


def test_count_from_custom_stop():
    assert list(count_from(3, 5)) == [3, 4, 5]
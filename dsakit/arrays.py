"""Small array and sequence algorithms."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Iterator, MutableSequence, Sequence
from typing import Any

__all__ = [
    "count_from",
    "count_keys",
    "four_sum",
    "largest",
    "longest_zero_run",
    "next_permutation",
    "permutations",
    "swap_contents",
    "with_longest_zero_run",
]


def four_sum(nums: Iterable[int], target: int) -> list[list[int]]:
    """Return every distinct quadruplet of ``nums`` whose sum is ``target``.

    Each quadruplet is in ascending order and the quadruplets themselves
    come out in ascending order.
    """
    data = sorted(nums)
    n = len(data)
    found: list[list[int]] = []
    if n < 4:
        return found
    i = 0
    while i < n:
        j = i + 1
        while j < n:
            left, right = j + 1, n - 1
            needed = target - data[i] - data[j]
            while left < right:
                pair = data[left] + data[right]
                if needed > pair:
                    left += 1
                elif needed < pair:
                    right -= 1
                else:
                    low, high = data[left], data[right]
                    found.append([data[i], data[j], low, high])
                    while left < right and data[left] == low:
                        left += 1
                    while left < right and data[right] == high:
                        right -= 1
            while j + 1 < n and data[j + 1] == data[j]:
                j += 1
            j += 1
        while i + 1 < n and data[i + 1] == data[i]:
            i += 1
        i += 1
    return found


def next_permutation(nums: Sequence[Any]) -> list[Any]:
    """Return the lexicographically next arrangement of ``nums``.

    The last arrangement wraps round to the first (ascending) one.
    """
    data = list(nums)
    pivot = next(
        (i for i in range(len(data) - 2, -1, -1) if data[i] < data[i + 1]),
        None,
    )
    if pivot is None:
        data.reverse()
        return data
    swap_with = next(
        i for i in range(len(data) - 1, pivot, -1) if data[pivot] < data[i]
    )
    data[pivot], data[swap_with] = data[swap_with], data[pivot]
    data[pivot + 1 :] = reversed(data[pivot + 1 :])
    return data


def permutations(items: Iterable[Any]) -> Iterator[list[Any]]:
    """Yield every arrangement of ``items``, generated by successive swaps.

    The first arrangement yielded is the input order. An empty input yields
    nothing.
    """
    data = list(items)

    def _permute(start: int) -> Iterator[list[Any]]:
        if start == len(data) - 1:
            yield list(data)
            return
        for i in range(start, len(data)):
            data[start], data[i] = data[i], data[start]
            yield from _permute(start + 1)
            data[start], data[i] = data[i], data[start]

    if data:
        yield from _permute(0)


def largest(values: Iterable[Any]) -> Any:
    """Return the largest value; raise ``ValueError`` when there is none."""
    collected = list(values)
    if not collected:
        raise ValueError("cannot take the largest of no values")
    return max(collected)


def longest_zero_run(number: int) -> int:
    """Length of the longest run of zero bits in ``number``'s binary form.

    Trailing zeros count as a run; numbers below one have no bits and give 0.
    """
    bits = format(number, "b") if number > 0 else ""
    return max(len(run) for run in bits.split("1"))


def with_longest_zero_run(numbers: Iterable[int]) -> list[int]:
    """Return the numbers sharing the longest zero-bit run, last one first."""
    collected = list(numbers)
    if not collected:
        return []
    runs = [longest_zero_run(value) for value in collected]
    best = max(runs)
    return [value for value, run in zip(reversed(collected), reversed(runs)) if run == best]


def swap_contents(first: MutableSequence[Any], second: MutableSequence[Any]) -> None:
    """Exchange the whole contents of two mutable sequences in place."""
    first[:], second[:] = list(second), list(first)


def count_keys(names: Iterable[str]) -> dict[str, int]:
    """Count how often each name occurs; names are case-sensitive."""
    return dict(Counter(names))


def count_from(start: int, stop: int = 100) -> range:
    """Return the integers from ``start`` up to and including ``stop``."""
    return range(start, stop + 1)
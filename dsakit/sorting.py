"""Classic comparison sorts, inversion counting and a quicksort timing harness."""

from __future__ import annotations

import random
import time
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any, Callable

__all__ = [
    "QuickSortTiming",
    "benchmark_quicksort",
    "bubble_sort",
    "cocktail_sort",
    "count_inversions",
    "heap_sort",
    "insertion_sort",
    "merge_sort",
    "merge_sorted",
    "quicksort",
    "quicksort_first_pivot",
    "selection_sort",
]


def merge_sorted(first: Iterable[Any], second: Iterable[Any]) -> list[Any]:
    """Merge two ascending sequences into one ascending list.

    On ties the element from ``second`` is taken first.
    """
    left = list(first)
    right = list(second)
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def _merge_stable(left: list[Any], right: list[Any]) -> tuple[list[Any], int]:
    """Stable merge that also counts pairs crossing from right to left."""
    merged: list[Any] = []
    inversions = 0
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
            inversions += len(left) - i
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged, inversions


def _sort_and_count(items: list[Any]) -> tuple[list[Any], int]:
    if len(items) <= 1:
        return items, 0
    mid = (len(items) + 1) // 2
    left, left_count = _sort_and_count(items[:mid])
    right, right_count = _sort_and_count(items[mid:])
    merged, split_count = _merge_stable(left, right)
    return merged, left_count + right_count + split_count


def merge_sort(items: Iterable[Any]) -> list[Any]:
    """Return a new list with the items in ascending order (stable)."""
    ordered, _ = _sort_and_count(list(items))
    return ordered


def count_inversions(items: Iterable[Any]) -> int:
    """Count pairs ``i < j`` with ``items[i] > items[j]``."""
    _, count = _sort_and_count(list(items))
    return count


def selection_sort(items: Iterable[Any]) -> list[Any]:
    """Return a new ascending list built by repeatedly selecting the minimum."""
    data = list(items)
    for i in range(len(data)):
        smallest = min(range(i, len(data)), key=data.__getitem__)
        data[i], data[smallest] = data[smallest], data[i]
    return data


def bubble_sort(items: Iterable[Any]) -> list[Any]:
    """Return a new ascending list; stops early once a pass makes no swap."""
    data = list(items)
    for done in range(len(data)):
        swapped = False
        for j in range(len(data) - done - 1):
            if data[j] > data[j + 1]:
                data[j], data[j + 1] = data[j + 1], data[j]
                swapped = True
        if not swapped:
            break
    return data


def cocktail_sort(items: Iterable[Any]) -> list[Any]:
    """Return a new ascending list using alternating forward and backward passes."""
    data = list(items)
    start, end = 0, len(data) - 1
    swapped = True
    while swapped:
        swapped = False
        for i in range(start, end):
            if data[i] > data[i + 1]:
                data[i], data[i + 1] = data[i + 1], data[i]
                swapped = True
        if not swapped:
            break
        swapped = False
        end -= 1
        for i in range(end - 1, start - 1, -1):
            if data[i] > data[i + 1]:
                data[i], data[i + 1] = data[i + 1], data[i]
                swapped = True
        start += 1
    return data


def insertion_sort(items: Iterable[Any]) -> list[Any]:
    """Return a new ascending list built by insertion."""
    data = list(items)
    for i in range(1, len(data)):
        key = data[i]
        j = i - 1
        while j >= 0 and data[j] > key:
            data[j + 1] = data[j]
            j -= 1
        data[j + 1] = key
    return data


def _partition_last(data: list[Any], low: int, high: int) -> int:
    pivot = data[high]
    i = low - 1
    for j in range(low, high):
        if data[j] < pivot:
            i += 1
            data[i], data[j] = data[j], data[i]
    data[i + 1], data[high] = data[high], data[i + 1]
    return i + 1


def _partition_first(data: list[Any], start: int, end: int) -> int:
    pivot = data[start]
    i = start + 1
    for j in range(start + 1, end + 1):
        if data[j] < pivot:
            data[i], data[j] = data[j], data[i]
            i += 1
    data[i - 1], data[start] = data[start], data[i - 1]
    return i - 1


def _quicksort_with(
    items: Iterable[Any], partition: Callable[[list[Any], int, int], int]
) -> list[Any]:
    data = list(items)
    pending = [(0, len(data) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pos = partition(data, low, high)
            pending.append((pos + 1, high))
            pending.append((low, pos - 1))
    return data


def quicksort(items: Iterable[Any]) -> list[Any]:
    """Return a new ascending list; partitions around the last element."""
    return _quicksort_with(items, _partition_last)


def quicksort_first_pivot(items: Iterable[Any]) -> list[Any]:
    """Return a new ascending list; partitions around the first element."""
    return _quicksort_with(items, _partition_first)


def _sift_down(data: list[Any], size: int, root: int) -> None:
    while True:
        largest = root
        left = 2 * root + 1
        right = left + 1
        if left < size and data[left] > data[largest]:
            largest = left
        if right < size and data[right] > data[largest]:
            largest = right
        if largest == root:
            return
        data[root], data[largest] = data[largest], data[root]
        root = largest


def heap_sort(items: Iterable[Any]) -> list[Any]:
    """Return a new ascending list using a binary max-heap."""
    data = list(items)
    n = len(data)
    for i in range(n // 2 - 1, -1, -1):
        _sift_down(data, n, i)
    for end in range(n - 1, 0, -1):
        data[0], data[end] = data[end], data[0]
        _sift_down(data, end, 0)
    return data


@dataclass(frozen=True)
class QuickSortTiming:
    """Microseconds taken by the first-pivot quicksort on three input shapes."""

    size: int
    best: int
    average: int
    worst: int


def _time_sort(data: list[int]) -> int:
    started = time.perf_counter_ns()
    quicksort_first_pivot(data)
    return (time.perf_counter_ns() - started) // 1000


def benchmark_quicksort(
    sizes: Sequence[int] = (1000, 10000, 100000),
) -> list[QuickSortTiming]:
    """Time the first-pivot quicksort on ascending, random and descending input."""
    results = []
    for size in sizes:
        if size < 0:
            raise ValueError(f"size must not be negative: {size}")
        ascending = list(range(size))
        shuffled = [random.randint(0, 2**31 - 1) for _ in range(size)]
        descending = list(range(111111, 111111 - size, -1))
        results.append(
            QuickSortTiming(
                size=size,
                best=_time_sort(ascending),
                average=_time_sort(shuffled),
                worst=_time_sort(descending),
            )
        )
    return results
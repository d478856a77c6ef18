"""Binary search over sorted sequences."""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Iterable, Sequence
from typing import Any

__all__ = ["binary_search", "count_at_most"]


def binary_search(items: Sequence[Any], target: Any) -> int | None:
    """Return the index of ``target`` in the ascending ``items``, or ``None``.

    When the target occurs more than once, the index of whichever copy the
    halving lands on first is returned.
    """
    low, high = 0, len(items) - 1
    while low <= high:
        mid = (low + high) // 2
        value = items[mid]
        if value == target:
            return mid
        if target > value:
            low = mid + 1
        else:
            high = mid - 1
    return None


def count_at_most(values: Iterable[Any], target: Any) -> int:
    """Count how many of ``values`` are less than or equal to ``target``.

    The values need not be sorted; they are sorted before searching.
    """
    return bisect_right(sorted(values), target)
"""
Quick sort with the Lomuto partition scheme.

The pivot is always the last element of the sub-range [low, high]. After
partitioning, everything <= pivot sits left of the pivot's final index and
everything > pivot sits right of it; both sides are then sorted, excluding
the pivot itself. Sub-ranges with fewer than 2 elements are the base case.

A fixed last-element pivot makes sorted and reverse-sorted inputs the worst
case (O(n^2) comparisons, partitions of size n-1). To keep the Python stack
shallow on those inputs we recurse into the smaller side and loop on the
larger one, which bounds recursion depth by O(log n) without changing which
partitions are performed.

Public API (stable):
    quick_sort(a: list) -> None
    sort(a: list) -> SortResult
"""

from __future__ import annotations

from typing import Any, List, Optional

from .result import SortResult

__all__ = ["quick_sort", "sort"]


def quick_sort(a: List[Any]) -> None:
    """Sort `a` in place, ascending."""
    _quick(a, 0, len(a) - 1, None)


def sort(a: List[Any]) -> SortResult:
    """Sort `a` in place and report comparisons and swaps."""
    res = SortResult(a)
    _quick(a, 0, len(a) - 1, res)
    return res


def _quick(a: List[Any], low: int, high: int, res: Optional[SortResult]) -> None:
    while low < high:
        p = _partition(a, low, high, res) if res is not None else _partition_fast(a, low, high)
        if p - low < high - p:
            _quick(a, low, p - 1, res)
            low = p + 1
        else:
            _quick(a, p + 1, high, res)
            high = p - 1


def _partition(a: List[Any], low: int, high: int, res: SortResult) -> int:
    """
    Lomuto partition of a[low..high] around pivot a[high].

    Returns the pivot's final index. Counts one comparison per scanned
    element and one swap per exchange of two distinct slots.
    """
    pivot = a[high]
    i = low - 1
    for j in range(low, high):
        res.compare_count += 1
        if a[j] <= pivot:
            i += 1
            if i != j:
                a[i], a[j] = a[j], a[i]
                res.swap_count += 1
    if i + 1 != high:
        a[i + 1], a[high] = a[high], a[i + 1]
        res.swap_count += 1
    return i + 1


def _partition_fast(a: List[Any], low: int, high: int) -> int:
    pivot = a[high]
    i = low - 1
    for j in range(low, high):
        if a[j] <= pivot:
            i += 1
            a[i], a[j] = a[j], a[i]
    a[i + 1], a[high] = a[high], a[i + 1]
    return i + 1

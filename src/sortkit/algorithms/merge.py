"""
Top-down merge sort.

The range is split at its midpoint, both halves are sorted recursively
(ranges of length <= 1 are already sorted) and then merged back into the
original slots from two temporary copies. Ties take from the left half, so
the sort is stable.

Counting convention:
- a comparison is charged only when both cursors are live and their heads
  are actually compared; once one side is exhausted the rest of the other
  side is copied without further comparisons;
- every element written back into the list is one move (`swap_count`).

At every level the counts equal left half + right half + this level's merge.

Public API (stable):
    merge_sort(a: list) -> None
    sort(a: list) -> SortResult
    merge_into(a: list, lo: int, left: list, right: list) -> SortResult
"""

from __future__ import annotations

from typing import Any, List

from .result import SortResult

__all__ = ["merge_sort", "sort", "merge_into"]


def merge_sort(a: List[Any]) -> None:
    """Sort `a` in place, ascending."""
    _merge_sort(a, 0, len(a))


def sort(a: List[Any]) -> SortResult:
    """Sort `a` in place and report comparisons and moves."""
    return _sort_range(a, 0, len(a))


def merge_into(a: List[Any], lo: int, left: List[Any], right: List[Any]) -> SortResult:
    """
    Merge sorted `left` and `right` into a[lo : lo + len(left) + len(right)].

    Returns the comparisons and moves spent by this merge step alone.
    """
    res = SortResult(a)
    i = j = 0
    nl, nr = len(left), len(right)
    k = lo
    while i < nl and j < nr:
        res.compare_count += 1
        if left[i] <= right[j]:
            a[k] = left[i]
            i += 1
        else:
            a[k] = right[j]
            j += 1
        k += 1
    while i < nl:
        a[k] = left[i]
        i += 1
        k += 1
    while j < nr:
        a[k] = right[j]
        j += 1
        k += 1
    res.swap_count += nl + nr
    return res


def _sort_range(a: List[Any], lo: int, hi: int) -> SortResult:
    res = SortResult(a)
    if hi - lo <= 1:
        return res
    mid = (lo + hi) // 2
    res.absorb(_sort_range(a, lo, mid))
    res.absorb(_sort_range(a, mid, hi))
    res.absorb(merge_into(a, lo, a[lo:mid], a[mid:hi]))
    return res


def _merge_sort(a: List[Any], lo: int, hi: int) -> None:
    if hi - lo <= 1:
        return
    mid = (lo + hi) // 2
    _merge_sort(a, lo, mid)
    _merge_sort(a, mid, hi)
    left, right = a[lo:mid], a[mid:hi]
    i = j = 0
    k = lo
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            a[k] = left[i]
            i += 1
        else:
            a[k] = right[j]
            j += 1
        k += 1
    a[k:hi] = left[i:] if i < len(left) else right[j:]

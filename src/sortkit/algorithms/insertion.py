"""
Insertion sort.

The prefix a[:i] is kept sorted. Element a[i] is lifted out as `key`, every
prefix element strictly greater than `key` is shifted one slot right, and
`key` is written into the gap. Equal elements are never shifted past each
other, so the sort is stable.

Counting:
- one comparison per evaluation of `a[j] > key`; the failing comparison that
  stops the scan is counted, running off the front of the list is not;
- one move per shifted element, plus one for writing `key` back when it
  actually changed position.

An already sorted input therefore costs n-1 comparisons and no moves.

Public API (stable):
    insertion_sort(a: list) -> None
    sort(a: list) -> SortResult
"""

from __future__ import annotations

from typing import Any, List

from .result import SortResult

__all__ = ["insertion_sort", "sort"]


def insertion_sort(a: List[Any]) -> None:
    """Sort `a` in place, ascending."""
    for i in range(1, len(a)):
        key = a[i]
        j = i - 1
        while j >= 0 and a[j] > key:
            a[j + 1] = a[j]
            j -= 1
        a[j + 1] = key


def sort(a: List[Any]) -> SortResult:
    """Sort `a` in place and report comparisons and moves."""
    res = SortResult(a)
    for i in range(1, len(a)):
        key = a[i]
        j = i - 1
        while j >= 0:
            res.compare_count += 1
            if not a[j] > key:
                break
            a[j + 1] = a[j]
            res.swap_count += 1
            j -= 1
        if j + 1 != i:
            a[j + 1] = key
            res.swap_count += 1
    return res

"""
Selection sort.

For each position i, scan a[i:] for its minimum and swap it into place.
Comparisons are always n*(n-1)/2. A swap is only performed, and only
counted, when the minimum is not already sitting at i, so swap_count <= n-1.

Public API (stable):
    selection_sort(a: list) -> None
    sort(a: list) -> SortResult
"""

from __future__ import annotations

from typing import Any, List

from .result import SortResult

__all__ = ["selection_sort", "sort"]


def selection_sort(a: List[Any]) -> None:
    """Sort `a` in place, ascending."""
    n = len(a)
    for i in range(n):
        m = i
        for j in range(i + 1, n):
            if a[j] < a[m]:
                m = j
        if m != i:
            a[i], a[m] = a[m], a[i]


def sort(a: List[Any]) -> SortResult:
    """Sort `a` in place and report comparisons and swaps."""
    res = SortResult(a)
    n = len(a)
    for i in range(n):
        m = i
        for j in range(i + 1, n):
            res.compare_count += 1
            if a[j] < a[m]:
                m = j
        if m != i:
            a[i], a[m] = a[m], a[i]
            res.swap_count += 1
    return res

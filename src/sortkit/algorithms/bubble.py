"""
Bubble sort (exchange sort).

Pass i bubbles the i-th largest element into position n-1-i by swapping
adjacent out-of-order pairs. There is no early exit, so the comparison count
is exactly n*(n-1)/2 for every input of length n.

Public API (stable):
    bubble_sort(a: list) -> None
    sort(a: list) -> SortResult
"""

from __future__ import annotations

from typing import Any, List

from .result import SortResult

__all__ = ["bubble_sort", "sort"]


def bubble_sort(a: List[Any]) -> None:
    """Sort `a` in place, ascending."""
    n = len(a)
    for i in range(n):
        for j in range(n - i - 1):
            if a[j] > a[j + 1]:
                a[j], a[j + 1] = a[j + 1], a[j]


def sort(a: List[Any]) -> SortResult:
    """Sort `a` in place and report comparisons and swaps."""
    res = SortResult(a)
    n = len(a)
    for i in range(n):
        for j in range(n - i - 1):
            res.compare_count += 1
            if a[j] > a[j + 1]:
                a[j], a[j + 1] = a[j + 1], a[j]
                res.swap_count += 1
    return res

"""
Shaker (cocktail) sort: bubble sort that alternates scan direction.

The unsorted window [left, right] shrinks from both ends: a forward scan
parks the maximum at `right`, a backward scan parks the minimum at `left`.
A full forward+backward pass without any swap ends the sort early, so an
already sorted input of length n costs exactly (n-1) + (n-2) comparisons.

Public API (stable):
    shaker_sort(a: list) -> None
    sort(a: list) -> SortResult
"""

from __future__ import annotations

from typing import Any, List

from .result import SortResult

__all__ = ["shaker_sort", "sort"]


def shaker_sort(a: List[Any]) -> None:
    """Sort `a` in place, ascending."""
    left, right = 0, len(a) - 1
    while left < right:
        swapped = False
        for i in range(left, right):
            if a[i] > a[i + 1]:
                a[i], a[i + 1] = a[i + 1], a[i]
                swapped = True
        right -= 1
        for i in range(right - 1, left - 1, -1):
            if a[i] > a[i + 1]:
                a[i], a[i + 1] = a[i + 1], a[i]
                swapped = True
        left += 1
        if not swapped:
            break


def sort(a: List[Any]) -> SortResult:
    """Sort `a` in place and report comparisons and swaps."""
    res = SortResult(a)
    left, right = 0, len(a) - 1

    while left < right:
        swapped = False

        for i in range(left, right):
            res.compare_count += 1
            if a[i] > a[i + 1]:
                a[i], a[i + 1] = a[i + 1], a[i]
                res.swap_count += 1
                swapped = True
        right -= 1

        for i in range(right - 1, left - 1, -1):
            res.compare_count += 1
            if a[i] > a[i + 1]:
                a[i], a[i + 1] = a[i + 1], a[i]
                res.swap_count += 1
                swapped = True
        left += 1

        if not swapped:
            break

    return res

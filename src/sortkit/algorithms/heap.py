"""
Heap sort over the list itself, viewed as an implicit binary tree.

Children of index k live at 2k+1 and 2k+2. Phase 1 turns the list into a
max-heap by sifting down every internal node from n//2 - 1 to 0. Phase 2
repeatedly swaps the root (the maximum of the live heap a[0..end]) with
a[end], shrinks the heap by one and sifts the new root down.

Both phases share `_sift_down`. The plain `heap_sort` runs the same code and
simply drops the counters.

Public API (stable):
    heap_sort(a: list) -> None
    sort(a: list) -> SortResult
"""

from __future__ import annotations

from typing import Any, List

from .result import SortResult

__all__ = ["heap_sort", "sort"]


def heap_sort(a: List[Any]) -> None:
    """Sort `a` in place, ascending."""
    sort(a)


def sort(a: List[Any]) -> SortResult:
    """Sort `a` in place and report comparisons and swaps."""
    res = SortResult(a)
    n = len(a)

    for root in range(n // 2 - 1, -1, -1):
        _sift_down(a, root, n, res)

    for end in range(n - 1, 0, -1):
        a[0], a[end] = a[end], a[0]
        res.swap_count += 1
        _sift_down(a, 0, end, res)

    return res


def _sift_down(a: List[Any], root: int, end: int, res: SortResult) -> None:
    """
    Restore the max-heap property below `root` within a[0:end].

    Only children with index < end take part; each child-vs-largest test is
    one comparison and each exchange one swap.
    """
    while True:
        left = 2 * root + 1
        if left >= end:
            return
        largest = root

        res.compare_count += 1
        if a[left] > a[largest]:
            largest = left

        right = left + 1
        if right < end:
            res.compare_count += 1
            if a[right] > a[largest]:
                largest = right

        if largest == root:
            return

        a[root], a[largest] = a[largest], a[root]
        res.swap_count += 1
        root = largest

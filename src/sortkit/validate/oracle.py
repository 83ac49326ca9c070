"""
Oracle for sorting correctness.

Python's built-in `sorted()` is the ground truth: deterministic, stable and
correct for any totally ordered element type.

Public API (stable):
    oracle_sort(a: Sequence) -> list
    equals_oracle(a: Sequence, out: Sequence) -> bool

Note: the algorithms in this package sort in place, so callers must keep an
untouched copy of the input to compare against.
"""

from __future__ import annotations

from typing import Any, List, Sequence

__all__ = ["oracle_sort", "equals_oracle"]


def oracle_sort(a: Sequence[Any]) -> List[Any]:
    """Return a new list with the elements of `a` in nondecreasing order."""
    return sorted(a)


def equals_oracle(a: Sequence[Any], out: Sequence[Any]) -> bool:
    """True iff `out` equals `oracle_sort(a)` element-wise."""
    return list(out) == oracle_sort(a)

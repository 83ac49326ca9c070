"""
Property helpers for validating sorting results.

Used by the tests and by the benchmark harness (`time_sort_call(validate=True)`)
to reject a run whose output is not a sorted permutation of its input.

Public API (stable):
    is_nondecreasing(xs) -> bool
    first_nondecreasing_violation_index(xs) -> int | None
    is_permutation(a, b) -> bool
    permutation_counter_diff(a, b) -> dict
    is_stable_order(tagged, key) -> bool

Stability cannot be read off values alone when equal keys are
indistinguishable, so `is_stable_order` expects items tagged with their
original position, e.g. (key, input_index) pairs.
"""

from __future__ import annotations

from collections import Counter
from typing import Any, Callable, Dict, Hashable, Sequence, Tuple

__all__ = [
    "is_nondecreasing",
    "first_nondecreasing_violation_index",
    "is_permutation",
    "permutation_counter_diff",
    "is_stable_order",
]


def is_nondecreasing(xs: Sequence[Any]) -> bool:
    """Return True iff xs[i] <= xs[i+1] for all i."""
    return first_nondecreasing_violation_index(xs) is None


def first_nondecreasing_violation_index(xs: Sequence[Any]) -> int | None:
    """
    Return the first index i where xs[i] > xs[i+1], or None if nondecreasing.

    Useful for precise error messages:
        i = first_nondecreasing_violation_index(out)
        assert i is None, f"not nondecreasing at i={i}: {out[i]} > {out[i+1]}"
    """
    for i in range(len(xs) - 1):
        if xs[i] > xs[i + 1]:
            return i
    return None


def is_permutation(a: Sequence[Hashable], b: Sequence[Hashable]) -> bool:
    """Return True iff `a` and `b` hold exactly the same multiset of values."""
    return len(a) == len(b) and Counter(a) == Counter(b)


def permutation_counter_diff(a: Sequence[Hashable], b: Sequence[Hashable]) -> Dict[Any, int]:
    """
    Return value -> (count in a) - (count in b), omitting zero entries.

    An empty dict means identical multiplicities.
    """
    diff = Counter(a)
    diff.subtract(Counter(b))
    return {k: d for k, d in diff.items() if d != 0}


def is_stable_order(
    tagged: Sequence[Tuple[Any, int]],
    key: Callable[[Tuple[Any, int]], Any] = lambda item: item[0],
) -> bool:
    """
    Check that items with equal keys appear in increasing tag order.

    `tagged` is a sorted output whose items carry their original input index
    as the second tuple element.
    """
    for prev, cur in zip(tagged, tagged[1:]):
        if key(prev) == key(cur) and prev[1] > cur[1]:
            return False
    return True

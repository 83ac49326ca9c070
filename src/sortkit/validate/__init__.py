"""
Validation utilities public API.

Re-exports:
    - Oracle:
        oracle_sort
        equals_oracle

    - Property checks:
        is_nondecreasing
        first_nondecreasing_violation_index
        is_permutation
        permutation_counter_diff
        is_stable_order
"""

from .oracle import equals_oracle, oracle_sort
from .properties import (
    first_nondecreasing_violation_index,
    is_nondecreasing,
    is_permutation,
    is_stable_order,
    permutation_counter_diff,
)

__all__ = [
    "oracle_sort",
    "equals_oracle",
    "is_nondecreasing",
    "first_nondecreasing_violation_index",
    "is_permutation",
    "permutation_counter_diff",
    "is_stable_order",
]

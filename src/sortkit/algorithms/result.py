"""
Instrumented sort result.

Every instrumented algorithm in `sortkit.algorithms` returns a `SortResult`:

    SortResult(sorted=a, compare_count=..., swap_count=...)

Conventions:
- `sorted` is the very list the caller passed in (mutated to ascending order);
  no algorithm allocates a result list.
- Counters only ever grow during a call. Recursive algorithms fold their
  children's counters in with `absorb()`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Tuple

__all__ = ["SortResult"]


@dataclass
class SortResult:
    sorted: List[Any]
    compare_count: int = 0
    swap_count: int = 0

    @property
    def moves(self) -> int:
        """Alias for `swap_count` (merge sort counts writes, not exchanges)."""
        return self.swap_count

    def absorb(self, other: "SortResult") -> "SortResult":
        """Add `other`'s counters into this result and return self."""
        self.compare_count += other.compare_count
        self.swap_count += other.swap_count
        return self

    def counts(self) -> Tuple[int, int]:
        """Return `(compare_count, swap_count)`."""
        return self.compare_count, self.swap_count

"""
Timing harness for the instrumented sorting algorithms.

One sample = one call to an algorithm's `sort(a)` on a fresh copy of the
input, timed with a monotonic high-resolution clock. Copying, validation and
GC housekeeping all happen outside the timed block.

The algorithms sort in place, so every sample (and the warmup) gets its own
copy; otherwise later samples would be timing an already sorted list.

Public API (stable):
    time_sort_call(...) -> dict

Returned dict schema:
    {
        "algo": str,
        "repeats": int,
        "samples_ns": list[int],            # elapsed ns for each completed sample
        "compare_count": int | None,        # counters reported by the last sample
        "swap_count": int | None,
        "status": "ok" | "timeout" | "error" | "invalid",
        "error": str | None,                # populated for "error" and "invalid"
        "timed_out_on_repeat": int | None,  # 0-based repeat index if timeout occurred
    }
"""

from __future__ import annotations

import gc
import time
from typing import Any, Callable, Dict, List, Optional

from sortkit.algorithms import SortResult
from sortkit.validate import (
    first_nondecreasing_violation_index,
    is_permutation,
    permutation_counter_diff,
)

__all__ = ["time_sort_call"]


def time_sort_call(
    *,
    algo_name: str,
    algo_fn: Callable[[List[Any]], SortResult],
    a: List[Any],
    repeats: int,
    warmup: bool,
    disable_gc: bool,
    timeout_seconds: float,
    validate: bool = True,
) -> Dict[str, Any]:
    """
    Time repeated calls to `algo_fn(list(a))`.

    Parameters
    ----------
    algo_name : str
        Logical name of the algorithm (for logs/records).
    algo_fn : Callable[[list], SortResult]
        An instrumented `sort(a)` that sorts `a` in place.
    a : list
        Input array. Never mutated; each call receives a copy.
    repeats : int
        Number of timed samples to collect.
    warmup : bool
        If True, make one untimed call before timing.
    disable_gc : bool
        If True, collect and disable Python GC during the timed loop; restore afterward.
    timeout_seconds : float
        Per-sample threshold. A slower sample sets status="timeout" and stops sampling.
    validate : bool
        If True, check that each output is a sorted permutation of `a`;
        a failure sets status="invalid" and stops sampling.
    """
    if repeats < 0:
        raise ValueError("repeats must be nonnegative")
    if timeout_seconds <= 0:
        raise ValueError("timeout_seconds must be positive")

    result: Dict[str, Any] = {
        "algo": algo_name,
        "repeats": repeats,
        "samples_ns": [],
        "compare_count": None,
        "swap_count": None,
        "status": "ok",
        "error": None,
        "timed_out_on_repeat": None,
    }

    if warmup and repeats > 0:
        try:
            algo_fn(list(a))
        except Exception as e:
            result["status"] = "error"
            result["error"] = f"warmup failed: {e!r}"
            return result

    prev_gc_enabled = gc.isenabled()
    try:
        if disable_gc:
            gc.collect()
            gc.disable()

        threshold_ns = int(timeout_seconds * 1e9)
        for r in range(repeats):
            arg = list(a)
            try:
                t0 = time.perf_counter_ns()
                res = algo_fn(arg)
                t1 = time.perf_counter_ns()
            except Exception as e:
                result["status"] = "error"
                result["error"] = f"run failed at repeat {r}: {e!r}"
                break

            elapsed = t1 - t0
            result["samples_ns"].append(int(elapsed))
            result["compare_count"] = res.compare_count
            result["swap_count"] = res.swap_count

            if validate:
                problem = _check_output(a, res.sorted)
                if problem is not None:
                    result["status"] = "invalid"
                    result["error"] = f"repeat {r}: {problem}"
                    break

            if elapsed > threshold_ns:
                result["status"] = "timeout"
                result["timed_out_on_repeat"] = r
                break

    finally:
        # Leave GC disabled if the caller had it disabled.
        if disable_gc and prev_gc_enabled:
            gc.enable()

    return result


def _check_output(original: List[Any], out: List[Any]) -> Optional[str]:
    i = first_nondecreasing_violation_index(out)
    if i is not None:
        return f"not nondecreasing at i={i}: {out[i]!r} > {out[i + 1]!r}"
    if not is_permutation(original, out):
        diff = permutation_counter_diff(original, out)
        return f"output is not a permutation of the input (input minus output counts: {diff})"
    return None

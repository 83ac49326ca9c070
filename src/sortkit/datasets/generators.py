"""
Input generators for the sorting algorithms and the benchmark runner.

make_random_vector(count, rng=None)
    The default benchmark input: the pool [0, 10*count) is shuffled and the
    first `count` values are kept. Values are distinct and, for count >= 2,
    essentially never already sorted.

make_dataset(n, spec, rng)
    Distribution-driven inputs for experiment configs:

    - "shuffled_pool": same as make_random_vector (params unused).
    - "random":        uniform integers from params["range"] == [lo, hi] (inclusive).
    - "sorted":        [0, 1, ..., n-1]; worst case for last-element-pivot quick sort.
    - "reversed":      [n-1, ..., 0].
    - "nearly_sorted": [0..n-1] followed by ceil(params["swap_frac"] * n) random
                       index swaps (default swap_frac 0.05).
    - "few_uniques":   n draws from at most params["k"] distinct values taken from
                       the optional inclusive params["range"] (default [0, 2**32 - 1]).

Conventions:
- Every generator returns a plain `list[int]`; the algorithms never see NumPy.
- The caller owns the `numpy.random.Generator` so runs are reproducible from a seed.
- Invalid sizes or parameters raise ValueError naming the offending key.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional, Tuple

import numpy as np

__all__ = ["SUPPORTED_DISTS", "make_dataset", "make_random_vector"]

POOL_FACTOR = 10


def make_random_vector(count: int, rng: Optional[np.random.Generator] = None) -> List[int]:
    """
    Return `count` distinct pseudo-random integers in no particular order.

    Parameters
    ----------
    count : int
        Length of the result. Must be >= 0.
    rng : numpy.random.Generator, optional
        Source of randomness; a fresh unseeded generator when omitted.
    """
    _validate_n(count)
    if rng is None:
        rng = np.random.default_rng()
    pool = rng.permutation(count * POOL_FACTOR)
    return pool[:count].tolist()


def make_dataset(n: int, spec: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    """
    Generate an integer dataset of length `n` according to `spec`.

    `spec` looks like {"dist": "nearly_sorted", "params": {"swap_frac": 0.1}};
    see the module docstring for each distribution's params.

    Raises
    ------
    ValueError
        If `n` is invalid, the dist is unsupported, or params are malformed.
    """
    _validate_n(n)
    if not isinstance(spec, dict):
        raise ValueError("spec must be a dict")

    dist = spec.get("dist", None)
    builder = _BUILDERS.get(dist)
    if builder is None:
        raise ValueError(
            f"Unsupported dataset dist: {dist!r}. Supported: {sorted(SUPPORTED_DISTS)}"
        )

    params = spec.get("params") or {}
    if not isinstance(params, dict):
        raise ValueError(f"{dist}.params must be a dict")
    return builder(n, params, rng)


# ------------------------- builders ------------------------- #


def _shuffled_pool(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    return make_random_vector(n, rng)


def _uniform(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    if "range" not in params:
        raise ValueError("random.params.range must be provided as [min, max] (inclusive)")
    lo, hi = _parse_range(params["range"], "random")
    # integers() is half-open; +1 makes hi inclusive.
    return rng.integers(lo, hi + 1, size=n, dtype=np.int64).tolist()


def _ascending(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    return list(range(n))


def _descending(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    return list(range(n - 1, -1, -1))


def _nearly_sorted(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    raw = params.get("swap_frac", 0.05)
    try:
        swap_frac = float(raw)
    except (TypeError, ValueError) as e:
        raise ValueError(f"nearly_sorted.params.swap_frac must be a float; got {raw!r}") from e
    if not (0.0 <= swap_frac <= 1.0):
        raise ValueError(f"nearly_sorted.params.swap_frac must be in [0.0, 1.0]; got {swap_frac}")

    arr = list(range(n))
    num_swaps = int(np.ceil(swap_frac * n))
    if n == 0 or num_swaps == 0:
        return arr
    idxs = rng.integers(0, n, size=(num_swaps, 2))
    for i, j in idxs.tolist():
        arr[i], arr[j] = arr[j], arr[i]
    return arr


def _few_uniques(n: int, params: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    k = params.get("k")
    if not isinstance(k, int) or isinstance(k, bool) or k < 1:
        raise ValueError(f"few_uniques.params.k must be an integer >= 1; got {k!r}")
    lo, hi = _parse_range(params.get("range", (0, 2**32 - 1)), "few_uniques")
    if n == 0:
        return []

    span = hi - lo + 1
    actual_k = min(k, n, span)
    if span <= 4 * actual_k:
        values = (lo + rng.permutation(span)[:actual_k]).tolist()
    else:
        # Sparse draw: collisions are rare, so rejection is cheap.
        seen: Dict[int, None] = {}
        while len(seen) < actual_k:
            for v in rng.integers(lo, hi + 1, size=2 * (actual_k - len(seen))).tolist():
                seen.setdefault(v)
                if len(seen) == actual_k:
                    break
        values = list(seen)
    picks = rng.integers(0, actual_k, size=n)
    return [values[t] for t in picks.tolist()]


_BUILDERS: Dict[str, Callable[[int, Dict[str, Any], np.random.Generator], List[int]]] = {
    "shuffled_pool": _shuffled_pool,
    "random": _uniform,
    "sorted": _ascending,
    "reversed": _descending,
    "nearly_sorted": _nearly_sorted,
    "few_uniques": _few_uniques,
}

SUPPORTED_DISTS = frozenset(_BUILDERS)


# ------------------------- helpers ------------------------- #


def _validate_n(n: int) -> None:
    if not isinstance(n, (int, np.integer)) or isinstance(n, bool):
        raise ValueError("n must be an int")
    if n < 0:
        raise ValueError("n must be nonnegative")


def _parse_range(spec: Any, dist: str) -> Tuple[int, int]:
    """Parse an inclusive [min, max] pair for `dist`."""
    if not isinstance(spec, (list, tuple)) or len(spec) != 2:
        raise ValueError(f"{dist}.params.range must be a 2-element list/tuple [min, max]")
    lo_raw, hi_raw = spec
    if not all(isinstance(x, (int, np.integer)) for x in (lo_raw, hi_raw)):
        raise ValueError(f"{dist}.params.range values must be integers")
    lo, hi = int(lo_raw), int(hi_raw)
    if lo > hi:
        raise ValueError(f"{dist}.params.range invalid: min > max ({lo} > {hi})")
    return lo, hi

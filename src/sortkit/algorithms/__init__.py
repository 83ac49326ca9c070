"""
Algorithms package public API.

Each algorithm lives in its own module and exposes two entry points:

    <name>_sort(a)  -> None          # plain, in-place, uninstrumented
    sort(a)         -> SortResult    # in-place, counts comparisons and swaps

`ALGORITHMS` maps the short names used in experiment configs to modules, so
callers can write:
    from sortkit.algorithms import get_algorithm
    res = get_algorithm("heap").sort(data)
"""

from types import ModuleType
from typing import Dict

from . import bubble, heap, insertion, merge, quick, selection, shaker
from .result import SortResult

ALGORITHMS: Dict[str, ModuleType] = {
    "bubble": bubble,
    "shaker": shaker,
    "selection": selection,
    "insertion": insertion,
    "quick": quick,
    "heap": heap,
    "merge": merge,
}

__all__ = ["ALGORITHMS", "SortResult", "get_algorithm"]


def get_algorithm(name: str) -> ModuleType:
    """Return the algorithm module registered under `name`."""
    try:
        return ALGORITHMS[name]
    except KeyError:
        raise ValueError(
            f"Unknown algorithm: {name!r}. Supported: {list(ALGORITHMS)}"
        ) from None

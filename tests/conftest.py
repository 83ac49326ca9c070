"""Shared fixtures: make `src/` importable and expose the algorithm registry."""

from __future__ import annotations

import pathlib
import sys

import pytest

# Ensure `src/` is importable when running `pytest` from the repo root
_SRC = pathlib.Path(__file__).resolve().parents[1] / "src"
if str(_SRC) not in sys.path:
    sys.path.insert(0, str(_SRC))

from sortkit.algorithms import ALGORITHMS  # noqa: E402

ALGO_NAMES = list(ALGORITHMS)


@pytest.fixture(params=ALGO_NAMES)
def algo(request):
    """Each registered algorithm module in turn."""
    return ALGORITHMS[request.param]

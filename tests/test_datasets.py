"""Tests for the input generators."""

from __future__ import annotations

import numpy as np
import pytest

from sortkit.datasets import SUPPORTED_DISTS, make_dataset, make_random_vector
from sortkit.validate import is_nondecreasing


@pytest.mark.parametrize("count", [0, 1, 2, 10, 1000])
def test_random_vector_length_and_range(count: int) -> None:
    v = make_random_vector(count, np.random.default_rng(1))
    assert len(v) == count
    assert len(set(v)) == count
    assert all(isinstance(x, int) and 0 <= x < 10 * count for x in v)


def test_random_vector_is_not_sorted() -> None:
    v = make_random_vector(1000)
    assert not is_nondecreasing(v)
    assert any(x != y for x, y in zip(v, v[1:]))


def test_random_vector_seeded_is_reproducible() -> None:
    a = make_random_vector(50, np.random.default_rng(42))
    b = make_random_vector(50, np.random.default_rng(42))
    assert a == b


@pytest.mark.parametrize("bad", [-1, 2.5, "3", True])
def test_random_vector_rejects_bad_count(bad) -> None:
    with pytest.raises(ValueError):
        make_random_vector(bad)


@pytest.mark.parametrize(
    "spec",
    [
        {"dist": "shuffled_pool"},
        {"dist": "random", "params": {"range": [-5, 5]}},
        {"dist": "sorted"},
        {"dist": "reversed", "params": {}},
        {"dist": "nearly_sorted", "params": {"swap_frac": 0.1}},
        {"dist": "few_uniques", "params": {"k": 4}},
        {"dist": "few_uniques", "params": {"k": 3, "range": [0, 5]}},
    ],
)
@pytest.mark.parametrize("n", [0, 1, 37])
def test_make_dataset_lengths(spec, n: int) -> None:
    out = make_dataset(n, spec, np.random.default_rng(0))
    assert isinstance(out, list)
    assert len(out) == n


def test_supported_dists() -> None:
    assert SUPPORTED_DISTS == {
        "shuffled_pool", "random", "sorted", "reversed", "nearly_sorted", "few_uniques",
    }


def test_shapes() -> None:
    rng = np.random.default_rng(3)
    assert make_dataset(5, {"dist": "sorted"}, rng) == [0, 1, 2, 3, 4]
    assert make_dataset(5, {"dist": "reversed"}, rng) == [4, 3, 2, 1, 0]
    assert make_dataset(6, {"dist": "nearly_sorted", "params": {"swap_frac": 0.0}}, rng) == list(range(6))

    nearly = make_dataset(100, {"dist": "nearly_sorted", "params": {"swap_frac": 0.05}}, rng)
    assert sorted(nearly) == list(range(100))

    uniform = make_dataset(200, {"dist": "random", "params": {"range": [3, 7]}}, rng)
    assert set(uniform) <= set(range(3, 8))

    few = make_dataset(500, {"dist": "few_uniques", "params": {"k": 5, "range": [0, 10**9]}}, rng)
    assert 1 <= len(set(few)) <= 5


@pytest.mark.parametrize(
    "spec",
    [
        "random",
        {"dist": "bogus"},
        {"dist": "random"},
        {"dist": "random", "params": {"range": [5, 1]}},
        {"dist": "random", "params": {"range": [0]}},
        {"dist": "random", "params": {"range": [0, "9"]}},
        {"dist": "nearly_sorted", "params": {"swap_frac": 1.5}},
        {"dist": "nearly_sorted", "params": {"swap_frac": "lots"}},
        {"dist": "few_uniques", "params": {}},
        {"dist": "few_uniques", "params": {"k": 0}},
        {"dist": "few_uniques", "params": {"k": True}},
        {"dist": "sorted", "params": [1, 2]},
    ],
)
def test_make_dataset_rejects_bad_spec(spec) -> None:
    with pytest.raises(ValueError):
        make_dataset(10, spec, np.random.default_rng(0))

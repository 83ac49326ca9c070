"""Tests for the timing harness and the YAML-driven runner."""

from __future__ import annotations

import json

import pandas as pd
import pytest
import yaml

from sortkit.algorithms import SortResult, bubble, merge
from sortkit.bench import run_experiment, time_sort_call
from sortkit.bench.runner import main


def _time(algo_fn, a, **overrides):
    kwargs = dict(
        algo_name="x",
        algo_fn=algo_fn,
        a=a,
        repeats=3,
        warmup=True,
        disable_gc=True,
        timeout_seconds=10.0,
    )
    kwargs.update(overrides)
    return time_sort_call(**kwargs)


# ------------------------- measure ------------------------- #

def test_time_sort_call_ok_and_input_untouched() -> None:
    a = [5, 3, 1, 4, 2]
    res = _time(merge.sort, a)
    assert res["status"] == "ok"
    assert len(res["samples_ns"]) == 3
    assert all(t >= 0 for t in res["samples_ns"])
    assert (res["compare_count"], res["swap_count"]) == (7, 12)
    assert a == [5, 3, 1, 4, 2]


def test_every_sample_sorts_a_fresh_copy() -> None:
    seen = []

    def spy(xs):
        seen.append(list(xs))
        return bubble.sort(xs)

    _time(spy, [3, 2, 1], warmup=False)
    assert seen == [[3, 2, 1]] * 3


def test_time_sort_call_flags_invalid_output() -> None:
    def broken(xs):
        xs.reverse()
        return SortResult(xs)

    res = _time(broken, [1, 2, 3])
    assert res["status"] == "invalid"
    assert "not nondecreasing" in res["error"]
    assert len(res["samples_ns"]) == 1


def test_time_sort_call_flags_lost_elements() -> None:
    def lossy(xs):
        xs[:] = sorted(xs)[:-1]
        return SortResult(xs)

    res = _time(lossy, [2, 1, 3], warmup=False)
    assert res["status"] == "invalid"
    assert "permutation" in res["error"]
    assert "{3: 1}" in res["error"]


def test_time_sort_call_reports_errors() -> None:
    def boom(xs):
        raise RuntimeError("nope")

    assert _time(boom, [1], warmup=True)["error"].startswith("warmup failed")
    res = _time(boom, [1], warmup=False)
    assert res["status"] == "error"
    assert "repeat 0" in res["error"]


def test_time_sort_call_timeout() -> None:
    res = _time(bubble.sort, list(range(300, 0, -1)), timeout_seconds=1e-9)
    assert res["status"] == "timeout"
    assert res["timed_out_on_repeat"] == 0


@pytest.mark.parametrize("bad", [{"repeats": -1}, {"timeout_seconds": 0}])
def test_time_sort_call_rejects_bad_args(bad) -> None:
    with pytest.raises(ValueError):
        _time(bubble.sort, [1], **bad)


# ------------------------- runner ------------------------- #

def _write_config(tmp_path, **overrides):
    cfg = {
        "experiment_name": "unit",
        "output_dir": str(tmp_path / "runs"),
        "seed": 11,
        "repeats": 2,
        "warmup": False,
        "disable_gc": False,
        "timeout_seconds": 30,
        "dataset": {"dist": "shuffled_pool", "params": {}},
        "sizes": [8, 32],
        "algorithms": [{"name": "bubble"}, "merge", {"name": "quick"}],
    }
    cfg.update(overrides)
    path = tmp_path / "cfg.yaml"
    path.write_text(yaml.safe_dump(cfg), encoding="utf-8")
    return path


def test_run_experiment_writes_outputs(tmp_path) -> None:
    run_dir = run_experiment(_write_config(tmp_path))

    for name in ("results.jsonl", "summary.csv", "meta.json", "config_resolved.yaml"):
        assert (run_dir / name).exists()

    lines = [json.loads(x) for x in (run_dir / "results.jsonl").read_text().splitlines()]
    assert len(lines) == 3 * 2 * 2
    bubble_8 = [r for r in lines if r["algo"] == "bubble" and r["n"] == 8]
    assert all(r["compare_count"] == 28 for r in bubble_8)

    summary = pd.read_csv(run_dir / "summary.csv")
    assert set(summary["algo"]) == {"bubble", "merge", "quick"}
    assert sorted(summary["n"].unique()) == [8, 32]
    assert (summary["samples_ok"] == 2).all()
    row = summary[(summary["algo"] == "merge") & (summary["n"] == 32)].iloc[0]
    assert row["swap_count"] == 32 * 5

    meta = json.loads((run_dir / "meta.json").read_text())
    assert "python" in meta and "machine" in meta


def test_run_experiment_skips_after_timeout(tmp_path) -> None:
    run_dir = run_experiment(
        _write_config(tmp_path, timeout_seconds=1e-9, sizes=[50, 100], algorithms=["heap"])
    )
    lines = [json.loads(x) for x in (run_dir / "results.jsonl").read_text().splitlines()]
    assert {r["n"] for r in lines} == {50}
    assert lines[-1]["status"] == "timeout"


@pytest.mark.parametrize(
    "overrides",
    [
        {"algorithms": ["bogosort"]},
        {"algorithms": ["heap", "heap"]},
        {"sizes": []},
        {"sizes": None},
        {"sizes": 5},
        {"sizes": [10, "20"]},
        {"algorithms": None},
        {"dataset": None},
    ],
)
def test_run_experiment_rejects_bad_config(tmp_path, overrides) -> None:
    with pytest.raises(ValueError):
        run_experiment(_write_config(tmp_path, **overrides))


def test_run_experiment_missing_keys(tmp_path) -> None:
    path = tmp_path / "cfg.yaml"
    path.write_text(yaml.safe_dump({"experiment_name": "x"}), encoding="utf-8")
    with pytest.raises(ValueError, match="Missing required config keys"):
        run_experiment(path)


def test_main_missing_file(tmp_path) -> None:
    with pytest.raises(SystemExit):
        main([str(tmp_path / "nope.yaml")])

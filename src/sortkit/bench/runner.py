"""
Experiment runner: times every configured algorithm over a sweep of sizes.

Usage (from repo root):
    python -m sortkit.bench.runner experiments/configs/01_quadratic.yaml
    sortkit-bench experiments/configs/02_nlogn.yaml

Outputs in a new run directory:
    - config_resolved.yaml    # the config we actually used
    - meta.json               # environment info (python, numpy, cpu/ram, git commit)
    - results.jsonl           # one JSON line per timing sample (with counts)
    - summary.csv             # median + IQR time and counts per (algo, n)

Design notes:
- For each size n we generate ONE dataset; every algorithm sorts its own copy.
- On timeout, error or invalid output for an algorithm at size n, larger
  sizes are skipped for that algorithm.
"""

from __future__ import annotations

import argparse
import datetime as _dt
import json
import os
import platform
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple

import numpy as np
import pandas as pd
import psutil
import yaml
from rich.console import Console
from rich.table import Table
from tqdm import tqdm

from sortkit.algorithms import SortResult, get_algorithm
from sortkit.bench.measure import time_sort_call
from sortkit.datasets import make_dataset

_console = Console()

REQUIRED_KEYS = [
    "experiment_name",
    "output_dir",
    "seed",
    "repeats",
    "warmup",
    "disable_gc",
    "timeout_seconds",
    "dataset",
    "sizes",
    "algorithms",
]
SUMMARY_COLUMNS = [
    "algo",
    "n",
    "samples_ok",
    "median_ns",
    "iqr_ns",
    "min_ns",
    "max_ns",
    "compare_count",
    "swap_count",
]


@dataclass(frozen=True)
class AlgoSpec:
    name: str
    sort_fn: Callable[[List[Any]], SortResult]


# ------------------------- helpers: IO & meta ------------------------- #

def _load_yaml(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f)
    if not isinstance(cfg, dict):
        raise ValueError(f"Config {path} must be a YAML mapping")
    return cfg


def _write_yaml(obj: Dict[str, Any], path: Path) -> None:
    with path.open("w", encoding="utf-8") as f:
        yaml.safe_dump(obj, f, sort_keys=False)


def _append_jsonl(obj: Dict[str, Any], path: Path) -> None:
    with path.open("a", encoding="utf-8") as f:
        f.write(json.dumps(obj, separators=(",", ":"), ensure_ascii=False))
        f.write("\n")


def _ensure_run_dir(base_dir: Path, experiment_name: str) -> Path:
    base_dir.mkdir(parents=True, exist_ok=True)
    stamp = _dt.datetime.now().strftime("%Y%m%d_%H%M%S")
    run_dir = base_dir / f"{stamp}_{experiment_name}"
    suffix = 1
    while run_dir.exists():
        run_dir = base_dir / f"{stamp}_{experiment_name}_{suffix}"
        suffix += 1
    run_dir.mkdir()
    return run_dir


def _git_commit_short() -> Optional[str]:
    try:
        out = subprocess.check_output(["git", "rev-parse", "--short", "HEAD"], stderr=subprocess.DEVNULL)
    except (OSError, subprocess.CalledProcessError):
        return None
    return out.decode("utf-8").strip()


def _gather_meta() -> Dict[str, Any]:
    return {
        "python": platform.python_version(),
        "numpy": np.__version__,
        "pandas": pd.__version__,
        "psutil": psutil.__version__,
        "git_commit": _git_commit_short(),
        "machine": {
            "cpu": platform.processor() or platform.machine(),
            "cores_logical": psutil.cpu_count(logical=True),
            "cores_physical": psutil.cpu_count(logical=False),
            "ram_gb": round(psutil.virtual_memory().total / (1024**3), 2),
            "platform": platform.platform(),
        },
        "start_time": _dt.datetime.now().isoformat(timespec="seconds"),
        "pid": os.getpid(),
        "cwd": str(Path.cwd()),
    }


def _resolve_algorithms(cfg_algos: List[Any]) -> List[AlgoSpec]:
    """Accept either bare names or {"name": ...} entries."""
    specs: List[AlgoSpec] = []
    seen = set()
    for entry in cfg_algos:
        name = entry.get("name") if isinstance(entry, dict) else entry
        if not name or not isinstance(name, str):
            raise ValueError("Each algorithm must be a name or have a string 'name' field")
        if name in seen:
            raise ValueError(f"Duplicate algorithm name in config: {name}")
        seen.add(name)
        specs.append(AlgoSpec(name=name, sort_fn=get_algorithm(name).sort))
    return specs


# ------------------------- summary ------------------------- #

def _iqr(s: pd.Series) -> float:
    return s.quantile(0.75) - s.quantile(0.25)


def _aggregate_summary(jsonl_path: Path) -> pd.DataFrame:
    if not jsonl_path.exists():
        return pd.DataFrame(columns=SUMMARY_COLUMNS)
    df = pd.read_json(jsonl_path, lines=True)
    if "time_ns" not in df.columns:
        return pd.DataFrame(columns=SUMMARY_COLUMNS)
    # Status lines carry no time_ns.
    df = df[df["time_ns"].notna()]
    if df.empty:
        return pd.DataFrame(columns=SUMMARY_COLUMNS)

    out = (
        df.groupby(["algo", "n"], as_index=False)
        .agg(
            samples_ok=("time_ns", "count"),
            median_ns=("time_ns", "median"),
            iqr_ns=("time_ns", _iqr),
            min_ns=("time_ns", "min"),
            max_ns=("time_ns", "max"),
            compare_count=("compare_count", "max"),
            swap_count=("swap_count", "max"),
        )
    )
    int_cols = ["median_ns", "iqr_ns", "min_ns", "max_ns", "compare_count", "swap_count"]
    out[int_cols] = out[int_cols].astype("int64")
    return out[SUMMARY_COLUMNS].sort_values(["algo", "n"], ignore_index=True)


def _print_rich_summary(summary: pd.DataFrame, sizes: List[int]) -> None:
    table = Table(title="Benchmark Summary (median ± IQR in ms, compares/swaps)")
    table.add_column("Algorithm", style="bold")
    picks: List[Tuple[str, int]] = []
    for npick in dict.fromkeys([sizes[0], sizes[len(sizes) // 2], sizes[-1]]):
        picks.append((f"n={npick}", npick))
        table.add_column(f"n={npick}", justify="right")

    for algo in summary["algo"].unique():
        row = [f"[bold]{algo}[/]"]
        for _, npick in picks:
            s = summary[(summary["algo"] == algo) & (summary["n"] == npick)]
            if s.empty:
                row.append("—")
                continue
            r = s.iloc[0]
            row.append(
                f"{r['median_ns'] / 1e6:.2f} ± {r['iqr_ns'] / 1e6:.2f}\n"
                f"{int(r['compare_count'])}/{int(r['swap_count'])}"
            )
        table.add_row(*row)
    _console.print()
    _console.print(table)
    _console.print()


# ------------------------- core runner ------------------------- #

def run_experiment(config_path: Path) -> Path:
    cfg = _load_yaml(config_path)

    missing = [k for k in REQUIRED_KEYS if k not in cfg]
    if missing:
        raise ValueError(f"Missing required config keys: {missing}")

    for key, kind in (("sizes", list), ("algorithms", list), ("dataset", dict)):
        if not isinstance(cfg[key], kind):
            raise ValueError(f"Config '{key}' must be a {kind.__name__}; got {cfg[key]!r}")
    if not all(isinstance(n, int) and not isinstance(n, bool) for n in cfg["sizes"]):
        raise ValueError("Config 'sizes' entries must be integers")

    experiment_name = str(cfg["experiment_name"])
    output_dir = Path(cfg["output_dir"])
    sizes: List[int] = list(cfg["sizes"])
    repeats = int(cfg["repeats"])
    warmup = bool(cfg["warmup"])
    disable_gc = bool(cfg["disable_gc"])
    timeout_seconds = float(cfg["timeout_seconds"])
    validate = bool(cfg.get("validate", True))
    dataset_spec: Dict[str, Any] = dict(cfg["dataset"])

    if not sizes or any(n < 0 for n in sizes):
        raise ValueError("Config 'sizes' must be a non-empty list of nonnegative integers")

    algos = _resolve_algorithms(cfg["algorithms"])

    run_dir = _ensure_run_dir(output_dir, experiment_name)
    results_path = run_dir / "results.jsonl"
    summary_path = run_dir / "summary.csv"
    meta_path = run_dir / "meta.json"
    cfg_resolved_path = run_dir / "config_resolved.yaml"

    _write_yaml(cfg, cfg_resolved_path)
    with meta_path.open("w", encoding="utf-8") as f:
        json.dump(_gather_meta(), f, indent=2)

    rng = np.random.default_rng(int(cfg["seed"]))
    skipped = {a.name: False for a in algos}

    _console.print(f"[bold green]Run directory:[/bold green] {run_dir}")
    _console.print(f"[bold]Experiment:[/bold] {experiment_name}")
    _console.print(f"[bold]Algorithms:[/bold] {', '.join(a.name for a in algos)}")
    _console.print()

    for n in tqdm(sizes, desc="Sizes", unit="n"):
        base_a = make_dataset(n, dataset_spec, rng)

        for a_spec in algos:
            if skipped[a_spec.name]:
                continue

            res = time_sort_call(
                algo_name=a_spec.name,
                algo_fn=a_spec.sort_fn,
                a=base_a,
                repeats=repeats,
                warmup=warmup,
                disable_gc=disable_gc,
                timeout_seconds=timeout_seconds,
                validate=validate,
            )

            for trial_idx, t_ns in enumerate(res["samples_ns"]):
                _append_jsonl(
                    {
                        "algo": a_spec.name,
                        "n": n,
                        "dataset": dataset_spec,
                        "trial": trial_idx,
                        "time_ns": int(t_ns),
                        "compare_count": res["compare_count"],
                        "swap_count": res["swap_count"],
                    },
                    results_path,
                )

            status = res["status"]
            if status != "ok":
                skipped[a_spec.name] = True
                _append_jsonl(
                    {
                        "algo": a_spec.name,
                        "n": n,
                        "status": status,
                        "error": res["error"],
                        "timed_out_on_repeat": res["timed_out_on_repeat"],
                    },
                    results_path,
                )
                _console.print(f"[yellow]{a_spec.name}: {status} at n={n}; skipping larger sizes[/yellow]")

    summary_df = _aggregate_summary(results_path)
    summary_df.to_csv(summary_path, index=False)
    if not summary_df.empty:
        _print_rich_summary(summary_df, sizes)

    _console.print("[bold green]Done.[/bold green] Wrote:")
    for path in (results_path, summary_path, meta_path, cfg_resolved_path):
        _console.print(f" - {path}")

    return run_dir


# ------------------------- CLI ------------------------- #

def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Time the sorting algorithms from a YAML config.")
    p.add_argument("config", type=str, help="Path to YAML experiment config")
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    config_path = Path(args.config).resolve()
    if not config_path.exists():
        raise SystemExit(f"Config file not found: {config_path}")
    try:
        run_experiment(config_path)
    except Exception as e:
        _console.print(f"[bold red]Runner failed:[/bold red] {e!r}")
        raise


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""
Batch maze runner.

This script is meant for comparing search algorithms over many mazes:

- Solve every maze file in batch_config.MAZE_DIR with every algorithm in
  batch_config.ALGORITHMS (no output.txt / PNG per run).
- Collect all diagnostics into a single CSV file for analysis.

High-level behavior
-------------------

1. Build the list of (maze file, algorithm) pairs.
2. For each pair, load the maze, solve it, and build the same summary
   dict as main.py writes to summary.json.
3. Use multiprocessing to parallelize runs across CPU cores.
4. Flatten the summary dict + parameters into a single row.
5. Append rows to OUTPUT_CSV (header taken from the existing file if any).

Usage
-----

From the repo root:

    python batch_run.py

Then plot the results:

    python plot_utils.py
"""

import csv
import itertools
import multiprocessing as mp
from pathlib import Path
from typing import Dict, Any, Iterator, List, Optional, Sequence
import traceback

from batch_config import ALGORITHMS, CPU_COUNT, MAZE_DIR, OUTPUT_CSV
from maze import Grid
from pathfinding import get_algorithm
from report import summary_dict


def iter_jobs(maze_files: Sequence[Path], algorithms: Sequence[str]) -> Iterator[Dict[str, Any]]:
    """Yield one parameter dict per (maze file, algorithm) pair."""
    for maze_path, algo_name in itertools.product(maze_files, algorithms):
        yield {"maze": str(maze_path), "path_algo_name": algo_name}


def flatten_dict(
    d: Dict[str, Any],
    parent_key: str = "",
    sep: str = ".",
) -> Dict[str, Any]:
    """
    Turn nested dicts into a flat dict with dotted keys:

        {"a": {"b": 1}, "c": 2}  ->  {"a.b": 1, "c": 2}
    """
    items: Dict[str, Any] = {}
    for k, v in d.items():
        new_key = f"{parent_key}{sep}{k}" if parent_key else k
        if isinstance(v, dict):
            items.update(flatten_dict(v, new_key, sep=sep))
        else:
            items[new_key] = v
    return items


def run_single_experiment(maze: str, path_algo_name: str) -> Dict[str, Any]:
    """Solve one maze with one algorithm and return a flat dict of metrics."""
    grid = Grid.load(maze)
    algo = get_algorithm(path_algo_name)
    algo.reset_stats()
    result = algo.solve(grid)
    return flatten_dict(summary_dict(grid, result))


def run_one(params: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    """
    Worker function for each process.

    - Calls run_single_experiment(**params).
    - Returns merged {params..., flat_summary...} dict.
    - If the run fails, returns None and prints an error.
    """
    params = dict(params)

    try:
        metrics = run_single_experiment(**params)
    except Exception as e:
        print(f"[ERROR] run_single_experiment failed for params={params}: {e}")
        traceback.print_exc()
        # returning None tells the caller to skip this run
        return None

    merged: Dict[str, Any] = {**params, **metrics}
    return merged


def find_mazes(maze_dir: str) -> List[Path]:
    return sorted(Path(maze_dir).glob("*.txt"))


def main_batch(
    maze_dir: str = MAZE_DIR,
    algorithms: Sequence[str] = tuple(ALGORITHMS),
    out_csv: str = OUTPUT_CSV,
    cpu_count: Optional[int] = CPU_COUNT,
) -> int:
    """Run every job and append rows to out_csv. Returns the number of rows written."""
    jobs = list(iter_jobs(find_mazes(maze_dir), algorithms))
    total = len(jobs)
    if total == 0:
        print(f"No mazes to run. Check {maze_dir!r} and ALGORITHMS.")
        return 0

    print(f"Total runs: {total}")

    out_path = Path(out_csv)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    fieldnames: Optional[List[str]] = None
    if out_path.exists():
        print(f"Appending to existing CSV: {out_path}")
        with out_path.open("r", newline="") as f:
            reader = csv.reader(f)
            existing_header = next(reader, [])
        fieldnames = existing_header or None

    written = 0
    start_index = 0

    # No usable header yet: run the first job synchronously to infer it.
    if fieldnames is None:
        print("Running first job synchronously to infer CSV columns...")
        first_row = None
        while first_row is None and start_index < total:
            first_row = run_one(jobs[start_index])
            start_index += 1
        if first_row is None:
            print("Every run failed; nothing written.")
            return 0

        fieldnames = ["maze", "path_algo_name"] + sorted(
            k for k in first_row if k not in ("maze", "path_algo_name")
        )
        with out_path.open("w", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=fieldnames, extrasaction="ignore")
            writer.writeheader()
            writer.writerow(first_row)
        written = 1
        print(f"Created new CSV and wrote first row to {out_path}")

    remaining = jobs[start_index:]
    if not remaining:
        print(f"All done. Results in {out_path}")
        return written

    n_procs = min(cpu_count or mp.cpu_count(), len(remaining))
    print(f"Running remaining {len(remaining)} runs using {n_procs} processes ...")

    with out_path.open("a", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=fieldnames, extrasaction="ignore")
        with mp.Pool(processes=n_procs) as pool:
            for row in pool.imap_unordered(run_one, remaining):
                if row is None:
                    # this run failed; already logged, so just skip it
                    continue
                writer.writerow(row)
                f.flush()
                written += 1

    print(f"All done. {written} rows written to {out_path}")
    return written


if __name__ == "__main__":
    main_batch()

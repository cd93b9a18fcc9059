# batch_config.py
from __future__ import annotations

from typing import List

# ---------------------------------------------------------------------------
# CPU usage for batch_run.py
# ---------------------------------------------------------------------------
# If CPU_COUNT is None, batch_run.py will use mp.cpu_count().
# Otherwise, it will use exactly this many worker processes.
#
# Example:
#   CPU_COUNT = 8        # use 8 processes
#   CPU_COUNT = None     # auto-detect from the machine
CPU_COUNT: int | None = None

# ---------------------------------------------------------------------------
# Inputs / outputs
# ---------------------------------------------------------------------------
# Every *.txt file in MAZE_DIR is solved once per algorithm below.
MAZE_DIR: str = "mazes"

# Rows are appended; delete the file to start a fresh comparison.
OUTPUT_CSV: str = "outputs_batch/batch_results.csv"

# ---------------------------------------------------------------------------
# Algorithms to compare
# ---------------------------------------------------------------------------
#   "TurnAStar"     - best-first search with the turn-aware heuristic.
#   "TurnDijkstra"  - same engine with h = 0 (uniform cost), reference costs.
ALGORITHMS: List[str] = ["TurnAStar", "TurnDijkstra"]

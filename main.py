import sys
from typing import Optional

from config import Config
from maze import Grid, MazeError
from pathfinding import get_algorithm
from pathfinding.base import SearchResult
from report import format_report, format_summary, mark_path, reconstruct_path, summary_dict
from io_utils import save_summary, write_text
from viz import draw_maze


def run(cfg: Config) -> SearchResult:
    """
    Solve one maze end to end:
      load -> solve -> mark path -> write output.txt -> echo summary.

    Fatal problems (unreadable file, malformed maze, missing start/end)
    propagate to the caller. An unreachable end is not fatal: the output
    is still written, without path arrows and with cost "none".
    """

    def _log(msg: str) -> None:
        if cfg.log_events:
            print(msg)

    # ------------------------------------------------------------------
    # 1) Load the maze
    # ------------------------------------------------------------------
    grid = Grid.load(cfg.input_path)
    _log(f"[LOAD] {cfg.input_path} ({grid.width} x {grid.height})")

    # ------------------------------------------------------------------
    # 2) Search
    # ------------------------------------------------------------------
    algo = get_algorithm(cfg.path_algo_name)
    result = algo.solve(grid)
    _log(
        f"[SOLVE] {algo.name}: cost={result.path_cost} "
        f"search_count={result.search_count} in {algo.last_runtime:.4f}s"
    )

    if result.found:
        mark_path(grid, reconstruct_path(result))
    else:
        print("No path found to the goal.", file=sys.stderr)

    # ------------------------------------------------------------------
    # 3) Outputs
    # ------------------------------------------------------------------
    write_text(cfg.output_path, format_report(grid, result))
    _log(f"[WRITE] {cfg.output_path}")

    if cfg.save_summary:
        save_summary(summary_dict(grid, result), cfg.summary_path)
        _log(f"[WRITE] {cfg.summary_path}")

    if cfg.draw_png:
        draw_maze(grid, cfg.png_path, title=f"{algo.name}: cost {result.path_cost}")
        _log(f"[WRITE] {cfg.png_path}")

    # short output for the console
    print(format_summary(grid, result), end="")
    return result


def main(cfg: Optional[Config] = None) -> int:
    """
    Single-run entry point.

    Typical usage:
      1. Put the maze in input.txt (or edit Config.working_dir in config.py).
      2. Run:
             python main.py
      3. Read output.txt next to the input.
    """
    if cfg is None:
        cfg = Config()

    try:
        run(cfg)
    except (OSError, MazeError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

# config.py
from dataclasses import dataclass
from pathlib import Path


@dataclass
class Config:
    # directory holding the maze and receiving the outputs
    working_dir: str = "."
    input_name: str = "input.txt"
    output_name: str = "output.txt"

    # see pathfinding/ for the registered names (TurnAStar, TurnDijkstra)
    path_algo_name: str = "TurnAStar"

    log_events: bool = True

    # optional extra outputs next to output.txt
    save_summary: bool = False     # summary.json
    draw_png: bool = False         # solution.png

    @property
    def input_path(self) -> Path:
        return Path(self.working_dir) / self.input_name

    @property
    def output_path(self) -> Path:
        return Path(self.working_dir) / self.output_name

    @property
    def summary_path(self) -> Path:
        return Path(self.working_dir) / "summary.json"

    @property
    def png_path(self) -> Path:
        return Path(self.working_dir) / "solution.png"

import matplotlib

matplotlib.use("Agg")

from pathlib import Path

import pytest

MAZE_DIR = Path(__file__).resolve().parent.parent / "mazes"


@pytest.fixture
def maze_dir() -> Path:
    return MAZE_DIR


@pytest.fixture
def write_maze(tmp_path):
    """Write maze text into tmp_path/<name> and return the path."""

    def _write(text: str, name: str = "input.txt") -> Path:
        path = tmp_path / name
        path.write_text(text.strip("\n") + "\n", encoding="utf-8")
        return path

    return _write

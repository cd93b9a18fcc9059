# io_utils.py
from pathlib import Path
import json
from typing import Any, List, Union

PathLike = Union[str, Path]


def read_lines(path: PathLike) -> List[str]:
    """
    Read a text file and return its non-blank lines, without line endings.

    Raises the usual OSError family (FileNotFoundError, PermissionError, ...)
    if the file cannot be opened. An empty result is returned as-is; callers
    decide whether that is an error.
    """
    path = Path(path)
    with path.open("r", encoding="utf-8") as f:
        lines = [line.rstrip("\r\n") for line in f]
    return [line for line in lines if line]


def write_text(path: PathLike, text: str) -> None:
    path = Path(path)
    with path.open("w", encoding="utf-8", newline="\n") as f:
        f.write(text)


def save_summary(summary: dict[str, Any], out_path: PathLike) -> None:
    """
    Save the diagnostics of one solve as a JSON file.

    Parameters
    ----------
    summary : dict[str, Any]
        Nested dictionary of metrics (grid size, algorithm, cost, runtime ...).
        Typically produced by report.summary_dict().
    out_path : str or Path
        Destination file, e.g. "<working_dir>/summary.json".

    Notes
    -----
    The JSON structure is nested ("grid.width", "search.path_cost") so that
    batch_run.py can flatten it into CSV columns with the same names.
    """
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with out_path.open("w", encoding="utf-8") as f:
        json.dump(summary, f, indent=2)

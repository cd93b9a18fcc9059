#!/usr/bin/env python3
"""
plot_utils.py

Bar plots of batch_run.py results using seaborn.

Typical workflow:

1) Run the batch comparison:
       python batch_run.py

2) Plot results:
   - From Python:
        from plot_utils import plot_metrics_from_csv

        plot_metrics_from_csv(
            csv_path="outputs_batch/batch_results.csv",
            metrics=["search.search_count", "search.solve_time_ms"],
            output_dir="outputs_batch/plots",
            show=False,
        )

   - Or from the command line (using the DEFAULT_* constants at the bottom):
        python plot_utils.py
"""

from pathlib import Path
from typing import Dict, List, Optional, Sequence, Union

import pandas as pd
import matplotlib.pyplot as plt
import seaborn as sns


PathLike = Union[str, Path]


def plot_metrics_from_csv(
    csv_path: PathLike,
    metrics: Sequence[str],
    x: str = "maze",
    hue: str = "search.algorithm",
    output_dir: Optional[PathLike] = None,
    show: bool = True,
    seaborn_style: str = "whitegrid",
    palette_name: str = "colorblind",
    y_axis_labels: Optional[Dict[str, str]] = None,
    log_scale: bool = False,
) -> List[Path]:
    """
    Read a batch CSV and draw one grouped bar plot per metric.

    Parameters
    ----------
    csv_path : str or Path
        Path to the CSV written by batch_run.py.
    metrics : list[str]
        Numeric columns to plot, e.g. ['search.search_count'].
    x : str, default "maze"
        Column used for the x-axis groups. Maze paths are shortened to
        their file name.
    hue : str, default "search.algorithm"
        Column used to split bars within a group.
    output_dir : str or Path or None
        If provided, plots are saved as PNG files in that directory.
    show : bool, default True
        If True, show plots interactively via plt.show(); otherwise close them.
    log_scale : bool, default False
        Use a log y-axis (useful for runtimes).

    Returns
    -------
    list[Path]
        Files written (empty if output_dir is None).
    """
    csv_path = Path(csv_path)
    if not csv_path.exists():
        raise FileNotFoundError(f"CSV not found: {csv_path}")

    df = pd.read_csv(csv_path)

    for col in [x, hue, *metrics]:
        if col not in df.columns:
            raise ValueError(
                f"column '{col}' not found in CSV. "
                f"Available columns include: {list(df.columns)[:20]} ..."
            )

    if x == "maze":
        df[x] = df[x].map(lambda p: Path(str(p)).name)

    if output_dir is not None:
        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)

    sns.set_style(seaborn_style)
    sns.set_context("paper", font_scale=1.2)

    written: List[Path] = []
    for metric in metrics:
        sub = df[[x, hue, metric]].dropna()
        if sub.empty:
            print(f"[WARN] No data for metric '{metric}' after dropping NaNs. Skipping.")
            continue

        print(f"\n[STATS] {metric}")
        print(sub.groupby([x, hue])[metric].median().to_string())

        fig, ax = plt.subplots(figsize=(max(6.0, 1.5 * sub[x].nunique()), 5))
        sns.barplot(data=sub, x=x, y=metric, hue=hue, palette=palette_name, ax=ax)

        ax.set_title(f"{metric} by {hue}", fontsize=16)
        ax.set_xlabel(x)
        ax.set_ylabel(y_axis_labels.get(metric, metric) if y_axis_labels else metric)
        if log_scale:
            ax.set_yscale("log")
        fig.tight_layout()

        if output_dir is not None:
            fname = output_dir / f"bar_{metric.replace('.', '_')}.png"
            fig.savefig(fname, dpi=150, bbox_inches="tight")
            written.append(fname)
            print(f"Saved bar plot for '{metric}' to {fname}")

        if show:
            plt.show()
        else:
            plt.close(fig)

    return written


# ---------------------------------------------------------------------
# Default behavior when running this file directly
# ---------------------------------------------------------------------
DEFAULT_CSV = "outputs_batch/batch_results.csv"
DEFAULT_METRICS = ["search.search_count", "search.solve_time_ms"]
DEFAULT_OUTPUT_DIR = "outputs_batch/plots"
DEFAULT_SHOW = False  # set to True for interactive windows


def _run_with_defaults() -> None:
    print(f"Reading CSV: {DEFAULT_CSV}")
    print(f"Metrics: {DEFAULT_METRICS}")
    print(f"Output dir: {DEFAULT_OUTPUT_DIR!r}, show={DEFAULT_SHOW}")

    plot_metrics_from_csv(
        csv_path=DEFAULT_CSV,
        metrics=DEFAULT_METRICS,
        output_dir=DEFAULT_OUTPUT_DIR,
        show=DEFAULT_SHOW,
        y_axis_labels={
            "search.search_count": "Nodes relaxed",
            "search.solve_time_ms": "Solve time (ms)",
        },
    )


if __name__ == "__main__":
    _run_with_defaults()

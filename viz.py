# viz.py
from __future__ import annotations
from typing import Optional
from pathlib import Path

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.patches import Patch

from maze import Grid, TileKind


def draw_maze(grid: Grid, out_path: str | Path, title: Optional[str] = None) -> None:
    """
    Draw a snapshot of a (possibly solved) maze:
      - floor: light background
      - walls: dark gray
      - start: purple star
      - end: green cross
      - path tiles: blue arrows in the direction they were entered
    """
    width, height = grid.width, grid.height
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    # --- Color palette (RGB in 0–1) ---
    bgcolor    = np.array([0.96, 0.96, 0.96])  # light gray background
    wall_color = np.array([0.30, 0.30, 0.30])  # dark gray
    path_color = np.array([0.80, 0.89, 0.97])  # pale blue under the arrows

    img = np.zeros((height, width, 3), dtype=float)
    img[:, :, :] = bgcolor

    start = end = None
    px, py, du, dv = [], [], [], []
    for t in grid.tiles:
        x, y = t.pos.x, t.pos.y
        if t.kind is TileKind.WALL:
            img[y, x] = wall_color
        elif t.kind is TileKind.START:
            start = (x, y)
        elif t.kind is TileKind.END:
            end = (x, y)

        if t.state.on_path and t.kind is TileKind.EMPTY:
            img[y, x] = path_color
            d = t.state.facing.delta
            px.append(x)
            py.append(y)
            du.append(d.x)
            dv.append(d.y)

    fig, ax = plt.subplots(figsize=(max(4.0, width / 2.0), max(4.0, height / 2.0)))
    ax.imshow(img, origin="upper")

    # Grid lines (subtle)
    ax.set_xticks(np.arange(-0.5, width, 1), minor=True)
    ax.set_yticks(np.arange(-0.5, height, 1), minor=True)
    ax.grid(which="minor", color="0.85", linestyle="-", linewidth=0.4)

    handles = []

    if px:
        # image y grows downwards, quiver v grows upwards
        h_path = ax.quiver(
            px, py, du, [-v for v in dv],
            color="#1f77b4",
            pivot="middle",
            scale=1.4,
            scale_units="xy",
            width=0.006,
            label="path",
        )
        handles.append(h_path)

    if start is not None:
        handles.append(ax.scatter(
            [start[0]], [start[1]],
            marker="*", s=150, c="#9467bd",
            edgecolors="white", linewidths=1.0, label="start",
        ))
    if end is not None:
        handles.append(ax.scatter(
            [end[0]], [end[1]],
            marker="X", s=110, c="#2ca02c",
            edgecolors="white", linewidths=1.0, label="end",
        ))

    handles.append(Patch(facecolor=wall_color, edgecolor="black", label="wall"))

    ax.set_xlim(-0.5, width - 0.5)
    ax.set_ylim(height - 0.5, -0.5)
    ax.set_aspect("equal")
    ax.set_xticks([])
    ax.set_yticks([])

    fig.suptitle(title or f"Maze {width} x {height}", fontsize=16, y=0.98)
    fig.legend(
        handles=handles,
        loc="upper center",
        bbox_to_anchor=(0.5, 0.94),
        ncol=len(handles),
        fontsize=9,
        frameon=False,
    )
    fig.tight_layout(rect=[0.0, 0.0, 1.0, 0.92])

    fig.savefig(out_path, dpi=150)
    plt.close(fig)

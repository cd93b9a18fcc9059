# report.py
from __future__ import annotations

from typing import Any, Dict, List

from maze import Grid
from pathfinding.base import Node, SearchResult


def reconstruct_path(result: SearchResult) -> List[Node]:
    """
    Walk the predecessor map from the end node back to the start node.

    Returns the nodes in start -> end order, or [] if no path was found.
    """
    if not result.found or result.end_node is None:
        return []

    cur = result.end_node
    path = [cur]
    while cur != result.start_node:
        cur = result.parents[cur]
        path.append(cur)
    path.reverse()
    return path


def mark_path(grid: Grid, path: List[Node]) -> None:
    """Flag every tile on `path` and record the direction it was entered."""
    for idx, facing in path:
        state = grid.tiles[idx].state
        state.on_path = True
        state.facing = facing


def _cost_text(result: SearchResult) -> str:
    return "none" if result.path_cost is None else str(result.path_cost)


def format_summary(grid: Grid, result: SearchResult) -> str:
    return (
        f"Dimensions: {grid.width} x {grid.height}\n"
        f"Solved in: {result.solve_time_ms} ms. Search count: {result.search_count}\n"
        f"Best path cost {_cost_text(result)} points\n"
    )


def format_report(grid: Grid, result: SearchResult) -> str:
    """Summary lines followed by the rendered maze, one line per row."""
    return format_summary(grid, result) + "".join(row + "\n" for row in grid.rows())


def summary_dict(grid: Grid, result: SearchResult) -> Dict[str, Any]:
    path = reconstruct_path(result)
    turns = sum(1 for a, b in zip(path, path[1:]) if a[1] is not b[1])
    return {
        "grid": {"width": grid.width, "height": grid.height},
        "search": {
            "algorithm": result.algorithm,
            "found": result.found,
            "path_cost": result.path_cost,
            "search_count": result.search_count,
            "solve_time_ms": result.solve_time_ms,
        },
        "path": {
            "tiles": len(path),
            "moves": max(len(path) - 1, 0),
            "turns": turns,
        },
    }

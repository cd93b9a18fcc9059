# pathfinding/turn_astar.py
from __future__ import annotations

from itertools import count
from time import perf_counter
from heapq import heappush, heappop
from typing import Dict, List, Optional, Tuple

from maze import Direction, Grid, MOVES, Position, TileKind
from .base import MOVE_COST, TURN_COST, Node, PathfindingAlgorithm, SearchResult


def move_cost(facing: Direction, move_dir: Direction) -> int:
    """1 to keep going straight, 1001 to rotate into a new facing and step."""
    if move_dir is facing:
        return MOVE_COST
    return MOVE_COST + TURN_COST


def turn_heuristic(a: Position, facing: Direction, b: Position) -> int:
    """
    Estimate of the cost from tile a (arrived with `facing`) to goal b.

    Manhattan distance, plus one turn if we are not facing the way we
    want to go (horizontal mismatch checked first), plus one more if the
    goal is not on the same row or column.
    """
    manhattan = abs(a.x - b.x) + abs(a.y - b.y)
    is_straight = a.x == b.x or a.y == b.y

    if a.x < b.x:
        desired = Direction.EAST
    elif a.x > b.x:
        desired = Direction.WEST
    elif a.y < b.y:
        desired = Direction.SOUTH
    else:
        desired = Direction.NORTH

    rotation_cost = TURN_COST if facing is not desired else 0
    if not is_straight:
        rotation_cost += TURN_COST

    return manhattan + rotation_cost


class TurnAStarPlanner(PathfindingAlgorithm):
    """
    Best-first search over (tile, facing) nodes on a 4-connected maze.

    Stepping forward costs 1, stepping in a new direction costs 1001.
    The frontier is ordered by (f, h, seq): lowest f first, ties go to the
    node with the smaller h, then FIFO.

    turn_heuristic() can overestimate the remaining cost by at most one
    turn, so the first goal pop is not necessarily the cheapest one. The
    search keeps popping until the frontier's f reaches
    best_cost + heuristic_slack; after that no cheaper route can remain.
    """

    name = "TurnAStar"
    heuristic_slack: int = TURN_COST

    def __init__(self) -> None:
        # timing stats
        self.total_runtime: float = 0.0
        self.call_count: int = 0
        self.last_runtime: float = 0.0

    # ---- stats API ----

    def reset_stats(self) -> None:
        self.total_runtime = 0.0
        self.call_count = 0
        self.last_runtime = 0.0

    def _update_stats(self, dt: float) -> None:
        self.last_runtime = dt
        self.total_runtime += dt
        self.call_count += 1

    # ---- heuristic hook ----

    def heuristic(self, pos: Position, facing: Direction, goal: Position) -> int:
        return turn_heuristic(pos, facing, goal)

    # ---- main planning API ----

    def solve(self, grid: Grid) -> SearchResult:
        """
        Search from the start tile to the end tile of `grid`.

        Resets and then fills in every tile's SearchState with the cheapest
        arrival seen. Returns a SearchResult; path_cost is None if the end
        cannot be reached. Raises ConfigError if the maze lacks a unique
        start or end.
        """
        t0 = perf_counter()

        grid.reset_search_state()
        start_idx, end_idx = grid.find_endpoints()
        goal = grid.tiles[end_idx].pos

        # the start always faces east
        start_tile = grid.tiles[start_idx]
        start_node: Node = (start_idx, Direction.EAST)
        h0 = self.heuristic(start_tile.pos, Direction.EAST, goal)
        start_tile.state.facing = Direction.EAST
        start_tile.state.g_cost = 0
        start_tile.state.h_cost = h0

        g_cost: Dict[Node, int] = {start_node: 0}
        parent: Dict[Node, Node] = {}
        search_count = 1

        # open set: (f, h, seq, node)
        seq = count()
        open_heap: List[Tuple[int, int, int, Node]] = []
        heappush(open_heap, (h0, h0, next(seq), start_node))

        best_cost: Optional[int] = None
        best_node: Optional[Node] = None

        while open_heap:
            f_cur, h_cur, _, cur = heappop(open_heap)

            if best_cost is not None and f_cur >= best_cost + self.heuristic_slack:
                break

            g_cur = g_cost[cur]
            if f_cur - h_cur != g_cur:
                # stale entry, the node was pushed again with a lower g
                continue

            idx, facing = cur
            if idx == end_idx:
                if best_cost is None or g_cur < best_cost:
                    best_cost = g_cur
                    best_node = cur
                continue

            pos = grid.tiles[idx].pos
            for move_dir in MOVES:
                np = pos + move_dir.delta
                if not grid.in_bounds(np):
                    continue

                n_idx = grid.index(np.x, np.y)
                neighbor = grid.tiles[n_idx]
                if neighbor.kind is TileKind.WALL:
                    continue

                new_g = g_cur + move_cost(facing, move_dir)
                if best_cost is not None and new_g >= best_cost:
                    continue

                nxt: Node = (n_idx, move_dir)
                old_g = g_cost.get(nxt)
                if old_g is not None and new_g >= old_g:
                    continue

                h = self.heuristic(np, move_dir, goal)
                g_cost[nxt] = new_g
                parent[nxt] = cur
                heappush(open_heap, (new_g + h, h, next(seq), nxt))
                search_count += 1

                # per-tile view keeps the cheapest arrival over all facings
                state = neighbor.state
                if state.g_cost is None or new_g < state.g_cost:
                    state.facing = move_dir
                    state.g_cost = new_g
                    state.h_cost = h
                    state.parent = idx

        dt = perf_counter() - t0
        self._update_stats(dt)

        return SearchResult(
            algorithm=self.name,
            path_cost=best_cost,
            search_count=search_count,
            solve_time_ms=int(dt * 1000),
            start_node=start_node,
            end_node=best_node,
            parents=parent,
        )


ALGORITHM = TurnAStarPlanner()

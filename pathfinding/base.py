# pathfinding/base.py
from dataclasses import dataclass, field
from typing import Dict, Optional, Protocol, Tuple

from maze import Direction, Grid

# scoring rules of the puzzle
MOVE_COST = 1
TURN_COST = 1000

# a search node: (tile index, facing on arrival)
Node = Tuple[int, Direction]


@dataclass(frozen=True)
class SearchResult:
    algorithm: str
    path_cost: Optional[int]          # None when the end is unreachable
    search_count: int
    solve_time_ms: int
    start_node: Node
    end_node: Optional[Node] = None
    parents: Dict[Node, Node] = field(default_factory=dict)

    @property
    def found(self) -> bool:
        return self.path_cost is not None


class PathfindingAlgorithm(Protocol):
    name: str
    # Optional timing stats (per algorithm implementation)
    total_runtime: float
    call_count: int
    last_runtime: float

    def solve(self, grid: Grid) -> SearchResult:
        ...

    def reset_stats(self) -> None:
        ...

# pathfinding/turn_dijkstra.py
from maze import Direction, Position
from .turn_astar import TurnAStarPlanner


class TurnDijkstraPlanner(TurnAStarPlanner):
    """
    Uniform-cost search over (tile, facing) nodes.

    Same engine as TurnAStar with h = 0, so the first goal pop is already
    optimal. Slower, but useful as a reference for path costs.
    """

    name = "TurnDijkstra"
    heuristic_slack = 0

    def heuristic(self, pos: Position, facing: Direction, goal: Position) -> int:
        return 0


ALGORITHM = TurnDijkstraPlanner()

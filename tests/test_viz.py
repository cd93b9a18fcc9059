from maze import Grid
from pathfinding.turn_astar import TurnAStarPlanner
from report import mark_path, reconstruct_path
from viz import draw_maze


def test_draw_solved_maze(tmp_path, maze_dir):
    grid = Grid.load(maze_dir / "example1.txt")
    mark_path(grid, reconstruct_path(TurnAStarPlanner().solve(grid)))

    out = tmp_path / "plots" / "solution.png"
    draw_maze(grid, out)

    assert out.exists()
    assert out.stat().st_size > 0


def test_draw_unsolved_maze(tmp_path):
    grid = Grid.from_lines(["#####", "#S#E#", "#####"])
    out = tmp_path / "unsolved.png"
    draw_maze(grid, out, title="no path")
    assert out.exists()

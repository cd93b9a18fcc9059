import pytest

from io_utils import read_lines
from maze import (
    ConfigError,
    Direction,
    FormatError,
    Grid,
    Position,
    Tile,
    TileKind,
    tile_to_char,
)

SMALL = """
#####
#S.E#
#####
"""


def test_position_arithmetic():
    assert Position(1, 2) + Position(3, -1) == Position(4, 1)
    assert Position(1, 2) - Position(3, -1) == Position(-2, 3)
    assert Position(0, 0) + Direction.NORTH.delta == Position(0, -1)


def test_load_sets_dimensions_and_kinds(write_maze):
    grid = Grid.load(write_maze(SMALL))

    assert (grid.width, grid.height) == (5, 3)
    assert grid.get(1, 1).kind is TileKind.START
    assert grid.get(2, 1).kind is TileKind.EMPTY
    assert grid.get(3, 1).kind is TileKind.END
    assert grid.get(0, 0).kind is TileKind.WALL
    assert grid.get(3, 1).pos == Position(3, 1)


def test_blank_lines_are_ignored(write_maze):
    grid = Grid.load(write_maze("#####\n\n#S.E#\n\n#####\n"))
    assert grid.height == 3


def test_empty_file_is_format_error(write_maze):
    with pytest.raises(FormatError):
        Grid.load(write_maze("\n\n"))


def test_short_row_is_format_error(write_maze):
    with pytest.raises(FormatError, match="row lengths"):
        Grid.load(write_maze("#####\n#S.E\n#####"))


def test_unknown_character_is_format_error(write_maze):
    with pytest.raises(FormatError, match="'X'"):
        Grid.load(write_maze("#####\n#SXE#\n#####"))


def test_missing_file_raises_oserror(tmp_path):
    with pytest.raises(OSError):
        Grid.load(tmp_path / "nope.txt")


def test_duplicate_start_loads_but_fails_endpoint_check():
    grid = Grid.from_lines(["######", "#SS.E#", "######"])
    with pytest.raises(ConfigError):
        grid.find_endpoints()


def test_missing_end_fails_endpoint_check():
    grid = Grid.from_lines(["####", "#S.#", "####"])
    with pytest.raises(ConfigError, match="start"):
        grid.find_endpoints()


def test_find_endpoints_returns_indices():
    grid = Grid.from_lines(["#####", "#S.E#", "#####"])
    assert grid.find_endpoints() == (grid.index(1, 1), grid.index(3, 1))


@pytest.mark.parametrize("x, y", [(-1, 0), (5, 0), (0, 3), (0, -1)])
def test_out_of_bounds_access_raises(x, y):
    grid = Grid.from_lines(["#####", "#S.E#", "#####"])
    with pytest.raises(IndexError):
        grid.get(x, y)
    assert not grid.in_bounds(Position(x, y))


def test_render_roundtrips_unsolved_maze(maze_dir):
    lines = read_lines(maze_dir / "example1.txt")
    grid = Grid.from_lines(lines)
    assert grid.render() == "\n".join(lines)


def test_render_path_glyphs():
    grid = Grid.from_lines(["#####", "#S.E#", "#...#", "#####"])
    for x, facing in ((1, Direction.EAST), (2, Direction.EAST), (3, Direction.EAST)):
        grid.get(x, 1).state.on_path = True
        grid.get(x, 1).state.facing = facing
    grid.get(2, 2).state.on_path = True
    grid.get(2, 2).state.facing = Direction.SOUTH

    # start/end keep their own glyphs even when on the path
    assert grid.rows() == ["#####", "#S>E#", "#.v.#", "#####"]


def test_tile_glyph_for_unknown_facing():
    tile = Tile(kind=TileKind.EMPTY, pos=Position(0, 0))
    tile.state.on_path = True
    assert tile_to_char(tile) == "?"
    tile.state.facing = Direction.WEST
    assert tile_to_char(tile) == "<"


def test_reset_search_state_clears_everything():
    grid = Grid.from_lines(["#####", "#S.E#", "#####"])
    state = grid.get(2, 1).state
    state.on_path = True
    state.facing = Direction.NORTH
    state.g_cost = 12
    state.h_cost = 3
    state.parent = 6

    grid.reset_search_state()

    assert state.g_cost is None
    assert state.parent is None
    assert state.facing is Direction.NONE
    assert not state.on_path
    assert state.h_cost == 0

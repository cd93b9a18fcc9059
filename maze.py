# maze.py
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple, Union

from io_utils import read_lines


class MazeError(Exception):
    """Base class for fatal maze problems (bad file, bad layout)."""


class FormatError(MazeError):
    """The maze file is empty, ragged, or contains an unknown character."""


class ConfigError(MazeError):
    """The maze does not have exactly one start and one end."""


@dataclass(frozen=True)
class Position:
    x: int
    y: int

    def __add__(self, other: "Position") -> "Position":
        return Position(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Position") -> "Position":
        return Position(self.x - other.x, self.y - other.y)


class TileKind(Enum):
    EMPTY = "."
    WALL = "#"
    START = "S"
    END = "E"


class Direction(Enum):
    NORTH = 0
    SOUTH = 1
    EAST = 2
    WEST = 3
    NONE = 4

    @property
    def delta(self) -> Position:
        return _DELTAS[self]


_DELTAS: Dict[Direction, Position] = {
    Direction.NORTH: Position(0, -1),
    Direction.SOUTH: Position(0, 1),
    Direction.EAST: Position(1, 0),
    Direction.WEST: Position(-1, 0),
    Direction.NONE: Position(0, 0),
}

# order in which neighbours are tried
MOVES: Tuple[Direction, ...] = (
    Direction.NORTH,
    Direction.SOUTH,
    Direction.EAST,
    Direction.WEST,
)

DIRECTION_GLYPHS: Dict[Direction, str] = {
    Direction.NORTH: "^",
    Direction.SOUTH: "v",
    Direction.EAST: ">",
    Direction.WEST: "<",
}

CHAR_TO_KIND: Dict[str, TileKind] = {kind.value: kind for kind in TileKind}


@dataclass
class SearchState:
    """Per-tile search bookkeeping; reset before every solve."""
    facing: Direction = Direction.NONE
    on_path: bool = False
    g_cost: Optional[int] = None   # None = never reached
    h_cost: int = 0
    parent: Optional[int] = None   # tile index of the predecessor

    def reset(self) -> None:
        self.facing = Direction.NONE
        self.on_path = False
        self.g_cost = None
        self.h_cost = 0
        self.parent = None


@dataclass
class Tile:
    kind: TileKind
    pos: Position
    state: SearchState = field(default_factory=SearchState)


def char_to_kind(c: str) -> Optional[TileKind]:
    return CHAR_TO_KIND.get(c)


def tile_to_char(tile: Tile) -> str:
    """Glyph for a tile: path arrow if marked, otherwise its kind."""
    if tile.state.on_path and tile.kind not in (TileKind.START, TileKind.END):
        return DIRECTION_GLYPHS.get(tile.state.facing, "?")
    return tile.kind.value


@dataclass
class Grid:
    """
    Rectangular maze stored row-major in a flat list.

    Tiles are addressed with (x, y), x = column, y = row, origin top-left.
    index() is checked, so any out-of-range access fails with IndexError
    instead of silently wrapping into the neighbouring row.
    """
    width: int
    height: int
    tiles: List[Tile]

    # ------------------------------------------------------------------ #
    # Loading                                                            #
    # ------------------------------------------------------------------ #
    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "Grid":
        rows = [line for line in lines if line]
        if not rows:
            raise FormatError("File is empty.")

        width = len(rows[0])
        height = len(rows)

        tiles: List[Tile] = []
        for y, row in enumerate(rows):
            if len(row) != width:
                raise FormatError(
                    f"Inconsistent row lengths in maze file: row {y} has "
                    f"{len(row)} characters, expected {width}."
                )
            for x, c in enumerate(row):
                kind = char_to_kind(c)
                if kind is None:
                    raise FormatError(
                        f"Invalid character {c!r} in maze file at ({x}, {y})."
                    )
                tiles.append(Tile(kind=kind, pos=Position(x, y)))

        return cls(width=width, height=height, tiles=tiles)

    @classmethod
    def load(cls, path: Union[str, Path]) -> "Grid":
        return cls.from_lines(read_lines(path))

    # ------------------------------------------------------------------ #
    # Addressing                                                         #
    # ------------------------------------------------------------------ #
    def in_bounds(self, p: Position) -> bool:
        return 0 <= p.x < self.width and 0 <= p.y < self.height

    def index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"({x}, {y}) is outside a {self.width} x {self.height} maze"
            )
        return y * self.width + x

    def get(self, x: int, y: int) -> Tile:
        return self.tiles[self.index(x, y)]

    def tile_at(self, p: Position) -> Tile:
        return self.get(p.x, p.y)

    # ------------------------------------------------------------------ #
    # Search support                                                     #
    # ------------------------------------------------------------------ #
    def reset_search_state(self) -> None:
        for t in self.tiles:
            t.state.reset()

    def find_endpoints(self) -> Tuple[int, int]:
        """
        Return (start_idx, end_idx).

        Raises ConfigError unless the maze holds exactly one start and
        exactly one end.
        """
        starts = [i for i, t in enumerate(self.tiles) if t.kind is TileKind.START]
        ends = [i for i, t in enumerate(self.tiles) if t.kind is TileKind.END]

        if not starts or not ends:
            raise ConfigError("Maze must have a start (S) and an end (E).")
        if len(starts) > 1:
            raise ConfigError(f"Maze has {len(starts)} start tiles (S), expected one.")
        if len(ends) > 1:
            raise ConfigError(f"Maze has {len(ends)} end tiles (E), expected one.")
        return starts[0], ends[0]

    # ------------------------------------------------------------------ #
    # Rendering                                                          #
    # ------------------------------------------------------------------ #
    def rows(self) -> List[str]:
        return [
            "".join(tile_to_char(self.get(x, y)) for x in range(self.width))
            for y in range(self.height)
        ]

    def render(self) -> str:
        return "\n".join(self.rows())

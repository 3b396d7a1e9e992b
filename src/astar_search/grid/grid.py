"""Two-dimensional tile map parsed from the text map format.

The format is a header line ``"<width> <height>"`` followed by one line per
row. ``#`` is a wall, ``s`` the start, ``g`` the goal; every other symbol is
open floor.
"""

import logging
from dataclasses import dataclass, replace
from typing import Iterable, List, Optional

import numpy as np

from .coord import Coord, ORTHOGONAL_OFFSETS, DIAGONAL_OFFSETS
from .tile import Tile

logger = logging.getLogger(__name__)


class MapFormatError(ValueError):
    """Exception raised when a map description cannot be parsed."""
    pass


def _parse_dimensions(line: str) -> List[int]:
    try:
        dimensions = [int(part) for part in line.split()]
    except ValueError:
        raise MapFormatError(f"Invalid dimension line: {line!r}")
    if len(dimensions) != 2:
        raise MapFormatError(f"Dimension line must hold width and height, got {line!r}")
    if dimensions[0] <= 0 or dimensions[1] <= 0:
        raise MapFormatError(f"Dimensions must be positive, got {dimensions[0]}x{dimensions[1]}")
    return dimensions


@dataclass
class Grid:
    """Tile map with a single start and a single goal."""
    start: Coord
    goal: Coord
    width: int
    height: int
    tiles: np.ndarray  # (height, width) int8 array of Tile values

    def __post_init__(self) -> None:
        """Validate grid dimensions."""
        assert self.tiles.shape == (self.height, self.width), \
            f"Expected tiles shape {(self.height, self.width)}, got {self.tiles.shape}"

    @classmethod
    def from_string(cls, text: str) -> 'Grid':
        """Parse a map from its text form.

        Raises:
            MapFormatError: If the text is empty, the header is malformed, or
                the start or goal is missing or given twice
        """
        lines = text.splitlines()
        if not lines or not lines[0].strip():
            raise MapFormatError("Empty map")

        width, height = _parse_dimensions(lines[0])
        tiles = np.full((height, width), Tile.OPEN, dtype=np.int8)
        start: Optional[Coord] = None
        goal: Optional[Coord] = None

        for y, line in enumerate(lines[1:height + 1]):
            for x, symbol in enumerate(line[:width]):
                tile = Tile.from_char(symbol)
                coord = Coord(x, y)
                if tile is Tile.START:
                    if start is not None:
                        raise MapFormatError(
                            f"Start specified at {coord}, but start was already specified at {start}"
                        )
                    start = coord
                elif tile is Tile.GOAL:
                    if goal is not None:
                        raise MapFormatError(
                            f"Goal specified at {coord}, but goal was already specified at {goal}"
                        )
                    goal = coord
                tiles[y, x] = tile

        if start is None:
            raise MapFormatError("Start not specified!")
        if goal is None:
            raise MapFormatError("Goal not specified!")

        logger.debug(f"Parsed {width}x{height} map, start={start}, goal={goal}")
        return cls(start=start, goal=goal, width=width, height=height, tiles=tiles)

    def in_range(self, coord: Coord) -> bool:
        return 0 <= coord.x < self.width and 0 <= coord.y < self.height

    def tile_at(self, coord: Coord) -> Optional[Tile]:
        """Tile at ``coord``, or None outside the map."""
        if self.in_range(coord):
            return Tile(int(self.tiles[coord.y, coord.x]))
        return None

    def expand(self, coord: Coord, connectivity: int = 4) -> List[Coord]:
        """Passable neighbours of ``coord``.

        Order is up, left, right, down, then (for 8-connectivity) the four
        diagonals top row first.
        """
        offsets = ORTHOGONAL_OFFSETS
        if connectivity == 8:
            offsets = ORTHOGONAL_OFFSETS + DIAGONAL_OFFSETS

        neighbors = []
        for offset in offsets:
            neighbor = coord + offset
            tile = self.tile_at(neighbor)
            if tile is not None and tile.passable:
                neighbors.append(neighbor)
        return neighbors

    def set_path(self, path: Iterable[Coord]) -> None:
        """Mark every path cell except start and goal as PATH, in place."""
        for coord in path:
            if not self.in_range(coord):
                continue
            if self.tile_at(coord) not in (Tile.START, Tile.GOAL):
                self.tiles[coord.y, coord.x] = Tile.PATH

    def with_path(self, path: Iterable[Coord]) -> 'Grid':
        """Copy of this grid with ``path`` painted on it."""
        grid = replace(self, tiles=self.tiles.copy())
        grid.set_path(path)
        return grid

    def _render(self, color: bool) -> str:
        rows = []
        for row in self.tiles:
            tiles = (Tile(int(value)) for value in row)
            if color:
                rows.append(''.join(tile.to_color_string() for tile in tiles))
            else:
                rows.append(''.join(tile.to_char() for tile in tiles))
        return '\n'.join(rows)

    def to_string(self) -> str:
        return self._render(color=False)

    def to_color_string(self) -> str:
        return self._render(color=True)

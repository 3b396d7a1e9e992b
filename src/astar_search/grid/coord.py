"""Integer grid coordinates."""

from typing import NamedTuple


class Coord(NamedTuple):
    """Column ``x`` and row ``y`` of a grid cell."""
    x: int
    y: int

    def __add__(self, other: 'Coord') -> 'Coord':
        return Coord(self.x + other.x, self.y + other.y)

    def __repr__(self) -> str:
        return f"({self.x}, {self.y})"

    @staticmethod
    def distance(a: 'Coord', b: 'Coord') -> int:
        """Manhattan distance between two cells."""
        return abs(b.x - a.x) + abs(b.y - a.y)


# Neighbour offsets in expansion order
UP = Coord(0, -1)
LEFT = Coord(-1, 0)
RIGHT = Coord(1, 0)
DOWN = Coord(0, 1)

ORTHOGONAL_OFFSETS = (UP, LEFT, RIGHT, DOWN)
DIAGONAL_OFFSETS = (Coord(-1, -1), Coord(1, -1), Coord(-1, 1), Coord(1, 1))

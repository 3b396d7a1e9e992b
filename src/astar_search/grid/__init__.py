"""Tile map domain for the A* engine.

Parses text maps, exposes them as a search space and renders paths back
onto the map.
"""

from .coord import Coord
from .tile import Tile
from .grid import Grid, MapFormatError
from .space import GridSpace

__all__ = [
    'Coord',
    'Tile',
    'Grid',
    'MapFormatError',
    'GridSpace'
]

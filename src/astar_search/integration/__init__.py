"""File I/O for tile maps."""

from .io import load_grid_file, parse_grid

__all__ = [
    'load_grid_file',
    'parse_grid'
]

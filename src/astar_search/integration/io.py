"""Loading tile maps from disk."""

import logging
from pathlib import Path
from typing import Union

from astar_search.grid import Grid, MapFormatError

logger = logging.getLogger(__name__)


def parse_grid(text: str) -> Grid:
    """Parse a tile map held in memory.

    Args:
        text: Map in the text map format

    Returns:
        Parsed Grid

    Raises:
        MapFormatError: If the map is invalid
    """
    return Grid.from_string(text)


def load_grid_file(file_path: Union[str, Path]) -> Grid:
    """Load a tile map from a text file.

    Args:
        file_path: Path to the map file

    Returns:
        Parsed Grid

    Raises:
        FileNotFoundError: If file doesn't exist
        MapFormatError: If the map is invalid
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise FileNotFoundError(f"Map file not found: {file_path}")

    with open(file_path, 'r', encoding='utf-8') as f:
        text = f.read()

    try:
        grid = parse_grid(text)
    except MapFormatError as e:
        raise MapFormatError(f"Invalid map in {file_path}: {e}") from e

    logger.info(f"Loaded {grid.width}x{grid.height} map from {file_path}")
    return grid

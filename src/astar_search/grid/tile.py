"""Map tiles and their text rendering."""

from enum import IntEnum

RED_COLOR = "\033[31m"
GREEN_COLOR = "\033[32m"
BLUE_COLOR = "\033[34m"
RESET_COLOR = "\033[0m"


class Tile(IntEnum):
    """Contents of a single map cell."""
    OPEN = 0
    BLOCKED = 1
    START = 2
    GOAL = 3
    PATH = 4

    @classmethod
    def from_char(cls, char: str) -> 'Tile':
        """Map file symbol to tile. Unknown symbols are open floor."""
        return _FROM_CHAR.get(char, cls.OPEN)

    def to_char(self) -> str:
        return _TO_CHAR[self]

    def to_color_string(self) -> str:
        """Render the tile with ANSI colours for a terminal."""
        return _TO_COLOR[self]

    @property
    def passable(self) -> bool:
        return self is not Tile.BLOCKED


_FROM_CHAR = {
    '#': Tile.BLOCKED,
    's': Tile.START,
    'g': Tile.GOAL,
}

_TO_CHAR = {
    Tile.OPEN: ' ',
    Tile.BLOCKED: '#',
    Tile.START: 's',
    Tile.GOAL: 'g',
    Tile.PATH: '•',
}

_TO_COLOR = {
    Tile.OPEN: ' ',
    Tile.BLOCKED: f"{BLUE_COLOR}#{RESET_COLOR}",
    Tile.START: f"{RED_COLOR}s{RESET_COLOR}",
    Tile.GOAL: f"{GREEN_COLOR}✓{RESET_COLOR}",
    Tile.PATH: f"{RED_COLOR}•{RESET_COLOR}",
}

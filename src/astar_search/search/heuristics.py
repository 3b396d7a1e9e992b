"""Reusable heuristics for A* search.

Distance functions accept positions with ``x``/``y`` attributes, such as
:class:`astar_search.grid.Coord`, or plain ``(x, y)`` tuples.
"""

from typing import Any, Sequence, Tuple

from astar_search.core.space import SearchSpace, State

Position = Tuple[int, int]


def _xy(position: Any) -> Position:
    if hasattr(position, 'x') and hasattr(position, 'y'):
        return position.x, position.y
    x, y = position
    return x, y


def zero_heuristic(state: Any) -> float:
    """Heuristic that knows nothing; turns A* into uniform-cost search."""
    return 0


def manhattan_distance(a: Position, b: Position) -> int:
    """L1 distance. Admissible for unit-cost 4-connected moves."""
    ax, ay = _xy(a)
    bx, by = _xy(b)
    return abs(bx - ax) + abs(by - ay)


def chebyshev_distance(a: Position, b: Position) -> int:
    """L-infinity distance. Admissible for unit-cost 8-connected moves."""
    ax, ay = _xy(a)
    bx, by = _xy(b)
    return max(abs(bx - ax), abs(by - ay))


class UniformCostSpace(SearchSpace[State]):
    """Wrap a search space and hide its heuristic.

    Searching the wrapped space explores in order of path cost alone, which
    is useful as an optimality reference for the informed search.
    """

    def __init__(self, space: SearchSpace[State]):
        self.space = space

    def start(self) -> State:
        return self.space.start()

    def is_goal(self, state: State) -> bool:
        return self.space.is_goal(state)

    def expand(self, state: State) -> Sequence[State]:
        return self.space.expand(state)

    def distance(self, from_state: State, to_state: State) -> float:
        return self.space.distance(from_state, to_state)

    def heuristic(self, state: State) -> float:
        return zero_heuristic(state)

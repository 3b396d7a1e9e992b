"""Grid path finding as a search space."""

from typing import List

from astar_search.core.space import SearchSpace
from astar_search.search.heuristics import chebyshev_distance, manhattan_distance

from .coord import Coord
from .grid import Grid

SUPPORTED_CONNECTIVITY = (4, 8)


class GridSpace(SearchSpace[Coord]):
    """Unit-cost moves between passable cells of a :class:`Grid`.

    With 4-connectivity the heuristic is the Manhattan distance to the goal;
    with 8-connectivity, where a diagonal step also costs 1, it is the
    Chebyshev distance.
    """

    def __init__(self, grid: Grid, connectivity: int = 4):
        if connectivity not in SUPPORTED_CONNECTIVITY:
            raise ValueError(f"connectivity must be 4 or 8, got {connectivity}")
        self.grid = grid
        self.connectivity = connectivity
        self._estimate = manhattan_distance if connectivity == 4 else chebyshev_distance

    def start(self) -> Coord:
        return self.grid.start

    def is_goal(self, state: Coord) -> bool:
        return state == self.grid.goal

    def expand(self, state: Coord) -> List[Coord]:
        return self.grid.expand(state, self.connectivity)

    def distance(self, from_state: Coord, to_state: Coord) -> int:
        return 1

    def heuristic(self, state: Coord) -> int:
        return self._estimate(state, self.grid.goal)

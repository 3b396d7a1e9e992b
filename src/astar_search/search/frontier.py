"""Open and closed lists for best-first search."""

import heapq
import itertools
from typing import Any, Hashable, Iterator, List, Set

from astar_search.search.node import SearchNode


class Frontier:
    """Min-heap of search nodes keyed by estimated cost.

    With ``stable=True`` every entry carries an insertion sequence number,
    so nodes with equal estimated cost come out in the order they went in.
    Otherwise nodes are stored bare and ties are resolved by whatever order
    the heap happens to keep them in.
    """

    def __init__(self, stable: bool = True):
        self.stable = stable
        self._heap: List[Any] = []
        self._counter = itertools.count()

    def push(self, node: SearchNode) -> None:
        if self.stable:
            heapq.heappush(self._heap, (node.estimated_cost, next(self._counter), node))
        else:
            heapq.heappush(self._heap, node)

    def pop(self) -> SearchNode:
        """Remove and return the node with the lowest estimated cost.

        Raises:
            IndexError: If the frontier is empty
        """
        entry = heapq.heappop(self._heap)
        return entry[2] if self.stable else entry

    def peek(self) -> SearchNode:
        entry = self._heap[0]
        return entry[2] if self.stable else entry

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)


class VisitedSet:
    """States that have already been expanded."""

    def __init__(self):
        self._states: Set[Hashable] = set()

    def add(self, state: Hashable) -> bool:
        """Commit ``state`` as expanded. Returns False if it already was."""
        if state in self._states:
            return False
        self._states.add(state)
        return True

    def __contains__(self, state: Hashable) -> bool:
        return state in self._states

    def __len__(self) -> int:
        return len(self._states)

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._states)

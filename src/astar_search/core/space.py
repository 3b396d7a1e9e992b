"""State-space contract consumed by the search engine.

A domain plugs into the engine by subclassing :class:`SearchSpace`. The
engine never looks inside a state: it only hashes and compares states, and
asks the space for successors, edge costs and heuristic estimates.
"""

from abc import ABC, abstractmethod
from typing import Generic, Hashable, Sequence, TypeVar

State = TypeVar('State', bound=Hashable)


class SearchSpace(ABC, Generic[State]):
    """Description of a discrete state space for informed search.

    Implementations must keep ``distance`` consistent with ``expand`` and
    return non-negative costs. ``heuristic`` must never overestimate the
    remaining cost if the returned path is expected to be optimal; the
    engine relies on this without checking it.
    """

    @abstractmethod
    def start(self) -> State:
        """Return the single initial state."""

    @abstractmethod
    def is_goal(self, state: State) -> bool:
        """Return True if ``state`` is a goal state."""

    @abstractmethod
    def expand(self, state: State) -> Sequence[State]:
        """Return every state reachable from ``state`` in one step."""

    @abstractmethod
    def distance(self, from_state: State, to_state: State) -> float:
        """Return the cost of the edge ``from_state`` -> ``to_state``."""

    @abstractmethod
    def heuristic(self, state: State) -> float:
        """Return an estimate of the remaining cost from ``state`` to a goal."""

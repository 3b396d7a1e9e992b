"""A* search engine.

This module implements A* over any :class:`SearchSpace`. The open list is a
binary heap ordered by ``g + h``; the closed list is a set of states that
have been expanded. Duplicate open-list entries for a state are allowed and
are discarded lazily when they are popped after the state was expanded.
"""

import time
import logging
from typing import Any, Callable, Dict, List, Optional
from dataclasses import dataclass, field

from astar_search.core.space import SearchSpace
from astar_search.search.frontier import Frontier, VisitedSet
from astar_search.search.heuristics import zero_heuristic
from astar_search.search.node import SearchNode, reconstruct_path

logger = logging.getLogger(__name__)

UpdateCallback = Callable[[SearchNode, 'SearchStatistics'], None]


@dataclass
class SearchStatistics:
    """Bookkeeping for a single search run."""
    nodes_expanded: int = 0
    nodes_generated: int = 0
    duplicate_states: int = 0  # stale open-list entries skipped on pop
    max_frontier_size: int = 0
    computation_time: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        """Convert statistics to dictionary."""
        return {
            'nodes_expanded': self.nodes_expanded,
            'nodes_generated': self.nodes_generated,
            'duplicate_states': self.duplicate_states,
            'max_frontier_size': self.max_frontier_size,
            'computation_time': self.computation_time
        }


@dataclass
class SearchResult:
    """Result of a successful A* search."""
    path: List[Any]
    cost: float
    expansion_count: int
    statistics: Optional[SearchStatistics] = field(default=None, repr=False)

    @property
    def length(self) -> int:
        """Number of states on the path, start and goal included."""
        return len(self.path)


@dataclass
class SearchConfig:
    """Configuration for A* search."""
    use_heuristic: bool = True  # False degrades to uniform-cost search
    deterministic_ties: bool = True  # FIFO among equal estimated costs
    log_interval: int = 1000  # Expansions between progress messages, 0 disables


class AStarSearcher:
    """A* search over a caller-supplied state space."""

    def __init__(self, config: Optional[SearchConfig] = None):
        """Initialize A* searcher.

        Args:
            config: Search configuration parameters
        """
        self.config = config or SearchConfig()
        self.statistics = SearchStatistics()

        logger.info(f"A* searcher initialized with use_heuristic={self.config.use_heuristic}, "
                    f"deterministic_ties={self.config.deterministic_ties}")

    def _heuristic(self, space: SearchSpace, state: Any) -> float:
        if self.config.use_heuristic:
            return space.heuristic(state)
        return zero_heuristic(state)

    def search(self, space: SearchSpace,
               update_callback: Optional[UpdateCallback] = None) -> Optional[SearchResult]:
        """Find a minimum-cost path from ``space.start()`` to a goal state.

        Args:
            space: State space to search
            update_callback: Called with ``(node, statistics)`` after every
                pop from the open list. Raising from it aborts the search.

        Returns:
            SearchResult for the first goal state popped, or None if the
            open list runs dry first
        """
        start_time = time.perf_counter()
        statistics = SearchStatistics()
        self.statistics = statistics

        frontier = Frontier(stable=self.config.deterministic_ties)
        visited = VisitedSet()

        start = space.start()
        frontier.push(SearchNode(state=start, g_score=0, h_score=self._heuristic(space, start)))
        statistics.nodes_generated = 1
        statistics.max_frontier_size = 1

        while frontier:
            node = frontier.pop()

            if update_callback is not None:
                update_callback(node, statistics)

            # A cheaper copy of this state was already expanded
            if node.state in visited:
                statistics.duplicate_states += 1
                continue

            if space.is_goal(node.state):
                statistics.computation_time = time.perf_counter() - start_time
                result = SearchResult(
                    path=reconstruct_path(node),
                    cost=node.g_score,
                    expansion_count=len(visited),
                    statistics=statistics
                )
                logger.info(f"Goal reached: cost={result.cost}, length={result.length}, "
                            f"expanded={result.expansion_count}, "
                            f"time={statistics.computation_time:.4f}s")
                return result

            visited.add(node.state)
            statistics.nodes_expanded += 1

            for successor in space.expand(node.state):
                if successor in visited:
                    continue
                child = node.child(
                    successor,
                    space.distance(node.state, successor),
                    self._heuristic(space, successor)
                )
                frontier.push(child)
                statistics.nodes_generated += 1

            statistics.max_frontier_size = max(statistics.max_frontier_size, len(frontier))

            if self.config.log_interval and statistics.nodes_expanded % self.config.log_interval == 0:
                logger.debug(f"Expanded {statistics.nodes_expanded} states, "
                             f"frontier size {len(frontier)}, f={node.estimated_cost}")

        statistics.computation_time = time.perf_counter() - start_time
        logger.info(f"Search exhausted without reaching a goal after expanding "
                    f"{statistics.nodes_expanded} states")
        return None

    def get_search_stats(self) -> Dict[str, Any]:
        """Get statistics of the most recent search together with the configuration."""
        stats = self.statistics.to_dict()
        stats['config'] = {
            'use_heuristic': self.config.use_heuristic,
            'deterministic_ties': self.config.deterministic_ties,
            'log_interval': self.config.log_interval
        }
        return stats


def create_astar_searcher(use_heuristic: bool = True,
                          deterministic_ties: bool = True,
                          log_interval: int = 1000) -> AStarSearcher:
    """Factory function to create A* searcher with custom configuration.

    Args:
        use_heuristic: Use the space's heuristic; otherwise run uniform-cost search
        deterministic_ties: Break estimated-cost ties by insertion order
        log_interval: Expansions between debug progress messages

    Returns:
        Configured AStarSearcher instance
    """
    config = SearchConfig(
        use_heuristic=use_heuristic,
        deterministic_ties=deterministic_ties,
        log_interval=log_interval
    )

    return AStarSearcher(config)


def astar_search(space: SearchSpace, config: Optional[SearchConfig] = None) -> Optional[SearchResult]:
    """Run a single A* search with a throwaway searcher."""
    return AStarSearcher(config).search(space)

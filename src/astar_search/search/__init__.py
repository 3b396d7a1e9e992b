"""Search algorithms for the A* engine.

This module implements A* with a binary-heap open list, a closed set of
expanded states and parent-pointer path reconstruction.
"""

from .node import SearchNode, reconstruct_path
from .frontier import Frontier, VisitedSet
from .heuristics import zero_heuristic, manhattan_distance, chebyshev_distance, UniformCostSpace
from .astar import (
    AStarSearcher, SearchResult, SearchConfig, SearchStatistics,
    create_astar_searcher, astar_search
)

__all__ = [
    'SearchNode',
    'reconstruct_path',
    'Frontier',
    'VisitedSet',
    'zero_heuristic',
    'manhattan_distance',
    'chebyshev_distance',
    'UniformCostSpace',
    'AStarSearcher',
    'SearchResult',
    'SearchConfig',
    'SearchStatistics',
    'create_astar_searcher',
    'astar_search'
]

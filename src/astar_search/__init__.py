"""Generic A* search engine.

Callers describe their domain by implementing :class:`SearchSpace` and hand
it to :class:`AStarSearcher`. A tile-map domain, map loading and a
command-line front end are included.
"""

__version__ = "0.1.0"

from astar_search.core.space import SearchSpace
from astar_search.search.astar import (
    AStarSearcher, SearchConfig, SearchResult, create_astar_searcher, astar_search
)

__all__ = [
    'SearchSpace',
    'AStarSearcher',
    'SearchConfig',
    'SearchResult',
    'create_astar_searcher',
    'astar_search'
]

"""Domain-agnostic abstractions shared by the search engine and its callers."""

from .space import SearchSpace, State

__all__ = [
    'SearchSpace',
    'State'
]

"""Search tree nodes and path reconstruction."""

from dataclasses import dataclass, field
from typing import Any, List, Optional


@dataclass(frozen=True, eq=False)
class SearchNode:
    """Node in the A* search tree.

    Nodes are immutable. A child keeps a reference to the node it was
    expanded from, so every open path shares its ancestors instead of
    copying them. Parent links only ever point to nodes that already exist,
    which keeps the tree acyclic.
    """
    state: Any
    g_score: float = 0  # g(n) - actual cost from start
    h_score: float = 0  # h(n) - heuristic estimate to goal
    parent: Optional['SearchNode'] = field(default=None, repr=False)
    depth: int = 0

    @property
    def estimated_cost(self) -> float:
        """Total estimated cost f(n) = g(n) + h(n)."""
        return self.g_score + self.h_score

    def __lt__(self, other: 'SearchNode') -> bool:
        """Comparison for priority queue (lower estimated cost first)."""
        return self.estimated_cost < other.estimated_cost

    def child(self, state: Any, step_cost: float, h_score: float) -> 'SearchNode':
        """Create the successor node reached from this node by one edge."""
        return SearchNode(
            state=state,
            g_score=self.g_score + step_cost,
            h_score=h_score,
            parent=self,
            depth=self.depth + 1
        )

    def backtrace(self) -> List[Any]:
        """Get the sequence of states from the root to this node."""
        return reconstruct_path(self)


def reconstruct_path(node: SearchNode) -> List[Any]:
    """Walk parent links back to the root and return states in root-first order.

    Args:
        node: Terminal node of the search

    Returns:
        List of states, starting with the root's state and ending with
        ``node.state``
    """
    states = [node.state]
    current = node
    while current.parent is not None:
        current = current.parent
        states.append(current.state)
    states.reverse()
    return states

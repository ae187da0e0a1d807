"""
Directed graph abstraction.

Nodes are arbitrary hashable values; identity is the value itself.
Edges are directed: u -> v with an optional label (None when unlabelled).

Algorithms only depend on this read-only contract, never on a concrete
store's internals.
"""

from abc import ABC, abstractmethod
from typing import Generic, Hashable, Iterable, Mapping, Optional, TypeVar

N = TypeVar("N", bound=Hashable)
E = TypeVar("E")


class Graph(ABC, Generic[N, E]):
    """Directed, optionally labelled graph over hashable node values."""

    @abstractmethod
    def nodes(self) -> Iterable[N]:
        """Return all nodes in the graph."""
        raise NotImplementedError

    @abstractmethod
    def contains_node(self, node: N) -> bool:
        """Return True if node is in the graph."""
        raise NotImplementedError

    @abstractmethod
    def outgoing(self, node: N) -> Mapping[N, Optional[E]]:
        """
        Outgoing neighbours and edge labels for a given node.

        Returns: read-only mapping destination -> label.
        Raises: NodeNotFound if node is not in the graph.
        """
        raise NotImplementedError

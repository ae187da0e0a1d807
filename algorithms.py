"""
Algorithm interfaces for shortest-path search.

Keeps graph algorithms separate from the concrete graph store.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Dict, Generic, Optional, Sequence

from graph import E, Graph, N

# Projects a (non-None) edge label onto a numeric cost.
WeightFn = Callable[[E], float]


@dataclass(frozen=True)
class ShortestPath(Generic[N]):
    """
    Cheapest route from a source to one target.

    ``nodes`` starts at the source and ends at the target; a path from a node
    to itself is just ``[source]`` with cost 0.
    """
    cost: float
    nodes: Sequence[N]

    @property
    def hops(self) -> int:
        return len(self.nodes) - 1


class DijkstraEngine(ABC):
    """
    Interface for single-source shortest-path computation.
    """

    @abstractmethod
    def shortest_path_costs(
        self, graph: Graph, source: N, weight: Optional[WeightFn] = None
    ) -> Dict[N, float]:
        """
        Compute shortest-path costs from source to all reachable nodes.

        Returns:
            Mapping dest_node -> path_cost(source -> dest_node).
        """
        raise NotImplementedError

    @abstractmethod
    def shortest_paths(
        self, graph: Graph, source: N, weight: Optional[WeightFn] = None
    ) -> tuple[Dict[N, float], Dict[N, N]]:
        """
        Compute shortest-path costs plus the predecessor chain for each dest.

        Returns:
            (dist, prev) where dist is the cost map and prev records parents.
        """
        raise NotImplementedError

    @abstractmethod
    def shortest_path(
        self,
        graph: Graph,
        source: N,
        target: N,
        weight: Optional[WeightFn] = None,
    ) -> Optional[ShortestPath[N]]:
        """
        Compute the cheapest path from source to target.

        Returns:
            The path, or None if target is unreachable from source.
        """
        raise NotImplementedError

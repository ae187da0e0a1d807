"""
Heap-based DijkstraEngine implementation.

Uses Python's heapq to compute single-source shortest paths over any Graph
implementation that satisfies the Graph interface.
"""

from itertools import count
from typing import Dict, Optional, Tuple
import heapq
import logging
import math
import numbers

from algorithms import DijkstraEngine, ShortestPath, WeightFn
from errors import InvalidWeight, NodeNotFound
from graph import Graph, N
from settings import DijkstraSettings

logger = logging.getLogger(__name__)


class SimpleDijkstraEngine(DijkstraEngine):
    """
    Single-source Dijkstra using a binary heap.

    Edge costs come from the labels: the label itself by default, or
    ``weight(label)`` when a projection is given. Unlabelled edges cost
    ``settings.default_weight`` when one is configured and are an error
    otherwise. Every cost must be a non-negative ``numbers.Real`` (int,
    float, Fraction, numpy scalars); anything else, including ``Decimal``,
    raises InvalidWeight as soon as the edge is relaxed. So does a projection
    that fails to read a label (TypeError, ValueError, LookupError or
    AttributeError).

    Heap entries carry a discovery sequence number, so equal distances pop
    in the order they were discovered and nodes themselves are never
    compared.

    Complexity:
        O(E log V) over the nodes reachable from the source.
    """

    def __init__(self, settings: Optional[DijkstraSettings] = None) -> None:
        self.settings = settings if settings is not None else DijkstraSettings()
        self.settings.validate()

    def shortest_path_costs(
        self, graph: Graph, source: N, weight: Optional[WeightFn] = None
    ) -> Dict[N, float]:
        """
        Compute only the cost map for all reachable nodes from source.
        """
        dist, _ = self._search(graph, source, weight)
        return dist

    def shortest_paths(
        self, graph: Graph, source: N, weight: Optional[WeightFn] = None
    ) -> tuple[Dict[N, float], Dict[N, N]]:
        """
        Dijkstra variant that also records predecessors for path reconstruction.

        It returns the distance map (dest -> cost from source) plus a
        predecessor map that lets you walk back from any reachable node to
        the source. The predecessor map omits the source itself because it
        has no parent. Unreachable nodes appear in neither map.
        """
        return self._search(graph, source, weight)

    def shortest_path(
        self,
        graph: Graph,
        source: N,
        target: N,
        weight: Optional[WeightFn] = None,
    ) -> Optional[ShortestPath[N]]:
        """
        Cheapest source -> target path, stopping as soon as target settles.
        """
        if not graph.contains_node(source):
            raise NodeNotFound(source)
        if not graph.contains_node(target):
            raise NodeNotFound(target)

        dist, prev = self._search(graph, source, weight, target=target)
        if target not in dist:
            return None

        path = [target]
        while path[-1] != source:
            path.append(prev[path[-1]])
        path.reverse()
        return ShortestPath(cost=dist[target], nodes=path)

    def _search(
        self,
        graph: Graph,
        source: N,
        weight: Optional[WeightFn],
        target: Optional[N] = None,
    ) -> Tuple[Dict[N, float], Dict[N, N]]:
        if not graph.contains_node(source):
            raise NodeNotFound(source)

        dist: Dict[N, float] = {source: 0.0}
        prev: Dict[N, N] = {}
        seq = count()
        pq = [(0.0, next(seq), source)]  # (distance, discovery order, node)
        settled = 0

        while pq:
            d_u, _, u = heapq.heappop(pq)

            # Skip outdated entries
            if d_u != dist.get(u, math.inf):
                continue

            settled += 1
            if target is not None and u == target:
                break

            for v, label in graph.outgoing(u).items():
                alt = d_u + self._cost(u, v, label, weight)
                if alt < dist.get(v, math.inf):
                    dist[v] = alt
                    prev[v] = u
                    heapq.heappush(pq, (alt, next(seq), v))

        logger.debug(f"Dijkstra from {source!r} settled {settled} nodes")

        if target is not None:
            # drop tentative costs of nodes that never settled
            return {target: dist[target]} if target in dist else {}, prev
        return dist, prev

    def _cost(self, u: N, v: N, label: object, weight: Optional[WeightFn]) -> float:
        if label is None:
            if self.settings.default_weight is None:
                raise InvalidWeight(u, v, label, "edge is unlabelled")
            return self.settings.default_weight

        if weight is None:
            cost = label
        else:
            try:
                cost = weight(label)
            except (TypeError, ValueError, LookupError, AttributeError) as exc:
                raise InvalidWeight(u, v, label, str(exc)) from exc

        if isinstance(cost, bool) or not isinstance(cost, numbers.Real):
            raise InvalidWeight(u, v, label, "cost is not a real number")
        if math.isnan(cost):
            raise InvalidWeight(u, v, label, "cost is NaN")
        if cost < 0:
            raise InvalidWeight(u, v, label, "cost is negative")
        return cost

"""
Concrete directed, optionally labelled graph.

Implements the Graph interface using an adjacency-list representation with a
reverse (incoming) index so node removal never leaves stale edges behind.
"""

import logging
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, KeysView, List, Mapping, Optional, Tuple

from errors import DuplicateNode, EdgeNotFound, NodeNotFound
from graph import E, Graph, N

logger = logging.getLogger(__name__)


class AdjacencyListGraph(Graph[N, E]):
    """
    Directed graph backed by a node -> (destination -> label) mapping.

    At most one edge exists per ordered (source, destination) pair; adding it
    again replaces the label. The first instance of a node value passed to
    ``add_node`` is the one stored, and every accessor hands back that stored
    object (or a read-only view onto the tables), never a copy.

    Every mutation checks its preconditions before touching any table, so a
    raised error leaves the graph exactly as it was.
    """

    def __init__(self, nodes: Iterable[N] = ()) -> None:
        # value -> canonical stored instance
        self._nodes: Dict[N, N] = {}
        self._adj: Dict[N, Dict[N, Optional[E]]] = {}
        # dest -> ordered set of sources
        self._incoming: Dict[N, Dict[N, None]] = {}
        self._edge_count = 0

        initial = list(nodes)
        seen = set()
        for node in initial:
            if node in seen:
                raise DuplicateNode(node)
            seen.add(node)
        for node in initial:
            self.add_node(node)

    # --- Mutation API --------------------------------------------------------

    def add_node(self, node: N) -> None:
        """
        Insert node. Raises DuplicateNode if an equal node is already present.
        """
        if node in self._nodes:
            raise DuplicateNode(node)
        self._nodes[node] = node
        self._adj[node] = {}
        self._incoming[node] = {}

    def remove_node(self, node: N) -> None:
        """
        Remove node together with every edge entering or leaving it.
        """
        if node not in self._nodes:
            raise NodeNotFound(node)

        out = self._adj.pop(node)
        inc = self._incoming.pop(node)

        for dst in out:
            if dst != node:
                del self._incoming[dst][node]
        for src in inc:
            if src != node:
                del self._adj[src][node]

        # a self-loop shows up in both tables but is a single edge
        dropped = len(out) + len(inc) - (1 if node in out else 0)
        self._edge_count -= dropped
        del self._nodes[node]

        logger.debug(f"Removed node {node!r} and {dropped} incident edges")

    def add_edge(self, src: N, dst: N, label: Optional[E] = None) -> None:
        """
        Add or update the directed edge src -> dst.

        Raises NodeNotFound naming the missing endpoint (src is checked
        first). The reverse edge is never created implicitly.
        """
        s = self._canonical(src)
        d = self._canonical(dst)

        edges = self._adj[s]
        if d not in edges:
            self._edge_count += 1
            self._incoming[d][s] = None
        edges[d] = label

    def add_undirected_edge(self, a: N, b: N, label: Optional[E] = None) -> None:
        """
        Add the pair of directed edges a -> b and b -> a with the same label.

        Loops (a == b) raise ValueError; use add_edge for a self-edge.
        """
        self._canonical(a)
        self._canonical(b)
        if a == b:
            raise ValueError(f"Undirected edge endpoints must differ, got {a!r} twice")
        self.add_edge(a, b, label)
        self.add_edge(b, a, label)

    def remove_edge(self, src: N, dst: N) -> None:
        """Delete the directed edge src -> dst, leaving both nodes in place."""
        if not self.contains_edge(src, dst):
            raise EdgeNotFound(src, dst)
        del self._adj[src][dst]
        del self._incoming[dst][src]
        self._edge_count -= 1

    # --- Lookup API ----------------------------------------------------------

    def contains_node(self, node: N) -> bool:
        return node in self._nodes

    def contains_edge(self, src: N, dst: N) -> bool:
        edges = self._adj.get(src)
        return edges is not None and dst in edges

    def edge_label(self, src: N, dst: N) -> Optional[E]:
        """Return the stored label of src -> dst (None when unlabelled)."""
        if not self.contains_edge(src, dst):
            raise EdgeNotFound(src, dst)
        return self._adj[src][dst]

    def edges(self, node: N) -> Optional[List[Tuple[N, Optional[E]]]]:
        """
        Outgoing (destination, label) pairs of node, or None if it has none.

        The pairs reference the stored destination and label objects.
        """
        out = self.outgoing(node)
        if not out:
            return None
        return list(out.items())

    def connections(self, node: N) -> Optional[List[N]]:
        """Outgoing destinations of node, or None if it has none."""
        out = self.outgoing(node)
        if not out:
            return None
        return list(out)

    def node_count(self) -> int:
        return len(self._nodes)

    def edge_count(self) -> int:
        return self._edge_count

    def is_empty(self) -> bool:
        return not self._nodes

    def out_degree(self, node: N) -> int:
        return len(self.outgoing(node))

    def in_degree(self, node: N) -> int:
        if node not in self._incoming:
            raise NodeNotFound(node)
        return len(self._incoming[node])

    def degree(self, node: N) -> int:
        """Number of incident edges; a self-loop counts in both directions."""
        return self.in_degree(node) + self.out_degree(node)

    def copy(self) -> "AdjacencyListGraph[N, E]":
        """
        Structural copy. The new graph has its own tables but shares the
        node and label objects with this one.
        """
        g: AdjacencyListGraph[N, E] = AdjacencyListGraph()
        g._nodes = dict(self._nodes)
        g._adj = {n: dict(out) for n, out in self._adj.items()}
        g._incoming = {n: dict(inc) for n, inc in self._incoming.items()}
        g._edge_count = self._edge_count
        return g

    # --- Graph interface -----------------------------------------------------

    def nodes(self) -> KeysView[N]:
        return self._nodes.keys()

    def outgoing(self, node: N) -> Mapping[N, Optional[E]]:
        edges = self._adj.get(node)
        if edges is None:
            raise NodeNotFound(node)
        return MappingProxyType(edges)  # read-only view, not a copy

    # --- Python protocols ----------------------------------------------------

    def __contains__(self, node: object) -> bool:
        return node in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[N]:
        return iter(self._nodes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AdjacencyListGraph):
            return NotImplemented
        return self._nodes.keys() == other._nodes.keys() and self._adj == other._adj

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(nodes={self.node_count()}, "
            f"edges={self.edge_count()})"
        )

    # --- Internal ------------------------------------------------------------

    def _canonical(self, node: N) -> N:
        try:
            return self._nodes[node]
        except KeyError:
            raise NodeNotFound(node) from None


def graph_with_nodes(*nodes: N) -> AdjacencyListGraph:
    """Build a graph pre-populated with the given nodes."""
    return AdjacencyListGraph(nodes)

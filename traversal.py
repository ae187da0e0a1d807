"""
Breadth-first and depth-first traversal.

Both walk outgoing edges in the order the graph reports them and visit each
node reachable from the start exactly once.
"""

from collections import deque
from typing import Dict, List, Set
import logging

from errors import NodeNotFound
from graph import Graph, N

logger = logging.getLogger(__name__)


def bfs(graph: Graph, start: N) -> List[N]:
    """
    Nodes reachable from start, in breadth-first visitation order.

    The first element is start itself.
    """
    return list(bfs_predecessors(graph, start))


def bfs_predecessors(graph: Graph, start: N) -> Dict[N, N]:
    """
    Breadth-first search recording how each node was first reached.

    Maps every node reachable from start to the node it was discovered from;
    start maps to itself. Keys are in visitation order, so following the
    parents from any node back to start gives a fewest-edges path.
    """
    if not graph.contains_node(start):
        raise NodeNotFound(start)

    pred: Dict[N, N] = {start: start}
    frontier = deque([start])

    while frontier:
        curr = frontier.popleft()
        for dst in graph.outgoing(curr):
            if dst not in pred:
                pred[dst] = curr
                frontier.append(dst)

    logger.debug(f"BFS from {start!r} reached {len(pred)} nodes")
    return pred


def dfs(graph: Graph, start: N) -> List[N]:
    """
    Nodes reachable from start, in depth-first pre-order.

    Uses an explicit stack, so deep graphs do not hit the recursion limit.
    Neighbours are pushed in reverse, giving the same order a recursive
    descent over the outgoing edges would.
    """
    if not graph.contains_node(start):
        raise NodeNotFound(start)

    order: List[N] = []
    visited: Set[N] = set()
    stack = [start]

    while stack:
        curr = stack.pop()
        if curr in visited:
            continue
        visited.add(curr)
        order.append(curr)

        for dst in reversed(list(graph.outgoing(curr))):
            if dst not in visited:
                stack.append(dst)

    logger.debug(f"DFS from {start!r} reached {len(order)} nodes")
    return order


def has_path(graph: Graph, src: N, dst: N) -> bool:
    """True if dst is reachable from src (every node reaches itself)."""
    if not graph.contains_node(src):
        raise NodeNotFound(src)
    if not graph.contains_node(dst):
        raise NodeNotFound(dst)
    return dst in bfs_predecessors(graph, src)

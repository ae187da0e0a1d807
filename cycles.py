"""
Directed cycle detection over a whole graph.

A three-colour depth-first search is started from every node not yet
explored: WHITE nodes are unvisited, GREY nodes are on the current DFS path,
BLACK nodes are fully explored. An edge into a GREY node is a back-edge and
closes a cycle; edges into BLACK nodes are forward or cross edges and are
ignored.
"""

from enum import Enum, auto
from typing import Dict, Iterator, List, Optional
import logging

from graph import Graph, N

logger = logging.getLogger(__name__)


class Color(Enum):
    """Exploration state of a node during cycle detection."""

    WHITE = auto()
    GREY = auto()
    BLACK = auto()


def find_cycle(graph: Graph) -> Optional[List[N]]:
    """
    Return one directed cycle, or None if the graph is acyclic.

    The cycle is given as the node path closed by repeating its first node,
    e.g. ``[a, b, a]``; a self-loop on ``a`` is ``[a, a]``.
    """
    color: Dict[N, Color] = {}

    for root in graph.nodes():
        if color.get(root, Color.WHITE) is not Color.WHITE:
            continue

        color[root] = Color.GREY
        path: List[N] = [root]
        stack: List[Iterator[N]] = [iter(graph.outgoing(root))]

        while stack:
            for dst in stack[-1]:
                state = color.get(dst, Color.WHITE)
                if state is Color.GREY:
                    cycle = path[path.index(dst):] + [dst]
                    logger.debug(f"Found cycle {cycle!r}")
                    return cycle
                if state is Color.WHITE:
                    color[dst] = Color.GREY
                    path.append(dst)
                    stack.append(iter(graph.outgoing(dst)))
                    break
            else:
                # all edges of the top node explored
                color[path.pop()] = Color.BLACK
                stack.pop()

    return None


def has_cycle(graph: Graph) -> bool:
    """True iff the graph contains at least one directed cycle."""
    return find_cycle(graph) is not None

"""
Error taxonomy shared by the graph store and the algorithm suite.

Every fallible operation raises one of these to its immediate caller. The
lookup errors also derive from ``KeyError`` and the value errors from
``ValueError`` so callers can catch them with the builtin they expect.
"""

from typing import Hashable, Optional


class GraphError(Exception):
    """Base class for all graph errors."""


class NodeNotFound(GraphError, KeyError):
    """An operation referenced a node absent from the graph."""

    def __init__(self, node: Hashable) -> None:
        super().__init__(node)
        self.node = node

    def __str__(self) -> str:
        return f"Node {self.node!r} does not exist."


class DuplicateNode(GraphError, ValueError):
    """``add_node`` was called with a node that is already present."""

    def __init__(self, node: Hashable) -> None:
        super().__init__(node)
        self.node = node

    def __str__(self) -> str:
        return f"Node {self.node!r} already exists."


class EdgeNotFound(GraphError, KeyError):
    """An operation referenced a directed edge that does not exist."""

    def __init__(self, source: Hashable, destination: Hashable) -> None:
        super().__init__(source, destination)
        self.source = source
        self.destination = destination

    def __str__(self) -> str:
        return f"Edge {self.source!r} -> {self.destination!r} does not exist."


class InvalidWeight(GraphError, ValueError):
    """
    An edge label could not be interpreted as a non-negative cost.

    Raised by shortest-path computations; ``reason`` says what was wrong
    with the projected cost.
    """

    def __init__(
        self,
        source: Hashable,
        destination: Hashable,
        label: object,
        reason: Optional[str] = None,
    ) -> None:
        super().__init__(source, destination, label)
        self.source = source
        self.destination = destination
        self.label = label
        self.reason = reason

    def __str__(self) -> str:
        msg = (
            f"Edge {self.source!r} -> {self.destination!r} has label "
            f"{self.label!r} which is not a usable cost"
        )
        if self.reason:
            msg += f" ({self.reason})"
        return msg + "."

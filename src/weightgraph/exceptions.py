# src/weightgraph/exceptions.py
"""
Exceptions raised by weightgraph.

Input validation of node names and edge weights is left to Pydantic and
surfaces as ``pydantic.ValidationError``; everything else derives from
``GraphError``.
"""
from typing import Any, Iterable, Set


class GraphError(Exception):
    """Base class for all weightgraph errors."""


class InvalidArgumentError(GraphError, ValueError):
    """A required argument was missing or not acceptable."""


class NodeLookupError(GraphError, KeyError):
    """A node was asked for the weight of an edge it does not have."""

    def __init__(self, node_name: str, other_name: str):
        self.node_name = node_name
        self.other_name = other_name
        super().__init__(f"No edge from '{node_name}' to '{other_name}'")

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable
        return self.args[0]


class UnreachableNodesError(GraphError):
    """
    The algorithm's frontier ran dry before every node was finalized.

    Attributes:
        unreachable: Names of the nodes that were never reached.
        partial: Whatever the algorithm had built so far (a cost mapping for
            Dijkstra, a spanning-tree Graph for Prim-Jarnik).
    """

    def __init__(self, algorithm: str, unreachable: Iterable[str], partial: Any):
        self.algorithm = algorithm
        self.unreachable: Set[str] = set(unreachable)
        self.partial = partial
        names = ", ".join(sorted(self.unreachable))
        super().__init__(f"{algorithm}: unreachable nodes: {names}")

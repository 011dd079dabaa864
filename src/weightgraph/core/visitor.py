"""
Visitor callbacks used by the graph traversals.

A visitor is anything with a ``visit(node)`` method; a plain function taking
the node works too.
"""
from typing import Callable, List, Protocol, Union, runtime_checkable

from weightgraph.core.graph_node import GraphNode
from weightgraph.exceptions import InvalidArgumentError


@runtime_checkable
class NodeVisitor(Protocol):
    """Called once per node, the first time a traversal reaches it."""

    def visit(self, node: GraphNode) -> None:
        ...


VisitorLike = Union[NodeVisitor, Callable[[GraphNode], None]]


def as_callback(visitor: VisitorLike) -> Callable[[GraphNode], None]:
    """Normalize a visitor object or a plain callable into a callable."""
    if isinstance(visitor, NodeVisitor):
        return visitor.visit
    if callable(visitor):
        return visitor
    raise InvalidArgumentError(
        f"Expected a NodeVisitor or callable, got {type(visitor).__name__}"
    )


class RecordingVisitor:
    """Visitor that remembers every node it was handed, in order."""

    def __init__(self):
        self.nodes: List[GraphNode] = []

    def visit(self, node: GraphNode) -> None:
        self.nodes.append(node)

    @property
    def names(self) -> List[str]:
        return [node.name for node in self.nodes]

    def __len__(self) -> int:
        return len(self.nodes)

from pydantic import BaseModel, Field, ConfigDict
from typing import Tuple

from weightgraph.core.graph_node import GraphNode


class GraphEdge(BaseModel):
    """
    A candidate edge ``start -> end`` with its cost.

    Edges compare by cost only, so a heap of them pops the cheapest first.
    They hold references to nodes owned by a Graph and have no identity of
    their own.
    """

    start: GraphNode
    end: GraphNode
    cost: int = Field(..., ge=0, description="Edge weight (must be non-negative)")

    model_config = ConfigDict(frozen=True)

    def __lt__(self, other: "GraphEdge") -> bool:
        return self.cost < other.cost

    @classmethod
    def between(cls, start: GraphNode, end: GraphNode) -> "GraphEdge":
        """Build the edge using the weight ``start`` stores for ``end``."""
        return cls(start=start, end=end, cost=start.get_weight(end))

    def reverse(self) -> "GraphEdge":
        """Create the mirrored edge ``end -> start``."""
        return GraphEdge(start=self.end, end=self.start, cost=self.cost)

    @property
    def names(self) -> Tuple[str, str]:
        return self.start.name, self.end.name

    def __repr__(self) -> str:
        return f"GraphEdge({self.start.name} -> {self.end.name}, cost={self.cost})"

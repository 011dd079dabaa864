from pydantic import BaseModel, Field, ConfigDict

from weightgraph.core.graph_node import GraphNode


class GraphPath(BaseModel):
    """A destination node paired with the accumulated cost of reaching it."""

    node: GraphNode
    cost: int = Field(..., ge=0)

    model_config = ConfigDict(frozen=True)

    def __lt__(self, other: "GraphPath") -> bool:
        return self.cost < other.cost

    def extend(self, neighbor: GraphNode) -> "GraphPath":
        """Path to ``neighbor`` through this path's node."""
        return GraphPath(node=neighbor, cost=self.cost + self.node.get_weight(neighbor))

    def __repr__(self) -> str:
        return f"GraphPath({self.node.name}, cost={self.cost})"

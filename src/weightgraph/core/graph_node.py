from pydantic import BaseModel, Field, field_validator, ConfigDict, PrivateAttr, TypeAdapter, NonNegativeInt
from typing import Dict, List, Any

from weightgraph.exceptions import InvalidArgumentError, NodeLookupError


_WEIGHT_ADAPTER = TypeAdapter(NonNegativeInt, config=ConfigDict(strict=True))


class GraphNode(BaseModel):
    """
    A named vertex holding weighted adjacency to other nodes.

    The name is immutable and validated by Pydantic. Adjacency lives in a
    private mapping keyed by neighbor identity, so two nodes with the same
    name from different graphs are never confused.
    """

    name: str = Field(..., min_length=1, description="Unique node name within its graph")

    _adjacency: Dict["GraphNode", int] = PrivateAttr(default_factory=dict)

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {"name": "A"}
        }
    )

    @field_validator('name', mode='before')
    @classmethod
    def coerce_name_to_string(cls, v):
        """Ensure the name is a string. Whitespace is part of the name."""
        if v is None:
            raise ValueError("Node name is required")
        return str(v)

    @field_validator('name')
    @classmethod
    def validate_name_not_blank(cls, v):
        """Reject names made only of whitespace, without rewriting the name."""
        if not v.strip():
            raise ValueError("Node name cannot be blank")
        return v

    # =============================================================================
    # ADJACENCY
    # =============================================================================

    def add_edge_to_node(self, other: "GraphNode", weight: int) -> None:
        """
        Insert or overwrite the directed edge from this node to ``other``.

        Args:
            other: Target node
            weight: Non-negative integer cost

        Raises:
            InvalidArgumentError: If ``other`` is None
            pydantic.ValidationError: If ``weight`` is not a non-negative integer
        """
        other, weight = self._check_edge_args(other, weight)
        self._adjacency[other] = weight

    def add_undirected_edge_to_node(self, other: "GraphNode", weight: int) -> None:
        """
        Insert or overwrite the edge in both directions with the same weight.

        Both arguments are validated before either direction is written.
        """
        other, weight = self._check_edge_args(other, weight)
        self._adjacency[other] = weight
        other._adjacency[self] = weight

    def _check_edge_args(self, other: "GraphNode", weight: int):
        if other is None:
            raise InvalidArgumentError(f"Cannot add an edge from '{self.name}' to None")
        if not isinstance(other, GraphNode):
            raise InvalidArgumentError(
                f"Edge target must be a GraphNode, got {type(other).__name__}"
            )
        return other, _WEIGHT_ADAPTER.validate_python(weight)

    def get_neighbors(self) -> List["GraphNode"]:
        """Nodes this node has an outgoing edge to, in insertion order."""
        return list(self._adjacency)

    def get_weight(self, other: "GraphNode") -> int:
        """
        Get the weight of the edge to ``other``.

        Raises:
            NodeLookupError: If there is no edge to ``other``
        """
        try:
            return self._adjacency[other]
        except KeyError:
            other_name = getattr(other, "name", repr(other))
            raise NodeLookupError(self.name, other_name) from None

    def has_edge_to(self, other: "GraphNode") -> bool:
        """Check if an outgoing edge to ``other`` exists."""
        return other in self._adjacency

    @property
    def degree(self) -> int:
        """Number of outgoing edges."""
        return len(self._adjacency)

    # =============================================================================
    # IDENTITY
    # =============================================================================

    def __eq__(self, other: Any) -> bool:
        return self is other

    def __hash__(self) -> int:
        return id(self)

    def __repr__(self) -> str:
        return f"GraphNode(name='{self.name}', degree={self.degree})"

# src/weightgraph/__init__.py
r"""
weightgraph - Small in-memory weighted graph library

weightgraph provides:
- Named nodes with weighted, directed or undirected adjacency
- Breadth-first and depth-first traversal with visitor callbacks
- Dijkstra single-source shortest paths
- Prim-Jarnik minimum spanning trees
- Explicit reporting of unreachable nodes instead of silent hangs

Example:
    ```python
    from weightgraph import Graph, RecordingVisitor

    graph = Graph(name="triangle")
    graph.add_edge("A", "B", 1)
    graph.add_edge("B", "C", 2)
    graph.add_edge("A", "C", 10)

    visitor = RecordingVisitor()
    graph.breadth_first_search("A", visitor)
    visitor.names                      # ['A', 'B', 'C']

    costs = graph.dijkstra("A")
    {node.name: cost for node, cost in costs.items()}   # {'A': 0, 'B': 1, 'C': 3}

    tree = graph.prim_jarnik()
    tree.total_weight()                # 3
    ```
"""
import logging

# Core graph functionality
from weightgraph.core.graph import Graph
from weightgraph.core.graph_node import GraphNode
from weightgraph.core.graph_edge import GraphEdge
from weightgraph.core.graph_path import GraphPath
from weightgraph.core.visitor import NodeVisitor, RecordingVisitor

# Errors
from weightgraph.exceptions import (
    GraphError,
    InvalidArgumentError,
    NodeLookupError,
    UnreachableNodesError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Version info
__version__ = "0.1.0"

# Main exports
__all__ = [
    # Core classes
    "Graph",
    "GraphNode",
    "GraphEdge",
    "GraphPath",
    "NodeVisitor",
    "RecordingVisitor",

    # Errors
    "GraphError",
    "InvalidArgumentError",
    "NodeLookupError",
    "UnreachableNodesError",

    # Version
    "__version__",
]

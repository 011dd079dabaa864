# src/weightgraph/core/__init__.py
"""
weightgraph Core Module

The graph data structure, its node and frontier types, and the traversal
and optimization algorithms built on them.
"""

from weightgraph.core.graph import Graph
from weightgraph.core.graph_node import GraphNode
from weightgraph.core.graph_edge import GraphEdge
from weightgraph.core.graph_path import GraphPath
from weightgraph.core.visitor import NodeVisitor, RecordingVisitor

__all__ = [
    "Graph",
    "GraphNode",
    "GraphEdge",
    "GraphPath",
    "NodeVisitor",
    "RecordingVisitor",
]

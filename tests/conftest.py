"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

import pytest

from weightgraph import Graph


@pytest.fixture
def triangle_graph() -> Graph:
    """A-B (1), B-C (2), A-C (10), all undirected."""
    graph = Graph(name="triangle")
    graph.add_edge("A", "B", 1)
    graph.add_edge("B", "C", 2)
    graph.add_edge("A", "C", 10)
    return graph


@pytest.fixture
def disconnected_graph() -> Graph:
    """Two components {A-B} and {C-D} with no edge between them."""
    graph = Graph(name="disconnected")
    graph.add_edge("A", "B", 1)
    graph.add_edge("C", "D", 4)
    return graph


@pytest.fixture
def sample_graph() -> Graph:
    """
    Small connected graph with cycles, all edges undirected:

        A-B 1, A-C 4, B-C 5, B-D 2, D-E 1, D-F 3, C-F 6
    """
    graph = Graph(name="sample")
    graph.add_edge("A", "B", 1)
    graph.add_edge("A", "C", 4)
    graph.add_edge("B", "C", 5)
    graph.add_edge("B", "D", 2)
    graph.add_edge("D", "E", 1)
    graph.add_edge("D", "F", 3)
    graph.add_edge("C", "F", 6)
    return graph

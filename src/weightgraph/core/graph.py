"""
weightgraph Core Graph Implementation

This module contains the Graph class: a name-keyed collection of weighted
nodes with breadth-first and depth-first traversal, Dijkstra shortest paths
and Prim-Jarnik minimum spanning trees.
"""
from typing import (
    Dict,
    List,
    Set,
    Optional,
    Iterator,
)
from collections import deque
from datetime import datetime
import heapq
import logging
import uuid

from weightgraph.config import resolve_unreachable_policy
from weightgraph.core.graph_node import GraphNode
from weightgraph.core.graph_edge import GraphEdge
from weightgraph.core.graph_path import GraphPath
from weightgraph.core.visitor import VisitorLike, as_callback
from weightgraph.exceptions import InvalidArgumentError, UnreachableNodesError

logger = logging.getLogger(__name__)


class Graph:
    """
    In-memory weighted graph.

    The graph owns every node, keyed by name. Adjacency is stored on the
    nodes themselves; the graph only guarantees that one name maps to one
    node object for its whole lifetime. Nodes are never removed.
    """

    def __init__(self, name: Optional[str] = None):
        """Initialize empty graph."""
        self.name = name or f"graph_{uuid.uuid4().hex[:8]}"
        self.created_at = datetime.now()

        self._nodes: Dict[str, GraphNode] = {}

    # =============================================================================
    # BASIC GRAPH OPERATIONS
    # =============================================================================

    def get_or_create_node(self, name: str) -> GraphNode:
        """
        Return the node with the given name, creating it on first reference.

        Subsequent calls with the same name return the same object.
        """
        if name is None:
            raise InvalidArgumentError("Node name is required")

        key = str(name)
        node = self._nodes.get(key)
        if node is None:
            node = GraphNode(name=key)
            self._nodes[node.name] = node
        return node

    def add_edge(
        self,
        from_name: str,
        to_name: str,
        weight: int,
        directed: bool = False
    ) -> GraphEdge:
        """
        Wire an edge between two named nodes, creating them if needed.

        Args:
            from_name: Source node name
            to_name: Target node name
            weight: Non-negative integer cost
            directed: Only add ``from -> to`` when True

        Returns:
            The ``from -> to`` edge as stored
        """
        start = self.get_or_create_node(from_name)
        end = self.get_or_create_node(to_name)

        if directed:
            start.add_edge_to_node(end, weight)
        else:
            start.add_undirected_edge_to_node(end, weight)

        return GraphEdge.between(start, end)

    # =============================================================================
    # GRAPH QUERIES
    # =============================================================================

    def get_node(self, name: str) -> Optional[GraphNode]:
        """Get a node by name without creating it. ``None`` never matches."""
        if name is None:
            return None
        return self._nodes.get(str(name))

    def contains_node(self, name: str) -> bool:
        """Check if a node with the given name exists. ``None`` never matches."""
        if name is None:
            return False
        return str(name) in self._nodes

    def get_all_nodes(self) -> List[GraphNode]:
        """All nodes in the graph. No ordering is promised."""
        return list(self._nodes.values())

    def edges(self) -> Iterator[GraphEdge]:
        """Every directed adjacency entry as an edge."""
        for node in self._nodes.values():
            for neighbor in node.get_neighbors():
                yield GraphEdge.between(node, neighbor)

    def undirected_edges(self) -> List[GraphEdge]:
        """
        Edges with mirrored ``A -> B`` / ``B -> A`` pairs reported once.

        A pair only collapses when both directions carry the same weight.
        """
        seen: Set[GraphEdge] = set()
        result = []

        for edge in self.edges():
            if edge.reverse() in seen:
                continue
            seen.add(edge)
            result.append(edge)

        return result

    # =============================================================================
    # GRAPH ALGORITHMS
    # =============================================================================

    def breadth_first_search(self, start_name: str, visitor: VisitorLike) -> None:
        """
        Breadth-first search from the named node.

        ``visitor`` is called on each node the first time it is dequeued. An
        unknown start name creates an isolated node, which is then the only
        node visited.
        """
        visit = as_callback(visitor)
        visited: Set[GraphNode] = set()
        queue = deque([self.get_or_create_node(start_name)])

        while queue:
            current = queue.popleft()

            if current in visited:
                continue

            visit(current)
            visited.add(current)

            for neighbor in current.get_neighbors():
                if neighbor not in visited:
                    queue.append(neighbor)

        logger.debug("BFS from '%s' visited %d node(s)", start_name, len(visited))

    def depth_first_search(self, start_name: str, visitor: VisitorLike) -> None:
        """
        Depth-first search from the named node.

        Same visit-on-pop discipline as ``breadth_first_search`` but with a
        stack, so siblings come out in reverse neighbor order.
        """
        visit = as_callback(visitor)
        visited: Set[GraphNode] = set()
        stack = [self.get_or_create_node(start_name)]

        while stack:
            current = stack.pop()

            if current in visited:
                continue

            visit(current)
            visited.add(current)

            for neighbor in current.get_neighbors():
                if neighbor not in visited:
                    stack.append(neighbor)

        logger.debug("DFS from '%s' visited %d node(s)", start_name, len(visited))

    def dijkstra(
        self,
        start_name: str,
        on_unreachable: Optional[str] = None
    ) -> Dict[GraphNode, int]:
        """
        Cost of the cheapest path from the named node to every node.

        Uses lazy deletion: a node may sit in the heap several times, and
        only its first pop (the cheapest) is kept.

        Args:
            start_name: Name of the source node (created if unknown)
            on_unreachable: ``"raise"`` or ``"partial"``; defaults to
                ``config.UNREACHABLE_POLICY``

        Returns:
            Mapping of node -> minimum total cost

        Raises:
            UnreachableNodesError: If some nodes cannot be reached and the
                policy is ``"raise"``
        """
        policy = resolve_unreachable_policy(on_unreachable)
        result: Dict[GraphNode, int] = {}
        frontier = [GraphPath(node=self.get_or_create_node(start_name), cost=0)]

        while frontier and len(result) < len(self._nodes):
            path = heapq.heappop(frontier)

            if path.node in result:
                continue

            result[path.node] = path.cost

            for neighbor in path.node.get_neighbors():
                heapq.heappush(frontier, path.extend(neighbor))

        logger.debug("Dijkstra from '%s' finalized %d node(s)", start_name, len(result))

        if len(result) < len(self._nodes):
            missing = [name for name, node in self._nodes.items() if node not in result]
            return self._unreachable("dijkstra", missing, result, policy)

        return result

    def prim_jarnik(self, on_unreachable: Optional[str] = None) -> "Graph":
        """
        Minimum spanning tree by Prim-Jarnik.

        The tree is a new Graph holding same-named copies of the nodes. It is
        grown from the first node of this graph, one cheapest frontier edge
        at a time.

        Args:
            on_unreachable: ``"raise"`` or ``"partial"``; defaults to
                ``config.UNREACHABLE_POLICY``

        Returns:
            New Graph with the tree's nodes and undirected edges

        Raises:
            UnreachableNodesError: If the graph is disconnected and the
                policy is ``"raise"``
        """
        policy = resolve_unreachable_policy(on_unreachable)
        result = Graph(name=f"{self.name}_mst")

        if not self._nodes:
            return result

        start = next(iter(self._nodes.values()))
        result.get_or_create_node(start.name)

        frontier = [GraphEdge.between(start, neighbor) for neighbor in start.get_neighbors()]
        heapq.heapify(frontier)

        while frontier and len(result) < len(self):
            edge = heapq.heappop(frontier)
            start_name, end_name = edge.names

            if result.contains_node(start_name) and result.contains_node(end_name):
                continue

            tree_start = result.get_or_create_node(start_name)
            tree_end = result.get_or_create_node(end_name)
            tree_start.add_undirected_edge_to_node(tree_end, edge.cost)

            for neighbor in edge.end.get_neighbors():
                if neighbor is not edge.start:
                    heapq.heappush(frontier, GraphEdge.between(edge.end, neighbor))

        logger.debug(
            "Prim-Jarnik on '%s' spanned %d of %d node(s)", self.name, len(result), len(self)
        )

        if len(result) < len(self):
            missing = [name for name in self._nodes if not result.contains_node(name)]
            return self._unreachable("prim_jarnik", missing, result, policy)

        return result

    def _unreachable(self, algorithm: str, missing: List[str], partial, policy: str):
        """Apply the unreachable-node policy to a partial result."""
        if policy == "raise":
            raise UnreachableNodesError(algorithm, missing, partial)

        logger.warning(
            "%s on '%s' could not reach %d node(s): %s",
            algorithm, self.name, len(missing), ", ".join(sorted(missing))
        )
        return partial

    # =============================================================================
    # GRAPH STATISTICS
    # =============================================================================

    def node_count(self) -> int:
        """Get total number of nodes."""
        return len(self._nodes)

    def edge_count(self) -> int:
        """Get total number of directed adjacency entries."""
        return sum(node.degree for node in self._nodes.values())

    def total_weight(self) -> int:
        """Sum of edge costs, counting mirrored pairs once."""
        return sum(edge.cost for edge in self.undirected_edges())

    # =============================================================================
    # UTILITIES
    # =============================================================================

    def __len__(self) -> int:
        """Return number of nodes."""
        return len(self._nodes)

    def __contains__(self, name: str) -> bool:
        """Check if node exists in graph."""
        return self.contains_node(name)

    def __iter__(self) -> Iterator[str]:
        """Iterate over node names."""
        return iter(self._nodes.keys())

    def __repr__(self) -> str:
        """String representation of graph."""
        return f"Graph(name='{self.name}', nodes={self.node_count()}, edges={self.edge_count()})"

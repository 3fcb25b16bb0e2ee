"""
graph.py — Graph Container & Generator
=======================================
Input graph for the traversal family: integer node ids 0..N-1 with a
display position, and undirected positive-weight edges.

Responsibilities:
  1. Building nodes & edges                 (add / create)
  2. Adjacency queries                      (neighbours)
  3. Random circular-layout generator
  4. Serialisation round-trip               (to_dict / from_dict)

Design decisions:
  - Nodes live in a dict keyed by id; edges in a list, because edge
    ORDER is observable: traversals visit neighbours in edge-list order.
  - A separate adjacency dict `_adj[node_id] → [(neighbour_id, edge)]`
    is maintained incrementally in edge insertion order, so neighbour
    queries are O(degree) and still return neighbours in edge-list order.
  - Algorithms never mutate the graph.
"""

import math
import random
from typing import Any, Dict, List, Optional, Set, Tuple

from structures.edge import Edge
from structures.node import Node
from utils.errors import InvalidInput


class Graph:
    """
    Attributes:
        nodes : {node_id: Node}
        edges : [Edge, …] in insertion order
        _adj  : {node_id: [(neighbour_id, Edge), …]}
    """

    def __init__(self):
        self.nodes: Dict[int, Node]                    = {}
        self.edges: List[Edge]                         = []
        self._adj:  Dict[int, List[Tuple[int, Edge]]]  = {}

    # ==================================================================
    # NODE CRUD
    # ==================================================================
    def add_node(self, node: Node) -> Node:
        if node.id in self.nodes:
            raise InvalidInput(f"Duplicate node id {node.id}", field="nodes")
        self.nodes[node.id] = node
        self._adj.setdefault(node.id, [])
        return node

    def create_node(self, node_id: int, x: float = 0.0, y: float = 0.0) -> Node:
        """Convenience: create + add in one call."""
        return self.add_node(Node(node_id=node_id, x=x, y=y))

    def has_node(self, node_id: int) -> bool:
        return node_id in self.nodes

    # ==================================================================
    # EDGE CRUD
    # ==================================================================
    def add_edge(self, edge: Edge) -> Edge:
        if edge.source not in self.nodes or edge.target not in self.nodes:
            raise InvalidInput(
                f"Edge {edge.source}-{edge.target} references an unknown node", field="edges"
            )
        if edge.source == edge.target:
            raise InvalidInput(f"Self-loop on node {edge.source}", field="edges")
        if isinstance(edge.weight, bool) or not isinstance(edge.weight, int) or edge.weight <= 0:
            raise InvalidInput(
                f"Edge {edge.source}-{edge.target} needs a positive integer weight, got {edge.weight!r}",
                field="edges",
            )
        self.edges.append(edge)
        self._adj[edge.source].append((edge.target, edge))
        self._adj[edge.target].append((edge.source, edge))
        return edge

    def create_edge(self, source: int, target: int, weight: int = 1) -> Edge:
        return self.add_edge(Edge(source=source, target=target, weight=weight))

    # ==================================================================
    # ADJACENCY QUERIES
    # ==================================================================
    def neighbours(self, node_id: int) -> List[Tuple[int, Edge]]:
        """Return [(neighbour_id, edge)] for every incident edge, in edge-list order."""
        return list(self._adj.get(node_id, []))

    # ==================================================================
    # SERIALISATION
    # ==================================================================
    def to_dict(self) -> Dict[str, Any]:
        return {
            "nodes": [n.to_dict() for n in self.nodes.values()],
            "edges": [e.to_dict() for e in self.edges],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Graph":
        g = cls()
        try:
            for nd in data.get("nodes", []):
                g.add_node(Node.from_dict(nd))
            for ed in data.get("edges", []):
                g.add_edge(Edge.from_dict(ed))
        except InvalidInput:
            raise
        except (KeyError, TypeError, ValueError, AttributeError) as exc:
            raise InvalidInput(f"Malformed graph payload: {exc}", field="graph") from exc
        return g

    # ==================================================================
    # GENERATOR
    # ==================================================================
    @classmethod
    def generate_random(
        cls,
        num_nodes: int = 8,
        max_connections: int = 2,
        weight_range: Tuple[int, int] = (1, 15),
        seed: Optional[int] = None,
        center: Tuple[float, float] = (400.0, 250.0),
        radius: float = 180.0,
    ) -> "Graph":
        """
        Nodes evenly spaced on a circle.  Each node draws 1..max_connections
        random partners; self-loops are skipped and an unordered pair is
        only connected once.  The result is "connected-ish": isolated
        nodes and separate components are possible and valid.
        """
        rng = random.Random(seed)
        g   = cls()
        cx, cy = center

        for i in range(num_nodes):
            angle = 2 * math.pi * i / num_nodes
            g.create_node(i, x=cx + radius * math.cos(angle), y=cy + radius * math.sin(angle))

        seen: Set[Tuple[int, int]] = set()
        for i in range(num_nodes):
            for _ in range(rng.randint(1, max_connections)):
                target = rng.randrange(num_nodes)
                if target == i:
                    continue
                key = (min(i, target), max(i, target))
                if key in seen:
                    continue
                seen.add(key)
                g.create_edge(i, target, weight=rng.randint(*weight_range))

        return g

    # ==================================================================
    # UTILITY
    # ==================================================================
    def node_count(self) -> int:
        return len(self.nodes)

    def edge_count(self) -> int:
        return len(self.edges)

    def node_ids(self) -> List[int]:
        """Node ids in ascending order."""
        return sorted(self.nodes)

    def __repr__(self) -> str:
        return f"Graph(nodes={self.node_count()}, edges={self.edge_count()})"

"""
dijkstra.py — Dijkstra's Shortest Distances
============================================
Classic O(V²) form, no heap:

  1. Linear scan for the unvisited node with the smallest finite
     distance (ties → lowest id, since the scan runs in id order).
  2. Mark it visited and emit a step with a snapshot of ALL distances.
  3. Relax every incident edge.

Once a node is visited its distance never changes again.  Unreachable
nodes keep distance ∞ and are never selected; the loop stops as soon as
no unvisited node has a finite distance.

Correctness note: requires positive weights (the Graph enforces this).
"""

from typing import Dict, List, Optional, Set

from structures import Graph
from algorithms.step import GraphResult, GraphStep

INF = float("inf")


def dijkstra(graph: Graph, start: int) -> GraphResult:
    dist:    Dict[int, float] = {nid: INF for nid in graph.nodes}
    dist[start] = 0
    visited: List[int]        = []
    settled: Set[int]         = set()
    steps:   List[GraphStep]  = []
    node_ids = graph.node_ids()

    for _ in range(len(graph.nodes)):
        # -- select --
        current: Optional[int] = None
        best = INF
        for nid in node_ids:
            if nid not in settled and dist[nid] < best:
                best    = dist[nid]
                current = nid
        if current is None:
            break

        # -- settle --
        settled.add(current)
        visited.append(current)
        steps.append(GraphStep(node=current, visited=list(visited), distances=dict(dist)))

        # -- relax --
        for nbr, edge in graph.neighbours(current):
            new_dist = dist[current] + edge.weight
            if new_dist < dist[nbr]:
                dist[nbr] = new_dist

    return GraphResult(steps=steps)

"""
dfs.py — Depth-First Traversal
===============================
Recursive DFS: a node is recorded at its FIRST visit, then each unvisited
neighbour (edge-list order) is explored fully before backtracking.

The visited list / set are shared by every recursive call; each call
appends to them and never removes, so the snapshots grow monotonically.
"""

from typing import List, Set

from structures import Graph
from algorithms.step import GraphResult, GraphStep


def dfs(graph: Graph, start: int) -> GraphResult:
    visited: List[int]       = []
    seen:    Set[int]        = set()
    steps:   List[GraphStep] = []

    def _visit(node: int) -> None:
        seen.add(node)
        visited.append(node)
        steps.append(GraphStep(node=node, visited=list(visited)))
        for nbr, _edge in graph.neighbours(node):
            if nbr not in seen:
                _visit(nbr)

    _visit(start)
    return GraphResult(steps=steps)

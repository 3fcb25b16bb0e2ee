"""
bfs.py — Breadth-First Traversal
=================================
FIFO traversal from a start node.  A neighbour is marked visited the
moment it is DISCOVERED (not when it is dequeued), and each discovery is
its own step carrying the cumulative visited list.

Neighbours come from the edges incident to the current node, in
edge-list order.  A disconnected graph simply stops when the queue
empties.
"""

from collections import deque
from typing import List, Set

from structures import Graph
from algorithms.step import GraphResult, GraphStep


def bfs(graph: Graph, start: int) -> GraphResult:
    visited: List[int] = [start]
    seen:    Set[int]  = {start}
    queue              = deque([start])
    steps              = [GraphStep(node=start, visited=list(visited))]

    while queue:
        node = queue.popleft()
        for nbr, _edge in graph.neighbours(node):
            if nbr in seen:
                continue
            seen.add(nbr)
            visited.append(nbr)
            queue.append(nbr)
            steps.append(GraphStep(node=nbr, visited=list(visited)))

    return GraphResult(steps=steps)

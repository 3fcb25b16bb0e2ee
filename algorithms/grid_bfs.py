"""
grid_bfs.py — Breadth-First Search on a Grid
=============================================
Uniform-cost FIFO search; the first time `end` is dequeued the path is a
shortest one in move count.

Cells are marked on ENQUEUE, and each step's `visited` is that
discovered set at the moment the current cell is dequeued.
"""

from collections import deque
from typing import Dict, List, Optional, Set

from structures import Cell, Grid
from algorithms.astar import _reconstruct
from algorithms.step import PathResult, PathStep


def grid_bfs(grid: Grid, start: Cell, end: Cell) -> PathResult:
    queue                               = deque([start])
    seen:       Set[Cell]               = {start}
    discovered: List[Cell]              = [start]
    parent:     Dict[Cell, Optional[Cell]] = {}
    steps:      List[PathStep]          = []

    while queue:
        current = queue.popleft()
        steps.append(PathStep(current=current, visited=list(discovered)))

        if current == end:
            return PathResult(steps=steps, path=_reconstruct(parent, end))

        for nbr in grid.neighbours(current):
            if nbr not in seen:
                seen.add(nbr)
                discovered.append(nbr)
                parent[nbr] = current
                queue.append(nbr)

    return PathResult(steps=steps, path=[])


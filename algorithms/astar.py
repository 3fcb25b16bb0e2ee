"""
astar.py — A* / Greedy Best-First on a Grid
============================================
One open-set search drives two algorithms:

  • A*      – rank by f = g + h   (g = moves so far, h = Manhattan)
  • greedy  – rank by h alone; path cost only decides which parent a
              cell keeps, never the expansion order

The open set is a plain list re-sorted by score every iteration (stable
sort, so equal scores keep insertion order).  That is O(n log n) per
expansion, which is fine for a few hundred cells.

Trace: one PathStep per expansion.  Its `visited` is the closed set
BEFORE the current cell is added to it, so the first step always has an
empty closed set.
"""

from typing import Dict, List, Optional, Set

from structures import Cell, Grid
from algorithms.step import PathResult, PathStep

INF = float("inf")


def manhattan(a: Cell, b: Cell) -> int:
    """|Δrow| + |Δcol| — admissible on a 4-connected uniform-cost grid."""
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def astar(grid: Grid, start: Cell, end: Cell, greedy: bool = False) -> PathResult:
    """
    Args:
        grid   : Read-only wall matrix.
        start  : Start cell (row, col), passable.
        end    : Goal cell (row, col), passable.
        greedy : Rank the open set by heuristic only.
    """

    def _score(cell: Cell) -> float:
        h = manhattan(cell, end)
        return h if greedy else g_score[cell] + h

    g_score: Dict[Cell, int]             = {start: 0}
    f_score: Dict[Cell, float]           = {start: _score(start)}
    parent:  Dict[Cell, Optional[Cell]]  = {}
    open_set:     List[Cell]             = [start]
    open_members: Set[Cell]              = {start}
    closed:       Set[Cell]              = set()
    closed_order: List[Cell]             = []
    steps:        List[PathStep]         = []

    while open_set:
        open_set.sort(key=lambda c: f_score.get(c, INF))
        current = open_set.pop(0)
        open_members.discard(current)

        steps.append(PathStep(current=current, visited=list(closed_order)))

        if current == end:
            return PathResult(steps=steps, path=_reconstruct(parent, end))

        closed.add(current)
        closed_order.append(current)

        for nbr in grid.neighbours(current):
            if nbr in closed:
                continue
            tentative_g = g_score[current] + 1

            if nbr not in open_members:
                open_set.append(nbr)
                open_members.add(nbr)
            elif tentative_g >= g_score.get(nbr, INF):
                continue

            parent[nbr]  = current
            g_score[nbr] = tentative_g
            f_score[nbr] = _score(nbr)

    return PathResult(steps=steps, path=[])


def greedy_best_first(grid: Grid, start: Cell, end: Cell) -> PathResult:
    return astar(grid, start, end, greedy=True)


# ---------------------------------------------------------------------------
def _reconstruct(parent: Dict[Cell, Optional[Cell]], end: Cell) -> List[Cell]:
    path: List[Cell] = []
    cur: Optional[Cell] = end
    while cur is not None:
        path.append(cur)
        cur = parent.get(cur)
    path.reverse()
    return path

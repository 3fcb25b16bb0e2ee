"""
grid.py — Pathfinding Grid
===========================
Fixed rows × cols matrix of cells, each passable or a wall.  Cells are
(row, col) tuples.  Start / end are NOT stored on the grid: they are
run parameters, and the maze generator merely promises never to wall
them over.

Wall toggling is a caller-side edit between runs; the pathfinding
algorithms treat the grid as read-only.
"""

import random
from typing import Any, Dict, Iterable, List, Optional, Set, Tuple

from structures.node import as_int
from utils.errors import InvalidInput

Cell = Tuple[int, int]      # (row, col)

# right, down, left, up — neighbour order is part of the trace
DIRECTIONS: List[Tuple[int, int]] = [(0, 1), (1, 0), (0, -1), (-1, 0)]


class Grid:
    """
    Attributes:
        rows, cols : Grid dimensions.
        walls      : Set of wall cells.
    """

    def __init__(self, rows: int, cols: int, walls: Optional[Iterable[Cell]] = None):
        if rows <= 0 or cols <= 0:
            raise InvalidInput(f"Grid must be at least 1x1, got {rows}x{cols}", field="grid")
        self.rows: int        = rows
        self.cols: int        = cols
        self.walls: Set[Cell] = set()
        for cell in walls or ():
            cell = (as_int(cell[0], "walls"), as_int(cell[1], "walls"))
            if not self.in_bounds(cell):
                raise InvalidInput(f"Wall {cell} is outside the {rows}x{cols} grid", field="walls")
            self.walls.add(cell)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def in_bounds(self, cell: Cell) -> bool:
        r, c = cell
        return 0 <= r < self.rows and 0 <= c < self.cols

    def is_wall(self, cell: Cell) -> bool:
        return cell in self.walls

    def is_passable(self, cell: Cell) -> bool:
        return self.in_bounds(cell) and cell not in self.walls

    def neighbours(self, cell: Cell) -> List[Cell]:
        """4-connected, bounds-checked, wall-free neighbours of cell."""
        r, c = cell
        out: List[Cell] = []
        for dr, dc in DIRECTIONS:
            n = (r + dr, c + dc)
            if self.is_passable(n):
                out.append(n)
        return out

    # ------------------------------------------------------------------
    # Caller-side edits
    # ------------------------------------------------------------------
    def toggle_wall(self, cell: Cell) -> bool:
        """Flip a cell between wall and passable.  Returns the new wall state."""
        if not self.in_bounds(cell):
            raise InvalidInput(f"Cell {cell} is outside the grid", field="cell")
        if cell in self.walls:
            self.walls.discard(cell)
            return False
        self.walls.add(cell)
        return True

    def clear_walls(self) -> None:
        self.walls.clear()

    # ------------------------------------------------------------------
    # Generator
    # ------------------------------------------------------------------
    @classmethod
    def generate_maze(
        cls,
        rows: int,
        cols: int,
        start: Cell,
        end: Cell,
        wall_probability: float = 0.25,
        seed: Optional[int] = None,
    ) -> "Grid":
        """Turn each cell into a wall with `wall_probability`, never start / end."""
        grid = cls(rows, cols)
        for name, cell in (("start", start), ("end", end)):
            if not grid.in_bounds(tuple(cell)):
                raise InvalidInput(f"{name} {tuple(cell)} is outside the {rows}x{cols} grid", field=name)
        rng  = random.Random(seed)
        keep = {tuple(start), tuple(end)}
        grid.walls.update(
            (r, c)
            for r in range(rows)
            for c in range(cols)
            if rng.random() < wall_probability and (r, c) not in keep
        )
        return grid

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        return {
            "rows":  self.rows,
            "cols":  self.cols,
            "walls": [list(c) for c in sorted(self.walls)],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Grid":
        try:
            return cls(as_int(data["rows"], "grid"), as_int(data["cols"], "grid"), data.get("walls", []))
        except InvalidInput:
            raise
        except (KeyError, TypeError, ValueError, IndexError) as exc:
            raise InvalidInput(f"Malformed grid payload: {exc}", field="grid") from exc

    def __repr__(self) -> str:
        return f"Grid({self.rows}x{self.cols}, walls={len(self.walls)})"

"""
algorithms/__init__.py — Algorithm Registry & Entry Points
============================================================
Single source of truth for every algorithm the visualizer knows about,
and the four functions the presentation layer calls:

    from algorithms import run_sort, run_search, run_graph_traversal, run_pathfinding

    result = run_sort("bubble", [5, 3, 8, 1])
    result = run_search(SearchAlgorithm.BINARY, values, target=8)

Each family is a closed Enum.  REGISTRY maps every member to an AlgoInfo
card; members declared for the UI but not implemented yet carry
fn=None and raise UnsupportedAlgorithm instead of silently returning an
empty trace.  A name outside the enum is a typo, not "coming soon", and
raises InvalidInput.

Inputs are validated here, once, before the first step is generated.
The algorithm functions themselves assume clean input.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Sequence, Type, TypeVar, Union

from structures import Cell, Graph, Grid
from utils.errors import InvalidInput, UnsupportedAlgorithm, VisualizerError

from algorithms.sorting   import bubble_sort, selection_sort, insertion_sort, merge_sort, quick_sort, heap_sort
from algorithms.searching import linear_search, binary_search, jump_search, interpolation_search
from algorithms.bfs       import bfs
from algorithms.dfs       import dfs
from algorithms.dijkstra  import dijkstra
from algorithms.astar     import astar, greedy_best_first
from algorithms.grid_bfs  import grid_bfs
from algorithms.step      import (
    GraphResult, GraphStep, PathResult, PathStep,
    SearchResult, SearchStep, SortResult, SortStep,
)


# ---------------------------------------------------------------------------
# Families
# ---------------------------------------------------------------------------
class Family(Enum):
    SORT   = "sort"
    SEARCH = "search"
    GRAPH  = "graph"
    PATH   = "path"


class SortAlgorithm(Enum):
    BUBBLE    = "bubble"
    SELECTION = "selection"
    INSERTION = "insertion"
    MERGE     = "merge"
    QUICK     = "quick"
    HEAP      = "heap"


class SearchAlgorithm(Enum):
    LINEAR        = "linear"
    BINARY        = "binary"
    JUMP          = "jump"
    INTERPOLATION = "interpolation"


class GraphAlgorithm(Enum):
    BFS          = "bfs"
    DFS          = "dfs"
    DIJKSTRA     = "dijkstra"
    BELLMAN_FORD = "bellman_ford"   # not implemented yet
    PRIM         = "prim"           # not implemented yet
    KRUSKAL      = "kruskal"        # not implemented yet


class PathAlgorithm(Enum):
    ASTAR  = "astar"
    GREEDY = "greedy"
    BFS    = "bfs"
    DFS    = "dfs"                  # not implemented yet


FAMILY_ENUMS: Dict[Family, Type[Enum]] = {
    Family.SORT:   SortAlgorithm,
    Family.SEARCH: SearchAlgorithm,
    Family.GRAPH:  GraphAlgorithm,
    Family.PATH:   PathAlgorithm,
}


# ---------------------------------------------------------------------------
# AlgoInfo — metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    algorithm:       Enum                   # enum member, e.g. SortAlgorithm.BUBBLE
    family:          Family
    label:           str                    # human label, e.g. "Bubble Sort"
    fn:              Optional[Callable]     # None → declared but not implemented
    complexity_time: str  = ""              # e.g. "O(n²)"
    requires_sorted: bool = False           # search runs on a sorted copy?
    description:     str  = ""              # one-liner for the UI card

    @property
    def key(self) -> str:
        return self.algorithm.value

    @property
    def implemented(self) -> bool:
        return self.fn is not None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "key":             self.key,
            "family":          self.family.value,
            "label":           self.label,
            "complexity":      self.complexity_time,
            "requires_sorted": self.requires_sorted,
            "implemented":     self.implemented,
            "description":     self.description,
        }


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
_CARDS: List[AlgoInfo] = [
    # -- sorting --
    AlgoInfo(SortAlgorithm.BUBBLE, Family.SORT, "Bubble Sort", bubble_sort, "O(n²)",
             description="Swaps adjacent out-of-order pairs; the largest value bubbles to the end each pass."),
    AlgoInfo(SortAlgorithm.SELECTION, Family.SORT, "Selection Sort", selection_sort, "O(n²)",
             description="Selects the minimum of the unsorted suffix and swaps it into place."),
    AlgoInfo(SortAlgorithm.INSERTION, Family.SORT, "Insertion Sort", insertion_sort, "O(n²)",
             description="Shifts larger values right to insert each element into the sorted prefix."),
    AlgoInfo(SortAlgorithm.MERGE, Family.SORT, "Merge Sort", merge_sort, "O(n log n)",
             description="Sorts both halves recursively, then merges them preferring the left run."),
    AlgoInfo(SortAlgorithm.QUICK, Family.SORT, "Quick Sort", quick_sort, "O(n log n)",
             description="Partitions around the last element, then sorts each side."),
    AlgoInfo(SortAlgorithm.HEAP, Family.SORT, "Heap Sort", heap_sort, "O(n log n)",
             description="Builds a max-heap and repeatedly moves the root to the end."),

    # -- searching --
    AlgoInfo(SearchAlgorithm.LINEAR, Family.SEARCH, "Linear Search", linear_search, "O(n)",
             description="Checks every slot left to right."),
    AlgoInfo(SearchAlgorithm.BINARY, Family.SEARCH, "Binary Search", binary_search, "O(log n)",
             requires_sorted=True, description="Halves the search window around the midpoint."),
    AlgoInfo(SearchAlgorithm.JUMP, Family.SEARCH, "Jump Search", jump_search, "O(√n)",
             requires_sorted=True, description="Jumps √n slots at a time, then scans inside one block."),
    AlgoInfo(SearchAlgorithm.INTERPOLATION, Family.SEARCH, "Interpolation Search", interpolation_search,
             "O(log log n)", requires_sorted=True,
             description="Estimates the probe position from the value range."),

    # -- graph --
    AlgoInfo(GraphAlgorithm.BFS, Family.GRAPH, "Breadth-First Search", bfs, "O(V + E)",
             description="Explores layer by layer; nodes are marked when discovered."),
    AlgoInfo(GraphAlgorithm.DFS, Family.GRAPH, "Depth-First Search", dfs, "O(V + E)",
             description="Dives deep before backtracking."),
    AlgoInfo(GraphAlgorithm.DIJKSTRA, Family.GRAPH, "Dijkstra's Algorithm", dijkstra, "O(V²)",
             description="Settles the closest unvisited node, then relaxes its edges."),
    AlgoInfo(GraphAlgorithm.BELLMAN_FORD, Family.GRAPH, "Bellman–Ford", None, "O(V · E)"),
    AlgoInfo(GraphAlgorithm.PRIM, Family.GRAPH, "Prim's MST", None, "O(V²)"),
    AlgoInfo(GraphAlgorithm.KRUSKAL, Family.GRAPH, "Kruskal's MST", None, "O(E log V)"),

    # -- pathfinding --
    AlgoInfo(PathAlgorithm.ASTAR, Family.PATH, "A* Search", astar, "O(b^d)",
             description="Expands the cell with the lowest g + Manhattan distance."),
    AlgoInfo(PathAlgorithm.GREEDY, Family.PATH, "Greedy Best-First", greedy_best_first, "O(b^d)",
             description="Expands the cell closest to the goal by Manhattan distance; not always optimal."),
    AlgoInfo(PathAlgorithm.BFS, Family.PATH, "Breadth-First Search", grid_bfs, "O(V + E)",
             description="Uniform-cost flood fill; finds a shortest path in moves."),
    AlgoInfo(PathAlgorithm.DFS, Family.PATH, "Depth-First Search", None, "O(V + E)"),
]

REGISTRY: Dict[Enum, AlgoInfo] = {info.algorithm: info for info in _CARDS}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
E = TypeVar("E", bound=Enum)


def parse_algorithm(enum_cls: Type[E], algorithm: Union[E, str]) -> E:
    """Enum member from a member or its string value; InvalidInput on typos."""
    if isinstance(algorithm, enum_cls):
        return algorithm
    if isinstance(algorithm, str):
        try:
            return enum_cls(algorithm.strip().lower())
        except ValueError:
            pass
    known = ", ".join(m.value for m in enum_cls)
    raise InvalidInput(f"Unknown algorithm {algorithm!r}; expected one of: {known}", field="algorithm")


def get_algorithm(algorithm: Enum) -> AlgoInfo:
    """Return the AlgoInfo card for an enum member."""
    return REGISTRY[algorithm]


def list_algorithms(family: Optional[Family] = None) -> List[AlgoInfo]:
    """Return registered algorithms in declaration order, optionally for one family."""
    return [a for a in REGISTRY.values() if family is None or a.family == family]


def _implementation(algorithm: Enum) -> Callable:
    info = get_algorithm(algorithm)
    if info.fn is None:
        raise UnsupportedAlgorithm(info.family.value, info.key)
    return info.fn


# ---------------------------------------------------------------------------
# Boundary validation
# ---------------------------------------------------------------------------
def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _validate_values(values: Sequence[int]) -> List[int]:
    if isinstance(values, (str, bytes)) or not isinstance(values, Sequence):
        raise InvalidInput("Dataset must be a sequence of integers", field="array")
    for i, v in enumerate(values):
        if not _is_int(v):
            raise InvalidInput(f"Value at index {i} is not an integer: {v!r}", field="array")
    return list(values)


def _validate_cell(grid: Grid, cell: Any, name: str) -> Cell:
    try:
        r, c = cell
    except (TypeError, ValueError):
        raise InvalidInput(f"{name} must be a (row, col) pair, got {cell!r}", field=name)
    if not (_is_int(r) and _is_int(c)):
        raise InvalidInput(f"{name} must contain integers, got {cell!r}", field=name)
    cell = (r, c)
    if not grid.in_bounds(cell):
        raise InvalidInput(f"{name} {cell} is outside the {grid.rows}x{grid.cols} grid", field=name)
    if grid.is_wall(cell):
        raise InvalidInput(f"{name} {cell} is on a wall", field=name)
    return cell


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------
def run_sort(algorithm: Union[SortAlgorithm, str], values: Sequence[int]) -> SortResult:
    fn = _implementation(parse_algorithm(SortAlgorithm, algorithm))
    return fn(_validate_values(values))


def run_search(
    algorithm: Union[SearchAlgorithm, str],
    values: Sequence[int],
    target: int,
) -> SearchResult:
    fn = _implementation(parse_algorithm(SearchAlgorithm, algorithm))
    data = _validate_values(values)
    if not _is_int(target):
        raise InvalidInput(f"Target must be an integer, got {target!r}", field="target")
    return fn(data, target)


def run_graph_traversal(
    algorithm: Union[GraphAlgorithm, str],
    graph: Graph,
    start: int,
) -> GraphResult:
    fn = _implementation(parse_algorithm(GraphAlgorithm, algorithm))
    if not isinstance(graph, Graph):
        raise InvalidInput("Expected a Graph", field="graph")
    if not _is_int(start) or not graph.has_node(start):
        raise InvalidInput(f"Start node {start!r} is not in the graph", field="start")
    return fn(graph, start)


def run_pathfinding(
    algorithm: Union[PathAlgorithm, str],
    grid: Grid,
    start: Cell,
    end: Cell,
) -> PathResult:
    fn = _implementation(parse_algorithm(PathAlgorithm, algorithm))
    if not isinstance(grid, Grid):
        raise InvalidInput("Expected a Grid", field="grid")
    start_cell = _validate_cell(grid, start, "start")
    end_cell   = _validate_cell(grid, end, "end")
    return fn(grid, start_cell, end_cell)


__all__ = [
    "Family",
    "SortAlgorithm",
    "SearchAlgorithm",
    "GraphAlgorithm",
    "PathAlgorithm",
    "FAMILY_ENUMS",
    "AlgoInfo",
    "REGISTRY",
    "parse_algorithm",
    "get_algorithm",
    "list_algorithms",
    "run_sort",
    "run_search",
    "run_graph_traversal",
    "run_pathfinding",
    "SortStep",
    "SearchStep",
    "GraphStep",
    "PathStep",
    "SortResult",
    "SearchResult",
    "GraphResult",
    "PathResult",
    "VisualizerError",
    "InvalidInput",
    "UnsupportedAlgorithm",
]

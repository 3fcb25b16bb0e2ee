"""
step.py — Trace Step Snapshots
===============================
Every algorithm run produces an ordered list of steps.  A step is a
frozen-in-time picture of everything the visualizer needs to redraw one
frame without re-running the algorithm:

    • SortStep    – full array snapshot, indices under comparison,
                    indices now known final, running counters
    • SearchStep  – probed index, current [low, high] window, running
                    comparison count, hit index or -1
    • GraphStep   – node just visited / settled, cumulative visited list,
                    distance map (Dijkstra only)
    • PathStep    – grid cell under expansion, closed-set snapshot

Design decisions:
  - Steps are plain frozen dataclasses.  They are SNAPSHOTS: every
    list / dict is copied when the step is built, so later mutation of
    the algorithm's working state never leaks into an earlier frame.
  - The two builders below are the mutable scratch-pads the sorting and
    searching algorithms write through.  They own the working array and
    the running counters, so recursive helpers (merge / quick / heap)
    share one builder instead of threading counters through return
    values.  Helpers must mutate the array ONLY via swap() / write() so
    that every change is recorded.
"""

import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple

Cell = Tuple[int, int]      # (row, col)


# ---------------------------------------------------------------------------
# JSON helpers
# ---------------------------------------------------------------------------
def _finite_or_none(value: float) -> Optional[float]:
    """JSON has no Infinity; unreachable distances travel as null."""
    if value is None or math.isinf(value):
        return None
    return value


# ---------------------------------------------------------------------------
# Step records
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class SortStep:
    """
    Attributes:
        array       : Full array snapshot at this instant.
        comparing   : 0–2 indices being compared / written (empty when
                      the step only finalizes a segment).
        sorted      : Indices now known to be in their final position,
                      or None when the step does not mark any.
        comparisons : Running comparison count.
        swaps       : Running swap / write count.
    """

    array:       List[int]
    comparing:   List[int]            = field(default_factory=list)
    sorted:      Optional[List[int]]  = None
    comparisons: int                  = 0
    swaps:       int                  = 0

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "array":       list(self.array),
            "comparing":   list(self.comparing),
            "comparisons": self.comparisons,
            "swaps":       self.swaps,
        }
        if self.sorted is not None:
            data["sorted"] = list(self.sorted)
        return data


@dataclass(frozen=True)
class SearchStep:
    checking:    int
    range:       Optional[Tuple[int, int]] = None
    comparisons: int                       = 0
    found:       int                       = -1

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "checking":    self.checking,
            "comparisons": self.comparisons,
            "found":       self.found,
        }
        if self.range is not None:
            data["range"] = list(self.range)
        return data


@dataclass(frozen=True)
class GraphStep:
    node:      int
    visited:   List[int]                    = field(default_factory=list)
    distances: Optional[Dict[int, float]]   = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"node": self.node, "visited": list(self.visited)}
        if self.distances is not None:
            data["distances"] = {
                str(nid): _finite_or_none(d) for nid, d in self.distances.items()
            }
        return data


@dataclass(frozen=True)
class PathStep:
    current: Cell
    visited: List[Cell] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "current": list(self.current),
            "visited": [list(c) for c in self.visited],
        }


# ---------------------------------------------------------------------------
# Results — the steps plus each family's summary fields
# ---------------------------------------------------------------------------
@dataclass
class SortResult:
    steps:       List[SortStep] = field(default_factory=list)
    comparisons: int            = 0
    swaps:       int            = 0
    array:       List[int]      = field(default_factory=list)   # final sorted array

    def to_dict(self) -> Dict[str, Any]:
        return {
            "steps":       [s.to_dict() for s in self.steps],
            "comparisons": self.comparisons,
            "swaps":       self.swaps,
            "array":       list(self.array),
        }


@dataclass
class SearchResult:
    steps:       List[SearchStep] = field(default_factory=list)
    found:       int              = -1
    comparisons: int              = 0
    array:       List[int]        = field(default_factory=list)  # the array the indices refer to

    def to_dict(self) -> Dict[str, Any]:
        return {
            "steps":       [s.to_dict() for s in self.steps],
            "found":       self.found,
            "comparisons": self.comparisons,
            "array":       list(self.array),
        }


@dataclass
class GraphResult:
    steps: List[GraphStep] = field(default_factory=list)

    @property
    def visited(self) -> List[int]:
        """Visitation order of the completed traversal."""
        return list(self.steps[-1].visited) if self.steps else []

    @property
    def distances(self) -> Optional[Dict[int, float]]:
        """Final distance map (Dijkstra only)."""
        return dict(self.steps[-1].distances) if self.steps and self.steps[-1].distances is not None else None

    def to_dict(self) -> Dict[str, Any]:
        return {"steps": [s.to_dict() for s in self.steps]}


@dataclass
class PathResult:
    steps: List[PathStep] = field(default_factory=list)
    path:  List[Cell]     = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "steps": [s.to_dict() for s in self.steps],
            "path":  [list(c) for c in self.path],
        }


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------
class SortTraceBuilder:
    """
    Mutable scratch-pad that sorting algorithms write through.

    Usage inside an algorithm:
        tb = SortTraceBuilder(values)
        a  = tb.array                  # read freely, mutate via tb only
        tb.compare(j, j + 1)
        if a[j] > a[j + 1]:
            tb.swap(j, j + 1)
        return tb.result()
    """

    def __init__(self, values: Sequence[int]):
        self.array:       List[int]      = list(values)
        self.steps:       List[SortStep] = []
        self.comparisons: int            = 0
        self.swaps:       int            = 0

    def snapshot(self, comparing: Sequence[int] = (), final: Optional[Sequence[int]] = None) -> None:
        self.steps.append(SortStep(
            array=list(self.array),
            comparing=list(comparing),
            sorted=sorted(final) if final is not None else None,
            comparisons=self.comparisons,
            swaps=self.swaps,
        ))

    def compare(self, i: int, j: int) -> None:
        self.comparisons += 1
        self.snapshot((i, j))

    def swap(self, i: int, j: int) -> None:
        a = self.array
        a[i], a[j] = a[j], a[i]
        self.swaps += 1
        self.snapshot((i, j))

    def write(self, k: int, value: int) -> None:
        self.array[k] = value
        self.swaps += 1
        self.snapshot((k,))

    def mark_sorted(self, indices: Sequence[int]) -> None:
        self.snapshot((), indices)

    def result(self) -> SortResult:
        return SortResult(
            steps=self.steps,
            comparisons=self.comparisons,
            swaps=self.swaps,
            array=list(self.array),
        )


class SearchTraceBuilder:
    """Records one SearchStep per probe against a fixed array."""

    def __init__(self, values: Sequence[int], target: int):
        self.array:       List[int]        = list(values)
        self.target:      int              = target
        self.steps:       List[SearchStep] = []
        self.comparisons: int              = 0

    def probe(self, index: int, window: Optional[Tuple[int, int]] = None) -> bool:
        """Check array[index] against the target; True on a hit."""
        self.comparisons += 1
        hit = self.array[index] == self.target
        self.steps.append(SearchStep(
            checking=index,
            range=window,
            comparisons=self.comparisons,
            found=index if hit else -1,
        ))
        return hit

    def result(self, found: int = -1) -> SearchResult:
        return SearchResult(
            steps=self.steps,
            found=found,
            comparisons=self.comparisons,
            array=list(self.array),
        )

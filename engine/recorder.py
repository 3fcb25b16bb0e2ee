"""
recorder.py — Run Recorder & Analytics
========================================
Runs one algorithm through the registry, keeps the complete result, and
derives the numbers + notice the UI shows once the trace is done.

Usage:
    rec = Recorder()
    rec.run("sort", "bubble", values=[5, 3, 8, 1])
    rec.metrics.notice          # "Sorted 4 values"
    rec.export()                # JSON-safe snapshot for the client

Comparison Mode:
    Run two Recorders on the SAME dataset, then compare(rec1, rec2).

The recorder only wraps the pure entry points: it adds timing and
logging, never state shared between runs.
"""

import time
from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Optional, Union

from algorithms import (
    FAMILY_ENUMS,
    AlgoInfo,
    Family,
    GraphResult,
    PathResult,
    SearchResult,
    SortResult,
    get_algorithm,
    parse_algorithm,
    run_graph_traversal,
    run_pathfinding,
    run_search,
    run_sort,
)
from utils.errors import InvalidInput
from utils.logger import get_logger

logger = get_logger(__name__)

AnyResult = Union[SortResult, SearchResult, GraphResult, PathResult]

_RUNNERS: Dict[Family, Callable[..., AnyResult]] = {
    Family.SORT:   run_sort,
    Family.SEARCH: run_search,
    Family.GRAPH:  run_graph_traversal,
    Family.PATH:   run_pathfinding,
}


# ---------------------------------------------------------------------------
# Metrics dataclass — what the Analytics panel renders
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    family:        str   = ""
    algo_key:      str   = ""
    algo_label:    str   = ""
    total_steps:   int   = 0
    comparisons:   int   = 0
    swaps:         int   = 0
    found:         int   = -1         # search only
    path_length:   int   = 0          # cells on the path, start and end included
    nodes_visited: int   = 0          # graph nodes / grid cells in the last snapshot
    wall_time_ms:  float = 0.0
    outcome:       str   = ""         # sorted | found | not_found | complete | path_found | no_path
    notice:        str   = ""         # user-facing message for the finished run


# ---------------------------------------------------------------------------
# ComparisonResult — side-by-side analytics
# ---------------------------------------------------------------------------
@dataclass
class ComparisonResult:
    left:  RunMetrics = field(default_factory=RunMetrics)
    right: RunMetrics = field(default_factory=RunMetrics)
    # derived
    winner_steps:       str = ""   # which algo needed fewer steps
    winner_comparisons: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        result  : The complete result of the last run (steps + summary).
        metrics : RunMetrics derived from `result`.
    """

    def __init__(self):
        self.result:  Optional[AnyResult]  = None
        self.metrics: Optional[RunMetrics] = None
        self._info:   Optional[AlgoInfo]   = None

    # ------------------------------------------------------------------
    # Run
    # ------------------------------------------------------------------
    def run(self, family: Union[Family, str], algorithm: Union[Enum, str], **params: Any) -> RunMetrics:
        """Execute one algorithm to completion and compute its metrics."""
        fam    = parse_family(family)
        member = parse_algorithm(FAMILY_ENUMS[fam], algorithm)
        self._info = get_algorithm(member)
        self.result  = None
        self.metrics = None

        logger.debug("run_start", family=fam.value, algorithm=member.value)
        started = time.monotonic()
        self.result = _RUNNERS[fam](member, **params)
        wall_ms = (time.monotonic() - started) * 1000

        self.metrics = self._compute_metrics(wall_ms)
        logger.info(
            "run_complete",
            family=fam.value,
            algorithm=member.value,
            steps=self.metrics.total_steps,
            outcome=self.metrics.outcome,
            wall_time_ms=self.metrics.wall_time_ms,
        )
        return self.metrics

    # ------------------------------------------------------------------
    # Export (serialisable snapshot)
    # ------------------------------------------------------------------
    def export(self) -> Dict[str, Any]:
        if self.result is None or self.metrics is None:
            raise RuntimeError("Call run() first.")
        return {
            "algorithm": self._info.to_dict() if self._info else {},
            "result":    self.result.to_dict(),
            "metrics":   asdict(self.metrics),
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _compute_metrics(self, wall_ms: float) -> RunMetrics:
        info   = self._info
        result = self.result
        metrics = RunMetrics(
            family=info.family.value if info else "",
            algo_key=info.key if info else "",
            algo_label=info.label if info else "",
            total_steps=len(result.steps),
            wall_time_ms=round(wall_ms, 2),
        )

        if isinstance(result, SortResult):
            metrics.comparisons = result.comparisons
            metrics.swaps       = result.swaps
            metrics.outcome     = "sorted"
            metrics.notice      = f"Sorted {len(result.array)} values"

        elif isinstance(result, SearchResult):
            metrics.comparisons = result.comparisons
            metrics.found       = result.found
            if result.found != -1:
                metrics.outcome = "found"
                metrics.notice  = f"Found at index {result.found}"
            else:
                metrics.outcome = "not_found"
                metrics.notice  = "Not found"

        elif isinstance(result, GraphResult):
            metrics.nodes_visited = len(result.visited)
            metrics.outcome       = "complete"
            metrics.notice        = f"Traversal complete: {metrics.nodes_visited} nodes visited"

        elif isinstance(result, PathResult):
            metrics.path_length   = len(result.path)
            metrics.nodes_visited = len(result.steps[-1].visited) if result.steps else 0
            if result.path:
                metrics.outcome = "path_found"
                metrics.notice  = f"Path found ({metrics.path_length} cells)"
            else:
                metrics.outcome = "no_path"
                metrics.notice  = "No path"

        return metrics


def parse_family(family: Union[Family, str]) -> Family:
    if isinstance(family, Family):
        return family
    try:
        return Family(str(family).strip().lower())
    except ValueError:
        known = ", ".join(f.value for f in Family)
        raise InvalidInput(f"Unknown family {family!r}; expected one of: {known}", field="family")


# ---------------------------------------------------------------------------
# Comparison helper
# ---------------------------------------------------------------------------
def compare(left: Recorder, right: Recorder) -> ComparisonResult:
    """Given two completed Recorders, produce a ComparisonResult."""
    l = left.metrics  or RunMetrics()
    r = right.metrics or RunMetrics()

    def winner(l_val, r_val, l_key, r_key):
        if l_val == r_val:
            return "tie"
        return l_key if l_val < r_val else r_key

    return ComparisonResult(
        left=l,
        right=r,
        winner_steps=winner(l.total_steps, r.total_steps, l.algo_label, r.algo_label),
        winner_comparisons=winner(l.comparisons, r.comparisons, l.algo_label, r.algo_label),
    )

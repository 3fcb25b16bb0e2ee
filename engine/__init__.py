"""
engine/
-------
Run recording & analytics layer.

    from engine import Recorder, compare
"""

from engine.recorder import Recorder, RunMetrics, ComparisonResult, compare, parse_family

__all__ = [
    "Recorder",
    "RunMetrics",
    "ComparisonResult",
    "compare",
    "parse_family",
]

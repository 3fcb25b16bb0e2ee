"""
errors.py — Error Taxonomy
==========================
Two things can go wrong before a trace is produced:

    • InvalidInput          – the caller handed us data we cannot run on
                              (non-int values, unknown start node, start
                              cell on a wall, unknown algorithm name, …)
    • UnsupportedAlgorithm  – the algorithm is declared in its family's
                              enum but has no implementation yet

Both are raised at the boundary, before the first step is generated.
A run that completes without a match / path is NOT an error.
"""

from __future__ import annotations

from typing import Optional

from utils.logger import get_logger

logger = get_logger(__name__)


class VisualizerError(Exception):
    """Base exception for every engine-level failure."""


class InvalidInput(VisualizerError, ValueError):
    """The dataset or parameters violate the run's preconditions."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field
        logger.warning("invalid_input", field=field, message=message)


class UnsupportedAlgorithm(VisualizerError):
    """A declared algorithm that has no implementation yet."""

    def __init__(self, family: str, key: str):
        self.family = family
        self.key = key
        super().__init__(f"{family} algorithm '{key}' is not implemented yet")
        logger.info("unsupported_algorithm", family=family, algorithm=key)

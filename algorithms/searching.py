"""
searching.py — Searching Family
================================
Four search algorithms, each a pure function  (values, target) → SearchResult.

  • linear         – left-to-right scan of the array AS GIVEN
  • binary         – midpoint halving
  • jump           – √n-sized block jumps, then a linear scan in the block
  • interpolation  – probe position estimated from the value range

Binary, jump and interpolation first sort a COPY of the input.  Trace
indices refer to that copy, so SearchResult.array is the array the
caller must display; the caller's own list is never touched.

Every probe is one step.  A hit is always the final step; a miss leaves
found = -1 on every step.
"""

import math
from typing import Sequence

from algorithms.step import SearchResult, SearchTraceBuilder


# ---------------------------------------------------------------------------
# Linear search
# ---------------------------------------------------------------------------
def linear_search(values: Sequence[int], target: int) -> SearchResult:
    tb = SearchTraceBuilder(values, target)

    for i in range(len(tb.array)):
        if tb.probe(i):
            return tb.result(found=i)

    return tb.result()


# ---------------------------------------------------------------------------
# Binary search
# ---------------------------------------------------------------------------
def binary_search(values: Sequence[int], target: int) -> SearchResult:
    tb   = SearchTraceBuilder(sorted(values), target)
    a    = tb.array
    low  = 0
    high = len(a) - 1

    while low <= high:
        mid = (low + high) // 2
        if tb.probe(mid, (low, high)):
            return tb.result(found=mid)
        if a[mid] < target:
            low = mid + 1
        else:
            high = mid - 1

    return tb.result()


# ---------------------------------------------------------------------------
# Jump search
# ---------------------------------------------------------------------------
def jump_search(values: Sequence[int], target: int) -> SearchResult:
    """
    Phase 1 records one step per block boundary that is still below the
    target.  Phase 2 records one step per element scanned inside the
    landing block.  The last step re-checks the landing index.
    """
    tb = SearchTraceBuilder(sorted(values), target)
    a  = tb.array
    n  = len(a)
    if n == 0:
        return tb.result()

    block    = math.isqrt(n)
    boundary = block
    prev     = 0

    # -- phase 1: jump block by block --
    while a[min(boundary, n) - 1] < target:
        tb.probe(min(boundary, n) - 1)
        prev      = boundary
        boundary += block
        if prev >= n:
            return tb.result()

    # -- phase 2: linear scan inside the block --
    while a[prev] < target:
        tb.probe(prev)
        prev += 1
        if prev == min(boundary, n):
            return tb.result()

    if tb.probe(prev):
        return tb.result(found=prev)
    return tb.result()


# ---------------------------------------------------------------------------
# Interpolation search
# ---------------------------------------------------------------------------
def interpolation_search(values: Sequence[int], target: int) -> SearchResult:
    tb   = SearchTraceBuilder(sorted(values), target)
    a    = tb.array
    low  = 0
    high = len(a) - 1

    while low <= high and a[low] <= target <= a[high]:
        if low == high or a[high] == a[low]:
            # single value left in the window: check it directly
            window = (low, high) if low != high else None
            if tb.probe(low, window):
                return tb.result(found=low)
            return tb.result()

        pos = low + (target - a[low]) * (high - low) // (a[high] - a[low])

        if tb.probe(pos, (low, high)):
            return tb.result(found=pos)

        if a[pos] < target:
            low = pos + 1
        else:
            high = pos - 1

    return tb.result()

"""
sorting.py — Sorting Family
============================
Six sorting algorithms, each a pure function  values → SortResult.

Every algorithm writes through a SortTraceBuilder, which gives:
  1. One step per comparison  (the two indices + running counters)
  2. One step right after every swap / overwrite  (post-change snapshot)
  3. For algorithms that finalize a contiguous segment each outer pass
     (bubble, selection, insertion, heap): one trailing step per pass
     with empty `comparing` and the finalized indices in `sorted`.

Merge and quick sort have no "finalized suffix" structure, so their
streams are comparison / write steps only.  The last step's array is
always the sorted input.

The comparison operators are the textbook ones (merge uses `<=` to
prefer the left run, quick partitions on `<`, heap sifts on `>`);
changing them changes the trace, not just the result.

Arrays of length 0 or 1 produce no steps.
"""

from typing import Sequence

from algorithms.step import SortResult, SortTraceBuilder


def _finalized(start: int, stop: int, n: int, last_pass: bool) -> range:
    """Indices fixed after a pass; the final pass fixes everything."""
    return range(n) if last_pass else range(start, stop)


# ---------------------------------------------------------------------------
# Bubble sort
# ---------------------------------------------------------------------------
def bubble_sort(values: Sequence[int]) -> SortResult:
    tb = SortTraceBuilder(values)
    a  = tb.array
    n  = len(a)

    for i in range(n - 1):
        for j in range(n - i - 1):
            tb.compare(j, j + 1)
            if a[j] > a[j + 1]:
                tb.swap(j, j + 1)
        # pass i bubbles the largest remaining value to index n-1-i
        tb.mark_sorted(_finalized(n - 1 - i, n, n, last_pass=(i == n - 2)))

    return tb.result()


# ---------------------------------------------------------------------------
# Selection sort
# ---------------------------------------------------------------------------
def selection_sort(values: Sequence[int]) -> SortResult:
    tb = SortTraceBuilder(values)
    a  = tb.array
    n  = len(a)

    for i in range(n - 1):
        min_idx = i
        for j in range(i + 1, n):
            tb.compare(min_idx, j)
            if a[j] < a[min_idx]:
                min_idx = j
        if min_idx != i:
            tb.swap(i, min_idx)
        tb.mark_sorted(_finalized(0, i + 1, n, last_pass=(i == n - 2)))

    return tb.result()


# ---------------------------------------------------------------------------
# Insertion sort
# ---------------------------------------------------------------------------
def insertion_sort(values: Sequence[int]) -> SortResult:
    """
    Shifts are recorded as writes.  The comparison that stops a pass
    (a[j] <= key) gets its own step as well, so every comparison that
    is counted is also visible.
    """
    tb = SortTraceBuilder(values)
    a  = tb.array
    n  = len(a)

    for i in range(1, n):
        key = a[i]
        j   = i - 1
        while j >= 0:
            tb.compare(j, j + 1)
            if not a[j] > key:
                break
            tb.write(j + 1, a[j])
            j -= 1
        if j + 1 != i:
            tb.write(j + 1, key)
        tb.mark_sorted(range(i + 1))

    return tb.result()


# ---------------------------------------------------------------------------
# Merge sort
# ---------------------------------------------------------------------------
def merge_sort(values: Sequence[int]) -> SortResult:
    tb = SortTraceBuilder(values)
    _merge_sort(tb, 0, len(tb.array) - 1)
    return tb.result()


def _merge_sort(tb: SortTraceBuilder, left: int, right: int) -> None:
    if left < right:
        mid = (left + right) // 2
        _merge_sort(tb, left, mid)
        _merge_sort(tb, mid + 1, right)
        _merge(tb, left, mid, right)


def _merge(tb: SortTraceBuilder, left: int, mid: int, right: int) -> None:
    a          = tb.array
    left_run   = a[left:mid + 1]
    right_run  = a[mid + 1:right + 1]
    i = j = 0
    k = left

    while i < len(left_run) and j < len(right_run):
        # indices point at where the two heads originally sat
        tb.compare(left + i, mid + 1 + j)
        if left_run[i] <= right_run[j]:
            tb.write(k, left_run[i])
            i += 1
        else:
            tb.write(k, right_run[j])
            j += 1
        k += 1

    while i < len(left_run):
        tb.write(k, left_run[i])
        i += 1
        k += 1

    while j < len(right_run):
        tb.write(k, right_run[j])
        j += 1
        k += 1


# ---------------------------------------------------------------------------
# Quick sort  (Lomuto partition, last element as pivot)
# ---------------------------------------------------------------------------
def quick_sort(values: Sequence[int]) -> SortResult:
    tb = SortTraceBuilder(values)
    _quick_sort(tb, 0, len(tb.array) - 1)
    return tb.result()


def _quick_sort(tb: SortTraceBuilder, low: int, high: int) -> None:
    if low < high:
        pi = _partition(tb, low, high)
        _quick_sort(tb, low, pi - 1)
        _quick_sort(tb, pi + 1, high)


def _partition(tb: SortTraceBuilder, low: int, high: int) -> int:
    a     = tb.array
    pivot = a[high]
    i     = low - 1

    for j in range(low, high):
        tb.compare(j, high)
        if a[j] < pivot:
            i += 1
            tb.swap(i, j)

    tb.swap(i + 1, high)
    return i + 1


# ---------------------------------------------------------------------------
# Heap sort
# ---------------------------------------------------------------------------
def heap_sort(values: Sequence[int]) -> SortResult:
    tb = SortTraceBuilder(values)
    n  = len(tb.array)

    # build max-heap
    for i in range(n // 2 - 1, -1, -1):
        _heapify(tb, n, i)

    # move the max to the end, shrink the heap
    for i in range(n - 1, 0, -1):
        tb.swap(0, i)
        _heapify(tb, i, 0)
        tb.mark_sorted(_finalized(i, n, n, last_pass=(i == 1)))

    return tb.result()


def _heapify(tb: SortTraceBuilder, n: int, i: int) -> None:
    a       = tb.array
    largest = i
    left    = 2 * i + 1
    right   = 2 * i + 2

    if left < n:
        tb.compare(left, largest)
        if a[left] > a[largest]:
            largest = left

    if right < n:
        tb.compare(right, largest)
        if a[right] > a[largest]:
            largest = right

    if largest != i:
        tb.swap(i, largest)
        _heapify(tb, n, largest)

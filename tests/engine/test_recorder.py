import pytest

from algorithms import Family, SortAlgorithm
from structures import Grid
from engine import ComparisonResult, Recorder, RunMetrics, compare
from utils.errors import InvalidInput, UnsupportedAlgorithm

from tests.conftest import build_graph


def test_sort_run_metrics():
    rec = Recorder()
    metrics = rec.run("sort", "bubble", values=[5, 3, 8, 1])

    assert isinstance(metrics, RunMetrics)
    assert metrics.family == "sort"
    assert metrics.algo_key == "bubble"
    assert metrics.algo_label == "Bubble Sort"
    assert metrics.comparisons == 6
    assert metrics.swaps == 4
    assert metrics.total_steps == 13
    assert metrics.outcome == "sorted"
    assert metrics.notice == "Sorted 4 values"
    assert metrics.wall_time_ms >= 0


def test_accepts_enum_members():
    metrics = Recorder().run(Family.SORT, SortAlgorithm.MERGE, values=[2, 1])
    assert metrics.algo_key == "merge"


def test_search_found_and_not_found():
    hit = Recorder().run("search", "binary", values=[1, 2, 3, 5, 8, 13], target=8)
    assert hit.outcome == "found"
    assert hit.found == 4
    assert hit.notice == "Found at index 4"

    miss = Recorder().run("search", "binary", values=[1, 3, 5, 7, 9], target=4)
    assert miss.outcome == "not_found"
    assert miss.found == -1
    assert miss.notice == "Not found"


def test_graph_run_counts_visited_nodes():
    g = build_graph(4, [(0, 1, 1), (1, 2, 1)])
    metrics = Recorder().run("graph", "bfs", graph=g, start=0)

    assert metrics.nodes_visited == 3
    assert metrics.outcome == "complete"
    assert metrics.notice == "Traversal complete: 3 nodes visited"


def test_path_run_found_and_blocked():
    found = Recorder().run("path", "astar", grid=Grid(3, 3), start=(0, 0), end=(2, 2))
    assert found.outcome == "path_found"
    assert found.path_length == 5
    assert found.notice == "Path found (5 cells)"

    blocked = Grid(3, 3, walls=[(0, 1), (1, 1), (2, 1)])
    none = Recorder().run("path", "bfs", grid=blocked, start=(0, 0), end=(2, 2))
    assert none.outcome == "no_path"
    assert none.path_length == 0
    assert none.notice == "No path"


def test_start_equals_end_is_a_found_path():
    metrics = Recorder().run("path", "astar", grid=Grid(3, 3), start=(1, 1), end=(1, 1))
    assert metrics.outcome == "path_found"
    assert metrics.path_length == 1


def test_export_shape():
    rec = Recorder()
    rec.run("sort", "quick", values=[3, 1, 2])
    data = rec.export()

    assert set(data) == {"algorithm", "result", "metrics"}
    assert data["algorithm"]["key"] == "quick"
    assert data["result"]["array"] == [1, 2, 3]
    assert data["metrics"]["outcome"] == "sorted"
    assert len(data["result"]["steps"]) == data["metrics"]["total_steps"]


def test_export_before_run_raises():
    with pytest.raises(RuntimeError):
        Recorder().export()


def test_unknown_family_rejected():
    with pytest.raises(InvalidInput) as exc:
        Recorder().run("trees", "bubble", values=[1])
    assert exc.value.field == "family"


def test_unsupported_algorithm_propagates():
    g = build_graph(2, [(0, 1, 1)])
    rec = Recorder()
    with pytest.raises(UnsupportedAlgorithm):
        rec.run("graph", "kruskal", graph=g, start=0)
    assert rec.result is None
    assert rec.metrics is None


def test_recorder_reuse_replaces_previous_run():
    rec = Recorder()
    rec.run("sort", "bubble", values=[2, 1])
    rec.run("sort", "heap", values=[3, 2, 1])
    assert rec.metrics.algo_key == "heap"
    assert rec.export()["result"]["array"] == [1, 2, 3]


# ---------------------------------------------------------------------------
# Comparison
# ---------------------------------------------------------------------------
def test_compare_picks_fewer_steps_and_comparisons():
    values = [1, 2, 3, 4, 5, 6]
    bubble, insertion = Recorder(), Recorder()
    bubble.run("sort", "bubble", values=values)
    insertion.run("sort", "insertion", values=values)

    result = compare(bubble, insertion)
    assert isinstance(result, ComparisonResult)
    # sorted input: insertion stops each pass after one comparison
    assert result.winner_comparisons == "Insertion Sort"
    assert result.left.algo_key == "bubble"
    assert result.right.algo_key == "insertion"


def test_compare_tie():
    left, right = Recorder(), Recorder()
    left.run("search", "linear", values=[4, 5, 6], target=4)
    right.run("search", "linear", values=[4, 5, 6], target=4)

    result = compare(left, right)
    assert result.winner_steps == "tie"
    assert result.winner_comparisons == "tie"


def test_comparison_result_to_dict():
    left, right = Recorder(), Recorder()
    left.run("search", "linear", values=[1, 2, 3], target=3)
    right.run("search", "binary", values=[1, 2, 3], target=3)

    data = compare(left, right).to_dict()
    assert data["left"]["comparisons"] == 3
    assert data["right"]["comparisons"] == 2
    assert data["winner_comparisons"] == "Binary Search"

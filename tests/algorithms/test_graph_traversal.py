import math

import pytest

from algorithms import GraphAlgorithm, run_graph_traversal
from algorithms.bfs import bfs
from algorithms.dfs import dfs
from algorithms.dijkstra import dijkstra
from structures import Graph

from tests.conftest import build_graph


def _component(graph: Graph, start: int) -> set:
    seen, stack = {start}, [start]
    while stack:
        node = stack.pop()
        for nbr, _edge in graph.neighbours(node):
            if nbr not in seen:
                seen.add(nbr)
                stack.append(nbr)
    return seen


def _brute_force_distances(graph: Graph, start: int) -> dict:
    dist = {nid: math.inf for nid in graph.nodes}
    dist[start] = 0
    for _ in range(len(graph.nodes)):
        for edge in graph.edges:
            for a, b in ((edge.source, edge.target), (edge.target, edge.source)):
                if dist[a] + edge.weight < dist[b]:
                    dist[b] = dist[a] + edge.weight
    return dist


# ---------------------------------------------------------------------------
# BFS
# ---------------------------------------------------------------------------
def test_bfs_on_path_graph(path_graph):
    result = bfs(path_graph, 0)
    assert result.visited == [0, 1, 2]
    assert [s.node for s in result.steps] == [0, 1, 2]
    assert [s.visited for s in result.steps] == [[0], [0, 1], [0, 1, 2]]


def test_bfs_marks_neighbours_on_discovery(square_graph):
    result = bfs(square_graph, 0)
    assert result.visited == [0, 1, 3, 2]


def test_bfs_isolated_start_is_a_single_step():
    g = build_graph(3, [(1, 2, 5)])
    result = bfs(g, 0)
    assert len(result.steps) == 1
    assert result.visited == [0]


@pytest.mark.parametrize("seed", [1, 2, 3, 4, 5])
def test_bfs_visits_exactly_the_component(seed):
    g = Graph.generate_random(num_nodes=8, seed=seed)
    result = bfs(g, 0)

    assert set(result.visited) == _component(g, 0)
    assert len(result.visited) == len(set(result.visited))
    for position, node in enumerate(result.visited[1:], start=1):
        earlier = set(result.visited[:position])
        assert any(nbr in earlier for nbr, _edge in g.neighbours(node))


# ---------------------------------------------------------------------------
# DFS
# ---------------------------------------------------------------------------
def test_dfs_goes_deep_before_backtracking(square_graph):
    result = dfs(square_graph, 0)
    assert result.visited == [0, 1, 2, 3]


def test_dfs_backtracks_to_unvisited_branch():
    # 0 - 1 - 3, 0 - 2
    g = build_graph(4, [(0, 1, 1), (0, 2, 1), (1, 3, 1)])
    result = dfs(g, 0)
    assert result.visited == [0, 1, 3, 2]


@pytest.mark.parametrize("seed", [1, 2, 3])
def test_dfs_visits_exactly_the_component(seed):
    g = Graph.generate_random(num_nodes=8, seed=seed)
    assert set(dfs(g, 0).visited) == _component(g, 0)


# ---------------------------------------------------------------------------
# Dijkstra
# ---------------------------------------------------------------------------
def test_dijkstra_on_weighted_cycle(square_graph):
    result = dijkstra(square_graph, 0)

    assert result.visited == [0, 1, 2, 3]
    assert result.distances == {0: 0, 1: 1, 2: 3, 3: 4}
    assert result.distances == _brute_force_distances(square_graph, 0)


def test_dijkstra_settled_distances_never_change(square_graph):
    result = dijkstra(square_graph, 0)

    for i, step in enumerate(result.steps):
        for later in result.steps[i + 1:]:
            for node in step.visited:
                assert later.distances[node] == step.distances[node]


@pytest.mark.parametrize("seed", [11, 12, 13, 14])
def test_dijkstra_matches_brute_force_on_random_graphs(seed):
    g = Graph.generate_random(num_nodes=7, seed=seed)
    result = dijkstra(g, 0)
    expected = _brute_force_distances(g, 0)

    for node in result.visited:
        assert result.distances[node] == expected[node]


def test_dijkstra_unreachable_nodes_stay_infinite():
    g = build_graph(3, [(0, 1, 2)])
    result = dijkstra(g, 0)

    assert result.visited == [0, 1]
    assert math.isinf(result.distances[2])
    assert result.steps[-1].to_dict()["distances"] == {"0": 0, "1": 2, "2": None}


def test_dijkstra_ties_go_to_lowest_id():
    g = Graph()
    for nid in (2, 1, 0):
        g.create_node(nid)
    g.create_edge(0, 2, 3)
    g.create_edge(0, 1, 3)

    result = dijkstra(g, 0)
    assert result.visited == [0, 1, 2]
    assert result.distances == {0: 0, 1: 3, 2: 3}


def test_dijkstra_first_step_is_the_start(square_graph):
    first = dijkstra(square_graph, 2).steps[0]
    assert first.node == 2
    assert first.distances[2] == 0


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------
@pytest.mark.parametrize("algorithm", [GraphAlgorithm.BFS, GraphAlgorithm.DFS, GraphAlgorithm.DIJKSTRA])
def test_same_graph_gives_identical_trace(algorithm, square_graph):
    first = run_graph_traversal(algorithm, square_graph, 0)
    second = run_graph_traversal(algorithm, square_graph, 0)
    assert first.to_dict() == second.to_dict()


def test_traversals_do_not_mutate_the_graph(square_graph):
    before = square_graph.to_dict()
    for algorithm in ("bfs", "dfs", "dijkstra"):
        run_graph_traversal(algorithm, square_graph, 0)
    assert square_graph.to_dict() == before

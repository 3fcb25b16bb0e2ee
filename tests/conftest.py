import pytest

from structures import Graph, Grid


def build_graph(num_nodes, edges):
    g = Graph()
    for i in range(num_nodes):
        g.create_node(i)
    for source, target, weight in edges:
        g.create_edge(source, target, weight)
    return g


@pytest.fixture
def path_graph() -> Graph:
    """0 - 1 - 2"""
    return build_graph(3, [(0, 1, 1), (1, 2, 1)])


@pytest.fixture
def square_graph() -> Graph:
    """4-cycle 0-1-2-3-0 with weights 1, 2, 3, 4."""
    return build_graph(4, [(0, 1, 1), (1, 2, 2), (2, 3, 3), (3, 0, 4)])


@pytest.fixture
def open_grid() -> Grid:
    return Grid(5, 5)


@pytest.fixture
def walled_grid() -> Grid:
    """5x5 with column 2 walled off completely."""
    return Grid(5, 5, walls=[(r, 2) for r in range(5)])

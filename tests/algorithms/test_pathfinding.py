import pytest

from algorithms import PathAlgorithm, run_pathfinding
from algorithms.astar import astar, greedy_best_first, manhattan
from algorithms.grid_bfs import grid_bfs
from structures import Grid

IMPLEMENTED = [PathAlgorithm.ASTAR, PathAlgorithm.GREEDY, PathAlgorithm.BFS]


def _is_valid_path(grid: Grid, path, start, end) -> bool:
    if not path or path[0] != start or path[-1] != end:
        return False
    for a, b in zip(path, path[1:]):
        if manhattan(a, b) != 1 or not grid.is_passable(b):
            return False
    return True


def test_manhattan():
    assert manhattan((0, 0), (3, 4)) == 7
    assert manhattan((2, 5), (2, 5)) == 0


@pytest.mark.parametrize("algorithm", IMPLEMENTED)
def test_open_grid_path_is_valid(algorithm, open_grid):
    result = run_pathfinding(algorithm, open_grid, (0, 0), (4, 3))
    assert _is_valid_path(open_grid, result.path, (0, 0), (4, 3))


@pytest.mark.parametrize("algorithm", [PathAlgorithm.ASTAR, PathAlgorithm.BFS])
@pytest.mark.parametrize("start,end", [((0, 0), (4, 4)), ((2, 1), (0, 4)), ((4, 0), (4, 4))])
def test_open_grid_path_is_shortest(algorithm, start, end, open_grid):
    result = run_pathfinding(algorithm, open_grid, start, end)
    # cells on the path = moves + 1
    assert len(result.path) - 1 == manhattan(start, end)


@pytest.mark.parametrize("algorithm", IMPLEMENTED)
def test_separating_wall_means_no_path(algorithm, walled_grid):
    result = run_pathfinding(algorithm, walled_grid, (0, 0), (4, 4))

    assert result.path == []
    assert result.steps
    # only the left side is ever explored
    assert all(c < 2 for _r, c in result.steps[-1].visited)


@pytest.mark.parametrize("algorithm", IMPLEMENTED)
def test_start_equals_end(algorithm, open_grid):
    result = run_pathfinding(algorithm, open_grid, (2, 2), (2, 2))
    assert result.path == [(2, 2)]
    assert len(result.steps) == 1
    assert result.steps[0].current == (2, 2)


@pytest.mark.parametrize("algorithm", IMPLEMENTED)
def test_same_grid_gives_identical_trace(algorithm, walled_grid):
    walled_grid.toggle_wall((2, 2))
    first = run_pathfinding(algorithm, walled_grid, (0, 0), (4, 4))
    second = run_pathfinding(algorithm, walled_grid, (0, 0), (4, 4))
    assert first.to_dict() == second.to_dict()


# ---------------------------------------------------------------------------
# A*
# ---------------------------------------------------------------------------
def test_astar_first_step_has_empty_closed_set(open_grid):
    result = astar(open_grid, (0, 0), (3, 3))
    assert result.steps[0].current == (0, 0)
    assert result.steps[0].visited == []


def test_astar_closed_set_grows_by_one_per_step(open_grid):
    steps = astar(open_grid, (0, 0), (3, 3)).steps
    for i, step in enumerate(steps):
        assert len(step.visited) == i
        if i:
            assert step.visited[-1] == steps[i - 1].current


def test_astar_routes_around_a_gap():
    # wall down column 2 except the bottom row
    grid = Grid(5, 5, walls=[(r, 2) for r in range(4)])
    result = astar(grid, (0, 0), (0, 4))

    assert _is_valid_path(grid, result.path, (0, 0), (0, 4))
    assert (4, 2) in result.path
    assert len(result.path) - 1 == 12


def test_greedy_heads_straight_for_the_goal(open_grid):
    result = greedy_best_first(open_grid, (0, 0), (0, 4))
    assert result.path == [(0, 0), (0, 1), (0, 2), (0, 3), (0, 4)]
    # nothing off the straight line is expanded
    assert [s.current for s in result.steps] == result.path


# ---------------------------------------------------------------------------
# Grid BFS
# ---------------------------------------------------------------------------
def test_grid_bfs_snapshot_holds_discovered_cells(open_grid):
    steps = grid_bfs(open_grid, (0, 0), (4, 4)).steps

    assert steps[0].current == (0, 0)
    assert steps[0].visited == [(0, 0)]
    # the start's neighbours are discovered before the second dequeue
    assert steps[1].visited == [(0, 0), (0, 1), (1, 0)]


def test_grid_bfs_does_not_touch_walls(walled_grid):
    walled_grid.toggle_wall((4, 2))
    result = grid_bfs(walled_grid, (0, 0), (0, 4))

    assert _is_valid_path(walled_grid, result.path, (0, 0), (0, 4))
    assert len(result.path) - 1 == 12
    assert all(not walled_grid.is_wall(c) for c in result.steps[-1].visited)

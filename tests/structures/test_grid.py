import pytest

from structures import Grid
from utils.errors import InvalidInput


def test_neighbours_are_in_right_down_left_up_order():
    grid = Grid(3, 3)
    assert grid.neighbours((1, 1)) == [(1, 2), (2, 1), (1, 0), (0, 1)]


def test_neighbours_skip_walls_and_edges():
    grid = Grid(3, 3, walls=[(0, 1)])
    assert grid.neighbours((0, 0)) == [(1, 0)]


def test_toggle_wall_flips_state():
    grid = Grid(2, 2)
    assert grid.toggle_wall((0, 1)) is True
    assert grid.is_wall((0, 1))
    assert grid.toggle_wall((0, 1)) is False
    assert grid.is_passable((0, 1))


def test_toggle_outside_grid_rejected():
    with pytest.raises(InvalidInput):
        Grid(2, 2).toggle_wall((2, 0))


def test_clear_walls():
    grid = Grid(3, 3, walls=[(0, 0), (1, 1)])
    grid.clear_walls()
    assert grid.walls == set()


@pytest.mark.parametrize("rows,cols", [(0, 3), (3, -1)])
def test_empty_grid_rejected(rows, cols):
    with pytest.raises(InvalidInput):
        Grid(rows, cols)


def test_wall_outside_grid_rejected():
    with pytest.raises(InvalidInput) as exc:
        Grid(2, 2, walls=[(5, 5)])
    assert exc.value.field == "walls"


def test_round_trip():
    grid = Grid(4, 6, walls=[(3, 1), (0, 2)])
    data = grid.to_dict()
    assert data == {"rows": 4, "cols": 6, "walls": [[0, 2], [3, 1]]}
    assert Grid.from_dict(data).walls == grid.walls


@pytest.mark.parametrize("payload", [{"cols": 3}, {"rows": "x", "cols": 3}, {"rows": 2, "cols": 2, "walls": [[1]]}])
def test_from_dict_rejects_malformed_payloads(payload):
    with pytest.raises(InvalidInput):
        Grid.from_dict(payload)


def test_generate_maze_never_walls_start_or_end():
    for seed in range(20):
        grid = Grid.generate_maze(6, 6, (0, 0), (5, 5), wall_probability=0.9, seed=seed)
        assert grid.is_passable((0, 0))
        assert grid.is_passable((5, 5))


def test_generate_maze_is_seeded():
    a = Grid.generate_maze(10, 10, (0, 0), (9, 9), seed=3)
    b = Grid.generate_maze(10, 10, (0, 0), (9, 9), seed=3)
    assert a.walls == b.walls


def test_generate_maze_probability_extremes():
    assert Grid.generate_maze(4, 4, (0, 0), (3, 3), wall_probability=0.0).walls == set()
    full = Grid.generate_maze(4, 4, (0, 0), (3, 3), wall_probability=1.0)
    assert len(full.walls) == 16 - 2


@pytest.mark.parametrize("start,end,field", [((9, 9), (0, 0), "start"), ((0, 0), (-4, 0), "end")])
def test_generate_maze_rejects_cells_outside_grid(start, end, field):
    with pytest.raises(InvalidInput) as exc:
        Grid.generate_maze(3, 3, start, end)
    assert exc.value.field == field


def test_fractional_wall_coordinates_rejected():
    with pytest.raises(InvalidInput) as exc:
        Grid.from_dict({"rows": 3, "cols": 3, "walls": [[1.5, 2]]})
    assert exc.value.field == "walls"


def test_integral_float_sizes_accepted():
    grid = Grid.from_dict({"rows": 3.0, "cols": 2, "walls": [[1.0, 1]]})
    assert (grid.rows, grid.cols) == (3, 2)
    assert grid.walls == {(1, 1)}

import numpy as np
import pytest

from tilepath.core.grid import TileGrid
from tilepath.simulation.astar import AStarFinder
from tilepath.utils.grid_utils import (
    is_valid_path,
    load_obstacles,
    parse_ascii_map,
    path_cost,
    render_path,
)

MAP = """
..#.
.X..
....
"""


def test_parse_ascii_map():
    grid = parse_ascii_map(MAP)
    assert grid.shape == (3, 4)
    assert grid.dtype == bool
    assert grid[0, 2]
    assert grid[1, 1]
    assert grid.sum() == 2


def test_parse_ragged_map_raises():
    with pytest.raises(ValueError):
        parse_ascii_map("...\n..\n")
    with pytest.raises(ValueError):
        parse_ascii_map("")


def test_load_obstacles_copies_and_clears():
    finder = AStarFinder(4, 3)
    finder.set_obstacle(11, True)
    load_obstacles(finder, parse_ascii_map(MAP))

    assert finder.grid.obstacle_indices() == [2, 5]


def test_load_obstacles_shape_mismatch():
    finder = AStarFinder(4, 3)
    with pytest.raises(ValueError):
        load_obstacles(finder, np.zeros((4, 3)))


def test_is_valid_path():
    grid = TileGrid(3, 3)
    assert is_valid_path(grid, [0, 4, 8]) == (True, "")
    assert is_valid_path(grid, []) == (True, "")

    ok, reason = is_valid_path(grid, [0, 2])
    assert not ok and "adjacent" in reason

    grid.set_obstacle(1, True)
    ok, reason = is_valid_path(grid, [0, 4])
    assert not ok and "corner" in reason

    ok, reason = is_valid_path(grid, [0, 1])
    assert not ok and "obstacle" in reason

    ok, reason = is_valid_path(grid, [8, 9])
    assert not ok and "range" in reason


def test_is_valid_path_accepts_finder():
    finder = AStarFinder(3, 3)
    assert is_valid_path(finder, [0, 1, 2])[0]


def test_path_cost():
    assert path_cost(5, [0, 6, 12, 18, 24]) == 56
    assert path_cost(3, [0, 3, 6, 7, 8]) == 40
    assert path_cost(3, [4]) == 0


def test_render_path():
    grid = parse_ascii_map(MAP)
    text = render_path(grid, [0, 4, 9, 10], 4)
    # every obstacle renders as "#", whatever character the map used
    assert text == "S.#.\n*#..\n.*D."

import numpy as np
import pytest

from tilepath.simulation.astar import AStarFinder
from tilepath.simulation.jps import JPSFinder
from tilepath.utils.grid_utils import load_obstacles

FINDERS = [AStarFinder, JPSFinder]


def make_finder(finder_class, obstacles):
    """Engine sized to ``obstacles`` (shape (height, width)) with its flags loaded."""
    obstacles = np.asarray(obstacles)
    height, width = obstacles.shape
    finder = finder_class(width, height)
    load_obstacles(finder, obstacles)
    return finder


@pytest.fixture(params=FINDERS, ids=['astar', 'jps'])
def finder_class(request):
    return request.param


@pytest.fixture
def open_5x5():
    return np.zeros((5, 5), dtype=bool)


@pytest.fixture
def center_blocked_3x3():
    grid = np.zeros((3, 3), dtype=bool)
    grid[1, 1] = True
    return grid


@pytest.fixture
def enclosed_goal_5x5():
    # (4, 4) is walled off by (3, 3), (3, 4) and (4, 3)
    grid = np.zeros((5, 5), dtype=bool)
    grid[3, 3] = True
    grid[4, 3] = True
    grid[3, 4] = True
    return grid

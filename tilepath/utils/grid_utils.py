"""
Grid Utilities
==============

Helpers for moving obstacle maps in and out of the engines:

- ``parse_ascii_map``   text map -> boolean numpy array
- ``load_obstacles``    numpy array -> engine obstacle flags
- ``is_valid_path``     step-by-step path validation
- ``path_cost``         10 / 14 step cost of an index path
- ``render_path``       ASCII rendering of a path over a map

Arrays are indexed ``[y, x]`` with shape ``(height, width)``, matching
``index = x + y * width``.
"""

import logging
from typing import Sequence, Tuple, Union

import numpy as np

from ..core.definitions import DIAGONAL_COST, DIRECT_COST
from ..core.grid import TileGrid

logger = logging.getLogger(__name__)

OBSTACLE_CHARS = frozenset('#X@')


def parse_ascii_map(text: str) -> np.ndarray:
    """
    Parse a text map into a boolean obstacle array.

    ``#``, ``X`` and ``@`` are obstacles; every other character is free.
    Line ``i`` of the text becomes row ``y = i``. Blank leading and trailing
    lines are ignored.

    Raises:
        ValueError: if the map is empty or its lines have different lengths
    """
    lines = [line.rstrip('\r') for line in text.strip('\n').split('\n')]
    if not lines or not lines[0]:
        raise ValueError("Map text is empty")

    width = len(lines[0])
    for y, line in enumerate(lines):
        if len(line) != width:
            raise ValueError(f"Map line {y} has length {len(line)}, expected {width}")

    grid = np.zeros((len(lines), width), dtype=bool)
    for y, line in enumerate(lines):
        for x, char in enumerate(line):
            grid[y, x] = char in OBSTACLE_CHARS
    return grid


def load_obstacles(finder, array: np.ndarray):
    """
    Copy a ``(height, width)`` array into a finder's obstacle flags.

    Non-zero cells become obstacles; every other tile is cleared.
    """
    grid: TileGrid = finder.grid
    array = np.asarray(array)
    if array.shape != (grid.height, grid.width):
        raise ValueError(f"Obstacle array shape {array.shape} does not match "
                         f"grid ({grid.height}, {grid.width})")

    grid.clear_obstacles()
    for y, x in np.argwhere(array != 0):
        grid.node_at(int(x), int(y)).is_obstacle = True


def is_valid_path(finder_or_grid: Union[TileGrid, object],
                  path: Sequence[int]) -> Tuple[bool, str]:
    """
    Check that every step of ``path`` is a legal move.

    Returns:
        (is_valid, reason) where reason is empty for a valid path
    """
    grid: TileGrid = getattr(finder_or_grid, 'grid', finder_or_grid)

    for index in path:
        if not grid.contains(index):
            return False, f"Index {index} out of range"
        if grid.is_obstacle(index):
            return False, f"Path crosses obstacle at {index}"

    for prev, cur in zip(path, path[1:]):
        px, py = grid.index_to_pos(prev)
        cx, cy = grid.index_to_pos(cur)
        dx, dy = cx - px, cy - py
        if max(abs(dx), abs(dy)) != 1:
            return False, f"Step {prev} -> {cur} is not between adjacent tiles"
        if dx != 0 and dy != 0:
            if not (grid.is_movable(px + dx, py) and grid.is_movable(px, py + dy)):
                return False, f"Step {prev} -> {cur} cuts a corner"

    return True, ""


def path_cost(width: int, path: Sequence[int]) -> int:
    """Sum of step costs: 10 per orthogonal step, 14 per diagonal step."""
    cost = 0
    for prev, cur in zip(path, path[1:]):
        diagonal = (prev % width != cur % width) and (prev // width != cur // width)
        cost += DIAGONAL_COST if diagonal else DIRECT_COST
    return cost


def render_path(array: np.ndarray, path: Sequence[int], width: int) -> str:
    """ASCII rendering: ``#`` obstacle, ``.`` free, ``*`` path, ``S``/``D`` endpoints."""
    array = np.asarray(array)
    rows = [['#' if cell else '.' for cell in row] for row in array]

    for index in path:
        rows[index // width][index % width] = '*'
    if path:
        rows[path[0] // width][path[0] % width] = 'S'
        rows[path[-1] // width][path[-1] % width] = 'D'

    return '\n'.join(''.join(row) for row in rows)

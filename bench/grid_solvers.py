"""Adapter running the tilepath engines on plain obstacle arrays for benchmarking."""
from typing import List, Optional, Tuple

import numpy as np

from tilepath.navigator import create_path_finder
from tilepath.utils.grid_utils import load_obstacles

Cell = Tuple[int, int]  # (row, col) == (y, x)

SOLVERS = {
    'astar': 'ASTAR',
    'jps': 'JPS',
}


def build_finder(name: str, grid):
    """Fresh engine for ``name`` loaded with ``grid`` (0 = free, non-zero = blocked)."""
    if name not in SOLVERS:
        raise ValueError(f'Unknown solver: {name}')
    grid = np.asarray(grid)
    height, width = grid.shape
    finder = create_path_finder(SOLVERS[name], width, height)
    load_obstacles(finder, grid)
    return finder


def run_solver(name: str, grid, start: Cell, goal: Cell) -> Tuple[Optional[List[Cell]], int]:
    """Return path, nodes_expanded. Path is None when the goal was not reached."""
    finder = build_finder(name, grid)
    width = finder.width
    found, path = finder.find_path(start[1] * width + start[0], goal[1] * width + goal[0])
    nodes = finder.diagnostics.nodes_expanded
    if not found or not finder.diagnostics.reached_destination:
        return None, nodes
    return [(index // width, index % width) for index in path], nodes

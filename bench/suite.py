"""Automated benchmark suite for comparing A* and JPS across map families.

Produces CSV with fields: solver, map_type, size, time_sec, nodes_expanded, path_len
"""
import csv
import logging
import os
import time

import numpy as np

from bench.grid_solvers import SOLVERS, run_solver

logger = logging.getLogger(__name__)


def synthetic_open_grid(size=50, obstacle_ratio=0.1, seed=42):
    rng = np.random.default_rng(seed)
    grid = (rng.random((size, size)) < obstacle_ratio).astype(np.int8)
    grid[0, 0] = 0
    grid[size - 1, size - 1] = 0
    return grid


def corridor_grid(size=50, spacing=3):
    grid = np.zeros((size, size), dtype=np.int8)
    for i, c in enumerate(range(spacing - 1, size, spacing)):
        grid[:, c] = 1
        # one gap per wall
        grid[(i * 7) % size, c] = 0
    return grid


def maze_grid(size=50, seed=42):
    # open room inside a wall ring, then toggle random cells
    rng = np.random.default_rng(seed)
    grid = np.ones((size, size), dtype=np.int8)
    grid[1:size - 1, 1:size - 1] = 0
    for _ in range(size * 3):
        r, c = rng.integers(1, size - 1, size=2)
        grid[r, c] = 1 - grid[r, c]
    grid[1, 1] = 0
    grid[size - 2, size - 2] = 0
    return grid


def endpoints(map_type, grid):
    size = len(grid)
    if map_type == 'maze':
        return (1, 1), (size - 2, size - 2)
    return (0, 0), (size - 1, size - 1)


def run_suite(out_csv='bench/results.csv', size=50):
    directory = os.path.dirname(out_csv)
    if directory:
        os.makedirs(directory, exist_ok=True)
    maps = [
        ('open', synthetic_open_grid(size, 0.05, seed=1)),
        ('open', synthetic_open_grid(size, 0.15, seed=2)),
        ('corridor', corridor_grid(size, spacing=3)),
        ('corridor', corridor_grid(size, spacing=4)),
        ('maze', maze_grid(size, seed=3)),
    ]

    rows = []
    for map_type, grid in maps:
        start, goal = endpoints(map_type, grid)
        for solver_name in SOLVERS:
            t0 = time.perf_counter()
            path, nodes = run_solver(solver_name, grid, start, goal)
            dt = time.perf_counter() - t0
            path_len = len(path) - 1 if path else -1
            rows.append({'solver': solver_name, 'map_type': map_type, 'size': len(grid),
                         'time_sec': dt, 'nodes_expanded': nodes, 'path_len': path_len})
            logger.info(f"{solver_name} {map_type} time={dt:.4f}s nodes={nodes} pathlen={path_len}")

    with open(out_csv, 'w', newline='') as f:
        writer = csv.DictWriter(f, fieldnames=list(rows[0].keys()))
        writer.writeheader()
        for r in rows:
            writer.writerow(r)
    logger.info(f'Wrote results to {out_csv}')
    return rows


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    run_suite()

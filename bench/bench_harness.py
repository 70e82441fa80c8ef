"""Benchmark harness for grid solvers (A*, JPS) with deterministic seeding.

Usage: python -m bench.bench_harness --solver jps --map open --size 100 --seed 42 --repeats 50

Writes CSV with columns: solver, map_family, size, seed, repeat, runtime_ms, nodes_expanded, path_len
"""
import argparse
import csv
import time

import numpy as np

from bench.grid_solvers import SOLVERS, run_solver


def generate_map(family: str, size: int, seed: int):
    rng = np.random.default_rng(seed)
    if family == 'open':
        return np.zeros((size, size), dtype=np.int8)
    if family == 'maze':
        grid = (rng.random((size, size)) < 0.3).astype(np.int8)
    elif family == 'corridor':
        grid = np.ones((size, size), dtype=np.int8)
        grid[:, size // 2] = 0
        grid[0, :] = 0
        grid[size - 1, :] = 0
        return grid
    else:
        grid = (rng.random((size, size)) < 0.15).astype(np.int8)
    grid[0, 0] = 0
    grid[size - 1, size - 1] = 0
    return grid


def run_once(solver_name, grid, start, goal):
    start_time = time.perf_counter()
    path, nodes = run_solver(solver_name, grid, start, goal)
    t = (time.perf_counter() - start_time) * 1000.0
    return t, nodes, len(path) - 1 if path else -1


def build_parser():
    p = argparse.ArgumentParser(description='Benchmark the tilepath engines')
    p.add_argument('--solver', choices=sorted(SOLVERS), default='astar')
    p.add_argument('--map', choices=['open', 'maze', 'corridor', 'random'], default='open')
    p.add_argument('--size', type=int, default=64)
    p.add_argument('--seed', type=int, default=42)
    p.add_argument('--repeats', type=int, default=10)
    p.add_argument('--out', default='bench_results.csv')
    return p


def main(argv=None):
    args = build_parser().parse_args(argv)

    with open(args.out, 'w', newline='') as f:
        writer = csv.writer(f)
        writer.writerow(['solver', 'map_family', 'size', 'seed', 'repeat',
                         'runtime_ms', 'nodes_expanded', 'path_len'])

        for r in range(args.repeats):
            grid = generate_map(args.map, args.size, args.seed + r)
            start = (0, 0)
            goal = (args.size - 1, args.size - 1)
            t, nodes, plen = run_once(args.solver, grid, start, goal)
            writer.writerow([args.solver, args.map, args.size, args.seed, r, t, nodes, plen])
    return 0


if __name__ == '__main__':
    raise SystemExit(main())

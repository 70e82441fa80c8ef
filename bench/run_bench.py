"""Simple benchmark runner for grid solvers. Produces CSV-like stdout for later import into plots."""
import time

from bench.grid_solvers import SOLVERS, run_solver
from bench.suite import synthetic_open_grid


def run_simple_bench(size=30, obstacle_ratio=0.12):
    grid = synthetic_open_grid(size, obstacle_ratio=obstacle_ratio)
    start = (0, 0)
    goal = (size - 1, size - 1)

    print("solver,grid_size,ob_ratio,time_sec,nodes_expanded,path_len")
    for solver_name in SOLVERS:
        t0 = time.perf_counter()
        path, nodes = run_solver(solver_name, grid, start, goal)
        dt = time.perf_counter() - t0
        print(f"{solver_name},{len(grid)},{obstacle_ratio},{dt:.4f},{nodes},{len(path) - 1 if path else -1}")


if __name__ == '__main__':
    run_simple_bench()

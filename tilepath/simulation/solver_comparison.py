"""
Solver Comparison Mode - Compare A* and Jump Point Search
=========================================================

Run both engines on identical copies of one obstacle map and report:
- path length and cost
- nodes expanded (A*: every popped tile, JPS: every popped jump point)
- wall-clock time
- optimality relative to the cheapest successful path

Neither engine is guaranteed optimal (the Manhattan heuristic overestimates
with diagonal moves), so optimality can differ in either direction.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List

import numpy as np

from ..utils.grid_utils import load_obstacles
from .astar import AStarFinder
from .base import PathFinderBase
from .jps import JPSFinder

logger = logging.getLogger(__name__)


@dataclass
class SolverMetrics:
    """Performance metrics for a solver."""
    name: str
    success: bool
    reached_destination: bool
    path: List[int] = field(default_factory=list)
    path_length: int = 0
    path_cost: int = 0
    nodes_expanded: int = 0
    time_taken: float = 0.0  # seconds
    optimality: float = 1.0  # 1.0 = cheapest, >1.0 = more expensive

    def __str__(self):
        status = "OK" if self.success else "FAIL"
        if self.success and not self.reached_destination:
            status = "APPROX"
        return (f"[{status}] {self.name}: "
                f"Length={self.path_length}, "
                f"Cost={self.path_cost}, "
                f"Expanded={self.nodes_expanded}, "
                f"Time={self.time_taken * 1000.0:.3f}ms, "
                f"Optimality={self.optimality:.2f}x")


class SolverComparison:
    """
    Run A* and JPS side by side on the same map.

    Args:
        obstacles: ``(height, width)`` array, non-zero cells are obstacles
    """

    def __init__(self, obstacles: np.ndarray):
        self.obstacles = np.asarray(obstacles)
        if self.obstacles.ndim != 2:
            raise ValueError(f"Obstacle map must be 2-D, got shape {self.obstacles.shape}")
        self.height, self.width = self.obstacles.shape

    def compare_all(self, start_index: int, dest_index: int) -> Dict[str, SolverMetrics]:
        """
        Run both solvers and collect metrics.

        Returns:
            Dict mapping solver name ("A*", "JPS") to metrics
        """
        logger.info("=== Starting Solver Comparison ===")

        results = {
            'A*': self._run(AStarFinder(self.width, self.height), start_index, dest_index),
            'JPS': self._run(JPSFinder(self.width, self.height), start_index, dest_index),
        }

        successful = [r for r in results.values() if r.success]
        if successful:
            cheapest = min(r.path_cost for r in successful)
            for metrics in results.values():
                if not metrics.success:
                    metrics.optimality = float('inf')
                elif cheapest > 0:
                    metrics.optimality = metrics.path_cost / cheapest
        else:
            for metrics in results.values():
                metrics.optimality = float('inf')

        logger.info("=== Comparison Results ===")
        for metrics in results.values():
            logger.info(str(metrics))

        if successful:
            winner = min(successful, key=lambda m: (m.optimality, m.nodes_expanded))
            logger.info(f"Fewest expansions at best cost: {winner.name}")

        return results

    def _run(self, finder: PathFinderBase, start_index: int, dest_index: int) -> SolverMetrics:
        load_obstacles(finder, self.obstacles)
        success, path = finder.find_path(start_index, dest_index)
        diagnostics = finder.diagnostics

        return SolverMetrics(
            name=finder.name,
            success=success,
            reached_destination=diagnostics.reached_destination,
            path=path,
            path_length=diagnostics.path_length,
            path_cost=diagnostics.path_cost,
            nodes_expanded=diagnostics.nodes_expanded,
            time_taken=diagnostics.time_taken_ms / 1000.0,
        )

"""
Tilepath Simulation Module
==========================
Search engines over the tile grid.

This module contains:
- base: PathFinderBase capability interface and SearchDiagnostics
- astar: A* search
- jps: Jump Point Search with temporary obstacles
- near_open: Nearest traversable tile around a blocked target
- solver_comparison: Side-by-side A* / JPS metrics
"""

from .astar import AStarFinder
from .base import FailureReason, PathFinderBase, SearchDiagnostics
from .jps import JPSFinder
from .near_open import find_near_open_node
from .solver_comparison import SolverComparison, SolverMetrics

__all__ = [
    'AStarFinder',
    'JPSFinder',
    'PathFinderBase',
    'SearchDiagnostics',
    'FailureReason',
    'find_near_open_node',
    'SolverComparison',
    'SolverMetrics',
]

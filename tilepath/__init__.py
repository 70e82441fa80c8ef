"""
Tilepath - Grid Pathfinding Engine
==================================

Path search over fixed-size rectangular tile grids with 8-directional
movement, for agents on a tile map.

Submodules:
- core: Direction tables, grid model and indexed priority queue
- simulation: A*, Jump Point Search, nearest-open-tile finder, solver comparison
- utils: ASCII maps, obstacle loading and path validation
- navigator: Facade that owns one engine and maps tiles to world positions
"""

from .core.definitions import PathFindAlgorithm
from .navigator import NavigatorOptions, TileNavigator, create_path_finder
from .simulation.astar import AStarFinder
from .simulation.base import FailureReason, PathFinderBase, SearchDiagnostics
from .simulation.jps import JPSFinder

__version__ = "1.0.0"

__all__ = [
    'AStarFinder',
    'JPSFinder',
    'PathFinderBase',
    'SearchDiagnostics',
    'FailureReason',
    'PathFindAlgorithm',
    'NavigatorOptions',
    'TileNavigator',
    'create_path_finder',
]

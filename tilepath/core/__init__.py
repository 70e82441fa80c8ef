"""
Tilepath Core Module
====================

- definitions: Direction enums, step costs and jump point lookup tables
- grid: Node table (GridNode, TileGrid)
- heap: Indexed min-heap used as the open list
"""

from .definitions import (
    DIAGONAL_COST,
    DIRECT_COST,
    INVALID_TILE_INDEX,
    DiagonalDirect,
    Direct,
    PathFindAlgorithm,
    calc_h,
)
from .grid import GridNode, TileGrid
from .heap import IndexedMinHeap

__all__ = [
    'DIAGONAL_COST',
    'DIRECT_COST',
    'INVALID_TILE_INDEX',
    'DiagonalDirect',
    'Direct',
    'PathFindAlgorithm',
    'calc_h',
    'GridNode',
    'TileGrid',
    'IndexedMinHeap',
]

"""
Nearest Open Tile
=================

Fallback used when a requested destination is an obstacle: sweep square
rings of growing radius around the target and pick the traversable tile
closest (by the search heuristic) to the start.

Ring sweep: the walk starts at the ring's upper-left corner and moves
Right, Down, Left, Up, ``2 * radius`` tiles per side. Tiles outside the
grid count as blocked. The first ring containing any traversable tile
wins; within a ring the first tile with the strictly smallest distance
is kept.
"""

import logging

from ..core.definitions import DIRECT_OFFSETS, RING_SWEEP, calc_h
from ..core.grid import TileGrid

logger = logging.getLogger(__name__)


def find_near_open_node(grid: TileGrid, start_index: int, target_index: int) -> int:
    """
    Find a traversable tile near ``target_index``.

    Args:
        grid: Grid whose obstacle flags are inspected
        start_index: Tile the distance is measured from
        target_index: Requested (possibly blocked) destination

    Returns:
        ``target_index`` itself when it is out of range or traversable, the
        best tile of the first ring with an open tile, or ``target_index``
        when no ring within ``max(width, height)`` has one.
    """
    if not grid.contains(target_index) or not grid.is_obstacle(target_index):
        return target_index

    start_x, start_y = grid.index_to_pos(start_index)
    x, y = grid.index_to_pos(target_index)
    limit = max(grid.width, grid.height)
    step_count = 0

    while step_count <= limit:
        # Move to the upper-left corner of the next ring
        x -= 1
        y += 1
        step_count += 2

        best_index = None
        best_h = 0
        for direct in RING_SWEEP:
            dx, dy = DIRECT_OFFSETS[direct]
            for _ in range(step_count):
                if grid.is_movable(x, y):
                    h = calc_h(x, y, start_x, start_y)
                    if best_index is None or h < best_h:
                        best_h = h
                        best_index = grid.pos_to_index(x, y)
                x += dx
                y += dy

        if best_index is not None:
            logger.debug(f"Near open tile for {target_index}: {best_index} "
                         f"(ring radius {step_count // 2})")
            return best_index

    logger.debug(f"No open tile found around {target_index}")
    return target_index

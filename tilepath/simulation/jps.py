"""
Jump Point Search
=================

A* variant that expands only "jump points": tiles where the optimal
continuation could change direction. Straight runs are scanned tile by
tile without being queued, which keeps the open list small on open maps.

Scan rules (8-connected, no corner cutting):

- Orthogonal scan stops at the destination, or at a tile whose side has
  an obstacle next to a traversable tile (forced neighbour).
- Diagonal scan requires the diagonal tile and both its orthogonal
  components to be traversable. At every tile it stops at the destination,
  a forced neighbour, or when one of its two orthogonal sub-scans finds a
  jump point.
- g is accumulated per jump: 10 * distance (orthogonal) or 14 * distance
  (diagonal); h = 10 * Manhattan distance.

The returned path is expanded back into single-tile steps, start included.

Extra per-call option: a temporary obstacle that exists only for the
duration of one search (e.g. another unit standing on a tile).
"""

import logging
import time
from typing import List, Optional, Tuple

from ..core.definitions import (
    DIAGONAL_COST,
    DIAGONAL_OBSTACLE_CHECKS,
    DIAGONAL_OFFSETS,
    DIAGONAL_OPEN_CHECKS,
    DIAGONAL_SUB_SCANS,
    DIRECT_COST,
    DIRECT_OBSTACLE_CHECKS,
    DIRECT_OFFSETS,
    DIRECT_OPEN_CHECKS,
    INVALID_TILE_INDEX,
    DiagonalDirect,
    Direct,
    calc_h,
    diagonal_between,
    diagonal_from_delta,
    direct_from_delta,
    turn_left,
    turn_right,
)
from ..core.grid import GridNode
from .base import FailureReason, PathFinderBase

logger = logging.getLogger(__name__)


def calc_g(child: GridNode, parent: Optional[GridNode]) -> int:
    """Cost of reaching ``child`` by one straight jump from ``parent``."""
    if parent is None:
        return 0
    if child.x == parent.x:
        return parent.g + DIRECT_COST * abs(child.y - parent.y)
    if child.y == parent.y:
        return parent.g + DIRECT_COST * abs(child.x - parent.x)
    return parent.g + DIAGONAL_COST * abs(child.x - parent.x)


class JPSFinder(PathFinderBase):
    """Jump Point Search with occupancy flags and temporary obstacles."""

    name = 'JPS'

    def set_occupied(self, index: int, is_occupied: bool):
        """Mark a tile as held by another agent. Not consulted by the search."""
        self.grid.set_occupied(index, is_occupied)

    def is_occupied(self, index: int) -> bool:
        return self.grid.is_occupied(index)

    def find_path(self, start_index: int, dest_index: int,
                  temporary_obstacle: Optional[int] = None) -> Tuple[bool, List[int]]:
        path: List[int] = []
        found = self.find_path_into(path, start_index, dest_index, temporary_obstacle)
        return found, path

    def find_path_into(self, path: List[int], start_index: int, dest_index: int,
                       temporary_obstacle: Optional[int] = None) -> bool:
        """
        Search a path and write it into a caller-supplied list.

        Args:
            path: Output list, cleared first
            start_index: Start tile (must be traversable)
            dest_index: Destination tile (must be traversable)
            temporary_obstacle: Tile treated as an obstacle for this call only.
                Ignored when it already is an obstacle, equals the destination
                or lies outside the grid.

        Returns:
            False when start == dest, an index is out of range, or an
            endpoint is an obstacle (``path`` left empty). True otherwise.
        """
        path.clear()
        started = time.perf_counter()

        if start_index == dest_index:
            self._reject(FailureReason.TRIVIAL_REQUEST, start_index, dest_index)
            return False
        if not self.grid.contains(start_index) or not self.grid.contains(dest_index):
            self._reject(FailureReason.INVALID_INDEX, start_index, dest_index)
            return False
        if self.grid.is_obstacle(start_index) or self.grid.is_obstacle(dest_index):
            self._reject(FailureReason.BLOCKED_ENDPOINT, start_index, dest_index)
            return False

        if temporary_obstacle is None:
            temporary_obstacle = INVALID_TILE_INDEX
        if temporary_obstacle != INVALID_TILE_INDEX:
            if (not self.grid.contains(temporary_obstacle)
                    or temporary_obstacle == dest_index
                    or self.grid.is_obstacle(temporary_obstacle)):
                logger.debug(f"JPS: temporary obstacle {temporary_obstacle} ignored")
                temporary_obstacle = INVALID_TILE_INDEX
            else:
                self.grid.set_obstacle(temporary_obstacle, True)

        try:
            self._search(path, start_index, dest_index, started)
        finally:
            if temporary_obstacle != INVALID_TILE_INDEX:
                self.grid.set_obstacle(temporary_obstacle, False)
        return True

    # ------------------------------------------------------------------
    # Search loop
    # ------------------------------------------------------------------

    def _search(self, path: List[int], start_index: int, dest_index: int, started: float):
        self._prepare_search(dest_index)
        open_list = self.open_list

        current = self.grid.nodes[start_index]
        current.is_open = True
        self._set_value(current, None)
        open_list.enqueue(current, current.f)

        approximate = current
        nodes_expanded = 0
        max_open_size = 1

        while open_list:
            current = open_list.dequeue()
            current.is_open = False
            current.is_close = True
            nodes_expanded += 1

            if current.f <= approximate.f:
                approximate = current

            if current.index == dest_index:
                break

            self._search_point(current)
            max_open_size = max(max_open_size, len(open_list))

        reached = current.index == dest_index
        terminal = current if reached else approximate
        self._trace_path(path, terminal)

        self._record(started, terminal, reached, path, nodes_expanded, max_open_size)
        logger.debug(f"JPS: {start_index} -> {dest_index} expanded {nodes_expanded}, "
                     f"path length {len(path)}")

    def _trace_path(self, path: List[int], terminal: GridNode):
        """Walk jump points back to the start, emitting every tile in between."""
        node = terminal
        while node.parent is not None:
            parent = node.parent
            dx = parent.x - node.x
            dy = parent.y - node.y
            direct = direct_from_delta(dx, dy)
            if direct is None:
                step_x, step_y = DIAGONAL_OFFSETS[diagonal_from_delta(dx, dy)]
            else:
                step_x, step_y = DIRECT_OFFSETS[direct]

            x, y = node.x, node.y
            while x != parent.x or y != parent.y:
                path.append(self.grid.pos_to_index(x, y))
                x += step_x
                y += step_y
            node = parent

        path.append(node.index)
        path.reverse()

    def _set_value(self, node: GridNode, parent: Optional[GridNode]):
        node.parent = parent
        node.h = calc_h(node.x, node.y, self._dest_x, self._dest_y)
        node.g = calc_g(node, parent)

    def _add_open_list(self, parent: GridNode, child: Optional[GridNode]):
        if child is None or child.is_close:
            return

        if child.is_open:
            candidate = calc_h(child.x, child.y, self._dest_x, self._dest_y) + calc_g(child, parent)
            if candidate < child.f:
                self._set_value(child, parent)
                self.open_list.update_priority(child, child.f)
        else:
            child.is_open = True
            self._set_value(child, parent)
            self.open_list.enqueue(child, child.f)

    def _search_point(self, node: GridNode):
        """Queue the jump points reachable from ``node``."""
        parent = node.parent
        if parent is None:
            for direct in Direct:
                self._add_open_list(node, self._scan_direct(node, direct))
            for diagonal in DiagonalDirect:
                self._add_open_list(node, self._scan_diagonal(node, diagonal))
            return

        dx = node.x - parent.x
        dy = node.y - parent.y

        if dx == 0 or dy == 0:
            direct = direct_from_delta(dx, dy)
            self._add_open_list(node, self._scan_direct(node, direct))

            (left_x, left_y), (right_x, right_y) = DIRECT_OBSTACLE_CHECKS[direct]
            if self.grid.is_obstacle_at(node.x + left_x, node.y + left_y):
                side = turn_left(direct)
                self._add_open_list(node, self._scan_direct(node, side))
                self._add_open_list(node, self._scan_diagonal(node, diagonal_between(direct, side)))
            if self.grid.is_obstacle_at(node.x + right_x, node.y + right_y):
                side = turn_right(direct)
                self._add_open_list(node, self._scan_direct(node, side))
                self._add_open_list(node, self._scan_diagonal(node, diagonal_between(direct, side)))
        else:
            vertical = Direct.DOWN if dy < 0 else Direct.UP
            horizontal = Direct.LEFT if dx < 0 else Direct.RIGHT
            self._add_open_list(node, self._scan_direct(node, vertical))
            self._add_open_list(node, self._scan_direct(node, horizontal))
            self._add_open_list(node, self._scan_diagonal(node, diagonal_between(vertical, horizontal)))

    # ------------------------------------------------------------------
    # Scans
    # ------------------------------------------------------------------

    def _scan_direct(self, node: GridNode, direct: Direct) -> Optional[GridNode]:
        grid = self.grid
        dx, dy = DIRECT_OFFSETS[direct]
        x, y = node.x + dx, node.y + dy
        if not grid.is_movable(x, y):
            return None

        (left_obs_x, left_obs_y), (right_obs_x, right_obs_y) = DIRECT_OBSTACLE_CHECKS[direct]
        (left_open_x, left_open_y), (right_open_x, right_open_y) = DIRECT_OPEN_CHECKS[direct]

        while True:
            if x == self._dest_x and y == self._dest_y:
                return grid.node_at(x, y)
            if (grid.is_obstacle_at(x + left_obs_x, y + left_obs_y)
                    and grid.is_movable(x + left_open_x, y + left_open_y)):
                return grid.node_at(x, y)
            if (grid.is_obstacle_at(x + right_obs_x, y + right_obs_y)
                    and grid.is_movable(x + right_open_x, y + right_open_y)):
                return grid.node_at(x, y)
            if not grid.is_movable(x + dx, y + dy):
                return None
            x += dx
            y += dy

    def _scan_diagonal(self, node: GridNode, diagonal: DiagonalDirect) -> Optional[GridNode]:
        grid = self.grid
        dx, dy = DIAGONAL_OFFSETS[diagonal]
        (left_open_x, left_open_y), (right_open_x, right_open_y) = DIAGONAL_OPEN_CHECKS[diagonal]

        x, y = node.x, node.y
        if not (grid.is_movable(x + dx, y + dy)
                and grid.is_movable(x + left_open_x, y + left_open_y)
                and grid.is_movable(x + right_open_x, y + right_open_y)):
            return None
        x += dx
        y += dy

        (left_obs_x, left_obs_y), (right_obs_x, right_obs_y) = DIAGONAL_OBSTACLE_CHECKS[diagonal]
        left_direct, right_direct = DIAGONAL_SUB_SCANS[diagonal]

        while True:
            current = grid.node_at(x, y)
            if x == self._dest_x and y == self._dest_y:
                return current
            if (grid.is_obstacle_at(x + left_obs_x, y + left_obs_y)
                    and grid.is_movable(x + left_open_x, y + left_open_y)):
                return current
            if (grid.is_obstacle_at(x + right_obs_x, y + right_obs_y)
                    and grid.is_movable(x + right_open_x, y + right_open_y)):
                return current
            if self._scan_direct(current, left_direct) is not None:
                return current
            if self._scan_direct(current, right_direct) is not None:
                return current
            if not grid.is_movable(x + dx, y + dy):
                return None
            # Next diagonal step would cut a corner
            if not (grid.is_movable(x + left_open_x, y + left_open_y)
                    and grid.is_movable(x + right_open_x, y + right_open_y)):
                return current
            x += dx
            y += dy

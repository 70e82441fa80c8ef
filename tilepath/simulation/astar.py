"""
A* Path Finder
==============

Classic A* over the 8-connected tile grid.

- Orthogonal step costs 10, diagonal step costs 14.
- h = 10 * Manhattan distance to the destination (not admissible with
  diagonal moves, so paths are not guaranteed shortest).
- A diagonal step is only taken when both orthogonal components are open
  (no corner cutting).
- When the destination cannot be reached, the path leads to the expanded
  tile with the lowest f (latest one on ties), the "approximate goal".

Usage:
    finder = AStarFinder(20, 20)
    finder.set_obstacle(42, True)
    found, path = finder.find_path(0, 399)
"""

import logging
import time
from typing import List, Tuple

from ..core.definitions import (
    DIAGONAL_COMPONENTS,
    DIAGONAL_COST,
    DIAGONAL_OFFSETS,
    DIRECT_COST,
    DIRECT_OFFSETS,
    DiagonalDirect,
    Direct,
    calc_h,
)
from ..core.grid import GridNode
from .base import PathFinderBase

logger = logging.getLogger(__name__)


class AStarFinder(PathFinderBase):
    """A* search with persistent node table and indexed open list."""

    name = 'A*'

    def init(self):
        super().init()
        # Scratch buffers reused by every expansion
        self._near_nodes: List[GridNode] = []
        self._direct_open = [False] * len(Direct)

    def find_path(self, start_index: int, dest_index: int) -> Tuple[bool, List[int]]:
        """
        Search a path from ``start_index`` to ``dest_index``.

        Args:
            start_index: Start tile
            dest_index: Destination tile

        Returns:
            (found, path). ``found`` is False only when an index is out of
            range or start == dest; otherwise the path starts at
            ``start_index`` and ends at the destination or the approximate
            goal.
        """
        started = time.perf_counter()
        reason = self._validate_request(start_index, dest_index)
        if reason:
            return self._reject(reason, start_index, dest_index)

        self._prepare_search(dest_index)
        open_list = self.open_list

        start = self.grid.nodes[start_index]
        start.h = calc_h(start.x, start.y, self._dest_x, self._dest_y)
        start.is_open = True
        open_list.enqueue(start, start.f)

        current = start
        approximate = None
        nodes_expanded = 0
        max_open_size = 1

        while open_list:
            current = open_list.dequeue()
            nodes_expanded += 1

            if approximate is None or approximate.f >= current.f:
                approximate = current

            if current.index == dest_index:
                break

            current.is_close = True
            current.is_open = False

            for near in self._find_near_nodes(current):
                self._add_to_open_list(near, current)
            max_open_size = max(max_open_size, len(open_list))

        reached = current.index == dest_index
        terminal = current if reached else approximate

        path: List[int] = []
        node = terminal
        while node is not None:
            path.append(node.index)
            node = node.parent
        path.reverse()

        self._record(started, terminal, reached, path, nodes_expanded, max_open_size)
        logger.debug(f"A*: {start_index} -> {dest_index} expanded {nodes_expanded}, "
                     f"path length {len(path)}")
        return True, path

    def _is_openable(self, x: int, y: int) -> bool:
        if not self.grid.in_bounds(x, y):
            return False
        node = self.grid.node_at(x, y)
        return not (node.is_close or node.is_obstacle)

    def _find_near_nodes(self, node: GridNode) -> List[GridNode]:
        """Orthogonal neighbours first (Up, Down, Left, Right), then diagonals."""
        near = self._near_nodes
        near.clear()
        direct_open = self._direct_open

        for direct in Direct:
            dx, dy = DIRECT_OFFSETS[direct]
            x, y = node.x + dx, node.y + dy
            direct_open[direct] = self._is_openable(x, y)
            if direct_open[direct]:
                near.append(self.grid.node_at(x, y))

        # A closed orthogonal neighbour also blocks the diagonal next to it
        for diagonal in DiagonalDirect:
            first, second = DIAGONAL_COMPONENTS[diagonal]
            if not (direct_open[first] and direct_open[second]):
                continue
            dx, dy = DIAGONAL_OFFSETS[diagonal]
            x, y = node.x + dx, node.y + dy
            if self._is_openable(x, y):
                near.append(self.grid.node_at(x, y))

        return near

    def _add_to_open_list(self, node: GridNode, parent: GridNode):
        if node.is_close or node.is_obstacle:
            return

        is_diagonal = node.x != parent.x and node.y != parent.y
        g = parent.g + (DIAGONAL_COST if is_diagonal else DIRECT_COST)
        h = calc_h(node.x, node.y, self._dest_x, self._dest_y)

        if node.is_open:
            if g + h < node.f:
                node.h = h
                node.g = g
                node.parent = parent
                self.open_list.update_priority(node, node.f)
        else:
            node.h = h
            node.g = g
            node.is_open = True
            node.parent = parent
            self.open_list.enqueue(node, node.f)

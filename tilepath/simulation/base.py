"""
Path Finder Base
================

Common capability set shared by every search engine:

- ``init()``                       allocate the node table and open list
- ``set_obstacle`` / ``is_obstacle``   persistent obstacle state
- ``find_path(start, dest)``       (found, path) search
- ``get_near_open_node``           blocked-destination fallback

Engines are single-threaded and non-reentrant: each instance owns one node
table and one open list that every call reuses.
"""

import logging
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..core.grid import GridNode, TileGrid
from ..core.heap import IndexedMinHeap
from .near_open import find_near_open_node

logger = logging.getLogger(__name__)


class FailureReason:
    """Why a ``find_path`` request was rejected."""
    NONE = ''
    INVALID_INDEX = 'invalid_index'          # start or dest outside the grid
    TRIVIAL_REQUEST = 'trivial_request'      # start == dest
    BLOCKED_ENDPOINT = 'blocked_endpoint'    # start or dest is an obstacle (JPS)


@dataclass
class SearchDiagnostics:
    """Statistics recorded for the most recent ``find_path`` call."""
    success: bool = False
    reached_destination: bool = False
    failure_reason: str = FailureReason.NONE
    nodes_expanded: int = 0
    max_open_size: int = 0
    path_length: int = 0      # steps, i.e. len(path) - 1
    path_cost: int = 0        # g of the terminal node
    time_taken_ms: float = 0.0

    def summary(self) -> str:
        """Human-readable summary of the search."""
        if not self.success:
            status = f"FAILED: {self.failure_reason}"
        elif self.reached_destination:
            status = "SUCCESS"
        else:
            status = "SUCCESS (approximate goal)"
        return f"""
=== Search Diagnostics ===
Status: {status}
Nodes Expanded: {self.nodes_expanded:,}
Max Open Size: {self.max_open_size:,}
Path Length: {self.path_length}
Path Cost: {self.path_cost}
Time Taken: {self.time_taken_ms:.3f}ms
=========================="""


class PathFinderBase(ABC):
    """
    Abstract grid path finder.

    Args:
        width: Number of tiles along x
        height: Number of tiles along y
    """

    name = 'base'

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.grid: Optional[TileGrid] = None
        self.open_list: Optional[IndexedMinHeap] = None
        self.diagnostics = SearchDiagnostics()
        self._dest_x = 0
        self._dest_y = 0
        self.init()

    @property
    def total_count(self) -> int:
        return self.width * self.height

    def init(self):
        """Allocate the node table and the open list. Discards obstacle flags."""
        self.grid = TileGrid(self.width, self.height)
        self.open_list = IndexedMinHeap(self.grid.total_count)
        self.diagnostics = SearchDiagnostics()

    def set_obstacle(self, index: int, is_obstacle: bool):
        self.grid.set_obstacle(index, is_obstacle)

    def is_obstacle(self, index: int) -> bool:
        return self.grid.is_obstacle(index)

    def get_near_open_node(self, start_index: int, target_index: int) -> int:
        """Traversable tile near a blocked target, closest to ``start_index``."""
        return find_near_open_node(self.grid, start_index, target_index)

    @abstractmethod
    def find_path(self, start_index: int, dest_index: int) -> Tuple[bool, List[int]]:
        """
        Search a path from ``start_index`` to ``dest_index``.

        Returns:
            (found, path) where path runs from start to the destination or,
            when the destination is unreachable, to the approximate goal.
        """

    # ------------------------------------------------------------------
    # Shared helpers
    # ------------------------------------------------------------------

    def _validate_request(self, start_index: int, dest_index: int) -> Optional[str]:
        if not self.grid.contains(start_index) or not self.grid.contains(dest_index):
            return FailureReason.INVALID_INDEX
        if start_index == dest_index:
            return FailureReason.TRIVIAL_REQUEST
        return None

    def _reject(self, reason: str, start_index: int, dest_index: int) -> Tuple[bool, List[int]]:
        logger.debug(f"{self.name}: rejected {start_index} -> {dest_index} ({reason})")
        self.diagnostics = SearchDiagnostics(failure_reason=reason)
        return False, []

    def _prepare_search(self, dest_index: int):
        self.grid.reset_search_state()
        self.open_list.clear()
        self._dest_x, self._dest_y = self.grid.index_to_pos(dest_index)

    def _record(self, started: float, terminal: GridNode, reached: bool,
                path: List[int], nodes_expanded: int, max_open_size: int):
        if not reached:
            logger.debug(f"{self.name}: destination unreachable, "
                         f"using approximate goal {terminal.index} (f={terminal.f})")
        self.diagnostics = SearchDiagnostics(
            success=True,
            reached_destination=reached,
            nodes_expanded=nodes_expanded,
            max_open_size=max_open_size,
            path_length=max(0, len(path) - 1),
            path_cost=terminal.g,
            time_taken_ms=(time.perf_counter() - started) * 1000.0,
        )

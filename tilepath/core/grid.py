"""
Grid Model
==========

Fixed-size rectangular tile grid shared by the search engines.

The node table is allocated once per grid and reused by every search:
- Identity fields (``index``, ``x``, ``y``) never change.
- ``is_obstacle`` / ``is_occupied`` persist across searches.
- Search-local fields (``g``, ``h``, ``is_open``, ``is_close``, ``parent``)
  are cleared by :meth:`TileGrid.reset_search_state` before each search.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class GridNode:
    """One tile of the grid plus its search bookkeeping."""
    index: int
    x: int
    y: int
    g: int = 0
    h: int = 0
    is_open: bool = False
    is_close: bool = False
    is_obstacle: bool = False
    is_occupied: bool = False
    parent: Optional['GridNode'] = field(default=None, repr=False)

    # Slots maintained by IndexedMinHeap
    queue_index: int = field(default=-1, repr=False)
    queue_priority: int = field(default=0, repr=False)
    queue_insertion: int = field(default=0, repr=False)

    @property
    def f(self) -> int:
        return self.g + self.h

    def reset(self):
        """Clear search-local state; obstacle and occupancy flags are kept."""
        self.g = 0
        self.h = 0
        self.is_open = False
        self.is_close = False
        self.parent = None


class TileGrid:
    """
    Node table of a ``width`` x ``height`` grid.

    Args:
        width: Number of tiles along x
        height: Number of tiles along y
    """

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")

        self.width = width
        self.height = height
        self.total_count = width * height
        self.nodes: List[GridNode] = [
            GridNode(index=y * width + x, x=x, y=y)
            for y in range(height)
            for x in range(width)
        ]

    def __len__(self) -> int:
        return self.total_count

    def __iter__(self) -> Iterator[GridNode]:
        return iter(self.nodes)

    # ------------------------------------------------------------------
    # Coordinates
    # ------------------------------------------------------------------

    def index_to_pos(self, index: int) -> Tuple[int, int]:
        return index % self.width, index // self.width

    def pos_to_index(self, x: int, y: int) -> int:
        return x + y * self.width

    def contains(self, index: int) -> bool:
        return 0 <= index < self.total_count

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def node(self, index: int) -> GridNode:
        """Return the node at ``index``; raises IndexError when out of range."""
        if not self.contains(index):
            raise IndexError(f"Tile index {index} out of range [0, {self.total_count})")
        return self.nodes[index]

    def node_at(self, x: int, y: int) -> GridNode:
        return self.nodes[x + y * self.width]

    # ------------------------------------------------------------------
    # Tile state
    # ------------------------------------------------------------------

    def set_obstacle(self, index: int, is_obstacle: bool):
        self.node(index).is_obstacle = is_obstacle

    def is_obstacle(self, index: int) -> bool:
        return self.node(index).is_obstacle

    def set_occupied(self, index: int, is_occupied: bool):
        self.node(index).is_occupied = is_occupied

    def is_occupied(self, index: int) -> bool:
        return self.node(index).is_occupied

    def is_movable(self, x: int, y: int) -> bool:
        """True if (x, y) is inside the grid and not an obstacle."""
        if not self.in_bounds(x, y):
            return False
        return not self.nodes[x + y * self.width].is_obstacle

    def is_obstacle_at(self, x: int, y: int) -> bool:
        """True if (x, y) is inside the grid and an obstacle. Outside is never an obstacle."""
        if not self.in_bounds(x, y):
            return False
        return self.nodes[x + y * self.width].is_obstacle

    def clear_obstacles(self):
        for node in self.nodes:
            node.is_obstacle = False

    def obstacle_indices(self) -> List[int]:
        return [node.index for node in self.nodes if node.is_obstacle]

    def reset_search_state(self):
        """O(width * height) reset run at the start of every search."""
        for node in self.nodes:
            node.reset()

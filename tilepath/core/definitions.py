"""
TILEPATH DEFINITIONS
====================
Central constants and lookup tables for the grid pathfinding engines.

This file is the SINGLE SOURCE OF TRUTH for:
- Movement directions (orthogonal and diagonal)
- Step costs and the heuristic scale
- Corner-check offsets used by Jump Point Search
- Algorithm identifiers used by the navigator

Coordinate convention: ``index = x + y * width``. ``Up`` is ``+y`` and
``Right`` is ``+x``.

Every table is a tuple indexed by the ``IntEnum`` value of a direction.
"""

from enum import IntEnum
from typing import Optional, Tuple

# ==========================================
# COSTS
# ==========================================

DIRECT_COST = 10     # One orthogonal step
DIAGONAL_COST = 14   # One diagonal step (~ sqrt(2) * 10)
HEURISTIC_SCALE = 10  # Manhattan distance is scaled by the orthogonal cost

INVALID_TILE_INDEX = -1


# ==========================================
# DIRECTIONS
# ==========================================

class Direct(IntEnum):
    """Orthogonal movement directions."""
    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3


class DiagonalDirect(IntEnum):
    """Diagonal movement directions."""
    LEFT_UP = 0
    RIGHT_UP = 1
    LEFT_DOWN = 2
    RIGHT_DOWN = 3


class PathFindAlgorithm(IntEnum):
    """Search algorithms a navigator can be configured with."""
    ASTAR = 0
    JPS = 1


Offset = Tuple[int, int]

# Step vector per orthogonal direction
DIRECT_OFFSETS: Tuple[Offset, ...] = (
    (0, 1),    # UP
    (0, -1),   # DOWN
    (-1, 0),   # LEFT
    (1, 0),    # RIGHT
)

# Step vector per diagonal direction
DIAGONAL_OFFSETS: Tuple[Offset, ...] = (
    (-1, 1),   # LEFT_UP
    (1, 1),    # RIGHT_UP
    (-1, -1),  # LEFT_DOWN
    (1, -1),   # RIGHT_DOWN
)

# Orthogonal components of each diagonal (both must be open to move diagonally)
DIAGONAL_COMPONENTS: Tuple[Tuple[Direct, Direct], ...] = (
    (Direct.LEFT, Direct.UP),
    (Direct.RIGHT, Direct.UP),
    (Direct.LEFT, Direct.DOWN),
    (Direct.RIGHT, Direct.DOWN),
)


# ==========================================
# JUMP POINT LOOKUP TABLES
# ==========================================
# (left, right) pairs relative to the direction of travel.
# A side creates a jump point when the "obs" tile is an obstacle
# and the matching "open" tile is traversable.

DIRECT_OBSTACLE_CHECKS: Tuple[Tuple[Offset, Offset], ...] = (
    ((-1, -1), (1, -1)),   # UP
    ((1, 1), (-1, 1)),     # DOWN
    ((1, -1), (1, 1)),     # LEFT
    ((-1, 1), (-1, -1)),   # RIGHT
)

DIRECT_OPEN_CHECKS: Tuple[Tuple[Offset, Offset], ...] = (
    ((-1, 0), (1, 0)),     # UP
    ((1, 0), (-1, 0)),     # DOWN
    ((0, -1), (0, 1)),     # LEFT
    ((0, 1), (0, -1)),     # RIGHT
)

DIAGONAL_OBSTACLE_CHECKS: Tuple[Tuple[Offset, Offset], ...] = (
    ((-1, -1), (1, 1)),    # LEFT_UP
    ((-1, 1), (1, -1)),    # RIGHT_UP
    ((1, -1), (-1, 1)),    # LEFT_DOWN
    ((1, 1), (-1, -1)),    # RIGHT_DOWN
)

# Also the orthogonal components of the next diagonal step
DIAGONAL_OPEN_CHECKS: Tuple[Tuple[Offset, Offset], ...] = (
    ((-1, 0), (0, 1)),     # LEFT_UP
    ((0, 1), (1, 0)),      # RIGHT_UP
    ((0, -1), (-1, 0)),    # LEFT_DOWN
    ((1, 0), (0, -1)),     # RIGHT_DOWN
)

# Orthogonal sub-scans performed at every step of a diagonal scan
DIAGONAL_SUB_SCANS: Tuple[Tuple[Direct, Direct], ...] = (
    (Direct.LEFT, Direct.UP),
    (Direct.UP, Direct.RIGHT),
    (Direct.DOWN, Direct.LEFT),
    (Direct.RIGHT, Direct.DOWN),
)

# Sweep order around a ring in the nearest-open-tile search
RING_SWEEP: Tuple[Direct, ...] = (
    Direct.RIGHT,
    Direct.DOWN,
    Direct.LEFT,
    Direct.UP,
)

_TURN_LEFT: Tuple[Direct, ...] = (
    Direct.LEFT,    # UP
    Direct.RIGHT,   # DOWN
    Direct.DOWN,    # LEFT
    Direct.UP,      # RIGHT
)

_TURN_RIGHT: Tuple[Direct, ...] = (
    Direct.RIGHT,   # UP
    Direct.LEFT,    # DOWN
    Direct.UP,      # LEFT
    Direct.DOWN,    # RIGHT
)


# ==========================================
# HELPERS
# ==========================================

def turn_left(direct: Direct) -> Direct:
    """Rotate an orthogonal direction 90 degrees counter-clockwise."""
    return _TURN_LEFT[direct]


def turn_right(direct: Direct) -> Direct:
    """Rotate an orthogonal direction 90 degrees clockwise."""
    return _TURN_RIGHT[direct]


def direct_from_delta(dx: int, dy: int) -> Optional[Direct]:
    """Return the orthogonal direction of a delta, or None if it is diagonal or zero."""
    if dx != 0 and dy != 0:
        return None
    if dx < 0:
        return Direct.LEFT
    if dx > 0:
        return Direct.RIGHT
    if dy < 0:
        return Direct.DOWN
    if dy > 0:
        return Direct.UP
    return None


def diagonal_from_delta(dx: int, dy: int) -> Optional[DiagonalDirect]:
    """Return the diagonal direction of a delta, or None if it is not diagonal."""
    if dx < 0 and dy > 0:
        return DiagonalDirect.LEFT_UP
    if dx > 0 and dy > 0:
        return DiagonalDirect.RIGHT_UP
    if dx < 0 and dy < 0:
        return DiagonalDirect.LEFT_DOWN
    if dx > 0 and dy < 0:
        return DiagonalDirect.RIGHT_DOWN
    return None


def diagonal_between(first: Direct, second: Direct) -> Optional[DiagonalDirect]:
    """Combine two perpendicular orthogonal directions into a diagonal."""
    dx = DIRECT_OFFSETS[first][0] + DIRECT_OFFSETS[second][0]
    dy = DIRECT_OFFSETS[first][1] + DIRECT_OFFSETS[second][1]
    return diagonal_from_delta(dx, dy)


def calc_h(x1: int, y1: int, x2: int, y2: int) -> int:
    """Manhattan distance scaled by the orthogonal step cost."""
    return (abs(x1 - x2) + abs(y1 - y2)) * HEURISTIC_SCALE

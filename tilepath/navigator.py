"""
Tile Navigator
==============

Facade that owns one search engine and translates tile indices to world
positions. Game code talks to the navigator, never to an engine directly.

Configuration is a plain dataclass that can be built from code, a dict or
a JSON file:

    options = NavigatorOptions.from_json('navigator.json')
    navigator = TileNavigator(options)
    found, path = navigator.request_path(0, 399)
    points = [navigator.get_tile_position(i) for i in path]
"""

import json
import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from .core.definitions import PathFindAlgorithm
from .simulation.astar import AStarFinder
from .simulation.base import PathFinderBase
from .simulation.jps import JPSFinder

logger = logging.getLogger(__name__)

FINDER_CLASSES = {
    PathFindAlgorithm.ASTAR: AStarFinder,
    PathFindAlgorithm.JPS: JPSFinder,
}


def parse_algorithm(value: Union[str, int, PathFindAlgorithm]) -> PathFindAlgorithm:
    """Accept an enum member, its integer value or its name (case-insensitive)."""
    if isinstance(value, PathFindAlgorithm):
        return value
    if isinstance(value, str):
        name = value.strip().upper().replace('*', 'STAR').replace('-', '').replace('_', '')
        try:
            return PathFindAlgorithm[name]
        except KeyError:
            raise ValueError(f"Unknown path finding algorithm: {value!r}") from None
    try:
        return PathFindAlgorithm(value)
    except ValueError:
        raise ValueError(f"Unknown path finding algorithm: {value!r}") from None


def create_path_finder(algorithm: Union[str, int, PathFindAlgorithm],
                       width: int, height: int) -> PathFinderBase:
    """Build an initialised engine for ``algorithm``."""
    finder_class = FINDER_CLASSES[parse_algorithm(algorithm)]
    return finder_class(width, height)


@dataclass
class NavigatorOptions:
    """Configuration options for the navigator."""
    width_count: int = 20
    height_count: int = 20
    algorithm: PathFindAlgorithm = PathFindAlgorithm.ASTAR
    tile_size: Tuple[float, float] = (1.0, 1.0)

    def __post_init__(self):
        self.algorithm = parse_algorithm(self.algorithm)
        self.tile_size = (float(self.tile_size[0]), float(self.tile_size[1]))
        if self.width_count <= 0 or self.height_count <= 0:
            raise ValueError(f"Grid dimensions must be positive, "
                             f"got {self.width_count}x{self.height_count}")

    @classmethod
    def for_map(cls, map_type: str = "default") -> 'NavigatorOptions':
        """Factory method for common map configurations."""
        if map_type == "large":
            return cls(width_count=128, height_count=128, algorithm=PathFindAlgorithm.JPS)
        elif map_type == "corridor":
            return cls(width_count=64, height_count=8, algorithm=PathFindAlgorithm.JPS)
        return cls()  # Default

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'NavigatorOptions':
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown navigator option(s): {', '.join(sorted(unknown))}")
        return cls(**data)

    @classmethod
    def from_json(cls, path: Union[str, Path]) -> 'NavigatorOptions':
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Navigator options in {path} must be a JSON object")
        return cls.from_dict(data)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'width_count': self.width_count,
            'height_count': self.height_count,
            'algorithm': self.algorithm.name,
            'tile_size': list(self.tile_size),
        }


class TileNavigator:
    """
    Path requests and tile-to-world conversion for one grid.

    Args:
        options: Grid size, engine and tile size (defaults when omitted)
    """

    def __init__(self, options: Optional[NavigatorOptions] = None):
        self.options = options or NavigatorOptions()
        self.width_count = self.options.width_count
        self.height_count = self.options.height_count
        self.total_count = self.width_count * self.height_count
        self.tile_size = self.options.tile_size
        self.tile_half_size = (self.tile_size[0] * 0.5, self.tile_size[1] * 0.5)
        self.finder = create_path_finder(self.options.algorithm,
                                         self.width_count, self.height_count)
        logger.info(f"Navigator ready: {self.width_count}x{self.height_count} "
                    f"using {self.finder.name}")

    @property
    def algorithm(self) -> PathFindAlgorithm:
        return self.options.algorithm

    def request_path(self, start_index: int, dest_index: int,
                     temporary_obstacle: Optional[int] = None) -> Tuple[bool, List[int]]:
        """Forward a path request to the engine."""
        if isinstance(self.finder, JPSFinder):
            return self.finder.find_path(start_index, dest_index, temporary_obstacle)
        if temporary_obstacle is not None:
            logger.debug(f"{self.finder.name} ignores temporary obstacle {temporary_obstacle}")
        return self.finder.find_path(start_index, dest_index)

    def get_near_open_node(self, start_index: int, target_index: int) -> int:
        return self.finder.get_near_open_node(start_index, target_index)

    def set_obstacle(self, index: int, is_obstacle: bool):
        self.finder.set_obstacle(index, is_obstacle)

    def is_obstacle(self, index: int) -> bool:
        return self.finder.is_obstacle(index)

    def index_to_pos(self, index: int) -> Tuple[int, int]:
        return index % self.width_count, index // self.width_count

    def pos_to_index(self, x: int, y: int) -> int:
        return x + y * self.width_count

    def get_tile_position(self, index: int) -> Tuple[float, float]:
        """World-space centre of a tile; (0.0, 0.0) for an out-of-range index."""
        if index < 0 or index >= self.total_count:
            logger.error(f"Tile index {index} out of range [0, {self.total_count})")
            return 0.0, 0.0
        x, y = self.index_to_pos(index)
        return (self.tile_size[0] * x + self.tile_half_size[0],
                self.tile_size[1] * y + self.tile_half_size[1])

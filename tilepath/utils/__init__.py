"""Utility helpers for tile maps."""

from .grid_utils import (
    is_valid_path,
    load_obstacles,
    parse_ascii_map,
    path_cost,
    render_path,
)

__all__ = [
    'is_valid_path',
    'load_obstacles',
    'parse_ascii_map',
    'path_cost',
    'render_path',
]

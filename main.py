"""
TILEPATH - Main Entry Point
===========================
Load a map -> (optionally) relocate a blocked destination -> search -> report.

Usage:
    # Search on an ASCII map file ('#', 'X', '@' are obstacles)
    python main.py --map level.txt --start 0 --dest 3,4 --algorithm jps

    # Empty grid of a given size
    python main.py --width 20 --height 20 --start 0,0 --dest 19,19

    # Settings from a JSON file (flags override it)
    python main.py --options navigator.json --map level.txt --start 0 --dest 42 --near-open

Tiles are given either as an index (``x + y * width``) or as ``x,y``.
"""

import argparse
import logging
import sys
from pathlib import Path

from tilepath.navigator import NavigatorOptions, TileNavigator, parse_algorithm
from tilepath.utils.grid_utils import load_obstacles, parse_ascii_map, path_cost, render_path

logger = logging.getLogger(__name__)


def parse_tile(value: str, width: int) -> int:
    """Parse ``"12"`` or ``"3,4"`` into a tile index."""
    if ',' in value:
        x, y = (int(part) for part in value.split(','))
        return x + y * width
    return int(value)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Tilepath - grid path search with A* and Jump Point Search'
    )

    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        '--map', type=str,
        help='ASCII map file'
    )
    source.add_argument(
        '--width', type=int,
        help='Grid width for an empty map'
    )
    parser.add_argument(
        '--height', type=int,
        help='Grid height for an empty map'
    )
    parser.add_argument(
        '--algorithm', '-a', choices=['astar', 'jps'],
        help='Search algorithm (default: astar, or the options file)'
    )
    parser.add_argument(
        '--start', '-s', required=True,
        help='Start tile (index or x,y)'
    )
    parser.add_argument(
        '--dest', '-d', required=True,
        help='Destination tile (index or x,y)'
    )
    parser.add_argument(
        '--temp-obstacle', type=str,
        help='Tile blocked for this search only (JPS)'
    )
    parser.add_argument(
        '--near-open', action='store_true',
        help='Replace a blocked destination with the nearest open tile'
    )
    parser.add_argument(
        '--options', type=str,
        help='JSON file with navigator options'
    )
    parser.add_argument(
        '--verbose', '-v', action='store_true',
        help='Debug logging'
    )
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    options = NavigatorOptions.from_json(args.options) if args.options else NavigatorOptions()

    obstacles = None
    if args.map:
        obstacles = parse_ascii_map(Path(args.map).read_text(encoding='utf-8'))
        options.height_count, options.width_count = obstacles.shape
    elif args.width is not None or args.height is not None:
        if args.width is None or args.height is None:
            parser.error("--width and --height must be given together")
        options.width_count = args.width
        options.height_count = args.height
    if args.algorithm:
        options.algorithm = parse_algorithm(args.algorithm)

    navigator = TileNavigator(options)
    if obstacles is not None:
        load_obstacles(navigator.finder, obstacles)

    width = options.width_count
    start = parse_tile(args.start, width)
    dest = parse_tile(args.dest, width)
    temporary_obstacle = parse_tile(args.temp_obstacle, width) if args.temp_obstacle else None

    if args.near_open and 0 <= dest < navigator.total_count and navigator.is_obstacle(dest):
        relocated = navigator.get_near_open_node(start, dest)
        logger.info(f"Destination {dest} is blocked, using {relocated}")
        dest = relocated

    found, path = navigator.request_path(start, dest, temporary_obstacle)
    diagnostics = navigator.finder.diagnostics
    print(diagnostics.summary())

    if not found:
        print(f"No path: {diagnostics.failure_reason}")
        return 1

    print(f"Path: {path}")
    print(f"Cost: {path_cost(width, path)}")
    if obstacles is None:
        obstacles = [[navigator.is_obstacle(x + y * width) for x in range(width)]
                     for y in range(options.height_count)]
    print(render_path(obstacles, path, width))
    return 0


if __name__ == "__main__":
    sys.exit(main())

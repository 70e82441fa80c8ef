import json
import logging

import pytest

from tilepath.core.definitions import PathFindAlgorithm
from tilepath.navigator import NavigatorOptions, TileNavigator, create_path_finder, parse_algorithm
from tilepath.simulation.astar import AStarFinder
from tilepath.simulation.jps import JPSFinder


def test_default_options():
    options = NavigatorOptions()
    assert options.width_count == 20
    assert options.height_count == 20
    assert options.algorithm == PathFindAlgorithm.ASTAR
    assert options.tile_size == (1.0, 1.0)

    navigator = TileNavigator()
    assert navigator.total_count == 400
    assert isinstance(navigator.finder, AStarFinder)


@pytest.mark.parametrize("value,expected", [
    ("astar", PathFindAlgorithm.ASTAR),
    ("A*", PathFindAlgorithm.ASTAR),
    ("JPS", PathFindAlgorithm.JPS),
    ("jps", PathFindAlgorithm.JPS),
    (1, PathFindAlgorithm.JPS),
    (PathFindAlgorithm.ASTAR, PathFindAlgorithm.ASTAR),
])
def test_parse_algorithm(value, expected):
    assert parse_algorithm(value) == expected


@pytest.mark.parametrize("value", ["dijkstra", 7])
def test_unknown_algorithm_raises(value):
    with pytest.raises(ValueError):
        parse_algorithm(value)
    with pytest.raises(ValueError):
        create_path_finder(value, 4, 4)


def test_create_path_finder():
    finder = create_path_finder(PathFindAlgorithm.JPS, 6, 3)
    assert isinstance(finder, JPSFinder)
    assert finder.total_count == 18


def test_from_dict_and_json(tmp_path):
    options = NavigatorOptions.from_dict({'width_count': 8, 'height_count': 4,
                                          'algorithm': 'jps', 'tile_size': [2, 0.5]})
    assert options.algorithm == PathFindAlgorithm.JPS
    assert options.tile_size == (2.0, 0.5)

    path = tmp_path / "navigator.json"
    path.write_text(json.dumps(options.to_dict()))
    assert NavigatorOptions.from_json(path) == options


def test_from_dict_rejects_unknown_keys():
    with pytest.raises(ValueError):
        NavigatorOptions.from_dict({'width_count': 8, 'diagonal': True})


def test_invalid_dimensions_rejected():
    with pytest.raises(ValueError):
        NavigatorOptions(width_count=0)


def test_for_map_presets():
    assert NavigatorOptions.for_map() == NavigatorOptions()
    assert NavigatorOptions.for_map("large").algorithm == PathFindAlgorithm.JPS
    corridor = NavigatorOptions.for_map("corridor")
    assert corridor.width_count > corridor.height_count


def test_tile_positions():
    navigator = TileNavigator(NavigatorOptions(width_count=10, height_count=5, tile_size=(2.0, 3.0)))
    assert navigator.index_to_pos(23) == (3, 2)
    assert navigator.pos_to_index(3, 2) == 23
    assert navigator.get_tile_position(0) == (1.0, 1.5)
    assert navigator.get_tile_position(23) == (7.0, 7.5)


def test_out_of_range_tile_position_logs_error(caplog):
    navigator = TileNavigator(NavigatorOptions(width_count=4, height_count=4))
    with caplog.at_level(logging.ERROR, logger="tilepath.navigator"):
        assert navigator.get_tile_position(16) == (0.0, 0.0)
        assert navigator.get_tile_position(-1) == (0.0, 0.0)
    assert "out of range" in caplog.text


def test_request_path_forwards_to_engine():
    navigator = TileNavigator(NavigatorOptions(width_count=3, height_count=3,
                                               algorithm=PathFindAlgorithm.JPS))
    navigator.set_obstacle(4, True)
    assert navigator.is_obstacle(4)
    assert navigator.request_path(0, 8) == (True, [0, 3, 6, 7, 8])
    # every tile around the centre is open; the start itself is closest
    assert navigator.get_near_open_node(0, 4) == 0


def test_temporary_obstacle_only_for_jps():
    jps = TileNavigator(NavigatorOptions(width_count=3, height_count=3,
                                         algorithm=PathFindAlgorithm.JPS))
    astar = TileNavigator(NavigatorOptions(width_count=3, height_count=3))

    assert jps.request_path(0, 8, temporary_obstacle=4) == (True, [0, 3, 6, 7, 8])
    assert astar.request_path(0, 8, temporary_obstacle=4) == (True, [0, 4, 8])
    assert not jps.is_obstacle(4)

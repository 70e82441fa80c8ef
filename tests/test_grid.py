import pytest

from tilepath.core.grid import TileGrid


@pytest.fixture
def grid():
    return TileGrid(4, 3)


def test_index_layout(grid):
    assert grid.total_count == 12
    assert len(grid) == 12
    assert grid.index_to_pos(0) == (0, 0)
    assert grid.index_to_pos(5) == (1, 1)
    assert grid.index_to_pos(11) == (3, 2)
    assert grid.pos_to_index(3, 2) == 11
    for node in grid:
        assert grid.pos_to_index(node.x, node.y) == node.index


def test_rejects_non_positive_dimensions():
    with pytest.raises(ValueError):
        TileGrid(0, 5)
    with pytest.raises(ValueError):
        TileGrid(5, -1)


def test_obstacle_flags(grid):
    grid.set_obstacle(6, True)
    assert grid.is_obstacle(6)
    assert grid.obstacle_indices() == [6]
    assert not grid.is_movable(2, 1)
    assert grid.is_obstacle_at(2, 1)

    grid.clear_obstacles()
    assert grid.obstacle_indices() == []


def test_out_of_range_index_raises(grid):
    with pytest.raises(IndexError):
        grid.set_obstacle(12, True)
    with pytest.raises(IndexError):
        grid.is_obstacle(-1)
    with pytest.raises(IndexError):
        grid.set_occupied(99, True)


def test_outside_tiles(grid):
    # Outside the grid: never movable, never an obstacle
    assert not grid.is_movable(-1, 0)
    assert not grid.is_movable(4, 0)
    assert not grid.is_obstacle_at(0, 3)
    assert not grid.in_bounds(0, -1)


def test_reset_keeps_obstacle_and_occupancy(grid):
    node = grid.node(3)
    node.is_obstacle = True
    node.is_occupied = True
    node.g = 20
    node.h = 30
    node.is_close = True
    node.parent = grid.node(2)

    grid.reset_search_state()

    assert node.f == 0
    assert not node.is_close
    assert node.parent is None
    assert node.is_obstacle
    assert node.is_occupied

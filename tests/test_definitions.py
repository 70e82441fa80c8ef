import pytest

from tilepath.core.definitions import (
    DIAGONAL_COMPONENTS,
    DIAGONAL_OFFSETS,
    DIAGONAL_OPEN_CHECKS,
    DIRECT_OFFSETS,
    DiagonalDirect,
    Direct,
    calc_h,
    diagonal_between,
    diagonal_from_delta,
    direct_from_delta,
    turn_left,
    turn_right,
)


def test_orientation():
    assert DIRECT_OFFSETS[Direct.UP] == (0, 1)
    assert DIRECT_OFFSETS[Direct.DOWN] == (0, -1)
    assert DIRECT_OFFSETS[Direct.LEFT] == (-1, 0)
    assert DIRECT_OFFSETS[Direct.RIGHT] == (1, 0)


@pytest.mark.parametrize("direct,left,right", [
    (Direct.UP, Direct.LEFT, Direct.RIGHT),
    (Direct.DOWN, Direct.RIGHT, Direct.LEFT),
    (Direct.LEFT, Direct.DOWN, Direct.UP),
    (Direct.RIGHT, Direct.UP, Direct.DOWN),
])
def test_turns(direct, left, right):
    assert turn_left(direct) == left
    assert turn_right(direct) == right
    assert turn_right(turn_left(direct)) == direct


def test_diagonal_components_sum_to_offset():
    for diagonal in DiagonalDirect:
        first, second = DIAGONAL_COMPONENTS[diagonal]
        dx = DIRECT_OFFSETS[first][0] + DIRECT_OFFSETS[second][0]
        dy = DIRECT_OFFSETS[first][1] + DIRECT_OFFSETS[second][1]
        assert (dx, dy) == DIAGONAL_OFFSETS[diagonal]
        assert diagonal_between(first, second) == diagonal
        assert diagonal_between(second, first) == diagonal


def test_diagonal_open_checks_are_the_components():
    for diagonal in DiagonalDirect:
        components = {DIRECT_OFFSETS[d] for d in DIAGONAL_COMPONENTS[diagonal]}
        assert set(DIAGONAL_OPEN_CHECKS[diagonal]) == components


def test_delta_lookups():
    assert direct_from_delta(0, 5) == Direct.UP
    assert direct_from_delta(0, -2) == Direct.DOWN
    assert direct_from_delta(-3, 0) == Direct.LEFT
    assert direct_from_delta(1, 0) == Direct.RIGHT
    assert direct_from_delta(1, 1) is None
    assert direct_from_delta(0, 0) is None

    assert diagonal_from_delta(-2, 2) == DiagonalDirect.LEFT_UP
    assert diagonal_from_delta(3, 3) == DiagonalDirect.RIGHT_UP
    assert diagonal_from_delta(-1, -1) == DiagonalDirect.LEFT_DOWN
    assert diagonal_from_delta(1, -4) == DiagonalDirect.RIGHT_DOWN
    assert diagonal_from_delta(0, 1) is None


def test_calc_h_is_scaled_manhattan():
    assert calc_h(0, 0, 4, 4) == 80
    assert calc_h(3, 1, 1, 2) == 30
    assert calc_h(2, 2, 2, 2) == 0

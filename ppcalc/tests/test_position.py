from math import isclose

from ppcalc.position import Position, distance, playfield_center


def test_arithmetic():
    assert Position(3, 4) - Position(1, 1) == Position(2, 3)
    assert Position(3, 4) * 2 == Position(6, 8)
    assert 2 * Position(3, 4) == Position(6, 8)
    assert Position(3, 4).length == 5


def test_distance():
    assert distance(Position(0, 0), Position(3, 4)) == 5
    assert distance(Position(3, 4), Position(0, 0)) == 5
    assert isclose(distance(playfield_center, Position(0, 0)), 320)

# tests/heuristics/test_heuristics.py
import math

import pytest

from canvas_router.types import Position
from canvas_router.planning.heuristics import ManhattanHeuristic, OctileHeuristic, ZeroHeuristic


def test_manhattan():
    h = ManhattanHeuristic()
    assert h.estimate(Position(0, 0), Position(3, 4)) == 7
    assert h.estimate(Position(3, 4), Position(0, 0)) == 7
    assert h.estimate(Position(-10, 5), Position(-10, 5)) == 0


def test_octile_in_grid_steps():
    expected = (math.sqrt(2) - 1) * 3 + 4
    assert OctileHeuristic().estimate(Position(0, 0), Position(3, 4)) == pytest.approx(expected)
    # 分辨率 10 时换算成格子步数
    assert OctileHeuristic(10.0).estimate(Position(0, 0), Position(30, 40)) == pytest.approx(expected)


def test_octile_rejects_bad_resolution():
    with pytest.raises(ValueError):
        OctileHeuristic(0)


def test_zero():
    assert ZeroHeuristic().estimate(Position(0, 0), Position(100, 100)) == 0.0


def test_manhattan_overestimates_diagonal_step_cost():
    # 一步斜行代价 sqrt(2), 而 Manhattan 给出 2, 不可采纳
    h = ManhattanHeuristic().estimate(Position(0, 0), Position(1, 1))
    assert h > math.sqrt(2)

# canvas_router/map/grid.py
import math
from typing import Tuple

from canvas_router.types import Position

# 8 个运动方向 (dx, dy), 顺序决定了同 f 值节点的入队顺序
DIRECTIONS: Tuple[Tuple[int, int], ...] = (
    (1, 0), (-1, 0), (0, 1), (0, -1),
    (1, 1), (-1, 1), (1, -1), (-1, -1),
)
DIAGONAL_COST = math.sqrt(2)


def movement_cost(dx: int, dy: int) -> float:
    """直行 1.0, 斜行 sqrt(2); 与分辨率无关"""
    return DIAGONAL_COST if dx != 0 and dy != 0 else 1.0


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


class CanvasGrid:
    """
    把连续的画布坐标离散到边长为 resolution 的栅格上。

    与 GridMap 不同，这里的栅格没有边界也没有原点偏移：
    格点坐标就是 index * resolution，取整规则是四舍五入到最近的格线。
    """

    def __init__(self, resolution: float):
        if not (resolution > 0 and math.isfinite(resolution)):
            raise ValueError(f"Grid resolution must be a positive finite number, got {resolution}")
        self._resolution = float(resolution)

    @property
    def resolution(self) -> float:
        return self._resolution

    def index_of(self, position: Position) -> Tuple[int, int]:
        """画布坐标 -> 栅格索引 (四舍五入, .5 向 +inf)"""
        return (_round_half_up(position.x / self._resolution),
                _round_half_up(position.y / self._resolution))

    def position_of(self, x_idx: int, y_idx: int) -> Position:
        """栅格索引 -> 对齐后的画布坐标"""
        return Position(x_idx * self._resolution, y_idx * self._resolution)

    def quantize(self, position: Position) -> Position:
        return self.position_of(*self.index_of(position))

# canvas_router/collision/checker.py
from typing import Sequence

import numpy as np

from canvas_router.types import BoundingBox, Position
from .config import CollisionConfig
from .geometry import segment_hits_boxes, union_bbox


def as_bbox(obstacle) -> BoundingBox:
    """接受 BoundingBox 或 (min_x, min_y, max_x, max_y) 序列"""
    if isinstance(obstacle, BoundingBox):
        return obstacle
    try:
        min_x, min_y, max_x, max_y = obstacle
    except (TypeError, ValueError):
        raise ValueError(f"Obstacle must be a BoundingBox or a 4-sequence, got {obstacle!r}")
    return BoundingBox(float(min_x), float(min_y), float(max_x), float(max_y))


class CollisionChecker:
    """
    点 vs 矩形障碍物的碰撞检测。

    构造时把障碍物列表拷贝成 (N, 4) 的 numpy 数组，之后调用方
    再修改自己的列表不会影响正在进行的搜索。
    """

    def __init__(self, obstacles: Sequence[BoundingBox], config: CollisionConfig = None):
        self.config = config if config is not None else CollisionConfig()

        boxes = [as_bbox(o) for o in obstacles]
        self._boxes = np.array(
            [[b.min_x, b.min_y, b.max_x, b.max_y] for b in boxes],
            dtype=float,
        ).reshape(-1, 4)

        if self.config.extra_inflation > 0:
            inflation = self.config.extra_inflation
            self._boxes[:, :2] -= inflation
            self._boxes[:, 2:] += inflation

    def __len__(self) -> int:
        return len(self._boxes)

    @property
    def boxes(self) -> np.ndarray:
        """只读视图"""
        view = self._boxes.view()
        view.flags.writeable = False
        return view

    def bounds(self) -> BoundingBox:
        """所有障碍物的外包框 (无障碍物时报错)"""
        if len(self._boxes) == 0:
            raise ValueError("No obstacles to bound")
        return union_bbox(BoundingBox(*(float(v) for v in row)) for row in self._boxes)

    def check(self, position: Position) -> bool:
        """
        :return: True 表示该点落在某个障碍物内或边上 (不安全)
        """
        if len(self._boxes) == 0:
            return False
        b = self._boxes
        hit = ((b[:, 0] <= position.x) & (position.x <= b[:, 2]) &
               (b[:, 1] <= position.y) & (position.y <= b[:, 3]))
        return bool(np.any(hit))

    def is_free(self, position: Position) -> bool:
        return not self.check(position)

    def check_segment(self, a: Position, b: Position) -> bool:
        """
        精确的线段 vs 矩形检测 (含端点和边界)
        :return: True 表示线段穿过或碰到某个障碍物
        """
        if len(self._boxes) == 0:
            return False
        return bool(np.any(segment_hits_boxes(a, b, self._boxes)))

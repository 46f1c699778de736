import math
from canvas_router.types import Position
from .base import Heuristic

class OctileHeuristic(Heuristic):
    """
    针对 8-连通栅格的对角距离。
    假设直行代价为 1.0，斜行代价为 sqrt(2)。

    :param resolution: 传入栅格分辨率时，把画布距离换算成格子步数，
                       与 g 的单位一致 (此时才是严格可采纳的)
    """
    def __init__(self, resolution: float = 1.0):
        if resolution <= 0:
            raise ValueError("resolution must be positive")
        self.resolution = resolution

    def estimate(self, current: Position, goal: Position) -> float:
        dx = abs(current.x - goal.x) / self.resolution
        dy = abs(current.y - goal.y) / self.resolution
        return (math.sqrt(2) - 1) * min(dx, dy) + max(dx, dy)

# canvas_router/planning/heuristics/zero.py
from canvas_router.types import Position
from .base import Heuristic

class ZeroHeuristic(Heuristic):
    """
    零启发式 (h=0).
    A* 退化为 Dijkstra，保证最优，用作代价基准。
    """
    def estimate(self, current: Position, goal: Position) -> float:
        return 0.0

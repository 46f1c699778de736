# canvas_router/planning/heuristics/manhattan.py
from canvas_router.types import Position
from .base import Heuristic

class ManhattanHeuristic(Heuristic):
    """
    曼哈顿距离 (L1), 连线路由的默认启发式。
    Cost = |dx| + |dy|

    注意：8-连通栅格中斜行代价为 sqrt(2) < 2，而且 h 是画布单位、
    g 是格子步数，所以它不满足 Admissibility。
    A* 可能找不到最短路径，但搜索更贪婪、扩展节点更少。
    """
    def estimate(self, current: Position, goal: Position) -> float:
        return abs(current.x - goal.x) + abs(current.y - goal.y)

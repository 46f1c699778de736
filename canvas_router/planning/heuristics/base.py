from abc import ABC, abstractmethod
from canvas_router.types import Position

class Heuristic(ABC):
    @abstractmethod
    def estimate(self, current: Position, goal: Position) -> float:
        """统一接口：只接受当前点和目标点 (画布坐标)"""
        pass

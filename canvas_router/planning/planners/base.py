# canvas_router/planning/planners/base.py
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from canvas_router.types import BoundingBox, Position
from canvas_router.visualization.debugger import IDebugger


class PlannerBase(ABC):
    """
    所有连线规划器的抽象基类
    """

    @abstractmethod
    def plan(self,
             start: Position,
             end: Position,
             obstacles: Sequence[BoundingBox],
             resolution: float,
             debugger: Optional[IDebugger] = None) -> Optional[List[Position]]:
        """
        执行路径规划
        :param start: 连线起点 (画布坐标, 不要求对齐栅格)
        :param end: 连线终点
        :param obstacles: 需要绕开的矩形 (只读快照)
        :param resolution: 栅格边长
        :param debugger: 调试器钩子 (用于记录搜索过程)
        :return: 路径点列表, 首尾是原始的 start/end; 无路可走时返回 None
        """
        pass

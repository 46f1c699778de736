# canvas_router/routing/router.py
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

from canvas_router.types import BoundingBox, CanvasNode, Position
from canvas_router.config import RouterConfig
from canvas_router.collision import CollisionChecker, enlarge_bbox
from canvas_router.planning.planners.base import PlannerBase
from canvas_router.planning.planners.a_star import AStarPlanner, as_position
from canvas_router.planning.smoother import PathSmoother
from canvas_router.visualization.debugger import IDebugger, LoggingDebugger


@dataclass
class RouteRequest:
    """
    一次 "重新计算连线" 请求。
    宿主在节点被移动/缩放/新建后，为受影响的连线各发一个请求。
    """
    connector_id: str
    start: Position
    end: Position
    nodes: Sequence[CanvasNode] = ()
    # 不当作障碍物的节点 (通常是连线两端所连的节点)
    exclude: Tuple[str, ...] = ()

    def obstacles(self, padding: float = 0.0) -> List[BoundingBox]:
        excluded = set(self.exclude)
        boxes = []
        for node in self.nodes:
            if node.id in excluded:
                continue
            bbox = node.bbox
            if padding > 0:
                bbox = enlarge_bbox(bbox, padding)
            boxes.append(bbox)
        return boxes


@dataclass
class RouteResult:
    connector_id: str
    waypoints: Optional[List[Position]]
    found: bool
    fallback: bool = False
    expansions: int = 0


class ConnectorRouter:
    """
    把 RouteRequest 交给纯函数式的规划器，并处理无路可走时的退化。
    每个请求独立求解，不同连线之间不做协调。
    """
    def __init__(self,
                 config: RouterConfig = None,
                 planner: PlannerBase = None,
                 smoother: PathSmoother = None):
        self.config = config if config is not None else RouterConfig()
        if planner is None:
            planner = AStarPlanner(config=self.config.planner_config())
        self.planner = planner
        self.smoother = smoother

    def route(self, request: RouteRequest, debugger: IDebugger = None) -> RouteResult:
        start = as_position(request.start, "start")
        end = as_position(request.end, "end")
        obstacles = request.obstacles(self.config.node_padding)

        if debugger is None and self.config.debug_mode:
            debugger = LoggingDebugger()
        if debugger is not None:
            debugger.log(f"Routing connector {request.connector_id}", level='DEBUG',
                         payload={"obstacles": len(obstacles)})

        expansions = 0
        if isinstance(self.planner, AStarPlanner):
            result = self.planner.search(start, end, obstacles, self.config.grid_resolution, debugger)
            path, expansions = result.path, result.expansions
        else:
            path = self.planner.plan(start, end, obstacles, self.config.grid_resolution, debugger)

        if path is None:
            if self.config.fallback_to_straight_line:
                return RouteResult(request.connector_id, [start, end], found=False,
                                   fallback=True, expansions=expansions)
            return RouteResult(request.connector_id, None, found=False, expansions=expansions)

        if self.config.simplify_path:
            path = self._smoother_for(obstacles).smooth(path)
        return RouteResult(request.connector_id, path, found=True, expansions=expansions)

    def route_all(self, requests: Iterable[RouteRequest]) -> List[RouteResult]:
        """逐个求解，结果顺序与请求顺序一致"""
        return [self.route(request) for request in requests]

    def _smoother_for(self, obstacles: List[BoundingBox]) -> PathSmoother:
        if self.smoother is not None:
            return self.smoother
        return PathSmoother(CollisionChecker(obstacles))

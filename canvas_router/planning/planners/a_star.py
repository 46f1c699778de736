# canvas_router/planning/planners/a_star.py
import math
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Sequence, Set, Tuple

from canvas_router.types import BoundingBox, Position, SearchNode
from canvas_router.map.grid import CanvasGrid, DIRECTIONS, movement_cost
from canvas_router.collision import CollisionChecker, CollisionConfig, bbox_from_points, union_bbox
from canvas_router.planning.config import PlannerConfig
from canvas_router.planning.open_set import make_open_set
from canvas_router.planning.heuristics import Heuristic, ManhattanHeuristic
from canvas_router.planning.planners.base import PlannerBase
from canvas_router.visualization.debugger import IDebugger, NoOpDebugger

Cell = Tuple[int, int]

# SearchResult.reason
GOAL_REACHED = "goal_reached"
OPEN_SET_EXHAUSTED = "open_set_exhausted"
GOAL_BLOCKED = "goal_blocked"
EXPANSION_LIMIT = "expansion_limit"


@dataclass
class SearchResult:
    path: Optional[List[Position]]
    costs: List[float] = field(default_factory=list)  # 路径上每个栅格节点的 g
    expansions: int = 0                                # 出队次数 (含重复项)
    expanded_cells: int = 0                            # 不同的已关闭格子数
    reason: str = OPEN_SET_EXHAUSTED

    @property
    def found(self) -> bool:
        return self.path is not None


def as_position(value, name: str = "position") -> Position:
    """接受 Position 或 (x, y)，并检查是否有限"""
    if not isinstance(value, Position):
        try:
            x, y = value
        except (TypeError, ValueError):
            raise ValueError(f"{name} must be a Position or an (x, y) pair, got {value!r}")
        value = Position(float(x), float(y))
    if not value.is_finite():
        raise ValueError(f"{name} must have finite coordinates, got {value}")
    return value


class AStarPlanner(PlannerBase):
    """
    画布连线的 Grid A* 实现。

    工作流程：
    1. 将连续的 start/end 四舍五入到栅格上。
    2. 使用 8-连通方式扩展邻居 (直行 1.0, 斜行 sqrt(2))。
    3. 只检测邻居格点本身是否落在障碍物内, 不检测两格之间的线段。
    4. 回溯 parent_index 得到路径, 首尾换回调用方给出的原始坐标。

    节点存放在单次调用的 arena (list) 里, parent 是 arena 下标。
    规划器本身不保存任何跨调用的状态, 可以在多个线程里同时使用。
    """

    def __init__(self,
                 heuristic: Heuristic = None,
                 config: PlannerConfig = None,
                 collision_config: CollisionConfig = None):
        self.h_fn = heuristic if heuristic is not None else ManhattanHeuristic()
        self.config = config if config is not None else PlannerConfig()
        self.collision_config = collision_config

    def plan(self,
             start: Position,
             end: Position,
             obstacles: Sequence[BoundingBox],
             resolution: float,
             debugger: IDebugger = None) -> Optional[List[Position]]:
        return self.search(start, end, obstacles, resolution, debugger).path

    def search(self,
               start: Position,
               end: Position,
               obstacles: Sequence[BoundingBox],
               resolution: float,
               debugger: IDebugger = None) -> SearchResult:
        if debugger is None:
            debugger = NoOpDebugger()

        # 1. 入参校验 (非法输入直接抛 ValueError, 搜索循环里不再防御)
        grid = CanvasGrid(resolution)
        start = as_position(start, "start")
        end = as_position(end, "end")
        checker = CollisionChecker(list(obstacles), self.collision_config)

        # 2. 坐标离散化
        start_cell = grid.index_of(start)
        goal_cell = grid.index_of(end)
        goal_pos = grid.position_of(*goal_cell)
        window = self._search_window(grid, start_cell, goal_cell, checker)

        debugger.set_search_info({
            "resolution": grid.resolution,
            "start_cell": start_cell,
            "goal_cell": goal_cell,
            "window": window,
            "obstacles": len(checker),
        })

        if goal_cell != start_cell and checker.check(goal_pos):
            debugger.log("Goal cell lies inside an obstacle, no path.", level='WARN',
                         payload={"goal": goal_pos})
            return SearchResult(path=None, reason=GOAL_BLOCKED)

        # 3. 初始化核心容器
        start_pos = grid.position_of(*start_cell)
        arena: List[SearchNode] = [SearchNode(start_pos.x, start_pos.y)]
        cells: List[Cell] = [start_cell]

        open_set = make_open_set(self.config.open_set_method)
        open_set.push(0, 0.0)
        # 每个格子在 OpenSet 中出现过的最小 g (只按坐标比较)
        open_g: Dict[Cell, float] = {start_cell: 0.0}
        closed: Set[Cell] = set()

        expansions = 0
        max_expansions = self.config.max_expansions

        # 4. 主循环
        while len(open_set) > 0:
            current_index = open_set.pop()
            current = arena[current_index]
            current_cell = cells[current_index]

            closed.add(current_cell)
            expansions += 1
            debugger.record_current_expansion(current.position)

            # A. 终止条件
            if current_cell == goal_cell:
                path, costs = self._reconstruct_path(arena, current_index)
                debugger.log("Goal reached.", level='DEBUG',
                             payload={"expansions": expansions, "waypoints": len(path) + 2})
                return SearchResult(
                    path=[start] + path + [end],
                    costs=costs,
                    expansions=expansions,
                    expanded_cells=len(closed),
                    reason=GOAL_REACHED,
                )

            if max_expansions is not None and expansions >= max_expansions:
                debugger.log("Expansion limit reached, no path.", level='WARN',
                             payload={"max_expansions": max_expansions})
                return SearchResult(path=None, expansions=expansions,
                                    expanded_cells=len(closed), reason=EXPANSION_LIMIT)

            # B. 扩展邻居
            for neighbor_cell, neighbor_pos, tentative_g in self._valid_neighbors(
                    current, current_cell, grid, checker, window):
                if neighbor_cell in closed:
                    continue

                best_g = open_g.get(neighbor_cell)
                if best_g is not None and tentative_g >= best_g:
                    continue

                # 直接追加, 不替换 OpenSet 中已有的旧节点
                h_val = self.h_fn.estimate(neighbor_pos, goal_pos)
                node = SearchNode(
                    x=neighbor_pos.x,
                    y=neighbor_pos.y,
                    g=tentative_g,
                    h=h_val,
                    f=tentative_g + h_val,
                    parent_index=current_index,
                )
                arena.append(node)
                cells.append(neighbor_cell)
                open_g[neighbor_cell] = tentative_g
                open_set.push(len(arena) - 1, node.f)

                debugger.record_open_set_node(neighbor_pos, node.f, h_val)

        debugger.log("Open set is empty, no path found.", level='INFO',
                     payload={"expansions": expansions})
        return SearchResult(path=None, expansions=expansions,
                            expanded_cells=len(closed), reason=OPEN_SET_EXHAUSTED)

    def _valid_neighbors(self,
                         node: SearchNode,
                         cell: Cell,
                         grid: CanvasGrid,
                         checker: CollisionChecker,
                         window: Tuple[int, int, int, int]) -> Iterator[Tuple[Cell, Position, float]]:
        """按固定方向顺序产生 (格子, 坐标, g)，跳过窗口外和障碍物内的格子"""
        min_ix, min_iy, max_ix, max_iy = window
        for dx, dy in DIRECTIONS:
            nx, ny = cell[0] + dx, cell[1] + dy
            if not (min_ix <= nx <= max_ix and min_iy <= ny <= max_iy):
                continue

            position = grid.position_of(nx, ny)
            tentative_g = node.g + movement_cost(dx, dy)

            if checker.check(position):
                continue

            yield (nx, ny), position, tentative_g

    def _search_window(self,
                       grid: CanvasGrid,
                       start_cell: Cell,
                       goal_cell: Cell,
                       checker: CollisionChecker) -> Tuple[int, int, int, int]:
        """
        搜索窗口 (格子索引, 闭区间)：起点、终点和所有障碍物的外包框，
        再向外留 search_margin_cells 格，保证能从障碍物外侧绕过去。
        窗口外全是空地，绕到窗口外的路径总能压回窗口边缘，所以不会丢解。
        """
        r = grid.resolution
        region = bbox_from_points(grid.position_of(*start_cell), grid.position_of(*goal_cell))
        if len(checker) > 0:
            region = union_bbox([region, checker.bounds()])

        # index * r 再除回 r 可能有浮点误差, floor/ceil 只会让窗口变大
        min_ix = min(start_cell[0], goal_cell[0], math.floor(region.min_x / r))
        min_iy = min(start_cell[1], goal_cell[1], math.floor(region.min_y / r))
        max_ix = max(start_cell[0], goal_cell[0], math.ceil(region.max_x / r))
        max_iy = max(start_cell[1], goal_cell[1], math.ceil(region.max_y / r))

        margin = self.config.search_margin_cells
        return min_ix - margin, min_iy - margin, max_ix + margin, max_iy + margin

    def _reconstruct_path(self, arena: List[SearchNode], index: int) -> Tuple[List[Position], List[float]]:
        """从 arena 下标回溯, 返回 (起点->终点 的栅格坐标, 对应的 g)"""
        path = []
        costs = []
        while index != -1:
            node = arena[index]
            path.append(node.position)
            costs.append(node.g)
            index = node.parent_index
        return path[::-1], costs[::-1]


def find_path(start: Position,
              end: Position,
              obstacles: Sequence[BoundingBox],
              grid_resolution: float) -> Optional[List[Position]]:
    """默认配置 (Manhattan + 线性扫描) 的一次性调用接口"""
    return AStarPlanner().plan(start, end, obstacles, grid_resolution)

# canvas_router/config.py
import math
from dataclasses import dataclass
from typing import Optional

from canvas_router.planning.config import OpenSetMethod, PlannerConfig


@dataclass
class RouterConfig:
    grid_resolution: float = 10.0
    node_padding: float = 0.0            # 节点包围盒向外膨胀的距离
    fallback_to_straight_line: bool = True
    simplify_path: bool = False
    debug_mode: bool = False

    # 以下透传给 PlannerConfig
    open_set_method: OpenSetMethod = OpenSetMethod.LINEAR_SCAN
    search_margin_cells: int = 2
    max_expansions: Optional[int] = None

    def __post_init__(self):
        if not (self.grid_resolution > 0 and math.isfinite(self.grid_resolution)):
            raise ValueError(f"grid_resolution must be positive, got {self.grid_resolution}")
        if self.node_padding < 0:
            raise ValueError(f"node_padding must be non-negative, got {self.node_padding}")

    def planner_config(self) -> PlannerConfig:
        return PlannerConfig(
            open_set_method=self.open_set_method,
            search_margin_cells=self.search_margin_cells,
            max_expansions=self.max_expansions,
        )

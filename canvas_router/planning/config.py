# canvas_router/planning/config.py
from enum import Enum
from dataclasses import dataclass
from typing import Optional


class OpenSetMethod(Enum):
    # 每步线性扫描全部 OpenSet 取最小 f (与画布插件原实现一致)
    LINEAR_SCAN = 0

    # 二叉堆, 按 (f, 插入序号) 排序, 结果与 LINEAR_SCAN 完全相同
    BINARY_HEAP = 1


@dataclass
class PlannerConfig:
    open_set_method: OpenSetMethod = OpenSetMethod.LINEAR_SCAN
    # 搜索窗口 = 起点/终点/所有障碍物的外包框, 再向外扩展若干格
    search_margin_cells: int = 2
    # None 表示不限制扩展次数
    max_expansions: Optional[int] = None

    def __post_init__(self):
        if self.search_margin_cells < 1:
            raise ValueError("search_margin_cells must be at least 1")
        if self.max_expansions is not None and self.max_expansions <= 0:
            raise ValueError("max_expansions must be positive or None")

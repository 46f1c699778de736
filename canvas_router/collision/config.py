# canvas_router/collision/config.py
from dataclasses import dataclass


@dataclass
class CollisionConfig:
    # 在检测层对所有障碍物额外膨胀 (画布单位)
    # RouterConfig.node_padding 已经在生成障碍物时处理过节点留白，这里默认 0
    extra_inflation: float = 0.0

    def __post_init__(self):
        if self.extra_inflation < 0:
            raise ValueError(f"extra_inflation must be non-negative, got {self.extra_inflation}")

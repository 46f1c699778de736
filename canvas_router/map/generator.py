# canvas_router/map/generator.py
from typing import List, Optional, Sequence

import numpy as np

from canvas_router.types import CanvasNode, Position
from canvas_router.collision.geometry import enlarge_bbox, intersects_bbox


class ObstacleFieldGenerator:
    """
    随机画布生成器
    在 canvas_width x canvas_height 的区域内随机摆放矩形节点，
    用于基准测试和属性测试。
    """

    def __init__(self,
                 canvas_width: float,
                 canvas_height: float,
                 seed: Optional[int] = None,
                 max_attempts: int = 1000):
        if canvas_width <= 0 or canvas_height <= 0:
            raise ValueError("Canvas size must be positive")
        self.canvas_width = canvas_width
        self.canvas_height = canvas_height
        self.max_attempts = max_attempts
        self.rng = np.random.default_rng(seed)

    def generate(self,
                 count: int,
                 min_size: float = 20.0,
                 max_size: float = 80.0,
                 keep_clear: Sequence[Position] = (),
                 clearance: float = 0.0) -> List[CanvasNode]:
        """
        :param count: 期望的节点数 (尝试 max_attempts 次后可能少于 count)
        :param keep_clear: 不允许被任何节点覆盖的点 (例如连线起终点)
        :param clearance: keep_clear 点与节点之间至少留出的距离
        :return: List[CanvasNode], id 为 "node-0", "node-1", ...
        """
        if min_size <= 0 or max_size < min_size:
            raise ValueError("Expected 0 < min_size <= max_size")

        nodes: List[CanvasNode] = []
        attempts = 0
        while len(nodes) < count and attempts < self.max_attempts:
            attempts += 1
            w, h = self.rng.uniform(min_size, max_size, size=2)
            x = self.rng.uniform(0.0, max(self.canvas_width - w, 0.0))
            y = self.rng.uniform(0.0, max(self.canvas_height - h, 0.0))

            candidate = CanvasNode(f"node-{len(nodes)}", float(x), float(y), float(w), float(h))
            padded = enlarge_bbox(candidate.bbox, clearance)
            if any(intersects_bbox(p, padded) for p in keep_clear):
                continue
            nodes.append(candidate)
        return nodes

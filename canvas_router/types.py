# canvas_router/types.py
import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """
    画布坐标点 (canvas units)
    """
    x: float
    y: float

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)


@dataclass(frozen=True)
class BoundingBox:
    """
    Axis-aligned obstacle rectangle, inclusive on every edge.
    """
    min_x: float
    min_y: float
    max_x: float
    max_y: float

    def __post_init__(self):
        values = (self.min_x, self.min_y, self.max_x, self.max_y)
        if not all(math.isfinite(v) for v in values):
            raise ValueError(f"BoundingBox coordinates must be finite, got {values}")
        if self.min_x > self.max_x or self.min_y > self.max_y:
            raise ValueError(f"Malformed BoundingBox (min > max): {values}")

    @classmethod
    def from_rect(cls, x: float, y: float, width: float, height: float) -> "BoundingBox":
        """由节点矩形 (左上角 + 宽高) 构造"""
        if width < 0 or height < 0:
            raise ValueError(f"Rectangle size must be non-negative, got {width}x{height}")
        return cls(x, y, x + width, y + height)

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def center(self) -> Position:
        return Position((self.min_x + self.max_x) / 2.0, (self.min_y + self.max_y) / 2.0)


@dataclass
class SearchNode:
    """搜索树节点 (只在一次规划调用内存在)"""
    x: float             # grid aligned, index * resolution
    y: float
    g: float = 0.0
    h: float = 0.0
    f: float = 0.0
    parent_index: int = -1   # 在 arena 中的下标, -1 表示起点

    @property
    def position(self) -> Position:
        return Position(self.x, self.y)


@dataclass(frozen=True)
class CanvasNode:
    """画布上的一个节点 (左上角 + 宽高)"""
    id: str
    x: float
    y: float
    width: float
    height: float

    @property
    def bbox(self) -> BoundingBox:
        return BoundingBox.from_rect(self.x, self.y, self.width, self.height)

# canvas_router/collision/__init__.py

from .config import CollisionConfig
from .checker import CollisionChecker, as_bbox
from .geometry import intersects_bbox, enlarge_bbox, union_bbox, bbox_from_points, segment_hits_boxes

__all__ = [
    "CollisionConfig",
    "CollisionChecker",
    "as_bbox",
    "intersects_bbox",
    "enlarge_bbox",
    "union_bbox",
    "bbox_from_points",
    "segment_hits_boxes",
]

# canvas_router/collision/geometry.py
from typing import Iterable

import numpy as np

from canvas_router.types import BoundingBox, Position


def intersects_bbox(position: Position, bbox: BoundingBox) -> bool:
    """点是否落在矩形内或边上 (闭区间)"""
    return (bbox.min_x <= position.x <= bbox.max_x and
            bbox.min_y <= position.y <= bbox.max_y)


def enlarge_bbox(bbox: BoundingBox, padding: float) -> BoundingBox:
    """
    四周各扩展 padding。
    负的 padding 会收缩矩形，但最多收缩到中心处的退化矩形。
    """
    half_w = bbox.width / 2.0
    half_h = bbox.height / 2.0
    pad_x = max(padding, -half_w)
    pad_y = max(padding, -half_h)
    return BoundingBox(bbox.min_x - pad_x, bbox.min_y - pad_y,
                       bbox.max_x + pad_x, bbox.max_y + pad_y)


def union_bbox(boxes: Iterable[BoundingBox]) -> BoundingBox:
    """最小外包矩形"""
    boxes = list(boxes)
    if not boxes:
        raise ValueError("union_bbox requires at least one box")
    return BoundingBox(
        min(b.min_x for b in boxes),
        min(b.min_y for b in boxes),
        max(b.max_x for b in boxes),
        max(b.max_y for b in boxes),
    )


def bbox_from_points(*positions: Position) -> BoundingBox:
    return BoundingBox(
        min(p.x for p in positions),
        min(p.y for p in positions),
        max(p.x for p in positions),
        max(p.y for p in positions),
    )


def segment_hits_boxes(a: Position, b: Position, boxes: np.ndarray) -> np.ndarray:
    """
    线段 ab 与每个矩形是否相交 (Liang-Barsky / slab 裁剪, 闭区间)
    :param boxes: (N, 4) 数组, 每行 [min_x, min_y, max_x, max_y]
    :return: (N,) bool 数组
    """
    boxes = np.asarray(boxes, dtype=float).reshape(-1, 4)
    t_enter = np.zeros(len(boxes))
    t_exit = np.ones(len(boxes))

    for axis, (p0, d) in enumerate(((a.x, b.x - a.x), (a.y, b.y - a.y))):
        lo = boxes[:, axis]
        hi = boxes[:, axis + 2]
        if d == 0:
            # 与该轴平行: 必须落在 slab 内
            inside = (lo <= p0) & (p0 <= hi)
            t_exit = np.where(inside, t_exit, -1.0)
            continue
        t1 = (lo - p0) / d
        t2 = (hi - p0) / d
        t_enter = np.maximum(t_enter, np.minimum(t1, t2))
        t_exit = np.minimum(t_exit, np.maximum(t1, t2))

    return t_enter <= t_exit

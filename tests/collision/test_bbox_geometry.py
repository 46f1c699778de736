# tests/collision/test_bbox_geometry.py
import numpy as np
import pytest

from canvas_router.types import BoundingBox, CanvasNode, Position
from canvas_router.collision.geometry import (
    bbox_from_points, enlarge_bbox, intersects_bbox, segment_hits_boxes, union_bbox,
)


def test_bounding_box_validation():
    with pytest.raises(ValueError):
        BoundingBox(10, 0, 0, 10)
    with pytest.raises(ValueError):
        BoundingBox(0, 10, 10, 0)
    with pytest.raises(ValueError):
        BoundingBox(0, 0, float("inf"), 10)
    # 退化矩形 (线段/点) 是合法的
    assert BoundingBox(5, 5, 5, 5).width == 0


def test_from_rect_and_node_bbox():
    assert BoundingBox.from_rect(10, 20, 30, 40) == BoundingBox(10, 20, 40, 60)
    with pytest.raises(ValueError):
        BoundingBox.from_rect(0, 0, -1, 5)
    node = CanvasNode("n", 10, 20, 30, 40)
    assert node.bbox == BoundingBox(10, 20, 40, 60)
    assert node.bbox.center == Position(25, 40)


def test_intersects_is_inclusive():
    box = BoundingBox(0, 0, 10, 10)
    assert intersects_bbox(Position(10, 5), box)
    assert intersects_bbox(Position(0, 0), box)
    assert not intersects_bbox(Position(10.0001, 5), box)
    assert not intersects_bbox(Position(5, -0.1), box)


def test_enlarge_and_shrink():
    box = BoundingBox(0, 0, 10, 10)
    assert enlarge_bbox(box, 5) == BoundingBox(-5, -5, 15, 15)
    assert enlarge_bbox(box, -2) == BoundingBox(2, 2, 8, 8)
    assert enlarge_bbox(box, -100) == BoundingBox(5, 5, 5, 5)


def test_union_and_points():
    boxes = [BoundingBox(0, 0, 1, 1), BoundingBox(-3, 2, 0, 8)]
    assert union_bbox(boxes) == BoundingBox(-3, 0, 1, 8)
    with pytest.raises(ValueError):
        union_bbox([])
    assert bbox_from_points(Position(3, -1), Position(-2, 4)) == BoundingBox(-2, -1, 3, 4)


def test_segment_hits_boxes_per_box():
    boxes = np.array([
        [0, 0, 10, 10],
        [20, 0, 30, 10],
        [0, 20, 10, 30],
    ], dtype=float)
    hits = segment_hits_boxes(Position(-5, 5), Position(25, 5), boxes)
    assert hits.tolist() == [True, True, False]

    hits = segment_hits_boxes(Position(5, -5), Position(5, 35), boxes)
    assert hits.tolist() == [True, False, True]

    assert segment_hits_boxes(Position(0, 0), Position(1, 1), np.empty((0, 4))).shape == (0,)

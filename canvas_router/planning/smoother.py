# canvas_router/planning/smoother.py
import math
from typing import List, Optional

from canvas_router.types import Position
from canvas_router.collision import CollisionChecker


def path_length(path: List[Position]) -> float:
    """折线的累积欧氏距离"""
    if not path or len(path) < 2:
        return 0.0
    length = 0.0
    for i in range(len(path) - 1):
        length += math.hypot(path[i + 1].x - path[i].x, path[i + 1].y - path[i].y)
    return length


class PathSmoother:
    """
    Post-processing for planner output before it is drawn as a polyline.

    The A* path walks cell by cell, so long straight runs carry one waypoint
    per grid step and diagonal staircases show up around obstacles. The
    smoother drops redundant waypoints and, when given a collision checker,
    replaces staircases with straight segments that stay clear of obstacles.

    Unlike a random shortcut smoother this one is deterministic: the same
    path and obstacles always produce the same result.
    """
    def __init__(self, collision_checker: Optional[CollisionChecker] = None):
        """
        Args:
            collision_checker: Obstacles to respect when shortcutting.
                Segments are tested exactly against every rectangle, so a
                shortcut never clips a thin obstacle or a corner.
        """
        self.collision_checker = collision_checker

    def smooth(self, path: Optional[List[Position]]) -> Optional[List[Position]]:
        """
        Remove duplicates, merge collinear runs, then shortcut if possible.

        Returns:
            A new list; ``None`` passes through unchanged.
        """
        if path is None:
            return None
        result = self.remove_duplicates(path)
        result = self.compress(result)
        if self.collision_checker is not None:
            result = self.shortcut(result)
        return result

    @staticmethod
    def remove_duplicates(path: List[Position], tolerance: float = 1e-9) -> List[Position]:
        if not path:
            return []
        cleaned = [path[0]]
        for point in path[1:]:
            last = cleaned[-1]
            if math.hypot(point.x - last.x, point.y - last.y) > tolerance:
                cleaned.append(point)
        # 起点和终点重合时仍然保留两个端点
        if len(cleaned) == 1 and len(path) > 1:
            cleaned.append(path[-1])
        return cleaned

    @staticmethod
    def compress(path: List[Position], tolerance: float = 1e-9) -> List[Position]:
        """合并共线段, 只保留转折点"""
        if len(path) <= 2:
            return list(path)

        compressed = [path[0]]
        for i in range(1, len(path) - 1):
            prev_p = compressed[-1]
            curr_p = path[i]
            next_p = path[i + 1]
            cross = ((curr_p.x - prev_p.x) * (next_p.y - curr_p.y) -
                     (curr_p.y - prev_p.y) * (next_p.x - curr_p.x))
            dot = ((curr_p.x - prev_p.x) * (next_p.x - curr_p.x) +
                   (curr_p.y - prev_p.y) * (next_p.y - curr_p.y))
            # 同向共线才可以删掉; 折返 (dot < 0) 要保留
            if abs(cross) > tolerance or dot < 0:
                compressed.append(curr_p)
        compressed.append(path[-1])
        return compressed

    def shortcut(self, path: List[Position]) -> List[Position]:
        """
        Greedy line-of-sight: from each anchor jump to the furthest later
        waypoint that can be reached by a collision-free straight segment.
        """
        if self.collision_checker is None:
            raise ValueError("shortcut() requires a collision checker")
        if len(path) <= 2:
            return list(path)

        optimized = [path[0]]
        i = 0
        while i < len(path) - 1:
            j = len(path) - 1
            while j > i + 1 and not self._segment_is_free(path[i], path[j]):
                j -= 1
            optimized.append(path[j])
            i = j
        return optimized

    def _segment_is_free(self, a: Position, b: Position) -> bool:
        return not self.collision_checker.check_segment(a, b)

# canvas_router/planning/heuristics/__init__.py

from .base import Heuristic
from .manhattan import ManhattanHeuristic
from .octile import OctileHeuristic
from .zero import ZeroHeuristic


__all__ = [
    "Heuristic",
    "ManhattanHeuristic",
    "OctileHeuristic",
    "ZeroHeuristic",
]

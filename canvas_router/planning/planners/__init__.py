# canvas_router/planning/planners/__init__.py

from .base import PlannerBase
from .a_star import AStarPlanner, SearchResult, find_path



__all__ = [
    "PlannerBase",
    "AStarPlanner",
    "SearchResult",
    "find_path",
]

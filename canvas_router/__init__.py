# canvas_router/__init__.py

from .types import Position, BoundingBox, SearchNode, CanvasNode
from .config import RouterConfig
from .planning.planners import AStarPlanner, SearchResult, find_path
from .routing import RouteRequest, RouteResult, ConnectorRouter

__all__ = [
    "Position",
    "BoundingBox",
    "SearchNode",
    "RouterConfig",
    "AStarPlanner",
    "SearchResult",
    "find_path",
    "CanvasNode",
    "RouteRequest",
    "RouteResult",
    "ConnectorRouter",
]

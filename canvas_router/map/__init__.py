# canvas_router/map/__init__.py

from .grid import CanvasGrid, DIRECTIONS, movement_cost
from .generator import ObstacleFieldGenerator

__all__ = ["CanvasGrid", "DIRECTIONS", "movement_cost", "ObstacleFieldGenerator"]

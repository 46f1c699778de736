# canvas_router/visualization/__init__.py

from .debugger import IDebugger, NoOpDebugger, PlanningDebugger, LoggingDebugger

__all__ = ["IDebugger", "NoOpDebugger", "PlanningDebugger", "LoggingDebugger"]

# canvas_router/routing/__init__.py

from .router import RouteRequest, RouteResult, ConnectorRouter

__all__ = ["RouteRequest", "RouteResult", "ConnectorRouter"]

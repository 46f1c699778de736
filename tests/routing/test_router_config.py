# tests/routing/test_router_config.py
import pytest

from canvas_router.config import RouterConfig
from canvas_router.planning.config import OpenSetMethod, PlannerConfig


def test_defaults():
    config = RouterConfig()
    assert config.grid_resolution == 10.0
    assert config.fallback_to_straight_line
    assert not config.simplify_path

    planner_config = config.planner_config()
    assert planner_config.open_set_method == OpenSetMethod.LINEAR_SCAN
    assert planner_config.search_margin_cells == 2
    assert planner_config.max_expansions is None


def test_planner_config_passthrough():
    config = RouterConfig(open_set_method=OpenSetMethod.BINARY_HEAP, search_margin_cells=4, max_expansions=500)
    planner_config = config.planner_config()
    assert planner_config.open_set_method == OpenSetMethod.BINARY_HEAP
    assert planner_config.search_margin_cells == 4
    assert planner_config.max_expansions == 500


@pytest.mark.parametrize("kwargs", [
    {"grid_resolution": 0},
    {"grid_resolution": -2.5},
    {"grid_resolution": float("inf")},
    {"node_padding": -1.0},
])
def test_invalid_router_config(kwargs):
    with pytest.raises(ValueError):
        RouterConfig(**kwargs)


@pytest.mark.parametrize("kwargs", [
    {"search_margin_cells": 0},
    {"max_expansions": 0},
])
def test_invalid_planner_config(kwargs):
    with pytest.raises(ValueError):
        PlannerConfig(**kwargs)


def test_package_exports_single_canvas_node():
    import canvas_router
    import canvas_router.routing as routing
    from canvas_router.types import CanvasNode

    assert canvas_router.CanvasNode is CanvasNode
    assert canvas_router.__all__.count("CanvasNode") == 1
    assert "CanvasNode" not in routing.__all__

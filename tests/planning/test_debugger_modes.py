# tests/planning/test_debugger_modes.py
import logging

import pytest

from canvas_router.types import BoundingBox, Position
from canvas_router.planning.planners.a_star import AStarPlanner
from canvas_router.visualization.debugger import NoOpDebugger, PlanningDebugger, LoggingDebugger


@pytest.fixture
def planner_setup():
    planner = AStarPlanner()
    start = Position(0, 0)
    goal = Position(100, 0)
    obstacles = [BoundingBox(40, -10, 60, 10)]
    return planner, start, goal, obstacles


def test_noop_mode(planner_setup):
    planner, start, goal, obstacles = planner_setup
    debugger = NoOpDebugger()

    path = planner.plan(start, goal, obstacles, 10.0, debugger=debugger)

    assert path is not None
    assert not hasattr(debugger, 'expanded_nodes')
    assert not hasattr(debugger, 'open_set_history')


def test_recording_mode(planner_setup):
    planner, start, goal, obstacles = planner_setup
    debugger = PlanningDebugger()

    result = planner.search(start, goal, obstacles, 10.0, debugger=debugger)

    assert debugger.expanded_nodes[0] == Position(0.0, 0.0)
    assert debugger.expanded_nodes[-1] == Position(100.0, 0.0)
    assert len(debugger.expanded_nodes) == result.expansions
    assert len(debugger.open_set_history) >= result.expansions - 1
    assert debugger.search_info["goal_cell"] == (10, 0)
    assert debugger.search_info["obstacles"] == 1
    assert ('DEBUG', "Goal reached.") in debugger.messages
    for x, y, f, h in debugger.open_set_history:
        assert f >= h


def test_recording_mode_reports_failure():
    debugger = PlanningDebugger()
    AStarPlanner().plan(Position(0, 0), Position(50, 50), [BoundingBox(40, 40, 60, 60)], 10.0, debugger)

    levels = [level for level, _ in debugger.messages]
    assert 'WARN' in levels
    assert debugger.expanded_nodes == []


def test_logging_mode(planner_setup, caplog):
    planner, start, goal, obstacles = planner_setup
    logger = logging.getLogger("tests.planning.search")
    debugger = LoggingDebugger(logger)

    with caplog.at_level(logging.DEBUG, logger="tests.planning.search"):
        planner.plan(start, goal, obstacles, 10.0, debugger=debugger)

    assert len(debugger.expanded_nodes) > 0
    assert debugger.search_info is not None
    assert "Expanding" in caplog.text
    assert "Goal reached." in caplog.text

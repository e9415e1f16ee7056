import logging
import random
from dataclasses import dataclass
from typing import ClassVar
from unittest.mock import patch

import pytest

from nav_core import DirectNavigator, Navigator, RRTNavigator, get_navigator
from nav_core.entities.data.intent import Intent, IntentType, MoveIntent
from nav_core.entities.data.primitive import (
    MovePrimitive,
    PrimitiveType,
    StopPrimitive,
)
from nav_core.entities.data.vector import Vector2D
from nav_core.entities.errors import UnknownRobotError, UnrecognizedIntentError
from nav_core.entities.game import Robot, Team, World
from nav_core.motion_planning.src.planning.config import NavigatorConfig, RRTConfig
from nav_core.motion_planning.src.planning.geometry import segment_intersects_circles
from nav_core.motion_planning.src.planning.obstacles import obstacles_to_arrays
from nav_core.motion_planning.src.planning.path_planners import (
    PlanResult,
    PlanStatus,
    RRTPlanner,
)


@dataclass(frozen=True)
class KickIntent(Intent):
    """An intent the navigator has no handler for."""

    intent_type: ClassVar[None] = None

    robot_id: int


@pytest.fixture
def world() -> World:
    friendly = Team(
        [
            Robot(0, 0.0, position=Vector2D(-2, 0)),
            Robot(1, 0.0, position=Vector2D(-2, 1.5)),
            Robot(2, 0.0, position=Vector2D(-2, -1.5)),
        ]
    )
    enemy = Team([Robot(i, 0.0, position=Vector2D(0, y)) for i, y in enumerate((-0.6, -0.3, 0.0, 0.3, 0.6))])
    return World(friendly_team=friendly, enemy_team=enemy)


def test_move_and_unrecognized_intent(world):
    intents = [MoveIntent(0, Vector2D(2, 0), 0.0), KickIntent(1)]
    result = RRTNavigator(rng=random.Random(0)).get_assigned_primitives(world, intents)

    assert len(result.primitives) == 1
    assert result.primitives[0].robot_id == 0
    assert len(result.errors) == 1
    failure = result.errors[0]
    assert failure.index == 1
    assert failure.intent is intents[1]
    assert isinstance(failure.error, UnrecognizedIntentError)
    assert not result.ok


def test_rrt_move_avoids_other_robots(world, seed):
    navigator = RRTNavigator(rng=random.Random(seed))
    result = navigator.get_assigned_primitives(world, [MoveIntent(0, Vector2D(2, 0), 1.0, final_speed=0.5)])

    assert result.ok
    (primitive,) = result.primitives
    assert isinstance(primitive, MovePrimitive)
    assert primitive.primitive_type is PrimitiveType.MOVE
    assert primitive.final_angle == 1.0
    assert primitive.final_speed == 0.5
    assert primitive.dest.distance_to((2, 0)) <= navigator.config.rrt.goal_tolerance
    assert primitive.waypoints[-1] == primitive.dest

    centers, radii = obstacles_to_arrays(navigator.get_obstacles(world, 0))
    path = [Vector2D(-2, 0), *primitive.waypoints]
    for a, b in zip(path, path[1:]):
        assert not segment_intersects_circles(a.to_array(), b.to_array(), centers, radii)


def test_planning_robot_is_not_its_own_obstacle(world):
    obstacles = RRTNavigator().get_obstacles(world, 0)
    friendly_ids = {o.robot_id for o in obstacles if o.center.x < -1}
    assert friendly_ids == {1, 2}
    assert len(obstacles) == 2 + 5


def test_enemy_obstacles_scaled():
    world = World(friendly_team=Team([Robot(0, 0.0)]), enemy_team=Team([Robot(0, 0.0, position=Vector2D(1, 1))]))
    config = NavigatorConfig(default_avoid_dist=0.1, enemy_avoid_dist_scale=2.0)
    (obstacle,) = RRTNavigator(config).get_obstacles(world, 0)
    assert obstacle.radius == pytest.approx(RRTNavigator(NavigatorConfig()).get_obstacles(world, 0)[0].radius + 0.05)


def test_unknown_robot_reported(world):
    result = RRTNavigator(rng=random.Random(0)).get_assigned_primitives(world, [MoveIntent(9, Vector2D(1, 1), 0.0)])
    assert result.primitives == []
    assert isinstance(result.errors[0].error, UnknownRobotError)
    assert result.errors[0].error.robot_id == 9


def test_no_path_holds_position(world):
    # Destination sits on top of an enemy robot
    intents = [MoveIntent(0, Vector2D(0, 0), 0.0)]
    config = NavigatorConfig(rrt=RRTConfig(max_iterations=50))
    result = RRTNavigator(config, rng=random.Random(0)).get_assigned_primitives(world, intents)

    assert result.ok
    assert result.primitives == [StopPrimitive(0)]
    assert result.primitives[0].get_extra_bit_array() == [False]


def test_destination_outside_field_holds_position(world):
    result = RRTNavigator(rng=random.Random(0)).get_assigned_primitives(world, [MoveIntent(0, Vector2D(9, 0), 0.0)])
    assert result.primitives == [StopPrimitive(0)]


def test_parallel_matches_serial(world, seed):
    intents = [
        MoveIntent(0, Vector2D(2, 0), 0.0),
        MoveIntent(1, Vector2D(2, 1.5), 0.0),
        KickIntent(2),
        MoveIntent(2, Vector2D(2, -0.2), 0.0),
    ]
    serial = RRTNavigator(NavigatorConfig(max_workers=1), rng=random.Random(seed))
    threaded = RRTNavigator(NavigatorConfig(max_workers=4), rng=random.Random(seed))

    serial_result = serial.get_assigned_primitives(world, intents)
    threaded_result = threaded.get_assigned_primitives(world, intents)

    assert serial_result.primitives == threaded_result.primitives
    assert [f.index for f in serial_result.errors] == [f.index for f in threaded_result.errors] == [2]
    assert [p.robot_id for p in serial_result.primitives] == [0, 1, 2]


def test_world_is_not_modified(world):
    before = {r.id: (r.position, r.last_update_timestamp) for r in world.friendly_team}
    RRTNavigator(rng=random.Random(0)).get_assigned_primitives(world, [MoveIntent(0, Vector2D(2, 0), 0.0)])
    assert {r.id: (r.position, r.last_update_timestamp) for r in world.friendly_team} == before


def test_empty_batch(world):
    result = RRTNavigator().get_assigned_primitives(world, [])
    assert result.primitives == [] and result.ok


def test_direct_navigator_ignores_obstacles(world):
    result = DirectNavigator().get_assigned_primitives(world, [MoveIntent(0, Vector2D(2, 0), 0.5)])
    assert result.primitives == [MovePrimitive(0, Vector2D(2, 0), 0.5, 0.0, waypoints=(Vector2D(2, 0),))]
    assert result.primitives[0].get_parameter_array() == [2.0, 0.0, 0.5, 0.0]


def test_intent_type_tag():
    assert MoveIntent(0, Vector2D(0, 0), 0.0).intent_type is IntentType.MOVE


@pytest.mark.parametrize("name, cls", [("rrt", RRTNavigator), ("RRT", RRTNavigator), ("direct", DirectNavigator)])
def test_get_navigator(name, cls):
    navigator_cls = get_navigator(name)
    assert navigator_cls is cls
    assert issubclass(navigator_cls, Navigator)


def test_get_navigator_unknown():
    with pytest.raises(ValueError):
        get_navigator("potential_field")


class TestPlannerFallback:
    """How RRTNavigator turns each planner outcome into a primitive."""

    @pytest.fixture
    def planner_plan(self):
        with patch.object(RRTPlanner, "plan") as plan:
            yield plan

    def test_found_path_becomes_move(self, world, planner_plan):
        waypoints = [Vector2D(-2, 0), Vector2D(-1, 1), Vector2D(2, 0.1)]
        planner_plan.return_value = PlanResult(PlanStatus.FOUND, waypoints, iterations=12)

        result = RRTNavigator(rng=random.Random(0)).get_assigned_primitives(world, [MoveIntent(0, Vector2D(2, 0), 0.0)])

        (primitive,) = result.primitives
        assert primitive.dest == Vector2D(2, 0.1)
        assert primitive.waypoints == (Vector2D(-1, 1), Vector2D(2, 0.1))

    def test_exhausted_plan_logs_warning(self, world, planner_plan, caplog):
        planner_plan.return_value = PlanResult(PlanStatus.EXHAUSTED, iterations=3000)

        with caplog.at_level(logging.WARNING, logger="nav_core.motion_planning.src.navigator"):
            result = RRTNavigator().get_assigned_primitives(world, [MoveIntent(0, Vector2D(2, 0), 0.0)])

        assert result.primitives == [StopPrimitive(0)]
        assert any("holding position" in record.message for record in caplog.records)

    def test_planner_gets_obstacles_without_the_moving_robot(self, world, planner_plan):
        planner_plan.return_value = PlanResult(PlanStatus.EXHAUSTED)

        RRTNavigator().get_assigned_primitives(world, [MoveIntent(1, Vector2D(2, 0), 0.0)])

        start, goal, obstacles, bounds = planner_plan.call_args[0]
        assert start == Vector2D(-2, 1.5)
        assert goal == Vector2D(2, 0)
        assert 1 not in {o.robot_id for o in obstacles if o.center.x < -1}
        assert bounds == world.field_bounds

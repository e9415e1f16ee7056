import logging
import random
from abc import ABC, abstractmethod
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Union

from nav_core.entities.data.intent import Intent, IntentType, MoveIntent
from nav_core.entities.data.primitive import MovePrimitive, Primitive, StopPrimitive
from nav_core.entities.errors import (
    NavigationError,
    UnknownRobotError,
    UnrecognizedIntentError,
)
from nav_core.entities.game.robot import Robot
from nav_core.entities.game.world import World
from nav_core.motion_planning.src.planning.config import NavigatorConfig
from nav_core.motion_planning.src.planning.obstacles import (
    RobotObstacle,
    generate_enemy_obstacles,
    generate_friendly_obstacles,
)
from nav_core.motion_planning.src.planning.path_planners import (
    PlanStatus,
    RRTPlanner,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IntentFailure:
    """An intent that could not be turned into a primitive."""

    index: int  # position of the intent in the batch
    intent: Intent
    error: NavigationError


@dataclass
class NavigatorResult:
    """Primitives for the intents that could be planned, in intent order, plus the ones that could not."""

    primitives: List[Primitive] = field(default_factory=list)
    errors: List[IntentFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


class Navigator(ABC):
    """Turns a batch of intents into primitives, once per control tick.

    Subclasses only decide how a single MoveIntent becomes a primitive. Dispatching on the
    intent variant, collecting per-intent failures and fanning out to worker threads lives here.
    The navigator keeps no state between cycles apart from its configuration and random source.

    Args:
        config (NavigatorConfig, optional): Navigator tuning. Defaults to the values in settings.
        rng (random.Random, optional): Seeds the per-intent random sources. Pass a seeded one for reproducible runs.
    """

    def __init__(self, config: Optional[NavigatorConfig] = None, rng: Optional[random.Random] = None):
        self.config = config if config is not None else NavigatorConfig()
        self._rng = rng if rng is not None else random.Random()

    def get_assigned_primitives(self, world: World, assigned_intents: Sequence[Intent]) -> NavigatorResult:
        """
        Plan every intent against the given world snapshot.

        A failing intent is reported in `NavigatorResult.errors` and never stops the rest of the batch.

        Args:
            world (World): Read-only snapshot for this cycle.
            assigned_intents (Sequence[Intent]): Intents in priority order.

        Returns:
            NavigatorResult: One primitive per successfully handled intent, in the same order.
        """
        # Drawn up front and in order so serial and threaded runs plan with the same seeds
        seeds = [self._rng.getrandbits(64) for _ in assigned_intents]

        if self.config.max_workers > 1 and len(assigned_intents) > 1:
            with ThreadPoolExecutor(max_workers=self.config.max_workers) as executor:
                outcomes = list(
                    executor.map(
                        lambda args: self._handle_intent(world, *args),
                        zip(assigned_intents, seeds),
                    )
                )
        else:
            outcomes = [self._handle_intent(world, intent, seed) for intent, seed in zip(assigned_intents, seeds)]

        result = NavigatorResult()
        for index, (intent, outcome) in enumerate(zip(assigned_intents, outcomes)):
            if isinstance(outcome, NavigationError):
                logger.error("Navigator: intent %d (%r) failed: %s", index, intent, outcome)
                result.errors.append(IntentFailure(index, intent, outcome))
            else:
                result.primitives.append(outcome)
        return result

    def _handle_intent(self, world: World, intent: Intent, seed: int) -> Union[Primitive, NavigationError]:
        try:
            intent_type = getattr(intent, "intent_type", None)
            if intent_type is IntentType.MOVE and isinstance(intent, MoveIntent):
                return self._move(world, intent, random.Random(seed))
            else:
                raise UnrecognizedIntentError(intent)
        except NavigationError as e:
            return e

    def _move(self, world: World, intent: MoveIntent, rng: random.Random) -> Primitive:
        robot = world.friendly_team.get_robot_by_id(intent.robot_id)
        if robot is None:
            raise UnknownRobotError(intent.robot_id)
        return self.plan_move(world, robot, intent, rng)

    @abstractmethod
    def plan_move(self, world: World, robot: Robot, intent: MoveIntent, rng: random.Random) -> Primitive:
        """Return the primitive that carries out `intent` for `robot`."""
        ...

    def get_obstacles(self, world: World, robot_id: int) -> List[RobotObstacle]:
        """Every robot except `robot_id` itself, enemies inflated by `enemy_avoid_dist_scale`."""
        avoid_dist = self.config.default_avoid_dist
        predict_time = self.config.obstacle_prediction_time
        friendly_obstacles = generate_friendly_obstacles(
            world.friendly_team, avoid_dist, exclude_id=robot_id, predict_time=predict_time
        )
        enemy_obstacles = generate_enemy_obstacles(
            world.enemy_team, avoid_dist * self.config.enemy_avoid_dist_scale, predict_time=predict_time
        )
        return friendly_obstacles + enemy_obstacles


class RRTNavigator(Navigator):
    """Plans every move with an RRT through the other robots.

    When no path is found the robot is told to hold position rather than drive blind.
    """

    def plan_move(self, world: World, robot: Robot, intent: MoveIntent, rng: random.Random) -> Primitive:
        planner = RRTPlanner(self.config.rrt, rng=rng)
        result = planner.plan(robot.position, intent.destination, self.get_obstacles(world, robot.id), world.field_bounds)

        if result.status is PlanStatus.FOUND:
            return MovePrimitive(
                robot_id=robot.id,
                dest=result.waypoints[-1],
                final_angle=intent.final_angle,
                final_speed=intent.final_speed,
                waypoints=tuple(result.waypoints[1:]),
            )

        if result.status is PlanStatus.EXHAUSTED:
            logger.warning(
                "Navigator: no path for robot %d to %s after %d iterations, holding position",
                robot.id,
                intent.destination,
                result.iterations,
            )
        else:
            logger.error("Navigator: robot %d asked to move outside the field to %s", robot.id, intent.destination)
        return StopPrimitive(robot.id)


class DirectNavigator(Navigator):
    """Drives straight at the destination without avoiding anything. Baseline for comparisons."""

    def plan_move(self, world: World, robot: Robot, intent: MoveIntent, rng: random.Random) -> Primitive:
        return MovePrimitive(
            robot_id=robot.id,
            dest=intent.destination,
            final_angle=intent.final_angle,
            final_speed=intent.final_speed,
            waypoints=(intent.destination,),
        )

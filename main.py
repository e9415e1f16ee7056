import logging
import random
import time

from nav_core import get_navigator
from nav_core.config.enums import mode_str_to_enum
from nav_core.entities.data import MoveIntent, Vector2D
from nav_core.entities.game import Robot, Team, World
from nav_core.motion_planning.src.planning import get_navigator_config
from nav_core.motion_planning.src.planning.geometry import path_length

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def main():
    now = time.monotonic()
    friendly = Team(
        [
            Robot(0, now, position=Vector2D(-3, 0)),
            Robot(1, now, position=Vector2D(-1, 1), velocity=Vector2D(0.5, 0)),
        ]
    )
    enemy = Team(
        [
            Robot(0, now, position=Vector2D(0, 0)),
            Robot(1, now, position=Vector2D(0, 0.4)),
            Robot(2, now, position=Vector2D(0, -0.4)),
        ]
    )
    world = World(friendly_team=friendly, enemy_team=enemy)

    navigator_cls = get_navigator("rrt")
    navigator = navigator_cls(get_navigator_config(mode_str_to_enum["rsim"]), rng=random.Random(0))

    intents = [
        MoveIntent(robot_id=0, destination=Vector2D(3, 0), final_angle=0.0),
        MoveIntent(robot_id=1, destination=Vector2D(2, 2), final_angle=1.57, final_speed=0.5),
    ]
    result = navigator.get_assigned_primitives(world, intents)

    for primitive in result.primitives:
        waypoints = getattr(primitive, "waypoints", ())
        logger.info(
            "robot %d: %s params=%s waypoints=%s length=%.2fm",
            primitive.robot_id,
            primitive.primitive_type.name,
            primitive.get_parameter_array(),
            [tuple(round(c, 2) for c in w) for w in waypoints],
            path_length([world.friendly_team.get_robot_by_id(primitive.robot_id).position, *waypoints]),
        )
    for failure in result.errors:
        logger.error("intent %d failed: %s", failure.index, failure.error)


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        pass

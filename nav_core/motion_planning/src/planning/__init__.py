from .config import NavigatorConfig, RRTConfig, get_navigator_config
from .obstacles import (
    RobotObstacle,
    generate_enemy_obstacles,
    generate_friendly_obstacles,
)
from .path_planners import PlanResult, PlanStatus, RRTPlanner

__all__ = [
    "NavigatorConfig",
    "RRTConfig",
    "get_navigator_config",
    "RobotObstacle",
    "generate_enemy_obstacles",
    "generate_friendly_obstacles",
    "PlanResult",
    "PlanStatus",
    "RRTPlanner",
]

from dataclasses import dataclass, field, fields
from typing import Any, Mapping

from nav_core.config.enums import Mode
from nav_core.config.settings import (
    DEFAULT_AVOID_DIST,
    ENEMY_AVOID_DIST_SCALE,
    MAX_NAVIGATOR_WORKERS,
    OBSTACLE_PREDICTION_TIME,
    RRT_GOAL_BIAS,
    RRT_GOAL_TOLERANCE,
    RRT_MAX_ITERATIONS,
    RRT_STEP_SIZE,
)


@dataclass(slots=True)
class RRTConfig:
    """Tuning of the RRT planner."""

    max_iterations: int = RRT_MAX_ITERATIONS
    step_size: float = RRT_STEP_SIZE
    goal_bias: float = RRT_GOAL_BIAS
    goal_tolerance: float = RRT_GOAL_TOLERANCE
    simplify_path: bool = True  # greedily shortcut the raw tree path
    direct_path_shortcut: bool = True  # skip sampling when the straight line to the goal is clear

    def __post_init__(self):
        if self.max_iterations < 0:
            raise ValueError(f"max_iterations must be >= 0, got {self.max_iterations}")
        if self.step_size <= 0:
            raise ValueError(f"step_size must be > 0, got {self.step_size}")
        if not 0 <= self.goal_bias <= 1:
            raise ValueError(f"goal_bias must be in [0, 1], got {self.goal_bias}")
        if self.goal_tolerance < 0:
            raise ValueError(f"goal_tolerance must be >= 0, got {self.goal_tolerance}")


@dataclass(slots=True)
class NavigatorConfig:
    """Configuration of the navigator and the planner it drives."""

    default_avoid_dist: float = DEFAULT_AVOID_DIST
    enemy_avoid_dist_scale: float = ENEMY_AVOID_DIST_SCALE
    obstacle_prediction_time: float = OBSTACLE_PREDICTION_TIME
    max_workers: int = MAX_NAVIGATOR_WORKERS
    rrt: RRTConfig = field(default_factory=RRTConfig)

    def __post_init__(self):
        if self.default_avoid_dist < 0:
            raise ValueError(f"default_avoid_dist must be >= 0, got {self.default_avoid_dist}")
        if self.enemy_avoid_dist_scale < 0:
            raise ValueError(f"enemy_avoid_dist_scale must be >= 0, got {self.enemy_avoid_dist_scale}")
        if self.obstacle_prediction_time < 0:
            raise ValueError(f"obstacle_prediction_time must be >= 0, got {self.obstacle_prediction_time}")
        if self.max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {self.max_workers}")

    @classmethod
    def from_dict(cls, values: Mapping[str, Any]) -> "NavigatorConfig":
        """Build a config from plain values, e.g. a parsed tuning file.

        Unknown keys are rejected. The nested `rrt` entry may be a mapping or an RRTConfig.
        """
        known = {f.name for f in fields(cls)}
        unknown = set(values) - known
        if unknown:
            raise ValueError(f"Unknown navigator config keys: {sorted(unknown)}")

        kwargs = dict(values)
        rrt = kwargs.get("rrt")
        if isinstance(rrt, Mapping):
            rrt_known = {f.name for f in fields(RRTConfig)}
            rrt_unknown = set(rrt) - rrt_known
            if rrt_unknown:
                raise ValueError(f"Unknown RRT config keys: {sorted(rrt_unknown)}")
            kwargs["rrt"] = RRTConfig(**rrt)
        return cls(**kwargs)


def get_navigator_config(mode: Mode) -> NavigatorConfig:
    """Returns the navigator configuration for the given environment."""
    if mode == Mode.RSIM:
        return NavigatorConfig()
    elif mode == Mode.GRSIM:
        return NavigatorConfig(rrt=RRTConfig(goal_tolerance=0.1))
    elif mode == Mode.REAL:
        # Vision noise on the real field: keep further away and plan with finer steps
        return NavigatorConfig(
            default_avoid_dist=0.2,
            enemy_avoid_dist_scale=1.5,
            obstacle_prediction_time=0.1,
            rrt=RRTConfig(step_size=0.1, goal_tolerance=0.05),
        )
    else:
        raise ValueError(f"Unknown mode for navigator config: {mode}")

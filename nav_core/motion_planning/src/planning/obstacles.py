"""Robot obstacles shared by the planners (NumPy version)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np
from shapely.geometry import Point, Polygon

from nav_core.config.physical_constants import ROBOT_RADIUS
from nav_core.entities.data.vector import Vector2D
from nav_core.entities.game.robot import Robot
from nav_core.entities.game.team import Team


@dataclass(frozen=True)
class RobotObstacle:
    """Circular keep-out region around a robot, valid for a single planning cycle.

    Attributes:
        center: Where the robot is (or is predicted to be).
        radius: Robot radius plus the avoidance margin.
        robot_id: The robot this obstacle was built from, if any.
    """

    center: Vector2D
    radius: float
    robot_id: Optional[int] = None

    __hash__ = None

    def contains(self, point) -> bool:
        return self.center.distance_to(point) < self.radius

    def to_polygon(self, buffer: float = 0.0, resolution: int = 16) -> Polygon:
        """Polygon approximation of the circle grown by `buffer`, for shapely based consumers."""
        return Point(self.center.x, self.center.y).buffer(self.radius + buffer, resolution)


def obstacles_to_arrays(obstacles: Sequence[RobotObstacle]) -> Tuple[np.ndarray, np.ndarray]:
    """Pack obstacles into (N, 2) centers and (N,) radii arrays for vectorised checks."""
    if not obstacles:
        return np.empty((0, 2), dtype=float), np.empty(0, dtype=float)
    centers = np.array([[o.center.x, o.center.y] for o in obstacles], dtype=float)
    radii = np.array([o.radius for o in obstacles], dtype=float)
    return centers, radii


def _robot_obstacles(robots: Iterable[Robot], avoid_dist: float, predict_time: float) -> List[RobotObstacle]:
    if avoid_dist < 0:
        raise ValueError(f"avoid_dist must be >= 0, got {avoid_dist}")
    radius = ROBOT_RADIUS + avoid_dist
    return [
        RobotObstacle(
            center=robot.estimate_position_at_future_time(predict_time) if predict_time else robot.position,
            radius=radius,
            robot_id=robot.id,
        )
        for robot in robots
    ]


def generate_friendly_obstacles(
    team: Team,
    avoid_dist: float,
    exclude_id: Optional[int] = None,
    predict_time: float = 0.0,
) -> List[RobotObstacle]:
    """One obstacle per friendly robot, leaving out `exclude_id` (usually the robot being planned for).

    Args:
        team (Team): The friendly team.
        avoid_dist (float): Extra clearance added to the robot radius (m).
        exclude_id (int, optional): Robot to leave out.
        predict_time (float, optional): Seconds ahead to place each obstacle, using the robot's estimator.

    Returns:
        List[RobotObstacle]: The obstacles, in team order.
    """
    return _robot_obstacles((r for r in team if r.id != exclude_id), avoid_dist, predict_time)


def generate_enemy_obstacles(team: Team, avoid_dist: float, predict_time: float = 0.0) -> List[RobotObstacle]:
    """One obstacle per enemy robot. See `generate_friendly_obstacles`."""
    return _robot_obstacles(team, avoid_dist, predict_time)
# Strategies for when the robot starts inside an obstacle and needs to get out before the tree can grow.
# Any segment leaving the start would otherwise collide and the planner could never make progress.

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from shapely.geometry import MultiPolygon
from shapely.geometry import Point as ShapelyPoint
from shapely.ops import nearest_points, unary_union

from nav_core.entities.data.vector import Vector2D
from nav_core.motion_planning.src.planning.obstacles import RobotObstacle


class ExitStrategy(ABC):
    """Base class for exit strategies, which determine how a robot should exit the obstacles it starts in, if no
    action is required return None."""

    EXIT_POINT_BUFFER = 0.05  # Distance from the obstacle boundary to exit point, ensuring robot is completely outside

    @abstractmethod
    def get_exit_point(self, robot_position: Vector2D, obstacles: Sequence[RobotObstacle]) -> Optional[Vector2D]: ...

    @staticmethod
    def is_inside_any(robot_position: Vector2D, obstacles: Sequence[RobotObstacle]) -> bool:
        return any(obstacle.contains(robot_position) for obstacle in obstacles)


class ClosestPointExit(ExitStrategy):
    def get_exit_point(self, robot_position: Vector2D, obstacles: Sequence[RobotObstacle]) -> Optional[Vector2D]:
        """Returns the closest point outside every obstacle if the robot position is inside any of them.

        Overlapping obstacles are merged first so the exit point never lands inside a neighbour.
        """
        if not self.is_inside_any(robot_position, obstacles):
            return None

        here = ShapelyPoint(robot_position.x, robot_position.y)
        region = unary_union([obstacle.to_polygon(buffer=self.EXIT_POINT_BUFFER) for obstacle in obstacles])
        polygons = region.geoms if isinstance(region, MultiPolygon) else [region]

        containing = min(polygons, key=lambda polygon: polygon.distance(here))
        _, exit_point = nearest_points(here, containing.boundary)
        return Vector2D(exit_point.x, exit_point.y)

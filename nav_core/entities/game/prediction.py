"""Future state estimators for tracked robots.

Each quantity has its own method so a better model for one of them (e.g. an
acceleration aware position estimate) can be dropped in by overriding that
method alone. Estimators are stateless and read the robot snapshot they are
given; they never mutate it.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from nav_core.entities.data.vector import Vector2D
from nav_core.global_utils.math_utils import normalise_heading

if TYPE_CHECKING:
    from nav_core.entities.game.robot import Robot


class StateEstimator(ABC):
    """Projects a robot's kinematic state `seconds_in_future` ahead.

    Callers guarantee `seconds_in_future >= 0`; the robot validates this before delegating.
    """

    @abstractmethod
    def estimate_position(self, robot: "Robot", seconds_in_future: float) -> Vector2D: ...

    @abstractmethod
    def estimate_velocity(self, robot: "Robot", seconds_in_future: float) -> Vector2D: ...

    @abstractmethod
    def estimate_orientation(self, robot: "Robot", seconds_in_future: float) -> float: ...

    @abstractmethod
    def estimate_angular_velocity(self, robot: "Robot", seconds_in_future: float) -> float: ...


class LinearStateEstimator(StateEstimator):
    """Constant velocity, constant angular velocity extrapolation.

    Position keeps the current speed and heading of travel: the robot moves
    `speed * dt` along the unit direction of its velocity. Under this model
    that is the same point as `position + velocity * dt`, but subclasses that
    change the estimated speed or heading only need to touch one of the two
    factors.
    """

    def estimate_position(self, robot: "Robot", seconds_in_future: float) -> Vector2D:
        velocity = robot.velocity
        return robot.position + velocity.norm(velocity.mag() * seconds_in_future)

    def estimate_velocity(self, robot: "Robot", seconds_in_future: float) -> Vector2D:
        return robot.velocity

    def estimate_orientation(self, robot: "Robot", seconds_in_future: float) -> float:
        return normalise_heading(robot.orientation + robot.angular_velocity * seconds_in_future)

    def estimate_angular_velocity(self, robot: "Robot", seconds_in_future: float) -> float:
        return robot.angular_velocity

import logging
import math
from typing import Optional

from nav_core.entities.data.vector import Vector2D
from nav_core.entities.errors import (
    NegativeTimeDeltaError,
    RobotIdMismatchError,
    StaleTimestampError,
)
from nav_core.entities.game.prediction import LinearStateEstimator, StateEstimator
from nav_core.global_utils.math_utils import normalise_heading

logger = logging.getLogger(__name__)

_DEFAULT_ESTIMATOR = LinearStateEstimator()


class Robot:
    """Kinematic state of a single tracked robot.

    The state is only ever changed through `update_state`, `update_state_from` and
    `advance_to_predicted_state`, all of which reject timestamps older than the
    last update before touching anything. The `estimate_*` methods are read-only.

    Args:
        robot_id (int): Identifier of the robot, unique within its team.
        timestamp (float): Time of the observation in seconds (monotonic clock).
        position (Vector2D, optional): Position in meters. Defaults to the origin.
        velocity (Vector2D, optional): Velocity in m/s. Defaults to zero.
        orientation (float, optional): Orientation in radians. Normalised to [-π, π).
        angular_velocity (float, optional): Angular velocity in rad/s.
        estimator (StateEstimator, optional): Prediction model. Defaults to linear extrapolation.
    """

    def __init__(
        self,
        robot_id: int,
        timestamp: float,
        position: Optional[Vector2D] = None,
        velocity: Optional[Vector2D] = None,
        orientation: float = 0.0,
        angular_velocity: float = 0.0,
        estimator: Optional[StateEstimator] = None,
    ):
        if math.isnan(timestamp):
            raise ValueError(f"Robot {robot_id}: timestamp must not be NaN")
        self._id = robot_id
        self._position = position if position is not None else Vector2D(0, 0)
        self._velocity = velocity if velocity is not None else Vector2D(0, 0)
        self._orientation = normalise_heading(orientation)
        self._angular_velocity = float(angular_velocity)
        self._last_update_timestamp = float(timestamp)
        self._estimator = estimator if estimator is not None else _DEFAULT_ESTIMATOR

    @property
    def id(self) -> int:
        return self._id

    @property
    def position(self) -> Vector2D:
        return self._position

    @property
    def velocity(self) -> Vector2D:
        return self._velocity

    @property
    def orientation(self) -> float:
        return self._orientation

    @property
    def angular_velocity(self) -> float:
        return self._angular_velocity

    @property
    def last_update_timestamp(self) -> float:
        return self._last_update_timestamp

    @property
    def estimator(self) -> StateEstimator:
        return self._estimator

    def update_state(
        self,
        position: Vector2D,
        velocity: Vector2D,
        orientation: float,
        angular_velocity: float,
        timestamp: float,
    ) -> None:
        """Replace the state with a new observation.

        Raises:
            StaleTimestampError: If `timestamp` is earlier than the last update or NaN. The state is left unchanged.
        """
        self.check_timestamp(timestamp)

        self._position = position
        self._velocity = velocity
        self._orientation = normalise_heading(orientation)
        self._angular_velocity = float(angular_velocity)
        self._last_update_timestamp = float(timestamp)

    def update_state_from(self, new_robot_data: "Robot") -> None:
        """Update this robot using another snapshot of the same robot.

        Raises:
            RobotIdMismatchError: If `new_robot_data` describes a different robot.
            StaleTimestampError: If the snapshot is older than the last update.
        """
        if new_robot_data.id != self._id:
            raise RobotIdMismatchError(self._id, new_robot_data.id)

        self.update_state(
            new_robot_data.position,
            new_robot_data.velocity,
            new_robot_data.orientation,
            new_robot_data.angular_velocity,
            new_robot_data.last_update_timestamp,
        )

    def advance_to_predicted_state(self, timestamp: float) -> None:
        """Commit the estimated state at `timestamp` as the current state.

        Used when a cycle needs a current estimate but no new observation arrived.
        """
        self.check_timestamp(timestamp)

        seconds_in_future = timestamp - self._last_update_timestamp
        self.update_state(
            self.estimate_position_at_future_time(seconds_in_future),
            self.estimate_velocity_at_future_time(seconds_in_future),
            self.estimate_orientation_at_future_time(seconds_in_future),
            self.estimate_angular_velocity_at_future_time(seconds_in_future),
            timestamp,
        )

    def estimate_position_at_future_time(self, seconds_in_future: float) -> Vector2D:
        self._check_time_delta(seconds_in_future)
        return self._estimator.estimate_position(self, seconds_in_future)

    def estimate_velocity_at_future_time(self, seconds_in_future: float) -> Vector2D:
        self._check_time_delta(seconds_in_future)
        return self._estimator.estimate_velocity(self, seconds_in_future)

    def estimate_orientation_at_future_time(self, seconds_in_future: float) -> float:
        self._check_time_delta(seconds_in_future)
        return self._estimator.estimate_orientation(self, seconds_in_future)

    def estimate_angular_velocity_at_future_time(self, seconds_in_future: float) -> float:
        self._check_time_delta(seconds_in_future)
        return self._estimator.estimate_angular_velocity(self, seconds_in_future)

    def copy(self) -> "Robot":
        return Robot(
            self._id,
            self._last_update_timestamp,
            self._position,
            self._velocity,
            self._orientation,
            self._angular_velocity,
            self._estimator,
        )

    def check_timestamp(self, timestamp: float) -> None:
        """Raise StaleTimestampError if `timestamp` is older than the last update or NaN."""
        # NaN compares False here and is rejected too
        if not timestamp >= self._last_update_timestamp:
            logger.debug("Robot %d: rejecting stale timestamp %s", self._id, timestamp)
            raise StaleTimestampError(self._id, timestamp, self._last_update_timestamp)

    @staticmethod
    def _check_time_delta(seconds_in_future: float) -> None:
        if seconds_in_future < 0 or math.isnan(seconds_in_future):
            raise NegativeTimeDeltaError(seconds_in_future)

    def __eq__(self, other: object) -> bool:
        # Timestamps are not compared
        if not isinstance(other, Robot):
            return NotImplemented
        return (
            self._id == other._id
            and self._position == other._position
            and self._velocity == other._velocity
            and math.isclose(self._orientation, other._orientation, abs_tol=1e-12)
            and math.isclose(self._angular_velocity, other._angular_velocity, abs_tol=1e-12)
        )

    __hash__ = None

    def __repr__(self):
        return (
            f"Robot(id={self._id}, p={self._position}, v={self._velocity}, "
            f"orientation={self._orientation}, angular_velocity={self._angular_velocity}, "
            f"t={self._last_update_timestamp})"
        )

"""Recoverable errors raised by the navigation core.

None of these should ever bring the control loop down: the caller decides
whether to drop the offending sample, log it, or fall back to a safe command.
"""


class NavigationError(Exception):
    """Base class for every recoverable navigation core error."""


class StaleTimestampError(NavigationError):
    """A robot was updated or predicted with a timestamp from its past."""

    def __init__(self, robot_id: int, timestamp: float, last_update_timestamp: float):
        self.robot_id = robot_id
        self.timestamp = timestamp
        self.last_update_timestamp = last_update_timestamp
        super().__init__(
            f"Robot {robot_id}: timestamp {timestamp} is earlier than the last update at {last_update_timestamp}"
        )


class RobotIdMismatchError(NavigationError):
    """A robot was updated using data belonging to a different robot."""

    def __init__(self, expected_id: int, received_id: int):
        self.expected_id = expected_id
        self.received_id = received_id
        super().__init__(f"Robot {expected_id} updated using data for robot {received_id}")


class NegativeTimeDeltaError(NavigationError, ValueError):
    """An estimator was asked to predict into the past."""

    def __init__(self, seconds_in_future: float):
        self.seconds_in_future = seconds_in_future
        super().__init__(f"Cannot estimate state {seconds_in_future}s in the future, time delta must be >= 0")


class UnrecognizedIntentError(NavigationError):
    """The navigator was handed an intent variant it does not know how to plan."""

    def __init__(self, intent):
        self.intent = intent
        super().__init__(f"Unrecognized intent given to navigator: {intent!r}")


class UnknownRobotError(NavigationError):
    """An intent refers to a robot that is not on the friendly team."""

    def __init__(self, robot_id: int):
        self.robot_id = robot_id
        super().__init__(f"No friendly robot with id {robot_id}")

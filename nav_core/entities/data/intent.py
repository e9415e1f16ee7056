from abc import ABC
from dataclasses import dataclass
from enum import Enum, auto
from typing import ClassVar

from nav_core.entities.data.vector import Vector2D


class IntentType(Enum):
    MOVE = auto()


class Intent(ABC):
    """A high level goal for a single robot, produced by the strategy layer.

    The set of variants is closed: every concrete intent sets `intent_type` and the navigator dispatches on it.
    """

    intent_type: ClassVar[IntentType]
    robot_id: int


@dataclass(frozen=True)
class MoveIntent(Intent):
    """Move a robot to a destination, arriving with the given orientation and speed.

    Attributes:
        robot_id: The id of the friendly robot to move.
        destination: Where the robot should end up (m).
        final_angle: Orientation the robot should have on arrival (rad).
        final_speed: Speed the robot should have on arrival (m/s).
    """

    intent_type: ClassVar[IntentType] = IntentType.MOVE

    robot_id: int
    destination: Vector2D
    final_angle: float
    final_speed: float = 0.0

    __hash__ = None

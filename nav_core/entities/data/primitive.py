from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum, auto
from typing import ClassVar, List, Tuple

from nav_core.entities.data.vector import Vector2D


class PrimitiveType(Enum):
    MOVE = auto()
    STOP = auto()


class Primitive(ABC):
    """A low level command for a single robot, handed to the firmware/radio layers.

    Primitives never carry planning internals. Downstream encoders only rely on
    `primitive_type`, `robot_id` and the two arrays below.
    """

    primitive_type: ClassVar[PrimitiveType]
    robot_id: int

    @abstractmethod
    def get_parameter_array(self) -> List[float]: ...

    @abstractmethod
    def get_extra_bit_array(self) -> List[bool]: ...


@dataclass(frozen=True)
class MovePrimitive(Primitive):
    """Drive to `dest`, finishing with `final_angle` and `final_speed`.

    `waypoints` is the planned route ending at `dest` (start excluded). The wire
    parameters only carry the destination, so single-shot consumers can ignore it.
    Not hashable, since its vectors compare with a tolerance.
    """

    primitive_type: ClassVar[PrimitiveType] = PrimitiveType.MOVE

    robot_id: int
    dest: Vector2D
    final_angle: float
    final_speed: float
    waypoints: Tuple[Vector2D, ...] = ()

    __hash__ = None

    def get_parameter_array(self) -> List[float]:
        return [self.dest.x, self.dest.y, self.final_angle, self.final_speed]

    def get_extra_bit_array(self) -> List[bool]:
        return []


@dataclass(frozen=True)
class StopPrimitive(Primitive):
    """Hold position. With `coast` the wheels are left free instead of braking."""

    primitive_type: ClassVar[PrimitiveType] = PrimitiveType.STOP

    robot_id: int
    coast: bool = False

    def get_parameter_array(self) -> List[float]:
        return []

    def get_extra_bit_array(self) -> List[bool]:
        return [self.coast]

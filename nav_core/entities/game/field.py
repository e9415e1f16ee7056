from dataclasses import dataclass
from typing import Tuple

from nav_core.entities.data.vector import Vector2D


class ClassProperty:
    def __init__(self, getter):
        self.getter = getter

    def __get__(self, instance, owner):
        return self.getter(owner)


@dataclass(frozen=True)
class FieldBounds:
    """Axis aligned rectangle the planner is allowed to sample in.

    Attributes:
        top_left: (min x, max y) corner in meters.
        bottom_right: (max x, min y) corner in meters.
    """

    top_left: Tuple[float, float]
    bottom_right: Tuple[float, float]

    def __post_init__(self):
        x0, y0 = self.top_left
        x1, y1 = self.bottom_right
        if x0 >= x1:
            raise ValueError(f"top-left x {x0} must be < bottom-right x {x1}")
        if y0 <= y1:
            raise ValueError(f"top-left y {y0} must be > bottom-right y {y1}")

    @property
    def min_x(self) -> float:
        return self.top_left[0]

    @property
    def max_x(self) -> float:
        return self.bottom_right[0]

    @property
    def min_y(self) -> float:
        return self.bottom_right[1]

    @property
    def max_y(self) -> float:
        return self.top_left[1]

    def contains(self, point: Vector2D | Tuple[float, float]) -> bool:
        px, py = point[0], point[1]
        return self.min_x <= px <= self.max_x and self.min_y <= py <= self.max_y


class Field:
    """Standard SSL field dimensions (9m x 6m)."""

    _FULL_FIELD_HALF_LENGTH = 4.5
    _FULL_FIELD_HALF_WIDTH = 3.0
    _FULL_FIELD_BOUNDS = FieldBounds(
        top_left=(-_FULL_FIELD_HALF_LENGTH, _FULL_FIELD_HALF_WIDTH),
        bottom_right=(_FULL_FIELD_HALF_LENGTH, -_FULL_FIELD_HALF_WIDTH),
    )

    @ClassProperty
    def half_length(cls) -> float:
        return cls._FULL_FIELD_HALF_LENGTH

    @ClassProperty
    def half_width(cls) -> float:
        return cls._FULL_FIELD_HALF_WIDTH

    @ClassProperty
    def FULL_FIELD_BOUNDS(cls) -> FieldBounds:
        return cls._FULL_FIELD_BOUNDS

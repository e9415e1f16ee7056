import math

import numpy as np


class Vector2D:
    """Immutable 2D vector used for positions and velocities on the field."""

    __slots__ = ("_x", "_y")

    def __init__(self, *coords):
        # Accepts Vector2D(x, y) or a single pair: tuple, list, ndarray or Vector2D
        if len(coords) == 1 and isinstance(coords[0], (tuple, list, np.ndarray, Vector2D)):
            coords = tuple(coords[0])
        if len(coords) != 2:
            raise TypeError(f"Vector2D needs an (x, y) pair, got {coords!r}")
        self._x, self._y = float(coords[0]), float(coords[1])

    @classmethod
    def from_angle(cls, angle: float, length: float = 1.0) -> "Vector2D":
        """Vector of the given length pointing along angle (radians, 0 along +x)."""
        return cls(length * math.cos(angle), length * math.sin(angle))

    def __iter__(self):
        yield self._x
        yield self._y

    def __getitem__(self, index: int) -> float:
        if index == 0:
            return self._x
        elif index == 1:
            return self._y
        raise IndexError("Vector2D index out of range")

    def __len__(self) -> int:
        return 2

    def __add__(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x + other[0], self.y + other[1])

    def __sub__(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x - other[0], self.y - other[1])

    def __mul__(self, scalar: float) -> "Vector2D":
        return Vector2D(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> "Vector2D":
        return self.__mul__(scalar)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector2D):
            return NotImplemented
        return math.isclose(self.x, other.x, abs_tol=1e-12) and math.isclose(self.y, other.y, abs_tol=1e-12)

    # Equality uses a tolerance, so there is no consistent hash
    __hash__ = None

    def __array__(self, dtype=None, copy=None):
        return np.array([self.x, self.y], dtype=dtype)

    def mag(self) -> float:
        return math.hypot(self._x, self._y)

    def norm(self, length: float = 1.0) -> "Vector2D":
        """Return a copy scaled to the given length. Returns zero vector if magnitude is too small."""
        magnitude = self.mag()
        if magnitude < 1e-8:
            return Vector2D(0.0, 0.0)
        scale = length / magnitude
        return Vector2D(self._x * scale, self._y * scale)

    def angle(self) -> float:
        """Heading of the vector in radians, 0 along +x."""
        return math.atan2(self._y, self._x)

    def distance_to(self, other: "Vector2D") -> float:
        return math.hypot(other[1] - self._y, other[0] - self._x)

    def to_array(self) -> np.ndarray:
        return np.array([self._x, self._y], dtype=float)

    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    def __repr__(self):
        return f"Vector2D(x={self.x}, y={self.y})"

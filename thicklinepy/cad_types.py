import math
from typing import Tuple, Union

import numpy as np


class Vector(np.ndarray):
    """A 2D point or displacement in sketch space."""

    def __new__(cls, x: float, y: float) -> "Vector":
        return np.asarray([float(x), float(y)], dtype=float).view(cls)

    def __eq__(self, other: object) -> bool:
        try:
            return bool(np.allclose(np.asarray(self), np.asarray(other, dtype=float)))
        except (TypeError, ValueError):
            return False

    def __ne__(self, other: object) -> bool:
        return not self.__eq__(other)

    def __repr__(self):
        return f"Vector(x={self.x}, y={self.y})"

    __str__ = __repr__

    @property
    def x(self) -> float:
        return float(self[0])

    @property
    def y(self) -> float:
        return float(self[1])

    def length(self) -> float:
        return math.hypot(self[0], self[1])

    def normalize(self) -> "Vector":
        return self / self.length()

    def dot(self, other: "VectorLike") -> float:
        other = as_vector(other)
        return float(self[0] * other[0] + self[1] * other[1])

    def perp_ccw(self) -> "Vector":
        """Rotate 90 degrees counter-clockwise: (x, y) -> (-y, x)."""
        return Vector(-self[1], self[0])

    def is_finite(self) -> bool:
        return bool(np.all(np.isfinite(self)))

    def to_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def to_json(self):
        return {
            "x": float(self.x),
            "y": float(self.y),
        }

    @staticmethod
    def from_json(json_data):
        return Vector(json_data["x"], json_data["y"])


VectorLike = Union[Tuple[float, float], Vector]


def as_vector(value: VectorLike) -> Vector:
    """Coerce a tuple or array of two numbers into a ``Vector``."""
    if isinstance(value, Vector):
        return value
    x, y = value
    return Vector(x, y)

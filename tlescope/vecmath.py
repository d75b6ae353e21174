"""Small vector and matrix helpers used by the scene and camera."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

__all__ = [
    "Vector2",
    "Vector3",
    "Matrix",
    "clamp",
    "lerp_float",
    "lat_lon_to_xyz",
]


@dataclass(frozen=True)
class Vector2:
    """A 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y


@dataclass(frozen=True)
class Vector3:
    """A 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, factor: float) -> Vector3:
        return Vector3(self.x * factor, self.y * factor, self.z * factor)

    __rmul__ = __mul__

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def dot(self, other: Vector3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def normalized(self) -> Vector3:
        """Unit vector in the same direction; the zero vector is returned unchanged."""
        length = self.length()
        if length == 0.0:
            return self
        return self * (1.0 / length)

    def cross(self, other: Vector3) -> Vector3:
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def distance_to(self, other: Vector3) -> float:
        return (self - other).length()


@dataclass(frozen=True)
class Matrix:
    """A 4x4 row-major transform acting on column vectors.

    ``a @ b`` is the transform that applies ``b`` first and then ``a``.
    """

    rows: tuple[tuple[float, float, float, float], ...]

    def __post_init__(self) -> None:
        rows = tuple(tuple(float(value) for value in row) for row in self.rows)
        if len(rows) != 4 or any(len(row) != 4 for row in rows):
            raise ValueError("a Matrix needs exactly 4 rows of 4 values")
        object.__setattr__(self, "rows", rows)

    @staticmethod
    def identity() -> Matrix:
        return Matrix(
            tuple(
                tuple(1.0 if row == col else 0.0 for col in range(4))
                for row in range(4)
            )
        )

    @staticmethod
    def rotate(axis: Vector3, angle: float) -> Matrix:
        """Rotation by ``angle`` radians about ``axis`` (normalized if needed)."""
        length = axis.length()
        if length not in (0.0, 1.0):
            axis = axis * (1.0 / length)
        x, y, z = axis
        s, c = math.sin(angle), math.cos(angle)
        t = 1.0 - c
        return Matrix(
            (
                (x * x * t + c, x * y * t - z * s, x * z * t + y * s, 0.0),
                (y * x * t + z * s, y * y * t + c, y * z * t - x * s, 0.0),
                (z * x * t - y * s, z * y * t + x * s, z * z * t + c, 0.0),
                (0.0, 0.0, 0.0, 1.0),
            )
        )

    def __matmul__(self, other: Matrix) -> Matrix:
        columns = list(zip(*other.rows))
        return Matrix(
            tuple(
                tuple(sum(a * b for a, b in zip(row, column)) for column in columns)
                for row in self.rows
            )
        )

    def apply(self, vector: Vector3) -> Vector3:
        """Transform a point (homogeneous w of 1)."""
        point = (*vector, 1.0)
        x, y, z = (sum(a * b for a, b in zip(row, point)) for row in self.rows[:3])
        return Vector3(x, y, z)


def clamp(value: float, low: float, high: float) -> float:
    """Limit ``value`` to ``[low, high]``; ``high`` wins if the bounds cross."""
    result = low if value < low else value
    return high if result > high else result


def lerp_float(start: float, end: float, t: float) -> float:
    """Linear interpolation between ``start`` and ``end``."""
    return start + t * (end - start)


def lat_lon_to_xyz(latitude: float, longitude: float, earth_radius: float) -> Vector3:
    """Position on a sphere of ``earth_radius`` for a latitude/longitude in degrees.

    The y axis points to the north pole; longitude increases clockwise
    when viewed from above the pole.
    """
    lat_rad = math.radians(latitude)
    lon_rad = -math.radians(longitude)
    return Vector3(
        earth_radius * math.cos(lat_rad) * math.cos(lon_rad),
        earth_radius * math.sin(lat_rad),
        earth_radius * math.cos(lat_rad) * math.sin(lon_rad),
    )
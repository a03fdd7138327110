"""
Geometric Primitives for the puzzle canvas.

Coordinates are screen pixels: x grows to the right, y grows downwards, so a
positive angle measured with atan2 turns clockwise on screen.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING
import numpy as np
import math

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass
class Vector:
    """
    A 2D vector representing direction and magnitude.
    """
    x: float
    y: float

    def __add__(self, other: Vector) -> Vector:
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector) -> Vector:
        return Vector(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector:
        return Vector(self.x * scalar, self.y * scalar)

    @property
    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)

    @property
    def angle(self) -> float:
        """Direction in radians, in (-pi, pi]."""
        return math.atan2(self.y, self.x)

    @classmethod
    def from_polar(cls, angle_rad: float, length: float) -> Vector:
        return cls(math.cos(angle_rad) * length, math.sin(angle_rad) * length)


@dataclass
class Point:
    """A simple geometric point on the canvas."""
    x: float
    y: float

    def __add__(self, other: Vector) -> Point:
        # Point + Vector = Point (Translation)
        if isinstance(other, Vector):
            return Point(self.x + other.x, self.y + other.y)
        raise TypeError("Can only add a Vector to a Point.")

    def __sub__(self, other: Point) -> Vector:
        # Point - Point = Vector (Direction)
        if isinstance(other, Point):
            return Vector(self.x - other.x, self.y - other.y)
        raise TypeError("Can only subtract a Point from a Point.")

    def distance_to(self, other: Point) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y])


@dataclass
class Circle:
    """The fixed circle every curve crosses."""
    center: Point
    radius: float

    def __post_init__(self) -> None:
        if self.radius <= 0.0:
            raise ValueError(f"Circle radius must be positive, got {self.radius}.")

    def point_at(self, angle_rad: float) -> Point:
        """Point exactly on the circle at the given screen angle."""
        return self.center + Vector.from_polar(angle_rad, self.radius)

    @classmethod
    def for_viewport(cls, width: float, height: float) -> Circle:
        """Circle centred in a viewport, with a radius of a quarter of its smaller side."""
        return cls(center=Point(width / 2, height / 2), radius=min(width, height) / 4)

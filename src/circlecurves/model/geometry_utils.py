from __future__ import annotations

from typing import TYPE_CHECKING

from math import atan2, pi
import numpy as np

if TYPE_CHECKING:
    from numpy import typing as npt

from circlecurves.model.geometry_primitives import Point

TWO_PI = 2.0 * pi


def deg2rad(degrees: float) -> float:
    return degrees * pi / 180

def normalized_angle(point: Point, center: Point) -> float:
    """
    Angle of `point` seen from `center`, normalized to [0, 2*pi).

    Angle 0 points due east. Because screen y grows downwards, the angle
    increases clockwise as seen on screen.
    """
    angle = atan2(point.y - center.y, point.x - center.x)
    if angle < 0.0:
        angle += TWO_PI
    return angle


def quadratic_bezier_point(start: Point, control: Point, end: Point, t: float) -> Point:
    """Evaluate B(t) = (1-t)^2 P0 + 2(1-t)t C + t^2 P1."""
    u = 1.0 - t
    return Point(
        x=u * u * start.x + 2.0 * u * t * control.x + t * t * end.x,
        y=u * u * start.y + 2.0 * u * t * control.y + t * t * end.y,
    )


def sample_quadratic_bezier(
    start: Point,
    control: Point,
    end: Point,
    n_steps: int
) -> npt.NDArray[np.float64]:
    """
    Sample a quadratic Bezier curve at evenly spaced parameter values.

    Args:
        start: Start point P0 (t = 0).
        control: Control point C.
        end: End point P1 (t = 1).
        n_steps: Number of parameter steps; both ends are included.

    Returns:
        An array of shape (n_steps + 1, 2) with the sampled (x, y) coordinates,
        ordered by increasing t.
    """
    if n_steps < 1:
        raise ValueError(f"n_steps must be at least 1, got {n_steps}.")

    t = np.linspace(0.0, 1.0, n_steps + 1)[:, None]
    u = 1.0 - t
    return (
        u * u * start.to_array()
        + 2.0 * u * t * control.to_array()
        + t * t * end.to_array()
    )


def distances_to(points: npt.NDArray[np.float64], target: Point) -> npt.NDArray[np.float64]:
    """Euclidean distance from every row of an (N, 2) array to `target`."""
    return np.hypot(points[:, 0] - target.x, points[:, 1] - target.y)

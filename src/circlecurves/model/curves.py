"""
Curve Generator
===============
Random quadratic curves that are guaranteed to cross the puzzle circle.

Each curve starts and ends well outside the circle on roughly opposite sides
of it, so its path has to pass through the disc and cross the boundary twice.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np

from circlecurves.config import DEFAULT_CONFIG, PuzzleConfig
from circlecurves.model.geometry_primitives import Circle, Point, Vector
from circlecurves.model.geometry_utils import quadratic_bezier_point, sample_quadratic_bezier, distances_to

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


@dataclass
class Curve:
    """A quadratic curve with one control point, drawn as a coloured arc."""
    start: Point
    end: Point
    control: Point
    color: str
    line_width: float = 2.0
    visible: bool = True
    scale: float = 1.0

    base_line_width: float = field(default=2.0, repr=False)

    def point_at(self, t: float) -> Point:
        return quadratic_bezier_point(self.start, self.control, self.end, t)

    def sample(self, n_steps: int) -> npt.NDArray[np.float64]:
        """(n_steps + 1, 2) array of points along the path."""
        return sample_quadratic_bezier(self.start, self.control, self.end, n_steps)

    @property
    def stroke_width(self) -> float:
        return self.line_width * self.scale

    def is_near(self, point: Point, tolerance: float, n_steps: int) -> bool:
        """True if any sampled point of the path lies within `tolerance` of `point`."""
        return bool(np.any(distances_to(self.sample(n_steps), point) <= tolerance))

    def reset_emphasis(self) -> None:
        self.scale = 1.0
        self.line_width = self.base_line_width


def create_random_curve(
    circle: Circle,
    color: str,
    rng: np.random.Generator,
    config: PuzzleConfig = DEFAULT_CONFIG,
) -> Curve:
    """
    Create one curve whose endpoints lie outside `circle` on roughly opposite sides.

    The second endpoint sits at the antipodal angle of the first, jittered by up
    to `config.opposite_jitter`. Endpoint distances from the centre are drawn in
    [endpoint_radius_min, endpoint_radius_min + endpoint_radius_span] radii, and
    the control point lies in the square of side `radius` around the centre.
    """
    r = circle.radius
    angle1 = rng.random() * 2.0 * math.pi
    angle2 = angle1 + math.pi + (rng.random() - 0.5) * 2.0 * config.opposite_jitter

    start_radius = r * (config.endpoint_radius_min + rng.random() * config.endpoint_radius_span)
    end_radius = r * (config.endpoint_radius_min + rng.random() * config.endpoint_radius_span)

    start = circle.center + Vector.from_polar(angle1, start_radius)
    end = circle.center + Vector.from_polar(angle2, end_radius)
    control = Point(
        circle.center.x + (rng.random() - 0.5) * r,
        circle.center.y + (rng.random() - 0.5) * r,
    )

    return Curve(
        start=start,
        end=end,
        control=control,
        color=color,
        line_width=config.base_line_width,
        base_line_width=config.base_line_width,
    )


def generate_curves(
    circle: Circle,
    rng: np.random.Generator,
    config: PuzzleConfig = DEFAULT_CONFIG,
) -> list[Curve]:
    """Generate `config.curve_count` curves, colouring them from the palette in order."""
    curves = [
        create_random_curve(circle, config.colors[i % len(config.colors)], rng, config)
        for i in range(config.curve_count)
    ]
    logger.debug("Generated %d curves around circle r=%.1f", len(curves), circle.radius)
    return curves


def find_curve_at(
    curves: list[Curve],
    point: Point,
    config: PuzzleConfig = DEFAULT_CONFIG,
) -> int | None:
    """Index of the first visible curve passing within the hit tolerance of `point`, or None."""
    for i, curve in enumerate(curves):
        if curve.visible and curve.is_near(point, config.hit_tolerance, config.hit_steps):
            return i
    return None

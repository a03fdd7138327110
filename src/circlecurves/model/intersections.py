"""
Intersection Finder & Numbering
===============================
Approximates where each curve crosses the circle and numbers all crossings
clockwise.

The crossing search walks the sampled path of the curve and keeps samples
lying within a small band around the circle boundary. It is a sampling
approximation, not an analytic solution: the marker lands on the nearest
accepted sample, and the constants in `PuzzleConfig` decide exactly which one.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterable

import numpy as np

from circlecurves.config import DEFAULT_CONFIG, PuzzleConfig
from circlecurves.model.curves import Curve
from circlecurves.model.geometry_primitives import Circle, Point
from circlecurves.model.geometry_utils import distances_to, normalized_angle

logger = logging.getLogger(__name__)

POINTS_PER_CURVE = 2


@dataclass
class Intersection:
    """A numbered point where a curve crosses the circle."""
    position: Point
    curve_index: int
    number: int = 0
    visible: bool = True
    scale: float = 1.0

    def reset_emphasis(self) -> None:
        self.scale = 1.0


def find_circle_intersections(
    curve: Curve,
    circle: Circle,
    rng: np.random.Generator,
    config: PuzzleConfig = DEFAULT_CONFIG,
) -> list[Point]:
    """
    Approximate the two points where `curve` crosses `circle`.

    Samples are scanned in order of increasing t. A sample is accepted when its
    distance to the centre is within `intersection_tolerance` of the radius and
    it is at least `intersection_min_separation` away from every sample already
    accepted. Scanning stops after two acceptances.

    Returns:
        Exactly two points. Missing crossings are replaced by points at random
        angles exactly on the circle.
    """
    samples = curve.sample(config.intersection_steps)
    radial_error = np.abs(distances_to(samples, circle.center) - circle.radius)
    candidates = samples[radial_error < config.intersection_tolerance]

    found: list[Point] = []
    for x, y in candidates:
        candidate = Point(float(x), float(y))
        too_close = any(
            candidate.distance_to(existing) < config.intersection_min_separation
            for existing in found
        )
        if not too_close:
            found.append(candidate)
            if len(found) == POINTS_PER_CURVE:
                break

    if len(found) < POINTS_PER_CURVE:
        logger.debug(
            "Sampling found %d crossing(s); placing %d on the circle at random",
            len(found), POINTS_PER_CURVE - len(found)
        )
    while len(found) < POINTS_PER_CURVE:
        found.append(circle.point_at(rng.random() * 2.0 * math.pi))

    return found


def assign_numbers(intersections: Iterable[Intersection], center: Point) -> list[Intersection]:
    """
    Sort intersections clockwise from due east and number them 1..N.

    Returns:
        A new list in numbering order. The intersections are numbered in place.
    """
    ordered = sorted(intersections, key=lambda i: normalized_angle(i.position, center))
    for number, intersection in enumerate(ordered, start=1):
        intersection.number = number
    return ordered


def build_intersections(
    curves: list[Curve],
    circle: Circle,
    rng: np.random.Generator,
    config: PuzzleConfig = DEFAULT_CONFIG,
) -> list[Intersection]:
    """Find the crossings of every curve and number them clockwise."""
    collected = [
        Intersection(position=point, curve_index=curve_index)
        for curve_index, curve in enumerate(curves)
        for point in find_circle_intersections(curve, circle, rng, config)
    ]
    return assign_numbers(collected, circle.center)


def remove_curve_intersections(intersections: list[Intersection], curve_index: int) -> tuple[list[Intersection], list[int]]:
    """
    Drop the intersections owned by `curve_index` and shift higher indices down by one.

    Returns:
        (surviving intersections, numbers of the removed ones)
    """
    survivors: list[Intersection] = []
    removed: list[int] = []
    for intersection in intersections:
        if intersection.curve_index == curve_index:
            removed.append(intersection.number)
            continue
        if intersection.curve_index > curve_index:
            intersection.curve_index -= 1
        survivors.append(intersection)
    return survivors, removed

"""
Label Placement
===============
Offsets of the number labels drawn next to each intersection marker.

A label is pushed radially outwards from the circle centre. When it would sit
too close to a label placed earlier in the same pass, it is swung around its
marker by a few fixed angles until one clears the other label.
"""
from __future__ import annotations

import logging
from typing import Iterable

from circlecurves.config import DEFAULT_CONFIG, PuzzleConfig
from circlecurves.model.geometry_primitives import Point, Vector
from circlecurves.model.intersections import Intersection

logger = logging.getLogger(__name__)


def radial_offset(intersection: Intersection, center: Point, config: PuzzleConfig = DEFAULT_CONFIG) -> Vector:
    """Unadjusted offset pointing away from `center`, scaled by the marker's scale."""
    angle = (intersection.position - center).angle
    return Vector.from_polar(angle, config.label_distance * intersection.scale)


class LabelPlacer:
    """
    Computes label offsets for one render pass.

    Offsets are memoized by intersection number, which is permanent for the
    lifetime of a puzzle. Call `reset()` at the start of every pass.
    """

    def __init__(self, center: Point, config: PuzzleConfig = DEFAULT_CONFIG) -> None:
        self.center = center
        self.config = config
        self._offsets: dict[int, Vector] = {}

    def reset(self, center: Point | None = None) -> None:
        if center is not None:
            self.center = center
        self._offsets.clear()

    def stored_offset(self, number: int) -> Vector | None:
        return self._offsets.get(number)

    @property
    def offsets(self) -> dict[int, Vector]:
        return dict(self._offsets)

    def offset_for(self, intersection: Intersection, others: Iterable[Intersection]) -> Vector:
        """
        Place the label of `intersection`, avoiding labels already placed.

        The overlap test always measures from the unadjusted label position;
        each alternative angle is relative to the current offset direction and
        only has to clear the one label it collided with.
        """
        cfg = self.config
        distance = cfg.label_distance * intersection.scale
        offset = radial_offset(intersection, self.center, cfg)
        label = intersection.position + offset

        for other in others:
            if other.number == intersection.number:
                continue
            other_offset = self._offsets.get(other.number)
            if other_offset is None:
                continue

            other_label = other.position + other_offset
            if label.distance_to(other_label) >= cfg.label_min_separation:
                continue

            base_angle = offset.angle
            for adjustment in cfg.label_angle_adjustments:
                candidate = Vector.from_polar(base_angle + adjustment, distance)
                if (intersection.position + candidate).distance_to(other_label) >= cfg.label_min_separation:
                    offset = candidate
                    break

        self._offsets[intersection.number] = offset
        return offset

    def place_all(self, intersections: list[Intersection]) -> dict[int, Vector]:
        """Run a full pass over the visible intersections, in list order."""
        self.reset()
        for intersection in intersections:
            if intersection.visible:
                self.offset_for(intersection, intersections)
        return self.offsets

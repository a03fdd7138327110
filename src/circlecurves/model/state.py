"""
Puzzle Session (Data Model)
===========================
This module defines the central state of one running puzzle.

Why is this file needed?
------------------------
1. State Management: It holds the circle, the live curves, their numbered
   intersections, the pairing board and the current selection in one place.
2. Rules: Every player action (clicking a tile, clicking a curve, moving the
   pointer, an animation frame) is a method here, so the rules can be tested
   without a window.
3. Decoupling: Views read from this object; the controller calls its methods
   and tells the views to refresh.

Classes:
    PuzzleSession: The main container class.
"""
from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from circlecurves.config import DEFAULT_CONFIG, PuzzleConfig
from circlecurves.model.animation import GrowAnimation
from circlecurves.model.board import PairingBoard, PairOutcome, PairSlot
from circlecurves.model.curves import Curve, find_curve_at, generate_curves
from circlecurves.model.geometry_primitives import Circle, Point
from circlecurves.model.intersections import Intersection, build_intersections, remove_curve_intersections
from circlecurves.model.labels import LabelPlacer
from circlecurves.model.texts import Language, PuzzleTexts, texts_for

logger = logging.getLogger(__name__)


class PuzzleSession:
    """
    One puzzle: curves crossing a circle plus the state of both number grids.

    Curves are addressed by their position in `curves`; removing a curve shifts
    the index of every later curve down by one, and the `curve_index` of the
    surviving intersections follows. Intersection numbers never change until
    the puzzle is regenerated.
    """

    def __init__(
        self,
        width: float,
        height: float,
        config: PuzzleConfig = DEFAULT_CONFIG,
        seed: Optional[int] = None,
    ) -> None:
        self.config = config
        self.rng = np.random.default_rng(seed)
        self.language: Language = Language.ENGLISH

        self.width: float = width
        self.height: float = height
        self.circle: Circle = Circle.for_viewport(width, height)
        self.curves: list[Curve] = []
        self.intersections: list[Intersection] = []
        self.board = PairingBoard(config.total_intersections, config.group_count)

        self.selected_curve: Optional[int] = None
        self.animation = GrowAnimation(step=config.animation_step)
        self.labels = LabelPlacer(self.circle.center, config)

        self.regenerate()

    # ------------------------------------------------------------------
    # Generation
    # ------------------------------------------------------------------

    def regenerate(self) -> None:
        """Draw a fresh set of curves, number their crossings and reset the board."""
        self.circle = Circle.for_viewport(self.width, self.height)
        self.load_curves(generate_curves(self.circle, self.rng, self.config))

    def load_curves(self, curves: list[Curve]) -> None:
        """Start a puzzle on the given curves: find and number their crossings, reset the board."""
        self.curves = list(curves)
        self.intersections = build_intersections(self.curves, self.circle, self.rng, self.config)
        self.board = PairingBoard(2 * len(self.curves), len(self.curves))
        self.selected_curve = None
        self.animation.stop()
        self.labels.reset(self.circle.center)
        logger.info(
            "New puzzle: %d curves, %d intersections, circle r=%.1f at (%.1f, %.1f)",
            len(self.curves), len(self.intersections), self.circle.radius,
            self.circle.center.x, self.circle.center.y
        )

    def resize(self, width: float, height: float) -> bool:
        """
        Adapt to a new viewport size. The circle is recomputed and the puzzle is
        regenerated, since the old curves no longer fit.

        Returns:
            True if the puzzle was regenerated.
        """
        if width <= 0 or height <= 0:
            logger.debug("Ignoring degenerate viewport %sx%s", width, height)
            return False
        if (width, height) == (self.width, self.height):
            return False
        self.width = width
        self.height = height
        self.regenerate()
        return True

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def intersection_for(self, number: int) -> Optional[Intersection]:
        """Live intersection carrying `number`, or None once its curve is gone."""
        for intersection in self.intersections:
            if intersection.number == number:
                return intersection
        return None

    def numbers_for_curve(self, curve_index: int) -> list[int]:
        return [i.number for i in self.intersections if i.curve_index == curve_index]

    @property
    def is_solved(self) -> bool:
        return not self.curves

    @property
    def texts(self) -> PuzzleTexts:
        return texts_for(self.language)

    # ------------------------------------------------------------------
    # Curve removal
    # ------------------------------------------------------------------

    def remove_curve(self, curve_index: int) -> list[int]:
        """
        Remove a curve and its intersections and retire their tiles.

        Returns:
            The numbers of the removed intersections.

        Raises:
            IndexError: If `curve_index` does not address a live curve.
        """
        if not 0 <= curve_index < len(self.curves):
            raise IndexError(f"No curve at index {curve_index} ({len(self.curves)} left).")

        self.curves.pop(curve_index)
        self.intersections, removed = remove_curve_intersections(self.intersections, curve_index)
        self.board.delete_tiles(removed)

        if self.selected_curve is not None:
            if self.selected_curve == curve_index:
                self.selected_curve = None
                self.animation.stop()
            elif self.selected_curve > curve_index:
                self.selected_curve -= 1

        logger.debug("Removed curve %d with numbers %s", curve_index, removed)
        return removed

    # ------------------------------------------------------------------
    # Tile interaction
    # ------------------------------------------------------------------

    def select_number(self, number: int) -> PairOutcome:
        """
        Move a bottom tile into the current pair slot and validate full pairs.

        Clicking a hidden or deleted tile, a number whose curve is gone, or any
        tile once every slot is used does nothing.
        """
        if not self.board.is_available(number):
            logger.debug("Tile %d is not available", number)
            return PairOutcome.IGNORED

        if self.intersection_for(number) is None:
            logger.info("Number %d belongs to a removed curve and cannot be placed", number)
            return PairOutcome.IGNORED

        slot = self.board.place(number)
        if slot is None:
            return PairOutcome.IGNORED
        if not slot.is_full:
            return PairOutcome.PENDING
        return self._validate_slot(slot)

    def _validate_slot(self, slot: PairSlot) -> PairOutcome:
        first, second = (self.intersection_for(n) for n in slot.numbers)

        if first is not None and second is not None and first.curve_index == second.curve_index:
            self.remove_curve(first.curve_index)
            self.board.resolve_current()
            logger.info("Numbers %s share a curve; curve removed", slot.numbers)
            return PairOutcome.MATCHED

        returned = self.board.return_current()
        logger.info("Numbers %s are not on the same curve; returned", returned)
        return PairOutcome.MISMATCHED

    # ------------------------------------------------------------------
    # Curve selection and animation
    # ------------------------------------------------------------------

    def select_curve_at(self, x: float, y: float) -> Optional[int]:
        """Select the curve under the pointer and start its grow animation."""
        curve_index = find_curve_at(self.curves, Point(x, y), self.config)
        if curve_index is None:
            return None

        if self.selected_curve is not None and self.selected_curve != curve_index:
            self._reset_emphasis(self.selected_curve)

        self.selected_curve = curve_index
        self.animation.start()
        logger.debug("Selected curve %d", curve_index)
        return curve_index

    def tick_animation(self) -> bool:
        """
        Advance the grow animation by one frame.

        Returns:
            True if another frame should be scheduled. A tick whose selection no
            longer points at a live curve stops the animation.
        """
        if not self.animation.running:
            return False
        curve_index = self.selected_curve
        if curve_index is None or not 0 <= curve_index < len(self.curves):
            self.animation.stop()
            return False

        cfg = self.config
        progress = self.animation.advance()
        curve = self.curves[curve_index]
        curve.scale = 1.0 + progress * cfg.curve_scale_gain
        curve.line_width = cfg.base_line_width + progress * cfg.line_width_gain
        for intersection in self.intersections:
            if intersection.curve_index == curve_index:
                intersection.scale = 1.0 + progress * cfg.point_scale_gain

        return self.animation.running

    def pointer_moved(self) -> bool:
        """
        Any pointer movement while a curve is selected confirms it: the curve is
        removed and its two numbers are auto-filled into the current slot.

        Returns:
            True if a curve was removed.
        """
        if self.selected_curve is None:
            return False

        curve_index = self.selected_curve
        numbers = self.numbers_for_curve(curve_index)
        self.remove_curve(curve_index)
        self.selected_curve = None
        self.animation.stop()

        if self.board.auto_fill(numbers):
            logger.info("Auto-filled numbers %s; curve removed", numbers)
        return True

    def _reset_emphasis(self, curve_index: int) -> None:
        if not 0 <= curve_index < len(self.curves):
            return
        self.curves[curve_index].reset_emphasis()
        for intersection in self.intersections:
            if intersection.curve_index == curve_index:
                intersection.reset_emphasis()

    # ------------------------------------------------------------------
    # Language
    # ------------------------------------------------------------------

    def toggle_language(self) -> Language:
        self.language = self.language.toggled()
        return self.language

"""
Configuration & Constants
=========================
This module serves as the central registry for the puzzle's tuning constants
and packaged resources.

Why is this file needed?
------------------------
1. Reproducibility: the sampling counts and tolerances decide where the
   intersection markers land, so they live in one place instead of being
   scattered across the model.
2. Deployment: it resolves packaged resources (the stylesheet) both from a
   source checkout and from an installed wheel.

Exports:
    PuzzleConfig: Frozen dataclass bundling every tuning constant.
    DEFAULT_CONFIG: The configuration used by the application.
    CURVE_COLORS: Palette assigned to curves in generation order.
    STYLESHEET_PATH (str): Absolute path to the grid stylesheet.
    LOG_LEVEL_ENV, LOG_FILE_ENV: Environment variables read by logging_config.
    MODULE_LOG_LEVELS: Per-module levels for chatty loggers.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from importlib.resources import files

logger = logging.getLogger(__name__)

CURVE_COLORS: tuple[str, ...] = (
    '#FF6B6B', '#4ECDC4', '#45B7D1', '#96CEB4', '#FFEAA7',
    '#DDA0DD', '#98D8C8', '#F7DC6F', '#BB8FCE', '#85C1E9',
    '#F8C471', '#82E0AA', '#F1948A', '#85C1E9', '#D7BDE2',
    '#A9DFBF', '#F9E79F', '#AED6F1', '#F5B7B1', '#D5A6BD',
)


@dataclass(frozen=True)
class PuzzleConfig:
    """All tuning constants of the puzzle. Defaults reproduce the classic game."""
    # Generation
    curve_count: int = 20
    endpoint_radius_min: float = 1.5  # multiples of the circle radius
    endpoint_radius_span: float = 0.5
    opposite_jitter: float = math.pi / 4  # max deviation from the antipodal angle
    colors: tuple[str, ...] = field(default=CURVE_COLORS)
    base_line_width: float = 2.0

    # Intersection sampling
    intersection_steps: int = 1000
    intersection_tolerance: float = 2.0
    intersection_min_separation: float = 20.0

    # Pointer hit test
    hit_steps: int = 100
    hit_tolerance: float = 10.0

    # Grow animation
    animation_step: float = 0.05
    frame_interval_ms: int = 16
    resize_debounce_ms: int = 250  # quiet time before a resize regenerates the puzzle
    curve_scale_gain: float = 0.5
    line_width_gain: float = 3.0
    point_scale_gain: float = 0.8

    # Label placement
    label_distance: float = 25.0
    label_min_separation: float = 30.0
    label_angle_adjustments: tuple[float, ...] = (
        math.pi / 4, -math.pi / 4, math.pi / 2, -math.pi / 2,
    )

    # Rendering
    point_radius: float = 6.0
    label_font_size: float = 14.0
    label_padding: float = 4.0

    @property
    def total_intersections(self) -> int:
        return 2 * self.curve_count

    @property
    def group_count(self) -> int:
        return self.curve_count


DEFAULT_CONFIG = PuzzleConfig()


def get_resource_path(name: str) -> str:
    """Get the absolute path to a file shipped in ``circlecurves/resources``."""
    return str(files("circlecurves.resources").joinpath(name))


STYLESHEET_PATH: str = get_resource_path("grids.qss")


def load_stylesheet() -> str:
    """Return the grid stylesheet, or an empty string if it is missing."""
    try:
        with open(STYLESHEET_PATH, encoding="utf-8") as fh:
            return fh.read()
    except OSError:
        logger.warning("Stylesheet not found at %s", STYLESHEET_PATH)
        return ""


# Logging
LOG_LEVEL_ENV = "CIRCLECURVES_LOG_LEVEL"
LOG_FILE_ENV = "CIRCLECURVES_LOG_FILE"

# Resizing a window fires many events, and sampling logs every fallback crossing
MODULE_LOG_LEVELS: dict[str, int] = {
    "circlecurves.view.widgets.puzzle_canvas": logging.INFO,
    "circlecurves.model.intersections": logging.INFO,
}

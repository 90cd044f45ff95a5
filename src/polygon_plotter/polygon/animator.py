"""Polygon animator: vertex geometry, line colors and the rotation state."""

import logging
import math
from dataclasses import dataclass
from typing import Protocol

from ..constants import (
    DEFAULT_BOUNDS,
    FULL_TURN,
    MIN_NUM_POINTS,
    ROTATION_STEP,
    ZOOM_OFFSET,
)
from ..errors import InvalidArgumentError
from ..plot import CoordinateTransform, UserBounds, Viewport
from .color_table import Color, ColorTable

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LineSegment:
    """One line-draw primitive in screen space."""

    x1: int
    y1: int
    x2: int
    y2: int
    color: Color


class DrawingSurface(Protocol):
    """Anything that can draw a colored line between two pixels."""

    def line(self, segment: LineSegment) -> None: ...


def wrap_angle(angle: float) -> float:
    """Normalize an angle into [0, 2π)."""
    wrapped = angle % FULL_TURN
    # Tiny negative inputs can round up to exactly 2π.
    if wrapped >= FULL_TURN:
        return 0.0
    return wrapped


def zoom_scaling(angle: float) -> float:
    """Half-width of the visible window at this angle; negative values mirror the view."""
    return ZOOM_OFFSET + math.sin(angle)


class PolygonAnimator:
    """Draws a regular polygon and all of its diagonals, rotating and zooming."""

    def __init__(self, num_points: int, angle: float = 0.0):
        """
        Initialize the animator.

        Args:
            num_points: Number of polygon vertices, at least two
            angle: Starting rotation in radians

        Raises:
            InvalidArgumentError: If num_points is below two
        """
        if isinstance(num_points, bool) or not isinstance(num_points, int):
            raise InvalidArgumentError(f"Number of points must be an integer, got {num_points!r}")
        if num_points < MIN_NUM_POINTS:
            raise InvalidArgumentError("Polygon must have at least two points.")

        self.num_points = num_points
        self.transform = CoordinateTransform(
            Viewport(1, 1), UserBounds.symmetric(DEFAULT_BOUNDS)
        )
        self.colors = ColorTable(num_points)
        self._angle = wrap_angle(angle)

    @classmethod
    def create(cls, num_points: int) -> "PolygonAnimator":
        return cls(num_points)

    @property
    def angle(self) -> float:
        return self._angle

    @property
    def line_count(self) -> int:
        return len(self.colors)

    def advance(self, step: float = ROTATION_STEP) -> float:
        """
        Rotate by one tick and return the new angle.

        Args:
            step: Positive rotation in radians
        """
        if step <= 0:
            raise ValueError(f"Rotation step must be positive, got {step}")
        self._angle = wrap_angle(self._angle + step)
        return self._angle

    def vertex(self, k: int, angle: float) -> tuple[float, float]:
        """User-space position of vertex k on the unit circle."""
        theta = angle + FULL_TURN * k / self.num_points
        return math.cos(theta), math.sin(theta)

    def render(self, viewport: Viewport, angle: float | None = None) -> list[LineSegment]:
        """
        Compute the line primitives of one frame.

        Args:
            viewport: Live size of the drawing surface
            angle: Rotation to draw; defaults to the current animation angle

        Returns:
            One segment per unordered vertex pair, from vertex i to vertex j (j < i)
        """
        if angle is None:
            angle = self._angle

        scaling = zoom_scaling(angle)
        if scaling == 0.0:
            # The window has collapsed to a point; every vertex is at infinity.
            _logger.debug("Zoom scale is zero at angle %r, skipping frame", angle)
            return []

        transform = CoordinateTransform(viewport.square(), self.transform.bounds)
        transform.set_bounds_x(-scaling, scaling)
        transform.set_bounds_y(-scaling, scaling)

        points = [
            transform.to_screen(*self.vertex(k, angle)) for k in range(self.num_points)
        ]
        segments = [
            LineSegment(*points[i], *points[j], color)
            for (i, j), color in self.colors.items()
        ]
        self.transform = transform
        return segments

    def draw(
        self, surface: DrawingSurface, viewport: Viewport, angle: float | None = None
    ) -> int:
        """Render a frame onto a drawing surface and return the number of lines drawn."""
        segments = self.render(viewport, angle)
        for segment in segments:
            surface.line(segment)
        return len(segments)

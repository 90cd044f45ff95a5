"""Animated regular polygons with all of their diagonals."""

from .errors import InvalidArgumentError
from .plot import CoordinateTransform, UserBounds, Viewport
from .polygon import AnimationScheduler, ColorTable, LineSegment, PolygonAnimator

__all__ = [
    "AnimationScheduler",
    "ColorTable",
    "CoordinateTransform",
    "InvalidArgumentError",
    "LineSegment",
    "PolygonAnimator",
    "UserBounds",
    "Viewport",
]

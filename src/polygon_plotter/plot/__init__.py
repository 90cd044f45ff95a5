"""User-space to screen-space plotting helpers."""

from .transform import CoordinateTransform, UserBounds, Viewport

__all__ = [
    "CoordinateTransform",
    "UserBounds",
    "Viewport",
]

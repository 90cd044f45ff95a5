"""Polygon animation: geometry, colors, scheduling and raster rendering."""

from .animator import DrawingSurface, LineSegment, PolygonAnimator, wrap_angle, zoom_scaling
from .color_table import Color, ColorTable
from .raster_animation import generate_raster_frames
from .render_context import RenderContext
from .renderer import PillowSurface, Renderer
from .scheduler import AnimationScheduler

__all__ = [
    "AnimationScheduler",
    "Color",
    "ColorTable",
    "DrawingSurface",
    "LineSegment",
    "PillowSurface",
    "PolygonAnimator",
    "RenderContext",
    "Renderer",
    "generate_raster_frames",
    "wrap_angle",
    "zoom_scaling",
]

"""Raster (Pillow) frame generators built on top of the animation scheduler."""

from typing import Iterator

from PIL import Image

from ..constants import ROTATION_STEP
from ..plot import Viewport
from .animator import PolygonAnimator
from .render_context import RenderContext
from .renderer import Renderer
from .scheduler import AnimationScheduler


def _no_wait(_delay: float) -> None:
    return None


def generate_raster_frames(
    animator: PolygonAnimator,
    viewport: Viewport,
    max_frames: int,
    render_context: RenderContext | None = None,
    rotation_step: float = ROTATION_STEP,
) -> Iterator[Image.Image]:
    """
    Render up to max_frames frames, the first at the animator's current angle.

    The scheduler is single-stepped without waiting; frame timing is left to
    the output encoder.
    """
    if max_frames <= 0:
        return
    renderer = Renderer(animator, viewport, render_context or RenderContext.darkmode())
    yield renderer.render_frame()

    scheduler = AnimationScheduler(
        animator,
        delay=0.0,
        rotation_step=rotation_step,
        sleep=_no_wait,
    )
    for _ in scheduler.ticks(max_frames - 1):
        yield renderer.render_frame()

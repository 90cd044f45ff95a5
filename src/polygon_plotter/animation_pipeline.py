"""Shared animation orchestration used by the CLI."""

import logging
from typing import Any

from .config import AnimationSettings
from .output import resolve_output_provider
from .output.base import OutputProvider
from .plot import Viewport
from .polygon import PolygonAnimator, RenderContext, generate_raster_frames

_logger = logging.getLogger(__name__)


def encode_animation(
    animator: PolygonAnimator,
    settings: AnimationSettings,
    output_path: str,
    provider: OutputProvider[Any] | None = None,
) -> bytes:
    """Encode animation bytes for the given animator and output path."""
    target_provider = provider or resolve_output_provider(output_path)
    viewport = Viewport(settings.size, settings.size)
    _logger.debug(
        "Encoding %d frames of %d points at %dx%d with %s",
        settings.max_frames,
        animator.num_points,
        viewport.width,
        viewport.height,
        type(target_provider).__name__,
    )
    frame_stream = generate_raster_frames(
        animator,
        viewport,
        settings.max_frames,
        render_context=RenderContext.from_theme(settings.theme),
        rotation_step=settings.rotation_step,
    )
    return target_provider.encode(frame_stream, frame_duration=settings.delay_ms)

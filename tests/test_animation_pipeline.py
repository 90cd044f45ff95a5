"""Tests for the shared encoding pipeline."""

from io import BytesIO

from PIL import Image

from polygon_plotter import PolygonAnimator
from polygon_plotter.animation_pipeline import encode_animation
from polygon_plotter.config import AnimationSettings
from polygon_plotter.output import WebPOutputProvider


def test_encode_gif_by_extension():
    settings = AnimationSettings(size=48, max_frames=4, rotation_step=0.4)

    encoded = encode_animation(PolygonAnimator.create(6), settings, "out.gif")

    assert encoded.startswith(b"GIF89")
    with Image.open(BytesIO(encoded)) as img:
        assert img.size == (48, 48)
        assert img.n_frames == 4


def test_explicit_provider_wins_over_extension():
    settings = AnimationSettings(size=24, max_frames=2)

    encoded = encode_animation(
        PolygonAnimator.create(3), settings, "out.gif", provider=WebPOutputProvider()
    )

    assert encoded.startswith(b"RIFF")


def test_animator_left_at_last_frame_angle():
    animator = PolygonAnimator.create(4)
    settings = AnimationSettings(size=16, max_frames=5, rotation_step=0.25)

    encode_animation(animator, settings, "out.gif")

    assert abs(animator.angle - 1.0) < 1e-12

"""Animation settings with environment-variable overrides."""

import os
from dataclasses import dataclass
from typing import Callable, Mapping, TypeVar

from .constants import (
    ANIMATION_DELAY_MS,
    DEFAULT_MAX_FRAMES,
    DEFAULT_NUM_POINTS,
    DEFAULT_THEME,
    DEFAULT_WINDOW_SIZE,
    ROTATION_STEP,
)

ENV_PREFIX = "POLYGON_PLOTTER_"

T = TypeVar("T")


@dataclass(frozen=True)
class AnimationSettings:
    """Everything needed to produce one animation."""

    num_points: int = DEFAULT_NUM_POINTS
    delay_ms: int = ANIMATION_DELAY_MS
    rotation_step: float = ROTATION_STEP
    size: int = DEFAULT_WINDOW_SIZE
    max_frames: int = DEFAULT_MAX_FRAMES
    theme: str = DEFAULT_THEME

    def __post_init__(self) -> None:
        if self.delay_ms <= 0:
            raise ValueError(f"Delay must be positive, got {self.delay_ms}ms")
        if self.rotation_step <= 0:
            raise ValueError(f"Rotation step must be positive, got {self.rotation_step}")
        if self.size <= 0:
            raise ValueError(f"Frame size must be positive, got {self.size}")
        if self.max_frames <= 0:
            raise ValueError(f"Frame count must be positive, got {self.max_frames}")

    @property
    def delay_seconds(self) -> float:
        return self.delay_ms / 1000

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "AnimationSettings":
        """
        Build settings from POLYGON_PLOTTER_* variables, falling back to defaults.

        Args:
            environ: Variables to read; defaults to os.environ

        Raises:
            ValueError: If a variable cannot be parsed
        """
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            num_points=_read(env, "NUM_POINTS", int, defaults.num_points),
            delay_ms=_read(env, "DELAY_MS", int, defaults.delay_ms),
            rotation_step=_read(env, "ROTATION_STEP", float, defaults.rotation_step),
            size=_read(env, "SIZE", int, defaults.size),
            max_frames=_read(env, "MAX_FRAMES", int, defaults.max_frames),
            theme=_read(env, "THEME", str, defaults.theme),
        )


def _read(env: Mapping[str, str], name: str, parse: Callable[[str], T], default: T) -> T:
    key = ENV_PREFIX + name
    raw = env.get(key)
    if raw is None or raw.strip() == "":
        return default
    try:
        return parse(raw.strip())
    except ValueError:
        raise ValueError(f"Invalid value for {key}: {raw!r}")

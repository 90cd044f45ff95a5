"""Fixed-delay ticking task that advances the animation and requests redraws."""

import logging
import time
from typing import Callable, Iterator

from ..constants import ANIMATION_DELAY_MS, ROTATION_STEP
from .animator import PolygonAnimator

_logger = logging.getLogger(__name__)


def _no_redraw() -> None:
    return None


class AnimationScheduler:
    """
    Drives a PolygonAnimator at a fixed cadence.

    Each tick waits `delay` seconds, advances the angle by `rotation_step` and
    asks the host for a redraw. The delay is a gap between ticks rather than a
    wall-clock period; the host may coalesce or postpone the redraws.
    """

    def __init__(
        self,
        animator: PolygonAnimator,
        request_redraw: Callable[[], None] | None = None,
        *,
        delay: float = ANIMATION_DELAY_MS / 1000,
        rotation_step: float = ROTATION_STEP,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """
        Initialize the scheduler.

        Args:
            animator: Animator whose angle is advanced
            request_redraw: Host callback invoked after every tick
            delay: Seconds to wait before each tick
            rotation_step: Radians added to the angle per tick
            sleep: Wait function; tests pass a no-op to step without real time
        """
        if delay < 0:
            raise ValueError(f"Delay must not be negative, got {delay}")
        if rotation_step <= 0:
            raise ValueError(f"Rotation step must be positive, got {rotation_step}")
        self.animator = animator
        self.request_redraw = request_redraw or _no_redraw
        self.delay = delay
        self.rotation_step = rotation_step
        self._sleep = sleep
        self.tick_count = 0

    def tick(self) -> float:
        """Advance the animation once, request a redraw and return the new angle."""
        angle = self.animator.advance(self.rotation_step)
        self.tick_count += 1
        self.request_redraw()
        return angle

    def ticks(self, max_ticks: int | None = None) -> Iterator[int]:
        """Yield the tick number after every tick; runs forever when max_ticks is None."""
        done = 0
        while max_ticks is None or done < max_ticks:
            self._wait()
            self.tick()
            done += 1
            yield self.tick_count

    def run(self, max_ticks: int | None = None) -> None:
        for _ in self.ticks(max_ticks):
            pass

    def _wait(self) -> None:
        try:
            self._sleep(self.delay)
        except InterruptedError as e:
            # An early wake-up only makes the next frame a little early.
            _logger.warning("Animation delay interrupted, ticking early: %s", e)

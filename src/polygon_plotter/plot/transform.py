"""Linear mapping of user-space coordinates to integer pixel coordinates."""

import math
from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Viewport:
    """Physical pixel size of a drawing surface."""

    width: int
    height: int

    def __post_init__(self) -> None:
        for name in ("width", "height"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ValueError(f"Viewport {name} must be a positive integer, got {value!r}")

    def square(self) -> "Viewport":
        """Largest square viewport that fits inside this one."""
        side = min(self.width, self.height)
        return Viewport(side, side)


@dataclass(frozen=True)
class UserBounds:
    """
    Visible user-space window.

    Min and max may be swapped (the window is then mirrored) but never equal,
    since the transform divides by their difference.
    """

    x_min: float
    x_max: float
    y_min: float
    y_max: float

    def __post_init__(self) -> None:
        if self.x_min == self.x_max:
            raise ValueError(f"x bounds must differ, got {self.x_min} and {self.x_max}")
        if self.y_min == self.y_max:
            raise ValueError(f"y bounds must differ, got {self.y_min} and {self.y_max}")

    @classmethod
    def symmetric(cls, half_width: float) -> "UserBounds":
        """Square window [-half_width, +half_width] on both axes."""
        return cls(-half_width, half_width, -half_width, half_width)


class CoordinateTransform:
    """Maps user-space (x, y) onto the pixels of a viewport."""

    def __init__(self, viewport: Viewport, bounds: UserBounds):
        """
        Initialize the transform.

        Args:
            viewport: Pixel size of the drawing area
            bounds: User-space window shown in that area
        """
        self.viewport = viewport
        self.bounds = bounds

    @property
    def width(self) -> int:
        return self.viewport.width

    @property
    def height(self) -> int:
        return self.viewport.height

    def to_screen_x(self, x: float) -> int:
        b = self.bounds
        return math.floor(self.width * (x - b.x_min) / (b.x_max - b.x_min))

    def to_screen_y(self, y: float) -> int:
        # Pixel rows grow downward, so user-space y is flipped.
        b = self.bounds
        return math.floor(self.height * (b.y_min - y) / (b.y_max - b.y_min) + self.height)

    def to_screen(self, x: float, y: float) -> tuple[int, int]:
        return self.to_screen_x(x), self.to_screen_y(y)

    def set_bounds_x(self, x_min: float, x_max: float) -> None:
        self.bounds = replace(self.bounds, x_min=x_min, x_max=x_max)

    def set_bounds_y(self, y_min: float, y_max: float) -> None:
        self.bounds = replace(self.bounds, y_min=y_min, y_max=y_max)

    def set_viewport(self, viewport: Viewport) -> None:
        self.viewport = viewport

    def copy(self) -> "CoordinateTransform":
        return CoordinateTransform(self.viewport, self.bounds)

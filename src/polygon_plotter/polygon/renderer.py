"""Renderer for drawing polygon frames using Pillow."""

from PIL import Image, ImageDraw

from ..plot import Viewport
from .animator import LineSegment, PolygonAnimator
from .render_context import RenderContext


class PillowSurface:
    """Drawing surface backed by a Pillow ImageDraw."""

    def __init__(self, draw: ImageDraw.ImageDraw, line_width: int = 1):
        self.draw = draw
        self.line_width = line_width

    def line(self, segment: LineSegment) -> None:
        self.draw.line(
            [(segment.x1, segment.y1), (segment.x2, segment.y2)],
            fill=segment.color,
            width=self.line_width,
        )


class Renderer:
    """Renders the animator's current frame as PIL Images."""

    def __init__(
        self,
        animator: PolygonAnimator,
        viewport: Viewport,
        render_context: RenderContext,
    ):
        """
        Initialize renderer.

        Args:
            animator: The animator to draw
            viewport: Size of the frames in pixels
            render_context: Rendering configuration and theming
        """
        self.animator = animator
        self.viewport = viewport
        self.context = render_context

    def resize(self, viewport: Viewport) -> None:
        """Change the frame size, as a window resize would."""
        self.viewport = viewport

    def render_frame(self) -> Image.Image:
        """
        Render the animator at its current angle.

        Returns:
            PIL Image of the current frame
        """
        img = Image.new(
            "RGB", (self.viewport.width, self.viewport.height), self.context.background_color
        )
        draw = ImageDraw.Draw(img)
        self.animator.draw(PillowSurface(draw, self.context.line_width), self.viewport)

        return img.convert("P", palette=Image.Palette.ADAPTIVE)

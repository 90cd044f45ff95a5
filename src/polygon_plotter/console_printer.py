"""Console summaries of a polygon animation."""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from .config import AnimationSettings
from .constants import FULL_TURN
from .polygon import PolygonAnimator

SWATCH = "██"
MAX_SWATCH_ROWS = 24


class PolygonConsolePrinter:
    """Prints polygon statistics and its line colors to the terminal."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def display_stats(self, animator: PolygonAnimator, settings: AnimationSettings) -> None:
        ticks_per_turn = FULL_TURN / settings.rotation_step
        seconds_per_turn = ticks_per_turn * settings.delay_seconds

        table = Table(title="Polygon", show_header=False)
        table.add_column("Property", style="bold cyan")
        table.add_column("Value", justify="right")
        table.add_row("Vertices", str(animator.num_points))
        table.add_row("Lines (edges + diagonals)", str(animator.line_count))
        table.add_row("Ticks per full turn", f"{ticks_per_turn:.0f}")
        table.add_row("Seconds per full turn", f"{seconds_per_turn:.1f}")
        table.add_row("Frames to write", str(settings.max_frames))
        self.console.print(table)

    def display_color_table(self, animator: PolygonAnimator) -> None:
        """Print one row of swatches per vertex; row i holds i colors."""
        self.console.print("\n[bold]Line colors[/bold]")
        rows = min(animator.num_points, MAX_SWATCH_ROWS)
        for i in range(1, rows):
            line = Text(f"{i:>3} ")
            for r, g, b in animator.colors.row(i):
                line.append(SWATCH, style=f"rgb({r},{g},{b})")
            self.console.print(line)
        if rows < animator.num_points:
            self.console.print(f"    ... {animator.num_points - rows} more rows")

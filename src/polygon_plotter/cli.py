"""CLI interface for polygon-plotter."""

import logging
import sys
from dataclasses import replace
from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler

from .animation_pipeline import encode_animation
from .config import AnimationSettings
from .console_printer import PolygonConsolePrinter
from .errors import InvalidArgumentError
from .output import resolve_output_provider, supported_output_formats
from .polygon import PolygonAnimator

# Load environment variables from .env file
load_dotenv()

console = Console()
err_console = Console(stderr=True)
SUPPORTED_OUTPUT_FORMATS_TEXT = ", ".join(supported_output_formats()).upper()


class CLIError(Exception):
    """Base exception for CLI errors with user-friendly messages."""
    pass


def main(
    num_points: int = typer.Argument(
        None, help="Number of polygon vertices (default 20, or POLYGON_PLOTTER_NUM_POINTS)"
    ),
    out: str = typer.Option(
        None,
        "--output",
        "-o",
        help=f"Animation file to write ({SUPPORTED_OUTPUT_FORMATS_TEXT})",
    ),
    size: int = typer.Option(None, "--size", help="Width and height of the frames in pixels"),
    max_frames: int = typer.Option(None, "--frames", "-n", help="Number of frames to write"),
    delay_ms: int = typer.Option(None, "--delay", help="Milliseconds between frames"),
    rotation_step: float = typer.Option(
        None, "--rotation-step", help="Radians the polygon turns per frame"
    ),
    theme: str = typer.Option(None, "--theme", help="Background theme (dark, light)"),
    show_colors: bool = typer.Option(
        False, "--colors", help="Print the line color table before rendering"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """
    Render a rotating, zooming regular polygon with all of its diagonals.

    Examples:
      # Twenty points, written to polygon-20.gif
      polygon-plotter

      # A seven-pointed star as lossless WebP
      polygon-plotter 7 --output star.webp --frames 400
    """
    _configure_logging(verbose)
    try:
        settings = _resolve_settings(num_points, size, max_frames, delay_ms, rotation_step, theme)
        animator = _create_animator(settings.num_points)
        output_path = out or f"polygon-{settings.num_points}.gif"

        printer = PolygonConsolePrinter(console)
        printer.display_stats(animator, settings)
        if show_colors:
            printer.display_color_table(animator)

        _generate_output(animator, settings, output_path)

    except CLIError as e:
        err_console.print(f"[bold red]Error:[/bold red] {e}")
        sys.exit(1)

    except Exception as e:
        err_console.print(f"[bold red]Unexpected error:[/bold red] {e}")
        sys.exit(1)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _resolve_settings(
    num_points: int | None,
    size: int | None,
    max_frames: int | None,
    delay_ms: int | None,
    rotation_step: float | None,
    theme: str | None,
) -> AnimationSettings:
    """Environment settings with any command-line overrides applied."""
    overrides = {
        "num_points": num_points,
        "size": size,
        "max_frames": max_frames,
        "delay_ms": delay_ms,
        "rotation_step": rotation_step,
        "theme": theme,
    }
    try:
        settings = AnimationSettings.from_env()
        return replace(settings, **{k: v for k, v in overrides.items() if v is not None})
    except ValueError as e:
        raise CLIError(str(e))


def _create_animator(num_points: int) -> PolygonAnimator:
    try:
        return PolygonAnimator.create(num_points)
    except InvalidArgumentError as e:
        raise CLIError(str(e))


def _generate_output(animator: PolygonAnimator, settings: AnimationSettings, output_path: str) -> None:
    """Generate animation in the format specified by output_path."""
    try:
        provider = resolve_output_provider(output_path)
    except ValueError as e:
        raise CLIError(str(e))

    # GIF stores delays in hundredths of a second
    if output_path.lower().endswith(".gif") and settings.delay_ms < 20:
        console.print(
            f"[yellow]Warning:[/yellow] delays below 20ms may not display correctly in browsers "
            f"(requested {settings.delay_ms}ms)"
        )

    ext = Path(output_path).suffix[1:].upper()
    console.print(f"\n[bold blue]Generating {ext} animation...[/bold blue]")
    try:
        encoded = encode_animation(animator, settings, output_path, provider=provider)
        console.print(f"[bold blue]Saving to {output_path}...[/bold blue]")
        provider.write(encoded)
    except (OSError, ValueError) as e:
        raise CLIError(f"Failed to generate output: {e}")
    console.print(f"[green]✓[/green] {ext} saved to {output_path}")


app = typer.Typer()
app.command()(main)

if __name__ == "__main__":
    app()

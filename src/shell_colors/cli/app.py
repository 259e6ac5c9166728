"""Typer CLI application for inspecting color specifications."""

import logging
import sys
from typing import Annotated

import typer
from rich.color import Color as RichColor
from rich.console import Console
from rich.markup import escape
from rich.style import Style
from rich.text import Text

from shell_colors.core.color import Color, ColorMode
from shell_colors.core.table import list_names, lookup

logger = logging.getLogger(__name__)

MODE_ENVVAR = "SHELL_COLORS_MODE"

_log_handler: logging.Handler | None = None


def setup_logging(verbose: int) -> None:
    """
    Configure logging on stderr.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
    """
    if verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    global _log_handler
    # Replace the handler from any earlier call; sys.stderr may have changed since
    root_logger = logging.getLogger()
    if _log_handler is not None:
        root_logger.removeHandler(_log_handler)
    _log_handler = logging.StreamHandler(sys.stderr)
    _log_handler.setFormatter(formatter)
    root_logger.addHandler(_log_handler)
    root_logger.setLevel(level)

    logger.debug("Logging configured: level=%s", logging.getLevelName(level))


def format_value(value: int | tuple[int, int, int]) -> str:
    """Render a palette index or RGB triple for display."""
    if isinstance(value, tuple):
        return ",".join(str(c) for c in value)
    return str(value)


def swatch_style(color: Color) -> Style | None:
    """Rich style that paints a sample of a real color, if it has one."""
    if color.is_rgb():
        return Style(bgcolor=RichColor.from_rgb(*color.to_rgb24()))
    if color.is_named():
        return Style(bgcolor=RichColor.from_ansi(color.to_palette16_index()))
    return None


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="shell-colors",
        help="Resolve shell color specifications to terminal color values.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console()

    @app.callback()
    def options(
        verbose: Annotated[int, typer.Option("--verbose", "-v", count=True, help="Increase log verbosity")] = 0,
    ) -> None:
        setup_logging(verbose)

    @app.command()
    def describe(
        specs: Annotated[list[str], typer.Argument(help="Color specifications, e.g. red, FA3, '#f3a035'")],
        mode: Annotated[ColorMode, typer.Option("--mode", "-m", envvar=MODE_ENVVAR, help="Terminal color depth")] = ColorMode.TRUE_COLOR,
    ) -> None:
        """Show how each color specification resolves."""
        failed = 0
        for spec in specs:
            color = Color.parse(spec)
            if color.is_none():
                console.print(f"[red]Unknown color '{escape(spec)}'[/]")
                failed += 1
                continue

            line = Text(f"{spec}: {color.description()}")
            if not color.is_special():
                line.append(f" -> {format_value(color.for_mode(mode))}")
            style = swatch_style(color)
            if style is not None:
                line.append("  ")
                line.append("    ", style=style)
            console.print(line)

        logger.info("Described %d color(s), %d unknown", len(specs), failed)
        if failed:
            raise typer.Exit(1)

    @app.command("print-colors")
    def print_colors(
        show_all: Annotated[bool, typer.Option("--all", "-a", help="Include hidden aliases")] = False,
    ) -> None:
        """List the supported color names."""
        for name in list_names(include_hidden=show_all):
            entry = lookup(name)
            if entry is None:
                console.print(name, highlight=False)
            else:
                console.print(name, style=Style(color=RichColor.from_ansi(entry.index)), highlight=False)

    return app

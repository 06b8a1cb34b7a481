"""Typer CLI application."""

import logging
import sys
from contextlib import contextmanager
from typing import Annotated, Iterator, Optional, TextIO

import typer
from rich.console import Console

from ansi_swatch.blend import BlendMode, blend
from ansi_swatch.config import Config
from ansi_swatch.core.brush import ColorMode
from ansi_swatch.core.color import Color, parse_color
from ansi_swatch.render.swatch import Blend, Output, Solid

logger = logging.getLogger("ansi_swatch")

PaddingOption = Annotated[int, typer.Option("--padding", "-p", min=0, help="Left margin of the swatch in columns")]
ColorModeOption = Annotated[
    Optional[ColorMode],
    typer.Option("--color-mode", help="Terminal color mode (default: detect from COLORTERM)"),
]
ForceColorOption = Annotated[
    Optional[bool],
    typer.Option("--force-color/--no-color", help="Force or disable the swatch view (default: only on a terminal)"),
]
VerboseOption = Annotated[bool, typer.Option("--verbose", "-v", help="Log debug output to stderr")]


@contextmanager
def output_sink() -> Iterator[TextIO]:
    """Standard output, flushed however the block exits."""
    handle = sys.stdout
    try:
        yield handle
    finally:
        handle.flush()


def _configure_logging(verbose: bool) -> None:
    if not verbose or logger.handlers:
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="ansi-swatch",
        help="Show colors and color blends as terminal swatches.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console(stderr=True)

    def parse_or_exit(text: str) -> Color:
        try:
            return parse_color(text)
        except ValueError as e:
            console.print(f"[red]{e}[/]")
            raise typer.Exit(1)

    @app.command()
    def show(
        colors: Annotated[list[str], typer.Argument(help="Colors to show (name, hex, rgb(), hsl())")],
        padding: PaddingOption = 2,
        color_mode: ColorModeOption = None,
        force_color: ForceColorOption = None,
        verbose: VerboseOption = False,
    ) -> None:
        """Show one swatch per color."""
        _configure_logging(verbose)
        parsed = [parse_or_exit(text) for text in colors]

        with output_sink() as handle:
            config = Config.from_environment(handle, force_color, color_mode, padding)
            out = Output(handle)
            for color in parsed:
                out.show(config, Solid(color))

    @app.command(name="blend")
    def blend_command(
        backdrop: Annotated[str, typer.Argument(help="Color underneath")],
        source: Annotated[str, typer.Argument(help="Color on top")],
        mode: Annotated[
            BlendMode,
            typer.Option("--mode", "-m", case_sensitive=False, help="Blend mode"),
        ] = BlendMode.MULTIPLY,
        padding: PaddingOption = 2,
        color_mode: ColorModeOption = None,
        force_color: ForceColorOption = None,
        verbose: VerboseOption = False,
    ) -> None:
        """Blend SOURCE onto BACKDROP and show the result."""
        _configure_logging(verbose)
        backdrop_color = parse_or_exit(backdrop)
        source_color = parse_or_exit(source)
        output = blend(mode, backdrop_color, source_color)

        with output_sink() as handle:
            config = Config.from_environment(handle, force_color, color_mode, padding)
            Output(handle).show(config, Blend(backdrop_color, source_color, output))

    @app.command()
    def modes() -> None:
        """List the available blend modes."""
        for mode in BlendMode:
            print(mode.value)

    return app

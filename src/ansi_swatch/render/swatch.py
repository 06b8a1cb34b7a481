"""Render colors and blends as terminal swatches.

A swatch is a transparency checkerboard with a color panel centered on
it, followed by a text column holding the color's name, its hex, RGB and
HSL forms and the closest named colors. When not writing to a terminal
the swatch collapses to one line of text.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TextIO, Union

from ansi_swatch.config import Config
from ansi_swatch.core.canvas import Canvas
from ansi_swatch.core.color import Color, Format
from ansi_swatch.names import similar_colors

logger = logging.getLogger(__name__)

CHECKERBOARD_SIZE = 16
COLOR_PANEL_SIZE = 12
CANVAS_WIDTH = 60
CHECKERBOARD_DARK = Color.graytone(0.94)
CHECKERBOARD_LIGHT = Color.graytone(0.71)
SIMILAR_COUNT = 3


@dataclass(frozen=True)
class Solid:
    """A single color."""
    color: Color


@dataclass(frozen=True)
class Blend:
    """A backdrop, a source on top of it, and their precomputed blend."""
    backdrop: Color
    source: Color
    output: Color


ColorBlock = Union[Solid, Blend]


def primary_color(block: ColorBlock) -> Color:
    """The color that represents a block in text."""
    if isinstance(block, Solid):
        return block.color
    return block.output


def paint(block: ColorBlock, canvas: Canvas, row: int, col: int, height: int, width: int) -> None:
    """Draw a block into the panel rectangle at (row, col).

    A blend is drawn as two offset squares: the backdrop shows along the
    top and left edges, the source along the bottom and right edges, and
    the blended output fills the overlap between them.
    """
    if isinstance(block, Solid):
        canvas.fill_rect(row, col, height, width, block.color)
        return

    inner_height = max(0, height - 2)
    inner_width = max(0, width - 2)

    # backdrop
    canvas.fill_rect(row, col, 1, width - 1, block.backdrop)
    canvas.fill_rect(row + 1, col, inner_height, 1, block.backdrop)

    # source
    canvas.fill_rect(row + height - 1, col + 1, 1, width - 1, block.source)
    canvas.fill_rect(row + 1, col + width - 1, inner_height, 1, block.source)

    # overlap
    canvas.fill_rect(row + 1, col + 1, inner_height, inner_width, block.output)


class Output:
    """Writes swatches to a text stream, one per color shown."""

    def __init__(self, handle: TextIO):
        self.handle = handle
        self.colors_shown = 0

    def show_color_tty(self, config: Config, block: ColorBlock) -> None:
        """Draw the full swatch for ``block`` and write it out."""
        color = primary_color(block)

        checkerboard_y = 0
        checkerboard_x = config.padding
        panel_offset = (CHECKERBOARD_SIZE - COLOR_PANEL_SIZE) // 2
        panel_y = checkerboard_y + panel_offset
        panel_x = config.padding + panel_offset
        text_x = CHECKERBOARD_SIZE + 2 * config.padding
        text_y = 0

        canvas = Canvas(CHECKERBOARD_SIZE, CANVAS_WIDTH, config.brush)
        canvas.draw_checkerboard(
            checkerboard_y,
            checkerboard_x,
            CHECKERBOARD_SIZE,
            CHECKERBOARD_SIZE,
            CHECKERBOARD_DARK,
            CHECKERBOARD_LIGHT,
        )
        logger.debug("painting panel at row=%d col=%d size=%d", panel_y, panel_x, COLOR_PANEL_SIZE)
        paint(block, canvas, panel_y, panel_x, COLOR_PANEL_SIZE, COLOR_PANEL_SIZE)

        text_y_offset = 0
        for i, nc in enumerate(similar_colors(color)[:SIMILAR_COUNT]):
            if nc.color == color:
                canvas.draw_text(text_y, text_x, f"Name: {nc.name}")
                text_y_offset = 2
                continue

            canvas.draw_text(text_y + 10 + 2 * i, text_x + 7, nc.name)
            canvas.fill_rect(text_y + 10 + 2 * i, text_x + 1, 2, 5, nc.color)

        canvas.draw_text(text_y + text_y_offset, text_x, f"Hex: {color.to_hex_string()}")
        canvas.draw_text(text_y + 2 + text_y_offset, text_x, f"RGB: {color.to_rgb_string(Format.SPACES)}")
        canvas.draw_text(text_y + 4 + text_y_offset, text_x, f"HSL: {color.to_hsl_string(Format.SPACES)}")
        canvas.draw_text(text_y + 8 + text_y_offset, text_x, "Most similar:")

        canvas.print(self.handle)

    def show(self, config: Config, block: ColorBlock) -> None:
        """Write one block, as a swatch in interactive mode or as a text line otherwise."""
        if config.interactive_mode:
            if self.colors_shown < 1:
                self.handle.write('\n')
            self.show_color_tty(config, block)
            self.handle.write('\n')
        else:
            self.handle.write(primary_color(block).to_hsl_string(Format.NO_SPACES) + '\n')
        self.colors_shown += 1

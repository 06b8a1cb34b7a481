"""Canvas - half-block pixel grid with a text layer for terminal output."""

from __future__ import annotations

from typing import Iterator, Optional, TextIO

from ansi_swatch.core.brush import Brush
from ansi_swatch.core.color import Color
from ansi_swatch.core.constants import CSI, LOWER_HALF, RESET, UPPER_HALF


class Canvas:
    """
    A grid of pixels rendered two-per-cell with half-block characters.

    Rows and heights are measured in pixels, so a canvas of height 16
    prints as 8 terminal lines. Each terminal cell can represent two
    pixels vertically:

    - UPPER_HALF: foreground = top pixel, background = bottom pixel
    - LOWER_HALF: foreground = bottom pixel, no background
    - Space: nothing painted

    Text lives on a separate layer addressed by pixel row; a character
    placed at pixel row ``r`` occupies terminal line ``r // 2`` and hides
    any pixels beneath it.
    """

    def __init__(self, height: int, width: int, brush: Brush):
        """
        Initialize an empty canvas.

        Args:
            height: Height in pixels (2x terminal rows)
            width: Width in columns (characters)
            brush: Encodes pixel colors as SGR sequences
        """
        self.height = height
        self.width = width
        self.brush = brush
        self._pixels: list[list[Optional[Color]]] = [
            [None for _ in range(width)] for _ in range(height)
        ]
        self._chars: list[list[Optional[str]]] = [
            [None for _ in range(width)] for _ in range(self.terminal_height)
        ]

    @property
    def terminal_height(self) -> int:
        """Height in terminal rows (half of pixel height)."""
        return (self.height + 1) // 2

    def pixel(self, row: int, col: int) -> Optional[Color]:
        """Color painted at a pixel, or None if untouched."""
        return self._pixels[row][col]

    def char(self, line: int, col: int) -> Optional[str]:
        """Character on the text layer at a terminal line, or None."""
        return self._chars[line][col]

    def fill_rect(self, row: int, col: int, height: int, width: int, color: Color) -> None:
        """Fill a rectangular region with a color, clipped to the canvas."""
        for y in range(max(0, row), min(self.height, row + height)):
            for x in range(max(0, col), min(self.width, col + width)):
                self._pixels[y][x] = color

    def draw_checkerboard(
        self,
        row: int,
        col: int,
        height: int,
        width: int,
        dark: Color,
        light: Color,
    ) -> None:
        """Fill a region with alternating single-pixel squares."""
        for y in range(max(0, row), min(self.height, row + height)):
            for x in range(max(0, col), min(self.width, col + width)):
                self._pixels[y][x] = dark if ((y - row) + (x - col)) % 2 == 0 else light

    def draw_text(self, row: int, col: int, text: str) -> None:
        """Put a string on the text layer starting at a pixel row."""
        line = row // 2
        if not 0 <= line < self.terminal_height:
            return
        for i, char in enumerate(text):
            if col + i < 0:
                continue
            if col + i >= self.width:
                break
            self._chars[line][col + i] = char

    def lines(self) -> Iterator[str]:
        """Yield each terminal line as an ANSI string."""
        for line in range(self.terminal_height):
            parts: list[str] = []
            styled = False
            for x in range(self.width):
                char = self._chars[line][x]
                if char is not None:
                    if styled:
                        parts.append(RESET)
                        styled = False
                    parts.append(char)
                    continue

                top = self._pixels[2 * line][x]
                bottom = self._pixels[2 * line + 1][x] if 2 * line + 1 < self.height else None

                if top is None and bottom is None:
                    if styled:
                        parts.append(RESET)
                        styled = False
                    parts.append(' ')
                elif top is not None and bottom is not None:
                    parts.append(f"{CSI}{self.brush.fg(top)};{self.brush.bg(bottom)}m{UPPER_HALF}")
                    styled = True
                elif top is not None:
                    if styled:
                        parts.append(RESET)
                    parts.append(f"{CSI}{self.brush.fg(top)}m{UPPER_HALF}")
                    styled = True
                else:
                    assert bottom is not None
                    if styled:
                        parts.append(RESET)
                    parts.append(f"{CSI}{self.brush.fg(bottom)}m{LOWER_HALF}")
                    styled = True

            # Reset at end of each line to prevent color bleeding into clear-to-EOL
            if styled:
                parts.append(RESET)
            yield ''.join(parts).rstrip(' ')

    def render(self) -> str:
        """Render canvas to an ANSI string."""
        return '\n'.join(self.lines())

    def print(self, handle: TextIO) -> None:
        """Write every terminal line, newline-terminated, to a text stream."""
        for line in self.lines():
            handle.write(line + '\n')

"""Brush - encodes colors as SGR parameters for a terminal color mode."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import Mapping

from ansi_swatch.core.color import Color


class ColorMode(Enum):
    """Color mode for ANSI sequences."""
    STANDARD_16 = "16"      # Standard 16-color (SGR 30-37, 40-47, 90-97, 100-107)
    EXTENDED_256 = "256"    # Extended 256-color (SGR 38;5;n, 48;5;n)
    TRUE_COLOR = "rgb"      # 24-bit true color (SGR 38;2;r;g;b, 48;2;r;g;b)


# Standard 16-color ANSI palette RGB values
ANSI_16_PALETTE = [
    (0, 0, 0), (170, 0, 0), (0, 170, 0), (170, 85, 0),
    (0, 0, 170), (170, 0, 170), (0, 170, 170), (170, 170, 170),
    (85, 85, 85), (255, 85, 85), (85, 255, 85), (255, 255, 85),
    (85, 85, 255), (255, 85, 255), (85, 255, 255), (255, 255, 255),
]

# Channel levels of the xterm 6x6x6 color cube
_CUBE_LEVELS = (0, 95, 135, 175, 215, 255)


def _squared_distance(c1: tuple[int, int, int], c2: tuple[int, int, int]) -> int:
    return (c1[0] - c2[0]) ** 2 + (c1[1] - c2[1]) ** 2 + (c1[2] - c2[2]) ** 2


def _nearest_cube_level(value: int) -> int:
    return min(range(6), key=lambda i: abs(_CUBE_LEVELS[i] - value))


def to_ansi_256(rgb: tuple[int, int, int]) -> int:
    """Nearest xterm-256 index, choosing between the color cube and the gray ramp."""
    r, g, b = (_nearest_cube_level(c) for c in rgb)
    cube_index = 16 + 36 * r + 6 * g + b
    cube_rgb = (_CUBE_LEVELS[r], _CUBE_LEVELS[g], _CUBE_LEVELS[b])

    average = sum(rgb) // 3
    gray_step = max(0, min(23, (average - 8) // 10))
    gray_value = 8 + 10 * gray_step
    gray_index = 232 + gray_step

    if _squared_distance(rgb, (gray_value,) * 3) < _squared_distance(rgb, cube_rgb):
        return gray_index
    return cube_index


def to_ansi_16(rgb: tuple[int, int, int]) -> int:
    """Nearest index (0-15) in the standard 16-color palette."""
    return min(range(16), key=lambda i: _squared_distance(rgb, ANSI_16_PALETTE[i]))


@dataclass(frozen=True)
class Brush:
    """Turns colors into SGR parameter strings for one color mode."""
    mode: ColorMode = ColorMode.TRUE_COLOR

    @classmethod
    def from_environment(cls, environ: Mapping[str, str] | None = None) -> Brush:
        """Pick true color when COLORTERM advertises it, 256 colors otherwise."""
        environ = os.environ if environ is None else environ
        if environ.get("COLORTERM", "").lower() in ("truecolor", "24bit"):
            return cls(ColorMode.TRUE_COLOR)
        return cls(ColorMode.EXTENDED_256)

    def fg(self, color: Color) -> str:
        """Return SGR parameters for foreground color."""
        if self.mode == ColorMode.STANDARD_16:
            index = to_ansi_16(color.rgb)
            return str(30 + index) if index < 8 else str(90 + index - 8)
        elif self.mode == ColorMode.EXTENDED_256:
            return f"38;5;{to_ansi_256(color.rgb)}"
        else:  # TRUE_COLOR
            return f"38;2;{color.r};{color.g};{color.b}"

    def bg(self, color: Color) -> str:
        """Return SGR parameters for background color."""
        if self.mode == ColorMode.STANDARD_16:
            index = to_ansi_16(color.rgb)
            return str(40 + index) if index < 8 else str(100 + index - 8)
        elif self.mode == ColorMode.EXTENDED_256:
            return f"48;5;{to_ansi_256(color.rgb)}"
        else:  # TRUE_COLOR
            return f"48;2;{color.r};{color.g};{color.b}"

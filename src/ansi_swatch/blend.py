"""Blend modes for two overlapping, partially transparent colors.

Each mode combines the red, green and blue channels of a backdrop and a
source color independently. Alpha is always the plain mean of the two
input alphas, whatever the mode. See
https://www.w3.org/TR/compositing/#blending for the channel formulas.
"""

from __future__ import annotations

import logging
from enum import Enum

from ansi_swatch.core.color import Color

logger = logging.getLogger(__name__)


class BlendMode(str, Enum):
    """How a source channel combines with the backdrop channel beneath it."""
    MULTIPLY = "multiply"
    SCREEN = "screen"
    OVERLAY = "overlay"

    @classmethod
    def parse(cls, name: str) -> BlendMode:
        """Look up a mode by name, ignoring case."""
        try:
            return cls(name.strip().lower())
        except ValueError:
            valid = ", ".join(mode.value for mode in cls)
            raise ValueError(f"Unknown blend mode: {name!r} (expected one of {valid})") from None


def blend_channel(mode: BlendMode, backdrop: int, source: int) -> int:
    """Combine one 8-bit channel. Float results are truncated, not rounded."""
    if mode is BlendMode.MULTIPLY:
        return (backdrop * source) // 255

    b = backdrop / 255.0
    s = source / 255.0
    if mode is BlendMode.SCREEN:
        return int((1.0 - (1.0 - b) * (1.0 - s)) * 255.0)
    elif mode is BlendMode.OVERLAY:
        if b < 0.5:
            return int((2.0 * b * s) * 255.0)
        return int((1.0 - 2.0 * (1.0 - b) * (1.0 - s)) * 255.0)
    raise AssertionError(f"Unhandled blend mode: {mode!r}")


def blend(mode: BlendMode, backdrop: Color, source: Color) -> Color:
    """Blend ``source`` onto ``backdrop`` channel by channel."""
    result = Color.from_rgba(
        blend_channel(mode, backdrop.r, source.r),
        blend_channel(mode, backdrop.g, source.g),
        blend_channel(mode, backdrop.b, source.b),
        (backdrop.alpha + source.alpha) / 2.0,
    )
    logger.debug(
        "%s blend of %s and %s -> %s",
        mode.value,
        backdrop.to_hex_string(),
        source.to_hex_string(),
        result.to_hex_string(),
    )
    return result


apply = blend

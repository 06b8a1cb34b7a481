"""
ansi-swatch: terminal color swatches and blend modes

Show colors, and the result of blending one color onto another, as small
half-block swatches in a terminal.

Quick Start:
    >>> import ansi_swatch as swatch
    >>> red = swatch.parse_color("red")
    >>> blue = swatch.parse_color("#0000ff")
    >>> swatch.blend(swatch.BlendMode.SCREEN, red, blue).to_hex_string()
    '#ff00ff'

Features:
    - Multiply, screen and overlay blending per 8-bit channel
    - Checkerboard swatches with hex/RGB/HSL readouts
    - Nearest CSS color names
    - True color, 256-color and 16-color output
"""

__version__ = "0.1.0"

# Core types
from ansi_swatch.core.brush import Brush, ColorMode
from ansi_swatch.core.canvas import Canvas
from ansi_swatch.core.color import Color, Format, parse_color

# Blending
from ansi_swatch.blend import BlendMode, blend

# Rendering
from ansi_swatch.config import Config
from ansi_swatch.render.swatch import Blend, Output, Solid

__all__ = [
    # Version
    "__version__",
    # Core types
    "Brush",
    "Canvas",
    "Color",
    "ColorMode",
    "Format",
    "parse_color",
    # Blending
    "BlendMode",
    "blend",
    # Rendering
    "Config",
    "Blend",
    "Output",
    "Solid",
]

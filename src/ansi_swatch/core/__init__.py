"""Core data structures for color swatches."""

from ansi_swatch.core.brush import Brush, ColorMode
from ansi_swatch.core.canvas import Canvas
from ansi_swatch.core.color import Color, Format, parse_color

__all__ = ["Brush", "Canvas", "Color", "ColorMode", "Format", "parse_color"]

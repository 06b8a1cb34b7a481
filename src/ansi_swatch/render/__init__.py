"""Renderers for writing colors to a terminal."""

from ansi_swatch.render.swatch import Blend, ColorBlock, Output, Solid, paint, primary_color

__all__ = ["Blend", "ColorBlock", "Output", "Solid", "paint", "primary_color"]

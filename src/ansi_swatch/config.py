"""Rendering configuration shared by the CLI and the swatch renderer."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional, TextIO

from ansi_swatch.core.brush import Brush, ColorMode


@dataclass
class Config:
    """
    How swatches are drawn.

    ``padding`` is the left margin in columns, ``brush`` encodes colors for
    the terminal, and ``interactive_mode`` selects the rich swatch over the
    one-line text form.
    """
    padding: int = 2
    brush: Brush = field(default_factory=Brush)
    interactive_mode: bool = True

    @classmethod
    def from_environment(
        cls,
        stream: TextIO,
        force_color: Optional[bool] = None,
        color_mode: Optional[ColorMode] = None,
        padding: int = 2,
        environ: Optional[Mapping[str, str]] = None,
    ) -> Config:
        """Build a config for writing to ``stream``.

        Interactive mode follows ``stream.isatty()`` unless ``force_color``
        is given. ``NO_COLOR`` turns interactive mode off when not forced.
        """
        environ = os.environ if environ is None else environ

        if force_color is not None:
            interactive = force_color
        elif environ.get("NO_COLOR"):
            interactive = False
        else:
            isatty = getattr(stream, "isatty", None)
            interactive = bool(isatty and isatty())

        brush = Brush(color_mode) if color_mode is not None else Brush.from_environment(environ)
        return cls(padding=padding, brush=brush, interactive_mode=interactive)

"""Shared fixtures for ansi-swatch tests."""

import io

import pytest

from ansi_swatch.core.brush import Brush, ColorMode
from ansi_swatch.core.canvas import Canvas
from ansi_swatch.core.color import Color


class RecordingCanvas(Canvas):
    """Canvas that records every drawing call in order."""

    def __init__(self, height: int, width: int, brush: Brush):
        super().__init__(height, width, brush)
        self.calls: list[tuple] = []

    def fill_rect(self, row, col, height, width, color) -> None:
        self.calls.append(("fill_rect", row, col, height, width, color))
        super().fill_rect(row, col, height, width, color)

    def draw_checkerboard(self, row, col, height, width, dark, light) -> None:
        self.calls.append(("draw_checkerboard", row, col, height, width))
        super().draw_checkerboard(row, col, height, width, dark, light)

    def draw_text(self, row, col, text) -> None:
        self.calls.append(("draw_text", row, col, text))
        super().draw_text(row, col, text)

    def print(self, handle) -> None:
        self.calls.append(("print",))
        super().print(handle)


class TtyStream(io.StringIO):
    """StringIO that claims to be a terminal."""

    def isatty(self) -> bool:
        return True


@pytest.fixture
def red() -> Color:
    return Color.from_rgb(255, 0, 0)


@pytest.fixture
def blue() -> Color:
    return Color.from_rgb(0, 0, 255)


@pytest.fixture
def brush() -> Brush:
    return Brush(ColorMode.TRUE_COLOR)


@pytest.fixture
def recording_canvas(brush: Brush) -> RecordingCanvas:
    return RecordingCanvas(10, 10, brush)


@pytest.fixture
def tty_stream() -> TtyStream:
    return TtyStream()


@pytest.fixture
def recorded_canvases(monkeypatch: pytest.MonkeyPatch) -> list[RecordingCanvas]:
    """Make the swatch renderer draw on RecordingCanvas instances and collect them."""
    from ansi_swatch.render import swatch

    canvases: list[RecordingCanvas] = []

    def make_canvas(height: int, width: int, brush: Brush) -> RecordingCanvas:
        canvas = RecordingCanvas(height, width, brush)
        canvases.append(canvas)
        return canvas

    monkeypatch.setattr(swatch, "Canvas", make_canvas)
    return canvases

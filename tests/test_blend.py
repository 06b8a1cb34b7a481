"""Tests for blend modes."""

import math

import pytest

from ansi_swatch.blend import BlendMode, apply, blend, blend_channel
from ansi_swatch.core.color import Color

CHANNELS = range(256)
SAMPLED = range(0, 256, 5)


class TestBlendMode:
    """Tests for mode selection."""

    @pytest.mark.parametrize("name,mode", [
        ("multiply", BlendMode.MULTIPLY),
        ("SCREEN", BlendMode.SCREEN),
        (" Overlay ", BlendMode.OVERLAY),
    ])
    def test_parse(self, name: str, mode: BlendMode) -> None:
        assert BlendMode.parse(name) is mode

    def test_parse_unknown(self) -> None:
        with pytest.raises(ValueError, match="Unknown blend mode"):
            BlendMode.parse("darken")

    def test_closed_set(self) -> None:
        assert [mode.value for mode in BlendMode] == ["multiply", "screen", "overlay"]


class TestBlendChannel:
    """Tests for the per-channel formulas."""

    def test_multiply_floors(self) -> None:
        for b in SAMPLED:
            for s in SAMPLED:
                result = blend_channel(BlendMode.MULTIPLY, b, s)
                assert result == math.floor(b * s / 255)
                assert 0 <= result <= 255

    def test_multiply_values(self) -> None:
        assert blend_channel(BlendMode.MULTIPLY, 128, 128) == 64
        assert blend_channel(BlendMode.MULTIPLY, 255, 77) == 77
        assert blend_channel(BlendMode.MULTIPLY, 0, 200) == 0

    def test_screen_commutative(self) -> None:
        for b in CHANNELS:
            for s in CHANNELS:
                assert blend_channel(BlendMode.SCREEN, b, s) == blend_channel(BlendMode.SCREEN, s, b)

    def test_screen_truncates(self) -> None:
        # 255 * (1 - (55/255) * (155/255)) = 221.57
        assert blend_channel(BlendMode.SCREEN, 200, 100) == 221
        assert blend_channel(BlendMode.SCREEN, 255, 0) == 255

    def test_overlay_below_threshold(self) -> None:
        b = 127 / 255.0
        for s in CHANNELS:
            expected = int((2.0 * b * (s / 255.0)) * 255.0)
            assert blend_channel(BlendMode.OVERLAY, 127, s) == expected

    def test_overlay_at_threshold(self) -> None:
        # 128 normalises to 0.50196, so it always takes the upper branch
        b = 128 / 255.0
        for s in CHANNELS:
            expected = int((1.0 - 2.0 * (1.0 - b) * (1.0 - s / 255.0)) * 255.0)
            assert blend_channel(BlendMode.OVERLAY, 128, s) == expected

    def test_overlay_extremes(self) -> None:
        assert blend_channel(BlendMode.OVERLAY, 0, 255) == 0
        assert blend_channel(BlendMode.OVERLAY, 255, 255) == 255
        assert blend_channel(BlendMode.OVERLAY, 255, 0) == 255

    @pytest.mark.parametrize("mode", list(BlendMode))
    def test_results_in_range(self, mode: BlendMode) -> None:
        for b in SAMPLED:
            for s in SAMPLED:
                assert 0 <= blend_channel(mode, b, s) <= 255


class TestBlend:
    """Tests for whole-color blending."""

    def test_multiply_red_blue(self, red: Color, blue: Color) -> None:
        result = blend(BlendMode.MULTIPLY, red, blue)
        assert result.rgb == (0, 0, 0)
        assert result.alpha == 1.0

    def test_screen_grays(self) -> None:
        result = blend(BlendMode.SCREEN, Color.from_rgb(200, 200, 200), Color.from_rgb(100, 100, 100))
        assert result.rgb == (221, 221, 221)

    def test_screen_red_blue(self, red: Color, blue: Color) -> None:
        assert blend(BlendMode.SCREEN, red, blue).rgb == (255, 0, 255)

    def test_channels_are_independent(self) -> None:
        backdrop = Color.from_rgb(10, 128, 250)
        source = Color.from_rgb(200, 60, 90)
        result = blend(BlendMode.OVERLAY, backdrop, source)
        assert result.rgb == (
            blend_channel(BlendMode.OVERLAY, 10, 200),
            blend_channel(BlendMode.OVERLAY, 128, 60),
            blend_channel(BlendMode.OVERLAY, 250, 90),
        )

    @pytest.mark.parametrize("mode", list(BlendMode))
    @pytest.mark.parametrize("a1,a2", [(1.0, 1.0), (0.2, 0.6), (0.0, 1.0), (0.5, 0.25)])
    def test_alpha_is_mean(self, mode: BlendMode, a1: float, a2: float) -> None:
        result = blend(mode, Color.from_rgba(90, 30, 200, a1), Color.from_rgba(10, 250, 40, a2))
        assert result.alpha == (a1 + a2) / 2

    def test_apply_alias(self) -> None:
        assert apply is blend

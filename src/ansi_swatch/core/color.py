"""Color value type with RGB/HSL/Lab views and text formats."""

from __future__ import annotations

import colorsys
import re
from dataclasses import dataclass
from enum import Enum


class Format(Enum):
    """Spacing style for textual color representations."""
    SPACES = "spaces"
    NO_SPACES = "no-spaces"


# D65 reference white
_REF_X, _REF_Y, _REF_Z = 95.047, 100.0, 108.883

_FUNC_PATTERN = re.compile(r'^(rgba?|hsla?)\((.*)\)$')
_TRIPLE_PATTERN = re.compile(r'^(\d+)[,\s]+(\d+)[,\s]+(\d+)$')


@dataclass(frozen=True)
class Color:
    """
    An sRGB color with an alpha channel.

    Channels are 8-bit integers, alpha is a float in [0.0, 1.0].
    Instances are immutable; every conversion returns a new Color.
    """
    r: int
    g: int
    b: int
    alpha: float = 1.0

    def __post_init__(self) -> None:
        if not all(0 <= c <= 255 for c in (self.r, self.g, self.b)):
            raise ValueError(f"RGB values must be 0-255, got ({self.r}, {self.g}, {self.b})")
        if not 0.0 <= self.alpha <= 1.0:
            raise ValueError(f"Alpha must be 0.0-1.0, got {self.alpha}")

    @classmethod
    def from_rgba(cls, r: int, g: int, b: int, alpha: float = 1.0) -> Color:
        """Create a Color from RGBA values."""
        return cls(int(r), int(g), int(b), float(alpha))

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> Color:
        """Create an opaque Color from RGB values."""
        return cls.from_rgba(r, g, b)

    @classmethod
    def from_hsl(cls, h: float, s: float, l: float, alpha: float = 1.0) -> Color:
        """Create a Color from HSL (h in degrees, s and l in 0-1)."""
        h_norm = (h % 360) / 360
        s_norm = max(0.0, min(1.0, s))
        l_norm = max(0.0, min(1.0, l))
        r, g, b = colorsys.hls_to_rgb(h_norm, l_norm, s_norm)
        return cls.from_rgba(round(r * 255), round(g * 255), round(b * 255), alpha)

    @classmethod
    def graytone(cls, lightness: float) -> Color:
        """A neutral gray of the given lightness (0 = black, 1 = white)."""
        return cls.from_hsl(0.0, 0.0, lightness)

    @classmethod
    def from_hex(cls, hex_str: str) -> Color:
        """Create a Color from #rgb, #rrggbb or #rrggbbaa."""
        text = hex_str.strip().lstrip('#')
        if len(text) == 3:
            # Short form: F0F -> FF00FF
            text = text[0] * 2 + text[1] * 2 + text[2] * 2
        if len(text) not in (6, 8):
            raise ValueError(f"Invalid hex color: {hex_str!r}")
        try:
            channels = [int(text[i:i + 2], 16) for i in range(0, len(text), 2)]
        except ValueError:
            raise ValueError(f"Invalid hex color: {hex_str!r}") from None
        alpha = channels[3] / 255 if len(channels) == 4 else 1.0
        return cls.from_rgba(channels[0], channels[1], channels[2], alpha)

    @property
    def rgb(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    @property
    def hsl(self) -> tuple[float, float, float]:
        """Hue in degrees, saturation and lightness in 0-1."""
        h, l, s = colorsys.rgb_to_hls(self.r / 255, self.g / 255, self.b / 255)
        return (h * 360, s, l)

    @property
    def lab(self) -> tuple[float, float, float]:
        """CIE L*a*b* coordinates under D65."""
        r, g, b = (_srgb_to_linear(c) for c in self.rgb)
        x = (0.4124564 * r + 0.3575761 * g + 0.1804375 * b) * 100
        y = (0.2126729 * r + 0.7151522 * g + 0.0721750 * b) * 100
        z = (0.0193339 * r + 0.1191920 * g + 0.9503041 * b) * 100
        fx = _lab_f(x / _REF_X)
        fy = _lab_f(y / _REF_Y)
        fz = _lab_f(z / _REF_Z)
        return (116.0 * fy - 16.0, 500.0 * (fx - fy), 200.0 * (fy - fz))

    def distance(self, other: Color) -> float:
        """Perceptual distance (CIE76 delta E) to another color."""
        l1, a1, b1 = self.lab
        l2, a2, b2 = other.lab
        return ((l1 - l2) ** 2 + (a1 - a2) ** 2 + (b1 - b2) ** 2) ** 0.5

    def to_hex_string(self, leading_hash: bool = True) -> str:
        prefix = "#" if leading_hash else ""
        return f"{prefix}{self.r:02x}{self.g:02x}{self.b:02x}"

    def to_rgb_string(self, fmt: Format = Format.SPACES) -> str:
        sep = _separator(fmt)
        if self.alpha < 1.0:
            return f"rgba({self.r},{sep}{self.g},{sep}{self.b},{sep}{_alpha_str(self.alpha)})"
        return f"rgb({self.r},{sep}{self.g},{sep}{self.b})"

    def to_hsl_string(self, fmt: Format = Format.SPACES) -> str:
        sep = _separator(fmt)
        h, s, l = self.hsl
        body = f"{h:.0f},{sep}{s * 100:.1f}%,{sep}{l * 100:.1f}%"
        if self.alpha < 1.0:
            return f"hsla({body},{sep}{_alpha_str(self.alpha)})"
        return f"hsl({body})"


def _separator(fmt: Format) -> str:
    return " " if fmt is Format.SPACES else ""


def _alpha_str(alpha: float) -> str:
    return f"{alpha:.2f}".rstrip('0').rstrip('.') or "0"


def _srgb_to_linear(c: int) -> float:
    v = c / 255
    return v / 12.92 if v <= 0.04045 else ((v + 0.055) / 1.055) ** 2.4


def _lab_f(t: float) -> float:
    return t ** (1 / 3) if t > 0.008856 else (7.787 * t) + (16 / 116)


def _parse_number(text: str, scale: float = 1.0) -> float:
    text = text.strip()
    if text.endswith('%'):
        return float(text[:-1]) / 100 * scale
    return float(text)


def parse_color(text: str) -> Color:
    """Parse a color string.

    Accepts:
        - Named colors: "rebeccapurple", "Red"
        - Hex colors: "#FF00FF", "FF00FF", "#F0F", "#FF00FF80"
        - Functional forms: "rgb(255, 0, 255)", "rgba(255,0,255,0.5)",
          "hsl(300, 100%, 50%)", "hsla(300,100%,50%,0.5)"
        - RGB tuples: "255,0,255" or "255 0 255"
    """
    from ansi_swatch.names import lookup

    color = text.strip().lower()
    if not color:
        raise ValueError("Cannot parse color: empty string")

    named = lookup(color)
    if named is not None:
        return named.color

    match = _FUNC_PATTERN.match(color.replace(' ', ''))
    if match:
        kind, args = match.groups()
        parts = args.split(',')
        expected = 4 if kind.endswith('a') else 3
        if len(parts) != expected:
            raise ValueError(f"Cannot parse color: {text!r}")
        try:
            alpha = _parse_number(parts[3], 1.0) if expected == 4 else 1.0
            if kind.startswith('rgb'):
                r, g, b = (round(_parse_number(p, 255)) for p in parts[:3])
                return Color.from_rgba(r, g, b, alpha)
            h = float(parts[0].rstrip('deg'))
            s = _parse_number(parts[1])
            l = _parse_number(parts[2])
            return Color.from_hsl(h, s, l, alpha)
        except ValueError:
            raise ValueError(f"Cannot parse color: {text!r}") from None

    match = _TRIPLE_PATTERN.match(color)
    if match:
        return Color.from_rgb(int(match.group(1)), int(match.group(2)), int(match.group(3)))

    if re.fullmatch(r'#?([0-9a-f]{3}|[0-9a-f]{6}|[0-9a-f]{8})', color):
        return Color.from_hex(color)

    raise ValueError(f"Cannot parse color: {text!r}")

"""RGB color value and its hex string codec.

Parsing accepts anything a CSS color expression allows (``#rgb``, ``#rgba``,
``#rrggbb``, ``#rrggbbaa``, ``rgb()``/``rgba()`` with integer, fractional or
percentage alpha, and CSS keywords including ``transparent``, mostly via
Pillow's ``ImageColor``) as well as bare hex digits without the leading ``#``. Only the
red, green and blue channels are kept.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from PIL import ImageColor

from .errors import ColorParseError


@dataclass(frozen=True)
class Color:
    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b):
            if isinstance(channel, bool) or not isinstance(channel, int) or not 0 <= channel <= 255:
                raise ValueError(f"Color channels must be integers in 0..255, got {(self.r, self.g, self.b)}")

    def __str__(self) -> str:
        return format_color(self)

    @classmethod
    def parse(cls, text: str) -> Color:
        return parse_color(text)


def resolve_named_color(name: str) -> tuple[int, int, int] | None:
    """Look up a CSS color keyword, returning ``None`` for unknown names."""
    key = name.strip().lower()
    if key not in ImageColor.colormap:
        return None
    r, g, b = ImageColor.getrgb(key)[:3]
    return r, g, b


# ImageColor only takes integer alpha; CSS also allows 0..1 fractions and percentages
_RGBA_FRACTION_RE = re.compile(
    r"rgba\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d*\.\d+|\d+\.?|\d+%|\d*\.\d+%)\s*\)",
    re.IGNORECASE,
)


def _fractional_rgba(text: str) -> tuple[int, int, int] | None:
    m = _RGBA_FRACTION_RE.fullmatch(text)
    if m is None:
        return None
    alpha = m.group(4)
    if alpha.endswith("%"):
        if float(alpha[:-1]) > 100:
            return None
    elif float(alpha) > 1:
        return None
    return int(m.group(1)), int(m.group(2)), int(m.group(3))


def _css_rgb(text: str) -> tuple[int, int, int] | None:
    if text.lower() == "transparent":
        return 0, 0, 0
    rgb = _fractional_rgba(text)
    if rgb is not None:
        return rgb if all(0 <= c <= 255 for c in rgb) else None
    try:
        channels = ImageColor.getrgb(text)
    except ValueError:
        return None
    r, g, b = channels[:3]
    if not all(0 <= c <= 255 for c in (r, g, b)):
        return None
    return r, g, b


def parse_color(text: str) -> Color:
    if not isinstance(text, str):
        raise ColorParseError(text)
    stripped = text.strip()
    if not stripped:
        raise ColorParseError(text)

    rgb = _css_rgb(stripped)
    if rgb is None:
        rgb = _css_rgb(f"#{stripped}")
    if rgb is None:
        raise ColorParseError(text)
    return Color(*rgb)


def format_color(color: Color) -> str:
    return f"#{color.r:02X}{color.g:02X}{color.b:02X}"


def format_color_bare(color: Color) -> str:
    return format_color(color)[1:]

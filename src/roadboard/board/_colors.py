"""Color conversions used to style labels, status dots and columns.

Every function here is deterministic and stateless. Two different lightness
measures are provided on purpose: ``get_luminance`` picks a light or dark
foreground for a colored background, while ``get_perceived_lightness`` feeds
the dark-mode label styling. They use different coefficients and callers rely
on both.
"""

import math
import re
from dataclasses import dataclass
from typing import Final, NamedTuple

from roadboard.enums import StatusColor

__all__ = [
    "HSL",
    "RGB",
    "STATUS_PALETTE",
    "LabelStyle",
    "StatusPalette",
    "brighten_color",
    "get_luminance",
    "get_perceived_lightness",
    "get_status_palette",
    "hex_to_hsl",
    "hex_to_rgb",
    "is_light_color",
    "label_style",
    "string_to_hsl_color",
]

LIGHT_LUMINANCE_THRESHOLD: Final = 0.5

_HEX_DIGITS: Final = re.compile(r"[0-9a-fA-F]{6}")


class RGB(NamedTuple):
    """Red, green and blue channels, 0-255."""

    r: int
    g: int
    b: int


class HSL(NamedTuple):
    """Hue in degrees (0-359), saturation and lightness in percent (0-100)."""

    h: int
    s: int
    l: int  # noqa: E741


@dataclass(frozen=True, slots=True)
class StatusPalette:
    """Display colors for one status color name.

    Attributes:
        dot: Solid color for status dots.
        background: Soft background for status badges.
        text: Foreground for text drawn on ``background``.
    """

    dot: str
    background: str
    text: str


STATUS_PALETTE: Final[dict[StatusColor, StatusPalette]] = {
    StatusColor.GREEN: StatusPalette(dot="#22c55e", background="#dcfce7", text="#166534"),
    StatusColor.YELLOW: StatusPalette(dot="#eab308", background="#fef9c3", text="#854d0e"),
    StatusColor.PURPLE: StatusPalette(dot="#a855f7", background="#f3e8ff", text="#6b21a8"),
    StatusColor.BLUE: StatusPalette(dot="#3b82f6", background="#dbeafe", text="#1e40af"),
    StatusColor.ORANGE: StatusPalette(dot="#f97316", background="#ffedd5", text="#9a3412"),
    StatusColor.RED: StatusPalette(dot="#ef4444", background="#fee2e2", text="#991b1b"),
    StatusColor.PINK: StatusPalette(dot="#ec4899", background="#fce7f3", text="#9d174d"),
    StatusColor.GRAY: StatusPalette(dot="#6b7280", background="#f3f4f6", text="#1f2937"),
}


def _round_half_up(value: float) -> int:
    # Matches the browser's Math.round, unlike Python's banker's rounding
    return math.floor(value + 0.5)


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value >= 0x80000000 else value


def hex_to_rgb(hex_color: str) -> RGB:
    """Split a hex color into its channels.

    Args:
        hex_color: Six hex digits, optionally prefixed with ``#``.

    Returns:
        The RGB channels.

    Raises:
        ValueError: If the value is not a six-digit hex color.
    """
    digits = hex_color.removeprefix("#")
    if _HEX_DIGITS.fullmatch(digits) is None:
        msg = f"Invalid hex color: {hex_color!r}"
        raise ValueError(msg)
    value = int(digits, 16)
    return RGB(r=(value >> 16) & 0xFF, g=(value >> 8) & 0xFF, b=value & 0xFF)


def hex_to_hsl(hex_color: str) -> HSL:
    """Convert a hex color to rounded HSL components."""
    r, g, b = (channel / 255 for channel in hex_to_rgb(hex_color))

    high = max(r, g, b)
    low = min(r, g, b)
    lightness = (high + low) / 2

    hue = 0.0
    saturation = 0.0
    if high != low:
        chroma = high - low
        if lightness > 0.5:  # noqa: PLR2004
            saturation = chroma / (2 - high - low)
        else:
            saturation = chroma / (high + low)

        if high == r:
            hue = ((g - b) / chroma + (6 if g < b else 0)) / 6
        elif high == g:
            hue = ((b - r) / chroma + 2) / 6
        else:
            hue = ((r - g) / chroma + 4) / 6

    return HSL(
        h=_round_half_up(hue * 360) % 360,
        s=_round_half_up(saturation * 100),
        l=_round_half_up(lightness * 100),
    )


def get_luminance(hex_color: str) -> float:
    """Relative luminance (0-1) used to choose a readable foreground."""
    r, g, b = hex_to_rgb(hex_color)
    return (0.299 * r + 0.587 * g + 0.114 * b) / 255


def get_perceived_lightness(hex_color: str) -> float:
    """Perceived lightness (0-1) from the sRGB coefficients."""
    r, g, b = hex_to_rgb(hex_color)
    return (r * 0.2126 + g * 0.7152 + b * 0.0722) / 255


def is_light_color(hex_color: str) -> bool:
    """Return whether a background is light enough for dark text."""
    return get_luminance(hex_color) > LIGHT_LUMINANCE_THRESHOLD


def brighten_color(hex_color: str, amount: float = 0.4) -> str:
    """Mix a color with white.

    Args:
        hex_color: Color to brighten.
        amount: Share of white to mix in, 0-1.

    Returns:
        The brightened color as ``#rrggbb``.
    """
    r, g, b = (
        _round_half_up(channel + (255 - channel) * amount)
        for channel in hex_to_rgb(hex_color)
    )
    return f"#{r:02x}{g:02x}{b:02x}"


def string_to_hsl_color(text: str, saturation: int = 65, lightness: int = 55) -> str:
    """Derive a stable HSL color from a string.

    The hue comes from the classic ``hash * 31 + char`` string hash computed
    over UTF-16 code units with 32-bit shifts, so a given title always maps to
    the same color.

    Args:
        text: Input string, e.g. a milestone title.
        saturation: Saturation percentage.
        lightness: Lightness percentage.

    Returns:
        A CSS ``hsl()`` color string.
    """
    encoded = text.encode("utf-16-le")
    value = 0
    for index in range(0, len(encoded), 2):
        code_unit = encoded[index] | (encoded[index + 1] << 8)
        value = code_unit + (_to_int32(_to_int32(value) << 5) - value)
    hue = abs(value) % 360
    return f"hsl({hue}, {saturation}%, {lightness}%)"


def get_status_palette(color: StatusColor | str | None) -> StatusPalette:
    """Return display colors for a status color name, gray when unknown."""
    if color is None:
        return STATUS_PALETTE[StatusColor.GRAY]
    try:
        return STATUS_PALETTE[StatusColor(color)]
    except ValueError:
        return STATUS_PALETTE[StatusColor.GRAY]


@dataclass(frozen=True, slots=True)
class LabelStyle:
    """Color components needed to draw a label pill in light and dark mode."""

    color: str
    rgb: RGB
    hsl: HSL
    luminance: float
    perceived_lightness: float
    is_light: bool
    dark_color: str


def label_style(hex_color: str) -> LabelStyle:
    """Compute the styling components of a label color."""
    luminance = get_luminance(hex_color)
    return LabelStyle(
        color=f"#{hex_color.removeprefix('#').lower()}",
        rgb=hex_to_rgb(hex_color),
        hsl=hex_to_hsl(hex_color),
        luminance=luminance,
        perceived_lightness=round(get_perceived_lightness(hex_color), 3),
        is_light=luminance > LIGHT_LUMINANCE_THRESHOLD,
        dark_color=brighten_color(hex_color),
    )

"""
Color presentation helpers.

Token colors are stored as sRGB channels in [0, 1]. This module formats them
as hex, rgba() or OKLCH strings and converts between sRGB and OKLCH. Gamma
handling happens here, at presentation time, never while parsing.
"""

import re
from dataclasses import dataclass

import numpy as np

from tokenbridge.schema.tokens import ColorValue

# Linear sRGB -> LMS and LMS' -> OKLab (Björn Ottosson, 2020)
_LINEAR_TO_LMS = np.array(
    [
        [0.4122214708, 0.5363325363, 0.0514459929],
        [0.2119034982, 0.6806995451, 0.1073969566],
        [0.0883024619, 0.2817188376, 0.6299787005],
    ]
)
_LMS_TO_OKLAB = np.array(
    [
        [0.2104542553, 0.7936177850, -0.0040720468],
        [1.9779984951, -2.4285922050, 0.4505937099],
        [0.0259040371, 0.7827717662, -0.8086757660],
    ]
)
_OKLAB_TO_LMS = np.array(
    [
        [1.0, 0.3963377774, 0.2158037573],
        [1.0, -0.1055613458, -0.0638541728],
        [1.0, -0.0894841775, -1.2914855480],
    ]
)
_LMS_TO_LINEAR = np.array(
    [
        [4.0767416621, -3.3077115913, 0.2309699292],
        [-1.2684380046, 2.6097574011, -0.3413193965],
        [-0.0041960863, -0.7034186147, 1.7076147010],
    ]
)

# Chroma below this is treated as achromatic (hue 0)
ACHROMATIC_THRESHOLD = 1e-4

_HEX_PATTERN = re.compile(r"^#?([0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")


@dataclass(frozen=True)
class OklchColor:
    """OKLCH color: lightness in [0, 1], chroma >= 0, hue in degrees."""

    l: float  # noqa: E741
    c: float
    h: float
    alpha: float = 1.0


def srgb_to_linear(channels: np.ndarray) -> np.ndarray:
    channels = np.asarray(channels, dtype=float)
    return np.where(
        channels <= 0.04045, channels / 12.92, ((channels + 0.055) / 1.055) ** 2.4
    )


def linear_to_srgb(channels: np.ndarray) -> np.ndarray:
    channels = np.asarray(channels, dtype=float)
    return np.where(
        channels <= 0.0031308,
        channels * 12.92,
        1.055 * np.power(np.abs(channels), 1 / 2.4) * np.sign(channels) - 0.055,
    )


def srgb_to_oklch(color: ColorValue) -> OklchColor:
    """Convert a gamma-encoded sRGB color to OKLCH."""
    linear = srgb_to_linear(np.array([color.r, color.g, color.b]))
    lms = np.cbrt(_LINEAR_TO_LMS @ linear)
    lightness, a, b = _LMS_TO_OKLAB @ lms
    chroma = float(np.hypot(a, b))
    hue = float(np.degrees(np.arctan2(b, a))) % 360 if chroma > ACHROMATIC_THRESHOLD else 0.0
    return OklchColor(l=float(lightness), c=chroma, h=hue, alpha=color.a)


def oklch_to_srgb(color: OklchColor) -> ColorValue:
    """Convert OKLCH to gamma-encoded sRGB, clipping out-of-gamut channels."""
    hue = np.radians(color.h)
    oklab = np.array([color.l, color.c * np.cos(hue), color.c * np.sin(hue)])
    lms = (_OKLAB_TO_LMS @ oklab) ** 3
    srgb = np.clip(linear_to_srgb(_LMS_TO_LINEAR @ lms), 0.0, 1.0)
    r, g, b = (float(channel) for channel in srgb)
    return ColorValue(r=r, g=g, b=b, a=color.alpha)


def _to_byte(channel: float) -> int:
    return int(round(min(max(channel, 0.0), 1.0) * 255))


def rgba_to_hex(color: ColorValue) -> str:
    """Format a color as ``#rrggbb``, or ``#rrggbbaa`` when not opaque."""
    hex_color = "#" + "".join(f"{_to_byte(c):02x}" for c in (color.r, color.g, color.b))
    if color.a < 1:
        hex_color += f"{_to_byte(color.a):02x}"
    return hex_color


def hex_to_rgba(value: str) -> ColorValue:
    """Parse ``#rgb``, ``#rgba``, ``#rrggbb`` or ``#rrggbbaa``.

    Raises:
        ValueError: If the string is not a hex color
    """
    match = _HEX_PATTERN.match(value.strip())
    if not match:
        raise ValueError(f"Not a hex color: {value!r}")
    digits = match.group(1)
    if len(digits) in (3, 4):
        digits = "".join(d * 2 for d in digits)
    channels = [int(digits[i : i + 2], 16) / 255 for i in range(0, len(digits), 2)]
    if len(channels) == 3:
        channels.append(1.0)
    r, g, b, a = channels
    return ColorValue(r=r, g=g, b=b, a=a)


def format_color(color: ColorValue, color_format: str = "hex") -> str:
    """Render a color as ``hex``, ``rgba`` or ``oklch`` CSS text.

    Raises:
        ValueError: For an unknown format name
    """
    if color_format == "hex":
        return rgba_to_hex(color)
    if color_format == "rgba":
        r, g, b = (_to_byte(c) for c in (color.r, color.g, color.b))
        return f"rgba({r}, {g}, {b}, {round(color.a, 3):g})"
    if color_format == "oklch":
        oklch = srgb_to_oklch(color)
        text = f"oklch({oklch.l * 100:.2f}% {oklch.c:.4f} {oklch.h:.2f}"
        if color.a < 1:
            text += f" / {round(color.a, 3):g}"
        return text + ")"
    raise ValueError(f"Unknown color format: {color_format}")

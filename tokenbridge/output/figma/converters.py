"""
Value converters from normalized tokens to Figma values.

Shared by the variable transformer and the style transformer. Lossy
conversions report a warning when a report and path are given.
"""

from loguru import logger

from tokenbridge.output.figma.report import TransformationReport, WarningCode
from tokenbridge.schema.figma import RGBA
from tokenbridge.schema.tokens import ColorValue, DimensionValue, DurationValue

FONT_WEIGHT_KEYWORDS: dict[str, int] = {
    "thin": 100,
    "hairline": 100,
    "extralight": 200,
    "ultralight": 200,
    "light": 300,
    "normal": 400,
    "regular": 400,
    "medium": 500,
    "semibold": 600,
    "demibold": 600,
    "bold": 700,
    "extrabold": 800,
    "ultrabold": 800,
    "black": 900,
    "heavy": 900,
}
DEFAULT_FONT_WEIGHT = 400


def color_to_figma(color: ColorValue) -> RGBA:
    return RGBA(r=color.r, g=color.g, b=color.b, a=color.a)


def dimension_to_number(
    dimension: DimensionValue,
    report: TransformationReport | None = None,
    path: str | None = None,
) -> float:
    """Strip the unit from a dimension.

    Figma stores plain numbers interpreted as pixels, so any other unit is
    dropped and reported as ``UNIT_DISCARDED``.
    """
    if dimension.unit != "px" and report is not None:
        report.add_warning(
            WarningCode.UNIT_DISCARDED,
            f"Unit '{dimension.unit}' discarded, stored as raw number",
            path,
        )
    return dimension.value


def font_weight_to_number(weight: int | float | str) -> float:
    """Map a numeric or keyword font weight to a number.

    Unrecognized keywords map to 400.

    Examples:
        >>> font_weight_to_number("bold")
        700
        >>> font_weight_to_number("Black")
        900
    """
    if isinstance(weight, int | float):
        return weight
    numeric = weight.strip()
    if numeric.isdigit():
        return int(numeric)
    result = FONT_WEIGHT_KEYWORDS.get(numeric.lower())
    if result is None:
        logger.debug(f"Unknown font weight keyword {weight!r}, using {DEFAULT_FONT_WEIGHT}")
        return DEFAULT_FONT_WEIGHT
    return result


def font_family_to_string(
    families: tuple[str, ...] | list[str] | str,
    report: TransformationReport | None = None,
    path: str | None = None,
) -> str:
    """Reduce a font stack to its first family."""
    if isinstance(families, str):
        return families
    if len(families) > 1 and report is not None:
        report.add_warning(
            WarningCode.VALUE_TRUNCATED,
            f"Font stack truncated to first family: {families[0]}",
            path,
        )
    return families[0] if families else ""


def duration_to_milliseconds(duration: DurationValue) -> int:
    value = duration.value * 1000 if duration.unit == "s" else duration.value
    return int(round(value))

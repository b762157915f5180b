"""
Styles transformer.

Transforms composite token kinds (typography, shadow, gradient) into Figma
text, effect and paint styles for the Plugin API. Every style is a create
request.
"""

import math

from loguru import logger

from tokenbridge.output.figma.converters import (
    color_to_figma,
    font_weight_to_number,
)
from tokenbridge.output.figma.models import (
    ColorStop,
    Effect,
    EffectStyle,
    Paint,
    PaintStyle,
    StyleCreate,
    StyleTokenResult,
    TextStyle,
    UnitValue,
    Vector,
)
from tokenbridge.output.figma.report import TransformationReport
from tokenbridge.schema.tokens import (
    DimensionValue,
    GradientValue,
    ShadowValue,
    ThemeFile,
    Token,
    TokenType,
    TypographyValue,
    type_tag,
)
from tokenbridge.traversal import walk_leaves

DEFAULT_FONT_FAMILY = "Inter"
DEFAULT_GRADIENT_ANGLE = 180.0

TEXT_CASES = {
    "none": "ORIGINAL",
    "uppercase": "UPPER",
    "lowercase": "LOWER",
    "capitalize": "TITLE",
}

GRADIENT_TYPES = {
    "linear": "GRADIENT_LINEAR",
    "radial": "GRADIENT_RADIAL",
    "conic": "GRADIENT_ANGULAR",
}


def _number(dimension: DimensionValue | None) -> float:
    return dimension.value if dimension is not None else 0


# ---------------------------------------------------------------------------
# Typography -> text style
# ---------------------------------------------------------------------------


def typography_to_text_style(
    name: str, value: TypographyValue, description: str | None = None
) -> TextStyle:
    """Convert a typography value to a Figma text style."""
    style = TextStyle(
        name=name,
        font_family=value.font_family[0] if value.font_family else DEFAULT_FONT_FAMILY,
        font_size=_number(value.font_size),
        font_weight=font_weight_to_number(value.font_weight),
        description=description or None,
    )

    if isinstance(value.line_height, int | float):
        # Bare multiplier
        style.line_height = UnitValue(unit="PERCENT", value=value.line_height * 100)
    elif value.line_height is not None:
        style.line_height = UnitValue(unit="PIXELS", value=_number(value.line_height))

    if value.letter_spacing is not None:
        style.letter_spacing = UnitValue(
            unit="PIXELS", value=_number(value.letter_spacing)
        )

    if value.text_transform:
        style.text_case = TEXT_CASES.get(value.text_transform, "ORIGINAL")

    return style


# ---------------------------------------------------------------------------
# Shadow -> effect style
# ---------------------------------------------------------------------------


def shadow_to_effect(shadow: ShadowValue) -> Effect:
    return Effect(
        type="INNER_SHADOW" if shadow.inset else "DROP_SHADOW",
        color=color_to_figma(shadow.color),
        offset=Vector(x=_number(shadow.offset_x), y=_number(shadow.offset_y)),
        radius=_number(shadow.blur),
        spread=_number(shadow.spread),
    )


def shadow_to_effect_style(
    name: str,
    value: ShadowValue | tuple[ShadowValue, ...] | list[ShadowValue],
    description: str | None = None,
) -> EffectStyle:
    """Convert one shadow or a shadow list into an effect style."""
    shadows = value if isinstance(value, tuple | list) else (value,)
    return EffectStyle(
        name=name,
        effects=[shadow_to_effect(shadow) for shadow in shadows],
        description=description or None,
    )


# ---------------------------------------------------------------------------
# Gradient -> paint style
# ---------------------------------------------------------------------------


def gradient_handle_positions(angle: float | None) -> list[Vector]:
    """Compute Figma's gradient handles for a CSS-style angle.

    Figma positions a gradient with three handles in the unit square instead
    of an angle: start, end, and a width handle perpendicular to the axis.
    The axis is the unit vector rotated by ``angle - 90`` degrees, centred on
    (0.5, 0.5).

    Args:
        angle: Gradient angle in degrees; None means 180 (top to bottom)

    Returns:
        Start, end and width handle positions
    """
    radians = math.radians((DEFAULT_GRADIENT_ANGLE if angle is None else angle) - 90)
    cos = math.cos(radians)
    sin = math.sin(radians)
    return [
        Vector(x=0.5 - cos * 0.5, y=0.5 - sin * 0.5),
        Vector(x=0.5 + cos * 0.5, y=0.5 + sin * 0.5),
        Vector(x=0.5 - sin * 0.5, y=0.5 + cos * 0.5),
    ]


def gradient_to_paint(gradient: GradientValue) -> Paint:
    return Paint(
        type=GRADIENT_TYPES.get(gradient.type, "GRADIENT_LINEAR"),
        gradient_stops=[
            ColorStop(color=color_to_figma(stop.color), position=stop.position)
            for stop in gradient.stops
        ],
        gradient_handle_positions=gradient_handle_positions(gradient.angle),
    )


def gradient_to_paint_style(
    name: str, value: GradientValue, description: str | None = None
) -> PaintStyle:
    return PaintStyle(
        name=name, paints=[gradient_to_paint(value)], description=description or None
    )


# ---------------------------------------------------------------------------
# Traversal
# ---------------------------------------------------------------------------


def _has_expected_value(token: Token) -> bool:
    value = token.value
    if token.type == TokenType.TYPOGRAPHY:
        return isinstance(value, TypographyValue)
    if token.type == TokenType.SHADOW:
        if isinstance(value, tuple | list):
            return all(isinstance(item, ShadowValue) for item in value)
        return isinstance(value, ShadowValue)
    return isinstance(value, GradientValue)


def extract_style_tokens(
    theme: ThemeFile, report: TransformationReport
) -> StyleTokenResult:
    """Collect style requests for every composite token of a theme.

    Only each collection's default mode is read. Style names are the token
    path joined with ``/``.

    Args:
        theme: Theme to read; it is not modified
        report: Report whose style counters are updated

    Returns:
        Text, effect and paint style requests
    """
    result = StyleTokenResult()

    def visit(path: tuple[str, ...], token: Token) -> None:
        if token.type not in (TokenType.TYPOGRAPHY, TokenType.SHADOW, TokenType.GRADIENT):
            return

        name = "/".join(path)
        if not _has_expected_value(token):
            logger.warning(
                f"Style token {name} does not hold a literal {type_tag(token.type)} value, "
                "leaving it out"
            )
            return

        if token.type == TokenType.TYPOGRAPHY:
            style = typography_to_text_style(name, token.value, token.description)
            result.text_styles.append(StyleCreate(style=style))
            report.add_style("text")
        elif token.type == TokenType.SHADOW:
            style = shadow_to_effect_style(name, token.value, token.description)
            result.effect_styles.append(StyleCreate(style=style))
            report.add_style("effect")
        else:
            style = gradient_to_paint_style(name, token.value, token.description)
            result.paint_styles.append(StyleCreate(style=style))
            report.add_style("paint")

    for collection in theme.collections:
        default_tokens = collection.tokens_for(collection.default_mode)
        if default_tokens is None:
            continue
        walk_leaves(default_tokens, visit)

    logger.debug(f"Extracted {len(result)} styles from theme {theme.name}")
    return result

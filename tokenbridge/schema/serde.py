"""
JSON document form of a theme.

Converts ThemeFile objects to and from plain dictionaries using the
design-token document conventions (``$type``, ``$value``, ``$description``,
``$extensions``). References are written as ``{"$ref": "{a.b.c}"}``.
Whether an entry is a token or a group is decided here, while decoding, so the
in-memory tree never has to guess.
"""

import re
from collections.abc import Mapping
from typing import Any

from tokenbridge.errors import TokenSchemaError
from tokenbridge.schema.tokens import (
    METADATA_SIGIL,
    ColorValue,
    DimensionValue,
    DurationValue,
    GradientStop,
    GradientValue,
    Group,
    Leaf,
    ShadowValue,
    ThemeFile,
    ThemeMeta,
    Token,
    TokenCollection,
    TokenGroup,
    TokenReference,
    TokenType,
    TypographyValue,
    type_tag,
)

REF_KEY = "$ref"
_DIMENSION_PATTERN = re.compile(r"^\s*(-?\d*\.?\d+)\s*([a-zA-Z%]*)\s*$")


# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------


def _drop_none(data: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in data.items() if value is not None}


def _encode_measure(value: DimensionValue | DurationValue) -> dict[str, Any]:
    return {"value": value.value, "unit": value.unit}


def _encode_color(color: ColorValue) -> dict[str, float]:
    return {"r": color.r, "g": color.g, "b": color.b, "a": color.a}


def _encode_shadow(shadow: ShadowValue) -> dict[str, Any]:
    return _drop_none(
        {
            "offsetX": _encode_measure(shadow.offset_x),
            "offsetY": _encode_measure(shadow.offset_y),
            "blur": _encode_measure(shadow.blur),
            "spread": _encode_measure(shadow.spread) if shadow.spread else None,
            "color": _encode_color(shadow.color),
            "inset": shadow.inset or None,
        }
    )


def encode_value(value: Any) -> Any:
    """Encode a typed token value into its JSON form."""
    if isinstance(value, TokenReference):
        return {REF_KEY: value.ref}
    if isinstance(value, ColorValue):
        return _encode_color(value)
    if isinstance(value, DimensionValue | DurationValue):
        return _encode_measure(value)
    if isinstance(value, TypographyValue):
        line_height = value.line_height
        if isinstance(line_height, DimensionValue):
            line_height = _encode_measure(line_height)
        return _drop_none(
            {
                "fontFamily": list(value.font_family),
                "fontSize": _encode_measure(value.font_size),
                "fontWeight": value.font_weight,
                "lineHeight": line_height,
                "letterSpacing": (
                    _encode_measure(value.letter_spacing)
                    if value.letter_spacing
                    else None
                ),
                "textTransform": value.text_transform,
            }
        )
    if isinstance(value, ShadowValue):
        return _encode_shadow(value)
    if isinstance(value, GradientValue):
        return _drop_none(
            {
                "type": value.type,
                "stops": [
                    {"color": _encode_color(stop.color), "position": stop.position}
                    for stop in value.stops
                ],
                "angle": value.angle,
            }
        )
    if isinstance(value, list | tuple):
        return [encode_value(item) for item in value]
    return value


def token_to_dict(token: Token) -> dict[str, Any]:
    data: dict[str, Any] = {
        "$type": type_tag(token.type),
        "$value": encode_value(token.value),
    }
    if token.description:
        data["$description"] = token.description
    if token.extensions:
        data["$extensions"] = dict(token.extensions)
    return data


def group_to_dict(group: TokenGroup) -> dict[str, Any]:
    data: dict[str, Any] = dict(group.metadata)
    for name, node in group.items():
        if isinstance(node, Leaf):
            data[name] = token_to_dict(node.token)
        else:
            data[name] = group_to_dict(node.group)
    return data


def collection_to_dict(collection: TokenCollection) -> dict[str, Any]:
    return _drop_none(
        {
            "name": collection.name,
            "description": collection.description,
            "modes": list(collection.modes),
            "defaultMode": collection.default_mode,
            "tokens": {
                mode: group_to_dict(group) for mode, group in collection.tokens.items()
            },
        }
    )


def theme_to_dict(theme: ThemeFile) -> dict[str, Any]:
    """Convert a theme into a JSON-serialisable document."""
    return _drop_none(
        {
            "$schema": theme.schema,
            "name": theme.name,
            "description": theme.description,
            "collections": [collection_to_dict(c) for c in theme.collections],
            "meta": _drop_none(
                {
                    "source": theme.meta.source,
                    "figmaFileKey": theme.meta.figma_file_key,
                    "lastSynced": theme.meta.last_synced,
                    "version": theme.meta.version,
                }
            ),
        }
    )


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------


def _decode_measure(raw: Any, default_unit: str) -> tuple[float, str]:
    if isinstance(raw, Mapping):
        return raw["value"], raw.get("unit", default_unit)
    if isinstance(raw, bool):
        raise TokenSchemaError(f"Expected a measurement, got {raw!r}")
    if isinstance(raw, int | float):
        return raw, default_unit
    if isinstance(raw, str):
        match = _DIMENSION_PATTERN.match(raw)
        if match:
            number, unit = match.groups()
            value = float(number)
            return (int(value) if value.is_integer() else value), unit or default_unit
    raise TokenSchemaError(f"Cannot read measurement from {raw!r}")


def _decode_dimension(raw: Any) -> DimensionValue:
    value, unit = _decode_measure(raw, "px")
    return DimensionValue(value=value, unit=unit)


def _decode_color(raw: Any) -> ColorValue:
    if not isinstance(raw, Mapping):
        raise TokenSchemaError(f"Cannot read color from {raw!r}")
    return ColorValue(r=raw["r"], g=raw["g"], b=raw["b"], a=raw.get("a", 1.0))


def _decode_shadow(raw: Mapping[str, Any]) -> ShadowValue:
    return ShadowValue(
        offset_x=_decode_dimension(raw.get("offsetX", 0)),
        offset_y=_decode_dimension(raw.get("offsetY", 0)),
        blur=_decode_dimension(raw.get("blur", 0)),
        color=_decode_color(raw["color"]),
        spread=_decode_dimension(raw["spread"]) if raw.get("spread") is not None else None,
        inset=bool(raw.get("inset", False)),
    )


def _decode_typography(raw: Mapping[str, Any]) -> TypographyValue:
    family = raw.get("fontFamily", ())
    line_height = raw.get("lineHeight")
    if line_height is not None and not isinstance(line_height, int | float):
        line_height = _decode_dimension(line_height)
    letter_spacing = raw.get("letterSpacing")
    return TypographyValue(
        font_family=(family,) if isinstance(family, str) else tuple(family),
        font_size=_decode_dimension(raw.get("fontSize", 16)),
        font_weight=raw.get("fontWeight", 400),
        line_height=line_height,
        letter_spacing=(
            _decode_dimension(letter_spacing) if letter_spacing is not None else None
        ),
        text_transform=raw.get("textTransform"),
    )


def _decode_gradient(raw: Mapping[str, Any]) -> GradientValue:
    return GradientValue(
        type=raw.get("type", "linear"),
        stops=tuple(
            GradientStop(color=_decode_color(stop["color"]), position=stop["position"])
            for stop in raw.get("stops", ())
        ),
        angle=raw.get("angle"),
    )


def decode_value(token_type: TokenType | str, raw: Any) -> Any:
    """Decode a ``$value`` according to the token's type.

    Values of kinds without a dedicated model are returned unchanged.
    """
    if isinstance(raw, Mapping) and REF_KEY in raw:
        return TokenReference(ref=raw[REF_KEY])

    if token_type == TokenType.COLOR:
        return _decode_color(raw)
    if token_type == TokenType.DIMENSION:
        return _decode_dimension(raw)
    if token_type == TokenType.DURATION:
        value, unit = _decode_measure(raw, "ms")
        return DurationValue(value=value, unit=unit)
    if token_type == TokenType.FONT_FAMILY:
        return (raw,) if isinstance(raw, str) else tuple(raw)
    if token_type == TokenType.TYPOGRAPHY and isinstance(raw, Mapping):
        return _decode_typography(raw)
    if token_type == TokenType.SHADOW:
        if isinstance(raw, list):
            return tuple(_decode_shadow(item) for item in raw)
        return _decode_shadow(raw)
    if token_type == TokenType.GRADIENT and isinstance(raw, Mapping):
        return _decode_gradient(raw)
    return raw


def token_from_dict(
    data: Mapping[str, Any], inherited_type: TokenType | str | None = None
) -> Token:
    """Build a token from its document form.

    Args:
        data: Mapping holding ``$value`` and usually ``$type``
        inherited_type: ``$type`` of the closest enclosing group, used when
            the token declares none

    Raises:
        TokenSchemaError: If neither the token nor a parent group has a type
    """
    tag = data.get("$type", inherited_type)
    if tag is None:
        raise TokenSchemaError(f"Token has no $type: {dict(data)!r}")
    token_type = TokenType.coerce(tag)
    return Token(
        type=token_type,
        value=decode_value(token_type, data["$value"]),
        description=data.get("$description"),
        extensions=dict(data.get("$extensions") or {}),
    )


def group_from_dict(
    data: Mapping[str, Any], inherited_type: TokenType | str | None = None
) -> TokenGroup:
    """Build a token tree from its document form.

    Entries whose key starts with ``$`` become group metadata, mappings with a
    ``$value`` key become leaves, and any other mapping becomes a sub-group.
    A group's ``$type`` is kept as metadata and applies to descendants that
    declare no type of their own.
    """
    group = TokenGroup()
    group_type = data.get("$type", inherited_type)
    for key, value in data.items():
        if key.startswith(METADATA_SIGIL):
            group.set_metadata(key, value)
        elif isinstance(value, Mapping) and "$value" in value:
            group.children[key] = Leaf(token_from_dict(value, group_type))
        elif isinstance(value, Mapping):
            group.children[key] = Group(group_from_dict(value, group_type))
        else:
            raise TokenSchemaError(
                f"Entry '{key}' is neither a token nor a group: {value!r}"
            )
    return group


def collection_from_dict(data: Mapping[str, Any]) -> TokenCollection:
    modes = list(data.get("modes") or ())
    return TokenCollection(
        name=data["name"],
        modes=tuple(modes),
        default_mode=data.get("defaultMode") or (modes[0] if modes else ""),
        tokens={
            mode: group_from_dict(tree) for mode, tree in (data.get("tokens") or {}).items()
        },
        description=data.get("description"),
    )


def theme_from_dict(data: Mapping[str, Any]) -> ThemeFile:
    """Build a ThemeFile from its document form.

    Raises:
        TokenSchemaError: If the document is structurally invalid
    """
    if "name" not in data:
        raise TokenSchemaError("Theme document is missing 'name'")
    meta = data.get("meta") or {}
    try:
        collections = tuple(collection_from_dict(c) for c in data.get("collections") or ())
    except KeyError as e:
        raise TokenSchemaError(f"Theme document is missing field {e}") from e
    return ThemeFile(
        name=data["name"],
        collections=collections,
        meta=ThemeMeta(
            source=meta.get("source"),
            figma_file_key=meta.get("figmaFileKey"),
            last_synced=meta.get("lastSynced"),
            version=meta.get("version", "1.0.0"),
        ),
        description=data.get("description"),
        schema=data.get("$schema"),
    )

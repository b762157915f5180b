"""
Figma variables model.

Typed views of the variables and collections returned by Figma's
``/v1/files/:key/variables/local`` endpoint and by the MCP ``get_figma_data``
tool. Only the fields tokenbridge reads are modelled.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from tokenbridge.errors import InvalidInputError


class ResolvedType(str, Enum):
    """Figma's variable data types."""

    COLOR = "COLOR"
    FLOAT = "FLOAT"
    STRING = "STRING"
    BOOLEAN = "BOOLEAN"


class VariableScope(str, Enum):
    """Figma usage scopes that affect type inference."""

    ALL_SCOPES = "ALL_SCOPES"
    CORNER_RADIUS = "CORNER_RADIUS"
    WIDTH_HEIGHT = "WIDTH_HEIGHT"
    GAP = "GAP"
    STROKE_FLOAT = "STROKE_FLOAT"
    FONT_FAMILY = "FONT_FAMILY"
    FONT_WEIGHT = "FONT_WEIGHT"
    FONT_SIZE = "FONT_SIZE"
    LINE_HEIGHT = "LINE_HEIGHT"
    LETTER_SPACING = "LETTER_SPACING"
    PARAGRAPH_SPACING = "PARAGRAPH_SPACING"
    PARAGRAPH_INDENT = "PARAGRAPH_INDENT"


ALIAS_TYPE = "VARIABLE_ALIAS"


@dataclass(frozen=True)
class RGBA:
    r: float
    g: float
    b: float
    a: float = 1.0


@dataclass(frozen=True)
class VariableAlias:
    """Reference from one variable's mode value to another variable."""

    id: str
    type: str = ALIAS_TYPE


VariableValue = bool | int | float | str | RGBA | VariableAlias


@dataclass(frozen=True)
class VariableMode:
    mode_id: str
    name: str


@dataclass(frozen=True)
class FigmaVariable:
    """A Figma variable with its per-mode values.

    Attributes:
        id: Figma variable id, e.g. ``VariableID:1:2``
        name: Slash-delimited name, e.g. ``Colors/Primary/500``
        resolved_type: Figma data type; unknown types are kept verbatim
        variable_collection_id: Id of the owning collection
        scopes: Usage scope tags
        values_by_mode: Mode id to literal value or alias
        hidden_from_publishing: Whether the variable is hidden from libraries
        code_syntax: Platform code names (WEB, ANDROID, iOS)
        description: Optional description
    """

    id: str
    name: str
    resolved_type: str
    variable_collection_id: str
    scopes: tuple[str, ...] = ()
    values_by_mode: Mapping[str, VariableValue] = field(default_factory=dict)
    hidden_from_publishing: bool = False
    code_syntax: Mapping[str, str] = field(default_factory=dict)
    description: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "FigmaVariable":
        try:
            return cls(
                id=data["id"],
                name=data["name"],
                resolved_type=data["resolvedType"],
                variable_collection_id=data["variableCollectionId"],
                scopes=tuple(data.get("scopes") or ()),
                values_by_mode={
                    mode_id: decode_variable_value(value)
                    for mode_id, value in (data.get("valuesByMode") or {}).items()
                },
                hidden_from_publishing=bool(data.get("hiddenFromPublishing", False)),
                code_syntax=dict(data.get("codeSyntax") or {}),
                description=data.get("description") or "",
            )
        except KeyError as e:
            raise InvalidInputError([f"Variable missing field {e}"]) from e


@dataclass(frozen=True)
class FigmaVariableCollection:
    """A Figma variable collection and its modes."""

    id: str
    name: str
    modes: tuple[VariableMode, ...]
    default_mode_id: str
    hidden_from_publishing: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "FigmaVariableCollection":
        try:
            return cls(
                id=data["id"],
                name=data["name"],
                modes=tuple(
                    VariableMode(mode_id=mode["modeId"], name=mode["name"])
                    for mode in data.get("modes") or ()
                ),
                default_mode_id=data.get("defaultModeId", ""),
                hidden_from_publishing=bool(data.get("hiddenFromPublishing", False)),
            )
        except KeyError as e:
            raise InvalidInputError([f"Variable collection missing field {e}"]) from e


def is_rgba(value: Any) -> bool:
    return isinstance(value, RGBA)


def is_variable_alias(value: Any) -> bool:
    return isinstance(value, VariableAlias)


def decode_variable_value(raw: Any) -> VariableValue:
    """Decode one ``valuesByMode`` entry from its JSON form.

    Args:
        raw: Boolean, number, string, ``{r, g, b, a}`` or
            ``{"type": "VARIABLE_ALIAS", "id": ...}``

    Returns:
        The literal, an RGBA or a VariableAlias
    """
    if isinstance(raw, Mapping):
        if raw.get("type") == ALIAS_TYPE:
            return VariableAlias(id=raw["id"])
        if {"r", "g", "b"} <= raw.keys():
            return RGBA(r=raw["r"], g=raw["g"], b=raw["b"], a=raw.get("a", 1.0))
        raise InvalidInputError([f"Unrecognized variable value: {dict(raw)}"])
    return raw


def decode_variables(raw: Mapping[str, Any]) -> dict[str, FigmaVariable]:
    return {key: FigmaVariable.from_dict(value) for key, value in raw.items()}


def decode_collections(raw: Mapping[str, Any]) -> dict[str, FigmaVariableCollection]:
    return {key: FigmaVariableCollection.from_dict(value) for key, value in raw.items()}

"""
Data models for the Figma output path.

Request operations for the Variables API, style descriptors for the Plugin
API, adapter options, and the write-client interface. Every model renders to
Figma's camelCase wire format through ``to_wire``.
"""

import json
from dataclasses import dataclass, field, fields, is_dataclass
from enum import Enum
from typing import Any, Protocol

from tokenbridge.schema.figma import RGBA, VariableValue

CREATE_ACTION = "CREATE"


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def to_wire(value: Any) -> Any:
    """Render a model into JSON-ready data with camelCase keys.

    Fields that are None are omitted.
    """
    if is_dataclass(value) and not isinstance(value, type):
        return {
            _camel(f.name): to_wire(getattr(value, f.name))
            for f in fields(value)
            if getattr(value, f.name) is not None
        }
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {key: to_wire(item) for key, item in value.items()}
    if isinstance(value, list | tuple):
        return [to_wire(item) for item in value]
    return value


# ---------------------------------------------------------------------------
# Options
# ---------------------------------------------------------------------------


class OperationMode(str, Enum):
    """How requests relate to what already exists in the target file.

    Only CREATE_ONLY can be built; the others are refused.
    """

    CREATE_ONLY = "create-only"
    UPDATE = "update"
    SYNC = "sync"


@dataclass
class FigmaOutputOptions:
    """Options for the Figma output path.

    Attributes:
        target_file_key: File that will receive the request; enables the
            source safety check
        mode: Operation mode
        allow_source_overwrite: Permit writing into the theme's source file
        collection_mapping: Token collection name to Figma collection name
        skip_hidden: Drop tokens flagged hidden from publishing
        id_prefix: Prefix for temporary ids in the request
    """

    target_file_key: str | None = None
    mode: OperationMode = OperationMode.CREATE_ONLY
    allow_source_overwrite: bool = False
    collection_mapping: dict[str, str] = field(default_factory=dict)
    skip_hidden: bool = False
    id_prefix: str = "temp"


# ---------------------------------------------------------------------------
# Variables API request
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class VariableCollectionCreate:
    id: str
    name: str
    initial_mode_id: str
    action: str = CREATE_ACTION


@dataclass(frozen=True)
class VariableModeCreate:
    id: str
    name: str
    variable_collection_id: str
    action: str = CREATE_ACTION


@dataclass(frozen=True)
class VariableCreate:
    id: str
    name: str
    variable_collection_id: str
    resolved_type: str
    description: str | None = None
    action: str = CREATE_ACTION


@dataclass(frozen=True)
class VariableModeValue:
    variable_id: str
    mode_id: str
    value: VariableValue


@dataclass
class PostVariablesRequestBody:
    """Body of ``POST /v1/files/:key/variables``."""

    variable_collections: list[VariableCollectionCreate] = field(default_factory=list)
    variable_modes: list[VariableModeCreate] = field(default_factory=list)
    variables: list[VariableCreate] = field(default_factory=list)
    variable_mode_values: list[VariableModeValue] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return to_wire(self)

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)


# ---------------------------------------------------------------------------
# Styles
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Vector:
    x: float
    y: float


@dataclass(frozen=True)
class UnitValue:
    """A measurement tagged with Figma's unit, e.g. PIXELS or PERCENT."""

    unit: str
    value: float


@dataclass
class TextStyle:
    name: str
    font_family: str
    font_size: float
    font_weight: float
    description: str | None = None
    line_height: UnitValue | None = None
    letter_spacing: UnitValue | None = None
    text_case: str | None = None


@dataclass
class Effect:
    type: str
    color: RGBA
    offset: Vector
    radius: float
    spread: float = 0
    visible: bool = True
    blend_mode: str = "NORMAL"


@dataclass
class EffectStyle:
    name: str
    effects: list[Effect] = field(default_factory=list)
    description: str | None = None


@dataclass(frozen=True)
class ColorStop:
    color: RGBA
    position: float


@dataclass
class Paint:
    type: str
    gradient_stops: list[ColorStop] = field(default_factory=list)
    gradient_handle_positions: list[Vector] = field(default_factory=list)
    visible: bool = True
    blend_mode: str = "NORMAL"


@dataclass
class PaintStyle:
    name: str
    paints: list[Paint] = field(default_factory=list)
    description: str | None = None


@dataclass
class StyleCreate:
    style: TextStyle | EffectStyle | PaintStyle
    action: str = CREATE_ACTION


@dataclass
class StyleTokenResult:
    """Style requests extracted from a theme, grouped by style kind."""

    text_styles: list[StyleCreate] = field(default_factory=list)
    effect_styles: list[StyleCreate] = field(default_factory=list)
    paint_styles: list[StyleCreate] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.text_styles) + len(self.effect_styles) + len(self.paint_styles)

    def to_dict(self) -> dict[str, Any]:
        return to_wire(self)


# ---------------------------------------------------------------------------
# Plugin write client
# ---------------------------------------------------------------------------


@dataclass
class PluginStatus:
    connected: bool
    file: str | None = None
    file_key: str | None = None


@dataclass
class PluginVariableParams:
    """One variable to create through the Plugin API."""

    name: str
    collection_name: str
    resolved_type: str
    values_by_mode: dict[str, Any] = field(default_factory=dict)
    description: str | None = None
    scopes: list[str] | None = None
    action: str = "create"


@dataclass
class PluginStyleParams:
    """One text, paint or effect style to create through the Plugin API."""

    type: str
    name: str
    properties: dict[str, Any] = field(default_factory=dict)
    action: str = "create"


class WriteServerClient(Protocol):
    """Connection to a Figma write-server plugin."""

    def get_status(self) -> PluginStatus:
        """Report whether the plugin is connected and which file is open."""
        ...

    def variables(self, params: list[PluginVariableParams]) -> None:
        """Create the given variables."""
        ...

    def styles(self, params: list[PluginStyleParams]) -> None:
        """Create the given styles."""
        ...

"""
Normalized design token model.

This module contains the dataclasses that make up a theme: tokens and their
typed values, the nested token tree, collections with modes, and the theme
file that bundles collections together with source metadata.
"""

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from tokenbridge.errors import PathCollisionError, TokenSchemaError

METADATA_SIGIL = "$"
FIGMA_EXTENSION_KEY = "com.figma"
SCHEMA_URL = "https://figma-to-tailwind.dev/schema/v1/theme.json"


class TokenType(str, Enum):
    """Closed set of token kinds understood by tokenbridge."""

    COLOR = "color"
    DIMENSION = "dimension"
    NUMBER = "number"
    STRING = "string"
    BOOLEAN = "boolean"
    FONT_FAMILY = "fontFamily"
    FONT_WEIGHT = "fontWeight"
    DURATION = "duration"
    CUBIC_BEZIER = "cubicBezier"
    TYPOGRAPHY = "typography"
    SHADOW = "shadow"
    BORDER = "border"
    GRADIENT = "gradient"
    TRANSITION = "transition"
    ANIMATION = "animation"
    KEYFRAMES = "keyframes"
    STROKE_STYLE = "strokeStyle"

    @classmethod
    def coerce(cls, tag: "TokenType | str") -> "TokenType | str":
        """Return the enum member for a tag, or the raw tag when unknown.

        Args:
            tag: Token type tag as found in a document

        Returns:
            Matching TokenType, or the original string for unrecognized tags
        """
        try:
            return cls(tag)
        except ValueError:
            return tag


def type_tag(token_type: "TokenType | str") -> str:
    """Return the plain string tag for a token type."""
    return token_type.value if isinstance(token_type, TokenType) else token_type


# ---------------------------------------------------------------------------
# Typed values
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ColorValue:
    """RGBA color with every channel in the [0, 1] range."""

    r: float
    g: float
    b: float
    a: float = 1.0


@dataclass(frozen=True)
class DimensionValue:
    """A length with its unit, e.g. 16px or 1.5rem."""

    value: float
    unit: str = "px"


@dataclass(frozen=True)
class DurationValue:
    """A time span in milliseconds or seconds."""

    value: float
    unit: str = "ms"


@dataclass(frozen=True)
class TypographyValue:
    """Composite text style value.

    Attributes:
        font_family: Ordered font stack
        font_size: Font size
        font_weight: Numeric weight or keyword such as "bold"
        line_height: Bare multiplier or absolute dimension
        letter_spacing: Absolute tracking
        text_transform: One of none, uppercase, lowercase, capitalize
    """

    font_family: tuple[str, ...]
    font_size: DimensionValue
    font_weight: int | float | str = 400
    line_height: float | DimensionValue | None = None
    letter_spacing: DimensionValue | None = None
    text_transform: str | None = None


@dataclass(frozen=True)
class ShadowValue:
    """A single drop or inner shadow."""

    offset_x: DimensionValue
    offset_y: DimensionValue
    blur: DimensionValue
    color: ColorValue
    spread: DimensionValue | None = None
    inset: bool = False


@dataclass(frozen=True)
class GradientStop:
    """Color stop of a gradient, position in [0, 1]."""

    color: ColorValue
    position: float


@dataclass(frozen=True)
class GradientValue:
    """Linear, radial or conic gradient.

    Attributes:
        type: One of linear, radial, conic
        stops: Ordered color stops
        angle: Direction in degrees, 180 meaning top to bottom
    """

    type: str = "linear"
    stops: tuple[GradientStop, ...] = ()
    angle: float | None = None


@dataclass(frozen=True)
class TokenReference:
    """Symbolic pointer to another token, written as ``{a.b.c}``."""

    ref: str

    @classmethod
    def to_path(cls, segments: Sequence[str]) -> "TokenReference":
        """Build a reference pointing at the given path segments."""
        return cls(ref="{" + ".".join(segments) + "}")

    @property
    def path(self) -> str:
        """Dotted path without the surrounding braces."""
        return self.ref.removeprefix("{").removesuffix("}")

    @property
    def segments(self) -> tuple[str, ...]:
        return tuple(self.path.split("."))


def is_token_reference(value: Any) -> bool:
    """Check whether a token value is a reference rather than a literal."""
    return isinstance(value, TokenReference)


@dataclass(frozen=True)
class Token:
    """A single named, typed design value.

    Attributes:
        type: Token kind; unknown tags are kept as plain strings
        value: Typed value for the kind, or a TokenReference
        description: Optional human description
        extensions: Vendor-namespaced extension data, e.g. ``com.figma``
    """

    type: TokenType | str
    value: Any
    description: str | None = None
    extensions: Mapping[str, Any] = field(default_factory=dict)

    @property
    def is_reference(self) -> bool:
        return is_token_reference(self.value)

    @property
    def figma_extensions(self) -> Mapping[str, Any]:
        """The ``com.figma`` extension bag, empty when absent."""
        return self.extensions.get(FIGMA_EXTENSION_KEY) or {}

    @property
    def hidden_from_publishing(self) -> bool:
        return bool(self.figma_extensions.get("hiddenFromPublishing", False))


# ---------------------------------------------------------------------------
# Token tree
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Leaf:
    """Tree entry holding a token."""

    token: Token


@dataclass(frozen=True)
class Group:
    """Tree entry holding a nested group."""

    group: "TokenGroup"


TokenNode = Leaf | Group


@dataclass
class TokenGroup:
    """Ordered namespace of tokens and sub-groups.

    Children are explicit ``Leaf`` or ``Group`` entries. Keys starting with
    ``$`` are metadata and live in ``metadata``, never among the children.
    """

    children: dict[str, TokenNode] = field(default_factory=dict)
    metadata: dict[str, Any] = field(default_factory=dict)

    def __iter__(self) -> Iterator[str]:
        return iter(self.children)

    def __len__(self) -> int:
        return len(self.children)

    def __contains__(self, name: object) -> bool:
        return name in self.children

    def items(self) -> Iterator[tuple[str, TokenNode]]:
        return iter(self.children.items())

    def get(self, name: str) -> TokenNode | None:
        return self.children.get(name)

    def set_metadata(self, key: str, value: Any) -> None:
        if not key.startswith(METADATA_SIGIL):
            raise TokenSchemaError(
                f"Metadata key '{key}' must start with '{METADATA_SIGIL}'"
            )
        self.metadata[key] = value

    def add_token(self, name: str, token: Token) -> None:
        """Add a leaf token directly under this group.

        Raises:
            PathCollisionError: If the name is already taken
        """
        self._check_child_name(name)
        if name in self.children:
            raise PathCollisionError((name,), "an entry with this name already exists")
        self.children[name] = Leaf(token)

    def add_group(self, name: str, group: "TokenGroup | None" = None) -> "TokenGroup":
        """Add a sub-group and return it.

        Raises:
            PathCollisionError: If the name is already taken
        """
        self._check_child_name(name)
        if name in self.children:
            raise PathCollisionError((name,), "an entry with this name already exists")
        group = group if group is not None else TokenGroup()
        self.children[name] = Group(group)
        return group

    def insert(self, path: Sequence[str], token: Token) -> None:
        """Place a token at a nested path, creating intermediate groups.

        Args:
            path: Full path; all but the last segment are group names
            token: Token to store at the last segment

        Raises:
            PathCollisionError: If the path descends through a leaf or the
                final position is already occupied
        """
        if not path:
            raise TokenSchemaError("Cannot insert a token at an empty path")

        current = self
        for depth, segment in enumerate(path[:-1]):
            node = current.children.get(segment)
            if node is None:
                current = current.add_group(segment)
            elif isinstance(node, Group):
                current = node.group
            else:
                raise PathCollisionError(
                    tuple(path[: depth + 1]), "a token already occupies this group name"
                )

        name = path[-1]
        if name in current.children:
            raise PathCollisionError(tuple(path), "an entry with this name already exists")
        current.add_token(name, token)

    @staticmethod
    def _check_child_name(name: str) -> None:
        if not name:
            raise TokenSchemaError("Token and group names must not be empty")
        if name.startswith(METADATA_SIGIL):
            raise TokenSchemaError(
                f"Name '{name}' is reserved for metadata ('{METADATA_SIGIL}' prefix)"
            )


@dataclass(frozen=True)
class TokenCollection:
    """A set of token trees, one per mode.

    Attributes:
        name: Collection name
        modes: Ordered, unique mode names
        default_mode: Mode used to decide which variables exist
        tokens: Mode name to token tree; trees may be partial
        description: Optional description
    """

    name: str
    modes: tuple[str, ...]
    default_mode: str
    tokens: Mapping[str, TokenGroup]
    description: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "modes", tuple(self.modes))
        if not self.modes:
            raise TokenSchemaError(f"Collection '{self.name}' declares no modes")
        if len(set(self.modes)) != len(self.modes):
            raise TokenSchemaError(f"Collection '{self.name}' has duplicate modes")
        if self.default_mode not in self.modes:
            raise TokenSchemaError(
                f"Default mode '{self.default_mode}' of collection '{self.name}' "
                f"is not one of {list(self.modes)}"
            )
        unknown = [mode for mode in self.tokens if mode not in self.modes]
        if unknown:
            raise TokenSchemaError(
                f"Collection '{self.name}' has tokens for undeclared modes: {unknown}"
            )

    def tokens_for(self, mode: str) -> TokenGroup | None:
        return self.tokens.get(mode)


@dataclass(frozen=True)
class ThemeMeta:
    """Where a theme came from and when it was read."""

    source: str | None = None
    figma_file_key: str | None = None
    last_synced: str | None = None
    version: str = "1.0.0"


@dataclass(frozen=True)
class ThemeFile:
    """A complete theme: ordered collections plus source metadata."""

    name: str
    collections: tuple[TokenCollection, ...] = ()
    meta: ThemeMeta = field(default_factory=ThemeMeta)
    description: str | None = None
    schema: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "collections", tuple(self.collections))
        names = [collection.name for collection in self.collections]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise TokenSchemaError(f"Duplicate collection names: {duplicates}")

    def collection(self, name: str) -> TokenCollection | None:
        for collection in self.collections:
            if collection.name == name:
                return collection
        return None

"""Token and Figma schema types."""

from tokenbridge.schema.tokens import (
    FIGMA_EXTENSION_KEY,
    METADATA_SIGIL,
    SCHEMA_URL,
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
    TokenNode,
    TokenReference,
    TokenType,
    TypographyValue,
    is_token_reference,
)

__all__ = [
    "FIGMA_EXTENSION_KEY",
    "METADATA_SIGIL",
    "SCHEMA_URL",
    "ColorValue",
    "DimensionValue",
    "DurationValue",
    "GradientStop",
    "GradientValue",
    "Group",
    "Leaf",
    "ShadowValue",
    "ThemeFile",
    "ThemeMeta",
    "Token",
    "TokenCollection",
    "TokenGroup",
    "TokenNode",
    "TokenReference",
    "TokenType",
    "TypographyValue",
    "is_token_reference",
]

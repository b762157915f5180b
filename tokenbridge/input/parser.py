"""
Figma variable parser.

Converts Figma variables and collections into normalized token collections.
Each visible, non-empty Figma collection becomes one TokenCollection with a
token tree per mode.
"""

import re
from collections.abc import Mapping

from loguru import logger

from tokenbridge.schema.figma import (
    RGBA,
    FigmaVariable,
    FigmaVariableCollection,
    ResolvedType,
    VariableAlias,
    VariableScope,
    VariableValue,
)
from tokenbridge.schema.tokens import (
    FIGMA_EXTENSION_KEY,
    ColorValue,
    DimensionValue,
    Token,
    TokenCollection,
    TokenGroup,
    TokenReference,
    TokenType,
)

# FLOAT variables carrying any of these scopes are pixel dimensions
DIMENSION_SCOPES = frozenset(
    {
        VariableScope.CORNER_RADIUS.value,
        VariableScope.WIDTH_HEIGHT.value,
        VariableScope.GAP.value,
        VariableScope.FONT_SIZE.value,
        VariableScope.LINE_HEIGHT.value,
        VariableScope.LETTER_SPACING.value,
    }
)

_WHITESPACE = re.compile(r"\s+")


def normalize_segment(segment: str) -> str:
    """Lower-case a name segment and replace whitespace runs with ``-``."""
    return _WHITESPACE.sub("-", segment.lower())


def build_token_path(name: str) -> tuple[str, ...]:
    """Split a slash-delimited Figma name into normalized path segments.

    Examples:
        >>> build_token_path("Colors/Primary Blue/500")
        ('colors', 'primary-blue', '500')
    """
    return tuple(normalize_segment(segment) for segment in name.split("/"))


def detect_token_type(variable: FigmaVariable) -> TokenType:
    """Infer a token type from a variable's resolved type and scopes.

    Scopes refine the coarse Figma type; the first matching rule wins.
    Unrecognized resolved types fall back to ``string``.
    """
    scopes = set(variable.scopes)
    resolved = variable.resolved_type

    if resolved == ResolvedType.STRING:
        if VariableScope.FONT_FAMILY.value in scopes:
            return TokenType.FONT_FAMILY
        return TokenType.STRING
    if resolved == ResolvedType.FLOAT:
        if VariableScope.FONT_WEIGHT.value in scopes:
            return TokenType.FONT_WEIGHT
        if scopes & DIMENSION_SCOPES:
            return TokenType.DIMENSION
        return TokenType.NUMBER
    if resolved == ResolvedType.COLOR:
        return TokenType.COLOR
    if resolved == ResolvedType.BOOLEAN:
        return TokenType.BOOLEAN

    logger.debug(f"Unknown resolved type {resolved!r} for {variable.name}, using string")
    return TokenType.STRING


def convert_figma_color(color: RGBA) -> ColorValue:
    return ColorValue(r=color.r, g=color.g, b=color.b, a=color.a)


def create_token_reference(
    alias: VariableAlias, variables_by_id: Mapping[str, FigmaVariable]
) -> TokenReference:
    """Turn a Figma alias into a reference to the target's token path.

    An alias to an unknown variable keeps the raw id as its path.
    """
    target = variables_by_id.get(alias.id)
    if target is None:
        logger.debug(f"Alias target {alias.id} not found, keeping raw id")
        return TokenReference(ref="{" + alias.id + "}")
    return TokenReference.to_path(build_token_path(target.name))


def _figma_extensions(variable: FigmaVariable) -> dict:
    extensions: dict = {
        "variableId": variable.id,
        "scopes": list(variable.scopes),
        "hiddenFromPublishing": variable.hidden_from_publishing,
    }
    if variable.code_syntax:
        extensions["codeSyntax"] = {
            key: value
            for key, value in (
                ("web", variable.code_syntax.get("WEB")),
                ("android", variable.code_syntax.get("ANDROID")),
                ("ios", variable.code_syntax.get("iOS")),
            )
            if value is not None
        }
    return extensions


def create_token(
    variable: FigmaVariable,
    value: VariableValue,
    variables_by_id: Mapping[str, FigmaVariable],
) -> Token:
    """Create a token from one mode value of a variable."""
    token_type = detect_token_type(variable)

    if isinstance(value, VariableAlias):
        token_value: object = create_token_reference(value, variables_by_id)
    elif isinstance(value, RGBA):
        token_value = convert_figma_color(value)
    elif token_type == TokenType.DIMENSION and isinstance(value, int | float):
        token_value = DimensionValue(value=value, unit="px")
    elif token_type == TokenType.FONT_FAMILY and isinstance(value, str):
        token_value = (value,)
    else:
        token_value = value

    return Token(
        type=token_type,
        value=token_value,
        description=variable.description or None,
        extensions={FIGMA_EXTENSION_KEY: _figma_extensions(variable)},
    )


def parse_collection(
    collection: FigmaVariableCollection,
    variables: list[FigmaVariable],
    variables_by_id: Mapping[str, FigmaVariable],
) -> TokenCollection:
    """Build the per-mode token trees of a single collection.

    Raises:
        PathCollisionError: If two variable names map onto overlapping paths
    """
    modes = tuple(mode.name for mode in collection.modes)
    default_mode = next(
        (m.name for m in collection.modes if m.mode_id == collection.default_mode_id),
        modes[0] if modes else "",
    )

    tokens: dict[str, TokenGroup] = {}
    for mode in collection.modes:
        tree = TokenGroup()
        for variable in variables:
            value = variable.values_by_mode.get(mode.mode_id)
            if value is None:
                continue
            token = create_token(variable, value, variables_by_id)
            tree.insert(build_token_path(variable.name), token)
        tokens[mode.name] = tree

    logger.debug(
        f"Parsed collection {collection.name}: {len(variables)} variables, "
        f"modes: {list(modes)}, default: {default_mode}"
    )
    return TokenCollection(
        name=collection.name,
        modes=modes,
        default_mode=default_mode,
        tokens=tokens,
        description=f"Figma collection: {collection.name}",
    )


def parse_variables(
    variables: Mapping[str, FigmaVariable],
    collections: Mapping[str, FigmaVariableCollection],
) -> list[TokenCollection]:
    """Parse Figma variables into token collections.

    Collections that are hidden from publishing or own no variables are left
    out entirely.

    Args:
        variables: Variable id to variable
        collections: Collection id to collection

    Returns:
        Token collections in the order of ``collections``
    """
    variables_by_id: dict[str, FigmaVariable] = {}
    variables_by_collection: dict[str, list[FigmaVariable]] = {}
    for variable in variables.values():
        variables_by_id[variable.id] = variable
        variables_by_collection.setdefault(variable.variable_collection_id, []).append(
            variable
        )

    result: list[TokenCollection] = []
    for collection in collections.values():
        collection_variables = variables_by_collection.get(collection.id, [])
        if not collection_variables:
            logger.debug(f"Skipping empty collection: {collection.name}")
            continue
        if collection.hidden_from_publishing:
            logger.debug(f"Skipping hidden collection: {collection.name}")
            continue
        result.append(parse_collection(collection, collection_variables, variables_by_id))

    return result

"""
Token transformer.

Transforms a normalized ThemeFile into a Figma Variables API request body.
Only create operations are produced. Token kinds that Figma variables cannot
hold are skipped and listed in the report; the style transformer handles the
composite ones.
"""

from dataclasses import dataclass

from loguru import logger

from tokenbridge.errors import UnsupportedOperationModeError
from tokenbridge.output.figma.converters import (
    color_to_figma,
    dimension_to_number,
    duration_to_milliseconds,
    font_family_to_string,
    font_weight_to_number,
)
from tokenbridge.output.figma.ids import IdCounter
from tokenbridge.output.figma.models import (
    FigmaOutputOptions,
    OperationMode,
    PostVariablesRequestBody,
    VariableCollectionCreate,
    VariableCreate,
    VariableModeCreate,
    VariableModeValue,
)
from tokenbridge.output.figma.report import TransformationReport, WarningCode
from tokenbridge.output.figma.safety import check_source_safety
from tokenbridge.schema.figma import ResolvedType, VariableValue
from tokenbridge.schema.tokens import (
    ColorValue,
    DimensionValue,
    DurationValue,
    ThemeFile,
    Token,
    TokenCollection,
    TokenType,
    type_tag,
)
from tokenbridge.traversal import flatten_tokens, resolve_path

TOKEN_TYPE_TO_FIGMA: dict[TokenType, ResolvedType] = {
    TokenType.COLOR: ResolvedType.COLOR,
    TokenType.DIMENSION: ResolvedType.FLOAT,
    TokenType.NUMBER: ResolvedType.FLOAT,
    TokenType.STRING: ResolvedType.STRING,
    TokenType.BOOLEAN: ResolvedType.BOOLEAN,
    TokenType.FONT_FAMILY: ResolvedType.STRING,
    TokenType.FONT_WEIGHT: ResolvedType.FLOAT,
    TokenType.DURATION: ResolvedType.FLOAT,
}

# Kinds that cannot be a Figma variable
SKIP_TYPES = frozenset(
    {
        TokenType.TYPOGRAPHY,
        TokenType.SHADOW,
        TokenType.BORDER,
        TokenType.GRADIENT,
        TokenType.CUBIC_BEZIER,
        TokenType.TRANSITION,
        TokenType.ANIMATION,
        TokenType.KEYFRAMES,
    }
)


@dataclass
class TransformResult:
    request_body: PostVariablesRequestBody
    report: TransformationReport


def token_value_to_figma(
    token: Token, report: TransformationReport, path: str
) -> VariableValue | None:
    """Convert a token's value into a Figma variable value.

    Returns:
        The Figma value, or None when no value should be written. The reason
        is recorded in the report.
    """
    if token.is_reference:
        report.add_skipped(
            path,
            "Token references are not supported when writing variables",
            token.type,
            "Resolve the reference first or recreate the alias in Figma",
        )
        return None

    value = token.value
    token_type = token.type
    if token_type == TokenType.COLOR and isinstance(value, ColorValue):
        return color_to_figma(value)
    if token_type == TokenType.DIMENSION and isinstance(value, DimensionValue):
        return dimension_to_number(value, report, path)
    if token_type == TokenType.NUMBER and isinstance(value, int | float):
        return value
    if token_type == TokenType.STRING and isinstance(value, str):
        return value
    if token_type == TokenType.BOOLEAN and isinstance(value, bool):
        return value
    if token_type == TokenType.FONT_FAMILY and isinstance(value, tuple | list | str):
        return font_family_to_string(value, report, path)
    if token_type == TokenType.FONT_WEIGHT and isinstance(value, int | float | str):
        return font_weight_to_number(value)
    if token_type == TokenType.DURATION and isinstance(value, DurationValue):
        return duration_to_milliseconds(value)

    report.add_warning(
        WarningCode.UNSUPPORTED_TYPE,
        f"No Figma variable value for token type '{type_tag(token_type)}'",
        path,
    )
    return None


def _transform_collection(
    collection: TokenCollection,
    options: FigmaOutputOptions,
    counter: IdCounter,
    body: PostVariablesRequestBody,
    report: TransformationReport,
    emitted_names: set[str],
) -> None:
    prefix = options.id_prefix
    collection_name = options.collection_mapping.get(collection.name, collection.name)
    if collection_name in emitted_names:
        report.add_warning(
            WarningCode.NAME_COLLISION,
            f"Collection name '{collection_name}' is emitted more than once",
            collection.name,
        )
    emitted_names.add(collection_name)

    collection_id = counter.next_id(f"{prefix}_col")
    initial_mode_id = counter.next_id(f"{prefix}_mode")
    body.variable_collections.append(
        VariableCollectionCreate(
            id=collection_id, name=collection_name, initial_mode_id=initial_mode_id
        )
    )
    report.add_collection()

    mode_ids = {collection.default_mode: initial_mode_id}
    for mode_name in collection.modes:
        if mode_name == collection.default_mode:
            continue
        mode_id = counter.next_id(f"{prefix}_mode")
        mode_ids[mode_name] = mode_id
        body.variable_modes.append(
            VariableModeCreate(
                id=mode_id, name=mode_name, variable_collection_id=collection_id
            )
        )
        report.add_mode()

    default_tokens = collection.tokens_for(collection.default_mode)
    if default_tokens is None:
        logger.debug(f"Collection {collection.name} has no default mode tokens")
        return

    for flattened in flatten_tokens(default_tokens):
        token = flattened.token
        if token.type in SKIP_TYPES:
            report.add_skipped(
                flattened.dotted,
                f"Token type '{type_tag(token.type)}' is not supported as a Figma variable",
                token.type,
                "Consider using Figma Styles for composite types",
            )
            continue

        resolved_type = TOKEN_TYPE_TO_FIGMA.get(token.type)
        if resolved_type is None:
            report.add_skipped(
                flattened.dotted,
                f"Unknown token type: {type_tag(token.type)}",
                token.type,
            )
            continue

        if options.skip_hidden and token.hidden_from_publishing:
            logger.debug(f"Skipping hidden token {flattened.dotted}")
            continue

        variable_id = counter.next_id(f"{prefix}_var")
        body.variables.append(
            VariableCreate(
                id=variable_id,
                name=flattened.slashed,
                variable_collection_id=collection_id,
                resolved_type=resolved_type.value,
                description=token.description,
            )
        )
        report.add_variable()

        for mode_name in collection.modes:
            mode_tokens = collection.tokens_for(mode_name)
            if mode_tokens is None:
                continue
            mode_token = resolve_path(mode_tokens, flattened.path)
            if mode_token is None:
                continue

            value_path = f"{collection.name}.{mode_name}.{flattened.dotted}"
            figma_value = token_value_to_figma(mode_token, report, value_path)
            if figma_value is None:
                continue

            body.variable_mode_values.append(
                VariableModeValue(
                    variable_id=variable_id, mode_id=mode_ids[mode_name], value=figma_value
                )
            )
            report.add_value()


def transform_to_figma_variables(
    theme: ThemeFile,
    options: FigmaOutputOptions | None = None,
    counter: IdCounter | None = None,
) -> TransformResult:
    """Transform a theme into a Figma Variables API request body.

    Args:
        theme: Theme to transform; it is not modified
        options: Output options
        counter: Id counter for temporary ids. A fresh counter is used when
            omitted, so identical inputs give identical ids.

    Returns:
        The request body and the transformation report

    Raises:
        SourceOverwriteError: If the target is the theme's source file and
            overwriting was not allowed
        UnsupportedOperationModeError: If a mode other than create-only is set
    """
    options = options or FigmaOutputOptions()
    counter = counter if counter is not None else IdCounter()
    report = TransformationReport()

    report.set_source_check(check_source_safety(theme, options))
    if report.source_check.is_same_file:
        report.add_warning(
            WarningCode.SOURCE_MATCH,
            "Target file matches source file - proceeding with explicit permission",
        )

    if options.mode != OperationMode.CREATE_ONLY:
        raise UnsupportedOperationModeError(OperationMode(options.mode).value)

    body = PostVariablesRequestBody()
    emitted_names: set[str] = set()
    for collection in theme.collections:
        _transform_collection(collection, options, counter, body, report, emitted_names)

    logger.debug(
        f"Transformed theme {theme.name}: {report.stats.variables_created} variables, "
        f"{report.stats.values_set} values, {report.stats.skipped} skipped"
    )
    return TransformResult(request_body=body, report=report)

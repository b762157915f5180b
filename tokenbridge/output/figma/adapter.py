"""
Figma output adapter.

Bundles the variable transformer and the style transformer. The result can be
sent through a connected write-server plugin, or applied by hand with the
REST API using the generated instructions.
"""

import json
from collections.abc import Callable
from dataclasses import dataclass

from loguru import logger

from tokenbridge.errors import PluginNotConnectedError
from tokenbridge.output.figma.ids import IdCounter
from tokenbridge.output.figma.models import (
    FigmaOutputOptions,
    PluginStyleParams,
    PluginVariableParams,
    PostVariablesRequestBody,
    StyleTokenResult,
    WriteServerClient,
    to_wire,
)
from tokenbridge.output.figma.report import TransformationReport, WarningCode
from tokenbridge.output.figma.safety import check_plugin_safety
from tokenbridge.output.figma.styles import extract_style_tokens
from tokenbridge.output.figma.transformer import transform_to_figma_variables
from tokenbridge.schema.tokens import ThemeFile

FIGMA_API_URL = "https://api.figma.com/v1"
FIGMA_TOKEN_HEADER = "X-Figma-Token"
PLACEHOLDER_FILE_KEY = "<YOUR_FILE_KEY>"


@dataclass
class ExecuteResult:
    variables_sent: int
    styles_sent: int


@dataclass
class FigmaOutputResult:
    """Everything needed to push a theme into Figma.

    Attributes:
        request_body: Variables API request
        report: Statistics, skipped tokens and warnings
        styles: Style requests for composite tokens
        target_file_key: File the request is meant for
        execute: Sends the requests through the write client; None without one
    """

    request_body: PostVariablesRequestBody
    report: TransformationReport
    styles: StyleTokenResult
    target_file_key: str | None = None
    execute: Callable[[], ExecuteResult] | None = None

    def manual_instructions(self) -> str:
        """Describe how to apply the request by hand with the REST API."""
        return manual_instructions(
            self.target_file_key or PLACEHOLDER_FILE_KEY, self.request_body
        )


def manual_instructions(target_file_key: str, request_body: PostVariablesRequestBody) -> str:
    body = json.dumps(request_body.to_dict(), indent=2)
    return (
        "To push these variables to Figma, use the REST API:\n"
        "\n"
        f"POST {FIGMA_API_URL}/files/{target_file_key}/variables\n"
        "\n"
        "Headers:\n"
        f"  {FIGMA_TOKEN_HEADER}: YOUR_TOKEN\n"
        "\n"
        "Body:\n"
        f"{body}\n"
        "\n"
        "Note: Requires Figma Enterprise plan with file_variables:write scope."
    )


def build_plugin_variable_params(
    request_body: PostVariablesRequestBody, theme: ThemeFile
) -> list[PluginVariableParams]:
    """Regroup a Variables API request into per-variable plugin params.

    Values are keyed by mode name instead of temporary mode id. The request's
    collections are in the same order as the theme's collections, which is
    where the initial modes get their names.
    """
    collection_names: dict[str, str] = {}
    mode_names: dict[str, str] = {}
    for created, collection in zip(
        request_body.variable_collections, theme.collections, strict=True
    ):
        collection_names[created.id] = created.name
        mode_names[created.initial_mode_id] = collection.default_mode
    for mode in request_body.variable_modes:
        mode_names[mode.id] = mode.name

    params: dict[str, PluginVariableParams] = {}
    for variable in request_body.variables:
        params[variable.id] = PluginVariableParams(
            name=variable.name,
            collection_name=collection_names[variable.variable_collection_id],
            resolved_type=variable.resolved_type,
            description=variable.description,
        )
    for mode_value in request_body.variable_mode_values:
        params[mode_value.variable_id].values_by_mode[
            mode_names[mode_value.mode_id]
        ] = to_wire(mode_value.value)
    return list(params.values())


def build_plugin_style_params(styles: StyleTokenResult) -> list[PluginStyleParams]:
    params: list[PluginStyleParams] = []
    for kind, requests in (
        ("TEXT", styles.text_styles),
        ("EFFECT", styles.effect_styles),
        ("PAINT", styles.paint_styles),
    ):
        for request in requests:
            properties = to_wire(request.style)
            name = properties.pop("name")
            params.append(PluginStyleParams(type=kind, name=name, properties=properties))
    return params


class FigmaOutputAdapter:
    """Output adapter pushing design tokens back to Figma."""

    id = "figma-output"
    name = "Figma Output Adapter"

    def __init__(self, write_client: WriteServerClient | None = None):
        self.write_client = write_client

    def transform(
        self,
        theme: ThemeFile,
        options: FigmaOutputOptions | None = None,
        counter: IdCounter | None = None,
    ) -> FigmaOutputResult:
        """Transform a theme into Figma variable and style requests.

        Raises:
            SourceOverwriteError: If the target is the theme's source file and
                overwriting was not allowed
            UnsupportedOperationModeError: If a mode other than create-only is set
        """
        options = options or FigmaOutputOptions()
        transformed = transform_to_figma_variables(theme, options, counter)
        styles = extract_style_tokens(theme, transformed.report)

        result = FigmaOutputResult(
            request_body=transformed.request_body,
            report=transformed.report,
            styles=styles,
            target_file_key=options.target_file_key,
        )
        if self.write_client is not None:
            result.execute = self._executor(self.write_client, theme, options, result)
        return result

    @staticmethod
    def _executor(
        client: WriteServerClient,
        theme: ThemeFile,
        options: FigmaOutputOptions,
        result: FigmaOutputResult,
    ) -> Callable[[], ExecuteResult]:
        def execute() -> ExecuteResult:
            status = client.get_status()
            if not status.connected:
                result.report.add_warning(
                    WarningCode.PLUGIN_NOT_CONNECTED,
                    "Write-server plugin is not connected",
                )
                raise PluginNotConnectedError()

            result.report.set_source_check(check_plugin_safety(theme, status, options))

            variable_params = build_plugin_variable_params(result.request_body, theme)
            style_params = build_plugin_style_params(result.styles)
            logger.info(
                f"Sending {len(variable_params)} variables and {len(style_params)} "
                f"styles to {status.file or 'the open file'}"
            )
            client.variables(variable_params)
            if style_params:
                client.styles(style_params)
            return ExecuteResult(
                variables_sent=len(variable_params), styles_sent=len(style_params)
            )

        return execute


def create_figma_output_adapter(
    write_client: WriteServerClient | None = None,
) -> FigmaOutputAdapter:
    return FigmaOutputAdapter(write_client)

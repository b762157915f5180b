"""Command line interface for tokenbridge.

This module provides commands for turning Figma variable payloads into token
documents, and token documents into Figma variable and style requests.
"""

import json
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar, cast

import typer
from loguru import logger

from tokenbridge.color import format_color
from tokenbridge.errors import TokenBridgeError
from tokenbridge.input.adapter import FigmaInput, FigmaInputAdapter
from tokenbridge.output.figma.adapter import FigmaOutputAdapter
from tokenbridge.output.figma.models import FigmaOutputOptions
from tokenbridge.output.figma.report import TransformationReport
from tokenbridge.output.figma.styles import extract_style_tokens
from tokenbridge.schema.serde import encode_value, theme_from_dict, theme_to_dict
from tokenbridge.schema.tokens import (
    ColorValue,
    DimensionValue,
    DurationValue,
    ThemeFile,
    Token,
    TokenReference,
    type_tag,
)
from tokenbridge.traversal import walk_leaves

F = TypeVar("F", bound=Callable[..., Any])


def typed_command(app_command: Any) -> Callable[[F], F]:
    """Wrap typer command with proper typing for mypy."""

    def decorator(func: F) -> F:
        return cast(F, app_command(func))

    return decorator


app = typer.Typer(
    name="tokenbridge",
    help=(
        "Convert Figma variables into design tokens and back. "
        "Commands: parse, push, styles, show."
    ),
    add_completion=False,
)


def _configure_logging(verbose: bool) -> None:
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "INFO")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Convert Figma variables into design tokens and back."""
    _configure_logging(verbose)


def _read_json(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        logger.error(f"Cannot read {path}: {e}")
        raise typer.Exit(1) from e
    except json.JSONDecodeError as e:
        logger.error(f"{path} is not valid JSON: {e}")
        raise typer.Exit(1) from e


def _load_theme(path: Path) -> ThemeFile:
    try:
        return theme_from_dict(_read_json(path))
    except TokenBridgeError as e:
        logger.error(f"Invalid theme document {path}: {e}")
        raise typer.Exit(1) from e


def _emit(text: str, output: Path | None) -> None:
    if output is None:
        typer.echo(text)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text + "\n", encoding="utf-8")
    logger.info(f"Written: {output}")


def _describe_value(token: Token, color_format: str) -> str:
    value = token.value
    if isinstance(value, TokenReference):
        return value.ref
    if isinstance(value, ColorValue):
        return format_color(value, color_format)
    if isinstance(value, DimensionValue | DurationValue):
        return f"{value.value:g}{value.unit}"
    if isinstance(value, tuple) and all(isinstance(item, str) for item in value):
        return ", ".join(value)
    if isinstance(value, str | int | float | bool):
        return json.dumps(value)
    return json.dumps(encode_value(value))


def _log_report(report: TransformationReport) -> None:
    if report.stats.skipped or report.stats.warnings:
        logger.warning(
            f"{report.stats.skipped} tokens skipped, "
            f"{report.stats.warnings} warnings; see the report"
        )


# Define reusable arguments
PAYLOAD_ARG = typer.Argument(
    ..., help="JSON file with a /variables/local response or MCP data"
)
THEME_ARG = typer.Argument(..., help="Theme JSON document")
OUTPUT_ARG = typer.Argument(None, help="Output file (stdout when omitted)")


@typed_command(app.command("parse"))
def parse_payload(
    payload: Path = PAYLOAD_ARG,
    output: Path | None = OUTPUT_ARG,
    file_key: str | None = typer.Option(
        None, "--file-key", envvar="FIGMA_FILE_KEY", help="Figma file key"
    ),
) -> None:
    """Parse a Figma variables payload into a theme document.

    Example: tokenbridge parse variables.json theme.json --file-key abc123
    """
    data = _read_json(payload)
    if isinstance(data, dict) and "variables" in (data.get("meta") or {}):
        source = FigmaInput(variables_response=data, file_key=file_key)
    else:
        source = FigmaInput(mcp_data=data, file_key=file_key)

    try:
        theme = FigmaInputAdapter().parse(source)
    except TokenBridgeError as e:
        logger.error(f"Parse failed: {e}")
        raise typer.Exit(1) from e

    logger.info(f"Parsed {len(theme.collections)} collections from {payload}")
    _emit(json.dumps(theme_to_dict(theme), indent=2), output)


@typed_command(app.command("push"))
def push_theme(
    theme_file: Path = THEME_ARG,
    output: Path | None = OUTPUT_ARG,
    target_file_key: str | None = typer.Option(
        None,
        "--target-file-key",
        "-t",
        envvar="FIGMA_FILE_KEY",
        help="Figma file that will receive the variables",
    ),
    allow_source_overwrite: bool = typer.Option(
        False, "--allow-source-overwrite", help="Allow writing into the source file"
    ),
    skip_hidden: bool = typer.Option(
        False, "--skip-hidden", help="Leave out tokens hidden from publishing"
    ),
    id_prefix: str = typer.Option("temp", "--id-prefix", help="Temporary id prefix"),
    json_report: bool = typer.Option(
        False, "--json-report", help="Print the report as JSON"
    ),
    instructions: bool = typer.Option(
        False, "--instructions", help="Print manual REST API instructions instead"
    ),
) -> None:
    """Build a Figma Variables API request from a theme document.

    Example: tokenbridge push theme.json request.json --target-file-key abc123
    """
    theme = _load_theme(theme_file)
    options = FigmaOutputOptions(
        target_file_key=target_file_key,
        allow_source_overwrite=allow_source_overwrite,
        skip_hidden=skip_hidden,
        id_prefix=id_prefix,
    )

    try:
        result = FigmaOutputAdapter().transform(theme, options)
    except TokenBridgeError as e:
        logger.error(f"Transform failed: {e}")
        raise typer.Exit(1) from e

    if instructions:
        _emit(result.manual_instructions(), output)
    else:
        _emit(result.request_body.to_json(), output)

    if json_report:
        typer.echo(json.dumps(result.report.to_dict(), indent=2), err=True)
    else:
        typer.echo(result.report.render(), err=True)
    _log_report(result.report)


@typed_command(app.command("styles"))
def export_styles(
    theme_file: Path = THEME_ARG,
    output: Path | None = OUTPUT_ARG,
) -> None:
    """Build Figma style requests for typography, shadow and gradient tokens.

    Example: tokenbridge styles theme.json styles.json
    """
    theme = _load_theme(theme_file)
    report = TransformationReport()
    styles = extract_style_tokens(theme, report)
    logger.info(
        f"Styles: {report.styles.text} text, {report.styles.effect} effect, "
        f"{report.styles.paint} paint"
    )
    _emit(json.dumps(styles.to_dict(), indent=2), output)


@typed_command(app.command("show"))
def show_theme(
    theme_file: Path = THEME_ARG,
    mode: str | None = typer.Option(
        None, "--mode", "-m", help="Mode to list (default mode when omitted)"
    ),
    color_format: str = typer.Option(
        "hex", "--color-format", "-c", help="Color format (hex, rgba, oklch)"
    ),
) -> None:
    """List every token of a theme with its type and value.

    Example: tokenbridge show theme.json --mode dark --color-format oklch
    """
    if color_format not in ("hex", "rgba", "oklch"):
        logger.warning(f"Unknown color format: {color_format}. Using hex.")
        color_format = "hex"

    theme = _load_theme(theme_file)
    for collection in theme.collections:
        mode_name = mode or collection.default_mode
        tree = collection.tokens_for(mode_name)
        if tree is None:
            logger.info(f"Collection {collection.name} has no mode {mode_name}")
            continue

        typer.echo(f"{collection.name} [{mode_name}]")

        def show(path: tuple[str, ...], token: Token) -> None:
            typer.echo(
                f"  {'.'.join(path)}  {type_tag(token.type)}  "
                f"{_describe_value(token, color_format)}"
            )

        walk_leaves(tree, show)


if __name__ == "__main__":
    app()

"""
Figma input adapter.

Accepts either a REST ``/variables/local`` response or an MCP
``get_figma_data`` response and produces a ThemeFile.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import arrow
from loguru import logger

from tokenbridge.errors import InvalidInputError
from tokenbridge.input.parser import parse_variables
from tokenbridge.schema.figma import decode_collections, decode_variables
from tokenbridge.schema.tokens import SCHEMA_URL, ThemeFile, ThemeMeta

SOURCE_API = "figma-api"
SOURCE_MCP = "figma-mcp"


@dataclass
class FigmaInput:
    """Raw Figma payloads to parse.

    Attributes:
        variables_response: Body of ``GET /v1/files/:key/variables/local``
        mcp_data: Body returned by the MCP ``get_figma_data`` tool
        file_key: Figma file key, recorded in the theme metadata
    """

    variables_response: Mapping[str, Any] | None = None
    mcp_data: Mapping[str, Any] | None = None
    file_key: str | None = None


@dataclass
class ValidationResult:
    valid: bool
    errors: list[str] = field(default_factory=list)


class FigmaInputAdapter:
    """Parses Figma REST or MCP payloads into a normalized theme."""

    id = "figma"
    name = "Figma MCP/API Adapter"

    def validate(self, source: FigmaInput) -> ValidationResult:
        """Check that at least one usable payload is present."""
        errors: list[str] = []

        if source.mcp_data is None and source.variables_response is None:
            errors.append("Either mcp_data or variables_response must be provided")

        if source.mcp_data is not None and not source.mcp_data.get("name"):
            errors.append("MCP data missing file name")

        if source.variables_response is not None:
            response = source.variables_response
            meta = response.get("meta") or {}
            if response.get("error"):
                errors.append("Variables response contains error")
            if "variables" not in meta:
                errors.append("Variables response missing variables data")
            if "variableCollections" not in meta:
                errors.append("Variables response missing collections data")

        return ValidationResult(valid=not errors, errors=errors)

    def parse(self, source: FigmaInput) -> ThemeFile:
        """Parse Figma data into a theme.

        The REST response is preferred when both payloads are given.

        Raises:
            InvalidInputError: If validation fails
            PathCollisionError: If variable names map onto overlapping paths
        """
        validation = self.validate(source)
        if not validation.valid:
            raise InvalidInputError(validation.errors)

        file_name = "Untitled"
        last_modified: str | None = None
        if source.variables_response is not None:
            meta = source.variables_response["meta"]
            raw_variables = meta["variables"]
            raw_collections = meta["variableCollections"]
            source_type = SOURCE_API
        elif source.mcp_data is not None:
            raw_variables = source.mcp_data.get("variables") or {}
            raw_collections = source.mcp_data.get("variableCollections") or {}
            file_name = source.mcp_data["name"]
            last_modified = source.mcp_data.get("lastModified")
            source_type = SOURCE_MCP
        else:
            raise InvalidInputError(["No valid data source"])

        logger.debug(
            f"Parsing {len(raw_variables)} variables in {len(raw_collections)} "
            f"collections from {source_type}"
        )
        collections = parse_variables(
            decode_variables(raw_variables), decode_collections(raw_collections)
        )

        return ThemeFile(
            name=file_name,
            description=f"Design tokens exported from Figma file: {file_name}",
            collections=tuple(collections),
            meta=ThemeMeta(
                source=source_type,
                figma_file_key=source.file_key,
                last_synced=last_modified or arrow.utcnow().isoformat(),
                version="1.0.0",
            ),
            schema=SCHEMA_URL,
        )


def create_figma_adapter() -> FigmaInputAdapter:
    return FigmaInputAdapter()

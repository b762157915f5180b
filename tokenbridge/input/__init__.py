"""Read path: Figma variables into normalized tokens."""

from tokenbridge.input.adapter import (
    FigmaInput,
    FigmaInputAdapter,
    ValidationResult,
    create_figma_adapter,
)
from tokenbridge.input.parser import (
    build_token_path,
    create_token,
    create_token_reference,
    detect_token_type,
    parse_collection,
    parse_variables,
)

__all__ = [
    "FigmaInput",
    "FigmaInputAdapter",
    "ValidationResult",
    "build_token_path",
    "create_figma_adapter",
    "create_token",
    "create_token_reference",
    "detect_token_type",
    "parse_collection",
    "parse_variables",
]

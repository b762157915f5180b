"""
Figma output.

Transforms normalized ThemeFile tokens into Figma Variables API requests and
Plugin API style requests.
"""

from tokenbridge.output.figma.adapter import (
    ExecuteResult,
    FigmaOutputAdapter,
    FigmaOutputResult,
    create_figma_output_adapter,
    manual_instructions,
)
from tokenbridge.output.figma.ids import IdCounter
from tokenbridge.output.figma.models import (
    FigmaOutputOptions,
    OperationMode,
    PluginStatus,
    PluginStyleParams,
    PluginVariableParams,
    PostVariablesRequestBody,
    StyleTokenResult,
    WriteServerClient,
)
from tokenbridge.output.figma.report import (
    SkippedToken,
    SourceCheckResult,
    TransformationReport,
    TransformationStats,
    TransformationWarning,
    WarningCode,
    create_report,
)
from tokenbridge.output.figma.safety import (
    check_plugin_safety,
    check_source_safety,
    evaluate_source_safety,
)
from tokenbridge.output.figma.styles import extract_style_tokens
from tokenbridge.output.figma.transformer import (
    TransformResult,
    transform_to_figma_variables,
)

__all__ = [
    "ExecuteResult",
    "FigmaOutputAdapter",
    "FigmaOutputOptions",
    "FigmaOutputResult",
    "IdCounter",
    "OperationMode",
    "PluginStatus",
    "PluginStyleParams",
    "PluginVariableParams",
    "PostVariablesRequestBody",
    "SkippedToken",
    "SourceCheckResult",
    "StyleTokenResult",
    "TransformResult",
    "TransformationReport",
    "TransformationStats",
    "TransformationWarning",
    "WarningCode",
    "WriteServerClient",
    "check_plugin_safety",
    "check_source_safety",
    "create_figma_output_adapter",
    "create_report",
    "evaluate_source_safety",
    "extract_style_tokens",
    "manual_instructions",
    "transform_to_figma_variables",
]

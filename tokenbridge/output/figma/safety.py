"""
Source safety checks.

A theme read from a Figma file must not be written back over that same file
unless the caller explicitly allows it.
"""

from tokenbridge.errors import SourceOverwriteError
from tokenbridge.output.figma.models import FigmaOutputOptions, PluginStatus
from tokenbridge.output.figma.report import SourceCheckResult
from tokenbridge.schema.tokens import ThemeFile


def _compare(
    source_file_key: str | None, target_file_key: str | None, allow_overwrite: bool
) -> SourceCheckResult:
    # Without both keys the check is inconclusive and passes
    both_known = bool(source_file_key) and bool(target_file_key)
    return SourceCheckResult(
        source_file_key=source_file_key,
        target_file_key=target_file_key,
        is_same_file=both_known and source_file_key == target_file_key,
        overwrite_allowed=allow_overwrite,
    )


def _enforce(result: SourceCheckResult) -> SourceCheckResult:
    if result.is_same_file and not result.overwrite_allowed:
        raise SourceOverwriteError(result.source_file_key, result.target_file_key)
    return result


def evaluate_source_safety(
    theme: ThemeFile, options: FigmaOutputOptions
) -> SourceCheckResult:
    """Compare the theme's source file with the write target without raising."""
    return _compare(
        theme.meta.figma_file_key,
        options.target_file_key,
        options.allow_source_overwrite,
    )


def check_source_safety(theme: ThemeFile, options: FigmaOutputOptions) -> SourceCheckResult:
    """Check that the write target is not the theme's own source file.

    Args:
        theme: Theme about to be written
        options: Output options holding the target key and overwrite flag

    Returns:
        The source check result

    Raises:
        SourceOverwriteError: If both keys are known, equal, and overwriting
            was not explicitly allowed
    """
    return _enforce(evaluate_source_safety(theme, options))


def check_plugin_safety(
    theme: ThemeFile, plugin_status: PluginStatus, options: FigmaOutputOptions
) -> SourceCheckResult:
    """Same check as ``check_source_safety`` against the file open in the plugin.

    Raises:
        SourceOverwriteError: If the open file is the theme's source file and
            overwriting was not explicitly allowed
    """
    return _enforce(
        _compare(
            theme.meta.figma_file_key,
            plugin_status.file_key,
            options.allow_source_overwrite,
        )
    )

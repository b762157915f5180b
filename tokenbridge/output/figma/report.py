"""
Transformation report.

Collects statistics, skipped tokens and warnings while a theme is turned into
Figma requests. A call that returns normally may still have skipped tokens;
callers inspect the report to learn whether the result is complete.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from tokenbridge.output.figma.models import to_wire
from tokenbridge.schema.tokens import TokenType, type_tag


class WarningCode(str, Enum):
    UNSUPPORTED_TYPE = "UNSUPPORTED_TYPE"
    VALUE_TRUNCATED = "VALUE_TRUNCATED"
    UNIT_DISCARDED = "UNIT_DISCARDED"
    COMPOSITE_SKIPPED = "COMPOSITE_SKIPPED"
    ALIAS_UNRESOLVED = "ALIAS_UNRESOLVED"
    NAME_COLLISION = "NAME_COLLISION"
    SOURCE_MATCH = "SOURCE_MATCH"
    PLUGIN_NOT_CONNECTED = "PLUGIN_NOT_CONNECTED"


@dataclass(frozen=True)
class TransformationWarning:
    code: WarningCode
    message: str
    path: str | None = None


@dataclass(frozen=True)
class SkippedToken:
    path: str
    reason: str
    original_type: str
    suggestion: str | None = None


@dataclass(frozen=True)
class SourceCheckResult:
    """Outcome of comparing the theme's source file with the write target."""

    source_file_key: str | None = None
    target_file_key: str | None = None
    is_same_file: bool = False
    overwrite_allowed: bool = False


@dataclass
class TransformationStats:
    collections_created: int = 0
    modes_created: int = 0
    variables_created: int = 0
    values_set: int = 0
    skipped: int = 0
    warnings: int = 0


@dataclass
class StyleStats:
    text: int = 0
    effect: int = 0
    paint: int = 0


class TransformationReport:
    """Accumulates the outcome of one transform call."""

    def __init__(self) -> None:
        self.stats = TransformationStats()
        self.styles = StyleStats()
        self.skipped: list[SkippedToken] = []
        self.warnings: list[TransformationWarning] = []
        self.source_check = SourceCheckResult()

    def add_collection(self) -> None:
        self.stats.collections_created += 1

    def add_mode(self) -> None:
        self.stats.modes_created += 1

    def add_variable(self) -> None:
        self.stats.variables_created += 1

    def add_value(self) -> None:
        self.stats.values_set += 1

    def add_style(self, kind: str) -> None:
        """Count a created style of kind ``text``, ``effect`` or ``paint``."""
        setattr(self.styles, kind, getattr(self.styles, kind) + 1)

    def add_skipped(
        self,
        path: str,
        reason: str,
        original_type: TokenType | str,
        suggestion: str | None = None,
    ) -> None:
        self.stats.skipped += 1
        self.skipped.append(
            SkippedToken(path, reason, type_tag(original_type), suggestion)
        )

    def add_warning(self, code: WarningCode, message: str, path: str | None = None) -> None:
        self.stats.warnings += 1
        self.warnings.append(TransformationWarning(code, message, path))

    def set_source_check(self, result: SourceCheckResult) -> None:
        self.source_check = result

    @property
    def is_complete(self) -> bool:
        """True when nothing was skipped and no warning was raised."""
        return self.stats.skipped == 0 and self.stats.warnings == 0

    def warnings_for(self, code: WarningCode) -> list[TransformationWarning]:
        return [warning for warning in self.warnings if warning.code == code]

    def render(self) -> str:
        """Format the report as human-readable text."""
        lines = [
            "=== Figma Output Transformation Report ===",
            "",
            "Statistics:",
            f"  Collections: {self.stats.collections_created}",
            f"  Modes: {self.stats.modes_created}",
            f"  Variables: {self.stats.variables_created}",
            f"  Values Set: {self.stats.values_set}",
            f"  Skipped: {self.stats.skipped}",
            f"  Warnings: {self.stats.warnings}",
        ]

        if self.styles.text or self.styles.effect or self.styles.paint:
            lines += [
                "",
                "Styles:",
                f"  Text: {self.styles.text}",
                f"  Effect: {self.styles.effect}",
                f"  Paint: {self.styles.paint}",
            ]

        if self.source_check.is_same_file:
            allowed = "YES" if self.source_check.overwrite_allowed else "NO"
            lines += [
                "",
                "Source Check:",
                f"  Source file: {self.source_check.source_file_key}",
                f"  Target file: {self.source_check.target_file_key}",
                "  Same file: YES",
                f"  Overwrite allowed: {allowed}",
            ]

        if self.skipped:
            lines += ["", "Skipped Tokens:"]
            for item in self.skipped:
                lines.append(f"  [{item.original_type}] {item.path}")
                lines.append(f"    Reason: {item.reason}")
                if item.suggestion:
                    lines.append(f"    Suggestion: {item.suggestion}")

        if self.warnings:
            lines += ["", "Warnings:"]
            for warning in self.warnings:
                suffix = f" ({warning.path})" if warning.path else ""
                lines.append(f"  [{warning.code.value}] {warning.message}{suffix}")

        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render()

    def to_dict(self) -> dict[str, Any]:
        """Return the report as plain, JSON-serialisable data.

        Keys use the same camelCase wire format as the request bodies; fields
        that are None are omitted.
        """
        return {
            "stats": to_wire(self.stats),
            "styles": to_wire(self.styles),
            "skipped": to_wire(self.skipped),
            "warnings": to_wire(self.warnings),
            "sourceCheck": to_wire(self.source_check),
        }


def create_report() -> TransformationReport:
    return TransformationReport()

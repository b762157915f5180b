"""Tests for the transformation report."""

import json

from tokenbridge.output.figma.report import (
    SourceCheckResult,
    WarningCode,
    create_report,
)


class TestCounters:
    """Tests for report bookkeeping."""

    def test_fresh_report_is_complete(self):
        report = create_report()
        assert report.is_complete
        assert report.stats.values_set == 0

    def test_skipped_and_warnings_are_counted(self):
        # Arrange
        report = create_report()

        # Act
        report.add_skipped("shadow.card", "Composite", "shadow", "Use styles")
        report.add_warning(WarningCode.UNIT_DISCARDED, "Unit dropped", "spacing.lg")
        report.add_warning(WarningCode.VALUE_TRUNCATED, "Stack truncated")

        # Assert
        assert report.stats.skipped == 1
        assert report.stats.warnings == 2
        assert not report.is_complete
        assert len(report.warnings_for(WarningCode.UNIT_DISCARDED)) == 1

    def test_style_counters(self):
        report = create_report()
        report.add_style("text")
        report.add_style("paint")
        report.add_style("paint")
        assert (report.styles.text, report.styles.effect, report.styles.paint) == (1, 0, 2)


class TestRender:
    """Tests for the text rendering."""

    def test_statistics_only(self):
        # Arrange
        report = create_report()
        report.add_collection()
        report.add_variable()
        report.add_value()

        # Act
        text = report.render()

        # Assert
        assert text.startswith("=== Figma Output Transformation Report ===")
        assert "  Collections: 1" in text
        assert "  Values Set: 1" in text
        assert "Skipped Tokens:" not in text.splitlines()
        assert "Warnings:" not in text.splitlines()
        assert "Styles:" not in text.splitlines()
        assert str(report) == text

    def test_all_sections(self):
        # Arrange
        report = create_report()
        report.add_style("effect")
        report.set_source_check(
            SourceCheckResult("abc", "abc", is_same_file=True, overwrite_allowed=True)
        )
        report.add_skipped(
            "shadow.card",
            "Token type 'shadow' is not supported as a Figma variable",
            "shadow",
            "Consider using Figma Styles for composite types",
        )
        report.add_warning(WarningCode.UNIT_DISCARDED, "Unit 'rem' discarded", "a.b")

        # Act
        lines = report.render().splitlines()

        # Assert
        assert "  Effect: 1" in lines
        assert "  Overwrite allowed: YES" in lines
        assert "  [shadow] shadow.card" in lines
        assert "    Suggestion: Consider using Figma Styles for composite types" in lines
        assert "  [UNIT_DISCARDED] Unit 'rem' discarded (a.b)" in lines
        assert lines.index("Skipped Tokens:") < lines.index("Warnings:")


class TestToDict:
    def test_is_json_serialisable(self):
        # Arrange
        report = create_report()
        report.add_skipped("x", "reason", "gradient")
        report.add_warning(WarningCode.NAME_COLLISION, "dup", "colors")

        # Act
        data = json.loads(json.dumps(report.to_dict()))

        # Assert
        assert data["stats"]["skipped"] == 1
        assert data["skipped"] == [
            {"path": "x", "reason": "reason", "originalType": "gradient"}
        ]
        assert data["warnings"] == [
            {"code": "NAME_COLLISION", "message": "dup", "path": "colors"}
        ]
        assert data["sourceCheck"] == {"isSameFile": False, "overwriteAllowed": False}

    def test_keys_are_camel_case_throughout(self):
        # Arrange
        report = create_report()
        report.add_collection()
        report.add_skipped("shadow.card", "Composite", "shadow", "Use styles")
        report.add_warning(WarningCode.VALUE_TRUNCATED, "Stack truncated")
        report.set_source_check(SourceCheckResult("abc", "def"))

        # Act
        data = report.to_dict()

        # Assert
        assert data["stats"]["collectionsCreated"] == 1
        assert data["skipped"][0]["suggestion"] == "Use styles"
        assert data["warnings"][0] == {
            "code": "VALUE_TRUNCATED",
            "message": "Stack truncated",
        }
        assert data["sourceCheck"]["sourceFileKey"] == "abc"
        assert data["sourceCheck"]["targetFileKey"] == "def"

        keys = list(data)
        for section in data.values():
            items = section if isinstance(section, list) else [section]
            for item in items:
                keys.extend(item)
        assert not [key for key in keys if "_" in key]

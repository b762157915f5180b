"""Tests for the Figma variable parser."""

import pytest

from tokenbridge.errors import PathCollisionError
from tokenbridge.input.parser import (
    build_token_path,
    create_token,
    create_token_reference,
    detect_token_type,
    parse_variables,
)
from tokenbridge.schema.figma import (
    RGBA,
    FigmaVariable,
    FigmaVariableCollection,
    VariableAlias,
    VariableMode,
    decode_collections,
    decode_variables,
)
from tokenbridge.schema.tokens import (
    FIGMA_EXTENSION_KEY,
    ColorValue,
    DimensionValue,
    Leaf,
    TokenReference,
    TokenType,
)
from tokenbridge.traversal import resolve_path


def make_variable(
    name: str = "Test",
    resolved_type: str = "FLOAT",
    scopes: tuple[str, ...] = (),
    values: dict | None = None,
    variable_id: str = "VariableID:1:1",
    collection_id: str = "VariableCollectionId:1:0",
) -> FigmaVariable:
    return FigmaVariable(
        id=variable_id,
        name=name,
        resolved_type=resolved_type,
        variable_collection_id=collection_id,
        scopes=scopes,
        values_by_mode=values if values is not None else {"1:0": 1},
    )


def make_collection(
    collection_id: str = "VariableCollectionId:1:0", name: str = "Primitives"
) -> FigmaVariableCollection:
    return FigmaVariableCollection(
        id=collection_id,
        name=name,
        modes=(VariableMode("1:0", "Default"),),
        default_mode_id="1:0",
    )


class TestBuildTokenPath:
    """Tests for Figma name normalization."""

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("Colors/Primary Blue/500", ("colors", "primary-blue", "500")),
            ("Spacing/Extra   Large", ("spacing", "extra-large")),
            ("radius", ("radius",)),
        ],
    )
    def test_build_token_path(self, name, expected):
        assert build_token_path(name) == expected


class TestDetectTokenType:
    """Tests for type inference from resolved type and scopes."""

    @pytest.mark.parametrize(
        "resolved_type, scopes, expected",
        [
            ("COLOR", (), TokenType.COLOR),
            ("BOOLEAN", (), TokenType.BOOLEAN),
            ("STRING", (), TokenType.STRING),
            ("STRING", ("FONT_FAMILY",), TokenType.FONT_FAMILY),
            ("FLOAT", (), TokenType.NUMBER),
            ("FLOAT", ("ALL_SCOPES",), TokenType.NUMBER),
            ("FLOAT", ("GAP",), TokenType.DIMENSION),
            ("FLOAT", ("CORNER_RADIUS",), TokenType.DIMENSION),
            ("FLOAT", ("FONT_SIZE",), TokenType.DIMENSION),
            ("FLOAT", ("FONT_WEIGHT",), TokenType.FONT_WEIGHT),
            ("FLOAT", ("FONT_WEIGHT", "GAP"), TokenType.FONT_WEIGHT),
            ("VECTOR", (), TokenType.STRING),
        ],
    )
    def test_detect_token_type(self, resolved_type, scopes, expected):
        variable = make_variable(resolved_type=resolved_type, scopes=scopes)
        assert detect_token_type(variable) == expected


class TestCreateToken:
    """Tests for converting one mode value into a token."""

    def test_color_is_copied_verbatim(self):
        # Arrange
        variable = make_variable(resolved_type="COLOR")

        # Act
        token = create_token(variable, RGBA(0.2, 0.4, 0.8, 0.5), {})

        # Assert
        assert token.type == TokenType.COLOR
        assert token.value == ColorValue(0.2, 0.4, 0.8, 0.5)

    def test_dimension_gets_px_unit(self):
        variable = make_variable(scopes=("WIDTH_HEIGHT",))
        token = create_token(variable, 24, {})
        assert token.value == DimensionValue(24, "px")

    def test_font_family_becomes_stack(self):
        variable = make_variable(resolved_type="STRING", scopes=("FONT_FAMILY",))
        token = create_token(variable, "Inter", {})
        assert token.value == ("Inter",)

    def test_extensions(self):
        # Arrange
        variable = FigmaVariable(
            id="VariableID:1:9",
            name="Radius",
            resolved_type="FLOAT",
            variable_collection_id="VariableCollectionId:1:0",
            scopes=("CORNER_RADIUS",),
            hidden_from_publishing=True,
            code_syntax={"WEB": "--radius", "iOS": "radius"},
            description="Corner radius",
        )

        # Act
        token = create_token(variable, 4, {})

        # Assert
        assert token.description == "Corner radius"
        assert token.extensions[FIGMA_EXTENSION_KEY] == {
            "variableId": "VariableID:1:9",
            "scopes": ["CORNER_RADIUS"],
            "hiddenFromPublishing": True,
            "codeSyntax": {"web": "--radius", "ios": "radius"},
        }
        assert token.hidden_from_publishing


class TestCreateTokenReference:
    """Tests for alias conversion."""

    def test_known_target(self):
        # Arrange
        target = make_variable(name="Colors/Primary Blue", variable_id="VariableID:1:1")

        # Act
        reference = create_token_reference(
            VariableAlias("VariableID:1:1"), {target.id: target}
        )

        # Assert
        assert reference == TokenReference("{colors.primary-blue}")

    def test_unknown_target_keeps_raw_id(self):
        reference = create_token_reference(VariableAlias("VariableID:9:9"), {})
        assert reference.ref == "{VariableID:9:9}"


class TestParseVariables:
    """Tests for parsing whole variable sets."""

    def test_parse_response(self, variables_response):
        # Arrange
        meta = variables_response["meta"]

        # Act
        collections = parse_variables(
            decode_variables(meta["variables"]),
            decode_collections(meta["variableCollections"]),
        )

        # Assert
        assert [c.name for c in collections] == ["Theme"]
        theme = collections[0]
        assert theme.modes == ("Light", "Dark")
        assert theme.default_mode == "Light"
        assert theme.description == "Figma collection: Theme"

        light = theme.tokens_for("Light")
        dark = theme.tokens_for("Dark")
        assert resolve_path(light, ("colors", "primary-blue")).value == ColorValue(
            0.2, 0.4, 0.8, 1
        )
        assert resolve_path(light, ("colors", "link")).value == TokenReference(
            "{colors.primary-blue}"
        )
        assert resolve_path(dark, ("colors", "link")).value == TokenReference(
            "{VariableID:9:9}"
        )
        assert resolve_path(light, ("spacing", "large")).value == DimensionValue(32)
        assert resolve_path(light, ("font", "body")).type == TokenType.FONT_FAMILY

    def test_mode_without_value_has_no_token(self, variables_response):
        meta = variables_response["meta"]
        theme = parse_variables(
            decode_variables(meta["variables"]),
            decode_collections(meta["variableCollections"]),
        )[0]
        assert resolve_path(theme.tokens_for("Dark"), ("spacing", "large")) is None

    def test_same_value_lands_in_every_mode(self):
        # Arrange
        variable = make_variable(name="Size", values={"1:0": 8})

        # Act
        collections = parse_variables(
            {variable.id: variable}, {"VariableCollectionId:1:0": make_collection()}
        )

        # Assert
        tree = collections[0].tokens_for("Default")
        assert isinstance(tree.get("size"), Leaf)

    def test_empty_input(self):
        assert parse_variables({}, {}) == []

    def test_colliding_names_raise(self):
        """A variable named like an existing group is rejected."""
        # Arrange
        group_member = make_variable(name="Color/Red", variable_id="VariableID:1:1")
        leaf = make_variable(name="Color", variable_id="VariableID:1:2")

        # Act & Assert
        with pytest.raises(PathCollisionError):
            parse_variables(
                {group_member.id: group_member, leaf.id: leaf},
                {"VariableCollectionId:1:0": make_collection()},
            )

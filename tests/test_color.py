"""Tests for color presentation helpers."""

import numpy as np
import pytest

from tokenbridge.color import (
    format_color,
    hex_to_rgba,
    linear_to_srgb,
    oklch_to_srgb,
    rgba_to_hex,
    srgb_to_linear,
    srgb_to_oklch,
)
from tokenbridge.schema.tokens import ColorValue


class TestHex:
    """Tests for hex conversion."""

    def test_opaque_color(self):
        assert rgba_to_hex(ColorValue(1, 0, 0)) == "#ff0000"

    def test_translucent_color_has_alpha_digits(self):
        assert rgba_to_hex(ColorValue(0, 0, 0, 0.5)) == "#00000080"

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("#fff", ColorValue(1.0, 1.0, 1.0, 1.0)),
            ("#000000", ColorValue(0.0, 0.0, 0.0, 1.0)),
            ("ff000000", ColorValue(1.0, 0.0, 0.0, 0.0)),
        ],
    )
    def test_hex_to_rgba(self, text, expected):
        assert hex_to_rgba(text) == expected

    def test_invalid_hex_raises(self):
        with pytest.raises(ValueError, match="Not a hex color"):
            hex_to_rgba("#12345")


class TestOklch:
    """Tests for OKLCH conversion."""

    def test_gamma_round_trip(self):
        channels = np.array([0.0, 0.02, 0.5, 1.0])
        np.testing.assert_allclose(linear_to_srgb(srgb_to_linear(channels)), channels)

    def test_white_is_achromatic(self):
        # Act
        oklch = srgb_to_oklch(ColorValue(1, 1, 1))

        # Assert
        assert oklch.l == pytest.approx(1.0, abs=1e-4)
        assert oklch.c == pytest.approx(0.0, abs=1e-4)
        assert oklch.h == 0.0

    def test_red(self):
        oklch = srgb_to_oklch(ColorValue(1, 0, 0))
        assert oklch.l == pytest.approx(0.628, abs=1e-3)
        assert oklch.c == pytest.approx(0.2577, abs=1e-3)
        assert oklch.h == pytest.approx(29.23, abs=0.05)

    def test_round_trip_preserves_color(self):
        # Arrange
        color = ColorValue(0.2, 0.4, 0.8, 0.75)

        # Act
        back = oklch_to_srgb(srgb_to_oklch(color))

        # Assert
        assert back.r == pytest.approx(color.r, abs=1e-4)
        assert back.g == pytest.approx(color.g, abs=1e-4)
        assert back.b == pytest.approx(color.b, abs=1e-4)
        assert back.a == color.a


class TestFormatColor:
    """Tests for CSS color text."""

    def test_formats(self):
        color = ColorValue(1, 0, 0, 0.5)
        assert format_color(color, "hex") == "#ff000080"
        assert format_color(color, "rgba") == "rgba(255, 0, 0, 0.5)"
        assert format_color(color, "oklch").startswith("oklch(62.")
        assert format_color(color, "oklch").endswith(" / 0.5)")

    def test_unknown_format_raises(self):
        with pytest.raises(ValueError, match="Unknown color format"):
            format_color(ColorValue(0, 0, 0), "hsl")

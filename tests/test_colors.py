"""Tests for swiftywords.ui.colors – palette, color blending and tile styles."""

from __future__ import annotations

from swiftywords.ui.colors import GameColors, blend_hex, tile_style


# ===========================================================================
# GameColors – constants exist
# ===========================================================================

class TestGameColors:
    def test_bg_top_is_hex(self):
        assert GameColors.BG_TOP.startswith("#")
        assert len(GameColors.BG_TOP) == 7

    def test_tile_colors_are_hex(self):
        for value in (GameColors.TILE_BG, GameColors.TILE_BORDER, GameColors.TILE_TEXT):
            assert value.startswith("#")
            assert len(value) == 7

    def test_card_bg_is_rgba(self):
        assert GameColors.CARD_BG.startswith("rgba(")


# ===========================================================================
# blend_hex
# ===========================================================================

class TestBlendHex:
    def test_t_zero_returns_a(self):
        assert blend_hex("#FF0000", "#0000FF", 0.0) == "#FF0000"

    def test_t_one_returns_b(self):
        assert blend_hex("#FF0000", "#0000FF", 1.0) == "#0000FF"

    def test_midpoint(self):
        result = blend_hex("#000000", "#FFFFFF", 0.5)
        r = int(result[1:3], 16)
        assert 126 <= r <= 128

    def test_clamped(self):
        assert blend_hex("#FF0000", "#0000FF", -1.0) == "#FF0000"
        assert blend_hex("#FF0000", "#0000FF", 2.0) == "#0000FF"

    def test_wrong_length_returns_a(self):
        assert blend_hex("#FFF", "#000000", 0.5) == "#FFF"

    def test_invalid_hex_chars(self):
        assert blend_hex("#GGHHII", "#000000", 0.5) == "#GGHHII"

    def test_bad_t(self):
        assert blend_hex("#FF0000", "#0000FF", "half") == "#FF0000"  # type: ignore[arg-type]


# ===========================================================================
# tile_style
# ===========================================================================

class TestTileStyle:
    def test_uses_base_and_accent(self):
        style = tile_style("#FFFFFF", "#000000")
        assert "background: #FFFFFF;" in style
        assert "border-color: #000000;" in style

    def test_hover_and_pressed_shades(self):
        style = tile_style("#FFFFFF", "#000000")
        assert blend_hex("#FFFFFF", "#000000", 0.15) in style
        assert blend_hex("#FFFFFF", "#000000", 0.35) in style

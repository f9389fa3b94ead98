"""Tests for keytrainer.ui.colors – palette and color blending."""

from __future__ import annotations

import pytest

from keytrainer.core.keymap import KeyKind
from keytrainer.ui.colors import KeyColors, blend_hex, key_fill


# ===========================================================================
# KeyColors / key_fill
# ===========================================================================

class TestKeyColors:
    @pytest.mark.parametrize(
        "name", ["PINK", "YELLOW", "GREEN", "BLUE", "VIOLET", "ORANGE", "CONTROL",
                 "TEXT_CORRECT", "TEXT_NORMAL", "TEXT_MISTAKE"],
    )
    def test_palette_is_hex(self, name: str):
        value = getattr(KeyColors, name)
        assert value.startswith("#")
        assert len(value) == 7

    def test_mistake_differs_from_normal(self):
        assert KeyColors.TEXT_MISTAKE != KeyColors.TEXT_NORMAL


class TestKeyFill:
    def test_printable_keeps_zone(self):
        assert key_fill(KeyColors.PINK, KeyKind.LETTER) == KeyColors.PINK
        assert key_fill(KeyColors.ORANGE, KeyKind.SPACE) == KeyColors.ORANGE

    def test_control_is_gray(self):
        assert key_fill(KeyColors.PINK, KeyKind.CONTROL) == KeyColors.CONTROL


# ===========================================================================
# blend_hex
# ===========================================================================

class TestBlendHex:
    def test_t_zero_returns_a(self):
        assert blend_hex("#FF0000", "#0000FF", 0.0) == "#FF0000"

    def test_t_one_returns_b(self):
        assert blend_hex("#FF0000", "#0000FF", 1.0) == "#0000FF"

    def test_darken_pressed_key(self):
        # 0xFF * 0.8 = 204 -> CC
        assert blend_hex("#FFFFFF", "#000000", 0.2) == "#CCCCCC"

    def test_t_is_clamped(self):
        assert blend_hex("#FF0000", "#0000FF", -1.0) == "#FF0000"
        assert blend_hex("#FF0000", "#0000FF", 2.0) == "#0000FF"

    @pytest.mark.parametrize("a,b", [("FF0000", "#0000FF"), ("#FFF", "#000000"), ("#GGHHII", "#000000")])
    def test_invalid_returns_a(self, a: str, b: str):
        assert blend_hex(a, b, 0.5) == a

    def test_bad_t_returns_a(self):
        assert blend_hex("#FF0000", "#0000FF", "half") == "#FF0000"  # type: ignore[arg-type]

    def test_midpoint_rounds_channels(self):
        assert blend_hex("#000000", "#FFFFFF", 0.5) == "#808080"

    def test_surrounding_whitespace_is_ignored(self):
        assert blend_hex(" #FFFFFF ", "#000000", 0.2) == "#CCCCCC"

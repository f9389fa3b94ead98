"""Tests for keytrainer.ui.models – TypedTextView."""

from __future__ import annotations

import pytest

from keytrainer.core.session import KeystrokeResult, SessionState
from keytrainer.ui.colors import KeyColors
from keytrainer.ui.models import TypedTextView


def _result(typed: str, correct_length: int, target: str = "abcdef") -> KeystrokeResult:
    return KeystrokeResult(
        accepted=True,
        target=target,
        typed=typed,
        correct_length=correct_length,
        fails=0,
        speed=0,
        state=SessionState.RUNNING,
    )


# ===========================================================================
# TypedTextView
# ===========================================================================

class TestTypedTextView:
    def test_split_at_boundary(self):
        view = TypedTextView.from_result(_result("abxy", 2))
        assert view.correct == "ab"
        assert view.remainder == "xy"
        assert view.has_mistake is True

    def test_all_correct(self):
        view = TypedTextView.from_result(_result("abc", 3))
        assert view.remainder == ""
        assert view.has_mistake is False
        assert view.remainder_color == KeyColors.TEXT_NORMAL

    def test_mistake_color(self):
        view = TypedTextView.from_result(_result("x", 0))
        assert view.remainder_color == KeyColors.TEXT_MISTAKE

    def test_empty(self):
        view = TypedTextView.from_result(_result("", 0))
        assert (view.correct, view.remainder) == ("", "")

    def test_equality(self):
        assert TypedTextView("a", "b", True) == TypedTextView("a", "b", True)


class TestToHtml:
    def test_colors_both_parts(self):
        html_text = TypedTextView("ab", "x", True).to_html()
        assert f'color:{KeyColors.TEXT_CORRECT};">ab<' in html_text
        assert f'color:{KeyColors.TEXT_MISTAKE};">x<' in html_text

    @pytest.mark.parametrize("raw,escaped", [("<", "&lt;"), ("&", "&amp;"), ('"', "&quot;")])
    def test_escapes_markup(self, raw: str, escaped: str):
        assert escaped in TypedTextView(raw, "", False).to_html()

    def test_preserves_spaces(self):
        html_text = TypedTextView("a b", "", False).to_html()
        assert "a&nbsp;b" in html_text

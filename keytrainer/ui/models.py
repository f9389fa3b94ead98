"""Data models used by the UI."""

from __future__ import annotations

import html
from dataclasses import dataclass

from keytrainer.core.session import KeystrokeResult
from keytrainer.ui.colors import KeyColors


@dataclass
class TypedTextView:
    """Typed text split at the correct-prefix boundary for coloring."""

    correct: str
    remainder: str
    has_mistake: bool

    @classmethod
    def from_result(cls, result: KeystrokeResult) -> "TypedTextView":
        return cls(
            correct=result.typed[: result.correct_length],
            remainder=result.typed[result.correct_length :],
            has_mistake=result.has_mistake,
        )

    @property
    def remainder_color(self) -> str:
        return KeyColors.TEXT_MISTAKE if self.has_mistake else KeyColors.TEXT_NORMAL

    def to_html(self) -> str:
        # Spaces must survive rich-text whitespace collapsing.
        correct = html.escape(self.correct).replace(" ", "&nbsp;")
        remainder = html.escape(self.remainder).replace(" ", "&nbsp;")
        return (
            f'<span style="color:{KeyColors.TEXT_CORRECT};">{correct}</span>'
            f'<span style="color:{self.remainder_color};">{remainder}</span>'
        )

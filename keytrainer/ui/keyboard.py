"""On-screen QWERTY keyboard: keycap grid, glyph refresh and press highlight."""

from __future__ import annotations

import html
from typing import Dict, Optional, Tuple

from PySide6.QtCore import Qt
from PySide6.QtGui import QColor
from PySide6.QtWidgets import QGraphicsDropShadowEffect, QGridLayout, QLabel, QWidget

from keytrainer.core.keymap import KEYMAP, KeyId, KeyKind, display_glyph
from keytrainer.ui.colors import KeyColors, blend_hex, key_fill

_P, _Y, _G, _B, _V, _O = (
    KeyColors.PINK,
    KeyColors.YELLOW,
    KeyColors.GREEN,
    KeyColors.BLUE,
    KeyColors.VIOLET,
    KeyColors.ORANGE,
)

# (row, column, column span, finger zone); the grid is 30 half-key columns wide.
KEY_LAYOUT: Dict[KeyId, Tuple[int, int, int, str]] = {
    KeyId.BACKQUOTE: (0, 0, 2, _P),
    KeyId.D1: (0, 2, 2, _P),
    KeyId.D2: (0, 4, 2, _P),
    KeyId.D3: (0, 6, 2, _Y),
    KeyId.D4: (0, 8, 2, _G),
    KeyId.D5: (0, 10, 2, _B),
    KeyId.D6: (0, 12, 2, _B),
    KeyId.D7: (0, 14, 2, _V),
    KeyId.D8: (0, 16, 2, _V),
    KeyId.D9: (0, 18, 2, _P),
    KeyId.D0: (0, 20, 2, _Y),
    KeyId.MINUS: (0, 22, 2, _G),
    KeyId.EQUAL: (0, 24, 2, _G),
    KeyId.BACKSPACE: (0, 26, 4, KeyColors.CONTROL),
    KeyId.TAB: (1, 0, 3, KeyColors.CONTROL),
    KeyId.Q: (1, 3, 2, _P),
    KeyId.W: (1, 5, 2, _Y),
    KeyId.E: (1, 7, 2, _G),
    KeyId.R: (1, 9, 2, _B),
    KeyId.T: (1, 11, 2, _B),
    KeyId.Y: (1, 13, 2, _V),
    KeyId.U: (1, 15, 2, _V),
    KeyId.I: (1, 17, 2, _P),
    KeyId.O: (1, 19, 2, _Y),
    KeyId.P: (1, 21, 2, _G),
    KeyId.BRACKET_LEFT: (1, 23, 2, _G),
    KeyId.BRACKET_RIGHT: (1, 25, 2, _G),
    KeyId.BACKSLASH: (1, 27, 3, _G),
    KeyId.CAPS_LOCK: (2, 0, 4, KeyColors.CONTROL),
    KeyId.A: (2, 4, 2, _P),
    KeyId.S: (2, 6, 2, _Y),
    KeyId.D: (2, 8, 2, _G),
    KeyId.F: (2, 10, 2, _B),
    KeyId.G: (2, 12, 2, _B),
    KeyId.H: (2, 14, 2, _V),
    KeyId.J: (2, 16, 2, _V),
    KeyId.K: (2, 18, 2, _P),
    KeyId.L: (2, 20, 2, _Y),
    KeyId.SEMICOLON: (2, 22, 2, _G),
    KeyId.QUOTE: (2, 24, 2, _G),
    KeyId.ENTER: (2, 26, 4, KeyColors.CONTROL),
    KeyId.LEFT_SHIFT: (3, 0, 5, KeyColors.CONTROL),
    KeyId.Z: (3, 5, 2, _P),
    KeyId.X: (3, 7, 2, _Y),
    KeyId.C: (3, 9, 2, _G),
    KeyId.V: (3, 11, 2, _B),
    KeyId.B: (3, 13, 2, _B),
    KeyId.N: (3, 15, 2, _V),
    KeyId.M: (3, 17, 2, _V),
    KeyId.COMMA: (3, 19, 2, _P),
    KeyId.PERIOD: (3, 21, 2, _Y),
    KeyId.SLASH: (3, 23, 2, _G),
    KeyId.RIGHT_SHIFT: (3, 25, 5, KeyColors.CONTROL),
    KeyId.LEFT_CTRL: (4, 0, 3, KeyColors.CONTROL),
    KeyId.LEFT_WIN: (4, 3, 3, KeyColors.CONTROL),
    KeyId.LEFT_ALT: (4, 6, 3, KeyColors.CONTROL),
    KeyId.SPACE: (4, 9, 12, _O),
    KeyId.RIGHT_ALT: (4, 21, 3, KeyColors.CONTROL),
    KeyId.RIGHT_WIN: (4, 24, 3, KeyColors.CONTROL),
    KeyId.RIGHT_CTRL: (4, 27, 3, KeyColors.CONTROL),
}

GRID_COLUMNS = 30


class KeyboardWidget(QWidget):
    """Grid of keycap labels; printable keys relabel with Shift and Caps Lock."""

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._labels: Dict[KeyId, QLabel] = {}
        self._pressed: set[KeyId] = set()

        grid = QGridLayout(self)
        grid.setSpacing(4)
        grid.setContentsMargins(0, 0, 0, 0)
        for key_id, (row, column, span, _zone) in KEY_LAYOUT.items():
            label = QLabel()
            label.setAlignment(Qt.AlignCenter)
            label.setMinimumHeight(48)
            label.setMinimumWidth(0)
            label.setTextFormat(Qt.RichText)
            grid.addWidget(label, row, column, 1, span)
            self._labels[key_id] = label
            self._apply_style(key_id)
        for column in range(GRID_COLUMNS):
            grid.setColumnStretch(column, 1)

        self.refresh_glyphs(False, False)

    def refresh_glyphs(self, shift: bool, caps: bool) -> None:
        """Re-render every keycap for the given modifier state."""
        for key_id, label in self._labels.items():
            label.setText(html.escape(display_glyph(KEYMAP[key_id], shift, caps)))

    def set_pressed(self, key_id: KeyId, pressed: bool) -> None:
        if key_id not in self._labels:
            return
        label = self._labels[key_id]
        if pressed:
            self._pressed.add(key_id)
            shadow = QGraphicsDropShadowEffect(label)
            shadow.setBlurRadius(12)
            shadow.setOffset(3, 3)
            shadow.setColor(QColor(KeyColors.PRESSED_SHADOW))
            label.setGraphicsEffect(shadow)
        else:
            self._pressed.discard(key_id)
            label.setGraphicsEffect(None)
        self._apply_style(key_id)

    def clear_pressed(self) -> None:
        for key_id in list(self._pressed):
            self.set_pressed(key_id, False)

    def _apply_style(self, key_id: KeyId) -> None:
        key = KEYMAP[key_id]
        fill = key_fill(KEY_LAYOUT[key_id][3], key.kind)
        if key_id in self._pressed:
            fill = blend_hex(fill, "#000000", 0.2)
        font_px = 24 if key.kind in (KeyKind.LETTER, KeyKind.DIGIT, KeyKind.SYMBOL) else 16
        self._labels[key_id].setStyleSheet(
            f"""
            QLabel {{
                background: {fill};
                border: 2px solid {KeyColors.BORDER};
                border-radius: 7px;
                font-size: {font_px}px;
                color: {KeyColors.TEXT_NORMAL};
            }}
            """
        )

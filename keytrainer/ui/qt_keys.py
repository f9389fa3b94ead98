"""Translate Qt key events into key map identifiers."""

from __future__ import annotations

import string
from typing import Dict, Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QKeyEvent

from keytrainer.core.keymap import KeyId


def _as_int(key) -> int:
    return key.value if hasattr(key, "value") else int(key)


_SIDED = {
    "Key_Shift": (KeyId.LEFT_SHIFT, KeyId.RIGHT_SHIFT),
    "Key_Control": (KeyId.LEFT_CTRL, KeyId.RIGHT_CTRL),
    "Key_Alt": (KeyId.LEFT_ALT, KeyId.RIGHT_ALT),
    "Key_Meta": (KeyId.LEFT_WIN, KeyId.RIGHT_WIN),
}

# Native scan codes of right-hand modifiers (Windows set 1, then X11/xkb).
# The two sets share one table since only the sided keys in _SIDED read it.
_RIGHT_SCAN_CODES = frozenset({54, 285, 312, 348, 62, 105, 108, 134})

# Shift+digit and shift+symbol arrive as their own Qt keys.
_NAMED: Dict[str, KeyId] = {
    "Key_QuoteLeft": KeyId.BACKQUOTE,
    "Key_AsciiTilde": KeyId.BACKQUOTE,
    "Key_Exclam": KeyId.D1,
    "Key_At": KeyId.D2,
    "Key_NumberSign": KeyId.D3,
    "Key_Dollar": KeyId.D4,
    "Key_Percent": KeyId.D5,
    "Key_AsciiCircum": KeyId.D6,
    "Key_Ampersand": KeyId.D7,
    "Key_Asterisk": KeyId.D8,
    "Key_ParenLeft": KeyId.D9,
    "Key_ParenRight": KeyId.D0,
    "Key_Minus": KeyId.MINUS,
    "Key_Underscore": KeyId.MINUS,
    "Key_Equal": KeyId.EQUAL,
    "Key_Plus": KeyId.EQUAL,
    "Key_Backspace": KeyId.BACKSPACE,
    "Key_Tab": KeyId.TAB,
    "Key_Backtab": KeyId.TAB,
    "Key_BracketLeft": KeyId.BRACKET_LEFT,
    "Key_BraceLeft": KeyId.BRACKET_LEFT,
    "Key_BracketRight": KeyId.BRACKET_RIGHT,
    "Key_BraceRight": KeyId.BRACKET_RIGHT,
    "Key_Backslash": KeyId.BACKSLASH,
    "Key_Bar": KeyId.BACKSLASH,
    "Key_CapsLock": KeyId.CAPS_LOCK,
    "Key_Semicolon": KeyId.SEMICOLON,
    "Key_Colon": KeyId.SEMICOLON,
    "Key_Apostrophe": KeyId.QUOTE,
    "Key_QuoteDbl": KeyId.QUOTE,
    "Key_Return": KeyId.ENTER,
    "Key_Enter": KeyId.ENTER,
    "Key_Comma": KeyId.COMMA,
    "Key_Less": KeyId.COMMA,
    "Key_Period": KeyId.PERIOD,
    "Key_Greater": KeyId.PERIOD,
    "Key_Slash": KeyId.SLASH,
    "Key_Question": KeyId.SLASH,
    "Key_AltGr": KeyId.RIGHT_ALT,
    "Key_Super_L": KeyId.LEFT_WIN,
    "Key_Super_R": KeyId.RIGHT_WIN,
    "Key_Space": KeyId.SPACE,
}


def _build_table() -> Dict[int, KeyId]:
    table: Dict[int, KeyId] = {}
    for letter in string.ascii_uppercase:
        table[_as_int(getattr(Qt.Key, f"Key_{letter}"))] = KeyId(letter.lower())
    for digit in string.digits:
        table[_as_int(getattr(Qt.Key, f"Key_{digit}"))] = KeyId(digit)
    for name, key_id in _NAMED.items():
        table[_as_int(getattr(Qt.Key, name))] = key_id
    return table


_TABLE = _build_table()
_SIDED_TABLE = {_as_int(getattr(Qt.Key, name)): pair for name, pair in _SIDED.items()}


def key_id_for(qt_key, native_scan_code: int = 0) -> Optional[KeyId]:
    """Map a Qt key code to a KeyId; None for keys the trainer doesn't show."""
    code = _as_int(qt_key)
    sided = _SIDED_TABLE.get(code)
    if sided is not None:
        left, right = sided
        return right if native_scan_code in _RIGHT_SCAN_CODES else left
    return _TABLE.get(code)


def key_id_from_event(event: QKeyEvent) -> Optional[KeyId]:
    return key_id_for(event.key(), event.nativeScanCode())

"""US QWERTY key map: key identifiers, classifications and keycap glyphs."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import List, Mapping, Optional


class KeyKind(Enum):
    CONTROL = "control"
    LETTER = "letter"
    DIGIT = "digit"
    SYMBOL = "symbol"
    SPACE = "space"

    @property
    def is_digit_or_symbol(self) -> bool:
        return self in (KeyKind.DIGIT, KeyKind.SYMBOL)


class KeyId(Enum):
    BACKQUOTE = "backquote"
    D1 = "1"
    D2 = "2"
    D3 = "3"
    D4 = "4"
    D5 = "5"
    D6 = "6"
    D7 = "7"
    D8 = "8"
    D9 = "9"
    D0 = "0"
    MINUS = "minus"
    EQUAL = "equal"
    BACKSPACE = "backspace"
    TAB = "tab"
    Q = "q"
    W = "w"
    E = "e"
    R = "r"
    T = "t"
    Y = "y"
    U = "u"
    I = "i"
    O = "o"
    P = "p"
    BRACKET_LEFT = "bracket_left"
    BRACKET_RIGHT = "bracket_right"
    BACKSLASH = "backslash"
    CAPS_LOCK = "caps_lock"
    A = "a"
    S = "s"
    D = "d"
    F = "f"
    G = "g"
    H = "h"
    J = "j"
    K = "k"
    L = "l"
    SEMICOLON = "semicolon"
    QUOTE = "quote"
    ENTER = "enter"
    LEFT_SHIFT = "left_shift"
    Z = "z"
    X = "x"
    C = "c"
    V = "v"
    B = "b"
    N = "n"
    M = "m"
    COMMA = "comma"
    PERIOD = "period"
    SLASH = "slash"
    RIGHT_SHIFT = "right_shift"
    LEFT_CTRL = "left_ctrl"
    LEFT_WIN = "left_win"
    LEFT_ALT = "left_alt"
    SPACE = "space"
    RIGHT_ALT = "right_alt"
    RIGHT_WIN = "right_win"
    RIGHT_CTRL = "right_ctrl"


@dataclass(frozen=True)
class KeyDef:
    """A single physical key. Control keys carry only a label."""

    key_id: KeyId
    kind: KeyKind
    label: str
    glyph: Optional[str] = None
    shift_glyph: Optional[str] = None

    @property
    def is_modifier(self) -> bool:
        """Shift and Caps Lock change the keycap glyphs but type nothing."""
        return self.key_id in MODIFIER_KEYS


MODIFIER_KEYS = frozenset({KeyId.LEFT_SHIFT, KeyId.RIGHT_SHIFT, KeyId.CAPS_LOCK})


def _letter(key_id: KeyId) -> KeyDef:
    letter = key_id.value
    return KeyDef(key_id, KeyKind.LETTER, letter.upper(), letter.lower(), letter.upper())


def _digit(key_id: KeyId, shift_glyph: str) -> KeyDef:
    return KeyDef(key_id, KeyKind.DIGIT, key_id.value, key_id.value, shift_glyph)


def _symbol(key_id: KeyId, glyph: str, shift_glyph: str) -> KeyDef:
    return KeyDef(key_id, KeyKind.SYMBOL, glyph, glyph, shift_glyph)


def _control(key_id: KeyId, label: str) -> KeyDef:
    return KeyDef(key_id, KeyKind.CONTROL, label)


# Table order follows the physical rows, left to right.
_KEYS: List[KeyDef] = [
    _symbol(KeyId.BACKQUOTE, "`", "~"),
    _digit(KeyId.D1, "!"),
    _digit(KeyId.D2, "@"),
    _digit(KeyId.D3, "#"),
    _digit(KeyId.D4, "$"),
    _digit(KeyId.D5, "%"),
    _digit(KeyId.D6, "^"),
    _digit(KeyId.D7, "&"),
    _digit(KeyId.D8, "*"),
    _digit(KeyId.D9, "("),
    _digit(KeyId.D0, ")"),
    _symbol(KeyId.MINUS, "-", "_"),
    _symbol(KeyId.EQUAL, "=", "+"),
    _control(KeyId.BACKSPACE, "Backspace"),
    _control(KeyId.TAB, "Tab"),
    *(_letter(k) for k in (KeyId.Q, KeyId.W, KeyId.E, KeyId.R, KeyId.T,
                           KeyId.Y, KeyId.U, KeyId.I, KeyId.O, KeyId.P)),
    _symbol(KeyId.BRACKET_LEFT, "[", "{"),
    _symbol(KeyId.BRACKET_RIGHT, "]", "}"),
    _symbol(KeyId.BACKSLASH, "\\", "|"),
    _control(KeyId.CAPS_LOCK, "Caps Lock"),
    *(_letter(k) for k in (KeyId.A, KeyId.S, KeyId.D, KeyId.F, KeyId.G,
                           KeyId.H, KeyId.J, KeyId.K, KeyId.L)),
    _symbol(KeyId.SEMICOLON, ";", ":"),
    _symbol(KeyId.QUOTE, "'", '"'),
    _control(KeyId.ENTER, "Enter"),
    _control(KeyId.LEFT_SHIFT, "Shift"),
    *(_letter(k) for k in (KeyId.Z, KeyId.X, KeyId.C, KeyId.V, KeyId.B,
                           KeyId.N, KeyId.M)),
    _symbol(KeyId.COMMA, ",", "<"),
    _symbol(KeyId.PERIOD, ".", ">"),
    _symbol(KeyId.SLASH, "/", "?"),
    _control(KeyId.RIGHT_SHIFT, "Shift"),
    _control(KeyId.LEFT_CTRL, "Ctrl"),
    _control(KeyId.LEFT_WIN, "Win"),
    _control(KeyId.LEFT_ALT, "Alt"),
    KeyDef(KeyId.SPACE, KeyKind.SPACE, "Space", " ", " "),
    _control(KeyId.RIGHT_ALT, "Alt"),
    _control(KeyId.RIGHT_WIN, "Win"),
    _control(KeyId.RIGHT_CTRL, "Ctrl"),
]

KEYMAP: Mapping[KeyId, KeyDef] = MappingProxyType({key.key_id: key for key in _KEYS})


def lookup(key_id: Optional[KeyId]) -> Optional[KeyDef]:
    """Return the definition for ``key_id``, or None for unmapped keys."""
    if key_id is None:
        return None
    return KEYMAP.get(key_id)


def display_glyph(key: KeyDef, shift: bool, caps: bool) -> str:
    """Text shown on the keycap for the given modifier state.

    Caps Lock flips letter case only; digit and symbol keys follow Shift alone.
    """
    if key.kind is KeyKind.LETTER:
        return key.shift_glyph if shift ^ caps else key.glyph
    if key.kind.is_digit_or_symbol:
        return key.shift_glyph if shift else key.glyph
    return key.label


def typed_char(key: KeyDef, shift: bool, caps: bool) -> Optional[str]:
    """Character the key appends to typed text, or None for control keys."""
    if key.kind is KeyKind.CONTROL:
        return None
    if key.kind is KeyKind.SPACE:
        return " "
    return display_glyph(key, shift, caps)


def printable_keys(include_digits: bool = True, include_symbols: bool = True) -> List[KeyDef]:
    """Keys eligible for text generation, in table order. Space is excluded."""
    kinds = {KeyKind.LETTER}
    if include_digits:
        kinds.add(KeyKind.DIGIT)
    if include_symbols:
        kinds.add(KeyKind.SYMBOL)
    return [key for key in _KEYS if key.kind in kinds]

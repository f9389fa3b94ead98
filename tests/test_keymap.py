"""Tests for keytrainer.core.keymap – key table and glyph rules."""

from __future__ import annotations

import pytest

from keytrainer.core.keymap import (
    KEYMAP,
    KeyDef,
    KeyId,
    KeyKind,
    display_glyph,
    lookup,
    printable_keys,
    typed_char,
)


# ---------------------------------------------------------------------------
# Table contents
# ---------------------------------------------------------------------------

class TestKeyTable:
    def test_every_key_id_is_mapped(self):
        assert set(KEYMAP) == set(KeyId)

    def test_sixty_keys(self):
        assert len(KEYMAP) == 60

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            KEYMAP[KeyId.A] = KEYMAP[KeyId.B]  # type: ignore[index]

    def test_key_defs_are_frozen(self):
        with pytest.raises(AttributeError):
            KEYMAP[KeyId.A].glyph = "z"  # type: ignore[misc]

    def test_letter_glyphs(self):
        key = KEYMAP[KeyId.P]
        assert key.kind is KeyKind.LETTER
        assert (key.glyph, key.shift_glyph, key.label) == ("p", "P", "P")

    def test_digit_glyphs(self):
        key = KEYMAP[KeyId.D8]
        assert key.kind is KeyKind.DIGIT
        assert (key.glyph, key.shift_glyph) == ("8", "*")

    def test_symbol_glyphs(self):
        key = KEYMAP[KeyId.QUOTE]
        assert key.kind is KeyKind.SYMBOL
        assert (key.glyph, key.shift_glyph) == ("'", '"')

    def test_control_keys_have_only_labels(self):
        for key_id in (KeyId.BACKSPACE, KeyId.TAB, KeyId.ENTER, KeyId.CAPS_LOCK,
                       KeyId.LEFT_SHIFT, KeyId.RIGHT_CTRL, KeyId.LEFT_WIN, KeyId.RIGHT_ALT):
            key = KEYMAP[key_id]
            assert key.kind is KeyKind.CONTROL
            assert key.glyph is None
            assert key.shift_glyph is None
            assert key.label

    def test_space(self):
        key = KEYMAP[KeyId.SPACE]
        assert key.kind is KeyKind.SPACE
        assert key.label == "Space"

    def test_modifiers(self):
        assert KEYMAP[KeyId.LEFT_SHIFT].is_modifier
        assert KEYMAP[KeyId.RIGHT_SHIFT].is_modifier
        assert KEYMAP[KeyId.CAPS_LOCK].is_modifier
        assert not KEYMAP[KeyId.BACKSPACE].is_modifier
        assert not KEYMAP[KeyId.A].is_modifier


class TestKeyKind:
    def test_digit_or_symbol(self):
        assert KeyKind.DIGIT.is_digit_or_symbol
        assert KeyKind.SYMBOL.is_digit_or_symbol
        assert not KeyKind.LETTER.is_digit_or_symbol
        assert not KeyKind.SPACE.is_digit_or_symbol


# ---------------------------------------------------------------------------
# lookup
# ---------------------------------------------------------------------------

class TestLookup:
    def test_known_key(self):
        assert lookup(KeyId.A) is KEYMAP[KeyId.A]

    def test_none_is_unmapped(self):
        assert lookup(None) is None


# ---------------------------------------------------------------------------
# display_glyph – shift/caps asymmetry
# ---------------------------------------------------------------------------

class TestDisplayGlyph:
    @pytest.fixture()
    def letter(self) -> KeyDef:
        return KEYMAP[KeyId.G]

    @pytest.fixture()
    def digit(self) -> KeyDef:
        return KEYMAP[KeyId.D2]

    def test_letter_plain(self, letter: KeyDef):
        assert display_glyph(letter, shift=False, caps=False) == "g"

    def test_letter_shift_and_caps_cancel(self, letter: KeyDef):
        assert display_glyph(letter, shift=True, caps=True) == display_glyph(letter, shift=False, caps=False)

    def test_letter_shift_or_caps_uppercase(self, letter: KeyDef):
        assert display_glyph(letter, shift=True, caps=False) == "G"
        assert display_glyph(letter, shift=False, caps=True) == "G"

    @pytest.mark.parametrize("shift", [False, True])
    def test_digit_ignores_caps(self, digit: KeyDef, shift: bool):
        assert display_glyph(digit, shift=shift, caps=True) == display_glyph(digit, shift=shift, caps=False)

    def test_digit_shift(self, digit: KeyDef):
        assert display_glyph(digit, shift=False, caps=False) == "2"
        assert display_glyph(digit, shift=True, caps=False) == "@"

    def test_symbol_ignores_caps(self):
        key = KEYMAP[KeyId.SLASH]
        assert display_glyph(key, shift=False, caps=True) == "/"
        assert display_glyph(key, shift=True, caps=True) == "?"

    def test_control_shows_label(self):
        assert display_glyph(KEYMAP[KeyId.CAPS_LOCK], shift=True, caps=True) == "Caps Lock"

    def test_space_shows_label(self):
        assert display_glyph(KEYMAP[KeyId.SPACE], shift=False, caps=False) == "Space"


# ---------------------------------------------------------------------------
# typed_char
# ---------------------------------------------------------------------------

class TestTypedChar:
    def test_space_types_blank(self):
        assert typed_char(KEYMAP[KeyId.SPACE], shift=True, caps=False) == " "

    def test_control_types_nothing(self):
        assert typed_char(KEYMAP[KeyId.ENTER], shift=False, caps=False) is None
        assert typed_char(KEYMAP[KeyId.BACKSPACE], shift=False, caps=False) is None

    def test_letter_follows_display_glyph(self):
        assert typed_char(KEYMAP[KeyId.Q], shift=False, caps=True) == "Q"

    def test_symbol_follows_shift(self):
        assert typed_char(KEYMAP[KeyId.MINUS], shift=True, caps=False) == "_"


# ---------------------------------------------------------------------------
# printable_keys
# ---------------------------------------------------------------------------

class TestPrintableKeys:
    def test_all_printable_count(self):
        # 26 letters + 10 digits + 11 symbols
        assert len(printable_keys()) == 47

    def test_letters_only(self):
        keys = printable_keys(include_digits=False, include_symbols=False)
        assert len(keys) == 26
        assert all(k.kind is KeyKind.LETTER for k in keys)

    def test_digits_without_symbols(self):
        keys = printable_keys(include_digits=True, include_symbols=False)
        assert len(keys) == 36
        assert not any(k.kind is KeyKind.SYMBOL for k in keys)

    def test_space_and_control_excluded(self):
        kinds = {k.kind for k in printable_keys()}
        assert KeyKind.SPACE not in kinds
        assert KeyKind.CONTROL not in kinds

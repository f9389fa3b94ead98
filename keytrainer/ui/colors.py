"""Keyboard palette and color utilities for the UI."""

from typing import Optional, Tuple

from keytrainer.core.keymap import KeyKind


class KeyColors:
    """Finger-zone keycap colors and text colors for the practice window."""

    PINK = "#ffc0cb"
    YELLOW = "#ffff00"
    GREEN = "#7cfc00"
    BLUE = "#00bfff"
    VIOLET = "#c71585"
    ORANGE = "#ffa500"
    CONTROL = "#d3d3d3"

    BORDER = "#000000"
    PRESSED_SHADOW = "#404040"

    TEXT_CORRECT = "#2e7d32"
    TEXT_NORMAL = "#000000"
    TEXT_MISTAKE = "#d32f2f"
    TEXT_TARGET = "#1a3a3a"


def key_fill(zone: str, kind: KeyKind) -> str:
    """Fill color for a keycap: control keys are always gray."""
    if kind is KeyKind.CONTROL:
        return KeyColors.CONTROL
    return zone


def _channels(color: str) -> Optional[Tuple[int, int, int]]:
    color = color.strip()
    if len(color) != 7 or not color.startswith("#"):
        return None
    try:
        red, green, blue = (int(color[i:i + 2], 16) for i in (1, 3, 5))
    except ValueError:
        return None
    return red, green, blue


def blend_hex(a: str, b: str, t: float) -> str:
    """Mix ``b`` into ``a`` by ``t`` (clamped to 0..1) and return ``#RRGGBB``.

    A malformed color or ratio leaves ``a`` unchanged.
    """
    start, end = _channels(a), _channels(b)
    if start is None or end is None:
        return a
    try:
        ratio = min(max(float(t), 0.0), 1.0)
    except (TypeError, ValueError):
        return a
    mixed = (round(s + (e - s) * ratio) for s, e in zip(start, end))
    return "#" + "".join(f"{channel:02X}" for channel in mixed)

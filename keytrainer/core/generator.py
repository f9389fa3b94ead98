from __future__ import annotations

import logging
import random
from typing import List

from keytrainer.core.keymap import printable_keys

logger = logging.getLogger(__name__)

MIN_DIFFICULTY = 2
MAX_DIFFICULTY = 47
DEFAULT_DIFFICULTY = 12
TEXT_LENGTH = 68
SPACE_EVERY = 5


def clamp_difficulty(value: int) -> int:
    """Clamp a difficulty into [MIN_DIFFICULTY, MAX_DIFFICULTY]."""
    return max(MIN_DIFFICULTY, min(MAX_DIFFICULTY, value))


def parse_difficulty(raw: object) -> int:
    """Turn user input (text box, slider, settings file) into a usable difficulty.

    Non-numeric input falls back to DEFAULT_DIFFICULTY; numbers are clamped.
    """
    try:
        # Sliders report floats; round the way the slider label does.
        value = round(raw) if isinstance(raw, float) else int(raw)
    except (TypeError, ValueError, OverflowError):
        logger.warning("Invalid difficulty %r, using default %d", raw, DEFAULT_DIFFICULTY)
        return DEFAULT_DIFFICULTY
    return clamp_difficulty(value)


class TextGenerator:
    """Builds random practice strings from a difficulty-sized pool of glyphs.

    The pool is a multiset: ``difficulty`` random keys contribute their base
    glyph (and shifted glyph in case-sensitive mode), plus one space per five
    difficulty steps (two in case-sensitive mode). The target text is then drawn
    from that pool, so duplicated entries show up more often.
    """

    def __init__(self, rng: random.Random) -> None:
        self._rng = rng

    def build_pool(
        self,
        difficulty: int,
        case_sensitive: bool,
        include_digits: bool = True,
        include_symbols: bool = True,
    ) -> List[str]:
        difficulty = clamp_difficulty(difficulty)
        candidates = printable_keys(include_digits, include_symbols)
        if not candidates:
            raise ValueError("No printable keys available for text generation")

        pool: List[str] = []
        for _ in range(difficulty):
            key = self._rng.choice(candidates)
            pool.append(key.glyph)
            if case_sensitive:
                pool.append(key.shift_glyph)

        for _ in range(SPACE_EVERY, difficulty + 1, SPACE_EVERY):
            pool.append(" ")
            if case_sensitive:
                pool.append(" ")
        return pool

    def generate(
        self,
        difficulty: int,
        case_sensitive: bool,
        length: int = TEXT_LENGTH,
        include_digits: bool = True,
        include_symbols: bool = True,
    ) -> str:
        """Return a random string of exactly ``length`` characters."""
        if length < 0:
            raise ValueError(f"length must be non-negative, got {length}")
        difficulty = clamp_difficulty(difficulty)
        pool = self.build_pool(difficulty, case_sensitive, include_digits, include_symbols)
        text = "".join(self._rng.choice(pool) for _ in range(length))
        logger.debug(
            "Generated %d chars from a pool of %d (difficulty=%d, case_sensitive=%s)",
            len(text),
            len(pool),
            difficulty,
            case_sensitive,
        )
        return text

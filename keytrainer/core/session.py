from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from keytrainer.core.generator import TEXT_LENGTH, TextGenerator, parse_difficulty
from keytrainer.core.keymap import KeyId, lookup, typed_char

logger = logging.getLogger(__name__)


class SessionState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    FINISHED = "finished"


@dataclass(frozen=True)
class KeystrokeResult:
    """Everything the window needs to redraw after a keystroke."""

    accepted: bool
    target: str
    typed: str
    correct_length: int
    fails: int
    speed: int
    state: SessionState

    @property
    def has_mistake(self) -> bool:
        """True when some typed text lies past the correct prefix."""
        return self.correct_length != len(self.typed)

    @property
    def finished(self) -> bool:
        return self.state is SessionState.FINISHED


class PracticeSession:
    """Tracks one practice exercise against a generated target string.

    Two counters move independently on each printable keystroke:
      * **correct length** – grows while the next typed char matches the
        target at the end of the correct prefix;
      * **fails** – grows whenever the last typed char differs from the target
        char at the same position.

    ``speed`` is correct characters per minute since ``start``.
    """

    def __init__(
        self,
        generator: TextGenerator,
        clock: Callable[[], float] = time.time,
        text_length: int = TEXT_LENGTH,
        on_finished: Optional[Callable[[KeystrokeResult], None]] = None,
    ) -> None:
        self._generator = generator
        self._clock = clock
        self._text_length = text_length
        self._on_finished = on_finished
        self._state = SessionState.IDLE
        self._target = ""
        self._typed = ""
        self._correct_length = 0
        self._fails = 0
        self._speed = 0
        self._case_sensitive = False
        self._difficulty = 0
        self._start_time = 0.0

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def is_running(self) -> bool:
        return self._state is SessionState.RUNNING

    @property
    def target(self) -> str:
        return self._target

    @property
    def typed(self) -> str:
        return self._typed

    @property
    def correct_length(self) -> int:
        return self._correct_length

    @property
    def fails(self) -> int:
        return self._fails

    @property
    def speed(self) -> int:
        return self._speed

    @property
    def difficulty(self) -> int:
        """Effective difficulty of the last started session (0 before any start)."""
        return self._difficulty

    @property
    def start_time(self) -> float:
        return self._start_time

    def start(
        self,
        difficulty: object,
        case_sensitive: bool,
        include_digits: bool = True,
        include_symbols: bool = True,
    ) -> KeystrokeResult:
        """Begin a fresh exercise, discarding any previous progress."""
        self._difficulty = parse_difficulty(difficulty)
        self._case_sensitive = case_sensitive
        self._target = self._generator.generate(
            self._difficulty,
            case_sensitive,
            length=self._text_length,
            include_digits=include_digits,
            include_symbols=include_symbols,
        )
        self._typed = ""
        self._correct_length = 0
        self._fails = 0
        self._speed = 0
        self._start_time = self._clock()
        self._state = SessionState.RUNNING
        logger.info(
            "Session started (difficulty=%d, case_sensitive=%s)", self._difficulty, case_sensitive
        )
        return self.snapshot(accepted=True)

    def stop(self) -> None:
        """Return to idle. Target and typed text stay available for display."""
        if self._state is SessionState.IDLE:
            return
        logger.info(
            "Session stopped (correct=%d/%d, fails=%d, speed=%d)",
            self._correct_length,
            len(self._target),
            self._fails,
            self._speed,
        )
        self._state = SessionState.IDLE

    def press(self, key_id: Optional[KeyId], shift: bool = False, caps: bool = False) -> KeystrokeResult:
        """Apply a key-down event and return the updated session view."""
        key = lookup(key_id)
        if key is None or self._state is not SessionState.RUNNING:
            return self.snapshot(accepted=False)

        if key.key_id is KeyId.BACKSPACE:
            removed = self._backspace()
            if removed:
                self._speed = self._compute_speed()
            return self.snapshot(accepted=removed)

        char = typed_char(key, shift, caps)
        if char is None:
            return self.snapshot(accepted=False)
        if len(self._typed) >= len(self._target):
            return self.snapshot(accepted=False)

        self._append(char)
        self._speed = self._compute_speed()

        result = self.snapshot(accepted=True)
        if self._correct_length == len(self._typed) == len(self._target):
            self._state = SessionState.FINISHED
            result = self.snapshot(accepted=True)
            logger.info("Target text completed with %d fails, speed %d", self._fails, self._speed)
            if self._on_finished is not None:
                self._on_finished(result)
        return result

    def snapshot(self, accepted: bool = False) -> KeystrokeResult:
        return KeystrokeResult(
            accepted=accepted,
            target=self._target,
            typed=self._typed,
            correct_length=self._correct_length,
            fails=self._fails,
            speed=self._speed,
            state=self._state,
        )

    def _backspace(self) -> bool:
        if not self._typed:
            return False
        self._typed = self._typed[:-1]
        if self._correct_length > len(self._typed):
            self._correct_length = len(self._typed)
        return True

    def _append(self, char: str) -> None:
        self._typed += char
        typed, target = self._typed, self._target

        pos = self._correct_length
        if pos < len(target) and self._matches(typed[pos], target[pos]):
            self._correct_length += 1

        if len(typed) <= len(target) and not self._matches(typed[-1], target[len(typed) - 1]):
            self._fails += 1

    def _matches(self, typed: str, expected: str) -> bool:
        if self._case_sensitive:
            return typed == expected
        return typed.lower() == expected.lower()

    def _compute_speed(self) -> int:
        elapsed_minutes = max((self._clock() - self._start_time) / 60.0, 1e-6)
        return round(self._correct_length / elapsed_minutes)

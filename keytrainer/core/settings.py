from __future__ import annotations

import logging
import os
from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Optional

import yaml

from keytrainer.core.generator import DEFAULT_DIFFICULTY, parse_difficulty

logger = logging.getLogger(__name__)

HOME_ENV = "KEYTRAINER_HOME"
SEED_ENV = "KEYTRAINER_SEED"


@dataclass
class PracticeSettings:
    difficulty: int = DEFAULT_DIFFICULTY
    case_sensitive: bool = False
    include_digits: bool = True
    include_symbols: bool = True
    seed: Optional[int] = None


def default_settings_path() -> Path:
    base = os.environ.get(HOME_ENV)
    root = Path(base) if base else Path.home() / ".keytrainer"
    return root / "settings.yaml"


def resolve_seed(settings: PracticeSettings) -> Optional[int]:
    """Seed for the process-wide random generator: env var, then settings file."""
    raw = os.environ.get(SEED_ENV)
    if raw:
        try:
            return int(raw)
        except ValueError:
            logger.warning("Ignoring non-numeric %s=%r", SEED_ENV, raw)
    return settings.seed


class SettingsStore:
    """Stores practice preferences (difficulty and generation toggles) as YAML.
    File: ~/.keytrainer/settings.yaml unless KEYTRAINER_HOME points elsewhere."""

    def __init__(self, file_path: Optional[Path] = None) -> None:
        self._file_path = file_path or default_settings_path()
        self._settings = self._load()

    @property
    def file_path(self) -> Path:
        return self._file_path

    def get(self) -> PracticeSettings:
        return PracticeSettings(**asdict(self._settings))

    def update(
        self,
        difficulty: object,
        case_sensitive: bool,
        include_digits: bool,
        include_symbols: bool,
    ) -> PracticeSettings:
        self._settings.difficulty = parse_difficulty(difficulty)
        self._settings.case_sensitive = bool(case_sensitive)
        self._settings.include_digits = bool(include_digits)
        self._settings.include_symbols = bool(include_symbols)
        self._save()
        return self.get()

    def save(self) -> None:
        """Persist current state to disk (e.g. on app exit)."""
        self._save()

    def _load(self) -> PracticeSettings:
        settings = PracticeSettings()
        if not self._file_path.exists():
            return settings
        try:
            payload = yaml.safe_load(self._file_path.read_text(encoding="utf-8"))
        except (yaml.YAMLError, OSError) as e:
            logger.warning("Could not load settings from %s: %s", self._file_path, e)
            return settings
        if not isinstance(payload, dict):
            logger.warning("Ignoring settings file %s: expected a mapping", self._file_path)
            return settings

        known = {f.name for f in fields(PracticeSettings)}
        for key in payload:
            if key not in known:
                logger.debug("Ignoring unknown setting %r", key)

        if "difficulty" in payload:
            settings.difficulty = parse_difficulty(payload["difficulty"])
        for flag in ("case_sensitive", "include_digits", "include_symbols"):
            value = payload.get(flag)
            if isinstance(value, bool):
                setattr(settings, flag, value)
            elif value is not None:
                logger.warning("Ignoring non-boolean %s=%r in %s", flag, value, self._file_path)
        seed = payload.get("seed")
        if isinstance(seed, int) and not isinstance(seed, bool):
            settings.seed = seed
        elif seed is not None:
            logger.warning("Ignoring non-integer seed %r in %s", seed, self._file_path)
        return settings

    def _save(self) -> None:
        payload = asdict(self._settings)
        if payload["seed"] is None:
            del payload["seed"]
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text(yaml.safe_dump(payload, sort_keys=False), encoding="utf-8")
        except OSError as e:
            logger.warning("Could not save settings to %s: %s", self._file_path, e)

"""Runtime configuration loaded from disk."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .player import PLAYER_SPRITES
from .utils import FPS, SETTINGS_FILE, GridConstants, load_json


@dataclass(slots=True)
class GameSettings:
    """Tunable settings for a play session."""

    player_sprite: str = PLAYER_SPRITES[0]
    duration_ms: int = 30_000
    enemy_count: int = 3
    collectible_count: int = 5
    col_space: int = 25
    fps: int = FPS
    seed: int | None = None
    fullscreen: bool = False


class SettingsManager:
    """Load game settings with safe defaults."""

    def __init__(self, path: Path = SETTINGS_FILE) -> None:
        self.path = path
        self.settings = self.load()

    def load(self) -> GameSettings:
        """Load settings from disk, ignoring missing or invalid values."""
        raw = load_json(self.path, {})
        if not isinstance(raw, dict):
            raw = {}
        settings = GameSettings()

        if raw.get("player_sprite") in PLAYER_SPRITES:
            settings.player_sprite = raw["player_sprite"]

        settings.duration_ms = self._positive_int(raw, "duration_ms", settings.duration_ms)
        settings.enemy_count = self._non_negative_int(raw, "enemy_count", settings.enemy_count)
        settings.collectible_count = self._non_negative_int(raw, "collectible_count", settings.collectible_count)
        settings.col_space = self._non_negative_int(raw, "col_space", settings.col_space)
        settings.fps = self._positive_int(raw, "fps", settings.fps)

        seed = raw.get("seed")
        settings.seed = seed if isinstance(seed, int) else None
        settings.fullscreen = bool(raw.get("fullscreen", settings.fullscreen))
        return settings

    @staticmethod
    def _positive_int(raw: dict, key: str, default: int) -> int:
        value = raw.get(key, default)
        return value if isinstance(value, int) and value > 0 else default

    @staticmethod
    def _non_negative_int(raw: dict, key: str, default: int) -> int:
        value = raw.get(key, default)
        return value if isinstance(value, int) and value >= 0 else default

    def grid(self) -> GridConstants:
        """Build grid constants for the current settings."""
        return GridConstants(duration_ms=self.settings.duration_ms, col_space=self.settings.col_space)

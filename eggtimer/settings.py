"""Application settings with JSON persistence.

Settings are stored at:
    ~/Library/Application Support/EggTimer/settings.json

Usage::

    settings = load_settings()
    settings.selected_time = 4 * 60
    save_settings(settings)

The timer itself only talks to :class:`Preferences`, which wraps a
``Settings`` instance and announces changes.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, asdict, fields
from pathlib import Path

from PyQt6.QtCore import QObject, pyqtSignal

from .timer.engine import DEFAULT_DURATION


log = logging.getLogger(__name__)

APP_SUPPORT_DIR = Path.home() / "Library" / "Application Support" / "EggTimer"
SETTINGS_PATH = APP_SUPPORT_DIR / "settings.json"


@dataclass
class Settings:
    """All user-configurable preferences."""

    # ── timer ─────────────────────────────────────────────────────────
    selected_time: float = DEFAULT_DURATION    # seconds

    # ── audio ─────────────────────────────────────────────────────────
    sound_enabled: bool = True
    sound_volume: int = 70                     # 0-100


def load_settings() -> Settings:
    """Load settings from disk, falling back to defaults."""
    try:
        if SETTINGS_PATH.exists():
            data = json.loads(SETTINGS_PATH.read_text(encoding="utf-8"))
            # Only use keys that exist in the dataclass
            valid_keys = {f.name for f in fields(Settings)}
            filtered = {k: v for k, v in data.items() if k in valid_keys}
            return Settings(**filtered)
    except (OSError, ValueError, TypeError, AttributeError) as exc:
        log.warning("Ignoring unreadable settings at %s: %s", SETTINGS_PATH, exc)
    return Settings()


def save_settings(settings: Settings) -> None:
    """Write settings to disk as JSON."""
    APP_SUPPORT_DIR.mkdir(parents=True, exist_ok=True)
    SETTINGS_PATH.write_text(
        json.dumps(asdict(settings), indent=2) + "\n",
        encoding="utf-8",
    )


class Preferences(QObject):
    """Preference provider for the timer.

    Signals
    -------
    changed(selected_time: float)
        Emitted after ``selected_time`` is assigned.
    """

    changed = pyqtSignal(float)

    def __init__(
        self,
        settings: Settings | None = None,
        parent: QObject | None = None,
        *,
        autosave: bool = True,
    ) -> None:
        super().__init__(parent)
        self._settings = settings if settings is not None else load_settings()
        self._autosave = autosave

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def selected_time(self) -> float:
        """Preferred countdown length; the default when unset or non-positive."""
        saved = self._settings.selected_time
        if isinstance(saved, (int, float)) and saved > 0:
            return float(saved)
        return float(DEFAULT_DURATION)

    @selected_time.setter
    def selected_time(self, seconds: float) -> None:
        self._settings.selected_time = seconds
        if self._autosave:
            save_settings(self._settings)
        log.debug("Preferred duration set to %ss", seconds)
        self.changed.emit(float(self.selected_time))

"""Completion "ding" using numpy + QSoundEffect.

The sound is generated programmatically as a WAV file using sine-wave
synthesis with an ADSR envelope, then cached to disk so later launches
skip the synthesis.
"""

from __future__ import annotations

import io
import logging
import wave
from pathlib import Path

import numpy as np

from PyQt6.QtCore import QObject, QUrl
from PyQt6.QtMultimedia import QSoundEffect


log = logging.getLogger(__name__)

# ── paths ────────────────────────────────────────────────────────────────

APP_SUPPORT_DIR = Path.home() / "Library" / "Application Support" / "EggTimer"
SOUNDS_DIR = APP_SUPPORT_DIR / "sounds"

DING_FILENAME = "ding.wav"
SAMPLE_RATE = 44100


# ═══════════════════════════════════════════════════════════════════════════
#  WAV SYNTHESIS HELPERS
# ═══════════════════════════════════════════════════════════════════════════


def _make_envelope(
    length: int,
    attack: int = 200,
    decay: int = 400,
    sustain_level: float = 0.7,
    release: int = 800,
) -> np.ndarray:
    """ADSR envelope (all durations in samples)."""
    env = np.ones(length, dtype=np.float64)
    a = min(attack, length)
    if a > 0:
        env[:a] = np.linspace(0.0, 1.0, a)
    d_end = min(a + decay, length)
    if decay > 0 and d_end > a:
        env[a:d_end] = np.linspace(1.0, sustain_level, d_end - a)
    s_end = max(length - release, d_end)
    if s_end > d_end:
        env[d_end:s_end] = sustain_level
    if release > 0 and s_end < length:
        env[s_end:] = np.linspace(sustain_level, 0.0, length - s_end)
    return env


def _sine(freq: float, duration_s: float) -> np.ndarray:
    t = np.linspace(0, duration_s, int(SAMPLE_RATE * duration_s), endpoint=False)
    return np.sin(2 * np.pi * freq * t)


def _to_wav_bytes(samples: np.ndarray) -> bytes:
    """Convert a float64 numpy array (-1..1) to 16-bit mono PCM WAV bytes."""
    samples = np.clip(samples, -1.0, 1.0)
    int_samples = (samples * 32767).astype(np.int16)

    buf = io.BytesIO()
    with wave.open(buf, "wb") as wf:
        wf.setnchannels(1)
        wf.setsampwidth(2)
        wf.setframerate(SAMPLE_RATE)
        wf.writeframes(int_samples.tobytes())
    return buf.getvalue()


def generate_ding() -> bytes:
    """Kitchen-timer ding: E6 strike with an octave overtone, long ring."""
    duration = 1.2
    strike = _sine(1318.51, duration) * 0.45
    overtone = _sine(2637.02, duration) * 0.1
    combined = strike + overtone
    env = _make_envelope(
        len(combined),
        attack=int(SAMPLE_RATE * 0.005),
        decay=int(SAMPLE_RATE * 0.15),
        sustain_level=0.35,
        release=int(SAMPLE_RATE * 0.9),
    )
    return _to_wav_bytes(combined * env)


# ═══════════════════════════════════════════════════════════════════════════
#  SOUND PLAYER
# ═══════════════════════════════════════════════════════════════════════════


class SoundPlayer(QObject):
    """Plays the completion ding.

    Usage::

        player = SoundPlayer(parent=self)
        player.set_volume(70)
        player.play()
    """

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        sounds_dir: Path | None = None,
    ) -> None:
        super().__init__(parent)
        self._enabled = True
        self._volume = 0.7  # 0.0–1.0
        self._sounds_dir = sounds_dir or SOUNDS_DIR
        self._path = self._ensure_wav_file()

        self._effect = QSoundEffect(self)
        self._effect.setSource(QUrl.fromLocalFile(str(self._path)))
        self._effect.setVolume(self._volume)

    # ── public API ────────────────────────────────────────────────────

    @property
    def path(self) -> Path:
        return self._path

    @property
    def volume(self) -> int:
        """Current volume as 0-100 integer."""
        return round(self._volume * 100)

    @property
    def enabled(self) -> bool:
        return self._enabled

    def set_volume(self, level: int) -> None:
        """Set volume (0-100)."""
        self._volume = max(0, min(level, 100)) / 100.0
        self._effect.setVolume(self._volume)

    def set_enabled(self, enabled: bool) -> None:
        self._enabled = enabled

    def play(self) -> None:
        """Play the ding.  No-op if disabled."""
        if not self._enabled:
            return
        self._effect.play()

    # ── internal ──────────────────────────────────────────────────────

    def _ensure_wav_file(self) -> Path:
        self._sounds_dir.mkdir(parents=True, exist_ok=True)
        path = self._sounds_dir / DING_FILENAME
        if not path.exists():
            log.debug("Synthesising %s", path)
            path.write_bytes(generate_ding())
        return path

"""Countdown state machine for EggTimer.

States
------
STOPPED   No schedule, nothing elapsed, waiting for start.
PAUSED    No schedule, some time elapsed (remembers where it stopped).
RUNNING   The 1-second schedule is active.

Transitions
-----------
any      → RUNNING   (start, always a fresh countdown)
RUNNING  → PAUSED    (stop)
PAUSED   → RUNNING   (resume)
any      → STOPPED   (reset, or the countdown reaching 0)

Every operation ends with one synchronous tick so the observer gets a
reading straight away instead of a second later.  Calls made from the
wrong state (``stop`` while paused, ``resume`` while running) are no-ops.
"""

from __future__ import annotations

import logging
import math
import threading
import time
from enum import Enum
from typing import Callable, Protocol

from PyQt6.QtCore import QObject, QTimer, pyqtSignal


log = logging.getLogger(__name__)


# ── enums / protocols ─────────────────────────────────────────────────────


class TimerState(Enum):
    STOPPED = "stopped"
    PAUSED = "paused"
    RUNNING = "running"


class TimerObserver(Protocol):
    """Receives tick and completion events from :class:`EggTimer`."""

    def on_tick(self, seconds_remaining: int) -> None: ...

    def on_finished(self) -> None: ...


# ── constants ─────────────────────────────────────────────────────────────

DEFAULT_DURATION = 6 * 60  # seconds
TICK_INTERVAL_MS = 1000


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


# ── engine ────────────────────────────────────────────────────────────────


class EggTimer(QObject):
    """Single countdown driven by a ``QTimer`` and an injectable clock.

    Signals
    -------
    time_remaining(seconds_remaining: int)
        Emitted on every tick that leaves time on the clock.
    finished()
        Emitted once when the countdown reaches 0.

    The optional ``observer`` is called before the signals fire.  Its
    exceptions are not caught.
    """

    time_remaining = pyqtSignal(int)
    finished = pyqtSignal()

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        clock: Callable[[], float] = time.monotonic,
        observer: TimerObserver | None = None,
        interval_ms: int = TICK_INTERVAL_MS,
    ) -> None:
        super().__init__(parent)

        self._clock = clock
        self._observer = observer
        self._lock = threading.RLock()

        # ── countdown state ───────────────────────────────────────────
        self._start_time: float | None = None
        self._duration: float = DEFAULT_DURATION
        self._elapsed: float = 0.0

        # ── Qt timer ──────────────────────────────────────────────────
        self._qt_timer = QTimer(self)
        self._qt_timer.setInterval(interval_ms)
        self._qt_timer.timeout.connect(self.tick)

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC PROPERTIES
    # ══════════════════════════════════════════════════════════════════

    @property
    def state(self) -> TimerState:
        with self._lock:
            if self._qt_timer.isActive():
                return TimerState.RUNNING
            if self._elapsed > 0:
                return TimerState.PAUSED
            return TimerState.STOPPED

    @property
    def is_stopped(self) -> bool:
        return self.state == TimerState.STOPPED

    @property
    def is_paused(self) -> bool:
        return self.state == TimerState.PAUSED

    @property
    def is_running(self) -> bool:
        return self.state == TimerState.RUNNING

    @property
    def duration(self) -> float:
        """Total countdown length in seconds."""
        return self._duration

    @duration.setter
    def duration(self, seconds: float) -> None:
        if seconds <= 0:
            raise ValueError(f"duration must be positive, got {seconds!r}")
        with self._lock:
            if self._qt_timer.isActive():
                log.warning("Duration changed to %ss while running", seconds)
            self._duration = seconds

    @property
    def elapsed(self) -> float:
        """Seconds elapsed as of the last tick (0 when stopped)."""
        return self._elapsed

    @property
    def start_time(self) -> float | None:
        """Clock reading the current run is measured from, if any."""
        return self._start_time

    @property
    def seconds_remaining(self) -> int:
        with self._lock:
            return round_half_away(self._duration - self._elapsed)

    @property
    def observer(self) -> TimerObserver | None:
        return self._observer

    @observer.setter
    def observer(self, value: TimerObserver | None) -> None:
        self._observer = value

    # ══════════════════════════════════════════════════════════════════
    #  CONTROLS
    # ══════════════════════════════════════════════════════════════════

    def start(self) -> None:
        """Begin a fresh countdown of ``duration`` seconds."""
        with self._lock:
            self._qt_timer.stop()
            self._start_time = self._clock()
            self._elapsed = 0.0
            self._qt_timer.start()
            log.info("Timer started for %ss", self._duration)
            self.tick()

    def stop(self) -> None:
        """Freeze the countdown.  Only valid while running."""
        with self._lock:
            if not self._qt_timer.isActive():
                log.debug("stop() ignored in state %s", self.state.value)
                return
            self._elapsed = self._clock() - self._start_time
            self._qt_timer.stop()
            log.info("Timer stopped after %.1fs", self._elapsed)
            self.tick()

    def resume(self) -> None:
        """Continue from where ``stop`` left off.  Only valid while paused."""
        with self._lock:
            if self.state != TimerState.PAUSED:
                log.debug("resume() ignored in state %s", self.state.value)
                return
            self._start_time = self._clock() - self._elapsed
            self._qt_timer.start()
            log.info("Timer resumed at %.1fs", self._elapsed)
            self.tick()

    def reset(self) -> None:
        """Cancel everything and restore the default duration."""
        with self._lock:
            self._qt_timer.stop()
            self._start_time = None
            self._duration = DEFAULT_DURATION
            self._elapsed = 0.0
            log.debug("Timer reset")
            self.tick()

    def tick(self) -> None:
        """Evaluate the countdown and notify.

        Called by the ``QTimer`` every second and after each control.
        Does nothing when there is no reference start.
        """
        with self._lock:
            if self._start_time is None:
                return
            # Elapsed only moves while the schedule is active.
            if self._qt_timer.isActive():
                self._elapsed = self._clock() - self._start_time

            remaining = round_half_away(self._duration - self._elapsed)

            if remaining <= 0:
                self.reset()
                log.info("Timer finished")
                if self._observer is not None:
                    self._observer.on_finished()
                self.finished.emit()
            else:
                if self._observer is not None:
                    self._observer.on_tick(remaining)
                self.time_remaining.emit(remaining)

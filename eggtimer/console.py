"""Line-oriented front end for the timer.

Reads commands from stdin inside the Qt event loop and prints the clock
text and egg bucket on every tick.  Useful for poking at the engine
without a window.
"""

from __future__ import annotations

import logging
import sys
from typing import Protocol, TextIO

from PyQt6.QtCore import QCoreApplication, QObject, QSocketNotifier

from .display import controls_for, display_for, text_for
from .settings import Preferences
from .timer.engine import EggTimer, TimerState


log = logging.getLogger(__name__)

HELP_TEXT = """\
Commands:
  start           start a fresh countdown from the preferred duration
  stop            pause the countdown
  resume          continue a paused countdown
  reset           cancel and go back to the preferred duration
  status          show state, remaining time and enabled controls
  set <seconds>   change the preferred duration
  help            show this text
  quit            exit"""

CONFIRM_PROMPT = "Reset timer with new settings? [y/N]"


class CompletionSink(Protocol):
    def play(self) -> None: ...


class Console(QObject):
    """Maps commands onto an :class:`EggTimer` and renders its events."""

    def __init__(
        self,
        engine: EggTimer,
        prefs: Preferences,
        parent: QObject | None = None,
        *,
        sound: CompletionSink | None = None,
        out: TextIO | None = None,
    ) -> None:
        super().__init__(parent)
        self._engine = engine
        self._prefs = prefs
        self._sound = sound
        self._out = out or sys.stdout
        self._finished = False
        self._pending_reset = False
        self._notifier: QSocketNotifier | None = None

        self._engine.observer = self
        self._prefs.changed.connect(self._on_prefs_changed)

    # ── observer ──────────────────────────────────────────────────────

    def on_tick(self, seconds_remaining: int) -> None:
        self._show(seconds_remaining)

    def on_finished(self) -> None:
        self._finished = True
        self._show(0)
        if self._sound is not None:
            self._sound.play()

    # ── commands ──────────────────────────────────────────────────────

    def handle(self, line: str) -> bool:
        """Run one command line.  Returns False when the user quits."""
        words = line.split()
        if not words:
            return True
        command, args = words[0].lower(), words[1:]

        if self._pending_reset:
            self._pending_reset = False
            if command in ("y", "yes"):
                self._apply_prefs()
            else:
                self._write("Keeping the current timer.")
            return True

        if command in ("quit", "exit"):
            return False
        handler = self._COMMANDS.get(command)
        if handler is None:
            self._write(f"Unknown command: {command!r} (try 'help')")
            return True
        try:
            handler(self, *args)
        except (TypeError, ValueError) as exc:
            self._write(f"Bad arguments for {command!r}: {exc}")
        return True

    def _cmd_start(self) -> None:
        self._finished = False
        self._engine.duration = self._prefs.selected_time
        self._engine.start()

    def _cmd_stop(self) -> None:
        self._engine.stop()

    def _cmd_resume(self) -> None:
        self._engine.resume()

    def _cmd_reset(self) -> None:
        self._finished = False
        self._engine.reset()
        self._show(self._prefs.selected_time)

    def _cmd_status(self) -> None:
        state = self._engine.state
        if state == TimerState.STOPPED:
            remaining = 0 if self._finished else self._prefs.selected_time
        else:
            remaining = self._engine.seconds_remaining
        controls = controls_for(state, finished=self._finished)
        enabled = [
            name for name in ("start", "stop", "reset")
            if getattr(controls, name)
        ]
        self._write(
            f"{state.value:<8} {text_for(remaining)}  "
            f"enabled: {', '.join(enabled) or 'none'}"
        )

    def _cmd_set(self, seconds: str) -> None:
        value = float(seconds)
        if value <= 0:
            raise ValueError("duration must be positive")
        self._prefs.selected_time = value

    def _cmd_help(self) -> None:
        self._write(HELP_TEXT)

    _COMMANDS = {
        "start": _cmd_start,
        "stop": _cmd_stop,
        "resume": _cmd_resume,
        "reset": _cmd_reset,
        "status": _cmd_status,
        "set": _cmd_set,
        "help": _cmd_help,
    }

    # ── preferences ───────────────────────────────────────────────────

    def _on_prefs_changed(self, _selected_time: float) -> None:
        if self._engine.is_stopped or self._engine.is_paused:
            self._apply_prefs()
            return
        self._pending_reset = True
        self._write(CONFIRM_PROMPT)

    def _apply_prefs(self) -> None:
        self._engine.duration = self._prefs.selected_time
        self._cmd_reset()

    # ── stdin ─────────────────────────────────────────────────────────

    def attach_stdin(self, stream: TextIO | None = None) -> None:
        """Feed lines from *stream* (default stdin) through the event loop."""
        stream = stream or sys.stdin
        self._notifier = QSocketNotifier(
            stream.fileno(), QSocketNotifier.Type.Read, self,
        )
        self._notifier.activated.connect(lambda: self._read_line(stream))

    def _read_line(self, stream: TextIO) -> None:
        line = stream.readline()
        if not line or not self.handle(line):
            log.debug("Console closed")
            self._notifier.setEnabled(False)
            QCoreApplication.quit()

    # ── output ────────────────────────────────────────────────────────

    def _show(self, remaining: float) -> None:
        values = display_for(remaining, self._engine.state, self._engine.duration)
        self._write(f"{values.text:>6}  [egg {values.bucket.value}]")

    def _write(self, text: str) -> None:
        print(text, file=self._out, flush=True)

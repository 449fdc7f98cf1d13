"""Tests for the terminal front end and the preferences-changed flow."""

from __future__ import annotations

import io

import pytest

from eggtimer.__main__ import _parse_args
from eggtimer.console import CONFIRM_PROMPT, Console
from eggtimer.settings import Preferences, Settings
from eggtimer.timer.engine import DEFAULT_DURATION, TimerState

from helpers import advance_and_tick


class FakeSound:
    def __init__(self):
        self.plays = 0

    def play(self):
        self.plays += 1


@pytest.fixture
def out():
    return io.StringIO()


@pytest.fixture
def sound():
    return FakeSound()


@pytest.fixture
def console(engine, out, sound, qapp):
    prefs = Preferences(Settings(selected_time=10), autosave=False)
    return Console(engine, prefs, sound=sound, out=out)


def lines(out: io.StringIO) -> list[str]:
    return out.getvalue().splitlines()


# ═══════════════════════════════════════════════════════════════════════
#  COMMANDS
# ═══════════════════════════════════════════════════════════════════════


class TestCommands:

    def test_console_becomes_observer(self, console, engine):
        assert engine.observer is console

    def test_start_uses_preferred_duration(self, console, engine, out):
        console.handle("start")
        assert engine.duration == 10
        assert engine.is_running
        assert lines(out)[-1].strip() == "00:10  [egg 0]"

    def test_ticks_render_text_and_bucket(self, console, engine, clock, out):
        console.handle("start")
        advance_and_tick(engine, clock, 4)
        assert lines(out)[-1].strip() == "00:06  [egg 25]"

    def test_finish_prints_done_and_plays_sound(self, console, engine, clock, out, sound):
        console.handle("start")
        advance_and_tick(engine, clock, 10)
        assert lines(out)[-1].strip() == "Done!  [egg 100]"
        assert sound.plays == 1

    def test_stop_and_resume(self, console, engine, clock, out):
        console.handle("start")
        clock.advance(3)
        console.handle("stop")
        assert engine.is_paused
        clock.advance(60)
        console.handle("resume")
        assert engine.is_running
        assert lines(out)[-1].strip() == "00:07  [egg 25]"

    def test_reset_shows_preferred_duration(self, console, engine, clock, out):
        console.handle("start")
        clock.advance(3)
        console.handle("reset")
        assert engine.is_stopped
        assert engine.duration == DEFAULT_DURATION
        assert lines(out)[-1].strip() == "00:10  [egg stopped]"

    def test_commands_are_case_insensitive(self, console, engine):
        console.handle("  START  ")
        assert engine.is_running

    def test_blank_line_ignored(self, console, out):
        assert console.handle("   ") is True
        assert out.getvalue() == ""

    def test_unknown_command(self, console, out):
        assert console.handle("boil") is True
        assert "Unknown command" in lines(out)[-1]

    def test_quit(self, console):
        assert console.handle("quit") is False
        assert console.handle("exit") is False

    def test_help(self, console, out):
        console.handle("help")
        assert "resume" in out.getvalue()


class TestStatus:

    def test_stopped(self, console, out):
        console.handle("status")
        assert lines(out)[-1] == "stopped  00:10  enabled: start"

    def test_running(self, console, engine, clock, out):
        console.handle("start")
        advance_and_tick(engine, clock, 4)
        console.handle("status")
        assert lines(out)[-1] == "running  00:06  enabled: stop"

    def test_paused(self, console, clock, out):
        console.handle("start")
        clock.advance(4)
        console.handle("stop")
        console.handle("status")
        assert lines(out)[-1] == "paused   00:06  enabled: start, reset"

    def test_after_finish(self, console, engine, clock, out):
        console.handle("start")
        advance_and_tick(engine, clock, 11)
        console.handle("status")
        assert lines(out)[-1] == "stopped  Done!  enabled: reset"


# ═══════════════════════════════════════════════════════════════════════
#  PREFERENCES CHANGED
# ═══════════════════════════════════════════════════════════════════════


class TestSetDuration:

    def test_set_while_stopped_applies_immediately(self, console, engine, out):
        console.handle("set 125")
        assert engine.is_stopped
        assert lines(out)[-1].strip() == "02:05  [egg stopped]"
        console.handle("start")
        assert engine.duration == 125

    def test_set_while_paused_resets(self, console, engine, clock):
        console.handle("start")
        clock.advance(3)
        console.handle("stop")
        console.handle("set 30")
        assert engine.is_stopped
        assert engine.elapsed == 0

    def test_set_while_running_asks_first(self, console, engine, out):
        console.handle("start")
        console.handle("set 30")
        assert lines(out)[-1] == CONFIRM_PROMPT
        assert engine.is_running

    def test_declining_keeps_timer(self, console, engine, out):
        console.handle("start")
        console.handle("set 30")
        console.handle("n")
        assert engine.is_running
        assert "Keeping" in lines(out)[-1]

    def test_confirming_resets(self, console, engine, out):
        console.handle("start")
        console.handle("set 30")
        console.handle("y")
        assert engine.state == TimerState.STOPPED
        assert lines(out)[-1].strip() == "00:30  [egg stopped]"

    @pytest.mark.parametrize("line", ["set", "set abc", "set 0", "set -4", "set 1 2"])
    def test_bad_arguments_reported(self, console, out, line):
        assert console.handle(line) is True
        assert "Bad arguments" in lines(out)[-1]


# ═══════════════════════════════════════════════════════════════════════
#  COMMAND LINE
# ═══════════════════════════════════════════════════════════════════════


class TestArgs:

    def test_defaults(self):
        args = _parse_args([])
        assert args.duration is None
        assert args.no_sound is False
        assert args.verbose is False

    def test_flags(self):
        args = _parse_args(["--duration", "90", "--no-sound", "-v"])
        assert args.duration == 90
        assert args.no_sound is True
        assert args.verbose is True

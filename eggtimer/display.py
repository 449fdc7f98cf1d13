"""Remaining time → what the user sees.

Pure functions, no Qt.  Callers feed in the value from
``EggTimer.time_remaining`` (or 0 once finished) and get back the clock
text, the egg image bucket, and which controls should be enabled.

Buckets
-------
``stopped``  Idle egg, shown while stopped with time on the clock.
``0``        Raw, less than 25 % done.
``25``       25–50 %.
``50``       50–75 %.
``75``       75–100 %.
``100``      Cooked: done, or the full/idle image.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from .timer.engine import TimerState


DONE_TEXT = "Done!"


class Bucket(str, Enum):
    STOPPED = "stopped"
    RAW = "0"
    QUARTER = "25"
    HALF = "50"
    THREE_QUARTERS = "75"
    DONE = "100"


# Half-open [lower, upper) ranges on percent complete.
_BUCKET_RANGES: tuple[tuple[float, float, Bucket], ...] = (
    (0, 25, Bucket.RAW),
    (25, 50, Bucket.QUARTER),
    (50, 75, Bucket.HALF),
    (75, 100, Bucket.THREE_QUARTERS),
)


@dataclass(frozen=True)
class DisplayValues:
    text: str
    bucket: Bucket


@dataclass(frozen=True)
class Controls:
    """Which of the three controls are enabled."""

    start: bool
    stop: bool
    reset: bool


def text_for(remaining: float) -> str:
    """``"Done!"`` at 0, otherwise ``MM:SS`` (truncated, zero-padded)."""
    if remaining == 0:
        return DONE_TEXT
    minutes = math.floor(remaining / 60)
    seconds = remaining - minutes * 60
    return f"{minutes:02d}:{int(seconds):02d}"


def percent_complete(remaining: float, duration: float) -> float:
    return 100 - (remaining / duration * 100)


def bucket_for(remaining: float, state: TimerState, duration: float) -> Bucket:
    if state == TimerState.STOPPED:
        return Bucket.STOPPED if remaining != 0 else Bucket.DONE
    if duration <= 0:
        return Bucket.DONE

    pct = percent_complete(remaining, duration)
    for lower, upper, bucket in _BUCKET_RANGES:
        if lower <= pct < upper:
            return bucket
    return Bucket.DONE


def display_for(remaining: float, state: TimerState, duration: float) -> DisplayValues:
    return DisplayValues(
        text=text_for(remaining),
        bucket=bucket_for(remaining, state, duration),
    )


def controls_for(state: TimerState, *, finished: bool = False) -> Controls:
    """Enabled controls for *state*.

    Right after the countdown finishes only reset is offered, even
    though the engine itself is already stopped.
    """
    if finished:
        return Controls(start=False, stop=False, reset=True)
    if state == TimerState.STOPPED:
        return Controls(start=True, stop=False, reset=False)
    if state == TimerState.PAUSED:
        return Controls(start=True, stop=False, reset=True)
    return Controls(start=False, stop=True, reset=False)

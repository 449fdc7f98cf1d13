"""Timer package."""

from .engine import (
    EggTimer,
    TimerState,
    TimerObserver,
    DEFAULT_DURATION,
    TICK_INTERVAL_MS,
    round_half_away,
)

__all__ = [
    "EggTimer",
    "TimerState",
    "TimerObserver",
    "DEFAULT_DURATION",
    "TICK_INTERVAL_MS",
    "round_half_away",
]

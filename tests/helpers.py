"""Shared test helpers for EggTimer."""

from eggtimer.timer.engine import EggTimer


class SignalCollector:
    """Utility to capture pyqtSignal emissions into a list."""

    def __init__(self):
        self.items: list = []

    def slot(self, *args):
        self.items.append(args if len(args) > 1 else args[0] if args else None)

    def __call__(self, *args):
        self.slot(*args)

    def __len__(self):
        return len(self.items)

    def __getitem__(self, idx):
        return self.items[idx]

    @property
    def last(self):
        return self.items[-1] if self.items else None

    def clear(self):
        self.items.clear()


class FakeClock:
    """Manually advanced stand-in for ``time.monotonic``."""

    def __init__(self, start: float = 0.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class RecordingObserver:
    """TimerObserver that records events as ``("tick", n)`` / ``("finished",)``."""

    def __init__(self):
        self.events: list[tuple] = []

    def on_tick(self, seconds_remaining: int) -> None:
        self.events.append(("tick", seconds_remaining))

    def on_finished(self) -> None:
        self.events.append(("finished",))

    @property
    def ticks(self) -> list[int]:
        return [e[1] for e in self.events if e[0] == "tick"]

    @property
    def finished_count(self) -> int:
        return sum(1 for e in self.events if e[0] == "finished")

    @property
    def last(self):
        return self.events[-1] if self.events else None

    def clear(self):
        self.events.clear()


def advance_and_tick(engine: EggTimer, clock: FakeClock, seconds: float) -> None:
    """Move the fake clock forward and fire one scheduled tick."""
    clock.advance(seconds)
    engine.tick()

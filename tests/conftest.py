"""Shared pytest fixtures for EggTimer tests."""

import sys
import pytest

from PyQt6.QtCore import QCoreApplication

from eggtimer.settings import Preferences, Settings
from eggtimer.timer.engine import EggTimer

from helpers import FakeClock, RecordingObserver


@pytest.fixture(scope="session")
def qapp():
    """A single Qt application instance shared across the entire test run."""
    app = QCoreApplication.instance() or QCoreApplication(sys.argv[:1])
    yield app


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Keep every test away from the real settings file."""
    monkeypatch.setattr("eggtimer.settings.APP_SUPPORT_DIR", tmp_path)
    monkeypatch.setattr("eggtimer.settings.SETTINGS_PATH", tmp_path / "settings.json")
    yield


@pytest.fixture
def clock():
    return FakeClock(start=1000.0)


@pytest.fixture
def observer():
    return RecordingObserver()


@pytest.fixture
def engine(qapp, clock, observer):
    """Fresh EggTimer bound to the fake clock and a recording observer."""
    timer = EggTimer(parent=None, clock=clock, observer=observer)
    yield timer
    timer.reset()


@pytest.fixture
def prefs(qapp):
    return Preferences(Settings(), autosave=False)

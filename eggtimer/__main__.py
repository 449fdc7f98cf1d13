"""Allow running EggTimer as a module: python -m eggtimer."""

from __future__ import annotations

import argparse
import logging
import sys

from PyQt6.QtCore import QCoreApplication

from .console import Console
from .settings import Preferences, load_settings
from .timer.engine import EggTimer


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="eggtimer",
        description="Single countdown timer driven from the terminal.",
    )
    parser.add_argument(
        "--duration", type=float, metavar="SECONDS",
        help="preferred countdown length for this session (not saved)",
    )
    parser.add_argument(
        "--no-sound", action="store_true",
        help="don't play the ding when the countdown finishes",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="log debug output",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = QCoreApplication(sys.argv[:1])
    app.setApplicationName("EggTimer")
    app.setOrganizationName("EggTimer")

    settings = load_settings()
    prefs = Preferences(settings, autosave=args.duration is None)
    if args.duration is not None:
        if args.duration <= 0:
            sys.exit("eggtimer: --duration must be positive")
        prefs.selected_time = args.duration

    sound = None
    if settings.sound_enabled and not args.no_sound:
        from .audio.sounds import SoundPlayer
        sound = SoundPlayer()
        sound.set_volume(settings.sound_volume)

    engine = EggTimer()
    console = Console(engine, prefs, sound=sound)
    print("EggTimer ready! Type 'help' for commands.")
    console.attach_stdin()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()

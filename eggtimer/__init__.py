"""EggTimer: a single countdown with a boiled-egg progress display."""

__version__ = "0.1.0"

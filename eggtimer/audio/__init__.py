"""Audio package."""

from .sounds import SoundPlayer, generate_ding

__all__ = ["SoundPlayer", "generate_ding"]

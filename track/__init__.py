"""Track module."""

from .builder import build_tracks
from .track import Track

__all__ = ["Track", "build_tracks"]

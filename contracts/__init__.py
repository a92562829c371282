"""Shared data contracts for 3D point tracks."""

from .types import INVALID_IMAGE_ID, INVALID_POINT2D_IDX, TrackElement

__all__ = [
    "INVALID_IMAGE_ID",
    "INVALID_POINT2D_IDX",
    "TrackElement",
]

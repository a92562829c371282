"""Core data contracts shared by track containers and their consumers."""

from __future__ import annotations

from dataclasses import dataclass

# Sentinels marking an unassigned image or feature point.
INVALID_IMAGE_ID = 2**32 - 1
INVALID_POINT2D_IDX = 2**32 - 1


@dataclass(frozen=True)
class TrackElement:
    """A single observation: one image and one 2D feature index within it."""

    # The image in which the track element is observed.
    image_id: int = INVALID_IMAGE_ID
    # The point in the image that the track element is observed.
    point2D_idx: int = INVALID_POINT2D_IDX

    def is_valid(self) -> bool:
        return self.image_id != INVALID_IMAGE_ID and self.point2D_idx != INVALID_POINT2D_IDX

"""Join pairwise feature matches into multi-view tracks."""

from __future__ import annotations

from typing import Dict, Iterable, List, Mapping, Tuple

from contracts import TrackElement
from log_config.logger import get_logger
from track.track import Track

logger = get_logger(__name__)

ImagePair = Tuple[int, int]
FeatureMatch = Tuple[int, int]


class _DisjointSet:
    def __init__(self) -> None:
        self._parent: Dict[TrackElement, TrackElement] = {}

    def add(self, element: TrackElement) -> None:
        self._parent.setdefault(element, element)

    def find(self, element: TrackElement) -> TrackElement:
        root = element
        while self._parent[root] != root:
            root = self._parent[root]
        # Path compression
        while self._parent[element] != root:
            self._parent[element], element = root, self._parent[element]
        return root

    def union(self, a: TrackElement, b: TrackElement) -> None:
        root_a = self.find(a)
        root_b = self.find(b)
        if root_a != root_b:
            self._parent[root_b] = root_a

    def __iter__(self):
        return iter(self._parent)


def build_tracks(
    matches: Mapping[ImagePair, Iterable[FeatureMatch]],
    min_track_length: int = 2,
    reserve_hint: int = 0,
) -> List[Track]:
    """Build tracks from pairwise matches.

    Args:
        matches: ``{(image_id1, image_id2): [(point2D_idx1, point2D_idx2), ...]}``
        min_track_length: Tracks with fewer elements are dropped
        reserve_hint: Capacity requested for each new track

    Returns:
        Tracks in first-seen order; elements inside each track are in
        first-seen order as well.
    """
    components = _DisjointSet()
    num_matches = 0
    for (image_id1, image_id2), pairs in matches.items():
        for point2D_idx1, point2D_idx2 in pairs:
            a = TrackElement(image_id1, point2D_idx1)
            b = TrackElement(image_id2, point2D_idx2)
            components.add(a)
            components.add(b)
            components.union(a, b)
            num_matches += 1

    # Dicts keep insertion order, so roots and members follow first-seen order.
    grouped: Dict[TrackElement, List[TrackElement]] = {}
    for element in components:
        grouped.setdefault(components.find(element), []).append(element)

    tracks = []
    for members in grouped.values():
        if len(members) < min_track_length:
            continue
        track = Track()
        track.reserve(max(reserve_hint, len(members)))
        track.add_elements(members)
        tracks.append(track)

    logger.info(
        f"Built {len(tracks)} tracks from {num_matches} matches over {len(matches)} image pairs "
        f"(dropped {len(grouped) - len(tracks)} shorter than {min_track_length})"
    )
    return tracks

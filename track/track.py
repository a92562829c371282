"""Track container storing all image observations of a 3D point."""

from __future__ import annotations

import operator
from typing import Iterable, Iterator, List, Optional, Tuple, Union

import numpy as np

from contracts import TrackElement
from exceptions import TrackError, TrackIndexError
from log_config.logger import get_logger

logger = get_logger(__name__)


class Track:
    """Ordered, mutable collection of observations of a single 3D point.

    Insertion order reflects observation order and is preserved by every
    mutation except deletion. Duplicates are kept.

    Index-based access (``element``, ``set_element`` and ``delete_element(idx)``)
    is bounds-checked and raises ``TrackIndexError`` for any index outside
    ``[0, length())``. Deletion by value, ``delete_element(image_id,
    point2D_idx)``, removes the first match and is a silent no-op when
    nothing matches.
    """

    def __init__(self, elements: Optional[Iterable[TrackElement]] = None) -> None:
        self._elements: List[TrackElement] = list(elements) if elements is not None else []
        self._capacity = len(self._elements)

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[int, int]]) -> "Track":
        """Build a track from ``(image_id, point2D_idx)`` pairs."""
        return cls(TrackElement(image_id, point2D_idx) for image_id, point2D_idx in pairs)

    def length(self) -> int:
        """The number of track elements."""
        return len(self._elements)

    @property
    def elements(self) -> List[TrackElement]:
        """The backing list itself. Edits made through it change the track."""
        return self._elements

    def elements_view(self) -> Tuple[TrackElement, ...]:
        """Read-only snapshot of the elements, in order."""
        return tuple(self._elements)

    def set_elements(self, elements: Iterable[TrackElement]) -> None:
        """Replace all elements with a private copy of ``elements``."""
        self._elements = list(elements)
        self._capacity = max(self._capacity, len(self._elements))

    def element(self, idx: int) -> TrackElement:
        return self._elements[self._check_index(idx)]

    def set_element(self, idx: int, element: TrackElement) -> None:
        self._elements[self._check_index(idx)] = element

    def add_element(self, element_or_image_id: Union[TrackElement, int], point2D_idx: Optional[int] = None) -> None:
        """Append one element.

        Accepts either a ``TrackElement`` or an ``(image_id, point2D_idx)``
        pair of arguments.
        """
        if point2D_idx is None:
            if not isinstance(element_or_image_id, TrackElement):
                raise TypeError(
                    f"add_element expects a TrackElement or (image_id, point2D_idx), got {type(element_or_image_id).__name__}"
                )
            element = element_or_image_id
        else:
            element = TrackElement(element_or_image_id, point2D_idx)
        self._elements.append(element)
        self._grow(len(self._elements))

    def add_elements(self, elements: Iterable[TrackElement]) -> None:
        self._elements.extend(elements)
        self._grow(len(self._elements))

    def delete_element(self, idx_or_image_id: int, point2D_idx: Optional[int] = None) -> None:
        """Delete one element by position or by value.

        ``delete_element(idx)`` removes the element at ``idx`` and raises
        ``TrackIndexError`` when ``idx`` is out of range.

        ``delete_element(image_id, point2D_idx)`` removes the first element
        with that image and point index. Nothing happens when no element
        matches.
        """
        if point2D_idx is None:
            del self._elements[self._check_index(idx_or_image_id)]
            return

        target = TrackElement(idx_or_image_id, point2D_idx)
        for idx, element in enumerate(self._elements):
            if element == target:
                del self._elements[idx]
                return
        logger.debug(f"No element matches image_id={idx_or_image_id}, point2D_idx={point2D_idx}; nothing deleted")

    def reserve(self, num_elements: int) -> None:
        """Request capacity for at least ``num_elements`` elements."""
        self._grow(num_elements)

    def compress(self) -> None:
        """Shrink the capacity to the current length."""
        self._capacity = len(self._elements)

    def capacity(self) -> int:
        return max(self._capacity, len(self._elements))

    def image_ids(self) -> np.ndarray:
        """Image identifiers of all elements as a ``uint32`` array.

        Raises:
            TrackError: If an identifier lies outside ``[0, 2**32)``
        """
        return self._as_uint32([el.image_id for el in self._elements])

    def to_array(self) -> np.ndarray:
        """Elements as an ``(N, 2)`` ``uint32`` array of ``(image_id, point2D_idx)``.

        Raises:
            TrackError: If an identifier lies outside ``[0, 2**32)``
        """
        return self._as_uint32([(el.image_id, el.point2D_idx) for el in self._elements]).reshape(-1, 2)

    @staticmethod
    def _as_uint32(values: list) -> np.ndarray:
        try:
            array = np.array(values, dtype=np.int64)
        except OverflowError as e:
            raise TrackError(f"Identifiers do not fit in uint32: {e}") from e
        if array.size and (array.min() < 0 or array.max() > np.iinfo(np.uint32).max):
            raise TrackError("Identifiers do not fit in uint32")
        return array.astype(np.uint32)

    def _check_index(self, idx: int) -> int:
        idx = operator.index(idx)
        if not 0 <= idx < len(self._elements):
            logger.debug(f"Track index {idx} out of range for length {len(self._elements)}")
            raise TrackIndexError(
                f"Track index {idx} out of range [0, {len(self._elements)})",
                index=idx,
                length=len(self._elements),
            )
        return idx

    def _grow(self, num_elements: int) -> None:
        if num_elements > self._capacity:
            self._capacity = num_elements

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[TrackElement]:
        return iter(self._elements)

    def __contains__(self, element: object) -> bool:
        return element in self._elements

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Track):
            return NotImplemented
        return self._elements == other._elements

    def __repr__(self) -> str:
        return f"Track(elements={self._elements!r})"

"""Tests for the Track container."""

from __future__ import annotations

import numpy as np
import pytest

from contracts import TrackElement
from exceptions import ReconstructionError, TrackError, TrackIndexError
from track import Track

PAIRS = [(1, 10), (2, 20), (1, 10), (3, 5)]


def _make_track(pairs=PAIRS) -> Track:
    track = Track()
    track.add_elements([TrackElement(image_id, point2D_idx) for image_id, point2D_idx in pairs])
    return track


def test_empty_track() -> None:
    track = Track()

    assert track.length() == 0
    assert len(track) == 0
    assert track.elements == []
    assert track == Track()


def test_add_elements_preserves_order_and_duplicates() -> None:
    track = _make_track()

    assert track.length() == len(PAIRS)
    for idx, (image_id, point2D_idx) in enumerate(PAIRS):
        assert track.element(idx) == TrackElement(image_id, point2D_idx)


def test_add_element_overloads() -> None:
    track = Track()
    track.add_element(TrackElement(1, 2))
    track.add_element(3, 4)

    assert track.elements == [TrackElement(1, 2), TrackElement(3, 4)]


@pytest.mark.parametrize("value", [5, (1, 2), None])
def test_add_element_rejects_non_elements(value) -> None:
    track = _make_track()

    with pytest.raises(TypeError):
        track.add_element(value)

    assert track == _make_track()


def test_add_empty_elements_is_noop() -> None:
    track = _make_track()
    track.add_elements([])

    assert track == _make_track()


def test_basic_workflow() -> None:
    track = Track()
    track.add_element(3, 7)
    track.add_element(5, 2)

    assert track.length() == 2
    assert track.element(0) == TrackElement(3, 7)

    track.delete_element(3, 7)

    assert track.length() == 1
    assert track.element(0) == TrackElement(5, 2)


@pytest.mark.parametrize("idx", [4, 100, -1])
def test_element_out_of_range_raises(idx: int) -> None:
    track = _make_track()

    with pytest.raises(TrackIndexError) as excinfo:
        track.element(idx)

    assert excinfo.value.index == idx
    assert excinfo.value.length == 4


def test_index_error_is_catchable_as_builtin_and_base() -> None:
    track = Track()

    with pytest.raises(IndexError):
        track.element(0)
    with pytest.raises(ReconstructionError):
        track.set_element(0, TrackElement(1, 1))


def test_set_element() -> None:
    track = _make_track()
    track.set_element(1, TrackElement(9, 9))

    assert track.element(1) == TrackElement(9, 9)
    assert track.length() == 4


@pytest.mark.parametrize("idx", [4, 100, -1])
def test_set_element_out_of_range_leaves_track_unmodified(idx: int) -> None:
    track = _make_track()

    with pytest.raises(TrackIndexError):
        track.set_element(idx, TrackElement(0, 0))

    assert track == _make_track()


def test_set_elements_round_trip() -> None:
    t1 = _make_track()
    t2 = Track()
    t2.set_elements(t1.elements)

    assert t1 == t2

    # The copy is owned by t2 alone.
    t1.add_element(7, 7)
    assert t2.length() == 4


def test_set_elements_accepts_empty() -> None:
    track = _make_track()
    track.set_elements([])

    assert track.length() == 0


def test_mutable_elements_view_edits_track() -> None:
    track = _make_track([(2, 0), (1, 0)])
    track.elements.sort(key=lambda el: el.image_id)

    assert track.element(0) == TrackElement(1, 0)


def test_elements_view_is_snapshot() -> None:
    track = _make_track()
    view = track.elements_view()
    track.add_element(8, 8)

    assert isinstance(view, tuple)
    assert len(view) == 4


@pytest.mark.parametrize("idx", [0, 1, 3])
def test_delete_element_by_index_shifts_tail(idx: int) -> None:
    track = _make_track()
    old = list(track.elements)
    track.delete_element(idx)

    assert track.length() == len(old) - 1
    for j in range(idx):
        assert track.element(j) == old[j]
    for j in range(idx, track.length()):
        assert track.element(j) == old[j + 1]


@pytest.mark.parametrize("idx", [4, 100, -1])
def test_delete_element_by_index_out_of_range_leaves_track_unmodified(idx: int) -> None:
    track = _make_track()

    with pytest.raises(TrackIndexError):
        track.delete_element(idx)

    assert track == _make_track()


def test_delete_element_by_value_without_match_is_noop() -> None:
    track = _make_track()
    track.delete_element(42, 42)

    assert track == _make_track()


def test_delete_element_by_value_removes_first_match_only() -> None:
    track = _make_track()
    track.delete_element(1, 10)

    assert track.elements == [TrackElement(2, 20), TrackElement(1, 10), TrackElement(3, 5)]


def test_delete_element_by_value_matches_index_deletion() -> None:
    by_value = _make_track()
    by_index = _make_track()
    by_value.delete_element(3, 5)
    by_index.delete_element(3)

    assert by_value == by_index


def test_reserve_and_compress_do_not_change_state() -> None:
    track = _make_track()
    reference = _make_track()

    track.reserve(100)
    assert track.capacity() >= 100
    track.reserve(2)
    track.compress()
    track.compress()

    assert track.capacity() == track.length()
    assert track == reference
    assert track.elements == reference.elements


def test_equality_is_order_sensitive() -> None:
    a = TrackElement(1, 1)
    b = TrackElement(2, 2)

    assert Track([a, b]) != Track([b, a])
    assert Track([a, b]) == Track([a, b])
    assert Track([a]) != Track([a, a])


def test_equality_with_other_types() -> None:
    assert Track() != []
    assert not (Track() == [])


def test_track_is_unhashable() -> None:
    with pytest.raises(TypeError):
        hash(Track())


def test_iteration_and_membership() -> None:
    track = _make_track()

    assert list(track) == track.elements
    assert TrackElement(3, 5) in track
    assert TrackElement(3, 6) not in track


def test_repr_lists_elements() -> None:
    track = Track.from_pairs([(1, 2)])

    assert repr(track) == "Track(elements=[TrackElement(image_id=1, point2D_idx=2)])"


def test_numpy_export() -> None:
    track = _make_track()

    np.testing.assert_array_equal(track.image_ids(), np.array([1, 2, 1, 3], dtype=np.uint32))
    array = track.to_array()
    assert array.shape == (4, 2)
    assert array.dtype == np.uint32
    np.testing.assert_array_equal(array[1], [2, 20])
    assert Track().to_array().shape == (0, 2)


@pytest.mark.parametrize("pairs", [[(2**32, 1)], [(1, 2**32)], [(-1, 0)], [(2**70, 0)]])
def test_numpy_export_rejects_identifiers_outside_uint32(pairs) -> None:
    track = Track.from_pairs(pairs)

    with pytest.raises(TrackError):
        track.to_array()


def test_numpy_export_accepts_uint32_max() -> None:
    track = Track.from_pairs([(2**32 - 1, 2**32 - 1)])

    assert track.image_ids()[0] == 2**32 - 1
    np.testing.assert_array_equal(track.to_array(), [[2**32 - 1, 2**32 - 1]])

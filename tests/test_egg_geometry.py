import pytest

from kinectsketch import egg_geometry as g
from kinectsketch.egg_geometry import FaceRegion, curve_segments


def test_regions_tile_the_point_array_without_gaps():
    covered = []
    for region in g.ALL_REGIONS:
        covered.extend(FaceRegion(region.first, region.count).indices())
    assert covered == list(range(g.NUMBER_TOTAL_POINTS))


def test_face_regions_end_where_pupils_start():
    face = [
        g.RIGHT_EYE, g.LEFT_EYE, g.RIGHT_EYEBROW, g.LEFT_EYEBROW,
        g.MOUTH, g.NOSE, *g.HAIRS,
    ]
    total = sum(
        len(list(FaceRegion(region.first, region.count).indices()))
        for region in face
    )
    assert total == g.NUMBER_FACE_POINTS
    last_hair = FaceRegion(g.HAIRS[-1].first, g.HAIRS[-1].count)
    assert list(last_hair.indices())[-1] + 1 == g.RIGHT_PUPIL.first


def test_hair_count_and_length():
    assert len(g.HAIRS) == g.NUMBER_OF_HAIRS
    for hair in g.HAIRS:
        segments = curve_segments(hair.first, hair.count, False)
        assert len(segments) == g.POINTS_PER_SINGLE_HAIR - 1


def test_closed_curve_segments():
    assert curve_segments(0, 3, True) == [(0, 1), (1, 2), (2, 0)]


def test_open_curve_segments():
    assert curve_segments(5, 3, False) == [(5, 6), (6, 7)]


def test_single_point_closed_curve_is_degenerate_loop():
    assert curve_segments(4, 1, True) == [(4, 4)]
    assert curve_segments(4, 1, False) == []


@pytest.mark.parametrize("position", range(len(g.ALL_REGIONS)))
def test_region_segment_counts(position):
    region = g.ALL_REGIONS[position]
    closed = curve_segments(region.first, region.count, True)
    opened = curve_segments(region.first, region.count, False)
    assert list(region.segments(True)) == closed
    assert list(region.segments(False)) == opened
    assert len(closed) == region.count
    assert len(opened) == region.count - 1


def test_region_segments_stay_inside_region():
    indices = list(g.MOUTH.indices())
    for a, b in g.MOUTH.segments(True):
        assert a in indices
        assert b in indices


def test_closed_region_visits_each_point_twice():
    ends = [index for pair in g.LEFT_EYE.segments(True) for index in pair]
    assert sorted(ends) == sorted(list(g.LEFT_EYE.indices()) * 2)


def test_region_rejects_empty_count():
    with pytest.raises(ValueError):
        FaceRegion(0, 0)


def test_region_rejects_negative_first():
    with pytest.raises(ValueError):
        FaceRegion(-1, 4)


def test_curve_segments_rejects_empty():
    with pytest.raises(ValueError):
        curve_segments(3, 0, True)
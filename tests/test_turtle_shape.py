import pytest

from kinectsketch.turtle_shape import (
    TURTLE_BODY_SIZE,
    BezierSegment,
    Figure,
    turtle_parts,
)


@pytest.fixture
def segment():
    return BezierSegment((1.0, 4.0), (5.0, 6.0), (8.0, 0.0))


def test_point_at_ends_match_start_and_end(segment):
    assert segment.point_at((0.0, 0.0), 0.0) == pytest.approx((0.0, 0.0))
    assert segment.point_at((0.0, 0.0), 1.0) == pytest.approx((8.0, 0.0))


def test_straight_segment_midpoint_is_halfway():
    line = BezierSegment((1.0, 1.0), (2.0, 2.0), (3.0, 3.0))
    assert line.point_at((0.0, 0.0), 0.5) == pytest.approx((1.5, 1.5))


def test_parts_in_drawing_order():
    assert list(turtle_parts()) == [
        "body",
        "head",
        "tail",
        "front_left_foot",
        "back_left_foot",
        "front_right_foot",
        "back_right_foot",
    ]


@pytest.mark.parametrize("name", list(turtle_parts()))
def test_every_part_closes_on_its_start(name):
    figure = turtle_parts()[name]
    assert figure.closed
    assert figure.end_point() == pytest.approx(figure.start)


@pytest.mark.parametrize("name", list(turtle_parts()))
def test_flattened_parts_stay_within_layout_box(name):
    width, height = TURTLE_BODY_SIZE
    for x, y in turtle_parts()[name].flatten(16):
        assert -1e-9 <= x <= width + 1e-9
        assert -1e-9 <= y <= height + 1e-9


def test_flatten_point_count_and_endpoints():
    figure = turtle_parts()["head"]
    points = figure.flatten(5)
    assert len(points) == 1 + 5 * len(figure.segments)
    assert points[0] == figure.start
    assert points[-1] == pytest.approx(figure.end_point())


def test_flatten_passes_through_segment_ends():
    figure = turtle_parts()["body"]
    points = figure.flatten(4)
    ends = points[4::4]
    assert ends == pytest.approx([seg.end for seg in figure.segments])


def test_empty_figure_ends_at_start():
    figure = Figure((2.0, 3.0), ())
    assert figure.end_point() == (2.0, 3.0)
    assert figure.flatten(3) == [(2.0, 3.0)]


def test_flatten_rejects_zero_steps():
    with pytest.raises(ValueError):
        turtle_parts()["tail"].flatten(0)


def test_layout_box_matches_extremes():
    parts = turtle_parts()
    assert parts["front_right_foot"].start[0] == TURTLE_BODY_SIZE[0]
    assert parts["tail"].segments[0].end[1] == TURTLE_BODY_SIZE[1]
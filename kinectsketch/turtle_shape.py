"""Outline of the turtle drawn by the speech demo.

Every part is a closed figure made of cubic Bezier segments, laid out in a
box of ``TURTLE_BODY_SIZE`` with the head towards negative y.
"""

from __future__ import annotations

from dataclasses import dataclass

Point = tuple[float, float]

TURTLE_BODY_SIZE: Point = (99.057, 128.859)
BODY_FILL_COLOR = 0x54308D


@dataclass(frozen=True)
class BezierSegment:
    """A cubic Bezier segment; its start is the end of the previous segment."""

    control1: Point
    control2: Point
    end: Point

    def point_at(self, start: Point, t: float) -> Point:
        """The point at parameter ``t`` in [0, 1] for a segment starting at ``start``."""
        u = 1.0 - t
        w0 = u * u * u
        w1 = 3.0 * u * u * t
        w2 = 3.0 * u * t * t
        w3 = t * t * t
        return (
            w0 * start[0] + w1 * self.control1[0] + w2 * self.control2[0] + w3 * self.end[0],
            w0 * start[1] + w1 * self.control1[1] + w2 * self.control2[1] + w3 * self.end[1],
        )


@dataclass(frozen=True)
class Figure:
    """A path of Bezier segments from a start point, closed by default."""

    start: Point
    segments: tuple[BezierSegment, ...]
    closed: bool = True

    def end_point(self) -> Point:
        """Where the path finishes."""
        return self.segments[-1].end if self.segments else self.start

    def flatten(self, steps: int) -> list[Point]:
        """Approximate the path by points, ``steps`` per segment after the start."""
        if steps < 1:
            raise ValueError(f"steps must be at least 1, got {steps}")
        points = [self.start]
        current = self.start
        for segment in self.segments:
            points.extend(segment.point_at(current, i / steps) for i in range(1, steps + 1))
            current = segment.end
        return points


def _figure(start: Point, *curves: tuple[Point, Point, Point]) -> Figure:
    return Figure(start, tuple(BezierSegment(c1, c2, end) for c1, c2, end in curves))


def turtle_parts() -> dict[str, Figure]:
    """The turtle's body parts, in drawing order."""
    return {
        "body": _figure(
            (49.279, 30.538),
            ((29.813, 30.538), (13.975, 48.466), (13.975, 70.502)),
            ((13.975, 92.539), (29.813, 110.466), (49.279, 110.466)),
            ((68.748, 110.466), (84.586, 92.539), (84.586, 70.502)),
            ((84.586, 48.466), (68.748, 30.538), (49.279, 30.538)),
        ),
        "head": _figure(
            (61.715, 29.865),
            ((64.850, 26.697), (66.789, 22.343), (66.789, 17.534)),
            ((66.789, 7.850), (58.939, 0.000), (49.256, 0.000)),
            ((39.572, 0.000), (31.722, 7.850), (31.722, 17.534)),
            ((31.722, 22.357), (33.671, 26.723), (36.822, 29.893)),
            ((40.737, 28.375), (44.935, 27.538), (49.305, 27.538)),
            ((53.648, 27.538), (57.820, 28.365), (61.715, 29.865)),
        ),
        "tail": _figure(
            (45.151, 113.209),
            ((51.105, 121.359), (44.672, 128.859), (44.672, 128.859)),
            ((52.939, 125.963), (54.227, 115.555), (54.418, 113.072)),
            ((52.744, 113.324), (51.039, 113.466), (49.305, 113.466)),
            ((47.900, 113.466), (46.516, 113.375), (45.151, 113.209)),
        ),
        "front_left_foot": _figure(
            (10.551, 39.545),
            ((4.724, 39.545), (0.000, 44.269), (0.000, 50.096)),
            ((0.000, 55.923), (4.724, 60.646), (10.551, 60.646)),
            ((11.063, 60.646), (11.562, 60.597), (12.054, 60.527)),
            ((13.354, 54.418), (15.818, 48.816), (19.172, 44.026)),
            ((17.262, 41.318), (14.116, 39.545), (10.551, 39.545)),
        ),
        "back_left_foot": _figure(
            (16.551, 92.758),
            ((11.078, 93.147), (6.756, 97.698), (6.756, 103.269)),
            ((6.756, 109.097), (11.479, 113.820), (17.307, 113.820)),
            ((22.251, 113.820), (26.389, 110.414), (27.532, 105.823)),
            ((23.108, 102.381), (19.354, 97.930), (16.551, 92.758)),
        ),
        "front_right_foot": _figure(
            (99.057, 50.096),
            ((99.057, 44.269), (94.332, 39.545), (88.506, 39.545)),
            ((84.800, 39.545), (81.547, 41.459), (79.664, 44.347)),
            ((82.891, 49.047), (85.268, 54.512), (86.543, 60.457)),
            ((87.180, 60.577), (87.834, 60.646), (88.506, 60.646)),
            ((94.332, 60.646), (99.057, 55.923), (99.057, 50.096)),
        ),
        "back_right_foot": _figure(
            (71.447, 105.528),
            ((72.482, 110.269), (76.699, 113.820), (81.750, 113.820)),
            ((87.578, 113.820), (92.301, 109.097), (92.301, 103.269)),
            ((92.301, 97.551), (87.749, 92.908), (82.071, 92.737)),
            ((79.345, 97.772), (75.717, 102.124), (71.447, 105.528)),
        ),
    }
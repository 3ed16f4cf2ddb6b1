"""Layout of the egg avatar's feature points.

Every point of the avatar lives in one flat array. Each facial feature
owns a contiguous run of that array. Latitudes and longitudes are
expressed as fractions of a half turn (1.0 == 180 degrees).
"""

from __future__ import annotations

from dataclasses import dataclass

# Proportions of the face, in fractions of a half turn.
EYE_INSIDE = 1.0 / 18.0
EYE_OUTSIDE = 1.0 / 6.0
EYE_TOP = 1.0 / 40.0
EYE_BOTTOM = -1.0 / 40.0
MOUTH_RIGHT = (EYE_INSIDE + EYE_OUTSIDE) / 2.0
MOUTH_LEFT = -MOUTH_RIGHT
MOUTH_VERTICAL = -1.7 * (EYE_OUTSIDE - EYE_INSIDE)
EYEBROW_BOTTOM = EYE_TOP + 1.0 / 16.0
EYEBROW_TOP = EYEBROW_BOTTOM + EYE_TOP / 2.0
EYEBROW_INSIDE = EYE_INSIDE
EYEBROW_OUTSIDE = EYE_OUTSIDE + 0.1 / 16.0
HAIR_BOTTOM = (0.5 + EYEBROW_TOP) / 2.0
NOSE_TOP = 0.0
NOSE_BOTTOM = NOSE_TOP - (EYE_OUTSIDE - EYE_INSIDE)
EYE_CENTER_DEPTH_CORRECTION = 7.0 / 7.5
PUPIL_RADIUS = 3.14 / 40.0
HEAD_POSE_SMOOTHING_FACTOR_MIN = 0.001
HEAD_POSE_TRANSLATION_SMOOTHING = 0.05
HEAD_POSE_TRANSLATION_TRIGGER = 0.2  # roughly 20 centimetres

# Point counts.
POINTS_PER_EYELID = 8
NUMBER_EYE_POINTS = 2 * POINTS_PER_EYELID
NUMBER_EYEBROW_POINTS = 9
POINTS_PER_LIP = 8
NUMBER_MOUTH_POINTS = 2 * POINTS_PER_LIP
NUMBER_NOSE_POINTS = 5
NUMBER_CIRCLE_POINTS = 64
POINTS_PER_SINGLE_HAIR = 8
NUMBER_OF_HAIRS = 16
NUMBER_FACE_POINTS = (
    2 * NUMBER_EYE_POINTS
    + 2 * NUMBER_EYEBROW_POINTS
    + NUMBER_MOUTH_POINTS
    + NUMBER_NOSE_POINTS
    + POINTS_PER_SINGLE_HAIR * NUMBER_OF_HAIRS
)
POINTS_PER_PUPIL = 32
NUMBER_TOTAL_POINTS = NUMBER_FACE_POINTS + NUMBER_CIRCLE_POINTS + 2 * POINTS_PER_PUPIL

# First index of each feature in the point array.
RIGHT_EYE_FIRST_POINT = 0
LEFT_EYE_FIRST_POINT = RIGHT_EYE_FIRST_POINT + NUMBER_EYE_POINTS
RIGHT_EYEBROW_FIRST_POINT = LEFT_EYE_FIRST_POINT + NUMBER_EYE_POINTS
LEFT_EYEBROW_FIRST_POINT = RIGHT_EYEBROW_FIRST_POINT + NUMBER_EYEBROW_POINTS
MOUTH_FIRST_POINT = LEFT_EYEBROW_FIRST_POINT + NUMBER_EYEBROW_POINTS
NOSE_FIRST_POINT = MOUTH_FIRST_POINT + NUMBER_MOUTH_POINTS
HAIR_FIRST_POINT = NOSE_FIRST_POINT + NUMBER_NOSE_POINTS
RIGHT_PUPIL_FIRST_POINT = NUMBER_FACE_POINTS
LEFT_PUPIL_FIRST_POINT = RIGHT_PUPIL_FIRST_POINT + POINTS_PER_PUPIL
CIRCLE_FIRST_POINT = LEFT_PUPIL_FIRST_POINT + POINTS_PER_PUPIL


def curve_segments(first: int, count: int, closed: bool) -> list[tuple[int, int]]:
    """Return the index pairs joining ``count`` consecutive points from ``first``.

    When ``closed`` is true the last point is joined back to the first.
    """
    if count < 1:
        raise ValueError(f"a curve needs at least one point, got {count}")
    if first < 0:
        raise ValueError(f"first point index must not be negative, got {first}")
    pairs = [(index - 1, index) for index in range(first + 1, first + count)]
    if closed:
        pairs.append((first + count - 1, first))
    return pairs


@dataclass(frozen=True)
class FaceRegion:
    """A contiguous run of points in the avatar's point array."""

    first: int
    count: int

    def __post_init__(self) -> None:
        if self.count < 1:
            raise ValueError(f"a region needs at least one point, got {self.count}")
        if self.first < 0:
            raise ValueError(f"first point index must not be negative, got {self.first}")

    @property
    def stop(self) -> int:
        """Index one past the region's last point."""
        return self.first + self.count

    def indices(self) -> range:
        """The indices of the region's points, in order."""
        return range(self.first, self.stop)

    def segments(self, closed: bool) -> list[tuple[int, int]]:
        """The index pairs drawn to trace the region as a curve."""
        return curve_segments(self.first, self.count, closed)


RIGHT_EYE = FaceRegion(RIGHT_EYE_FIRST_POINT, NUMBER_EYE_POINTS)
LEFT_EYE = FaceRegion(LEFT_EYE_FIRST_POINT, NUMBER_EYE_POINTS)
RIGHT_EYEBROW = FaceRegion(RIGHT_EYEBROW_FIRST_POINT, NUMBER_EYEBROW_POINTS)
LEFT_EYEBROW = FaceRegion(LEFT_EYEBROW_FIRST_POINT, NUMBER_EYEBROW_POINTS)
MOUTH = FaceRegion(MOUTH_FIRST_POINT, NUMBER_MOUTH_POINTS)
NOSE = FaceRegion(NOSE_FIRST_POINT, NUMBER_NOSE_POINTS)
HAIRS = tuple(
    FaceRegion(HAIR_FIRST_POINT + hair * POINTS_PER_SINGLE_HAIR, POINTS_PER_SINGLE_HAIR)
    for hair in range(NUMBER_OF_HAIRS)
)
RIGHT_PUPIL = FaceRegion(RIGHT_PUPIL_FIRST_POINT, POINTS_PER_PUPIL)
LEFT_PUPIL = FaceRegion(LEFT_PUPIL_FIRST_POINT, POINTS_PER_PUPIL)
CIRCLE = FaceRegion(CIRCLE_FIRST_POINT, NUMBER_CIRCLE_POINTS)

ALL_REGIONS = (
    RIGHT_EYE,
    LEFT_EYE,
    RIGHT_EYEBROW,
    LEFT_EYEBROW,
    MOUTH,
    NOSE,
    *HAIRS,
    RIGHT_PUPIL,
    LEFT_PUPIL,
    CIRCLE,
)
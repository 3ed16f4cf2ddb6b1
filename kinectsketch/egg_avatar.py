"""An egg-shaped cartoon face driven by face tracking data.

The avatar is a unit sphere seen from the front. Facial features are
placed on it by latitude and longitude, turned by the head pose, then
scaled and moved into window coordinates and drawn as line segments.
Parts of the sphere facing away from the viewer (negative z) are hidden.
"""

from __future__ import annotations

import math
import random as _random
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import NamedTuple

from kinectsketch.egg_expression import Expression, HeadPose
from kinectsketch.egg_geometry import (
    CIRCLE,
    EYE_BOTTOM,
    EYE_CENTER_DEPTH_CORRECTION,
    EYE_INSIDE,
    EYE_OUTSIDE,
    EYE_TOP,
    EYEBROW_BOTTOM,
    EYEBROW_INSIDE,
    EYEBROW_OUTSIDE,
    EYEBROW_TOP,
    HAIR_BOTTOM,
    HAIRS,
    LEFT_EYE,
    LEFT_EYEBROW,
    MOUTH,
    MOUTH_LEFT,
    MOUTH_RIGHT,
    MOUTH_VERTICAL,
    NOSE,
    NOSE_BOTTOM,
    NOSE_TOP,
    NUMBER_CIRCLE_POINTS,
    NUMBER_EYEBROW_POINTS,
    NUMBER_FACE_POINTS,
    NUMBER_NOSE_POINTS,
    POINTS_PER_EYELID,
    POINTS_PER_LIP,
    POINTS_PER_PUPIL,
    POINTS_PER_SINGLE_HAIR,
    PUPIL_RADIUS,
    RIGHT_EYE,
    RIGHT_EYEBROW,
    FaceRegion,
)

EYE_CURVE_TOP = (0.0, 0.5, 0.775, 0.925, 1.0, 0.925, 0.775, 0.5)
EYE_CURVE_BOTTOM = (0.0, 0.5, 0.775, 0.925, 1.0, 0.925, 0.775, 0.5)
EYEBROW_CURVE = (0.0, 0.5, 0.775, 0.925, 1.0, 0.925, 0.775, 0.5, 0.0)
UPPER_LIP_CURVE = (0.0, 0.5, 0.775, 0.925, 1.0, 0.925, 0.775, 0.5)
LOWER_LIP_CURVE = (0.0, 0.5, 0.775, 0.925, 1.0, 0.925, 0.775, 0.5)
LIP_CORNERS_CURVE = (
    1.0, 0.5, 0.2, 0.0, 0.0, 0.0, 0.2, 0.5,
    1.0, 0.5, 0.2, 0.0, 0.0, 0.0, 0.2, 0.5,
)
LIP_STRETCH_CURVE = (
    -1.0, -0.925, -0.775, -0.5, 0.0, 0.5, 0.775, 0.925,
    1.0, 0.925, 0.775, 0.5, 0.0, -0.5, -0.775, -0.925,
)
OUTER_BROW_RAISE_CURVE_X = (0.0, 0.0125, 0.025, 0.0375, 0.05, 0.0625, 0.075, 0.0875, 0.1)
OUTER_BROW_RAISE_CURVE_Y = (0.0, 0.125, 0.25, 0.375, 0.5, 0.625, 0.75, 0.875, 1.0)

WHITE = 0xFFFFFFFF

Point3 = tuple[float, float, float]


class DrawnLine(NamedTuple):
    """One line handed to a canvas."""

    start: tuple[int, int]
    end: tuple[int, int]
    color: int
    width: int


@dataclass
class LineCanvas:
    """A drawing surface that records the lines drawn on it.

    Subclass and override :meth:`draw_line` to render somewhere real.
    """

    lines: list[DrawnLine] = field(default_factory=list)

    def draw_line(self, start: tuple[int, int], end: tuple[int, int], color: int, width: int) -> None:
        """Draw a line from ``start`` to ``end`` in integer pixel coordinates."""
        self.lines.append(DrawnLine(tuple(start), tuple(end), color, width))


def _rotated(items: list) -> list:
    """Each item's predecessor, the first item's being the last."""
    return items[-1:] + items[:-1]


def _eye_latlon(expr: Expression, left: bool) -> list[tuple[float, float]]:
    sign = -1.0 if left else 1.0
    upper = [
        (
            sign * ((i * (EYE_OUTSIDE - EYE_INSIDE)) / POINTS_PER_EYELID + EYE_INSIDE),
            (EYE_TOP + expr.upper_eyelid) * curve,
        )
        for i, curve in enumerate(EYE_CURVE_TOP)
    ]
    lower = [
        (
            sign * ((i * (EYE_INSIDE - EYE_OUTSIDE)) / POINTS_PER_EYELID + EYE_OUTSIDE),
            (EYE_BOTTOM + expr.lower_eyelid) * curve,
        )
        for i, curve in enumerate(EYE_CURVE_BOTTOM)
    ]
    return upper + lower


def _eyebrow_latlon(expr: Expression, left: bool) -> list[tuple[float, float]]:
    sign = -1.0 if left else 1.0
    return [
        (
            sign
            * (
                (i * (EYEBROW_OUTSIDE - EYEBROW_INSIDE)) / (NUMBER_EYEBROW_POINTS - 1)
                + expr.outer_brow_raiser * raise_x
                + EYEBROW_INSIDE
            ),
            (EYEBROW_TOP - EYEBROW_BOTTOM) * curve
            + EYEBROW_BOTTOM
            - expr.brow_lower
            + expr.outer_brow_raiser * raise_y,
        )
        for i, (curve, raise_x, raise_y) in enumerate(
            zip(EYEBROW_CURVE, OUTER_BROW_RAISE_CURVE_X, OUTER_BROW_RAISE_CURVE_Y)
        )
    ]


def _mouth_latlon(expr: Expression) -> list[tuple[float, float]]:
    upper_stretch = LIP_STRETCH_CURVE[:POINTS_PER_LIP]
    lower_stretch = LIP_STRETCH_CURVE[POINTS_PER_LIP:]
    upper_corners = LIP_CORNERS_CURVE[:POINTS_PER_LIP]
    lower_corners = LIP_CORNERS_CURVE[POINTS_PER_LIP:]
    upper = [
        (
            (i * (MOUTH_RIGHT - MOUTH_LEFT)) / POINTS_PER_LIP
            + MOUTH_LEFT
            + expr.mouth_stretch * stretch,
            MOUTH_VERTICAL + expr.upper_lip_lift * lip + expr.mouth_corner_lift * corner,
        )
        for i, (lip, stretch, corner) in enumerate(zip(UPPER_LIP_CURVE, upper_stretch, upper_corners))
    ]
    lower = [
        (
            (i * (MOUTH_LEFT - MOUTH_RIGHT)) / POINTS_PER_LIP
            + MOUTH_RIGHT
            + expr.mouth_stretch * stretch,
            MOUTH_VERTICAL - expr.jaw_drop * lip + expr.mouth_corner_lift * corner,
        )
        for i, (lip, stretch, corner) in enumerate(zip(LOWER_LIP_CURVE, lower_stretch, lower_corners))
    ]
    return upper + lower


def _nose_latlon() -> list[tuple[float, float]]:
    return [
        (0.0, (i * (NOSE_TOP - NOSE_BOTTOM)) / (NUMBER_NOSE_POINTS - 1) + NOSE_BOTTOM)
        for i in range(NUMBER_NOSE_POINTS)
    ]


def _hair_latlon() -> list[tuple[float, float]]:
    delta_lat = (0.5 - HAIR_BOTTOM) / (POINTS_PER_SINGLE_HAIR - 1)
    points = []
    for hair in range(len(HAIRS)):
        lon = 2.0 / len(HAIRS) * (hair + 0.5) - 1.0
        points.extend((lon, HAIR_BOTTOM + delta_lat * j) for j in range(POINTS_PER_SINGLE_HAIR))
    return points


def _face_latlon(expr: Expression, yaw: float) -> list[tuple[float, float]]:
    """Latitude and longitude of every face point, with yaw applied."""
    points = (
        _eye_latlon(expr, left=False)
        + _eye_latlon(expr, left=True)
        + _eyebrow_latlon(expr, left=False)
        + _eyebrow_latlon(expr, left=True)
        + _mouth_latlon(expr)
        + _nose_latlon()
        + _hair_latlon()
    )
    turned = []
    for lon, lat in points:
        lon += yaw
        if lon > 1.0:
            lon -= 2.0
        if lon < -1.0:
            lon += 2.0
        turned.append((lon, lat))
    return turned


def _to_xyz(lon: float, lat: float) -> Point3:
    lon_rad = lon * math.pi
    lat_rad = lat * math.pi
    radius = math.cos(lat_rad)
    return (radius * math.sin(lon_rad), math.sin(lat_rad), radius * math.cos(lon_rad))


def _pitch(points: list[Point3], pitch: float) -> list[Point3]:
    a = math.cos(pitch * math.pi)
    b = math.sin(pitch * math.pi)
    return [(x, b * z + a * y, a * z - b * y) for x, y, z in points]


def _roll(points: list[Point3], roll: float) -> list[Point3]:
    a = math.cos(roll * math.pi)
    b = math.sin(roll * math.pi)
    return [(a * x - b * y, b * x + a * y, z) for x, y, z in points]


def _point_inside_curve(points: Sequence[Point3], x: float, y: float, region: FaceRegion) -> bool:
    """Whether (x, y) lies inside the region's outline, using its first two cuts in x."""
    curve = [points[i] for i in region.indices()]
    y_values: list[float] = []
    for (x1, y1, _), (x2, y2, _) in zip(curve, _rotated(curve)):
        if len(y_values) == 2:
            break
        if (x1 <= x < x2) or (x2 <= x < x1):
            y_values.append(y1 + ((y2 - y1) * (x - x1)) / (x2 - x1))
    if len(y_values) != 2:
        return False
    low, high = sorted(y_values)
    return low <= y <= high


def _pupil_center(points: Sequence[Point3], eye: FaceRegion, facing: bool) -> Point3:
    first = points[eye.first]
    opposite = points[eye.first + POINTS_PER_EYELID]
    center = [a + b for a, b in zip(first, opposite)]
    r2 = sum(c * c for c in center)
    if r2 > 0:
        alpha = 1.0 / math.sqrt(r2)
        center = [c * alpha for c in center]
    if facing:
        center[0] *= EYE_CENTER_DEPTH_CORRECTION
        center[1] *= EYE_CENTER_DEPTH_CORRECTION
        center[2] = math.sqrt(max(0.0, 1.0 - center[0] ** 2 - center[1] ** 2))
    return (center[0], center[1], center[2])


def _scaled_to(vector: Point3, length: float) -> Point3:
    norm = math.sqrt(sum(v * v for v in vector))
    alpha = length / norm if norm > 0 else 0.0
    return (vector[0] * alpha, vector[1] * alpha, vector[2] * alpha)


def _pupil_points(points: Sequence[Point3], eye: FaceRegion, facing: bool) -> list[Point3]:
    cx, cy, cz = _pupil_center(points, eye, facing)
    if cy > 0.1 or cz > 0.1:
        v1 = (0.0, cz, -cy)
    else:
        v1 = (-cz, 0.0, cx)
    v2 = (cy * v1[2] - cz * v1[1], cz * v1[0] - cx * v1[2], cx * v1[1] - cy * v1[0])
    v1 = _scaled_to(v1, PUPIL_RADIUS)
    v2 = _scaled_to(v2, PUPIL_RADIUS)
    center = (cx, cy, cz)
    pupil = []
    for i in range(POINTS_PER_PUPIL):
        alpha = 2 * i * math.pi / POINTS_PER_PUPIL
        a = math.cos(alpha)
        b = math.sin(alpha)
        pupil.append(tuple(c + a * p + b * q for c, p, q in zip(center, v1, v2)))
    return pupil


def _circle_points() -> list[Point3]:
    return [
        (math.cos(alpha), math.sin(alpha), 0.0)
        for alpha in (2 * i * math.pi / NUMBER_CIRCLE_POINTS for i in range(NUMBER_CIRCLE_POINTS))
    ]


@dataclass
class EggAvatar:
    """A cartoon egg face that mirrors tracked expressions and head pose."""

    expression: Expression = field(default_factory=Expression)
    pose: HeadPose = field(default_factory=HeadPose)
    scale: float = 1.0
    translation_x: float = 0.0
    translation_y: float = 0.0
    points: list[Point3] = field(
        default_factory=lambda: [(0.0, 0.0, 0.0)] * (NUMBER_FACE_POINTS + 2 * POINTS_PER_PUPIL + NUMBER_CIRCLE_POINTS)
    )

    def set_action_units(self, units: Sequence[float]) -> None:
        """Set the expression from at least six animation units."""
        self.expression = Expression.from_action_units(units)
        self.pose.facing_user = True

    def set_random_action_units(self, rng: _random.Random | None = None) -> None:
        """Set a random expression."""
        self.expression = Expression.random(rng)
        self.pose.facing_user = True

    def set_rotations(self, pitch_degrees: float, yaw_degrees: float, roll_degrees: float) -> None:
        """Set the head orientation in degrees."""
        self.pose.set_rotations(pitch_degrees, yaw_degrees, roll_degrees)

    def set_random_rotations(self, rng: _random.Random | None = None) -> None:
        """Set a random head orientation within 45 degrees of neutral."""
        self.pose.set_random_rotations(rng)

    def set_translations(self, tx: float, ty: float, tz: float) -> None:
        """Report the head position, used to restart pose smoothing."""
        self.pose.set_translations(tx, ty, tz)

    def set_scale_and_translation_to_window(self, height: int, width: int) -> None:
        """Fit the egg into a window of the given size, centred."""
        self.scale = min(height, width) / 4
        self.translation_x = width / 2
        self.translation_y = height / 2

    def _can_track_pupil(self, face: Sequence[Point3]) -> bool:
        if not self.pose.facing_user:
            return False
        for eye in (LEFT_EYE, RIGHT_EYE):
            cx, cy, _ = _pupil_center(face, eye, True)
            if not _point_inside_curve(face, cx, cy, eye):
                return False
        return True

    def compute_points(self) -> list[Point3]:
        """Place every point of the avatar in window coordinates and return them."""
        latlon = _face_latlon(self.expression, self.pose.yaw)
        face = [_to_xyz(lon, lat) for lon, lat in latlon]
        face = _roll(_pitch(face, self.pose.pitch), self.pose.roll)

        facing = self.pose.facing_user and self._can_track_pupil(face)
        right_pupil = _pupil_points(face, RIGHT_EYE, facing)
        left_pupil = _pupil_points(face, LEFT_EYE, facing)

        everything = face + right_pupil + left_pupil + _circle_points()
        s = self.scale
        self.points = [
            (x * s + self.translation_x, y * s + self.translation_y, z * s)
            for x, y, z in everything
        ]
        return list(self.points)

    def _draw_segment(self, canvas: LineCanvas, first: int, second: int, color: int) -> None:
        x1, y1, z1 = self.points[first]
        x2, y2, z2 = self.points[second]
        if z1 < 0:
            if not z2 > 0:
                return
            r = z2 / (z2 - z1)
            x1 = x2 - r * (x2 - x1)
            y1 = y2 - r * (y2 - y1)
        elif z2 < 0:
            if not z1 > 0:
                return
            r = z1 / (z2 - z1)
            x2 = x1 + r * (x1 - x2)
            y2 = y1 + r * (y1 - y2)
        canvas.draw_line((int(x1), int(y1)), (int(x2), int(y2)), color, 1)

    def _draw_region(self, canvas: LineCanvas, region: FaceRegion, closed: bool, color: int) -> None:
        for first, second in region.segments(closed):
            self._draw_segment(canvas, first, second, color)

    def _draw_pupil(self, canvas: LineCanvas, eye: FaceRegion, pupil: FaceRegion, color: int) -> None:
        indices = list(pupil.indices())
        inside = {
            index: _point_inside_curve(self.points, self.points[index][0], self.points[index][1], eye)
            for index in indices
        }
        for current, previous in zip(indices, _rotated(indices)):
            if inside[current] and inside[previous]:
                self._draw_segment(canvas, current, previous, color)

    def draw_image(self, canvas: LineCanvas) -> None:
        """Compute the avatar and draw it in white on ``canvas``."""
        from kinectsketch.egg_geometry import LEFT_PUPIL, RIGHT_PUPIL

        self.compute_points()
        self._draw_region(canvas, RIGHT_EYE, True, WHITE)
        self._draw_region(canvas, LEFT_EYE, True, WHITE)
        self._draw_region(canvas, RIGHT_EYEBROW, False, WHITE)
        self._draw_region(canvas, LEFT_EYEBROW, False, WHITE)
        self._draw_region(canvas, MOUTH, True, WHITE)
        self._draw_region(canvas, NOSE, False, WHITE)
        for hair in HAIRS:
            self._draw_region(canvas, hair, False, WHITE)
        self._draw_region(canvas, CIRCLE, True, WHITE)
        self._draw_pupil(canvas, LEFT_EYE, LEFT_PUPIL, WHITE)
        self._draw_pupil(canvas, RIGHT_EYE, RIGHT_PUPIL, WHITE)

    def draw_background_line(
        self, canvas: LineCanvas, x1: float, y1: float, x2: float, y2: float, color: int
    ) -> None:
        """Draw a line behind the egg, leaving out the part the egg covers."""
        circle = [self.points[i] for i in CIRCLE.indices()]
        xs = [p[0] for p in circle]
        ys = [p[1] for p in circle]
        cx1, cx2 = min(xs), max(xs)
        cy1, cy2 = min(ys), max(ys)
        cx = (cx1 + cx2) / 2.0
        cy = (cy1 + cy2) / 2.0
        r = cx1 - cx
        r2 = r * r

        length = math.hypot(x2 - x1, y2 - y1)
        if length == 0:
            return
        vx = (x2 - x1) / length
        vy = (y2 - y1) / length
        l = (x2 - x1) * vx + (y2 - y1) * vy
        h = (cx - x1) * vx + (cy - y1) * vy
        hx = x1 + vx * h
        hy = y1 + vy * h
        d2 = (hx - cx) ** 2 + (hy - cy) ** 2

        whole = ((int(x1), int(y1)), (int(x2), int(y2)))
        if d2 >= r2:
            canvas.draw_line(*whole, color, 1)
            return
        e = math.sqrt(r2 - d2)
        h1 = h - e
        h2 = h + e
        if h1 >= l or h2 <= 0:
            canvas.draw_line(*whole, color, 1)
            return
        if h1 > 0:
            canvas.draw_line((int(x1), int(y1)), (int(x1 + h1 * vx), int(y1 + h1 * vy)), color, 1)
        if h2 < l:
            canvas.draw_line((int(x1 + h2 * vx), int(y1 + h2 * vy)), (int(x2), int(y2)), color, 1)
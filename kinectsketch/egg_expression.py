"""Facial expression weights and head pose tracking for the egg avatar."""

from __future__ import annotations

import random as _random
from collections.abc import Sequence
from dataclasses import dataclass

from kinectsketch.egg_geometry import (
    EYE_BOTTOM,
    EYE_TOP,
    EYEBROW_BOTTOM,
    HEAD_POSE_TRANSLATION_SMOOTHING,
    HEAD_POSE_TRANSLATION_TRIGGER,
)

AU0_LIP_LIFT_COEFFICIENT = 0.5 / 16.0
AU1_JAW_DROP_COEFFICIENT = 1.0 / 12.0
AU2_LIP_STRETCH_COEFFICIENT = 1.0 / 24.0
AU3_EYEBROW_LOWER_COEFFICIENT = 2.0 / 16.0
AU4_MOUTH_CORNER_COEFFICIENT = -1.0 / 24.0
AU5_OUTER_BROW_RAISER_COEFFICIENT = 1.0 / 16.0
AU2_LOWER_EYELID_COEFFICIENT = 1.0 / 40.0
AU3_EYELIDS_COEFFICIENT = 2.0 / 40.0

MIN_ACTION_UNITS = 6
_MIN_ROTATION_SMOOTHING = 0.002
_RANDOM_RESOLUTION = 1023


def _random_unit(rng: _random.Random) -> float:
    """A value in [0, 1] drawn from 1024 evenly spaced steps."""
    return rng.randrange(_RANDOM_RESOLUTION + 1) / _RANDOM_RESOLUTION


def _eyelids(units: Sequence[float]) -> tuple[float, float]:
    """Return (upper, lower) eyelid weights, before clamping."""
    if len(units) >= 8 and not (units[6] == 0 and units[7] == 0):
        return units[6], units[7]
    lip_lift, jaw, stretch, brow, corner, outer = units[:6]
    if brow > 0.1 and outer > 0.05:
        # Lowered eyebrows: angry eyes.
        return 0.0, brow * AU3_EYELIDS_COEFFICIENT
    if brow < -0.1 and stretch > 0.1 and corner > 0.1:
        # Raised eyebrows and stretched mouth: fearful eyes.
        return -brow * AU3_EYELIDS_COEFFICIENT, brow * AU3_EYELIDS_COEFFICIENT
    if jaw > 0.1 and brow < -0.1:
        # Raised eyebrows and open mouth: surprised eyes.
        return -brow * AU3_EYELIDS_COEFFICIENT, brow * AU3_EYELIDS_COEFFICIENT
    if (stretch - corner) > 0.1 and corner < 0:
        # Stretched lips: smiling eyes.
        return 0.0, min(stretch - corner, 1.0) * AU2_LOWER_EYELID_COEFFICIENT
    if (stretch - corner) < 0 and outer < -0.3:
        # Low lips and slanted eyebrows: sad eyes.
        return -corner * AU2_LOWER_EYELID_COEFFICIENT, 0.0
    return 0.0, 0.0


@dataclass(frozen=True)
class Expression:
    """Weights of the animated parts of the egg avatar."""

    jaw_drop: float = 0.0
    upper_lip_lift: float = 0.0
    mouth_stretch: float = 0.0
    mouth_corner_lift: float = 0.0
    brow_lower: float = 0.0
    outer_brow_raiser: float = 0.0
    upper_eyelid: float = 0.0
    lower_eyelid: float = 0.0

    @classmethod
    def from_action_units(cls, units: Sequence[float]) -> Expression:
        """Build an expression from Candide-3 animation units.

        At least six units are required; a seventh and eighth, when present
        and not both zero, give the upper and lower eyelids directly.
        """
        units = [float(unit) for unit in units]
        if len(units) < MIN_ACTION_UNITS:
            raise ValueError(
                f"need at least {MIN_ACTION_UNITS} action units, got {len(units)}"
            )

        upper_lip_lift = max(units[0], 0.0) * AU0_LIP_LIFT_COEFFICIENT
        jaw_drop = max(units[1], 0.0) * AU1_JAW_DROP_COEFFICIENT
        mouth_stretch = units[2] * AU2_LIP_STRETCH_COEFFICIENT
        brow_lower = units[3] * AU3_EYEBROW_LOWER_COEFFICIENT
        mouth_corner_lift = units[4] * AU4_MOUTH_CORNER_COEFFICIENT
        outer_brow_raiser = units[5] * AU5_OUTER_BROW_RAISER_COEFFICIENT

        upper_eyelid, lower_eyelid = _eyelids(units)

        # Keep the eyelids within the eye.
        if lower_eyelid > -EYE_BOTTOM:
            lower_eyelid = -EYE_BOTTOM
        elif lower_eyelid < EYE_BOTTOM:
            lower_eyelid = EYE_BOTTOM
        if upper_eyelid > EYE_TOP:
            upper_eyelid = EYE_TOP
        elif upper_eyelid < -EYE_TOP:
            upper_eyelid = -EYE_TOP

        # Keep the eyebrows out of the eyes.
        brow_drop = brow_lower - outer_brow_raiser
        if brow_drop > EYEBROW_BOTTOM * 0.9:
            alpha = 0.9 * EYEBROW_BOTTOM / brow_drop
            brow_lower *= alpha
            outer_brow_raiser *= alpha

        return cls(
            jaw_drop=jaw_drop,
            upper_lip_lift=upper_lip_lift,
            mouth_stretch=mouth_stretch,
            mouth_corner_lift=mouth_corner_lift,
            brow_lower=brow_lower,
            outer_brow_raiser=outer_brow_raiser,
            upper_eyelid=upper_eyelid,
            lower_eyelid=lower_eyelid,
        )

    @classmethod
    def random(cls, rng: _random.Random | None = None) -> Expression:
        """An expression from six random action units in [-1, 1]."""
        rng = rng if rng is not None else _random.Random()
        units = [_random_unit(rng) * 2.0 - 1.0 for _ in range(MIN_ACTION_UNITS)]
        return cls.from_action_units(units)


@dataclass
class HeadPose:
    """Head orientation, optionally offset by a running average of past poses.

    Angles are stored as fractions of a half turn. With ``filtering`` on, the
    average reported pose is treated as neutral; a large move of the head
    (see :meth:`set_translations`) restarts the averaging.
    """

    pitch: float = 0.0
    yaw: float = 0.0
    roll: float = 0.0
    facing_user: bool = True
    filtering: bool = False
    pitch_average: float = 0.0
    yaw_average: float = 0.0
    roll_average: float = 0.0
    tx_average: float = 0.0
    ty_average: float = 0.0
    tz_average: float = 0.0
    same_position_count: int = 0

    def set_rotations(
        self, pitch_degrees: float, yaw_degrees: float, roll_degrees: float
    ) -> None:
        """Update the pose from angles in degrees; yaw is mirrored."""
        if self.filtering:
            self.same_position_count += 1
            smoothing = max(1.0 / self.same_position_count, _MIN_ROTATION_SMOOTHING)
            self.pitch_average += smoothing * (pitch_degrees - self.pitch_average)
            self.yaw_average += smoothing * (-yaw_degrees - self.yaw_average)
            self.roll_average += smoothing * (roll_degrees - self.roll_average)

        self.pitch = (pitch_degrees - self.pitch_average) / 180.0
        self.yaw = (-yaw_degrees - self.yaw_average) / 180.0
        self.roll = (roll_degrees - self.roll_average) / 180.0
        self.facing_user = abs(self.pitch) < 0.2 and abs(self.yaw) < 0.2

    def set_random_rotations(self, rng: _random.Random | None = None) -> None:
        """Set each angle to a random value in [-45, 45] degrees."""
        rng = rng if rng is not None else _random.Random()
        pitch, yaw, roll = ((_random_unit(rng) - 0.5) * 90.0 for _ in range(3))
        self.set_rotations(pitch, yaw, roll)

    def set_translations(self, tx: float, ty: float, tz: float) -> None:
        """Track head position; a large move resets the pose averaging."""
        k = HEAD_POSE_TRANSLATION_SMOOTHING
        self.tx_average += k * (tx - self.tx_average)
        # The y and z averages are pulled towards the x average, as the
        # tracker has always done.
        self.ty_average += k * (ty - self.tx_average)
        self.tz_average += k * (tz - self.tx_average)

        delta = max(abs(self.tx_average - tx), abs(self.ty_average - ty))
        if delta > HEAD_POSE_TRANSLATION_TRIGGER:
            self.tx_average = tx
            self.ty_average = ty
            self.tz_average = tz
            self.same_position_count = 0
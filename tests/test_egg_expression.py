import random

import pytest

from kinectsketch import egg_expression as ex
from kinectsketch.egg_expression import Expression, HeadPose
from kinectsketch.egg_geometry import EYE_BOTTOM, EYE_TOP, EYEBROW_BOTTOM


def test_too_few_action_units_rejected():
    with pytest.raises(ValueError):
        Expression.from_action_units([0.0] * 5)


def test_neutral_units_give_neutral_expression():
    assert Expression.from_action_units([0.0] * 6) == Expression()


def test_lip_lift_and_jaw_drop_ignore_negative_units():
    expression = Expression.from_action_units([-1.0, -1.0, 0, 0, 0, 0])
    assert expression.upper_lip_lift == 0.0
    assert expression.jaw_drop == 0.0


def test_positive_units_use_coefficients():
    expression = Expression.from_action_units([1.0, 1.0, 0, 0, 0, 0])
    assert expression.upper_lip_lift == pytest.approx(ex.AU0_LIP_LIFT_COEFFICIENT)
    assert expression.jaw_drop == pytest.approx(ex.AU1_JAW_DROP_COEFFICIENT)


def test_explicit_eyelid_units_are_used_directly():
    expression = Expression.from_action_units([0, 0, 0, 0, 0, 0, 0.01, -0.01])
    assert expression.upper_eyelid == pytest.approx(0.01)
    assert expression.lower_eyelid == pytest.approx(-0.01)


def test_explicit_eyelids_are_clamped():
    expression = Expression.from_action_units([0, 0, 0, 0, 0, 0, 5.0, 5.0])
    assert expression.upper_eyelid == EYE_TOP
    assert expression.lower_eyelid == -EYE_BOTTOM
    expression = Expression.from_action_units([0, 0, 0, 0, 0, 0, -5.0, -5.0])
    assert expression.upper_eyelid == -EYE_TOP
    assert expression.lower_eyelid == EYE_BOTTOM


def test_angry_eyes_only_lower_lid():
    expression = Expression.from_action_units([0, 0, 0, 0.2, 0, 0.1])
    assert expression.upper_eyelid == 0.0
    assert expression.lower_eyelid == pytest.approx(0.2 * ex.AU3_EYELIDS_COEFFICIENT)


def test_surprised_eyes_open_symmetrically():
    expression = Expression.from_action_units([0, 0.5, 0, -0.3, 0, 0])
    assert expression.upper_eyelid == pytest.approx(-expression.lower_eyelid)
    assert expression.upper_eyelid > 0


def test_sad_eyes_only_upper_lid():
    expression = Expression.from_action_units([0, 0, 0, 0, 0.5, -0.5])
    assert expression.lower_eyelid == 0.0
    assert expression.upper_eyelid == pytest.approx(-0.5 * ex.AU2_LOWER_EYELID_COEFFICIENT)


def test_eyebrows_kept_out_of_eyes():
    expression = Expression.from_action_units([0, 0, 0, 1.0, 0, -1.0])
    drop = expression.brow_lower - expression.outer_brow_raiser
    assert drop == pytest.approx(0.9 * EYEBROW_BOTTOM)
    assert expression.brow_lower > 0 > expression.outer_brow_raiser


def test_random_expression_is_reproducible_and_bounded():
    first = Expression.random(random.Random(7))
    second = Expression.random(random.Random(7))
    assert first == second
    assert -EYE_TOP <= first.upper_eyelid <= EYE_TOP
    assert EYE_BOTTOM <= first.lower_eyelid <= -EYE_BOTTOM
    assert abs(first.mouth_stretch) <= ex.AU2_LIP_STRETCH_COEFFICIENT


def test_rotations_without_filtering():
    pose = HeadPose()
    pose.set_rotations(30.0, 30.0, 10.0)
    assert pose.yaw == pytest.approx(-pose.pitch)
    assert pose.pitch * 180.0 == pytest.approx(30.0)
    assert pose.roll * 180.0 == pytest.approx(10.0)
    assert pose.facing_user is True


def test_large_pitch_is_not_facing_user():
    pose = HeadPose()
    pose.set_rotations(90.0, 0.0, 0.0)
    assert pose.facing_user is False


def test_filtering_treats_first_pose_as_neutral():
    pose = HeadPose(filtering=True)
    pose.set_rotations(40.0, 20.0, -15.0)
    assert pose.same_position_count == 1
    assert pose.pitch == pytest.approx(0.0)
    assert pose.yaw == pytest.approx(0.0)
    assert pose.roll == pytest.approx(0.0)
    assert pose.facing_user is True


def test_filtering_moves_average_towards_new_pose():
    pose = HeadPose(filtering=True)
    pose.set_rotations(0.0, 0.0, 0.0)
    pose.set_rotations(20.0, 0.0, 0.0)
    assert 0.0 < pose.pitch_average < 20.0
    assert pose.pitch > 0.0


def test_random_rotations_are_reproducible_and_bounded():
    first, second = HeadPose(), HeadPose()
    first.set_random_rotations(random.Random(3))
    second.set_random_rotations(random.Random(3))
    assert (first.pitch, first.yaw, first.roll) == (second.pitch, second.yaw, second.roll)
    for angle in (first.pitch, first.yaw, first.roll):
        assert abs(angle) <= 0.25 + 1e-9


def test_large_translation_resets_averaging():
    pose = HeadPose(filtering=True, same_position_count=5)
    pose.set_translations(1.0, 2.0, 3.0)
    assert (pose.tx_average, pose.ty_average, pose.tz_average) == (1.0, 2.0, 3.0)
    assert pose.same_position_count == 0


def test_small_translation_keeps_averaging():
    pose = HeadPose(filtering=True, same_position_count=5)
    pose.set_translations(0.01, 0.0, 0.0)
    assert pose.same_position_count == 5
    assert 0.0 < pose.tx_average < 0.01
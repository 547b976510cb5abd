import math

import pytest

from minex3.movement import (
    DEFAULT_MAX_SPEED,
    SCREEN_WRAP_MARGIN,
    MovementController,
    Transform,
    apply_movement,
    record_directional_input,
    rotation_toward,
    screen_wrap,
    ship_velocity,
)


def test_default_transform_axes():
    t = Transform()
    assert t.up() == pytest.approx((0.0, 1.0, 0.0))
    assert t.right() == pytest.approx((1.0, 0.0, 0.0))


def test_rotate_z_turns_up_axis_counter_clockwise():
    t = Transform()
    t.rotate_z(math.pi / 2)
    assert t.up() == pytest.approx((-1.0, 0.0, 0.0), abs=1e-9)
    assert t.right() == pytest.approx((0.0, 1.0, 0.0), abs=1e-9)


def test_no_input_means_no_intent():
    assert record_directional_input(set()) == (0.0, 0.0)


def test_single_direction():
    assert record_directional_input({"w"}) == (0.0, 1.0)
    assert record_directional_input({"up"}) == record_directional_input({"w"})
    assert record_directional_input({"left"}) == record_directional_input({"a"})


def test_opposite_keys_cancel():
    assert record_directional_input({"w", "s"}) == (0.0, 0.0)
    assert record_directional_input({"a", "d"}) == (0.0, 0.0)


def test_diagonal_is_normalised():
    x, y = record_directional_input({"w", "d"})
    assert math.hypot(x, y) == pytest.approx(1.0)
    assert x == pytest.approx(y)
    assert x > 0


def test_default_controller():
    controller = MovementController()
    assert controller.intent == (0.0, 0.0)
    assert controller.max_speed == 400.0


def test_apply_movement_moves_at_max_speed():
    controller = MovementController(intent=(1.0, 0.0))
    t = Transform(translation=(0.0, 0.0, 3.0))
    apply_movement(controller, t, 1.0)
    assert t.translation == pytest.approx((DEFAULT_MAX_SPEED, 0.0, 3.0))


def test_ship_velocity_without_thrust_is_zero():
    assert ship_velocity(Transform(), False, 320.0) == (0.0, 0.0)


def test_ship_velocity_follows_facing():
    assert ship_velocity(Transform(), True, 320.0) == pytest.approx((0.0, 320.0))
    t = Transform(rotation=0.7)
    vx, vy = ship_velocity(t, True, 320.0)
    assert math.hypot(vx, vy) == pytest.approx(320.0)
    ux, uy, _ = t.up()
    assert vx * uy - vy * ux == pytest.approx(0.0, abs=1e-9)


def test_no_rotation_when_target_close():
    t = Transform()
    assert rotation_toward(t, (30.0, 0.0), 1.0) == 0.0
    assert t.rotation == 0.0


def test_no_rotation_when_facing_target():
    t = Transform()
    assert rotation_toward(t, (0.0, 200.0), 1.0) == 0.0
    assert t.rotation == 0.0


def test_target_on_right_turns_clockwise():
    t = Transform()
    angle = rotation_toward(t, (100.0, 0.0), 0.01)
    assert angle < 0
    assert t.rotation == angle


def test_target_on_left_turns_counter_clockwise():
    t = Transform()
    angle = rotation_toward(t, (-100.0, 0.0), 0.01)
    assert angle > 0


def test_rotation_does_not_overshoot():
    t = Transform()
    rotation_toward(t, (100.0, 0.0), 1.0)
    assert t.up()[:2] == pytest.approx((1.0, 0.0), abs=1e-9)


def test_target_behind_turns_clockwise_by_half_turn():
    t = Transform()
    angle = rotation_toward(t, (0.0, -100.0), 1.0)
    assert angle == pytest.approx(-math.pi)


def test_screen_wrap_keeps_inside_positions():
    assert screen_wrap((100.0, -50.0), (800.0, 600.0)) == pytest.approx((100.0, -50.0))


@pytest.mark.parametrize("position", [(10000.0, -7000.0), (-529.0, 429.0), (528.0, 0.0)])
def test_screen_wrap_stays_in_bounds(position):
    window = (800.0, 600.0)
    x, y = screen_wrap(position, window)
    half_w = (window[0] + SCREEN_WRAP_MARGIN) / 2
    half_h = (window[1] + SCREEN_WRAP_MARGIN) / 2
    assert -half_w <= x < half_w
    assert -half_h <= y < half_h


def test_screen_wrap_is_periodic():
    window = (800.0, 600.0)
    width = window[0] + SCREEN_WRAP_MARGIN
    height = window[1] + SCREEN_WRAP_MARGIN
    a = screen_wrap((37.0, 12.0), window)
    b = screen_wrap((37.0 + width, 12.0 - 2 * height), window)
    assert b == pytest.approx(a)
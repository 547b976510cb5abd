"""Character movement: directional input, ship thrust, turning and screen wrap."""

from __future__ import annotations

import math
from collections.abc import Collection
from dataclasses import dataclass, field

DEFAULT_MAX_SPEED = 400.0
SCREEN_WRAP_MARGIN = 256.0
MIN_ROTATION_DISTANCE = 50.0
TURN_SPEED = math.radians(360.0)

_F32_EPSILON = 1.1920929e-07

_UP_KEYS = frozenset({"w", "up"})
_DOWN_KEYS = frozenset({"s", "down"})
_LEFT_KEYS = frozenset({"a", "left"})
_RIGHT_KEYS = frozenset({"d", "right"})


@dataclass
class Transform:
    """Position, rotation about the z axis (radians, counter-clockwise) and scale."""

    translation: tuple[float, float, float] = (0.0, 0.0, 0.0)
    rotation: float = 0.0
    scale: tuple[float, float, float] = (1.0, 1.0, 1.0)

    @property
    def xy(self) -> tuple[float, float]:
        return self.translation[0], self.translation[1]

    def up(self) -> tuple[float, float, float]:
        """The local +y axis in world space."""
        return -math.sin(self.rotation), math.cos(self.rotation), 0.0

    def right(self) -> tuple[float, float, float]:
        """The local +x axis in world space."""
        return math.cos(self.rotation), math.sin(self.rotation), 0.0

    def rotate_z(self, angle: float) -> None:
        """Rotate by ``angle`` radians about the z axis."""
        self.rotation += angle


@dataclass
class MovementController:
    """Desired movement direction and maximum speed in world units per second."""

    intent: tuple[float, float] = field(default=(0.0, 0.0))
    max_speed: float = DEFAULT_MAX_SPEED


def record_directional_input(pressed: Collection[str]) -> tuple[float, float]:
    """Movement intent from pressed key names, normalised so diagonals are not faster."""
    keys = {key.lower() for key in pressed}
    x = float(bool(keys & _RIGHT_KEYS)) - float(bool(keys & _LEFT_KEYS))
    y = float(bool(keys & _UP_KEYS)) - float(bool(keys & _DOWN_KEYS))
    length = math.hypot(x, y)
    if length == 0.0:
        return 0.0, 0.0
    return x / length, y / length


def apply_movement(
    controller: MovementController, transform: Transform, delta_secs: float
) -> Transform:
    """Move ``transform`` along the controller's intent for ``delta_secs``."""
    ix, iy = controller.intent
    x, y, z = transform.translation
    step = controller.max_speed * delta_secs
    transform.translation = (x + ix * step, y + iy * step, z)
    return transform


def ship_velocity(
    transform: Transform, thrusting: bool, ship_speed: float
) -> tuple[float, float]:
    """Linear velocity of a ship facing along its up vector."""
    factor = 1.0 if thrusting else 0.0
    ux, uy, _ = transform.up()
    distance = factor * ship_speed
    return ux * distance, uy * distance


def rotation_toward(
    transform: Transform, target: tuple[float, float], delta_secs: float
) -> float:
    """Turn ``transform`` toward ``target`` without overshooting.

    Returns the angle applied, which is zero when the target is too close or
    already straight ahead.
    """
    px, py = transform.xy
    dx, dy = target[0] - px, target[1] - py
    distance = math.hypot(dx, dy)
    if distance <= MIN_ROTATION_DISTANCE:
        return 0.0

    to_target = (dx / distance, dy / distance)
    fx, fy, _ = transform.up()
    forward_dot = fx * to_target[0] + fy * to_target[1]
    if abs(forward_dot - 1.0) < _F32_EPSILON:
        return 0.0

    rx, ry, _ = transform.right()
    right_dot = rx * to_target[0] + ry * to_target[1]
    # Positive rotation about +z is counter-clockwise, so a target on the right
    # needs a negative angle.
    sign = -math.copysign(1.0, right_dot)
    max_angle = math.acos(max(-1.0, min(1.0, forward_dot)))
    angle = sign * min(TURN_SPEED * delta_secs, max_angle)
    transform.rotate_z(angle)
    return angle


def screen_wrap(
    position: tuple[float, float], window_size: tuple[float, float]
) -> tuple[float, float]:
    """Wrap ``position`` into the window enlarged by a margin, centred on the origin."""
    width = window_size[0] + SCREEN_WRAP_MARGIN
    height = window_size[1] + SCREEN_WRAP_MARGIN
    half_w, half_h = width / 2.0, height / 2.0
    return (
        (position[0] + half_w) % width - half_w,
        (position[1] + half_h) % height - half_h,
    )
"""A ship weapon with a fire-rate cooldown and the projectiles it fires."""

from __future__ import annotations

from dataclasses import dataclass, field

from minex3.core import Timer, TimerMode
from minex3.movement import Transform

PROJECTILE_SPEED = 500.0
PROJECTILE_FORWARD_SPAWN_SCALAR = 30.0
PROJECTILE_DESPAWN_TIME_SECONDS = 2.0
WEAPON_FIRE_RATE = 0.16
PROJECTILE_RADIUS = 100.0
PROJECTILE_SCALE = 0.03


def _despawn_timer() -> Timer:
    return Timer.from_seconds(PROJECTILE_DESPAWN_TIME_SECONDS, TimerMode.ONCE)


def _cooldown_timer() -> Timer:
    return Timer.from_seconds(WEAPON_FIRE_RATE, TimerMode.ONCE)


@dataclass
class Projectile:
    """A shot in flight that disappears after a fixed time."""

    position: tuple[float, float, float]
    velocity: tuple[float, float]
    despawn_timer: Timer = field(default_factory=_despawn_timer)
    radius: float = PROJECTILE_RADIUS
    scale: float = PROJECTILE_SCALE

    def tick(self, delta: float) -> None:
        """Advance the projectile's lifetime and position by ``delta`` seconds."""
        self.despawn_timer.tick(delta)
        x, y, z = self.position
        vx, vy = self.velocity
        self.position = (x + vx * delta, y + vy * delta, z)

    def expired(self) -> bool:
        """Whether the projectile has outlived its lifetime."""
        return self.despawn_timer.finished()


@dataclass
class Weapon:
    """Fires projectiles no faster than its cooldown allows."""

    fire_rate_timer: Timer = field(default_factory=_cooldown_timer)

    def tick(self, delta: float) -> None:
        """Advance the cooldown by ``delta`` seconds."""
        self.fire_rate_timer.tick(delta)

    def fire(self, transform: Transform) -> Projectile | None:
        """Fire from ``transform`` if the cooldown is over; otherwise return None."""
        if not self.fire_rate_timer.finished():
            return None
        self.fire_rate_timer = _cooldown_timer()

        ux, uy, uz = transform.up()
        x, y, z = transform.translation
        spawn = (
            x + ux * PROJECTILE_FORWARD_SPAWN_SCALAR,
            y + uy * PROJECTILE_FORWARD_SPAWN_SCALAR,
            z + uz * PROJECTILE_FORWARD_SPAWN_SCALAR,
        )
        velocity = (ux * PROJECTILE_SPEED, uy * PROJECTILE_SPEED)
        return Projectile(spawn, velocity)
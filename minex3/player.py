"""The player's fighter ship, the assets it needs and the gameplay level."""

from __future__ import annotations

import math
from collections.abc import Collection
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, ClassVar

from minex3.animation import AnimationIndices, SpriteAnimation
from minex3.audio import AudioInstance, music
from minex3.movement import (
    MovementController,
    Transform,
    record_directional_input,
    rotation_toward,
    screen_wrap,
    ship_velocity,
)

SHIP_SPEED = 320.0
ROTATION_SPEED = 360.0
POWERED_ANIMATION_INDICES = AnimationIndices(first=0, last=7)
ENGINE_FPS = 12.0
ENGINE_FRAME_SIZE = 64
ENGINE_FRAME_COUNT = 8
ENGINE_OFFSET = (0.0, -0.3, 0.0)
BASE_OFFSET = (0.0, 0.0, 2.0)
SHIP_SCALE = 1.6
COLLIDER_RADIUS = 8.0
COLLIDER_LENGTH = 12.0
THRUST_KEY = "w"

FIGHTER_BASE_IMAGE = "images/Fighter - Base.png"
FIGHTER_ENGINE_IMAGE = "images/Fighter - Engine.png"
PLAYER_IMAGE = "images/ducky.png"
STEP_SOUNDS = (
    "audio/sound_effects/step1.ogg",
    "audio/sound_effects/step2.ogg",
    "audio/sound_effects/step3.ogg",
    "audio/sound_effects/step4.ogg",
)
LEVEL_MUSIC = "audio/music/Fluffing A Duck.ogg"


@dataclass(frozen=True)
class ShipAssets:
    """Image files that make up the fighter ship."""

    DEPENDENCIES: ClassVar[tuple[str, ...]] = (FIGHTER_BASE_IMAGE, FIGHTER_ENGINE_IMAGE)

    fighter_base: Path
    fighter_engine_effect_sheet: Path

    @classmethod
    def load(cls, directory: str | Path) -> ShipAssets:
        """Ship assets located under the asset ``directory``."""
        root = Path(directory)
        return cls(root / FIGHTER_BASE_IMAGE, root / FIGHTER_ENGINE_IMAGE)


def _ship_transform() -> Transform:
    return Transform(scale=(SHIP_SCALE, SHIP_SCALE, 1.0))


def _ship_controller() -> MovementController:
    return MovementController(max_speed=SHIP_SPEED)


def _engine_animation() -> SpriteAnimation:
    return SpriteAnimation.with_fps(POWERED_ANIMATION_INDICES, ENGINE_FPS)


@dataclass
class PlayerShip:
    """The player-controlled fighter with its hidden-until-thrusting engine flame."""

    name: str = "Nairan Fighter"
    transform: Transform = field(default_factory=_ship_transform)
    controller: MovementController = field(default_factory=_ship_controller)
    ship_speed: float = SHIP_SPEED
    rotation_speed: float = math.radians(ROTATION_SPEED)
    velocity: tuple[float, float] = (0.0, 0.0)
    engine: SpriteAnimation = field(default_factory=_engine_animation)
    collider_radius: float = COLLIDER_RADIUS
    collider_length: float = COLLIDER_LENGTH

    def update(
        self,
        pressed_keys: Collection[str],
        right_mouse: bool,
        cursor: tuple[float, float] | None,
        delta_secs: float,
        window_size: tuple[float, float],
    ) -> None:
        """Advance the ship by one frame.

        ``cursor`` is the cursor's world position, or None when it is outside
        the window; the ship turns toward it while ``right_mouse`` is held.
        """
        keys = {key.lower() for key in pressed_keys}
        thrusting = THRUST_KEY in keys

        self.engine.tick(delta_secs)
        self.controller.intent = record_directional_input(keys)

        if thrusting:
            self.engine.start()
        else:
            self.engine.stop()

        self.velocity = ship_velocity(self.transform, thrusting, self.ship_speed)
        x, y, z = self.transform.translation
        vx, vy = self.velocity
        self.transform.translation = (x + vx * delta_secs, y + vy * delta_secs, z)

        if right_mouse and cursor is not None:
            rotation_toward(self.transform, cursor, delta_secs)

        wx, wy = screen_wrap(self.transform.xy, window_size)
        self.transform.translation = (wx, wy, z)

    def engine_frame(self) -> int | None:
        """Atlas index of the engine flame, or None while it is hidden."""
        if not self.engine.visible:
            return None
        return self.engine.index


def fighter_ship() -> PlayerShip:
    """A fresh fighter ship at the origin."""
    return PlayerShip()


@dataclass
class Level:
    """The gameplay level: the player's ship and its background music."""

    ship: PlayerShip
    music: AudioInstance
    name: str = "Level"
    music_name: str = "Gameplay Music"


def spawn_level(music_source: Any) -> Level:
    """Create the main level playing ``music_source`` in a loop."""
    return Level(ship=fighter_ship(), music=music(music_source))
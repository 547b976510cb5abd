"""Player sprite animation and frame-by-frame sprite-sheet animations."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import ClassVar

from minex3.core import Timer, TimerMode


class PlayerAnimationState(enum.Enum):
    """Whether the player is standing still or moving."""

    IDLING = "idling"
    WALKING = "walking"


@dataclass
class PlayerAnimation:
    """Tracks the player's animation frame; tightly bound to its texture atlas."""

    IDLE_FRAMES: ClassVar[int] = 2
    IDLE_INTERVAL: ClassVar[float] = 0.5
    WALKING_FRAMES: ClassVar[int] = 6
    WALKING_INTERVAL: ClassVar[float] = 0.05
    WALKING_ATLAS_OFFSET: ClassVar[int] = 6
    STEP_FRAMES: ClassVar[frozenset[int]] = frozenset({2, 5})

    state: PlayerAnimationState = PlayerAnimationState.IDLING
    frame: int = 0
    timer: Timer = field(init=False)

    def __post_init__(self) -> None:
        self.timer = self._timer_for(self.state)

    @classmethod
    def _timer_for(cls, state: PlayerAnimationState) -> Timer:
        interval = (
            cls.IDLE_INTERVAL if state is PlayerAnimationState.IDLING else cls.WALKING_INTERVAL
        )
        return Timer.from_seconds(interval, TimerMode.REPEATING)

    def _frame_count(self) -> int:
        if self.state is PlayerAnimationState.IDLING:
            return self.IDLE_FRAMES
        return self.WALKING_FRAMES

    def update_timer(self, delta: float) -> None:
        """Advance the frame timer by ``delta`` seconds."""
        self.timer.tick(delta)
        if self.timer.finished():
            self.frame = (self.frame + 1) % self._frame_count()

    def update_state(self, state: PlayerAnimationState) -> None:
        """Switch to ``state``, restarting the animation only if it differs."""
        if self.state is not state:
            self.state = state
            self.frame = 0
            self.timer = self._timer_for(state)

    def changed(self) -> bool:
        """Whether the frame changed during the last tick."""
        return self.timer.finished()

    def atlas_index(self) -> int:
        """Index of the current sprite in the atlas."""
        if self.state is PlayerAnimationState.IDLING:
            return self.frame
        return self.WALKING_ATLAS_OFFSET + self.frame

    def step_sound_due(self) -> bool:
        """Whether a footstep sound should play on this tick."""
        return (
            self.state is PlayerAnimationState.WALKING
            and self.changed()
            and self.frame in self.STEP_FRAMES
        )


@dataclass(frozen=True)
class AnimationIndices:
    """First and last atlas index of a looping sprite animation."""

    first: int
    last: int


@dataclass
class SpriteAnimation:
    """A sprite-sheet animation that can be started and stopped."""

    indices: AnimationIndices
    timer: Timer
    index: int | None = None
    playing: bool = False
    visible: bool = False

    def __post_init__(self) -> None:
        if self.index is None:
            self.index = self.indices.first

    @classmethod
    def with_fps(cls, indices: AnimationIndices, fps: float) -> SpriteAnimation:
        """An animation showing ``fps`` frames per second."""
        if fps <= 0:
            raise ValueError(f"frames per second must be positive, got {fps}")
        return cls(indices, Timer.from_seconds(1.0 / fps, TimerMode.REPEATING))

    def start(self) -> None:
        """Show the animation from its first frame; no effect if already playing."""
        if self.playing:
            return
        self.index = self.indices.first
        self.timer.reset()
        self.playing = True
        self.visible = True

    def stop(self) -> None:
        """Hide the animation; no effect if it is not playing."""
        if not self.playing:
            return
        self.playing = False
        self.visible = False

    def tick(self, delta: float) -> int:
        """Advance the timer and, while playing, the frame; returns the atlas index."""
        self.timer.tick(delta)
        if self.playing and self.timer.just_finished():
            if self.index == self.indices.last:
                self.index = self.indices.first
            else:
                self.index += 1
        return self.index


def flip_for_intent(dx: float, current: bool) -> bool:
    """Whether the sprite should be mirrored given horizontal intent ``dx``."""
    if dx != 0.0:
        return dx < 0.0
    return current
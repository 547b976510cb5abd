"""Timers, system ordering and the physics clock shared by the whole game."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

WINDOW_TITLE = "Mine x3"
# One metre of simulated space corresponds to this many pixels.
LENGTH_UNIT = 64.0

_MAX_TIMES_FINISHED = 2**32 - 1


class TimerMode(enum.Enum):
    """Whether a timer stops when it finishes or starts over."""

    ONCE = "once"
    REPEATING = "repeating"


@dataclass
class Timer:
    """A countdown measured in seconds, advanced explicitly with :meth:`tick`."""

    duration: float
    mode: TimerMode = TimerMode.ONCE
    elapsed: float = 0.0
    _finished: bool = field(default=False, init=False, repr=False)
    _times_finished: int = field(default=0, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.duration < 0:
            raise ValueError(f"timer duration must not be negative, got {self.duration}")

    @classmethod
    def from_seconds(cls, seconds: float, mode: TimerMode) -> Timer:
        """Create a timer lasting ``seconds``."""
        return cls(float(seconds), mode)

    @property
    def times_finished_this_tick(self) -> int:
        """How many times the timer completed during the last tick."""
        return self._times_finished

    def tick(self, delta: float) -> Timer:
        """Advance the timer by ``delta`` seconds."""
        if delta < 0:
            raise ValueError(f"cannot tick a timer by a negative amount, got {delta}")
        if self.mode is TimerMode.ONCE and self._finished:
            self._times_finished = 0
            return self

        self.elapsed += delta
        self._finished = self.elapsed >= self.duration
        if not self._finished:
            self._times_finished = 0
        elif self.mode is TimerMode.REPEATING:
            if self.duration > 0:
                self._times_finished = int(self.elapsed // self.duration)
                self.elapsed %= self.duration
            else:
                self._times_finished = _MAX_TIMES_FINISHED
                self.elapsed = 0.0
        else:
            self._times_finished = 1
            self.elapsed = self.duration
        return self

    def finished(self) -> bool:
        """True once the timer has reached its duration (for one tick if repeating)."""
        return self._finished

    def just_finished(self) -> bool:
        """True only during the tick in which the timer completed."""
        return self._times_finished > 0

    def reset(self) -> None:
        """Start the timer over from zero."""
        self.elapsed = 0.0
        self._finished = False
        self._times_finished = 0


class AppSystems(enum.IntEnum):
    """High-level groups of per-frame work, in the order they run."""

    TICK_TIMERS = 1
    RECORD_INPUT = 2
    UPDATE = 3


@dataclass
class PhysicsClock:
    """Simulation time that stops advancing while the game is paused."""

    elapsed: float = 0.0
    paused: bool = False

    def pause(self) -> None:
        self.paused = True

    def unpause(self) -> None:
        self.paused = False

    def advance(self, delta: float) -> float:
        """Advance by ``delta`` seconds and return the time that actually passed."""
        if self.paused:
            return 0.0
        self.elapsed += delta
        return delta
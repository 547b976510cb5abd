"""The splash screen that fades an image in and out at startup."""

from __future__ import annotations

from dataclasses import dataclass, field

from minex3.core import Timer, TimerMode
from minex3.states import Screen

SPLASH_BACKGROUND_COLOR = (40, 40, 40)
SPLASH_DURATION_SECS = 1.8
SPLASH_FADE_DURATION_SECS = 0.6
SPLASH_IMAGE = "images/splash.png"
SPLASH_IMAGE_WIDTH_PERCENT = 70.0


@dataclass
class ImageFadeInOut:
    """Opacity that rises, holds at full and falls over ``total_duration`` seconds."""

    total_duration: float
    fade_duration: float
    t: float = 0.0

    def __post_init__(self) -> None:
        if self.total_duration <= 0:
            raise ValueError(f"total duration must be positive, got {self.total_duration}")
        if self.fade_duration <= 0:
            raise ValueError(f"fade duration must be positive, got {self.fade_duration}")

    def alpha(self) -> float:
        """Current opacity between 0 and 1."""
        t = min(1.0, max(0.0, self.t / self.total_duration))
        fade = self.fade_duration / self.total_duration
        # Trapezoid shape, flat at the top with full opacity.
        return min(1.0, (1.0 - abs(2.0 * t - 1.0)) / fade)

    def tick(self, delta_secs: float) -> None:
        self.t += delta_secs


def _splash_fade() -> ImageFadeInOut:
    return ImageFadeInOut(SPLASH_DURATION_SECS, SPLASH_FADE_DURATION_SECS)


def _splash_timer() -> Timer:
    return Timer.from_seconds(SPLASH_DURATION_SECS, TimerMode.ONCE)


@dataclass
class SplashScreen:
    """Shows the splash image, then asks for the title screen."""

    fade: ImageFadeInOut = field(default_factory=_splash_fade)
    timer: Timer = field(default_factory=_splash_timer)
    requested: Screen | None = None

    @property
    def alpha(self) -> float:
        return self.fade.alpha()

    def tick(self, delta_secs: float) -> Screen | None:
        """Advance the splash; returns the title screen on the tick the timer ends."""
        self.fade.tick(delta_secs)
        self.timer.tick(delta_secs)
        if self.timer.just_finished():
            self.requested = Screen.TITLE
            return Screen.TITLE
        return None

    def skip(self) -> Screen:
        """Leave the splash early."""
        self.requested = Screen.TITLE
        return Screen.TITLE
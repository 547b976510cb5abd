"""Screen, menu and pause states with deferred transitions."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

T = TypeVar("T")

_UNSET: Any = object()


class Screen(enum.Enum):
    """The game's main screens."""

    SPLASH = "splash"
    TITLE = "title"
    LOADING = "loading"
    GAMEPLAY = "gameplay"


class Menu(enum.Enum):
    """The menu shown on top of the current screen, if any."""

    NONE = "none"
    MAIN = "main"
    CREDITS = "credits"
    SETTINGS = "settings"
    PAUSE = "pause"


class StateMachine(Generic[T]):
    """Holds a current state and a requested next state applied later."""

    def __init__(self, initial: T) -> None:
        self.current: T = initial
        self._pending: T = _UNSET

    @property
    def pending(self) -> T | None:
        """The requested next state, or None if nothing is requested."""
        return None if self._pending is _UNSET else self._pending

    def set(self, state: T) -> None:
        """Request a transition; the last request before applying wins."""
        self._pending = state

    def apply_transition(self) -> tuple[T, T] | None:
        """Apply the pending request and return ``(old, new)``.

        A request for the current state still counts as a transition.
        """
        if self._pending is _UNSET:
            return None
        old, new = self.current, self._pending
        self.current = new
        self._pending = _UNSET
        return old, new


@dataclass
class GameStates:
    """All the independent state machines of the game."""

    screen: StateMachine[Screen] = field(default_factory=lambda: StateMachine(Screen.SPLASH))
    menu: StateMachine[Menu] = field(default_factory=lambda: StateMachine(Menu.NONE))
    pause: StateMachine[bool] = field(default_factory=lambda: StateMachine(False))

    @property
    def paused(self) -> bool:
        return self.pause.current

    def apply_transitions(self) -> list[tuple[str, Any, Any]]:
        """Apply every pending request, returning ``(kind, old, new)`` triples."""
        machines = (("screen", self.screen), ("menu", self.menu), ("pause", self.pause))
        transitions = []
        for kind, machine in machines:
            change = machine.apply_transition()
            if change is not None:
                transitions.append((kind, *change))
        return transitions
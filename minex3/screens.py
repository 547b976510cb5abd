"""Screen flow: title, loading and gameplay, and pausing during gameplay."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from minex3.asset_tracking import ResourceHandles
from minex3.states import GameStates, Menu, Screen

PAUSE_KEYS = frozenset({"p", "escape"})
CLOSE_MENU_KEY = "p"
PAUSE_OVERLAY_COLOR = (0, 0, 0, 204)


class ScreenFlow:
    """Reacts to keys and state transitions to move between screens."""

    def __init__(
        self,
        states: GameStates,
        resources: ResourceHandles,
        level_factory: Callable[[], Any] | None = None,
    ) -> None:
        self.states = states
        self.resources = resources
        self.level_factory = level_factory
        self.level: Any = None
        self.pause_overlay = False

    def _in_gameplay(self) -> bool:
        return self.states.screen.current is Screen.GAMEPLAY

    def handle_key(self, key: str) -> None:
        """Pause on P or Escape during gameplay; close an open menu on P."""
        key = key.lower()
        if not self._in_gameplay():
            return
        if self.states.menu.current is Menu.NONE:
            if key in PAUSE_KEYS:
                self.states.pause.set(True)
                self.pause_overlay = True
                self.states.menu.set(Menu.PAUSE)
        elif key == CLOSE_MENU_KEY:
            self.states.menu.set(Menu.NONE)

    def update(self) -> None:
        """Leave the loading screen once every resource is ready."""
        if self.states.screen.current is Screen.LOADING and self.resources.is_all_done():
            self.states.screen.set(Screen.GAMEPLAY)

    def on_transition(self, kind: str, old: Any, new: Any) -> None:
        """Run the exit and enter actions of a transition ``(kind, old, new)``."""
        if kind == "screen":
            if old is Screen.GAMEPLAY:
                self.states.menu.set(Menu.NONE)
                self.states.pause.set(False)
                self.level = None
            elif old is Screen.TITLE:
                self.states.menu.set(Menu.NONE)
            if new is Screen.TITLE:
                self.states.menu.set(Menu.MAIN)
            elif new is Screen.GAMEPLAY and self.level_factory is not None:
                self.level = self.level_factory()
        elif kind == "menu":
            if new is Menu.NONE and self._in_gameplay():
                self.states.pause.set(False)
        elif kind == "pause":
            if not new:
                self.pause_overlay = False
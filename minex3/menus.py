"""The main, credits, pause and settings menus and the transitions between them."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from minex3.asset_tracking import ResourceHandles
from minex3.audio import AudioMixer
from minex3.states import GameStates, Menu, Screen
from minex3.theme import Button, Widget, button, button_small, header, label

MIN_VOLUME = 0.0
MAX_VOLUME = 3.0
VOLUME_STEP = 0.1

CREDITS_MUSIC = "audio/music/Monkeys Spinning Monkeys.ogg"

_CREATED_BY = (
    ("Joe Shmoe", "Implemented alligator wrestling AI"),
    ("Jane Doe", "Made the music for the alien invasion"),
)
_ASSET_CREDITS = (
    ("Ducky sprite", "CC0 by Caz Creates Games"),
    ("Button SFX", "CC0 by Jaszunio15"),
    ("Music", "CC BY 3.0 by Kevin MacLeod"),
    ("Splash logo", "Shown unmodified on the splash screen"),
)


def lower_volume(volume: float) -> float:
    """The volume one step quieter, never below the minimum."""
    return max(MIN_VOLUME, volume - VOLUME_STEP)


def raise_volume(volume: float) -> float:
    """The volume one step louder, never above the maximum."""
    return min(MAX_VOLUME, volume + VOLUME_STEP)


def format_volume(volume: float) -> str:
    """The volume as a percentage label, e.g. ``" 90%"``."""
    return f"{100.0 * volume:3.0f}%"


def settings_back_target(screen: Screen) -> Menu:
    """The menu the settings menu returns to from ``screen``."""
    return Menu.MAIN if screen is Screen.TITLE else Menu.PAUSE


def credits_rows() -> dict[str, list[tuple[str, str]]]:
    """Credit rows grouped by section, each row a ``(name, description)`` pair."""
    return {"Created by": list(_CREATED_BY), "Assets": list(_ASSET_CREDITS)}


class MenuController:
    """Builds the widgets of the current menu and carries out button presses."""

    def __init__(
        self,
        states: GameStates,
        resources: ResourceHandles,
        mixer: AudioMixer,
        on_exit: Callable[[], Any] | None = None,
        allow_exit: bool = True,
    ) -> None:
        self.states = states
        self.resources = resources
        self.mixer = mixer
        self.on_exit = on_exit
        self.allow_exit = allow_exit

    def _set_menu(self, menu: Menu) -> Callable[[], None]:
        return lambda: self.states.menu.set(menu)

    def _play(self) -> None:
        target = Screen.GAMEPLAY if self.resources.is_all_done() else Screen.LOADING
        self.states.screen.set(target)

    def _exit(self) -> None:
        if self.on_exit is not None:
            self.on_exit()

    def _settings_back(self) -> None:
        self.states.menu.set(settings_back_target(self.states.screen.current))

    def _lower(self) -> None:
        self.mixer.set_global_volume(lower_volume(self.mixer.global_volume))

    def _raise(self) -> None:
        self.mixer.set_global_volume(raise_volume(self.mixer.global_volume))

    def widgets(self) -> list[Widget]:
        """Widgets of the current menu, top to bottom; empty when no menu is open."""
        menu = self.states.menu.current
        if menu is Menu.MAIN:
            items: list[Widget] = [
                button("Play", self._play),
                button("Settings", self._set_menu(Menu.SETTINGS)),
                button("Credits", self._set_menu(Menu.CREDITS)),
            ]
            if self.allow_exit:
                items.append(button("Exit", self._exit))
            return items
        if menu is Menu.CREDITS:
            items = []
            for section, rows in credits_rows().items():
                items.append(header(section))
                for name, description in rows:
                    items.append(label(f"{name}  {description}"))
            items.append(button("Back", self._set_menu(Menu.MAIN)))
            return items
        if menu is Menu.PAUSE:
            return [
                header("Game paused"),
                button("Continue", self._set_menu(Menu.NONE)),
                button("Settings", self._set_menu(Menu.SETTINGS)),
                button("Quit to title", lambda: self.states.screen.set(Screen.TITLE)),
            ]
        if menu is Menu.SETTINGS:
            return [
                header("Settings"),
                label("Master Volume"),
                button_small("-", self._lower),
                label(format_volume(self.mixer.global_volume)),
                button_small("+", self._raise),
                button("Back", self._settings_back),
            ]
        return []

    def press(self, text: str) -> None:
        """Press the button labelled ``text``; raises KeyError if there is none."""
        for widget in self.widgets():
            if isinstance(widget, Button) and widget.text == text:
                widget.action()
                return
        raise KeyError(f"no button {text!r} in menu {self.states.menu.current.name}")

    def handle_escape(self) -> None:
        """Go back from the credits, pause or settings menu."""
        menu = self.states.menu.current
        if menu is Menu.CREDITS:
            self.states.menu.set(Menu.MAIN)
        elif menu is Menu.PAUSE:
            self.states.menu.set(Menu.NONE)
        elif menu is Menu.SETTINGS:
            self._settings_back()
"""The game application: ties states, menus, screens and gameplay together."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Any

from minex3.asset_tracking import ResourceHandles
from minex3.audio import AudioCategory, AudioMixer, music
from minex3.camera import Camera2D, CursorError, cursor_world_position
from minex3.core import WINDOW_TITLE, PhysicsClock
from minex3.menus import CREDITS_MUSIC, MenuController
from minex3.player import LEVEL_MUSIC, PLAYER_IMAGE, STEP_SOUNDS, ShipAssets, spawn_level
from minex3.screens import ScreenFlow
from minex3.splash import SPLASH_BACKGROUND_COLOR, SplashScreen
from minex3.states import GameStates, Menu, Screen
from minex3.theme import INTERACTION_SOUNDS, Button, Text, layout_column

DEBUG_TOGGLE_KEY = "`"
DEFAULT_WINDOW_SIZE = (1280.0, 720.0)


class Game:
    """Headless game state advanced one frame at a time by :meth:`step`.

    Events are tuples: ``("key_down", name)``, ``("key_up", name)``,
    ``("mouse_down", button)``, ``("mouse_up", button)``, ``("cursor", pos)``,
    ``("click", pos)``, ``("press", text)`` and ``("quit",)``.
    """

    def __init__(
        self,
        window_size: tuple[float, float] = DEFAULT_WINDOW_SIZE,
        asset_dir: str | Path = "assets",
        asset_loaded: Callable[[str], bool] | None = None,
        audio_backend: Any = None,
    ) -> None:
        self.window_size = window_size
        self.asset_dir = Path(asset_dir)
        self._asset_loaded = asset_loaded or (lambda path: True)
        self.states = GameStates()
        self.resources = ResourceHandles()
        self.mixer = AudioMixer(audio_backend)
        self.physics = PhysicsClock()
        self.camera = Camera2D(window_size)
        self.running = True
        self.debug_ui = False
        self.pressed: set[str] = set()
        self.buttons: set[str] = set()
        self.cursor: tuple[float, float] | None = None
        self.splash: SplashScreen | None = SplashScreen()
        self.transition_log: list[tuple[str, Any, Any]] = []

        asset = lambda p: self.asset_dir / p  # noqa: E731
        self.resources.load_resource("level", [LEVEL_MUSIC], lambda: asset(LEVEL_MUSIC))
        self.resources.load_resource(
            "player", [PLAYER_IMAGE, *STEP_SOUNDS], lambda: asset(PLAYER_IMAGE)
        )
        self.resources.load_resource(
            "ship", ShipAssets.DEPENDENCIES, lambda: ShipAssets.load(self.asset_dir)
        )
        self.resources.load_resource("credits", [CREDITS_MUSIC], lambda: asset(CREDITS_MUSIC))
        self.resources.load_resource(
            "interaction", INTERACTION_SOUNDS, lambda: [asset(p) for p in INTERACTION_SOUNDS]
        )

        self.menus = MenuController(self.states, self.resources, self.mixer, on_exit=self._quit)
        self.flow = ScreenFlow(self.states, self.resources, level_factory=self._new_level)

    def _quit(self) -> None:
        self.running = False

    def _new_level(self) -> Any:
        return spawn_level(self.resources.get("level") or self.asset_dir / LEVEL_MUSIC)

    @property
    def level(self) -> Any:
        return self.flow.level

    def _apply_transitions(self) -> None:
        for kind, old, new in self.states.apply_transitions():
            self.transition_log.append((kind, old, new))
            self.flow.on_transition(kind, old, new)
            if kind == "screen":
                if old is Screen.SPLASH:
                    self.splash = None
                if old is Screen.GAMEPLAY:
                    self.mixer.stop_category(AudioCategory.MUSIC)
                if new is Screen.GAMEPLAY and self.flow.level is not None:
                    self.mixer.play(self.flow.level.music)
            elif kind == "menu":
                if old is Menu.CREDITS:
                    self.mixer.stop_category(AudioCategory.MUSIC)
                if new is Menu.CREDITS:
                    source = self.resources.get("credits") or self.asset_dir / CREDITS_MUSIC
                    self.mixer.play(music(source))
            elif kind == "pause":
                if new:
                    self.physics.pause()
                else:
                    self.physics.unpause()

    def _key_down(self, key: str) -> None:
        self.pressed.add(key)
        if key == DEBUG_TOGGLE_KEY:
            self.debug_ui = not self.debug_ui
        if key == "escape":
            if self.states.screen.current is Screen.SPLASH and self.splash is not None:
                self.states.screen.set(self.splash.skip())
            self.menus.handle_escape()
        self.flow.handle_key(key)

    def _click(self, position: tuple[float, float]) -> None:
        widgets = self.menus.widgets()
        center = (self.window_size[0] / 2, self.window_size[1] / 2)
        layout_column(widgets, center)
        for widget in widgets:
            if isinstance(widget, Button) and widget.contains(position):
                widget.action()
                return

    def _handle(self, event: tuple[Any, ...]) -> None:
        kind = event[0]
        if kind == "quit":
            self._quit()
        elif kind == "key_down":
            self._key_down(str(event[1]).lower())
        elif kind == "key_up":
            self.pressed.discard(str(event[1]).lower())
        elif kind == "mouse_down":
            self.buttons.add(event[1])
        elif kind == "mouse_up":
            self.buttons.discard(event[1])
        elif kind == "cursor":
            self.cursor = event[1]
        elif kind == "click":
            self._click(event[1])
        elif kind == "press":
            self.menus.press(event[1])
        else:
            raise ValueError(f"unknown event {kind!r}")

    def step(self, delta_secs: float, events: Iterable[tuple[Any, ...]]) -> bool:
        """Advance one frame; returns whether the game is still running."""
        self._apply_transitions()
        for event in events:
            self._handle(event)

        if self.splash is not None and self.states.screen.current is Screen.SPLASH:
            target = self.splash.tick(delta_secs)
            if target is not None:
                self.states.screen.set(target)

        passed = self.physics.advance(delta_secs)
        level = self.flow.level
        if level is not None and not self.states.paused:
            try:
                world_cursor = cursor_world_position(self.camera, self.cursor)
            except CursorError:
                world_cursor = None
            level.ship.update(
                self.pressed, "right" in self.buttons, world_cursor, passed, self.window_size
            )

        self.resources.poll(self._asset_loaded)
        self.flow.update()
        self.mixer.update()
        return self.running

    def run(self) -> None:
        """Open a window and play until it is closed."""
        import pygame

        pygame.init()
        width, height = int(self.window_size[0]), int(self.window_size[1])
        surface = pygame.display.set_mode((width, height))
        pygame.display.set_caption(WINDOW_TITLE)
        clock = pygame.time.Clock()
        fonts: dict[int, Any] = {}
        mouse_names = {1: "left", 2: "middle", 3: "right"}
        try:
            while self.running:
                delta = clock.tick(60) / 1000.0
                events: list[tuple[Any, ...]] = []
                for ev in pygame.event.get():
                    if ev.type == pygame.QUIT:
                        events.append(("quit",))
                    elif ev.type == pygame.KEYDOWN:
                        events.append(("key_down", pygame.key.name(ev.key)))
                    elif ev.type == pygame.KEYUP:
                        events.append(("key_up", pygame.key.name(ev.key)))
                    elif ev.type == pygame.MOUSEMOTION:
                        events.append(("cursor", tuple(map(float, ev.pos))))
                    elif ev.type == pygame.MOUSEBUTTONDOWN:
                        events.append(("mouse_down", mouse_names.get(ev.button, "")))
                        if ev.button == 1:
                            events.append(("click", tuple(map(float, ev.pos))))
                    elif ev.type == pygame.MOUSEBUTTONUP:
                        events.append(("mouse_up", mouse_names.get(ev.button, "")))
                if not pygame.mouse.get_focused():
                    events.append(("cursor", None))
                self.step(delta, events)
                self._draw(pygame, surface, fonts)
                pygame.display.flip()
        finally:
            pygame.quit()

    def _draw(self, pygame: Any, surface: Any, fonts: dict[int, Any]) -> None:
        surface.fill(SPLASH_BACKGROUND_COLOR)
        if self.splash is not None:
            shade = int(255 * self.splash.alpha)
            rect = surface.get_rect()
            pygame.draw.rect(surface, (shade, shade, shade), rect.inflate(-rect.w * 0.3, -rect.h * 0.3))
        level = self.flow.level
        if level is not None:
            ship = level.ship
            pos = self.camera.world_to_viewport(ship.transform.xy)
            ux, uy, _ = ship.transform.up()
            rx, ry, _ = ship.transform.right()
            size = 20.0
            points = [
                (pos[0] + ux * size, pos[1] - uy * size),
                (pos[0] - ux * size + rx * size * 0.6, pos[1] + uy * size - ry * size * 0.6),
                (pos[0] - ux * size - rx * size * 0.6, pos[1] + uy * size + ry * size * 0.6),
            ]
            pygame.draw.polygon(surface, (200, 200, 220), points)
            if ship.engine_frame() is not None:
                tail = (pos[0] - ux * size * 1.5, pos[1] + uy * size * 1.5)
                pygame.draw.circle(surface, (255, 150, 40), tail, 4 + ship.engine_frame() % 3)
        if self.flow.pause_overlay:
            overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
            overlay.fill((0, 0, 0, 204))
            surface.blit(overlay, (0, 0))
        widgets = self.menus.widgets()
        if self.states.screen.current is Screen.LOADING:
            from minex3.theme import label

            widgets = [label("Loading...")]
        layout_column(widgets, (self.window_size[0] / 2, self.window_size[1] / 2))
        for widget in widgets:
            x, y, w, h = widget.rect
            if isinstance(widget, Button):
                pygame.draw.rect(surface, widget.background, (x, y, w, h),
                                 border_radius=int(widget.border_radius))
                content, size, color = widget.text, widget.font_size, widget.text_color
            else:
                assert isinstance(widget, Text)
                content, size, color = widget.content, widget.font_size, widget.color
            font = fonts.setdefault(int(size), pygame.font.Font(None, int(size)))
            image = font.render(content, True, color)
            surface.blit(image, image.get_rect(center=(x + w / 2, y + h / 2)))


def main(argv: list[str] | None = None) -> int:
    """Start the game."""
    parser = argparse.ArgumentParser(prog="minex3", description=WINDOW_TITLE)
    parser.add_argument("--assets", default="assets", help="asset directory")
    args = parser.parse_args(argv)
    root = Path(args.assets)
    Game(asset_dir=root, asset_loaded=lambda p: (root / p).exists()).run()
    return 0
# minex3

A small 2D arcade game: fly a fighter ship around a screen-wrapping field,
with a splash screen, a title menu, settings, credits and a pause menu.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Playing

```
minex3 [--assets DIRECTORY]
```

`--assets` names the asset directory (default `assets`). The game opens a
1280×720 window on a short splash screen (Escape skips it), then the title
menu with **Play**, **Settings**, **Credits** and **Exit**.

**Play** goes straight to gameplay once every asset the game needs exists
under the asset directory; otherwise it shows a "Loading..." screen, which
it leaves only when those files are all there.

Controls during play:

| Input | Action |
| --- | --- |
| `W` | Fire the engine and thrust forward |
| Hold right mouse button | Turn the ship toward the cursor |
| `P` or `Escape` | Pause and open the pause menu |
| `P` while a menu is open | Close the menu and resume |

Escape also goes back from the credits, settings and pause menus. The ship
wraps around the edges of the window, with a margin. In the settings menu
the master volume is raised or lowered in steps of 10%, between 0% and 300%.

The backquote key flips the `Game.debug_ui` flag.

## Using the pieces

The game logic lives in plain modules that work without opening a window:

- `minex3.core` — `Timer` (once or repeating, driven by `tick(delta)`),
  `TimerMode`, `AppSystems` and `PhysicsClock`.
- `minex3.states` — `Screen`, `Menu`, `StateMachine` and `GameStates`, with
  transitions requested by `set` and applied later.
- `minex3.asset_tracking.ResourceHandles` — resources built once their
  dependencies are reported loaded by `poll`.
- `minex3.audio` — `music`, `sound_effect` and `AudioMixer`, which applies
  the global volume to playing instances through an optional backend.
- `minex3.camera` — `Camera2D` and `cursor_world_position`.
- `minex3.animation` — `PlayerAnimation`, `SpriteAnimation` and
  `AnimationIndices`.
- `minex3.movement` — `Transform`, `record_directional_input`,
  `ship_velocity`, `rotation_toward` and `screen_wrap`.
- `minex3.weapon` — `Weapon` (fire-rate cooldown) and `Projectile`.
- `minex3.player` — `PlayerShip`, `fighter_ship`, `ShipAssets` and
  `spawn_level`.
- `minex3.splash` — `ImageFadeInOut` (the trapezoid fade) and `SplashScreen`.
- `minex3.theme` — colours, `header`, `label`, `button`, `button_small`,
  `InteractionPalette` and `layout_column`.
- `minex3.menus` — `MenuController`, `lower_volume`, `raise_volume`,
  `format_volume`, `settings_back_target` and `credits_rows`.
- `minex3.screens.ScreenFlow` — pausing and moving between screens.

`minex3.game.Game` ties them together: `Game.step(delta_secs, events)`
advances one frame from a list of event tuples such as `("key_down", "w")`
or `("press", "Play")`, and `Game.run()` opens the window and plays.

## What it does not do

- No sound is heard: the window runs the audio mixer without a playback
  backend, so music and effects are only tracked, not played.
- No images are drawn: the ship, its engine flame, the splash image and the
  menus are drawn as simple shapes and text.
- The ship cannot shoot during play; `Weapon` and `Projectile` are there to
  be used on their own.
- There is no physics engine or collision handling; the ship moves by its
  velocity each frame.
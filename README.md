# spacewar

A local multiplayer space combat arcade game built on pygame. Every connected
game controller gets a ship in a small star system: a sun in the middle pulls
ships toward it, and one to three planets around it spawn health, energy or
missile packs that circle the centre of gravity. The game ends when one ship
or none is left.

## Installing

```
pip install .
```

## Playing

```
spacewar
spacewar --resources path/to/Resources
```

`--resources` names the directory that holds `assets/` and `fonts/`; it
defaults to `Resources` in the working directory. Every `.png` under
`assets/` (searched recursively) is loaded as a texture keyed by its file
stem, for example `sun_64`, `planet_1` … `planet_3`, `ship_1` … `ship_6`,
`shot`, `missile`, `ship_explosion`, `health_pack`, `power_pack`,
`damage_pack`, `health_bar` and `power_bar`. Fonts are read from
`fonts/TitleFont.otf` and `fonts/GeneralFont.otf`; if they cannot be loaded,
pygame's default font is used.

The window opens at 1920×1080 on a main menu showing how many controllers are
connected. Once at least one is connected, any controller button starts a
match. Closing the window quits.

### Controls

- **Turning**: right trigger minus left trigger (on pads with six or more
  axes), otherwise the third axis.
- **Button 0 – boosters**: thrust along the ship's heading (costs 1 charge).
- **Button 1 – hyperdrive**: jump to a random spot on the screen (costs 50,
  2 s cooldown).
- **Button 2 – phaser shot**: a fast shot straight ahead (costs 10, 0.2 s
  cooldown, 25 damage).
- **Button 3 – homing missile**: locks onto the first other ship within 200
  pixels (75 damage); uses missile ammo from damage packs, 1 s cooldown.

Each player starts with 100 health, 100 energy and 5 spare energy packs. When
energy runs out, a spare pack refills it. Power packs give 100 health (capped
at 100), 2 energy packs, or missiles (capped at 5). Touching the sun deals
1000 damage. Ships leaving the screen reappear on the opposite edge.

A HUD near the bottom of the screen shows each player's health bar, energy
bar, spare energy packs and missile ammo. When one player or none is left,
the game-over screen appears; any button returns to the main menu.

## Package layout

- `spacewar.app` – `GameState` (menu, match and game-over screens) and
  `main`, the `spacewar` command.
- `spacewar.game` – `Game`, which owns objects and textures and runs the
  systems each frame.
- `spacewar.entities` – `Ship`, `PhaserShots`, `HomingMissile`, `Sun`,
  `Planet`, `PowerPack`, `ExplosionEffect` and `populate_star_system`.
- `spacewar.player` – `PlayerState` and `create_player_states`.
- `spacewar.physics`, `spacewar.collision`, `spacewar.input` – the physics,
  collision and controller systems.
- `spacewar.gameobject`, `spacewar.hud`, `spacewar.delegate`,
  `spacewar.registry`, `spacewar.vecmath` – base classes, HUD, callbacks,
  component registries and vector maths.

## What it does not do

- There is no keyboard or mouse play: ships are only steered by game
  controllers, and a match needs at least one connected.
- Controller rumble is not wired up; abilities accept a rumble callback but
  the game passes none.
- Scores are counted for kills but not shown anywhere.

## Running the tests

```
pip install .[test]
pytest
```
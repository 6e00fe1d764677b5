# obliviion

A small 2D platformer built on pygame. You control a player who runs, jumps
and falls under gravity onto a tiled floor while a weak enemy drops into the
level. A pause menu opens with Escape.

## Installing

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Playing

```
obliviion
obliviion --assets path/to/assets
```

The game opens an 800×600 window titled "Obliviion", limited to 144 frames
per second, and starts in the "Garden of Eden" level.

Controls:

- Left / Right arrows: run
- Space: jump (only while standing on the ground)
- Escape: open or close the menu; the level is paused while the menu is open
- Up / Down in the menu: move the selection
- Enter on "Sair": quit

### Assets

Assets are read from the directory given with `--assets`, by default
`../assets` relative to the working directory:

- `fonts/arial.ttf` (required)
- `images/player.png` (required)
- `images/tile1.png` (required)
- `images/background1.png` (optional; without it no background is drawn)
- `images/inimigoFraco.png` (optional; without it the enemy has no image)

If a required file cannot be loaded, the command prints the error and exits
with status 1. A missing optional image is reported on standard error and the
game goes on without it.

## Package layout

- `obliviion.geometry`: `Vector2`, `Rect` (with `intersects`), `Texture`,
  `Sprite`, `load_texture` and the `TextureError` it raises
- `obliviion.entities`: the `Ente`, `Entidade` and `Personagem` base classes;
  `Personagem` adds gravity, falling and landing, and a red damage flash
  (`take_damage`)
- `obliviion.lists`: `Lista` and `ListaEntidades`, which updates and renders
  entities in insertion order
- `obliviion.player`: the `Jogador` player character and the `Key` input enum;
  `Jogador.update(delta_time, pressed)` takes the set of held keys
- `obliviion.projectile`: `Projetil`, a projectile that is hidden until
  `fire`d and retires itself when it leaves the 800×600 screen or hits a player
- `obliviion.enemies`: `Inimigo`, `InimigoFraco`, `InimigoMedio` and `Chefao`,
  a boss that fires one projectile from a pool of ten every 2.5 seconds;
  each enemy's `save()` returns a dictionary snapshot of its state
- `obliviion.obstacles`: `Obstaculo`, the harmful `ObstaculoDificil`, and
  `ObstaculoMedio` and `Plataforma`, on which falling characters land
- `obliviion.collisions`: `GerenciadorColisoes`, which notifies players and
  enemies (and the two players) that touch; `get_instance()` returns a shared one
- `obliviion.menu`: the pause `Menu`; `handle_key` moves the selection and
  returns the selected label on Enter
- `obliviion.levels`: `Fase`, `Floor`, `GardenOfEden` and `FaseSegunda`, a
  boss level with spikes and platforms (`FaseSegunda.from_assets` loads its
  images from an assets directory)
- `obliviion.graphics`: the window manager `GerenciadorGrafico`;
  `get_instance()` returns a shared one
- `obliviion.game`: `Game` and the `main` entry point

## What it does not do

- The command only plays the "Garden of Eden" level. `FaseSegunda` can be
  built and driven from code, but the game never switches to it.
- The menu's "Resume" and "Option" entries do nothing when chosen; Escape
  closes the menu.
- Nothing is written to disk: `save()` methods only return dictionaries, and
  there is no saving or loading of games.
- The collision manager records obstacles and projectiles but `run()` only
  checks players against enemies and against each other; hazards do not hurt
  the player beyond printing a message, and there is no health or game over.
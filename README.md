# cubraycaster

cubraycaster is a small first-person raycaster. It reads a `.cub` scene file
with four wall textures, a floor colour, a ceiling colour and a grid map. It
checks the scene, then opens a 1280×720 window that you can walk around in.
Walls hit on a north or south face are drawn at half brightness.

## Installation

```
pip install .
```

Install with the `test` extra to get pytest:

```
pip install ".[test]"
```

## Running

```
cubraycaster path/to/scene.cub
```

The command takes exactly one argument, and that argument must end in `.cub`.
If the arguments or the scene are not valid, it writes a coloured error
message to standard error and exits with status 1.

### Controls

| Key                 | Action                                  |
|---------------------|-----------------------------------------|
| `W` / `Up`          | move forward                            |
| `S` / `Down`        | move backward                           |
| `A` / `D`           | strafe left / right                     |
| `Left` / `Right`    | turn                                    |
| `Left Shift`        | move forward and backward 1.5× faster   |
| `Escape`            | quit                                    |

The player slides along walls instead of walking into them. When you press
Escape, the program prints an exit notice. When you close the window, it also
prints a summary of the map, the colours, the texture paths, the starting
position and the final player state.

## The `.cub` format

```
NO ./textures/north.png
SO ./textures/south.png
WE ./textures/west.png
EA ./textures/east.png

F 220,100,0
C 225,30,0

        1111111111
        1000000001
111111111011000001
100000000011000001
1000N0000000000001
111111111111111111
```

- `NO`, `SO`, `WE` and `EA` each name a texture file. The name must end in
  `.png` and the file must be readable. Put at least one space after the
  identifier. Each identifier may appear only once.
- `F` (floor) and `C` (ceiling) each take `R,G,B`, with every value from 0 to
  255. Put at least one space after the identifier. Each may appear only once.
- Every line that is not blank must start, after any leading blanks, with one
  of `N`, `S`, `W`, `E`, `F`, `C` or `1`.
- The map must come last and must be one block, with no blank lines inside it.
  It may use `0` (floor), `1` (wall), spaces, and exactly one of `N`, `S`, `E`
  or `W` for where the player starts and which way they face.
- The map must be closed: from the start, the player must not be able to reach
  a space or the edge of the grid.
- The map must be at least 4×4, 3×5 or 5×3.

Tabs and carriage returns inside the map count as spaces, so files saved with
Windows line endings load correctly.

## Using it as a library

```python
from cubraycaster.scene import load_scene
from cubraycaster.player import player_from_start

scene = load_scene("maps/example.cub")
player = player_from_start(scene.grid.player_direction,
                           scene.grid.player_x, scene.grid.player_y)
player.move_linear(scene.grid, 0.04, +1)
player.rotate(0.025)
```

- `cubraycaster.scene`: `load_scene` and `parse_scene` return a `Scene`, which
  holds a `SceneConfig` (texture paths and colours) and a `MapGrid`.
  `parse_rgb`, `parse_texture_path`, `parse_config` and `ensure_config_ready`
  handle the individual steps.
- `cubraycaster.grid`: `MapGrid` with `is_wall`, and the map helpers
  `extract_map_lines`, `normalize_rows`, `flood_fill` and `validate_map`.
- `cubraycaster.player`: `Player` with `rotate`, `attempt_move`,
  `move_linear` and `move_lateral`.
- `cubraycaster.raycast`: an RGBA `Image`, `WallTextures`, and the renderer.
  `cast_ray` steps a single ray through the grid with DDA, and `render_frame`
  draws a complete frame into an `Image`.
- `cubraycaster.app`: `Game` ties a scene, its textures and the player
  together. `Game.tick(pressed)` applies a set of held `Key` values and renders
  into `game.screen`, so it runs without a window. `load_texture` loads an
  image file as a texture. `main` is the command shown above.
- `cubraycaster.settings`: `default_settings()` returns the screen size,
  texture size, movement speeds and rotation speed.

Scene and graphics failures raise subclasses of
`cubraycaster.errors.CubError`: `ArgumentError`, `ParseError`, `MapError` and
`GraphicsError`. `error_report` formats such an error the way the command
prints it.

## Limits

The window size and the movement speeds are fixed by `default_settings()`. The
command has no options to change them. There is no mouse look, no sprites and
no sound.
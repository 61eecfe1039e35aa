# raycube

raycube holds the building blocks of a grid raycaster: it parses `.cub`
scene files, reads XPM wall textures into pixel buffers, resolves X11
colour names, and moves a player through the grid from keyboard state.
It has no dependencies outside the standard library.

## Installing

```
pip install .
```

## What it does not do

The package does not open a window, cast rays, draw frames or read the
keyboard, and it installs no command. It supplies the parsed scene, the
textures and the player state that such a program would use.

## Scene files

`raycube.config` reads scene descriptions:

```python
from raycube.config import parse_file

scene = parse_file("maps/level.cub")
scene.textures["NO"]   # path of the north wall texture
scene.floor            # Color(r=..., g=..., b=...)
scene.grid             # list of map rows
```

A scene starts with six settings, in any order, blank lines allowed
between them:

```
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm
F 120,110,90
C 40,60,200
```

- `NO`, `SO`, `WE`, `EA` give a texture path for each wall face; a key
  given twice is an error.
- `F` and `C` give the floor and ceiling colours as `R,G,B`, each value
  from 0 to 255.

The map follows. Its rows are the non-empty lines from the first line
that is not a setting; `find_player(grid)` returns `(x, y, angle)` for the
cell marked `N`, `S`, `E` or `W` (the centre of the cell; the last marker
found counts).

`parse_file` rejects a name of four or more characters that does not end
in `.cub`. `parse_text` parses text directly. A setting that cannot be
read stops the reading of settings and is logged as a warning; the scene
is then accepted only if `validate_config` finds at least six settings
and all four textures. Every error is raised as `ParseError`.

Smaller helpers are public too: `parse_color`, `is_config_line`,
`is_empty_line`, `has_bad_extension`, `parse_config_section`,
`parse_map`, `map_width`.

## Images and textures

`raycube.image.Image(width, height, bits_per_pixel=32, endian=0)` is a
pixel buffer with `put_pixel(x, y, color)`, `get_pixel(x, y)` and
`to_bytes()`. Positions outside the image are ignored on write and read
as 0. `rgb_mask_shifts` and `good_color` convert a `0xRRGGBB` colour for
visuals shallower than 24 bits.

`raycube.xpm` reads XPM images into an `Image`:

```python
from raycube.xpm import load_xpm

texture = load_xpm("textures/north.xpm")
texture.get_pixel(0, 0)
```

`parse_xpm_text` takes the file text and `parse_xpm` the list of strings
(header first). C comments outside strings are skipped. Colour values may
be `#RRGGBB` or X11 names; `None` becomes `0xFF000000`. Malformed data
raises `XpmError`.

`raycube.colornames.text_to_rgb(name, end=None)` resolves a colour
specification: hexadecimal after `#`, otherwise a case-insensitive X11
name (`"none"` gives -1, an unknown name 0).

## Player movement

`raycube.player` has `Vector`, `Keys` (which of W, A, S, D, left and
right are held) and `Player`. `Player.update(keys, now_ms)` starts the
clock on its first call and afterwards turns and moves the player by its
speeds per second (5.0 units and 3.0 radians by default) times the
elapsed time. `FpsCounter.tick(now_ms)` counts frames and returns the
count once at least a second has passed. `current_time_ms()` gives the
wall-clock time in milliseconds.

## Running the tests

```
pip install .[test]
pytest
```
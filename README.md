# wirefdf

An interactive wireframe viewer for `.fdf` height maps. A map is drawn as a
grid of lines whose colours blend from one end point to the other, in an
isometric, orthographic or cavalier projection. You can pan, zoom, rotate and
change the height scale with the keyboard and the mouse. The window is drawn
with pygame.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Usage

```
wirefdf path/to/map.fdf
```

The viewer opens a 1920×1080 window titled `fdf`, with the map centred and a
help overlay listing the controls in the top-left corner. Held keys repeat.

The command exits with status 1 and a message on standard error, in the form
`FdF: <kind>: <message>`, when:

- no argument is given, or the argument contains no dot (a usage message);
- the text after the file name's last dot is not a beginning of `fdf`, or the
  name starts with its only dot;
- the file cannot be read;
- the rows of the map do not all have the same number of values;
- a height reaches the 32-bit integer limits;
- the display cannot be opened.

Except for the usage message, each of these is followed by the line
`FdF: MLX: Failed to initialize MLX.`

## Map format

Each line of the file is one row of the grid. Values are separated by spaces
and each one is the height of a point. A value may carry a hexadecimal colour
after a comma, with a `0x` or `0X` prefix:

```
0 0 0 0
0 10,0xFF0000 10,0xFF0000 0
0 0 0 0
```

Every row must have as many values as the first. Points without a colour are
white.

## Controls

Mouse:

- Left-click and drag: pan
- Scroll up / down: zoom in / out

Keyboard:

- `Esc`: quit
- `i`: isometric projection
- `o`: orthographic projection
- `p`: cavalier projection
- Up / Down: raise or lower the height scale by 0.5
- `Shift` + Left / Right: rotate about the y axis, one degree per press
- `Shift` + Up: rotate about the x axis
- `Shift` + Down: rotate about the z axis
- `W` / `A` / `S` / `D`: move up, left, down, right
- `=` / `-`: zoom in / out by 10 %, between 0.8× and 100×
- `1` / `2` / `3`: in orthographic mode only, set the rotations to
  (0, 0, 0), (90, 0, 0) or (90, 0, −90) degrees about x, y and z
- `R`: reset the view

Switching projection clears all rotations.

## Library use

The parts of the viewer work without a window:

- `wirefdf.mapfile`: `load_map(filename)` and `parse_map(lines)` return a
  `HeightMap` (`width`, `height`, `grid[y][x]` of `Point3D`), and raise
  `MapError` on bad input.
- `wirefdf.geometry`: `Config` (the view state), `Projection`, `Point2D`,
  `Point3D`, `Bounds`, `project_point`, `map_bounds` and the rotation helpers
  `rotate_x`, `rotate_y`, `rotate_z`, `rotate_point` and `scale_and_rotate`.
- `wirefdf.raster`: `Image`, a buffer of packed `0xAARRGGBB` pixels
  (1920×1080 by default), `draw_line`, `line_points` and `render_map`.
- `wirefdf.controls`: `Viewer`, which holds a map, an `Image` and a `Config`
  and updates them from key and mouse events; `instructions` returns the help
  overlay as `(x, y, text)` lines.
- `wirefdf.colors` packs and blends colours; `wirefdf.numparse` holds the
  clamping `atoi` and `strtol` used to read map values.

```python
from wirefdf.geometry import Config
from wirefdf.mapfile import parse_map
from wirefdf.raster import Image, render_map

heightmap = parse_map(["0 0 0\n", "0 5,0xFF0000 0\n", "0 0 0\n"])
image = Image()
render_map(image, heightmap, Config())
```

`render_map` centres the map on a 1920×1080 screen whatever the size of the
image it draws into.

## Limits

The viewer only displays maps: it does not save images or edit maps. Drawing
is done pixel by pixel in Python, so large maps redraw slowly.
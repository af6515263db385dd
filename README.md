# fdfview

A wireframe viewer for height maps. A map is a plain text file with one
row of space-separated integers per line; each number is the altitude of
one grid point. `fdfview` draws the grid as connected line segments,
coloured by altitude, and lets you rotate, shift, zoom and switch
projections from the keyboard.

## Installing

```
pip install .
```

The window is drawn with pygame. For the tests, install the `test` extra
(`pip install .[test]`) and run `pytest`.

## Running

```
fdfview path/to/map.fdf
```

Exactly one argument, the map file, is expected. Every row of the map must
have the same number of entries, otherwise the program prints
`Map length error` and exits with status 1. A wrong argument count, a map
that cannot be opened, or an empty map also give status 1 with a message
on standard error.

The window is 1920 by 1080 pixels and is titled `FDF`. Closing it or
pressing `Esc` ends the program.

A small map looks like this:

```
0 0 0 0
0 5 5 0
0 5 5 0
0 0 0 0
```

## Keys

| Key | Action |
| --- | --- |
| Arrow keys | Shift the view by 10 pixels |
| `a` / `q` | Rotate about the X axis (forward / back) |
| `s` / `w` | Rotate about the Y axis (forward / back) |
| `d` / `e` | Rotate about the Z axis (forward / back) |
| `i` | Isometric projection (the default) |
| `o` | Oblique projection |
| `t` | Top view |
| `u` | Increase the oblique angle |
| `z` / `x` | Zoom out / in (zoom never goes below 0) |
| `f` / `g` | Decrease / increase the altitude scale by 0.1 |
| `c` / `v` | Lower / raise the base height band |
| `h` / `j` | Step the base hue down / up |
| `k` / `l` | Step the other hue down / up |
| `r` | Reset the view |
| `Esc` | Quit |

Each rotation and oblique step is 3 degrees. The current settings are
shown in a menu at the left of the window.

## Colours

Each segment's colour depends on the scaled altitudes of its two ends.
When both lie inside the base band (from minus to plus the base height),
the base hue count picks the colour; when both lie above or both below
it, the other hue count does. A segment that crosses a band boundary
keeps the colour used last. Hues move through a 160-step cycle of white,
blue, green, yellow, orange, red, pink and purple.

## Library use

The modules work without a window, too:

- `fdfview.heightmap`: `load_map` and `parse_map_text` read maps into a
  `HeightMap`; bad maps raise `MapError`.
- `fdfview.transform`: `Point` and the transforms `scale_z`, `scale`,
  `isometric`, `oblique`, `rotate` and `translate`.
- `fdfview.render`: `ViewState` holds the view settings, `Renderer`
  rasterises a map into an `fdfview.image.Image`, `line_points` yields the
  pixels of a line and `menu_lines` gives the menu text.
- `fdfview.controls`: `Key` and `handle_key`, which applies a key press to
  a `ViewState`.
- `fdfview.palette`: `Palette`, `blend`, `rgb` and `default_hues`.
- `fdfview.image`: `Image`, a packed pixel buffer, plus `rgb_shifts` and
  `good_color` for converting colours to lower-depth pixel values.
- `fdfview.xpm`: `load_xpm` and `parse_xpm` read XPM pixmaps into an
  `Image`, raising `XpmError` on bad data.
- `fdfview.colornames`: `lookup_color` resolves X11 colour names and
  `parse_color_spec` resolves XPM colour specifications.

## What it does not do

The viewer takes input from the keyboard only; there is no mouse control.
XPM images can be read with `fdfview.xpm`, but the viewer does not display
them, and rendered images cannot be saved to a file from the command.
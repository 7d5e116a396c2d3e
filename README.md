# tricircle

A small raster editor that draws the circle going through three points.

Points are placed on a grayscale canvas (640×480 by default). Once three
points are down, the circle through all of them is drawn with the chosen
line thickness. Points can be dragged to new places, moved at random, or
cleared to start again. The canvas can be saved as a binary PGM file.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
tricircle [--width W] [--height H] [--delay SECONDS] [--seed N]
```

reads commands, one per line, from standard input and answers on
standard output. `--width` and `--height` set the canvas size (default
640 and 480), `--delay` the pause between random moves (default 0.5
seconds) and `--seed` the seed of the random generator.

The commands are:

| command         | effect                                                        |
|-----------------|---------------------------------------------------------------|
| `press X Y`     | place a point, or grab an existing point near (X, Y)          |
| `drag X Y`      | move the grabbed point to (X, Y)                              |
| `release`       | let go of the grabbed point                                   |
| `radius N`      | set the point radius (kept between 1 and 50)                  |
| `thickness N`   | set the circle line thickness (kept between 1 and the radius) |
| `random`        | move all three points to random places, ten times             |
| `reset`         | remove all points and clear the canvas                        |
| `points`        | list the points                                               |
| `save PATH`     | write the canvas as a PGM file                                |
| `help`          | show the command list                                         |
| `quit`, `exit`  | leave (end of input does the same)                            |

`radius` and `thickness` print the values actually in effect after
clamping. Arguments that are not whole numbers give `invalid number`.
`random` needs three points first. When the three points end up in a
line, the session reports it and the points are cleared.

The session is run by `tricircle.app.CircleApp.run`, which reads from any
text stream; `tricircle.app.parse_int(text)` turns a string into an
integer, or `None` if it is not one.

## Library use

The editing rules live in `tricircle.editor.CircleEditor(width=640,
height=480, point_radius=10, line_thickness=3)`:

- `press(x, y)` picks up an existing point if the press lands within
  twice the marker radius of it; otherwise it places a new point (up to
  three). Presses outside the canvas are ignored;
- `drag(x, y)` moves the picked-up point, and `release()` lets it go;
- `set_radius(radius)` sets the size of the point markers, kept between
  1 and 50, and returns the radius and thickness in effect;
- `set_thickness(thickness)` sets the circle's line thickness, kept
  between 1 and the marker radius, and returns it;
- `randomize(rng)` moves every point to a random place on the canvas,
  using the given `random.Random`;
- `redraw()` repaints the canvas from the current points;
- `reset()` removes all points and clears the canvas.

`points` lists the placed points and `image` is the canvas.

When the three points lie on (or almost on) one straight line, or the
circle would be far larger than the canvas, no circle is drawn: the
editor clears its points and raises
`tricircle.editor.CollinearPointsError`.

```python
import random

from tricircle.editor import CircleEditor, CollinearPointsError

editor = CircleEditor()
editor.press(100, 100)
editor.press(300, 120)
editor.press(200, 300)          # the circle is drawn now

editor.set_thickness(5)
editor.randomize(random.Random(1))

with open("circle.pgm", "wb") as out:
    out.write(editor.image.to_pgm())

try:
    line = CircleEditor()
    for x in (100, 200, 300):
        line.press(x, 100)
except CollinearPointsError:
    print("the points are in a line")
```

The geometry is available on its own in `tricircle.geometry`:
`circle_through(p1, p2, p3)` gives the `Circle` (`cx`, `cy`, `radius`)
through three points, or `None` if they are nearly collinear, and
`is_in_circle(x, y, cx, cy, radius)` tells whether a point lies strictly
inside a circle.

Drawing happens on a `tricircle.raster.GrayImage`, an 8-bit grayscale
image with `fill`, `pixel`, `contains` and `draw_disc`; `to_pgm()`
returns the image as a binary PGM file that any image viewer can open.

## What it does not do

There is no window and no mouse input: the canvas is edited through
text commands or the Python API. To look at the result, save it as PGM
and open it in an image viewer.
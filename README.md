# kinectsketch

Small, dependency-free geometry for face-driven sketches:

- an **egg avatar**: a sphere-mapped cartoon face (eyes, eyebrows, mouth,
  nose, hair, pupils and outline) animated from face-tracking action units
  and head pose, and drawn as line segments;
- **2-D affine transforms** in row-vector form;
- a **turtle outline** made of closed cubic Bézier figures.

Nothing here talks to a sensor or a window. You feed in numbers and get back
points, lines and figures to draw with whatever graphics library you like.

## Installing

```
pip install kinectsketch
```

For running the tests:

```
pip install "kinectsketch[test]"
pytest
```

## The egg avatar

```python
from kinectsketch.egg_avatar import EggAvatar, LineCanvas

avatar = EggAvatar()
avatar.set_scale_and_translation_to_window(480, 640)
avatar.set_action_units([0.2, 0.5, 0.3, -0.2, 0.1, 0.0])
avatar.set_rotations(10.0, -5.0, 0.0)

canvas = LineCanvas()
avatar.draw_image(canvas)
for line in canvas.lines:
    print(line.start, line.end, hex(line.color), line.width)
```

`LineCanvas` records every line in its `lines` list as a `DrawnLine`
(`start`, `end`, `color`, `width`, with integer pixel coordinates). To render
somewhere real, subclass it and override `draw_line(start, end, color, width)`,
or pass any object that has such a method. The avatar is drawn in white
(`WHITE`, `0xFFFFFFFF`); segments on the far side of the egg are hidden and
segments that cross its edge are clipped.

Other `EggAvatar` methods:

- `set_random_action_units(rng=None)` and `set_random_rotations(rng=None)`
  pick a random expression or a head orientation within 45 degrees of neutral;
  pass a `random.Random` to make them repeatable;
- `set_translations(tx, ty, tz)` reports the head position; a move of more
  than 0.2 restarts pose smoothing;
- `compute_points()` places every point in window coordinates and returns
  them as `(x, y, z)` tuples without drawing;
- `draw_background_line(canvas, x1, y1, x2, y2, color)` draws a line that
  leaves out the part covered by the egg's outline. It uses the points from
  the last `compute_points()` or `draw_image()` call.

The pieces behind the avatar can be used on their own:

- `kinectsketch.egg_expression.Expression.from_action_units(units)` turns at
  least six action units into mouth, brow and eyelid weights; a seventh and
  eighth, when present and not both zero, set the upper and lower eyelids
  directly. Fewer than six units raise `ValueError`.
  `Expression.random(rng=None)` builds one from six random units in [-1, 1].
- `kinectsketch.egg_expression.HeadPose` holds pitch, yaw and roll as
  fractions of a half turn. With `filtering=True`, `set_rotations` measures
  angles against a running average of the reported pose.
- `kinectsketch.egg_geometry` fixes the face proportions and the layout of the
  point array. `FaceRegion(first, count)` is a contiguous run of points, with
  `indices()` and `segments(closed)`; `curve_segments(first, count, closed)`
  gives the index pairs that trace a curve. Regions such as `RIGHT_EYE`,
  `MOUTH`, `HAIRS` and `CIRCLE` are defined there.

## Transforms

```python
from kinectsketch.matrix import Matrix3x2

m = Matrix3x2.translation(-10, -10) @ Matrix3x2.rotation(90) @ Matrix3x2.scale(2, 2)
print(m.apply(10.0, 0.0))
```

`Matrix3x2` is an immutable affine transform. `a @ b` applies `a` first and
then `b`. The constructors are `identity()`, `translation(dx, dy)`,
`scale(sx, sy)` and `rotation(degrees)`, where positive angles turn clockwise
on a y-down screen.

## The turtle outline

```python
from kinectsketch.turtle_shape import turtle_parts, TURTLE_BODY_SIZE, BODY_FILL_COLOR

for name, figure in turtle_parts().items():
    outline = figure.flatten(8)
    print(name, len(outline), figure.end_point())
```

`turtle_parts()` returns the body, head, tail and four feet, in drawing order,
as closed `Figure`s laid out in a box of `TURTLE_BODY_SIZE` with the head
towards negative y. Each `Figure` has a `start` point and a tuple of
`BezierSegment`s; `BezierSegment.point_at(start, t)` evaluates one cubic
segment, and `Figure.flatten(steps)` approximates the whole path with `steps`
points per segment (fewer than one raises `ValueError`). `BODY_FILL_COLOR` is
the suggested fill colour.

## What this package does not do

- It reads no sensor and recognises no speech: action units, head angles and
  positions must come from your own tracker.
- It opens no window and renders no pixels; drawing goes through the canvas
  you supply.
- It provides the turtle's shape only. There is no turtle that moves or turns
  in response to commands; combine `turtle_parts()` with `Matrix3x2` yourself
  to place it.
- There is no command-line program.
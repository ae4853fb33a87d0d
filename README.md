# animray

Building blocks for a small ray tracer. It is pure Python and has no
third-party dependencies.

## Modules

- `animray.point2d.Point2D` is a frozen 2D point. You can add and subtract two points. You can multiply or divide a point by a scalar, with the scalar on either side. `str()` gives `(x, y)`.
- `animray.extents2d` has two parts:
  - `Extents2D(sx, sy, ex, ey)` is an axis-aligned rectangle. It has `width()`, `height()` and `area()`. `intersection(other)` returns the overlap, or `None` when the two are disjoint. If a top-right co-ordinate is below the lower-left one, the constructor raises `OverflowError`.
  - `size(low, high)` gives the size of a range. Integer ranges include both ends.
- `animray.film.Film(width, height, colour)` is a raster addressed as `film[column][row]`.
  - `colour` is either the starting value of every pixel or a function of `(column, row)`.
  - `size()` returns the `Extents2D` that covers the film.
  - `for_each(fn)` visits every pixel column by column, and `for_each_row(fn)` visits them row by row.
  - A width or height below 1 raises `animray.film.UnderflowError`.
- `animray.epsilon.epsilon(kind)` gives the near-zero tolerance for a precision name or a type:

  | `kind` | tolerance |
  |---|---|
  | `"float"` | `1e-5` |
  | `"double"` | `1e-12` |
  | `"long double"` | `1e-15` |
  | Python `float` | `1e-12` |
  | any other type | its zero value |

  An unknown precision name raises `ValueError`.
- `animray.mixins` lets a ray type carry extra data:
  - `mixin(base, extra)` builds a type that is both `base` and `extra`.
  - `with_depth_count`, `with_frame` and `with_time` add a `DepthCounted`, `AtFrame` or `AtTime` part. If the type already has that part, it is returned unchanged.
  - `DepthCounted.add_count(other)` adds one, plus any depth that `other` has already reached.
- `animray.cli.Arguments(argv, output_filename, width, height)` parses `-x value` switches.
  - `-o`, `-w` and `-h` set `output_filename`, `width` and `height`.
  - All switches are kept in `switches`.
  - `switch_value(option, default)` parses a switch's value as a float if `default` is a float, and as an integer otherwise.
  - An argument that is not a switch or a switch's value raises `ValueError`.
- `animray.scene.Scene(geometry, light, background, colour_type)` returns the light coming back along a ray.
  - Calling the scene on a ray gives `light(observer, intersection, scene)` plus any emission, or `background` when nothing is hit.
  - `render(camera, x, y)` first calls `camera(x, y)` to get the ray.
- `animray.emission.emission(colour_type, observer, intersection, scene)` returns what the intersection emits. If the intersection does not emit, it returns `colour_type()`.
- `animray.collection.Collection` holds geometry of one kind. Build it empty or from an iterable, or add items with `insert`.
  - `intersects(by, epsilon)` returns the hit nearest the ray's start. On a tie, the earlier hit is kept.
  - `occludes(by, epsilon)` reports whether anything blocks the ray.
- `animray.compound.Compound(*geometries)` holds one each of several geometries.
  - `intersects` returns the nearest hit wrapped in a `CompoundIntersection`. On a tie, the later geometry wins.
  - `occludes` reports whether any geometry blocks the ray.
- `animray.surfaces` has four materials. Each has `illuminate(...)` and `emit(...)`.
  - `Matte(attenuation)` is a diffuse surface.
  - `Gloss(width)` is a specular highlight.
  - `Reflective(albedo, max_depth=5)` is a mirror.
  - `Transparent(transparency, max_depth=5)` passes the ray straight through.
  - A reflected or transmitted ray that goes deeper than `max_depth` gets the scene's background.
- `animray.planar` has `Plane(center, normal, intersection_type)` and `Triangle(one, two, three, intersection_type)`. Both have `intersects` and `occludes`. A hit is built as `intersection_type(point, normal)`, and its normal faces the incoming ray.

### What the geometry expects

The geometry and surfaces work on any vector type that does all of the following:

- has `x`, `y` and `z` attributes;
- supports `+`, `-`, unary `-` and multiplication by a scalar;
- can be built by calling its type with three co-ordinates.

Rays must carry `from_` and `direction` attributes.

## Installation

```
pip install .
```

## Examples

Compose two films:

```python
from animray.film import Film

background = Film(10, 10, 3)
foreground = Film(10, 10, 4)
composite = Film(10, 10, lambda x, y: background[x][y] + foreground[x][y])
assert composite[5][5] == 7
assert composite.size().area() == 100
```

Read command-line switches:

```python
from animray.cli import Arguments

args = Arguments(["-w", "640", "-s", "4"], "scene.tga", 300, 200)
assert (args.width, args.height) == (640, 200)
assert args.switch_value("s", 2) == 4
assert args.switch_value("t", 1.5) == 1.5
```

## What it does not do

The package has none of the following:

- vector, ray, matrix or colour types;
- cameras or lights;
- a writer for image files;
- a command that renders a scene.

You supply the vectors, rays, cameras and lights. The package provides the
films, scenes, geometry and surfaces that work with them.

## Running the tests

```
pip install .[test]
pytest
```
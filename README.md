# raytrace

A small ray tracer written in pure Python that depends only on the standard
library. It renders spheres and planes lit by a single point light. It
supports shadows, Phong shading and procedural patterns: stripes, gradients,
rings, 3D checkers and checkers mapped onto a sphere. The result is written
as a plain-text (P3) PPM image.

## Installation

```
pip install .
```

## Command line

Installing the package provides the `raytrace` command. It renders one of
the bundled demo scenes and saves it as a PPM file:

```
raytrace [clock|sphere|spheres|plane|test] [-o FILE] [--width N] [--height N]
```

| demo      | default file      | default size |
|-----------|-------------------|--------------|
| `clock`   | `clock.ppm`       | 500 x 500 (fixed) |
| `sphere`  | `sphere.ppm`      | 500 x 500    |
| `spheres` | `SpheresDemo.ppm` | 1000 x 500   |
| `plane`   | `PlaneDemo.ppm`   | 250 x 250    |
| `test`    | `testDemo.ppm`    | 1920 x 1080  |

- With no demo named, `test` is rendered.
- `-o`/`--output` chooses the file to write.
- `--width` and `--height` must be positive.
- The `clock` demo refuses both options.
- The `sphere` demo is square, and its side is taken from `--width`.

Rendering is done in pure Python, so large images take a while. For a quick
look, try something like `raytrace plane --width 100 --height 100`.

The same scenes can be rendered from Python with the functions in
`raytrace.demos`: `clock_demo`, `sphere_demo`, `spheres_demo`, `plane_demo`
and `test_demo`. Each one saves the file and returns the `Canvas`.

## Library use

- `raytrace.tuples`: the `Tuple` type used for points, vectors and colours.
  - Constructors: `point`, `vec` and `color`.
  - Products: `dot` and `cross`.
  - Comparison: `are_equal`, which compares magnitudes within `EPSILON`
    (1e-4). `Tuple` equality uses the same tolerance.
- `raytrace.matrix`: the `Matrix` class, of logical size 2, 3 or 4. Any other
  size raises `ValueError`.
  - Operations: `transpose`, `submatrix`, `minor`, `cofactor`,
    `determinant` and `inverse`. A singular matrix is returned unchanged.
  - In-place chained transforms: `set_identity`, `translate`, `scale`,
    `rotate_x`, `rotate_y`, `rotate_z` and `shear`.
  - Factories: `identity`, `translation`, `scaling`, `rotation_x`,
    `rotation_y`, `rotation_z` and `shearing`.
- `raytrace.rays`: `Ray`, with `position` and `transform`; `Intersection`;
  and `hit`, which returns the intersection with the lowest non-negative `t`,
  or `None`.
- `raytrace.shapes`: `Material`, `Sphere` and `Plane`. Each shape has
  `intersect`, `normal_at` and `pattern_at`.
- `raytrace.patterns`: `Stripe`, `Gradient`, `Ring`, `Checker` and
  `CheckerMap`. Each one takes two colours and an optional `transform`.
- `raytrace.lights`: `PointLight`, `reflect` and `lighting`.
- `raytrace.world`: `World`, with `add_shape`, `intersect` and `is_shadowed`.
  The module also provides `default_world`, `Computations`,
  `prepare_computations`, `shade_hit`, `color_at` and `view_transformation`.
- `raytrace.camera`: `Camera`, with `ray_for_pixel` and `render`. `render`
  turns a world into a `Canvas`.
- `raytrace.canvas`: `Canvas`.
  - Pixel access: `pixel_at` and `write_pixel`. Both raise `IndexError`
    outside the canvas.
  - Output: `to_ppm` and `save_ppm`.
  - Helpers for packed `0xRRGGBB` pixels: `make_color`, `pixel_to_color`,
    `rgb_to_color`, `red`, `green`, `blue`, `black` and `white`.

A minimal render of the default world:

```python
import math

from raytrace.camera import Camera
from raytrace.tuples import point, vec
from raytrace.world import default_world, view_transformation

world = default_world()
camera = Camera(100, 100, math.pi / 2)
camera.transform = view_transformation(point(0, 0, -5), point(0, 0, 0), vec(0, 1, 0))

canvas = camera.render(world)
canvas.save_ppm("world.ppm")
```

Colours are stored as floating point components in the range 0 to 1. When
pixels are written, values outside that range are clamped and the rest are
rounded up to 0..255.

## Limitations

- Scenes are built in Python code only. There is no scene file format.
- The only output format is PPM. There is no image viewer.
- Each world has a single point light.
- There are no reflections, refraction or anti-aliasing.

## Tests

```
pip install .[test]
pytest
```
# tlescope

An interactive 3D view of the Earth with a rotating cloud layer and a
camera-facing location marker, drawn with pygame, plus a reader for
Two-Line Element (TLE) files.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running the viewer

```
tlescope
tlescope --resources path/to/resources
```

The window opens at 1280×720 and can be resized. Images and the font are
looked up under the directory given with `--resources` (default
`resources`, relative to the working directory):

- `daymap8k.png` – Earth texture (flipped horizontally when loaded)
- `cloudlayer.png` – cloud texture
- `icon/tlescopeico_512.png` – window icon
- `fonts/satellite_alt_40dp_FFFFFF_FILL0_wght300_GRAD0_opsz40.png` – marker image
- `fonts/RobotoFont.ttf` – font for the frame-rate text

A missing image is logged as a warning and left out; a missing font falls
back to pygame's default font.

Controls:

- **Right mouse button + drag** – orbit around the target
- **Mouse wheel** – zoom in and out (distance is kept between 0.5 and 50)
- **Middle mouse button + drag** – pan the target
- **Escape** or closing the window – quit

The cloud layer fades out as the camera comes closer than 7.5 units to the
Earth's centre and is gone below 6.5. The frame rate is shown in the
top-left corner. The globe is drawn by a simple software renderer that
samples the sphere mesh, so it is a coarse preview rather than a
GPU-quality image.

The viewer can also be driven from code:

```python
from tlescope.app import TLEscope

with TLEscope("resources") as app:
    if app.init():
        app.run()
```

## Reading TLE files

```python
from tlescope.tleparser import parse_tle_file

for entry in parse_tle_file("stations.txt"):
    print(entry.name, entry.line1, entry.line2)
```

Each entry is a frozen `TLEEntry` of a name line followed by its two
element lines. Blank name lines are skipped. If the file does not exist,
`FileNotFoundError` is raised. If the file ends partway through an entry,
a warning is logged through the `logging` module and the entries read so
far are returned.

## Building blocks

- `tlescope.vecmath` – `Vector2`, `Vector3` (addition, subtraction,
  scaling, `dot`, `cross`, `length`, `normalized`, `distance_to`) and a
  4×4 `Matrix` (`identity`, `rotate`, `apply`, and composition with
  `a @ b`, which applies `b` first), along with `clamp`, `lerp_float` and
  `lat_lon_to_xyz`:

  ```python
  from tlescope.vecmath import lat_lon_to_xyz

  position = lat_lon_to_xyz(51.5, -0.1, 5.0)
  ```

- `tlescope.camera` – `CameraController.update(InputState(...))` eases an
  orbiting `Camera3D` towards the requested angles and distance.
- `tlescope.billboard` – `StandardBillboard`, `BillboardRec` and
  `BillboardPro`, with `Color`, `Rectangle` and `BillboardType`.
- `tlescope.scene` – `Scene` holds models and billboards by name;
  `BillboardHelper` creates billboards and registers them;
  `gen_sphere_mesh` and `rotate_texcoords` build the globe's mesh.
- `tlescope.point` – `create_point` loads an image as a textured marker.
- `tlescope.renderer` – `Renderer`, plus `cloud_alpha` and `billboard_up`.

## What it does not do

The TLE reader only splits a file into entries; nothing in the package
propagates orbits from them, and the viewer does not place satellites
from TLE data. The only billboard shown is a single fixed location marker.
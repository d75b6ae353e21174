"""Scene contents: the Earth and cloud spheres and the named billboards."""

from __future__ import annotations

import math
from collections import defaultdict
from dataclasses import dataclass, field, replace
from typing import Any, Iterable

from .billboard import (
    WHITE,
    Billboard,
    BillboardPro,
    BillboardRec,
    Color,
    Rectangle,
    StandardBillboard,
)
from .vecmath import Matrix, Vector2, Vector3

__all__ = [
    "Mesh",
    "Model",
    "Scene",
    "BillboardHelper",
    "gen_sphere_mesh",
    "rotate_texcoords",
    "EARTH_RADIUS",
]

EARTH_RADIUS = 5.0
EARTH_RINGS = 128
EARTH_SLICES = 256


@dataclass(frozen=True)
class Mesh:
    """A sphere mesh laid out as ``rings + 1`` rows of ``slices + 1`` vertices."""

    vertices: tuple[Vector3, ...]
    normals: tuple[Vector3, ...]
    texcoords: tuple[tuple[float, float], ...]
    rings: int
    slices: int
    radius: float


@dataclass
class Model:
    """A mesh placed in the scene with a transform, a texture and a diffuse colour."""

    mesh: Mesh
    transform: Matrix = field(default_factory=Matrix.identity)
    texture: Any = None
    color: Color = WHITE


def gen_sphere_mesh(radius: float, rings: int, slices: int) -> Mesh:
    """Build a UV sphere whose poles lie on the z axis.

    Row ``i`` runs from the +z pole (``i == 0``) to the -z pole; texture
    coordinates are ``(i / rings, 1 - j / slices)``.
    """
    if rings < 1 or slices < 3:
        raise ValueError("a sphere needs at least 1 ring and 3 slices")
    normals = []
    texcoords = []
    for ring in range(rings + 1):
        phi = math.pi * ring / rings
        for slice_ in range(slices + 1):
            theta = 2.0 * math.pi * slice_ / slices
            normals.append(
                Vector3(
                    math.sin(phi) * math.cos(theta),
                    math.sin(phi) * math.sin(theta),
                    math.cos(phi),
                )
            )
            texcoords.append((ring / rings, 1.0 - slice_ / slices))
    vertices = tuple(normal * radius for normal in normals)
    return Mesh(vertices, tuple(normals), tuple(texcoords), rings, slices, float(radius))


def rotate_texcoords(
    texcoords: Iterable[tuple[float, float]],
) -> tuple[tuple[float, float], ...]:
    """Rotate texture coordinates 90 degrees counter-clockwise about (0.5, 0.5)."""
    return tuple((0.5 - (v - 0.5), (u - 0.5) + 0.5) for u, v in texcoords)


def _upright_transform() -> Matrix:
    return Matrix.identity() @ Matrix.rotate(Vector3(1.0, 0.0, 0.0), math.radians(-90.0))


class Scene:
    """Holds models and billboards by name; a name may be used more than once."""

    def __init__(self) -> None:
        self.earth_texture: Any = None
        self.cloud_texture: Any = None
        self._models: defaultdict[str, list[Model]] = defaultdict(list)
        self._billboards: defaultdict[str, list[Billboard]] = defaultdict(list)

    def gen_earth(self, earth_texture: Any, cloud_texture: Any) -> None:
        """Create the "earth" and "cloud" sphere models with the given textures."""
        sphere = gen_sphere_mesh(EARTH_RADIUS, EARTH_RINGS, EARTH_SLICES)
        rotated = rotate_texcoords(sphere.texcoords)
        earth_mesh = replace(sphere, texcoords=rotated)
        cloud_mesh = replace(sphere, texcoords=rotated)

        self.earth_texture = earth_texture
        self.cloud_texture = cloud_texture
        self._models["earth"].append(
            Model(earth_mesh, _upright_transform(), earth_texture)
        )
        self._models["cloud"].append(
            Model(cloud_mesh, _upright_transform(), cloud_texture)
        )

    def get_model_by_name(self, name: str) -> Model | None:
        """The first model added under ``name``, or None."""
        models = self._models.get(name)
        return models[0] if models else None

    def get_billboard_by_name(self, name: str) -> Billboard | None:
        """The first billboard added under ``name``, or None."""
        billboards = self._billboards.get(name)
        return billboards[0] if billboards else None

    def add_billboard(self, name: str, billboard: Billboard) -> None:
        self._billboards[name].append(billboard)


class BillboardHelper:
    """Creates billboards and registers them with a scene."""

    def __init__(self, scene: Scene) -> None:
        self.scene = scene

    def create_billboard(
        self, name: str, texture: Any, position: Vector3, scale: float, tint: Color
    ) -> StandardBillboard:
        billboard = StandardBillboard(texture, position, scale, tint)
        self.scene.add_billboard(name, billboard)
        return billboard

    def create_billboard_rec(
        self,
        name: str,
        texture: Any,
        source: Rectangle,
        position: Vector3,
        size: Vector2,
        tint: Color,
    ) -> BillboardRec:
        billboard = BillboardRec(texture, source, position, size, tint)
        self.scene.add_billboard(name, billboard)
        return billboard

    def create_billboard_pro(
        self,
        name: str,
        texture: Any,
        source: Rectangle,
        position: Vector3,
        up: Vector3,
        size: Vector2,
        origin: Vector2,
        rotation: float,
        tint: Color,
    ) -> BillboardPro:
        billboard = BillboardPro(
            texture, source, position, up, size, origin, rotation, tint
        )
        self.scene.add_billboard(name, billboard)
        return billboard
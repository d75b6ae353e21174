"""Software renderer for the globe, its cloud layer and the billboards."""

from __future__ import annotations

import math
import os
from dataclasses import dataclass
from typing import Any, Iterator

import pygame

from .billboard import (
    BLACK,
    WHITE,
    Billboard,
    BillboardType,
    Color,
    Rectangle,
)
from .camera import Camera3D, CameraController
from .scene import BillboardHelper, Model, Scene
from .vecmath import Matrix, Vector2, Vector3

__all__ = ["Renderer", "cloud_alpha", "billboard_up"]

FADE_START = 7.5
FADE_END = 6.5
CLOUD_SCALE = 1.01
FONT_SIZE = 16
LOCATION_BILLBOARD = "MyLocation"

_NEAR = 0.01
_SAMPLE_RINGS = 32
_SAMPLE_SLICES = 64


def cloud_alpha(distance: float) -> float:
    """Opacity of the cloud layer for a camera at ``distance`` from the Earth's centre."""
    if distance >= FADE_START:
        return 1.0
    if distance <= FADE_END:
        return 0.0
    return (distance - FADE_END) / (FADE_START - FADE_END)


def billboard_up(
    camera_position: Vector3, camera_up: Vector3, billboard_position: Vector3
) -> Vector3:
    """Up vector that keeps a billboard facing the camera and upright."""
    direction = (camera_position - billboard_position).normalized()
    right = camera_up.cross(direction).normalized()
    return direction.cross(right)


@dataclass(frozen=True)
class _View:
    origin: Vector3
    right: Vector3
    up: Vector3
    forward: Vector3
    focal: float
    cx: float
    cy: float

    @classmethod
    def from_camera(cls, camera: Camera3D, width: int, height: int) -> _View:
        forward = (camera.target - camera.position).normalized()
        right = forward.cross(camera.up).normalized()
        up = right.cross(forward)
        focal = (height / 2.0) / math.tan(math.radians(camera.fovy) / 2.0)
        return cls(camera.position, right, up, forward, focal, width / 2.0, height / 2.0)

    def project(self, point: Vector3) -> tuple[float, float, float] | None:
        """Screen x, y and depth of ``point``, or None if it is behind the camera."""
        offset = point - self.origin
        depth = offset.dot(self.forward)
        if depth <= _NEAR:
            return None
        scale = self.focal / depth
        return (
            self.cx + offset.dot(self.right) * scale,
            self.cy - offset.dot(self.up) * scale,
            depth,
        )


def _texture_size(texture: Any) -> tuple[int, int]:
    return texture.get_size() if texture is not None else (0, 0)


def _crop(texture: pygame.Surface, source: Rectangle) -> pygame.Surface | None:
    rect = pygame.Rect(
        round(source.x), round(source.y), round(abs(source.width)), round(abs(source.height))
    ).clip(texture.get_rect())
    if rect.width == 0 or rect.height == 0:
        return None
    image = texture.subsurface(rect).copy()
    if source.width < 0 or source.height < 0:
        image = pygame.transform.flip(image, source.width < 0, source.height < 0)
    return image


def _samples(model: Model) -> Iterator[tuple[Vector3, tuple[float, float]]]:
    """A sparse grid of (vertex, texcoord) pairs covering the mesh."""
    mesh = model.mesh
    ring_step = max(1, mesh.rings // _SAMPLE_RINGS)
    slice_step = max(1, mesh.slices // _SAMPLE_SLICES)
    row_len = mesh.slices + 1
    for start in range(0, len(mesh.vertices), row_len * ring_step):
        end = start + row_len
        yield from zip(
            mesh.vertices[start:end:slice_step], mesh.texcoords[start:end:slice_step]
        )


class Renderer:
    """Draws the scene as seen by the controller's camera."""

    def __init__(
        self,
        scene: Scene,
        controller: CameraController,
        width: int = 1280,
        height: int = 720,
        font_path: str | os.PathLike[str] | None = None,
    ) -> None:
        self.scene = scene
        self.controller = controller
        self.font_path = font_path
        self.target = pygame.Surface((width, height))
        self.earth_center = Vector3(0.0, 0.0, 0.0)
        self.cloud_sphere_angle = 0.0
        self.cloud_rotation_mul = 0.001
        self.base_cloud_transform: Matrix | None = None
        self._font: pygame.font.Font | None = None

    def set_scene_specific(
        self, helper: BillboardHelper, texture: Any
    ) -> Billboard:
        """Remember the cloud layer's base transform and place the location marker."""
        cloud = self.scene.get_model_by_name("cloud")
        if cloud is not None:
            self.base_cloud_transform = cloud.transform
        width, height = _texture_size(texture)
        return helper.create_billboard_pro(
            LOCATION_BILLBOARD,
            texture,
            Rectangle(0.0, 0.0, float(width), float(height)),
            Vector3(0.0, 6.0, 0.0),
            Vector3(0.0, 1.0, 0.0),
            Vector2(0.2, 0.2),
            Vector2(0.5, 0.5),
            0.0,
            WHITE,
        )

    def advance_clouds(self, frame_time: float) -> float:
        """Turn the cloud layer about its axis; returns the new angle in radians."""
        self.cloud_sphere_angle = math.fmod(
            self.cloud_sphere_angle + self.cloud_rotation_mul * frame_time, 2.0 * math.pi
        )
        cloud = self.scene.get_model_by_name("cloud")
        if cloud is not None:
            if self.base_cloud_transform is None:
                self.base_cloud_transform = cloud.transform
            spin = Matrix.rotate(Vector3(0.0, 0.0, 1.0), self.cloud_sphere_angle)
            cloud.transform = self.base_cloud_transform @ spin
        return self.cloud_sphere_angle

    def resize(self, width: int, height: int) -> None:
        """Recreate the off-screen target at the new window size."""
        self.target = pygame.Surface((width, height))

    def render(self, surface: pygame.Surface, frame_time: float, fps: float) -> None:
        """Draw one frame onto ``surface``."""
        target = self.target
        target.fill(tuple(BLACK))
        camera = self.controller.camera
        view = _View.from_camera(camera, *target.get_size())

        earth = self.scene.get_model_by_name("earth")
        if earth is not None:
            self._draw_model(target, view, earth, 1.0, blended=False)

        cloud = self.scene.get_model_by_name("cloud")
        if cloud is not None:
            self.advance_clouds(frame_time)
            alpha = cloud_alpha(camera.position.distance_to(self.earth_center))
            level = int(255 * alpha)
            cloud.color = Color(level, level, level, level)
            if level:
                self._draw_model(target, view, cloud, CLOUD_SCALE, blended=True)

        billboard = self.scene.get_billboard_by_name(LOCATION_BILLBOARD)
        if billboard is not None:
            billboard.up = billboard_up(camera.position, camera.up, billboard.position)
            self.draw_billboard(target, billboard)

        surface.fill(tuple(BLACK))
        surface.blit(target, (0, 0))
        text = self._get_font().render(f"FPS: {int(fps)}", True, tuple(WHITE))
        surface.blit(text, (10, 10))

    def draw_billboard(
        self, surface: pygame.Surface, billboard: Billboard
    ) -> pygame.Rect | None:
        """Draw ``billboard``; returns the screen area covered, or None if not drawn."""
        texture = billboard.texture
        if texture is None:
            return None
        view = _View.from_camera(self.controller.camera, *surface.get_size())
        projected = view.project(billboard.position)
        if projected is None:
            return None
        sx, sy, depth = projected

        tex_width, tex_height = _texture_size(texture)
        if billboard.kind is BillboardType.BILLBOARD:
            if tex_height == 0:
                return None
            source = Rectangle(0.0, 0.0, float(tex_width), float(tex_height))
            width = billboard.scale * tex_width / tex_height
            height = billboard.scale
            origin = Vector2(width / 2.0, height / 2.0)
        elif billboard.kind is BillboardType.BILLBOARD_REC:
            source = billboard.source
            width, height = billboard.size
            origin = Vector2(width / 2.0, height / 2.0)
        else:
            source = billboard.source
            width, height = billboard.size
            origin = billboard.origin

        image = _crop(texture, source)
        if image is None:
            return None
        pixels = view.focal / depth
        px_width = max(1, round(abs(width) * pixels))
        px_height = max(1, round(abs(height) * pixels))
        image = pygame.transform.scale(image, (px_width, px_height))
        if billboard.tint != WHITE:
            image.fill(tuple(billboard.tint), special_flags=pygame.BLEND_RGBA_MULT)

        angle = self._screen_roll(view, billboard.position, billboard.up, sx, sy)
        angle += billboard.rotation
        rotated = pygame.transform.rotate(image, angle)

        dx = px_width / 2.0 - origin.x * pixels
        dy = px_height / 2.0 - origin.y * pixels
        rad = math.radians(angle)
        centre_x = sx + dx * math.cos(rad) + dy * math.sin(rad)
        centre_y = sy - dx * math.sin(rad) + dy * math.cos(rad)
        rect = rotated.get_rect(center=(round(centre_x), round(centre_y)))
        surface.blit(rotated, rect)
        return rect

    @staticmethod
    def _screen_roll(
        view: _View, position: Vector3, up: Vector3, sx: float, sy: float
    ) -> float:
        """Counter-clockwise angle in degrees of ``up`` as seen on screen."""
        tip = view.project(position + up.normalized() * 0.01)
        if tip is None:
            return 0.0
        vx, vy = tip[0] - sx, tip[1] - sy
        if math.isclose(vx, 0.0, abs_tol=1e-12) and math.isclose(vy, 0.0, abs_tol=1e-12):
            return 0.0
        return math.degrees(math.atan2(-vx, -vy))

    def _draw_model(
        self,
        surface: pygame.Surface,
        view: _View,
        model: Model,
        scale: float,
        blended: bool,
    ) -> None:
        mesh = model.mesh
        ring_step = max(1, mesh.rings // _SAMPLE_RINGS)
        slice_step = max(1, mesh.slices // _SAMPLE_SLICES)
        spacing = (
            mesh.radius
            * scale
            * math.pi
            * max(ring_step / mesh.rings, 2.0 * slice_step / mesh.slices)
        )
        layer = (
            pygame.Surface(surface.get_size(), pygame.SRCALPHA) if blended else surface
        )
        centre = model.transform.apply(Vector3())
        tex_width, tex_height = _texture_size(model.texture)

        for vertex, uv in _samples(model):
            world = model.transform.apply(vertex * scale)
            if (world - centre).dot(view.origin - world) <= 0.0:
                continue
            projected = view.project(world)
            if projected is None:
                continue
            sx, sy, depth = projected
            size = math.ceil(spacing * view.focal / depth) + 1
            colour = self._shade(model, tex_width, tex_height, uv, blended)
            layer.fill(colour, (int(sx - size / 2), int(sy - size / 2), size, size))

        if blended:
            surface.blit(layer, (0, 0))

    @staticmethod
    def _shade(
        model: Model,
        tex_width: int,
        tex_height: int,
        uv: tuple[float, float],
        blended: bool,
    ) -> tuple[int, int, int, int]:
        if model.texture is None or tex_width == 0 or tex_height == 0:
            r, g, b, a = 255, 255, 255, 255
        else:
            u, v = uv
            x = min(tex_width - 1, max(0, int(u * (tex_width - 1))))
            y = min(tex_height - 1, max(0, int(v * (tex_height - 1))))
            r, g, b, a = model.texture.get_at((x, y))
        tint = model.color
        if blended:
            return (r, g, b, a * tint.a // 255)
        return (r * tint.r // 255, g * tint.g // 255, b * tint.b // 255, 255)

    def _get_font(self) -> pygame.font.Font:
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            path = os.fspath(self.font_path) if self.font_path is not None else None
            self._font = pygame.font.Font(path, FONT_SIZE)
        return self._font
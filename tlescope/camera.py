"""Orbit camera with smoothed rotation, zoom and panning."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .vecmath import Vector2, Vector3, clamp

__all__ = ["InputState", "Camera3D", "CameraController"]

SMOOTH_FACTOR = 0.1
MAX_PITCH = 1.5
MAX_DISTANCE = 50.0
MAX_ZOOM_SPEED = 1.5
ZOOM_SPEED_FACTOR = 0.15
PAN_SPEED_FACTOR = 0.001


@dataclass(frozen=True)
class InputState:
    """Mouse state for one frame."""

    right_button_down: bool = False
    middle_button_down: bool = False
    mouse_delta: Vector2 = field(default_factory=Vector2)
    wheel: float = 0.0


@dataclass
class Camera3D:
    """A perspective camera."""

    position: Vector3 = field(default_factory=lambda: Vector3(16.0, 16.0, 16.0))
    target: Vector3 = field(default_factory=Vector3)
    up: Vector3 = field(default_factory=lambda: Vector3(0.0, 1.0, 0.0))
    fovy: float = 45.0


@dataclass
class CameraController:
    """Orbits a camera around its target, easing towards the requested view."""

    camera: Camera3D = field(default_factory=Camera3D)
    distance: float = 16.0
    angle_x: float = 0.0
    angle_y: float = 0.0
    sensitivity: float = 0.01
    target_distance: float = 16.0
    target_angle_x: float = 0.0
    target_angle_y: float = 0.0
    max_zoom: float = 0.5

    def update(self, inputs: InputState) -> None:
        """Advance one frame using the given mouse input."""
        camera = self.camera

        if inputs.right_button_down:
            self.target_angle_x -= inputs.mouse_delta.x * self.sensitivity
            self.target_angle_y += inputs.mouse_delta.y * self.sensitivity
            self.target_angle_y = clamp(self.target_angle_y, -MAX_PITCH, MAX_PITCH)
        self.angle_x += (self.target_angle_x - self.angle_x) * SMOOTH_FACTOR
        self.angle_y += (self.target_angle_y - self.angle_y) * SMOOTH_FACTOR

        if inputs.wheel != 0.0:
            zoom_speed = min(MAX_ZOOM_SPEED, ZOOM_SPEED_FACTOR * self.distance)
            self.target_distance -= inputs.wheel * zoom_speed
            self.target_distance = clamp(self.target_distance, self.max_zoom, MAX_DISTANCE)
        self.distance += (self.target_distance - self.distance) * SMOOTH_FACTOR

        if inputs.middle_button_down:
            forward = (camera.target - camera.position).normalized()
            right = forward.cross(camera.up).normalized()
            up = right.cross(forward).normalized()
            pan_speed = PAN_SPEED_FACTOR * self.distance
            camera.target = camera.target - right * (inputs.mouse_delta.x * pan_speed)
            camera.target = camera.target + up * (inputs.mouse_delta.y * pan_speed)

        target = camera.target
        camera.position = Vector3(
            target.x + self.distance * math.cos(self.angle_y) * math.sin(self.angle_x),
            target.y + self.distance * math.sin(self.angle_y),
            target.z + self.distance * math.cos(self.angle_y) * math.cos(self.angle_x),
        )
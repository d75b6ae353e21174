"""A textured point marker placed in the scene."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

import pygame

from .vecmath import Vector3

__all__ = ["Point", "create_point"]


@dataclass
class Point:
    texture: pygame.Surface
    position: Vector3
    scale: float


def create_point(
    image_path: str | os.PathLike[str], position: Vector3, scale: float
) -> Point:
    """Load the image at ``image_path`` as the texture of a new point.

    Raises FileNotFoundError if the image does not exist.
    """
    path = Path(image_path)
    with path.open("rb") as stream:
        texture = pygame.image.load(stream, path.name)
    return Point(texture, position, scale)
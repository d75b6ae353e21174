import pygame
import pytest

from tlescope.point import create_point
from tlescope.vecmath import Vector3


def test_create_point_loads_texture(tmp_path):
    image = pygame.Surface((3, 5))
    image.fill((10, 20, 30))
    path = tmp_path / "marker.png"
    pygame.image.save(image, str(path))

    point = create_point(path, Vector3(1.0, 2.0, 3.0), 0.25)

    assert point.texture.get_size() == (3, 5)
    assert tuple(point.texture.get_at((0, 0)))[:3] == (10, 20, 30)
    assert point.position == Vector3(1.0, 2.0, 3.0)
    assert point.scale == 0.25


def test_create_point_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        create_point(tmp_path / "absent.png", Vector3(), 1.0)
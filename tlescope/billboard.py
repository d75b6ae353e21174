"""Billboards: camera-facing textured quads placed in the scene."""

from __future__ import annotations

from abc import ABC
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, ClassVar

from .vecmath import Vector2, Vector3

__all__ = [
    "BillboardType",
    "Color",
    "Rectangle",
    "Billboard",
    "StandardBillboard",
    "BillboardRec",
    "BillboardPro",
    "WHITE",
    "BLACK",
]


class BillboardType(IntEnum):
    BILLBOARD = 0
    BILLBOARD_REC = 1
    BILLBOARD_PRO = 2


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b, self.a):
            if not 0 <= channel <= 255:
                raise ValueError(f"colour channel out of range: {channel}")

    def __iter__(self):
        yield from (self.r, self.g, self.b, self.a)


WHITE = Color(255, 255, 255, 255)
BLACK = Color(0, 0, 0, 255)


@dataclass(frozen=True)
class Rectangle:
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0


def _fixed(value: Any) -> property:
    """An attribute that a billboard kind does not use: it reads as a
    default and ignores assignments."""

    def getter(self: Billboard) -> Any:
        return value

    def setter(self: Billboard, _new: Any) -> None:
        pass

    return property(getter, setter)


class Billboard(ABC):
    """Common base of the three billboard kinds.

    Every billboard exposes texture, position, tint, scale, source, up,
    size, origin and rotation; attributes a kind does not use keep their
    defaults.
    """

    kind: ClassVar[BillboardType]


@dataclass
class StandardBillboard(Billboard):
    """A billboard drawn with the whole texture at a uniform scale."""

    kind: ClassVar[BillboardType] = BillboardType.BILLBOARD

    texture: Any
    position: Vector3
    scale: float
    tint: Color = field(default=WHITE)

    source = _fixed(Rectangle())
    up = _fixed(Vector3(0.0, 1.0, 0.0))
    size = _fixed(Vector2())
    origin = _fixed(Vector2())
    rotation = _fixed(0.0)


@dataclass
class BillboardRec(Billboard):
    """A billboard drawn from a source rectangle at a given size."""

    kind: ClassVar[BillboardType] = BillboardType.BILLBOARD_REC

    texture: Any
    source: Rectangle
    position: Vector3
    size: Vector2
    tint: Color = field(default=WHITE)

    scale = _fixed(1.0)
    up = _fixed(Vector3(0.0, 1.0, 0.0))
    origin = _fixed(Vector2())
    rotation = _fixed(0.0)


@dataclass
class BillboardPro(Billboard):
    """A billboard with its own up vector, origin and rotation."""

    kind: ClassVar[BillboardType] = BillboardType.BILLBOARD_PRO

    texture: Any
    source: Rectangle
    position: Vector3
    up: Vector3
    size: Vector2
    origin: Vector2
    rotation: float
    tint: Color = field(default=WHITE)

    scale = _fixed(1.0)
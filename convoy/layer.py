"""Layer and sprite data shared by the editor."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from convoy.geometry import Rect, Vec2


@dataclass
class Layer:
    """A named raster layer of packed RGBA pixels, transparent by default."""

    name: str
    width: int
    height: int
    visible: bool = True
    locked: bool = False
    opacity: float = 1.0
    pixels: list[int] | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("layer dimensions must not be negative")
        size = self.width * self.height
        if self.pixels is None:
            self.pixels = [0] * size
        elif len(self.pixels) != size:
            raise ValueError(f"expected {size} pixels, got {len(self.pixels)}")


@dataclass
class SpriteMetadata:
    """Pivot point, collision box and name attached to a sprite."""

    pivot: Vec2 = field(default_factory=Vec2)
    hitbox: Rect = field(default_factory=Rect)
    sprite_name: str = ""


class ToolType(Enum):
    PENCIL = 0
    ERASER = 1
    BUCKET = 2
    COLOR_PICKER = 3
    MOVE = 4
    PIVOT = 5
    HITBOX = 6
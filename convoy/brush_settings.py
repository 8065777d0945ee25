"""Brush editing state: shape parameters and custom masks."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional

from convoy.brush import Brush, BrushShape, generate_parametric_mask
from convoy.canvas import Canvas


@dataclass
class BrushSettings:
    """The brush being edited and whether its settings panel is open."""

    brush: Brush = field(default_factory=Brush)
    is_open: bool = True

    def set_custom_mask(self, mask: Iterable[int]) -> None:
        """Install an RGBA mask; an empty mask turns the custom mask off."""
        data = bytes(mask)
        self.brush.custom_mask = data
        self.brush.has_custom_mask = bool(data)

    def generate_mask(self) -> bytes:
        """Render the current shape into a custom mask and switch to the custom shape."""
        mask = generate_parametric_mask(self.brush.shape, self.brush.size, self.brush.hardness)
        self.set_custom_mask(mask)
        self.brush.shape = BrushShape.CUSTOM
        return mask

    def capture_from_canvas(self, canvas: Optional[Canvas], x: int, y: int, w: int, h: int) -> None:
        """Turn a region of the active layer into a grey custom mask keeping its alpha."""
        if canvas is None:
            return
        if w < 0 or h < 0:
            raise ValueError("capture width and height must not be negative")
        mask = bytearray()
        for dy in range(h):
            for dx in range(w):
                color = canvas.get_pixel(x + dx, y + dy)
                gray = (color.r + color.g + color.b) // 3
                mask.extend((gray, gray, gray, color.a))
        self.set_custom_mask(mask)
        self.brush.shape = BrushShape.CUSTOM
"""Layered raster canvas."""

from __future__ import annotations

from convoy.color import Color
from convoy.layer import Layer

MAX_LAYERS = 32
_BACKDROP = 0xFF1F1F1F
_TRANSPARENT = Color(0, 0, 0, 0)


class LayerLimitError(RuntimeError):
    """Raised when a canvas already holds the maximum number of layers."""


class Canvas:
    """A fixed-size stack of layers, with drawing on the active one."""

    def __init__(self, width: int, height: int) -> None:
        self._width = width
        self._height = height
        self._layers: list[Layer] = [Layer("Background", width, height)]
        self._active = 0

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def layers(self) -> list[Layer]:
        return self._layers

    @property
    def active_layer(self) -> Layer:
        return self._layers[self._active]

    @property
    def active_layer_index(self) -> int:
        return self._active

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def set_pixel(self, x: int, y: int, color: Color) -> None:
        """Write a pixel on the active layer; positions outside are ignored."""
        if self._in_bounds(x, y):
            self.active_layer.pixels[y * self._width + x] = color.to_rgba()

    def get_pixel(self, x: int, y: int) -> Color:
        """Read a pixel of the active layer; outside positions read as transparent."""
        if not self._in_bounds(x, y):
            return _TRANSPARENT
        return Color.from_rgba(self.active_layer.pixels[y * self._width + x])

    def add_layer(self, name: str) -> None:
        if len(self._layers) >= MAX_LAYERS:
            raise LayerLimitError(f"Maximum {MAX_LAYERS} layers allowed")
        self._layers.append(Layer(name, self._width, self._height))

    def remove_layer(self, index: int) -> None:
        """Remove a layer; invalid indices and the last remaining layer are left alone."""
        if not 0 <= index < len(self._layers) or len(self._layers) == 1:
            return
        del self._layers[index]
        if self._active >= len(self._layers):
            self._active = len(self._layers) - 1

    def set_active_layer(self, index: int) -> None:
        """Select the layer to draw on; invalid indices are ignored."""
        if 0 <= index < len(self._layers):
            self._active = index

    def clear_active_layer(self) -> None:
        pixels = self.active_layer.pixels
        pixels[:] = [0] * len(pixels)

    def composite(self) -> list[int]:
        """Blend the visible layers over a dark backdrop into packed 32-bit words.

        Each word is read with its top byte as alpha followed by three colour
        bytes, and the result is packed in the same layout.
        """
        output = [_BACKDROP] * (self._width * self._height)
        for layer in self._layers:
            if not layer.visible:
                continue
            opacity = layer.opacity
            for i, src in enumerate(layer.pixels):
                src_a = min(max(int(((src >> 24) & 0xFF) * opacity), 0), 255)
                if src_a <= 0:
                    continue
                src_r = (src >> 16) & 0xFF
                src_g = (src >> 8) & 0xFF
                src_b = src & 0xFF
                dst = output[i]
                dst_a = (dst >> 24) & 0xFF
                dst_r = (dst >> 16) & 0xFF
                dst_g = (dst >> 8) & 0xFF
                dst_b = dst & 0xFF
                alpha = src_a / 255.0
                dst_r = int(dst_r * (1 - alpha) + src_r * alpha)
                dst_g = int(dst_g * (1 - alpha) + src_g * alpha)
                dst_b = int(dst_b * (1 - alpha) + src_b * alpha)
                dst_a = max(dst_a, src_a)
                output[i] = (dst_a << 24) | (dst_r << 16) | (dst_g << 8) | dst_b
        return output
"""Recording and stamping brush strokes onto a canvas."""

from __future__ import annotations

import math
from typing import Optional

from convoy.brush import Brush, BrushPoint, BrushShape, map_pressure
from convoy.canvas import Canvas
from convoy.color import Color


class BrushStroke:
    """A sequence of pen samples that can be stamped with a brush."""

    def __init__(self) -> None:
        self._points: list[BrushPoint] = []

    def __len__(self) -> int:
        return len(self._points)

    @property
    def points(self) -> tuple[BrushPoint, ...]:
        return tuple(self._points)

    def add_point(self, x: float, y: float, pressure: float, angle: float) -> None:
        self._points.append(BrushPoint(x, y, pressure, angle))

    def reset(self) -> None:
        self._points.clear()

    def apply(self, canvas: Optional[Canvas], brush: Brush, color: Color) -> None:
        """Stamp the brush at every point, scaling alpha by the mapped pressure."""
        if canvas is None or not self._points:
            return
        for point in self._points:
            mapped = map_pressure(point.pressure, brush.curve)
            alpha = min(max(int(color.a * mapped), 0), 255)
            adjusted = Color(color.r, color.g, color.b, alpha)
            self._render_stamp(canvas, point, brush, adjusted)

    def should_render(self, prev: BrushPoint, curr: BrushPoint, brush: Brush) -> bool:
        """True once the pen has moved at least the brush spacing since the last stamp."""
        distance = math.hypot(curr.x - prev.x, curr.y - prev.y)
        return distance >= brush.size * brush.spacing / 100.0

    @staticmethod
    def _in_shape(brush: Brush, dx: int, dy: int, half: int) -> bool:
        if brush.shape is BrushShape.CIRCLE:
            return math.sqrt(dx * dx + dy * dy) <= half
        if brush.shape is BrushShape.SQUARE:
            return True
        if brush.shape is BrushShape.CUSTOM and brush.has_custom_mask:
            mx = dx + half
            my = dy + half
            if 0 <= mx < brush.size and 0 <= my < brush.size:
                index = (my * brush.size + mx) * 4 + 3
                if index < len(brush.custom_mask):
                    return brush.custom_mask[index] > 128
        return False

    def _render_stamp(self, canvas: Canvas, point: BrushPoint, brush: Brush, color: Color) -> None:
        half = brush.size // 2
        cx = int(point.x)
        cy = int(point.y)
        for dy in range(-half, half + 1):
            for dx in range(-half, half + 1):
                if self._in_shape(brush, dx, dy, half):
                    canvas.set_pixel(cx + dx, cy + dy, color)
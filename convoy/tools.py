"""Canvas editing tools driven by mouse events."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque
from typing import Optional

from convoy.canvas import Canvas
from convoy.color import Color
from convoy.geometry import Rect, Vec2

_TRANSPARENT = Color(0, 0, 0, 0)


def _line_points(from_x: int, from_y: int, to_x: int, to_y: int):
    """Integer points from one end of a segment to the other, both ends included."""
    delta_x = to_x - from_x
    delta_y = to_y - from_y
    steps = max(abs(delta_x), abs(delta_y)) + 1
    for i in range(steps):
        t = i / (steps - 1) if steps > 1 else 0.0
        yield int(from_x + delta_x * t), int(from_y + delta_y * t)


class Tool(ABC):
    """A tool that reacts to presses, drags and releases on a canvas."""

    def __init__(self) -> None:
        self.foreground = Color(255, 255, 255, 255)
        self.background = Color(0, 0, 0, 0)

    @abstractmethod
    def on_mouse_down(self, canvas: Optional[Canvas], x: int, y: int) -> None:
        """Handle a button press at a canvas position."""

    @abstractmethod
    def on_mouse_drag(
        self, canvas: Optional[Canvas], from_x: int, from_y: int, to_x: int, to_y: int
    ) -> None:
        """Handle movement with the button held."""

    @abstractmethod
    def on_mouse_up(self, canvas: Optional[Canvas], x: int, y: int) -> None:
        """Handle the button release."""


class PencilTool(Tool):
    """Draws hard single-pixel lines in the foreground colour."""

    def on_mouse_down(self, canvas: Optional[Canvas], x: int, y: int) -> None:
        canvas.set_pixel(x, y, self.foreground)

    def on_mouse_drag(
        self, canvas: Optional[Canvas], from_x: int, from_y: int, to_x: int, to_y: int
    ) -> None:
        for x, y in _line_points(from_x, from_y, to_x, to_y):
            canvas.set_pixel(x, y, self.foreground)

    def on_mouse_up(self, canvas: Optional[Canvas], x: int, y: int) -> None:
        return None


class EraserTool(Tool):
    """Clears pixels to full transparency."""

    def on_mouse_down(self, canvas: Optional[Canvas], x: int, y: int) -> None:
        canvas.set_pixel(x, y, _TRANSPARENT)

    def on_mouse_drag(
        self, canvas: Optional[Canvas], from_x: int, from_y: int, to_x: int, to_y: int
    ) -> None:
        for x, y in _line_points(from_x, from_y, to_x, to_y):
            canvas.set_pixel(x, y, _TRANSPARENT)

    def on_mouse_up(self, canvas: Optional[Canvas], x: int, y: int) -> None:
        return None


class BucketTool(Tool):
    """Flood-fills the four-connected region of similar colour under the click."""

    def __init__(self, tolerance: int = 10) -> None:
        super().__init__()
        self.tolerance = tolerance

    def _similar(self, first: Color, second: Color) -> bool:
        distance = (
            (first.r - second.r) ** 2
            + (first.g - second.g) ** 2
            + (first.b - second.b) ** 2
            + (first.a - second.a) ** 2
        )
        return distance <= self.tolerance * self.tolerance

    def _flood_fill(self, canvas: Canvas, x: int, y: int, target: Color, fill: Color) -> None:
        queue = deque([(x, y)])
        visited = {(x, y)}
        while queue:
            cx, cy = queue.popleft()
            if not self._similar(canvas.get_pixel(cx, cy), target):
                continue
            canvas.set_pixel(cx, cy, fill)
            for nx, ny in ((cx + 1, cy), (cx - 1, cy), (cx, cy + 1), (cx, cy - 1)):
                if 0 <= nx < canvas.width and 0 <= ny < canvas.height and (nx, ny) not in visited:
                    visited.add((nx, ny))
                    queue.append((nx, ny))

    def on_mouse_down(self, canvas: Optional[Canvas], x: int, y: int) -> None:
        if not (0 <= x < canvas.width and 0 <= y < canvas.height):
            return
        target = canvas.get_pixel(x, y)
        self._flood_fill(canvas, x, y, target, self.foreground)

    def on_mouse_drag(
        self, canvas: Optional[Canvas], from_x: int, from_y: int, to_x: int, to_y: int
    ) -> None:
        return None

    def on_mouse_up(self, canvas: Optional[Canvas], x: int, y: int) -> None:
        return None


class PivotTool(Tool):
    """Places the sprite pivot point where the pointer is."""

    def __init__(self) -> None:
        super().__init__()
        self.pivot = Vec2(0.0, 0.0)

    def on_mouse_down(self, canvas: Optional[Canvas], x: int, y: int) -> None:
        self.pivot = Vec2(float(x), float(y))

    def on_mouse_drag(
        self, canvas: Optional[Canvas], from_x: int, from_y: int, to_x: int, to_y: int
    ) -> None:
        self.pivot = Vec2(float(to_x), float(to_y))

    def on_mouse_up(self, canvas: Optional[Canvas], x: int, y: int) -> None:
        self.pivot = Vec2(float(x), float(y))


class HitboxTool(Tool):
    """Defines a collision rectangle by dragging between two corners."""

    def __init__(self) -> None:
        super().__init__()
        self.hitbox = Rect(0.0, 0.0, 0.0, 0.0)
        self.defining = False
        self._start_x = 0
        self._start_y = 0

    def on_mouse_down(self, canvas: Optional[Canvas], x: int, y: int) -> None:
        self._start_x = x
        self._start_y = y
        self.hitbox = Rect(float(x), float(y), 0.0, 0.0)
        self.defining = True

    def on_mouse_drag(
        self, canvas: Optional[Canvas], from_x: int, from_y: int, to_x: int, to_y: int
    ) -> None:
        x1 = float(min(self._start_x, to_x))
        y1 = float(min(self._start_y, to_y))
        x2 = float(max(self._start_x, to_x))
        y2 = float(max(self._start_y, to_y))
        self.hitbox = Rect(x1, y1, x2 - x1, y2 - y1)

    def on_mouse_up(self, canvas: Optional[Canvas], x: int, y: int) -> None:
        self.on_mouse_drag(None, self._start_x, self._start_y, x, y)
        self.defining = False
"""Pan and zoom mapping between screen and canvas space, with grid snapping."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Optional

from convoy.geometry import Vec2
from convoy.project_mode import GridSettings, GridType, ProjectMode, SnapSettings

if TYPE_CHECKING:
    from convoy.canvas import Canvas

MIN_ZOOM = 0.1
MAX_ZOOM = 32.0


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


class Viewport:
    """A view onto a canvas with a zoom factor and a screen offset."""

    def __init__(self, width: float, height: float) -> None:
        self._width = width
        self._height = height
        self._zoom = 1.0
        self._offset = Vec2(0.0, 0.0)
        self.mode = ProjectMode.PIXEL_ART
        self.grid = GridSettings()
        self.snap = SnapSettings()

    @property
    def width(self) -> float:
        return self._width

    @property
    def height(self) -> float:
        return self._height

    @property
    def zoom(self) -> float:
        return self._zoom

    @zoom.setter
    def zoom(self, value: float) -> None:
        self._zoom = min(MAX_ZOOM, max(MIN_ZOOM, value))

    @property
    def offset(self) -> Vec2:
        return self._offset

    def pan(self, dx: float, dy: float) -> None:
        self._offset = Vec2(self._offset.x + dx, self._offset.y + dy)

    def resize(self, width: float, height: float) -> None:
        self._width = width
        self._height = height

    def screen_to_canvas(self, screen_x: float, screen_y: float) -> Vec2:
        return Vec2((screen_x - self._offset.x) / self._zoom, (screen_y - self._offset.y) / self._zoom)

    def canvas_to_screen(self, canvas_x: float, canvas_y: float) -> Vec2:
        return Vec2(canvas_x * self._zoom + self._offset.x, canvas_y * self._zoom + self._offset.y)

    def zoom_to_point(self, screen_x: float, screen_y: float, factor: float) -> None:
        """Scale the zoom while keeping the canvas point under the screen point fixed."""
        anchor = self.screen_to_canvas(screen_x, screen_y)
        self.zoom = self._zoom * factor
        self._offset = Vec2(screen_x - anchor.x * self._zoom, screen_y - anchor.y * self._zoom)

    def fit_to_canvas(self, canvas: Optional[Canvas]) -> None:
        """Zoom so the canvas fills the view with a small margin, and centre it."""
        if canvas is None:
            return
        canvas_w = float(canvas.width)
        canvas_h = float(canvas.height)
        scale_x = self._width / (canvas_w * 1.05)
        scale_y = self._height / (canvas_h * 1.05)
        self.zoom = min(scale_x, scale_y)
        self._offset = Vec2(
            (self._width - canvas_w * self._zoom) * 0.5,
            (self._height - canvas_h * self._zoom) * 0.5,
        )

    def snap_to_grid(self, pos: Vec2) -> Vec2:
        """Round a position to the nearest tile corner of a square grid."""
        if not self.snap.enabled or not self.snap.snap_to_grid:
            return pos
        if self.grid.type == GridType.DIAMOND:
            return pos
        tile_w = float(self.grid.tile_width)
        tile_h = float(self.grid.tile_height)
        return Vec2(_round_half_away(pos.x / tile_w) * tile_w, _round_half_away(pos.y / tile_h) * tile_h)

    def snap_to_angle(self, pos: Vec2) -> Vec2:
        """Angle snapping leaves positions unchanged."""
        return pos
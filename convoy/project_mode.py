"""Project modes and their grid and snapping presets."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum, IntFlag


class ProjectMode(IntEnum):
    PIXEL_ART = 0
    DRAWING = 1
    ISOMETRIC = 2
    TOP_DOWN = 3


class GridType(IntEnum):
    SQUARE = 0
    DIAMOND = 1
    HIDDEN = 2


class SnapBehavior(IntFlag):
    NONE = 0
    PIXEL = 1
    TILE = 2
    ANGLE = 4


@dataclass
class GridSettings:
    type: GridType = GridType.SQUARE
    tile_width: int = 32
    tile_height: int = 32
    angle: float = 0.0


@dataclass
class SnapSettings:
    enabled: bool = True
    snap_to_grid: bool = True
    snap_to_angle: bool = False
    snap_angle: float = 0.0


@dataclass
class ProjectModeConfig:
    """Canvas size, grid and snapping for a new project."""

    mode: ProjectMode = ProjectMode.PIXEL_ART
    canvas_width: int = 640
    canvas_height: int = 360
    bit_depth: int = 32
    grid: GridSettings = field(default_factory=GridSettings)
    snapping: SnapSettings = field(default_factory=SnapSettings)

    @classmethod
    def default_pixel_art(cls) -> ProjectModeConfig:
        return cls(
            mode=ProjectMode.PIXEL_ART,
            canvas_width=640,
            canvas_height=360,
            grid=GridSettings(type=GridType.SQUARE, tile_width=8, tile_height=8),
            snapping=SnapSettings(snap_to_grid=True),
        )

    @classmethod
    def default_isometric(cls) -> ProjectModeConfig:
        return cls(
            mode=ProjectMode.ISOMETRIC,
            canvas_width=640,
            canvas_height=360,
            grid=GridSettings(type=GridType.DIAMOND, tile_width=32, tile_height=16, angle=30.0),
            snapping=SnapSettings(snap_to_grid=True, snap_to_angle=True, snap_angle=30.0),
        )

    @classmethod
    def default_top_down(cls) -> ProjectModeConfig:
        return cls(
            mode=ProjectMode.TOP_DOWN,
            canvas_width=640,
            canvas_height=360,
            grid=GridSettings(type=GridType.SQUARE, tile_width=32, tile_height=32),
            snapping=SnapSettings(snap_to_grid=True),
        )

    @classmethod
    def default_drawing(cls) -> ProjectModeConfig:
        return cls(
            mode=ProjectMode.DRAWING,
            canvas_width=1920,
            canvas_height=1080,
            grid=GridSettings(type=GridType.HIDDEN),
            snapping=SnapSettings(enabled=False),
        )
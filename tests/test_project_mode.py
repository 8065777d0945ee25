import pytest

from convoy.project_mode import (
    GridType,
    ProjectMode,
    ProjectModeConfig,
    SnapBehavior,
)


@pytest.mark.parametrize(
    ("factory", "value"),
    [
        (ProjectModeConfig.default_pixel_art, 0),
        (ProjectModeConfig.default_drawing, 1),
        (ProjectModeConfig.default_isometric, 2),
        (ProjectModeConfig.default_top_down, 3),
    ],
)
def test_mode_enum_values(factory, value):
    cfg = factory()
    assert int(cfg.mode) == value
    assert ProjectMode(value) is cfg.mode


@pytest.mark.parametrize(
    ("factory", "value"),
    [
        (ProjectModeConfig.default_pixel_art, 0),
        (ProjectModeConfig.default_isometric, 1),
        (ProjectModeConfig.default_drawing, 2),
    ],
)
def test_grid_type_enum(factory, value):
    cfg = factory()
    assert int(cfg.grid.type) == value
    assert GridType(value) is cfg.grid.type


def test_snap_behavior_combines():
    combined = SnapBehavior(5)
    assert combined == SnapBehavior.PIXEL | SnapBehavior.ANGLE
    assert SnapBehavior.PIXEL in combined
    assert SnapBehavior.TILE not in combined


def test_default_pixel_art_config():
    cfg = ProjectModeConfig.default_pixel_art()
    assert cfg.mode is ProjectMode.PIXEL_ART
    assert cfg.canvas_width == 640
    assert cfg.canvas_height == 360
    assert cfg.grid.type is GridType.SQUARE
    assert cfg.grid.tile_width == 8
    assert cfg.grid.tile_height == 8
    assert cfg.snapping.snap_to_grid is True


def test_default_isometric_config():
    cfg = ProjectModeConfig.default_isometric()
    assert cfg.mode is ProjectMode.ISOMETRIC
    assert cfg.grid.type is GridType.DIAMOND
    assert cfg.grid.tile_width == 32
    assert cfg.grid.tile_height == 16
    assert cfg.grid.angle == pytest.approx(30.0)
    assert cfg.snapping.snap_to_angle is True
    assert cfg.snapping.snap_angle == pytest.approx(30.0)


def test_default_top_down_config():
    cfg = ProjectModeConfig.default_top_down()
    assert cfg.mode is ProjectMode.TOP_DOWN
    assert cfg.grid.type is GridType.SQUARE
    assert cfg.grid.tile_width == 32
    assert cfg.grid.tile_height == 32


def test_default_drawing_config():
    cfg = ProjectModeConfig.default_drawing()
    assert cfg.mode is ProjectMode.DRAWING
    assert cfg.canvas_width == 1920
    assert cfg.canvas_height == 1080
    assert cfg.grid.type is GridType.HIDDEN
    assert cfg.snapping.enabled is False


def test_plain_config_defaults():
    cfg = ProjectModeConfig()
    assert cfg.bit_depth == 32
    assert cfg.grid.tile_width == 32
    assert cfg.snapping.enabled is True
    assert cfg.snapping.snap_to_angle is False


def test_presets_are_independent():
    first = ProjectModeConfig.default_pixel_art()
    first.grid.tile_width = 64
    second = ProjectModeConfig.default_pixel_art()
    assert second.grid.tile_width == 8
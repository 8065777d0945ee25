import pytest

from convoy.canvas import Canvas
from convoy.geometry import Vec2
from convoy.project_mode import GridType
from convoy.viewport import Viewport


def test_initialization():
    vp = Viewport(800.0, 600.0)
    assert vp.zoom == pytest.approx(1.0)
    assert vp.offset == Vec2(0.0, 0.0)


def test_zoom_clamping():
    vp = Viewport(800.0, 600.0)
    vp.zoom = 0.05
    assert vp.zoom == pytest.approx(0.1)
    vp.zoom = 50.0
    assert vp.zoom == pytest.approx(32.0)
    vp.zoom = 2.0
    assert vp.zoom == pytest.approx(2.0)


def test_panning():
    vp = Viewport(800.0, 600.0)
    vp.pan(100.0, -50.0)
    assert vp.offset.x == pytest.approx(100.0)
    assert vp.offset.y == pytest.approx(-50.0)


def test_coordinate_conversion():
    vp = Viewport(800.0, 600.0)
    screen = vp.canvas_to_screen(10.0, 20.0)
    assert (screen.x, screen.y) == pytest.approx((10.0, 20.0))
    canvas = vp.screen_to_canvas(10.0, 20.0)
    assert (canvas.x, canvas.y) == pytest.approx((10.0, 20.0))

    vp.zoom = 2.0
    vp.pan(50.0, 100.0)
    screen = vp.canvas_to_screen(10.0, 20.0)
    assert (screen.x, screen.y) == pytest.approx((70.0, 140.0))
    canvas = vp.screen_to_canvas(70.0, 140.0)
    assert (canvas.x, canvas.y) == pytest.approx((10.0, 20.0))


def test_zoom_to_point_preserves_canvas_point():
    vp = Viewport(800, 600)
    vp.zoom = 1.0
    before = vp.screen_to_canvas(100.0, 100.0)
    vp.zoom_to_point(100.0, 100.0, 2.0)
    after = vp.screen_to_canvas(100.0, 100.0)
    assert after.x == pytest.approx(before.x, abs=0.01)
    assert after.y == pytest.approx(before.y, abs=0.01)
    assert vp.zoom == pytest.approx(2.0, abs=0.001)


def test_zoom_to_point_clamps_to_limits():
    vp = Viewport(800, 600)
    vp.zoom = 1.0
    vp.zoom_to_point(400, 300, 1000.0)
    assert vp.zoom == 32.0


def test_resize():
    vp = Viewport(800, 600)
    vp.resize(1024, 768)
    assert (vp.width, vp.height) == (1024, 768)


def test_fit_to_canvas_centres_and_fits():
    vp = Viewport(800.0, 600.0)
    canvas = Canvas(64, 64)
    vp.fit_to_canvas(canvas)
    top_left = vp.canvas_to_screen(0.0, 0.0)
    bottom_right = vp.canvas_to_screen(64.0, 64.0)
    assert top_left.x + bottom_right.x == pytest.approx(800.0)
    assert top_left.y + bottom_right.y == pytest.approx(600.0)
    assert bottom_right.y - top_left.y < 600.0
    assert top_left.y > 0.0


def test_fit_to_none_changes_nothing():
    vp = Viewport(800.0, 600.0)
    vp.fit_to_canvas(None)
    assert vp.zoom == 1.0
    assert vp.offset == Vec2(0.0, 0.0)


def test_snap_to_grid_rounds_to_tiles():
    vp = Viewport(800, 600)
    assert vp.snap_to_grid(Vec2(40.0, 50.0)) == Vec2(32.0, 64.0)


def test_snap_to_grid_rounds_half_away_from_zero():
    vp = Viewport(800, 600)
    assert vp.snap_to_grid(Vec2(16.0, -16.0)) == Vec2(32.0, -32.0)


def test_snap_to_grid_disabled():
    vp = Viewport(800, 600)
    vp.snap.enabled = False
    assert vp.snap_to_grid(Vec2(40.0, 50.0)) == Vec2(40.0, 50.0)


def test_snap_to_grid_diamond_unchanged():
    vp = Viewport(800, 600)
    vp.grid.type = GridType.DIAMOND
    assert vp.snap_to_grid(Vec2(40.0, 50.0)) == Vec2(40.0, 50.0)


def test_snap_to_angle_keeps_position():
    vp = Viewport(800, 600)
    vp.snap.snap_to_angle = True
    vp.snap.snap_angle = 30.0
    assert vp.snap_to_angle(Vec2(3.0, 4.0)) == Vec2(3.0, 4.0)
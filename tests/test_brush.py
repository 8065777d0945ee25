import pytest

from convoy.brush import (
    Brush,
    BrushPoint,
    BrushShape,
    PressureCurve,
    generate_parametric_mask,
    map_pressure,
)


def _alpha(mask, size, x, y):
    return mask[(y * size + x) * 4 + 3]


def test_default_constructs():
    brush = Brush()
    assert brush.size == 8
    assert brush.hardness == 100
    assert brush.shape is BrushShape.CIRCLE
    assert brush.curve is PressureCurve.LINEAR


def test_pressure_mapping_linear():
    assert map_pressure(0.5, PressureCurve.LINEAR) == pytest.approx(0.5)
    assert map_pressure(0.0, PressureCurve.LINEAR) == pytest.approx(0.0)
    assert map_pressure(1.0, PressureCurve.LINEAR) == pytest.approx(1.0)


def test_pressure_mapping_smooth():
    smooth = map_pressure(0.5, PressureCurve.SMOOTH)
    assert 0.3 < smooth < 0.7


def test_pressure_mapping_sharp():
    assert map_pressure(0.5, PressureCurve.SHARP) < 0.5


@pytest.mark.parametrize("curve", list(PressureCurve))
def test_pressure_curves_keep_endpoints(curve):
    assert map_pressure(0.0, curve) == pytest.approx(0.0)
    assert map_pressure(1.0, curve) == pytest.approx(1.0)


def test_custom_mask_support():
    mask = bytes([255]) * (8 * 8 * 4)
    brush = Brush(shape=BrushShape.CUSTOM, custom_mask=mask, has_custom_mask=True)
    assert brush.shape is BrushShape.CUSTOM
    assert brush.has_custom_mask
    assert len(brush.custom_mask) == 8 * 8 * 4


def test_brush_point_fields():
    point = BrushPoint(1.0, 2.0, 0.5, 0.25)
    assert (point.x, point.y, point.pressure, point.angle) == (1.0, 2.0, 0.5, 0.25)


@pytest.mark.parametrize("shape", list(BrushShape))
def test_mask_has_rgba_entry_per_pixel(shape):
    assert len(generate_parametric_mask(shape, 8, 100)) == 8 * 8 * 4


def test_mask_channels_match():
    mask = generate_parametric_mask(BrushShape.CIRCLE, 8, 50)
    for offset in range(0, len(mask), 4):
        assert len(set(mask[offset:offset + 4])) == 1


def test_circle_center_opaque_corner_clear():
    mask = generate_parametric_mask(BrushShape.CIRCLE, 8, 100)
    assert _alpha(mask, 8, 4, 4) == 255
    assert _alpha(mask, 8, 0, 0) == 0


def test_circle_hardness_controls_falloff():
    hard = generate_parametric_mask(BrushShape.CIRCLE, 8, 0)
    soft = generate_parametric_mask(BrushShape.CIRCLE, 8, 100)
    assert _alpha(hard, 8, 1, 4) == 255
    assert _alpha(soft, 8, 1, 4) == 63


def test_square_falloff_halfway():
    mask = generate_parametric_mask(BrushShape.SQUARE, 8, 100)
    assert _alpha(mask, 8, 2, 4) == 127
    assert _alpha(mask, 8, 0, 0) == 0


def test_diamond_falloff_halfway():
    mask = generate_parametric_mask(BrushShape.DIAMOND, 8, 100)
    assert _alpha(mask, 8, 4, 2) == 127
    assert _alpha(mask, 8, 0, 0) == 0


def test_star_center_opaque():
    mask = generate_parametric_mask(BrushShape.STAR, 8, 100)
    assert _alpha(mask, 8, 4, 4) == 255


def test_line_bands():
    mask = generate_parametric_mask(BrushShape.LINE, 8, 100)
    assert [_alpha(mask, 8, x, 4) for x in range(8)] == [255] * 8
    assert _alpha(mask, 8, 3, 1) == 128
    assert _alpha(mask, 8, 3, 0) == 128


def test_custom_shape_mask_is_empty():
    assert set(generate_parametric_mask(BrushShape.CUSTOM, 4, 100)) == {0}


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        generate_parametric_mask(BrushShape.CIRCLE, -1, 100)
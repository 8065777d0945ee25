"""Brush definitions, pressure curves and parametric brush masks."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional


class BrushShape(Enum):
    CIRCLE = 0
    SQUARE = 1
    DIAMOND = 2
    STAR = 3
    LINE = 4
    CUSTOM = 5


class PressureCurve(Enum):
    LINEAR = 0
    SMOOTH = 1
    SHARP = 2


class DynamicMaskMode(Enum):
    NONE = 0
    PRESSURE_EXPANDS_MASK = 1
    PRESSURE_INCREASES_OPACITY = 2


class MaskSource(Enum):
    PARAMETRIC = 0
    BITMASK = 1
    DYNAMIC = 2


@dataclass(frozen=True)
class BrushPoint:
    """One sampled position of a stroke with its pen pressure and angle."""

    x: float
    y: float
    pressure: float
    angle: float


MaskGenerator = Callable[[float, float, int], bytes]


@dataclass
class DynamicMaskConfig:
    """How a brush mask reacts to pressure and pen direction."""

    mode: DynamicMaskMode = DynamicMaskMode.NONE
    rotation: float = 0.0
    follow_mouse: bool = False
    generator: Optional[MaskGenerator] = None


@dataclass
class Brush:
    """Shape, size and dynamics of a painting brush."""

    name: str = "Default"
    shape: BrushShape = BrushShape.CIRCLE
    size: int = 8
    hardness: int = 100
    spacing: int = 20
    curve: PressureCurve = PressureCurve.LINEAR
    custom_mask: bytes = b""
    has_custom_mask: bool = False
    dynamic_mask: DynamicMaskConfig = field(default_factory=DynamicMaskConfig)
    use_dynamic_mask: bool = False


def map_pressure(value: float, curve: PressureCurve) -> float:
    """Map raw pen pressure in 0..1 through the given response curve."""
    if curve is PressureCurve.SMOOTH:
        return value * value * (3.0 - 2.0 * value)
    if curve is PressureCurve.SHARP:
        return value * value
    return value


def _falloff(distance: float, limit: float, hardness_factor: float) -> float:
    """Alpha for a point at `distance` inside a shape reaching out to `limit`."""
    if distance > limit:
        return 0.0
    edge = limit * (1.0 - hardness_factor)
    if distance < edge:
        return 255.0
    span = limit - edge
    if span <= 0.0:
        return 255.0
    return 255.0 * (1.0 - (distance - edge) / span)


def _shape_alpha(shape: BrushShape, dx: float, dy: float, radius: float, hardness_factor: float) -> float:
    distance = math.hypot(dx, dy)
    if shape is BrushShape.CIRCLE:
        return _falloff(distance, radius, hardness_factor)
    if shape is BrushShape.SQUARE:
        return _falloff(max(abs(dx), abs(dy)), radius, hardness_factor)
    if shape is BrushShape.DIAMOND:
        return _falloff(abs(dx) + abs(dy), radius, hardness_factor)
    if shape is BrushShape.STAR:
        reach = radius * (0.5 + 0.5 * math.cos(5.0 * math.atan2(dy, dx)))
        return _falloff(distance, reach, hardness_factor)
    if shape is BrushShape.LINE:
        if abs(dx) <= radius and abs(dy) <= 2.0:
            return 255.0
        if abs(dx) <= radius and abs(dy) <= 4.0:
            return 128.0
        return 0.0
    return 0.0


def generate_parametric_mask(shape: BrushShape, size: int, hardness: int) -> bytes:
    """Build a size x size RGBA mask whose four channels all hold the coverage."""
    if size < 0:
        raise ValueError("mask size must not be negative")
    center = size // 2
    radius = size / 2.0
    hardness_factor = hardness / 100.0
    mask = bytearray()
    for y in range(size):
        for x in range(size):
            alpha = _shape_alpha(shape, float(x - center), float(y - center), radius, hardness_factor)
            value = min(max(int(alpha), 0), 255)
            mask.extend((value, value, value, value))
    return bytes(mask)
"""Colour model conversions, adjustments, harmonies and picker state."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Sequence

from convoy.color import Color


class ColorModel(Enum):
    HSV = 0
    HSL = 1
    HSI = 2
    HSY_PRIME = 3


class SelectorShape(Enum):
    TRIANGLE = 0
    SQUARE = 1
    WHEEL = 2


class HarmonyType(Enum):
    NONE = 0
    COMPLEMENTARY = 1
    TRIAD = 2
    ANALOGOUS = 3
    SPLIT_COMPLEMENTARY = 4


@dataclass
class ColorHSV:
    h: float
    s: float
    v: float


@dataclass
class ColorHSL:
    h: float
    s: float
    l: float  # noqa: E741


@dataclass
class ColorHSY:
    h: float
    s: float
    y: float


@dataclass(frozen=True)
class ColorLumaCoeffs:
    """Weights of the red, green and blue channels in luma."""

    r: float
    g: float
    b: float

    @classmethod
    def rec_709(cls) -> ColorLumaCoeffs:
        return cls(0.2126, 0.7152, 0.0722)

    @classmethod
    def rec_601(cls) -> ColorLumaCoeffs:
        return cls(0.299, 0.587, 0.114)


def _unit_channels(rgb: Color) -> tuple[float, float, float]:
    return rgb.r / 255.0, rgb.g / 255.0, rgb.b / 255.0


def _hue(r: float, g: float, b: float) -> float:
    high = max(r, g, b)
    delta = high - min(r, g, b)
    hue = 0.0
    if delta > 0.0:
        if high == r:
            hue = 60.0 * math.fmod((g - b) / delta, 6.0)
        elif high == g:
            hue = 60.0 * ((b - r) / delta + 2.0)
        else:
            hue = 60.0 * ((r - g) / delta + 4.0)
    if hue < 0.0:
        hue += 360.0
    return hue


def _sector(hue: float, chroma: float, second: float) -> tuple[float, float, float]:
    if hue < 60.0:
        return chroma, second, 0.0
    if hue < 120.0:
        return second, chroma, 0.0
    if hue < 180.0:
        return 0.0, chroma, second
    if hue < 240.0:
        return 0.0, second, chroma
    if hue < 300.0:
        return second, 0.0, chroma
    return chroma, 0.0, second


def _second_component(hue: float, chroma: float) -> float:
    return chroma * (1.0 - abs(math.fmod(hue / 60.0, 2.0) - 1.0))


def _to_byte(unit: float) -> int:
    return int(min(max(unit, 0.0), 1.0) * 255.0)


def _opaque(r: float, g: float, b: float) -> Color:
    return Color(_to_byte(r), _to_byte(g), _to_byte(b), 255)


def rgb_to_hsv(rgb: Color) -> ColorHSV:
    r, g, b = _unit_channels(rgb)
    high = max(r, g, b)
    delta = high - min(r, g, b)
    saturation = delta / high if high > 0.0 else 0.0
    return ColorHSV(_hue(r, g, b), saturation, high)


def hsv_to_rgb(hsv: ColorHSV) -> Color:
    chroma = hsv.v * hsv.s
    offset = hsv.v - chroma
    r, g, b = _sector(hsv.h, chroma, _second_component(hsv.h, chroma))
    return _opaque(r + offset, g + offset, b + offset)


def rgb_to_hsl(rgb: Color) -> ColorHSL:
    r, g, b = _unit_channels(rgb)
    high = max(r, g, b)
    low = min(r, g, b)
    delta = high - low
    lightness = (high + low) / 2.0
    saturation = delta / (1.0 - abs(2.0 * lightness - 1.0)) if delta > 0.0 else 0.0
    return ColorHSL(_hue(r, g, b), saturation, lightness)


def hsl_to_rgb(hsl: ColorHSL) -> Color:
    chroma = (1.0 - abs(2.0 * hsl.l - 1.0)) * hsl.s
    offset = hsl.l - chroma / 2.0
    r, g, b = _sector(hsl.h, chroma, _second_component(hsl.h, chroma))
    return _opaque(r + offset, g + offset, b + offset)


def rgb_to_hsy(rgb: Color, coeffs: ColorLumaCoeffs | None = None) -> ColorHSY:
    coeffs = coeffs or ColorLumaCoeffs.rec_709()
    r, g, b = _unit_channels(rgb)
    luma = coeffs.r * r + coeffs.g * g + coeffs.b * b
    high = max(r, g, b)
    low = min(r, g, b)
    saturation = 1.0 - (low / luma) if luma > 0.0 else 0.0
    if high == low:
        saturation = 0.0
    return ColorHSY(_hue(r, g, b), saturation, luma)


def hsy_to_rgb(hsy: ColorHSY, coeffs: ColorLumaCoeffs | None = None) -> Color:
    coeffs = coeffs or ColorLumaCoeffs.rec_709()
    chroma = hsy.y * hsy.s
    offset = hsy.y - chroma
    r, g, b = _sector(hsy.h, chroma, _second_component(hsy.h, chroma))
    r, g, b = r + offset, g + offset, b + offset

    # Solve green from the target luma so the result keeps the requested brightness.
    if coeffs.r + coeffs.g != 0.0 and coeffs.g + coeffs.b != 0.0 and coeffs.r - coeffs.b != 0.0:
        g = (hsy.y - coeffs.r * r - coeffs.b * b) / coeffs.g

    return _opaque(r, g, b)


def calculate_luma(rgb: Color, coeffs: ColorLumaCoeffs | None = None) -> float:
    coeffs = coeffs or ColorLumaCoeffs.rec_709()
    r, g, b = _unit_channels(rgb)
    return coeffs.r * r + coeffs.g * g + coeffs.b * b


def _power(rgb: Color, exponent: float) -> Color:
    r, g, b = (channel**exponent for channel in _unit_channels(rgb))
    return Color(_to_byte(r), _to_byte(g), _to_byte(b), rgb.a)


def apply_gamma(rgb: Color, gamma: float) -> Color:
    """Encode linear channels with the given gamma; alpha is kept."""
    return _power(rgb, 1.0 / gamma)


def remove_gamma(rgb: Color, gamma: float) -> Color:
    """Decode gamma-encoded channels to linear; alpha is kept."""
    return _power(rgb, gamma)


def darken(rgb: Color, amount: float) -> Color:
    hsv = rgb_to_hsv(rgb)
    hsv.v = max(0.0, hsv.v - amount)
    return hsv_to_rgb(hsv)


def lighten(rgb: Color, amount: float) -> Color:
    hsv = rgb_to_hsv(rgb)
    hsv.v = min(1.0, hsv.v + amount)
    return hsv_to_rgb(hsv)


def desaturate(rgb: Color, amount: float) -> Color:
    hsv = rgb_to_hsv(rgb)
    hsv.s = max(0.0, hsv.s - amount)
    return hsv_to_rgb(hsv)


def saturate(rgb: Color, amount: float) -> Color:
    hsv = rgb_to_hsv(rgb)
    hsv.s = min(1.0, hsv.s + amount)
    return hsv_to_rgb(hsv)


def shift_hue(rgb: Color, degrees: float) -> Color:
    hsv = rgb_to_hsv(rgb)
    hsv.h = math.fmod(hsv.h + degrees + 360.0, 360.0)
    return hsv_to_rgb(hsv)


def generate_shadow_row(base: Color, count: int, warm: bool) -> list[Color]:
    """Step lightness by 0.1 per swatch: up when warm, down otherwise."""
    hsl = rgb_to_hsl(base)
    step = 0.1 if warm else -0.1
    shadows = []
    for _ in range(count):
        hsl.l = min(max(hsl.l + step, 0.0), 1.0)
        shadows.append(hsl_to_rgb(hsl))
    return shadows


_HARMONY_SHIFTS: dict[HarmonyType, tuple[float, ...]] = {
    HarmonyType.NONE: (),
    HarmonyType.COMPLEMENTARY: (180.0,),
    HarmonyType.TRIAD: (120.0, 240.0),
    HarmonyType.ANALOGOUS: (30.0, -30.0),
    HarmonyType.SPLIT_COMPLEMENTARY: (150.0, 210.0),
}


def generate_harmony(base: Color, harmony: HarmonyType) -> list[Color]:
    """The base colour followed by its hue-shifted partners."""
    return [base] + [shift_hue(base, degrees) for degrees in _HARMONY_SHIFTS[harmony]]


@dataclass
class ColorState:
    """Current colour selection, recent colours and colours sampled from an image."""

    MAX_HISTORY: ClassVar[int] = 20

    current: Color = field(default_factory=lambda: Color(128, 128, 128, 255))
    model: ColorModel = ColorModel.HSY_PRIME
    shape: SelectorShape = SelectorShape.TRIANGLE
    gamma: float = 2.2
    luma_coeffs: ColorLumaCoeffs = field(default_factory=ColorLumaCoeffs.rec_709)
    history: list[Color] = field(default_factory=list)
    common_colors: list[Color] = field(default_factory=list)

    def add_to_history(self, color: Color) -> None:
        """Move the colour to the front of the history, keeping at most MAX_HISTORY."""
        if color in self.history:
            self.history.remove(color)
        self.history.insert(0, color)
        del self.history[self.MAX_HISTORY:]

    def extract_from_pixels(self, pixels: Sequence[int], width: int, height: int) -> None:
        """Collect up to ten distinct, mostly opaque colours from RGBA bytes."""
        if width < 0 or height < 0:
            raise ValueError("width and height must not be negative")
        needed = width * height * 4
        if len(pixels) < needed:
            raise ValueError(f"expected at least {needed} bytes of pixel data, got {len(pixels)}")

        self.common_colors.clear()
        for offset in range(0, needed, 4):
            r, g, b, a = pixels[offset:offset + 4]
            if a < 128:
                continue
            known = any(
                abs(r - existing.r) < 8 and abs(g - existing.g) < 8 and abs(b - existing.b) < 8
                for existing in self.common_colors
            )
            if not known:
                self.common_colors.append(Color(r, g, b, a))
            if len(self.common_colors) >= 10:
                break
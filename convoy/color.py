"""8-bit RGBA colour value."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels; opaque black by default."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 255

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if not isinstance(value, int) or not 0 <= value <= 255:
                raise ValueError(f"channel {name} must be an integer in 0..255, got {value!r}")

    def to_rgba(self) -> int:
        """Pack as 0xRRGGBBAA."""
        return (self.r << 24) | (self.g << 16) | (self.b << 8) | self.a

    def to_abgr(self) -> int:
        """Pack as 0xAABBGGRR."""
        return (self.a << 24) | (self.b << 16) | (self.g << 8) | self.r

    @classmethod
    def from_rgba(cls, rgba: int) -> Color:
        """Unpack a 0xRRGGBBAA value."""
        return cls((rgba >> 24) & 0xFF, (rgba >> 16) & 0xFF, (rgba >> 8) & 0xFF, rgba & 0xFF)
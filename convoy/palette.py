"""Indexed colour palettes and swatch selection."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional

from convoy.color import Color


def _opaque(*rgb_triples: tuple[int, int, int]) -> list[Color]:
    return [Color(r, g, b, 255) for r, g, b in rgb_triples]


@dataclass
class IndexedPalette:
    """A named list of swatch colours."""

    name: str = ""
    colors: list[Color] = field(default_factory=list)

    @classmethod
    def default_16(cls) -> IndexedPalette:
        return cls(
            "Default 16",
            _opaque(
                (0, 0, 0), (255, 255, 255), (127, 127, 127), (64, 64, 64),
                (255, 0, 0), (0, 255, 0), (0, 0, 255), (255, 255, 0),
                (255, 0, 255), (0, 255, 255), (255, 127, 0), (127, 0, 255),
                (0, 127, 255), (255, 0, 127), (0, 255, 127), (127, 255, 0),
            ),
        )

    @classmethod
    def db32(cls) -> IndexedPalette:
        return cls(
            "DB32",
            _opaque(
                (0, 0, 0), (34, 32, 52), (69, 40, 60), (102, 57, 49),
                (143, 86, 59), (223, 113, 38), (217, 160, 102), (238, 195, 154),
                (251, 242, 54), (153, 229, 80), (106, 190, 48), (55, 148, 110),
                (75, 105, 47), (82, 75, 36), (50, 60, 57), (63, 63, 116),
                (48, 96, 130), (91, 110, 225), (99, 155, 255), (95, 205, 228),
                (203, 219, 252), (255, 255, 255), (155, 173, 183), (132, 126, 135),
                (105, 106, 106), (89, 86, 82), (118, 66, 138), (172, 50, 50),
                (217, 87, 99), (215, 123, 186), (143, 151, 74), (138, 111, 48),
            ),
        )


SelectCallback = Callable[[Color], None]


@dataclass
class ColorPalette:
    """A palette with a selected swatch and an optional selection callback."""

    palette: IndexedPalette = field(default_factory=IndexedPalette.default_16)
    selected: Color = field(default_factory=lambda: Color(255, 255, 255, 255))
    selected_index: int = -1
    on_select: Optional[SelectCallback] = None

    def load_palette(self, palette: IndexedPalette) -> None:
        self.palette = palette

    def select(self, index: int) -> Color:
        """Select the swatch at `index`, notify the callback and return its colour."""
        if not 0 <= index < len(self.palette.colors):
            raise IndexError(f"swatch index {index} out of range")
        color = self.palette.colors[index]
        self.selected = color
        self.selected_index = index
        if self.on_select is not None:
            self.on_select(color)
        return color
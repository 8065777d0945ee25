"""Memory layout diagnostics for canvas pixel data."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from convoy.canvas import Canvas

ALIGNMENT = 32
BYTES_PER_PIXEL = 4


@dataclass(frozen=True)
class AlignmentInfo:
    """Size of one layer's pixel data and how far it is from 32-byte alignment."""

    data_bytes: int = 0
    aligned_bytes: int = 0
    is_aligned: bool = False
    waste_bytes: int = 0


def compute_alignment(canvas: Optional[Canvas]) -> AlignmentInfo:
    if canvas is None:
        return AlignmentInfo()
    size = canvas.width * canvas.height * BYTES_PER_PIXEL
    aligned = size % ALIGNMENT == 0
    padded = size if aligned else size + (ALIGNMENT - size % ALIGNMENT)
    return AlignmentInfo(size, padded, aligned, padded - size)


def compute_vram_estimate(canvas: Optional[Canvas]) -> int:
    """Bytes needed to hold every layer of the canvas."""
    if canvas is None:
        return 0
    return canvas.width * canvas.height * BYTES_PER_PIXEL * len(canvas.layers)
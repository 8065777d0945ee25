"""Layered canvas, drawing tools, brushes, palettes and colour math for pixel-art sprites."""

__version__ = "1.0.0"
# convoy

This package is the core of a pixel-art sprite editor. It is pure Python and has no third-party dependencies.

## Modules

- `convoy.geometry` provides the frozen `Vec2` and `Rect` value types:
  - `Vec2` supports addition, subtraction, scalar multiplication, `length()` and `normalized()`.
  - `Rect` has `contains()`, which excludes the right and bottom edges. It also has `intersect()`.
- `convoy.color` provides `Color`, an RGBA colour with 8-bit channels that is opaque black by default.
  - It packs with `to_rgba()` (0xRRGGBBAA) and `to_abgr()` (0xAABBGGRR).
  - It unpacks with `Color.from_rgba()`.
  - A channel outside 0..255 raises `ValueError`.
- `convoy.color_math` covers colour conversion and adjustment:
  - Conversions: `rgb_to_hsv`, `hsv_to_rgb`, `rgb_to_hsl`, `hsl_to_rgb`, `rgb_to_hsy` and `hsy_to_rgb`.
  - `calculate_luma`, with `ColorLumaCoeffs.rec_709()` as the default and `rec_601()` as an alternative.
  - Adjustments: `apply_gamma`, `remove_gamma`, `darken`, `lighten`, `desaturate`, `saturate` and `shift_hue`.
  - `generate_shadow_row`.
  - `generate_harmony`, for a `HarmonyType`.
  - `ColorState`, which holds the current colour, a history of up to 20 recent colours, and up to ten common colours taken from RGBA bytes by `extract_from_pixels`.
- `convoy.layer` provides `Layer` (packed pixels, visibility, lock, opacity), `SpriteMetadata` (pivot, hitbox, name) and the `ToolType` enum.
- `convoy.project_mode` provides the `ProjectMode`, `GridType` and `SnapBehavior` enums, along with `GridSettings`, `SnapSettings` and `ProjectModeConfig`. There are presets for pixel art, isometric, top-down and drawing projects:
  - `default_pixel_art()`
  - `default_isometric()`
  - `default_top_down()`
  - `default_drawing()`
- `convoy.canvas` provides `Canvas`, a fixed-size stack of layers:
  - Pixels are read and written on the active layer.
  - Positions outside the canvas are ignored on write and read as transparent.
  - Adding a 33rd layer raises `LayerLimitError`.
  - `composite()` blends the visible layers over a dark backdrop into a list of packed 32-bit words, one per pixel.
- `convoy.viewport` provides `Viewport`:
  - The zoom is clamped to 0.1..32.
  - It has `pan`, `resize`, `zoom_to_point`, `fit_to_canvas`, and conversion in both directions between screen and canvas coordinates.
  - `snap_to_grid` rounds positions to the square grid.
  - `snap_to_angle` returns positions unchanged.
- `convoy.dod` provides `compute_alignment`, which reports 32-byte alignment of one layer's pixel data as an `AlignmentInfo`, and `compute_vram_estimate`, which returns the bytes needed to hold all layers.
- `convoy.tools` provides `PencilTool`, `EraserTool`, `BucketTool`, `PivotTool` and `HitboxTool`, all built on the abstract `Tool`:
  - Each tool takes `on_mouse_down`, `on_mouse_drag` and `on_mouse_up` calls.
  - Colours come from the `foreground` and `background` attributes.
  - `BucketTool` flood-fills four-connected pixels within its `tolerance`.
- `convoy.brush` provides the `Brush` dataclass and the shape and curve enums. It also has `map_pressure`, with linear, smooth and sharp curves, and `generate_parametric_mask`, which builds a size × size RGBA mask for the circle, square, diamond, star and line shapes.
- `convoy.brush_stroke` provides `BrushStroke`, which records `BrushPoint` samples and stamps a brush onto a canvas at each one. The alpha of each stamp is scaled by the mapped pressure.
- `convoy.brush_settings` provides `BrushSettings`, which holds a brush under edit. It can set a custom mask, turn the current shape into a mask with `generate_mask()`, or capture a grey mask from a region of a canvas.
- `convoy.palette` provides two things:
  - `IndexedPalette`, with the `default_16()` and `db32()` palettes.
  - `ColorPalette`, whose `select(index)` records the chosen swatch, calls `on_select` if one is set, and raises `IndexError` for an index out of range.

## Installation

```
pip install .
```

## Example

```python
from convoy.canvas import Canvas
from convoy.color import Color
from convoy.tools import BucketTool, PencilTool

canvas = Canvas(32, 32)

pencil = PencilTool()
pencil.foreground = Color(255, 0, 0)
pencil.on_mouse_drag(canvas, 0, 0, 10, 0)

bucket = BucketTool()
bucket.foreground = Color(0, 0, 255)
bucket.on_mouse_down(canvas, 5, 5)

assert canvas.get_pixel(3, 0) == Color(255, 0, 0)
assert canvas.get_pixel(5, 5) == Color(0, 0, 255)

pixels = canvas.composite()
```

## What it does not do

This is a library of editor state and pixel operations. It does not provide:

- a window, drawing surface or other user interface;
- keyboard or mouse input handling;
- a command to run;
- undo and redo;
- saving or loading of projects or images;
- export to any file format.

## Running the tests

```
pip install .[test]
pytest
```
from __future__ import annotations

import numpy as np

from sparkplot.canvas import TextLayout, TextStyle
from sparkplot.paint import Paint
from sparkplot.path import Path, flatten
from sparkplot.raster.canvas import blend_coverage, new_canvas
from sparkplot.raster.draw_lines import fill_mask, stroke_mask
from sparkplot.raster.draw_markers import marker_mask
from sparkplot.raster.draw_text import draw_text, embolden_px, measure_with_font
from sparkplot.raster.shaders import evaluate_shader
from sparkplot.style import RGBA


class RasterCanvas:
    """Canvas backed by an RGBA numpy frame of shape (height, width, 4)."""

    def __init__(
        self,
        width: int,
        height: int,
        *,
        background: RGBA = (0, 0, 0, 0),
        curve_segments: int = 16,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("raster canvas width/height must be > 0")
        self.width = int(width)
        self.height = int(height)
        self.curve_segments = curve_segments
        self.frame = new_canvas(self.width, self.height, background)

    def layout_text(self, text: str, style: TextStyle) -> TextLayout:
        w, h = measure_with_font(text, style)
        return TextLayout(text=text, style=style, width=w, height=h)

    def draw_path(self, path: Path, paint: Paint) -> None:
        polylines = flatten(path, self.curve_segments)
        if not polylines:
            return
        if paint.style == "fill":
            coverage = fill_mask(polylines, self.width, self.height)
        else:
            coverage = stroke_mask(
                polylines,
                self.width,
                self.height,
                stroke_width=paint.stroke_width,
                join=paint.join,
                cap=paint.cap,
            )
        blend_coverage(self.frame, coverage, self._source(paint))

    def draw_points(self, points: np.ndarray, paint: Paint) -> None:
        coverage = marker_mask(points, self.width, self.height, size=paint.stroke_width, cap=paint.cap)
        blend_coverage(self.frame, coverage, self._source(paint))

    def draw_text(self, layout: TextLayout, x: float, y: float) -> None:
        draw_text(
            self.frame,
            x,
            y,
            layout.text,
            layout.style.color,
            font_size_px=layout.style.font_size_px,
            embolden_px=embolden_px(layout.style),
        )

    def to_rgba(self) -> np.ndarray:
        return self.frame.copy()

    def _source(self, paint: Paint) -> RGBA | np.ndarray:
        if paint.shader is None:
            return paint.color
        return evaluate_shader(paint.shader, self.width, self.height)

from __future__ import annotations

import math
from typing import Any

import numpy as np

from sparkplot.adapters import coerce_series
from sparkplot.canvas import DrawOp, RecordingCanvas, TextMeasurer
from sparkplot.display import resolve_canvas_size
from sparkplot.raster.backend import RasterCanvas
from sparkplot.renderer import SparklineRenderer
from sparkplot.style import DEFAULT_STYLE, RGBA, SparklineStyle, validate_style_overrides


def _style(style: SparklineStyle | None, options: dict[str, Any]) -> SparklineStyle:
    base = style if style is not None else DEFAULT_STYLE
    if not options:
        return base
    return validate_style_overrides(options, base=base)


def sparkline(
    data: Any,
    width: float | None = None,
    height: float | None = None,
    *,
    style: SparklineStyle | None = None,
    background: RGBA = (0, 0, 0, 0),
    **options: Any,
) -> np.ndarray:
    """Rasterize a sparkline into an RGBA frame of shape (height, width, 4).

    Keyword options are `SparklineStyle` fields and override `style`. Omitted
    sizes fall back to the style's fallback size.
    """
    resolved = _style(style, options)
    series = coerce_series(data)
    w, h = resolve_canvas_size(width, height, resolved)
    if not (w > 0 and h > 0):
        return np.zeros((0, 0, 4), dtype=np.uint8)
    canvas = RasterCanvas(int(math.ceil(w)), int(math.ceil(h)), background=background)
    SparklineRenderer(resolved).render(series, w, h, canvas)
    return canvas.to_rgba()


def render_ops(
    data: Any,
    width: float | None = None,
    height: float | None = None,
    *,
    style: SparklineStyle | None = None,
    measure: TextMeasurer | None = None,
    **options: Any,
) -> list[DrawOp]:
    """Return the draw program a sparkline issues, without rasterizing."""
    canvas = RecordingCanvas(measure=measure)
    SparklineRenderer(_style(style, options)).render(data, width, height, canvas)
    return canvas.ops

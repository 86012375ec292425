from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Any

import numpy as np

from sparkplot.adapters import coerce_series
from sparkplot.canvas import Canvas
from sparkplot.display import resolve_canvas_size
from sparkplot.labels import LABEL_GAP_PX, GridLabel, LabelLayoutCache, reserved_label_width
from sparkplot.paint import (
    Paint,
    resolve_fill_paint,
    resolve_grid_paint,
    resolve_point_paint,
    resolve_stroke_paint,
)
from sparkplot.path import LineTo, MoveTo, Path, build_fill_path, build_line_path
from sparkplot.scales import Viewport, build_viewport, grid_line_offsets, normalize_points, resolve_bounds
from sparkplot.style import DEFAULT_STYLE, PointsMode, SparklineStyle


LOGGER = logging.getLogger(__name__)
NO_POINTS = np.empty((0, 2), dtype=np.float64)


@dataclass(frozen=True, eq=False)
class RenderInputs:
    """Everything a render depends on; compared by value for repaint skipping."""

    data: np.ndarray
    width: float
    height: float
    style: SparklineStyle

    def same_as(self, other: "RenderInputs") -> bool:
        return (
            self.width == other.width
            and self.height == other.height
            and self.style == other.style
            and self.data.shape == other.data.shape
            and bool(np.array_equal(self.data, other.data))
        )


def needs_repaint(previous: RenderInputs | None, current: RenderInputs) -> bool:
    return previous is None or not previous.same_as(current)


def select_markers(points: np.ndarray, mode: PointsMode) -> np.ndarray:
    if mode == "all":
        return points
    if mode == "last" and points.shape[0]:
        return points[-1:]
    return NO_POINTS


class SparklineRenderer:
    """Turns a dataset into draw calls against a `Canvas`.

    Each call to `render` recomputes bounds, points and paths from scratch.
    Only grid label layouts are cached, keyed on bounds and label options.
    """

    def __init__(self, style: SparklineStyle | None = None) -> None:
        self._style = style if style is not None else DEFAULT_STYLE
        self._labels = LabelLayoutCache()
        self._last_inputs: RenderInputs | None = None

    @property
    def style(self) -> SparklineStyle:
        return self._style

    @style.setter
    def style(self, style: SparklineStyle) -> None:
        self._style = style
        self._labels.invalidate()

    @property
    def label_cache(self) -> LabelLayoutCache:
        return self._labels

    def should_repaint(self, data: Any, width: float | None, height: float | None) -> bool:
        return needs_repaint(self._last_inputs, self._inputs(data, width, height))

    def render(self, data: Any, width: float | None, height: float | None, canvas: Canvas) -> np.ndarray:
        """Draw the sparkline and return its normalized `(n, 2)` points.

        Raises `SparklineDataError` for empty or non-finite data. A canvas with
        a non-positive side is a no-op and returns an empty array.
        """
        inputs = self._inputs(data, width, height)
        self._last_inputs = inputs
        style = inputs.style
        series = inputs.data
        if not (inputs.width > 0 and inputs.height > 0):
            LOGGER.debug("skipping sparkline render on empty canvas %sx%s", inputs.width, inputs.height)
            return NO_POINTS

        bounds = resolve_bounds(series, style.min_value, style.max_value)
        labels: tuple[GridLabel, ...] = ()
        if style.enable_grid_lines:
            labels = self._labels.resolve(bounds, style, canvas)
        viewport = build_viewport(inputs.width, inputs.height, style.line_width, reserved_label_width(labels))

        if labels:
            self._draw_grid(canvas, viewport, labels)

        points = normalize_points(series, bounds, viewport)
        if points.shape[0] == 1:
            canvas.draw_points(points, self._single_point_paint())
            return points

        path = build_line_path(points, style.smoothing)
        fill = build_fill_path(path, style.fill_mode, viewport.width, viewport.height, style.line_width)
        if fill is not None:
            canvas.draw_path(fill, resolve_fill_paint(style, viewport))
        canvas.draw_path(path, resolve_stroke_paint(style, viewport))

        markers = select_markers(points, style.points_mode)
        if markers.shape[0]:
            canvas.draw_points(markers, resolve_point_paint(style))
        return points

    def _inputs(self, data: Any, width: float | None, height: float | None) -> RenderInputs:
        series = coerce_series(data)
        w, h = resolve_canvas_size(width, height, self.style)
        return RenderInputs(data=series, width=w, height=h, style=self.style)

    def _draw_grid(self, canvas: Canvas, viewport: Viewport, labels: tuple[GridLabel, ...]) -> None:
        paint = resolve_grid_paint(self.style)
        offsets = grid_line_offsets(viewport.drawable_height, len(labels))
        label_x = viewport.drawable_width + LABEL_GAP_PX
        for y, label in zip(offsets, labels):
            canvas.draw_path(Path((MoveTo(0.0, y), LineTo(viewport.drawable_width, y))), paint)
            canvas.draw_text(label.layout, label_x, y - label.layout.height / 2.0)

    def _single_point_paint(self) -> Paint:
        style = self.style
        if style.points_mode != "none":
            return resolve_point_paint(style)
        return Paint(color=style.line_color, style="stroke", stroke_width=style.line_width, cap="round")

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Any
import weakref

from sparkplot.canvas import Canvas, TextLayout, TextStyle
from sparkplot.scales import Bounds, format_grid_label, grid_line_values
from sparkplot.style import SparklineStyle


LOGGER = logging.getLogger(__name__)
LABEL_GAP_PX = 2.0


@dataclass(frozen=True)
class GridLabel:
    value: float
    layout: TextLayout


@dataclass
class LabelLayoutCache:
    """Grid label layouts, reused only while their key is unchanged."""

    key: tuple[Any, ...] | None = None
    labels: tuple[GridLabel, ...] = ()
    builds: int = field(default=0, repr=False)
    _canvas_ref: weakref.ref[Any] | None = field(default=None, repr=False)

    def invalidate(self) -> None:
        self.key = None
        self.labels = ()
        self._canvas_ref = None

    def resolve(self, bounds: Bounds, style: SparklineStyle, canvas: Canvas) -> tuple[GridLabel, ...]:
        key = label_cache_key(bounds, style)
        # Layouts are measured by the canvas, so a different canvas never reuses them.
        measured_by = self._canvas_ref() if self._canvas_ref is not None else None
        if key != self.key or measured_by is not canvas:
            self.labels = build_grid_labels(bounds, style, canvas)
            self.key = key
            self._canvas_ref = weakref.ref(canvas)
            self.builds += 1
            LOGGER.debug("rebuilt %d grid labels for bounds %s", len(self.labels), bounds)
        return self.labels


def label_cache_key(bounds: Bounds, style: SparklineStyle) -> tuple[Any, ...]:
    return (
        bounds,
        style.grid_line_amount,
        style.label_prefix,
        style.grid_line_label_color,
        style.label_font_size,
    )


def build_grid_labels(bounds: Bounds, style: SparklineStyle, canvas: Canvas) -> tuple[GridLabel, ...]:
    text_style = TextStyle(color=style.grid_line_label_color, font_size_px=style.label_font_size, bold=True)
    out: list[GridLabel] = []
    for value in grid_line_values(bounds, style.grid_line_amount).tolist():
        text = format_grid_label(value, style.label_prefix)
        out.append(GridLabel(value=value, layout=canvas.layout_text(text, text_style)))
    return tuple(out)


def reserved_label_width(labels: tuple[GridLabel, ...]) -> float:
    """Right margin needed by the widest label, gap included."""
    if not labels:
        return 0.0
    return max(label.layout.width for label in labels) + LABEL_GAP_PX

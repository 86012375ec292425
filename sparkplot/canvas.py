from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Protocol, Union

import numpy as np

from sparkplot.paint import Paint
from sparkplot.path import Path, Point
from sparkplot.style import RGBA


@dataclass(frozen=True)
class TextStyle:
    color: RGBA
    font_size_px: float = 10.0
    bold: bool = True


@dataclass(frozen=True)
class TextLayout:
    """Text shaped and measured by a canvas, ready to be painted."""

    text: str
    style: TextStyle
    width: float
    height: float


class Canvas(Protocol):
    """Drawing capability a sparkline is rendered against."""

    def layout_text(self, text: str, style: TextStyle) -> TextLayout: ...

    def draw_path(self, path: Path, paint: Paint) -> None: ...

    def draw_points(self, points: np.ndarray, paint: Paint) -> None: ...

    def draw_text(self, layout: TextLayout, x: float, y: float) -> None: ...


@dataclass(frozen=True)
class DrawPathOp:
    path: Path
    paint: Paint


@dataclass(frozen=True)
class DrawPointsOp:
    points: tuple[Point, ...]
    paint: Paint


@dataclass(frozen=True)
class DrawTextOp:
    layout: TextLayout
    x: float
    y: float


DrawOp = Union[DrawPathOp, DrawPointsOp, DrawTextOp]
TextMeasurer = Callable[[str, TextStyle], tuple[float, float]]


class RecordingCanvas:
    """Canvas that records draw calls as comparable op records."""

    def __init__(self, measure: TextMeasurer | None = None) -> None:
        if measure is None:
            from sparkplot.raster.draw_text import measure_with_font

            measure = measure_with_font
        self._measure = measure
        self.ops: list[DrawOp] = []

    def layout_text(self, text: str, style: TextStyle) -> TextLayout:
        w, h = self._measure(text, style)
        return TextLayout(text=text, style=style, width=float(w), height=float(h))

    def draw_path(self, path: Path, paint: Paint) -> None:
        self.ops.append(DrawPathOp(path=path, paint=paint))

    def draw_points(self, points: np.ndarray, paint: Paint) -> None:
        pts = tuple((float(x), float(y)) for x, y in np.asarray(points, dtype=np.float64).reshape(-1, 2).tolist())
        self.ops.append(DrawPointsOp(points=pts, paint=paint))

    def draw_text(self, layout: TextLayout, x: float, y: float) -> None:
        self.ops.append(DrawTextOp(layout=layout, x=float(x), y=float(y)))

    def ops_of(self, kind: type) -> list[DrawOp]:
        return [op for op in self.ops if isinstance(op, kind)]

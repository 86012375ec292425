from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from sparkplot.scales import Viewport
from sparkplot.style import RGBA, LinearGradient, SparklineStyle


PaintStyle = Literal["stroke", "fill"]
StrokeCap = Literal["butt", "round"]
StrokeJoin = Literal["round", "miter"]


@dataclass(frozen=True)
class Rect:
    left: float
    top: float
    width: float
    height: float


@dataclass(frozen=True)
class GradientShader:
    """A gradient bound to the rectangle it is evaluated over."""

    gradient: LinearGradient
    rect: Rect


@dataclass(frozen=True)
class Paint:
    color: RGBA
    style: PaintStyle = "stroke"
    stroke_width: float = 0.0
    cap: StrokeCap = "butt"
    join: StrokeJoin = "miter"
    shader: GradientShader | None = None


def drawable_rect(viewport: Viewport) -> Rect:
    return Rect(0.0, 0.0, viewport.drawable_width, viewport.drawable_height)


def _shader(gradient: LinearGradient | None, viewport: Viewport) -> GradientShader | None:
    if gradient is None:
        return None
    return GradientShader(gradient=gradient, rect=drawable_rect(viewport))


def resolve_stroke_paint(style: SparklineStyle, viewport: Viewport) -> Paint:
    return Paint(
        color=style.line_color,
        style="stroke",
        stroke_width=style.line_width,
        cap="round",
        join="miter" if style.sharp_corners else "round",
        shader=_shader(style.line_gradient, viewport),
    )


def resolve_fill_paint(style: SparklineStyle, viewport: Viewport) -> Paint:
    return Paint(
        color=style.fill_color,
        style="fill",
        stroke_width=0.0,
        shader=_shader(style.fill_gradient, viewport),
    )


def resolve_point_paint(style: SparklineStyle) -> Paint:
    # Unset point styling inherits from the line.
    size = style.line_width if style.point_size is None else style.point_size
    color = style.line_color if style.point_color is None else style.point_color
    return Paint(color=color, style="stroke", stroke_width=size, cap="round")


def resolve_grid_paint(style: SparklineStyle) -> Paint:
    return Paint(color=style.grid_line_color, style="stroke", stroke_width=style.grid_line_width)

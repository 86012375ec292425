from sparkplot.api import render_ops, sparkline
from sparkplot.canvas import Canvas, DrawPathOp, DrawPointsOp, DrawTextOp, RecordingCanvas, TextLayout, TextStyle
from sparkplot.errors import SparklineDataError
from sparkplot.path import Close, CubicTo, LineTo, MoveTo, Path
from sparkplot.renderer import RenderInputs, SparklineRenderer, needs_repaint
from sparkplot.style import DEFAULT_STYLE, LinearGradient, SparklineStyle, validate_style_overrides

__all__ = [
    "Canvas",
    "Close",
    "CubicTo",
    "DEFAULT_STYLE",
    "DrawPathOp",
    "DrawPointsOp",
    "DrawTextOp",
    "LineTo",
    "LinearGradient",
    "MoveTo",
    "Path",
    "RecordingCanvas",
    "RenderInputs",
    "SparklineDataError",
    "SparklineRenderer",
    "SparklineStyle",
    "TextLayout",
    "TextStyle",
    "needs_repaint",
    "render_ops",
    "sparkline",
    "validate_style_overrides",
]

from __future__ import annotations

import math

from sparkplot.style import DEFAULT_STYLE, SparklineStyle


def resolve_canvas_size(
    width: float | None,
    height: float | None,
    style: SparklineStyle = DEFAULT_STYLE,
) -> tuple[float, float]:
    """Substitute the fallback size on any axis the host leaves unbounded."""
    return (
        _resolve_axis(width, style.fallback_width),
        _resolve_axis(height, style.fallback_height),
    )


def _resolve_axis(value: float | None, fallback: float) -> float:
    if value is None:
        return float(fallback)
    value = float(value)
    if math.isinf(value) and value > 0:
        return float(fallback)
    return value

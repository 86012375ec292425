from __future__ import annotations

from dataclasses import dataclass
import math

import numpy as np


@dataclass(frozen=True)
class Bounds:
    min: float
    max: float

    @property
    def span(self) -> float:
        return self.max - self.min

    @property
    def half_span(self) -> float:
        # Stays finite even when `span` overflows for bounds near +-1.8e308.
        return self.max / 2.0 - self.min / 2.0

    @property
    def is_flat(self) -> bool:
        return self.half_span == 0


@dataclass(frozen=True)
class Viewport:
    """Canvas size plus the drawable region left after margins are reserved."""

    width: float
    height: float
    line_width: float
    drawable_width: float
    drawable_height: float

    @property
    def inset(self) -> float:
        return self.line_width / 2.0


def resolve_bounds(data: np.ndarray, min_value: float | None = None, max_value: float | None = None) -> Bounds:
    lo = float(np.min(data)) if min_value is None else float(min_value)
    hi = float(np.max(data)) if max_value is None else float(max_value)
    return Bounds(min=lo, max=hi)


def build_viewport(width: float, height: float, line_width: float, label_width: float = 0.0) -> Viewport:
    return Viewport(
        width=float(width),
        height=float(height),
        line_width=float(line_width),
        drawable_width=max(0.0, float(width) - line_width - label_width),
        drawable_height=max(0.0, float(height) - line_width),
    )


def width_normalizer(count: int, viewport: Viewport) -> float:
    if count < 2:
        return 0.0
    return viewport.drawable_width / (count - 1)


def normalize_points(data: np.ndarray, bounds: Bounds, viewport: Viewport) -> np.ndarray:
    """Map samples to canvas coordinates, one `(x, y)` row per sample."""
    n = int(data.size)
    inset = viewport.inset
    xs = np.arange(n, dtype=np.float64) * width_normalizer(n, viewport) + inset
    if bounds.is_flat:
        ys = np.full(n, viewport.drawable_height / 2.0 + inset, dtype=np.float64)
    else:
        fraction = (data / 2.0 - bounds.min / 2.0) / bounds.half_span
        ys = viewport.drawable_height - fraction * viewport.drawable_height + inset
    return np.column_stack((xs, ys))


def grid_line_values(bounds: Bounds, amount: int) -> np.ndarray:
    """Top line carries `max`, bottom line carries `min`."""
    t = np.arange(amount, dtype=np.float64) / (amount - 1)
    # Interpolated rather than stepped so extreme bounds cannot overflow.
    values = bounds.max * (1.0 - t) + bounds.min * t
    step = abs(bounds.half_span) / (amount - 1) * 2.0
    # Snap floating-point drift like 5.55e-17 to an exact zero label.
    if step != 0 and np.isfinite(step):
        values[np.isclose(values, 0.0, rtol=0.0, atol=step * 1e-9)] = 0.0
    return values


def grid_line_offsets(drawable_height: float, amount: int) -> list[float]:
    dist = drawable_height / (amount - 1)
    return [float(_round_half_away(dist * i)) for i in range(amount)]


def format_grid_label(value: float, prefix: str = "") -> str:
    """Format a grid value: 4 significant digits below 1, 2 decimals up to 999, integers above."""
    if value == 0:
        text = "0.00"
    elif value < 1:
        text = to_precision(value, 4)
    elif value < 999:
        text = f"{value:.2f}"
    else:
        text = str(_round_half_away(value))
    return prefix + text


def to_precision(value: float, digits: int) -> str:
    """`digits` significant digits, positional unless the exponent is below -6 or at least `digits`."""
    mantissa, exp_text = f"{value:.{digits - 1}e}".split("e")
    exponent = int(exp_text)
    if exponent < -6 or exponent >= digits:
        sign = "+" if exponent >= 0 else ""
        return f"{mantissa}e{sign}{exponent}"
    return f"{value:.{digits - 1 - exponent}f}"


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))

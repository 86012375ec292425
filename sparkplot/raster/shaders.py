from __future__ import annotations

import numpy as np

from sparkplot.paint import GradientShader


def evaluate_shader(shader: GradientShader, width: int, height: int) -> np.ndarray:
    """Evaluate a linear gradient at every pixel center of a canvas.

    Positions are projected onto the begin->end axis of the shader's rect and
    clamped, so pixels outside the rect take the nearest edge color.
    """
    rect = shader.rect
    gradient = shader.gradient
    bx = rect.left + gradient.begin[0] * rect.width
    by = rect.top + gradient.begin[1] * rect.height
    ex = rect.left + gradient.end[0] * rect.width
    ey = rect.top + gradient.end[1] * rect.height
    dx = ex - bx
    dy = ey - by
    length_sq = dx * dx + dy * dy

    xs = np.arange(width, dtype=np.float64) + 0.5
    ys = np.arange(height, dtype=np.float64) + 0.5
    if length_sq <= 0:
        t = np.zeros((height, width), dtype=np.float64)
    else:
        t = ((xs[None, :] - bx) * dx + (ys[:, None] - by) * dy) / length_sq
    np.clip(t, 0.0, 1.0, out=t)

    stops = np.asarray(gradient.resolved_stops(), dtype=np.float64)
    colors = np.asarray(gradient.colors, dtype=np.float64)
    out = np.empty((height, width, 4), dtype=np.uint8)
    for channel in range(4):
        values = np.interp(t, stops, colors[:, channel])
        out[:, :, channel] = np.clip(np.rint(values), 0, 255).astype(np.uint8)
    return out

from __future__ import annotations

import numpy as np
from PIL import Image, ImageDraw


Polyline = tuple[np.ndarray, bool]


def stroke_mask(
    polylines: list[Polyline],
    width: int,
    height: int,
    *,
    stroke_width: float,
    join: str = "round",
    cap: str = "round",
) -> np.ndarray:
    """Coverage in [0, 1] of the stroked polylines on a `width` x `height` grid.

    Hairlines thinner than a pixel are drawn one pixel wide at reduced
    coverage.
    """
    brush = max(1, int(round(stroke_width)))
    image = Image.new("L", (width, height), 0)
    draw = ImageDraw.Draw(image)
    for pts, closed in polylines:
        if pts.shape[0] == 0:
            continue
        if closed:
            pts = np.vstack((pts, pts[:1]))
        xy = [(float(x), float(y)) for x, y in pts.tolist()]
        if len(xy) > 1:
            draw.line(xy, fill=255, width=brush, joint="curve" if join == "round" else None)
        if cap == "round" and not closed and brush > 1:
            for x, y in (xy[0], xy[-1]):
                _disc(draw, x, y, brush / 2.0)
    coverage = np.asarray(image, dtype=np.float32) / 255.0
    if stroke_width < 1.0:
        coverage *= max(0.0, stroke_width)
    return coverage


def fill_mask(polylines: list[Polyline], width: int, height: int) -> np.ndarray:
    """Even-odd coverage of the polygons formed by the polylines."""
    inside = np.zeros((height, width), dtype=bool)
    for pts, _closed in polylines:
        if pts.shape[0] < 3:
            continue
        image = Image.new("1", (width, height), 0)
        ImageDraw.Draw(image).polygon([(float(x), float(y)) for x, y in pts.tolist()], fill=1)
        inside ^= np.asarray(image, dtype=bool)
    return inside.astype(np.float32)


def _disc(draw: ImageDraw.ImageDraw, x: float, y: float, radius: float) -> None:
    draw.ellipse((x - radius, y - radius, x + radius, y + radius), fill=255)

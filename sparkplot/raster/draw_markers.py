from __future__ import annotations

import numpy as np
from PIL import Image, ImageDraw


def marker_mask(points: np.ndarray, width: int, height: int, *, size: float, cap: str = "round") -> np.ndarray:
    """Coverage of one marker per point: discs for round caps, squares otherwise."""
    image = Image.new("L", (width, height), 0)
    draw = ImageDraw.Draw(image)
    radius = max(0.5, size / 2.0)
    for x, y in np.asarray(points, dtype=np.float64).reshape(-1, 2).tolist():
        box = (x - radius, y - radius, x + radius, y + radius)
        if cap == "round":
            draw.ellipse(box, fill=255)
        else:
            draw.rectangle(box, fill=255)
    return np.asarray(image, dtype=np.float32) / 255.0

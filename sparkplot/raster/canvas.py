from __future__ import annotations

import numpy as np

from sparkplot.style import RGBA


def new_canvas(width: int, height: int, color: RGBA = (0, 0, 0, 0)) -> np.ndarray:
    canvas = np.empty((height, width, 4), dtype=np.uint8)
    canvas[:, :] = np.asarray(color, dtype=np.uint8)
    return canvas


def blend_coverage(
    dst: np.ndarray,
    coverage: np.ndarray,
    source: RGBA | np.ndarray,
    x0: int = 0,
    y0: int = 0,
) -> None:
    """Source-over composite `source` into `dst` through a coverage patch.

    `coverage` is an (h, w) array in [0, 1] placed at (x0, y0); `source` is
    either a flat color or an (H, W, 4) image aligned with `dst`.
    """
    h, w = coverage.shape
    xa = max(0, x0)
    ya = max(0, y0)
    xb = min(dst.shape[1], x0 + w)
    yb = min(dst.shape[0], y0 + h)
    if xa >= xb or ya >= yb:
        return

    cov = coverage[ya - y0 : yb - y0, xa - x0 : xb - x0].astype(np.float32)
    if not np.any(cov > 0):
        return

    if isinstance(source, np.ndarray):
        src = source[ya:yb, xa:xb].astype(np.float32)
        src_rgb = src[:, :, :3]
        src_alpha = src[:, :, 3] / 255.0 * cov
    else:
        src_rgb = np.asarray(source[:3], dtype=np.float32).reshape(1, 1, 3)
        src_alpha = (source[3] / 255.0) * cov

    patch = dst[ya:yb, xa:xb]
    dst_rgb = patch[:, :, :3].astype(np.float32)
    dst_alpha = patch[:, :, 3].astype(np.float32) / 255.0

    out_alpha = src_alpha + dst_alpha * (1.0 - src_alpha)
    out_rgb_num = src_rgb * src_alpha[:, :, None] + dst_rgb * dst_alpha[:, :, None] * (1.0 - src_alpha[:, :, None])
    safe_alpha = np.where(out_alpha > 1e-6, out_alpha, 1.0)
    out_rgb = out_rgb_num / safe_alpha[:, :, None]

    patch[:, :, :3] = np.clip(np.rint(out_rgb), 0, 255).astype(np.uint8)
    patch[:, :, 3] = np.clip(np.rint(out_alpha * 255.0), 0, 255).astype(np.uint8)

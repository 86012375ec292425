from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import TYPE_CHECKING

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from sparkplot.raster.canvas import blend_coverage
from sparkplot.style import RGBA

if TYPE_CHECKING:
    from sparkplot.canvas import TextStyle


DEFAULT_FONT_SIZE_PX = 10.0
FONT_PATTERNS = (
    "dejavusans-bold",
    "dejavusans",
    "arialbold",
    "arial",
    "helvetica",
    "liberationsans-bold",
    "liberationsans",
)
FONT_DIRS = (
    Path.home() / "Library" / "Fonts",
    Path("/Library/Fonts"),
    Path("/System/Library/Fonts"),
    Path("/System/Library/Fonts/Supplemental"),
    Path("/usr/share/fonts"),
    Path("/usr/local/share/fonts"),
)


def draw_text(
    dst: np.ndarray,
    x: float,
    y: float,
    text: str,
    color: RGBA,
    *,
    font_size_px: float = DEFAULT_FONT_SIZE_PX,
    embolden_px: int = 1,
) -> None:
    if not text:
        return
    mask = _render_mask(text, _load_font(font_size_px), embolden_px)
    blend_coverage(dst, mask.astype(np.float32) / 255.0, color, int(round(x)), int(round(y)))


def text_size(text: str, *, font_size_px: float = DEFAULT_FONT_SIZE_PX, embolden_px: int = 1) -> tuple[int, int]:
    font = _load_font(font_size_px)
    if not text:
        ascent, descent = font.getmetrics()
        return (0, max(1, int(ascent + descent)))
    left, top, right, bottom = font.getbbox(text)
    return (max(0, int(right - left)) + max(0, embolden_px - 1), max(1, int(bottom - top)))


def embolden_px(style: TextStyle) -> int:
    return 2 if style.bold else 1


def measure_with_font(text: str, style: TextStyle) -> tuple[float, float]:
    w, h = text_size(text, font_size_px=style.font_size_px, embolden_px=embolden_px(style))
    return (float(w), float(h))


@lru_cache(maxsize=256)
def _render_mask(text: str, font: ImageFont.FreeTypeFont | ImageFont.ImageFont, embolden_px: int) -> np.ndarray:
    left, top, right, bottom = font.getbbox(text)
    extra = max(0, embolden_px - 1)
    image = Image.new("L", (max(1, int(right - left)) + extra, max(1, int(bottom - top))), 0)
    ImageDraw.Draw(image).text((-left, -top), text, fill=255, font=font)
    mask = np.asarray(image, dtype=np.uint8)
    if extra:
        # Fake bold: smear the glyph coverage to the right.
        out = mask.copy()
        for shift in range(1, extra + 1):
            np.maximum(out[:, shift:], mask[:, :-shift], out=out[:, shift:])
        mask = out
    return mask


@lru_cache(maxsize=32)
def _load_font(font_size_px: float) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
    size = max(1, int(round(font_size_px)))
    path = _resolve_font_path()
    if path is not None:
        try:
            return ImageFont.truetype(str(path), size=size)
        except OSError:
            pass
    return ImageFont.load_default(size=size)


@lru_cache(maxsize=1)
def _resolve_font_path() -> Path | None:
    candidates: list[Path] = []
    for base in FONT_DIRS:
        if not base.exists():
            continue
        for ext in ("*.ttf", "*.otf"):
            candidates.extend(sorted(base.rglob(ext)))
    for pattern in FONT_PATTERNS:
        for path in candidates:
            if path.stem.lower().replace(" ", "") == pattern:
                return path
    return None

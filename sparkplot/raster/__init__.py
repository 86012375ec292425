from .canvas import blend_coverage, new_canvas
from .draw_lines import fill_mask, stroke_mask
from .draw_markers import marker_mask
from .draw_text import draw_text, text_size
from .shaders import evaluate_shader

__all__ = [
    "blend_coverage",
    "draw_text",
    "evaluate_shader",
    "fill_mask",
    "marker_mask",
    "new_canvas",
    "stroke_mask",
    "text_size",
]

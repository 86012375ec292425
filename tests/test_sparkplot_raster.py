from __future__ import annotations

import unittest

import numpy as np

from sparkplot import LinearGradient, SparklineDataError, sparkline
from sparkplot.canvas import RecordingCanvas, TextLayout, TextStyle
from sparkplot.paint import GradientShader, Paint, Rect
from sparkplot.path import LineTo, MoveTo, Path
from sparkplot.raster import blend_coverage, evaluate_shader, new_canvas, stroke_mask, text_size
from sparkplot.raster.backend import RasterCanvas
from sparkplot.style import LIGHT_BLUE_200


EXAMPLE = [0.0, 1.0, 1.5, 2.0, 0.0, 0.0, -0.5, -1.0, -0.5, 0.0, 0.0]
RED = (255, 0, 0, 255)


class BlendTests(unittest.TestCase):
    def test_full_coverage_replaces_transparent_pixels(self) -> None:
        canvas = new_canvas(4, 4)
        blend_coverage(canvas, np.ones((4, 4), dtype=np.float32), RED)
        self.assertTrue(np.all(canvas == np.asarray(RED, dtype=np.uint8)))

    def test_patch_offsets_are_clipped(self) -> None:
        canvas = new_canvas(4, 4)
        blend_coverage(canvas, np.ones((2, 2), dtype=np.float32), RED, x0=3, y0=-1)
        self.assertEqual(int(canvas[0, 3, 3]), 255)
        self.assertEqual(int(canvas[1, 3, 3]), 0)
        self.assertEqual(int(canvas[0, 2, 3]), 0)

    def test_half_coverage_blends_over_opaque_background(self) -> None:
        canvas = new_canvas(1, 1, color=(0, 0, 0, 255))
        blend_coverage(canvas, np.full((1, 1), 0.5, dtype=np.float32), (200, 100, 0, 255))
        np.testing.assert_array_equal(canvas[0, 0], [100, 50, 0, 255])


class ShaderTests(unittest.TestCase):
    def test_horizontal_gradient_ramps_left_to_right(self) -> None:
        gradient = LinearGradient(colors=((0, 0, 0, 255), (255, 255, 255, 255)))
        image = evaluate_shader(GradientShader(gradient, Rect(0.0, 0.0, 10.0, 4.0)), 12, 4)
        self.assertEqual(image.shape, (4, 12, 4))
        row = image[0, :, 0].astype(int)
        self.assertTrue(np.all(np.diff(row) >= 0))
        self.assertEqual(int(row[0]), 13)
        # pixels past the rect clamp to the end color
        self.assertEqual(int(row[-1]), 255)
        self.assertTrue(np.all(image[:, :, 3] == 255))

    def test_vertical_gradient_with_stops(self) -> None:
        gradient = LinearGradient(
            colors=((255, 0, 0, 255), (255, 0, 0, 255), (0, 0, 255, 255)),
            stops=(0.0, 0.5, 1.0),
            begin=(0.5, 0.0),
            end=(0.5, 1.0),
        )
        image = evaluate_shader(GradientShader(gradient, Rect(0.0, 0.0, 4.0, 10.0)), 4, 10)
        self.assertEqual(tuple(image[2, 0]), (255, 0, 0, 255))
        self.assertGreater(int(image[9, 0, 2]), 200)


class StrokeMaskTests(unittest.TestCase):
    def test_hairline_has_partial_coverage(self) -> None:
        line = [(np.asarray([[0.0, 2.0], [9.0, 2.0]]), False)]
        coverage = stroke_mask(line, 10, 5, stroke_width=0.5)
        self.assertAlmostEqual(float(coverage.max()), 0.5, places=5)
        self.assertEqual(float(coverage[0].max()), 0.0)


class RasterCanvasTests(unittest.TestCase):
    def test_stroke_and_points_draw_pixels(self) -> None:
        canvas = RasterCanvas(20, 10)
        canvas.draw_path(Path((MoveTo(1.0, 5.0), LineTo(18.0, 5.0))), Paint(color=RED, stroke_width=3.0, cap="round"))
        frame = canvas.to_rgba()
        self.assertEqual(int(frame[5, 10, 3]), 255)
        self.assertEqual(int(frame[0, 10, 3]), 0)

        canvas.draw_points(np.asarray([[10.0, 1.0]]), Paint(color=(0, 255, 0, 255), stroke_width=2.0, cap="round"))
        self.assertEqual(int(canvas.frame[1, 10, 1]), 255)

    def test_text_layout_and_paint(self) -> None:
        canvas = RasterCanvas(80, 20)
        style = TextStyle(color=(255, 255, 255, 255), font_size_px=10.0)
        layout = canvas.layout_text("$12.50", style)
        self.assertIsInstance(layout, TextLayout)
        self.assertGreater(layout.width, 0)
        self.assertEqual((layout.width, layout.height), tuple(float(v) for v in text_size("$12.50", embolden_px=2)))
        canvas.draw_text(layout, 2, 2)
        self.assertTrue(np.any(canvas.frame[:, :, 3] > 0))

    def test_recording_canvas_measures_with_raster_fonts_by_default(self) -> None:
        canvas = RecordingCanvas()
        bold = canvas.layout_text("$12.50", TextStyle(color=(255, 255, 255, 255)))
        self.assertEqual((bold.width, bold.height), tuple(float(v) for v in text_size("$12.50", embolden_px=2)))
        plain = canvas.layout_text("$12.50", TextStyle(color=(255, 255, 255, 255), bold=False))
        self.assertEqual((plain.width, plain.height), tuple(float(v) for v in text_size("$12.50", embolden_px=1)))

    def test_rejects_empty_size(self) -> None:
        with self.assertRaises(ValueError):
            RasterCanvas(0, 10)


class SparklineFrameTests(unittest.TestCase):
    def test_default_frame_shape_and_coverage(self) -> None:
        frame = sparkline(EXAMPLE)
        self.assertEqual(frame.shape, (100, 300, 4))
        self.assertEqual(frame.dtype, np.uint8)
        self.assertTrue(np.any(frame[:, :, 3] > 0))
        self.assertEqual(int(frame[0, 0, 3]), 0)

    def test_fill_below_covers_bottom_edge(self) -> None:
        frame = sparkline(EXAMPLE, 300, 100, fill_mode="below")
        self.assertEqual(tuple(int(c) for c in frame[99, 150]), LIGHT_BLUE_200)
        self.assertEqual(int(frame[0, 150, 3]), 0)

    def test_fill_above_covers_top_edge(self) -> None:
        frame = sparkline(EXAMPLE, 300, 100, fill_mode="above")
        self.assertEqual(tuple(int(c) for c in frame[0, 150]), LIGHT_BLUE_200)
        self.assertEqual(int(frame[99, 150, 3]), 0)

    def test_same_inputs_rasterize_identically(self) -> None:
        options = dict(fill_mode="below", points_mode="all", use_cubic_smoothing=True, enable_grid_lines=True)
        self.assertTrue(np.array_equal(sparkline(EXAMPLE, 200, 60, **options), sparkline(EXAMPLE, 200, 60, **options)))

    def test_empty_canvas_returns_empty_frame(self) -> None:
        self.assertEqual(sparkline(EXAMPLE, 0, 100).shape, (0, 0, 4))

    def test_empty_data_raises(self) -> None:
        with self.assertRaises(SparklineDataError):
            sparkline([], 100, 40)


if __name__ == "__main__":
    unittest.main()

import math
import unittest

from sparkplot.display import resolve_canvas_size
from sparkplot.style import DEFAULT_STYLE, LinearGradient, SparklineStyle, parse_color, validate_style_overrides


class SparklineStyleTests(unittest.TestCase):
    def test_defaults(self) -> None:
        style = SparklineStyle()
        self.assertEqual(style.line_width, 2.0)
        self.assertEqual(style.cubic_smoothing_factor, 0.15)
        self.assertIsNone(style.smoothing)
        self.assertEqual((style.fallback_width, style.fallback_height), (300.0, 100.0))
        self.assertEqual(style.grid_line_amount, 5)
        self.assertEqual(style.grid_line_width, 0.5)
        self.assertEqual(style.fill_mode, "none")
        self.assertEqual(style.points_mode, "none")
        self.assertFalse(style.enable_grid_lines)

    def test_smoothing_factor_exposed_only_when_enabled(self) -> None:
        self.assertEqual(SparklineStyle(use_cubic_smoothing=True, cubic_smoothing_factor=0.6).smoothing, 0.6)

    def test_rejects_invalid_fields(self) -> None:
        cases = [
            ({"fill_mode": "left"}, "fill_mode"),
            ({"points_mode": "first"}, "points_mode"),
            ({"grid_line_amount": 1}, "grid_line_amount"),
            ({"line_width": -1.0}, "line_width"),
            ({"min_value": math.nan}, "min_value"),
            ({"line_color": (0, 0, 0)}, "line_color"),
        ]
        for kwargs, field_name in cases:
            with self.subTest(field=field_name):
                with self.assertRaisesRegex(ValueError, field_name):
                    SparklineStyle(**kwargs)

    def test_gradient_validation(self) -> None:
        with self.assertRaisesRegex(ValueError, "two colors"):
            LinearGradient(colors=((0, 0, 0, 255),))
        with self.assertRaisesRegex(ValueError, "stops"):
            LinearGradient(colors=((0, 0, 0, 255), (255, 255, 255, 255)), stops=(0.5,))
        gradient = LinearGradient(colors=((0, 0, 0, 255),) * 3)
        self.assertEqual(gradient.resolved_stops(), (0.0, 0.5, 1.0))


class StyleOverrideTests(unittest.TestCase):
    def test_no_overrides_returns_defaults(self) -> None:
        self.assertEqual(validate_style_overrides(), DEFAULT_STYLE)

    def test_hex_colors_and_gradients_are_coerced(self) -> None:
        style = validate_style_overrides(
            {
                "line_color": "#112233",
                "fill_color": "#44556680",
                "fill_gradient": {"colors": ["#000000", "#FFFFFF"], "begin": [0.5, 0.0], "end": [0.5, 1.0]},
            }
        )
        self.assertEqual(style.line_color, (17, 34, 51, 255))
        self.assertEqual(style.fill_color, (68, 85, 102, 128))
        assert style.fill_gradient is not None
        self.assertEqual(style.fill_gradient.colors, ((0, 0, 0, 255), (255, 255, 255, 255)))
        self.assertEqual(style.fill_gradient.end, (0.5, 1.0))

    def test_overrides_merge_over_base(self) -> None:
        base = SparklineStyle(fill_mode="above")
        style = validate_style_overrides({"line_width": 4}, base=base)
        self.assertEqual(style.fill_mode, "above")
        self.assertEqual(style.line_width, 4)

    def test_unknown_option_rejected(self) -> None:
        with self.assertRaisesRegex(ValueError, "Unknown sparkline option"):
            validate_style_overrides({"colour": "#000000"})

    def test_parse_color_rejects_garbage(self) -> None:
        with self.assertRaisesRegex(ValueError, "hex color"):
            parse_color("blue")
        with self.assertRaisesRegex(ValueError, r"\[0, 255\]"):
            parse_color((0, 0, 300))
        self.assertEqual(parse_color([1, 2, 3]), (1, 2, 3, 255))


class CanvasSizeTests(unittest.TestCase):
    def test_unbounded_axes_use_fallback(self) -> None:
        self.assertEqual(resolve_canvas_size(None, None), (300.0, 100.0))
        self.assertEqual(resolve_canvas_size(math.inf, 40), (300.0, 40.0))
        self.assertEqual(resolve_canvas_size(120, math.inf), (120.0, 100.0))

    def test_custom_fallback(self) -> None:
        style = SparklineStyle(fallback_width=80.0, fallback_height=20.0)
        self.assertEqual(resolve_canvas_size(None, None, style), (80.0, 20.0))

    def test_bounded_sizes_pass_through(self) -> None:
        self.assertEqual(resolve_canvas_size(0, -3), (0.0, -3.0))


if __name__ == "__main__":
    unittest.main()

from __future__ import annotations

from dataclasses import dataclass, fields
import math
import re
from typing import Any, Literal, Mapping

RGBA = tuple[int, int, int, int]
FillMode = Literal["none", "above", "below"]
PointsMode = Literal["none", "all", "last"]

FILL_MODES: tuple[str, ...] = ("none", "above", "below")
POINTS_MODES: tuple[str, ...] = ("none", "all", "last")

LIGHT_BLUE: RGBA = (3, 169, 244, 255)
LIGHT_BLUE_800: RGBA = (2, 119, 189, 255)
LIGHT_BLUE_200: RGBA = (129, 212, 250, 255)
GREY: RGBA = (158, 158, 158, 255)

_HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}([0-9a-fA-F]{2})?$")
_COLOR_FIELDS = ("line_color", "point_color", "fill_color", "grid_line_color", "grid_line_label_color")


def parse_color(value: Any) -> RGBA:
    """Coerce `#RRGGBB`, `#RRGGBBAA`, RGB or RGBA tuples to an RGBA tuple."""
    if isinstance(value, str):
        if not _HEX_COLOR.match(value):
            raise ValueError(f"color must be a hex color (#RRGGBB or #RRGGBBAA), got {value!r}")
        digits = value[1:]
        r, g, b = (int(digits[i : i + 2], 16) for i in (0, 2, 4))
        a = int(digits[6:8], 16) if len(digits) == 8 else 255
        return (r, g, b, a)
    if isinstance(value, (tuple, list)) and len(value) in (3, 4):
        channels = [int(c) for c in value]
        if len(channels) == 3:
            channels.append(255)
        if any(c < 0 or c > 255 for c in channels):
            raise ValueError(f"color channels must be in [0, 255], got {tuple(value)!r}")
        return (channels[0], channels[1], channels[2], channels[3])
    raise ValueError(f"unsupported color value: {value!r}")


def _finite(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


def _check_rgba(name: str, value: Any) -> None:
    if not isinstance(value, tuple) or len(value) != 4:
        raise ValueError(f"`{name}` must be an RGBA tuple")
    if any(not isinstance(c, int) or c < 0 or c > 255 for c in value):
        raise ValueError(f"`{name}` channels must be ints in [0, 255]")


@dataclass(frozen=True)
class LinearGradient:
    """Color ramp evaluated across a rectangle.

    `begin` and `end` are fractions of the target rectangle, so the default
    runs left to right through the vertical center. `stops` defaults to evenly
    spaced positions.
    """

    colors: tuple[RGBA, ...]
    stops: tuple[float, ...] | None = None
    begin: tuple[float, float] = (0.0, 0.5)
    end: tuple[float, float] = (1.0, 0.5)

    def __post_init__(self) -> None:
        if len(self.colors) < 2:
            raise ValueError("LinearGradient requires at least two colors")
        for i, color in enumerate(self.colors):
            _check_rgba(f"colors[{i}]", color)
        if self.stops is not None:
            if len(self.stops) != len(self.colors):
                raise ValueError("LinearGradient `stops` must match `colors` in length")
            if any(s < 0.0 or s > 1.0 for s in self.stops):
                raise ValueError("LinearGradient `stops` must be in [0, 1]")
            if any(b < a for a, b in zip(self.stops, self.stops[1:])):
                raise ValueError("LinearGradient `stops` must be non-decreasing")
        if self.begin == self.end:
            raise ValueError("LinearGradient `begin` and `end` must differ")

    def resolved_stops(self) -> tuple[float, ...]:
        if self.stops is not None:
            return self.stops
        last = len(self.colors) - 1
        return tuple(i / last for i in range(len(self.colors)))


@dataclass(frozen=True)
class SparklineStyle:
    """Every rendering option of a sparkline, validated once at construction.

    `point_size` / `point_color` set to None inherit the line's width and
    color. `min_value` / `max_value` override the data bounds independently.
    """

    line_width: float = 2.0
    line_color: RGBA = LIGHT_BLUE
    line_gradient: LinearGradient | None = None
    sharp_corners: bool = False
    use_cubic_smoothing: bool = False
    cubic_smoothing_factor: float = 0.15
    fill_mode: FillMode = "none"
    fill_color: RGBA = LIGHT_BLUE_200
    fill_gradient: LinearGradient | None = None
    points_mode: PointsMode = "none"
    point_size: float | None = 4.0
    point_color: RGBA | None = LIGHT_BLUE_800
    enable_grid_lines: bool = False
    grid_line_color: RGBA = GREY
    grid_line_amount: int = 5
    grid_line_width: float = 0.5
    grid_line_label_color: RGBA = GREY
    label_prefix: str = ""
    label_font_size: float = 10.0
    fallback_width: float = 300.0
    fallback_height: float = 100.0
    min_value: float | None = None
    max_value: float | None = None

    def __post_init__(self) -> None:
        if not _finite(self.line_width) or self.line_width < 0:
            raise ValueError("`line_width` must be a finite number >= 0")
        if not _finite(self.cubic_smoothing_factor):
            raise ValueError("`cubic_smoothing_factor` must be finite")
        if self.fill_mode not in FILL_MODES:
            raise ValueError(f"`fill_mode` must be one of {FILL_MODES}, got {self.fill_mode!r}")
        if self.points_mode not in POINTS_MODES:
            raise ValueError(f"`points_mode` must be one of {POINTS_MODES}, got {self.points_mode!r}")
        if self.point_size is not None and (not _finite(self.point_size) or self.point_size < 0):
            raise ValueError("`point_size` must be a finite number >= 0 or None")
        if isinstance(self.grid_line_amount, bool) or not isinstance(self.grid_line_amount, int):
            raise ValueError("`grid_line_amount` must be an int")
        if self.grid_line_amount < 2:
            raise ValueError("`grid_line_amount` must be >= 2")
        if not _finite(self.grid_line_width) or self.grid_line_width < 0:
            raise ValueError("`grid_line_width` must be a finite number >= 0")
        if not _finite(self.label_font_size) or self.label_font_size <= 0:
            raise ValueError("`label_font_size` must be a positive number")
        if not isinstance(self.label_prefix, str):
            raise ValueError("`label_prefix` must be a string")
        if self.fallback_width <= 0 or self.fallback_height <= 0:
            raise ValueError("`fallback_width`/`fallback_height` must be > 0")
        for name in ("min_value", "max_value"):
            value = getattr(self, name)
            if value is not None and not _finite(value):
                raise ValueError(f"`{name}` must be finite when set")
        for name in _COLOR_FIELDS:
            value = getattr(self, name)
            if name == "point_color" and value is None:
                continue
            _check_rgba(name, value)

    @property
    def smoothing(self) -> float | None:
        return self.cubic_smoothing_factor if self.use_cubic_smoothing else None


DEFAULT_STYLE = SparklineStyle()


def validate_style_overrides(
    overrides: Mapping[str, Any] | None = None,
    base: SparklineStyle = DEFAULT_STYLE,
) -> SparklineStyle:
    """Merge plain overrides (e.g. parsed from JSON) over `base`."""

    raw: dict[str, Any] = {f.name: getattr(base, f.name) for f in fields(SparklineStyle)}
    if overrides:
        for key, value in overrides.items():
            if key not in raw:
                raise ValueError(f"Unknown sparkline option: {key}")
            raw[key] = value

    for key in _COLOR_FIELDS:
        if key == "point_color" and raw[key] is None:
            continue
        raw[key] = parse_color(raw[key])
    for key in ("line_gradient", "fill_gradient"):
        raw[key] = _coerce_gradient(raw[key])

    return SparklineStyle(**raw)


def _coerce_gradient(value: Any) -> LinearGradient | None:
    if value is None or isinstance(value, LinearGradient):
        return value
    if isinstance(value, Mapping):
        colors = tuple(parse_color(c) for c in value.get("colors", ()))
        stops = value.get("stops")
        return LinearGradient(
            colors=colors,
            stops=tuple(float(s) for s in stops) if stops is not None else None,
            begin=tuple(value.get("begin", (0.0, 0.5))),  # type: ignore[arg-type]
            end=tuple(value.get("end", (1.0, 0.5))),  # type: ignore[arg-type]
        )
    raise ValueError(f"unsupported gradient value: {value!r}")

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

import numpy as np

from sparkplot.style import FillMode


Point = tuple[float, float]


@dataclass(frozen=True)
class MoveTo:
    x: float
    y: float


@dataclass(frozen=True)
class LineTo:
    x: float
    y: float


@dataclass(frozen=True)
class CubicTo:
    x1: float
    y1: float
    x2: float
    y2: float
    x: float
    y: float


@dataclass(frozen=True)
class Close:
    pass


PathCommand = Union[MoveTo, LineTo, CubicTo, Close]


@dataclass(frozen=True)
class Path:
    """Immutable vector path; builders return new paths instead of mutating."""

    commands: tuple[PathCommand, ...] = ()

    def then(self, *commands: PathCommand) -> "Path":
        return Path(self.commands + tuple(commands))

    @property
    def start(self) -> Point:
        for cmd in self.commands:
            if isinstance(cmd, MoveTo):
                return (cmd.x, cmd.y)
        raise ValueError("path has no move-to")

    @property
    def end(self) -> Point:
        for cmd in reversed(self.commands):
            if not isinstance(cmd, Close):
                return (cmd.x, cmd.y)
        raise ValueError("path is empty")

    @property
    def is_closed(self) -> bool:
        return bool(self.commands) and isinstance(self.commands[-1], Close)

    def vertices(self) -> list[Point]:
        """End point of every drawing command, in order."""
        return [(cmd.x, cmd.y) for cmd in self.commands if not isinstance(cmd, Close)]

    def segment_count(self) -> int:
        return sum(1 for cmd in self.commands if isinstance(cmd, (LineTo, CubicTo)))


def build_line_path(points: np.ndarray, smoothing: float | None = None) -> Path:
    """Open path through `points`, straight or cubic-smoothed.

    The cubic tangents come from a sliding window (a, b, c) that starts with
    the first point doubled and clamps to the last point at the tail, so the
    end tangents are intentionally flattened.
    """
    if points.shape[0] == 0:
        return Path()
    pts = [(float(x), float(y)) for x, y in points.tolist()]
    commands: list[PathCommand] = [MoveTo(*pts[0])]
    if smoothing is None or len(pts) < 2:
        commands.extend(LineTo(x, y) for x, y in pts[1:])
        return Path(tuple(commands))

    f = float(smoothing)
    last = len(pts) - 1
    a = pts[0]
    b = pts[0]
    c = pts[1]
    for i in range(1, len(pts)):
        x1 = (c[0] - a[0]) * f + b[0]
        y1 = (c[1] - a[1]) * f + b[1]
        a = b
        b = c
        c = pts[min(last, i + 1)]
        x2 = (a[0] - c[0]) * f + b[0]
        y2 = (a[1] - c[1]) * f + b[1]
        commands.append(CubicTo(x1, y1, x2, y2, b[0], b[1]))
    return Path(tuple(commands))


def build_fill_path(path: Path, fill_mode: FillMode, width: float, height: float, line_width: float) -> Path | None:
    """Close the stroke path against the top or bottom canvas edge."""
    if fill_mode == "none" or not path.commands:
        return None
    if fill_mode == "below":
        edge_y = float(height)
    elif fill_mode == "above":
        edge_y = 0.0
    else:
        raise ValueError(f"unknown fill mode: {fill_mode!r}")

    half = line_width / 2.0
    start_x, start_y = path.start
    end_x, end_y = path.end
    return path.then(
        LineTo(end_x + half, end_y),
        LineTo(float(width), edge_y),
        LineTo(0.0, edge_y),
        LineTo(start_x - half, start_y),
        Close(),
    )


def flatten(path: Path, segments: int = 16) -> list[tuple[np.ndarray, bool]]:
    """Sample a path into polylines, one `(points, closed)` pair per subpath."""
    if segments < 1:
        raise ValueError("segments must be >= 1")
    t = np.linspace(0.0, 1.0, segments + 1, dtype=np.float64)[1:, None]
    out: list[tuple[np.ndarray, bool]] = []
    current: list[np.ndarray] = []
    cursor = np.zeros(2, dtype=np.float64)

    def flush(closed: bool) -> None:
        if current:
            out.append((np.vstack(current), closed))
            current.clear()

    for cmd in path.commands:
        if isinstance(cmd, MoveTo):
            flush(False)
            cursor = np.asarray([cmd.x, cmd.y], dtype=np.float64)
            current.append(cursor[None, :])
        elif isinstance(cmd, LineTo):
            cursor = np.asarray([cmd.x, cmd.y], dtype=np.float64)
            current.append(cursor[None, :])
        elif isinstance(cmd, CubicTo):
            p1 = np.asarray([cmd.x1, cmd.y1], dtype=np.float64)
            p2 = np.asarray([cmd.x2, cmd.y2], dtype=np.float64)
            p3 = np.asarray([cmd.x, cmd.y], dtype=np.float64)
            u = 1.0 - t
            samples = u**3 * cursor + 3 * u**2 * t * p1 + 3 * u * t**2 * p2 + t**3 * p3
            current.append(samples)
            cursor = p3
        else:
            flush(True)
    flush(False)
    return out

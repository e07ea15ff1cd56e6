"""PathState and PathContext — the mutable objects owned by a single pass.

PathState → drawing cursor + last control points, replayed per segment
PathContext → segment list flowing through the normalization transforms
"""

from __future__ import annotations

from dataclasses import dataclass, field

from svgpathinfo.engine.config import ParseOptions
from svgpathinfo.models.segments import (
    ClosePath,
    CubicBezier,
    HorizontalLineTo,
    MoveTo,
    Point,
    QuadraticBezier,
    Segment,
    ShortcutCubicBezier,
    ShortcutQuadraticBezier,
    VerticalLineTo,
)


def reflect(point: Point, center: Point) -> Point:
    """Reflect ``point`` through ``center``."""
    return (2 * center[0] - point[0], 2 * center[1] - point[1])


@dataclass
class PathState:
    """Drawing state for one parse or transform pass. All points are absolute."""

    current_point: Point = (0.0, 0.0)
    subpath_start: Point = (0.0, 0.0)
    # Set only right after a C/S segment
    last_cubic_control: Point | None = None
    # Set only right after a Q/T segment
    last_quadratic_control: Point | None = None

    def resolve(self, point: Point, relative: bool) -> Point:
        if not relative:
            return (float(point[0]), float(point[1]))
        cx, cy = self.current_point
        return (cx + point[0], cy + point[1])

    def implicit_cubic_control(self) -> Point:
        """First control point of a shortcut cubic drawn from the current point."""
        if self.last_cubic_control is None:
            return self.current_point
        return reflect(self.last_cubic_control, self.current_point)

    def implicit_quadratic_control(self) -> Point:
        """Control point of a shortcut quadratic drawn from the current point."""
        if self.last_quadratic_control is None:
            return self.current_point
        return reflect(self.last_quadratic_control, self.current_point)

    def end_point(self, seg: Segment) -> Point:
        """Absolute point the cursor moves to after ``seg``."""
        rel = seg.is_relative
        cx, cy = self.current_point
        if isinstance(seg, MoveTo):
            return self.resolve(seg.point, rel)
        if isinstance(seg, HorizontalLineTo):
            return (cx + seg.x if rel else seg.x, cy)
        if isinstance(seg, VerticalLineTo):
            return (cx, cy + seg.y if rel else seg.y)
        if isinstance(seg, ClosePath):
            return self.subpath_start
        return self.resolve(seg.end, rel)

    def advance(self, seg: Segment) -> None:
        """Move the cursor past ``seg`` and update the control slots."""
        rel = seg.is_relative
        end = self.end_point(seg)
        cubic: Point | None = None
        quadratic: Point | None = None

        if isinstance(seg, MoveTo):
            self.subpath_start = end
        elif isinstance(seg, (CubicBezier, ShortcutCubicBezier)):
            cubic = self.resolve(seg.control2, rel)
        elif isinstance(seg, QuadraticBezier):
            quadratic = self.resolve(seg.control, rel)
        elif isinstance(seg, ShortcutQuadraticBezier):
            quadratic = self.implicit_quadratic_control()

        self.current_point = end
        self.last_cubic_control = cubic
        self.last_quadratic_control = quadratic


@dataclass
class PathContext:
    """Shared state flowing through the normalization pipeline."""

    segments: list[Segment] = field(default_factory=list)
    options: ParseOptions = field(default_factory=ParseOptions)
    # Raw path string, when the segments came from a parse
    source: str = ""

    completed_transforms: set[str] = field(default_factory=set)

    @property
    def num_segments(self) -> int:
        return len(self.segments)

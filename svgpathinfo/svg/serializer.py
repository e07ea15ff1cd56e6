"""Write path data back out from segments, and reverse cubic paths."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from svgpathinfo.engine.config import ParseOptions
from svgpathinfo.engine.context import PathState
from svgpathinfo.errors import UnsupportedForOperationError
from svgpathinfo.models.segments import (
    ClosePath,
    CubicBezier,
    EllipticalArc,
    HorizontalLineTo,
    LineTo,
    MoveTo,
    Point,
    QuadraticBezier,
    Segment,
    ShortcutCubicBezier,
    ShortcutQuadraticBezier,
    VerticalLineTo,
)
from svgpathinfo.svg.parser import extract_path_info

logger = logging.getLogger(__name__)


def format_number(value: float) -> str:
    """Shortest text that parses back to the same float ('2.0' → '2')."""
    text = repr(float(value))
    if text.endswith(".0"):
        text = text[:-2]
    return text


def _fmt_point(p: Point) -> str:
    return f"{format_number(p[0])},{format_number(p[1])}"


def _render(seg: Segment) -> str:
    letter = seg.command_letter
    if isinstance(seg, MoveTo):
        return f"{letter} {_fmt_point(seg.point)}"
    if isinstance(seg, CubicBezier):
        return (
            f"{letter} {_fmt_point(seg.control1)} {_fmt_point(seg.control2)} "
            f"{_fmt_point(seg.end)}"
        )
    if isinstance(seg, (LineTo, ShortcutQuadraticBezier)):
        return f"{letter} {_fmt_point(seg.end)}"
    if isinstance(seg, HorizontalLineTo):
        return f"{letter} {format_number(seg.x)}"
    if isinstance(seg, VerticalLineTo):
        return f"{letter} {format_number(seg.y)}"
    if isinstance(seg, ShortcutCubicBezier):
        return f"{letter} {_fmt_point(seg.control2)} {_fmt_point(seg.end)}"
    if isinstance(seg, QuadraticBezier):
        return f"{letter} {_fmt_point(seg.control)} {_fmt_point(seg.end)}"
    if isinstance(seg, EllipticalArc):
        return (
            f"{letter} {format_number(seg.rx)},{format_number(seg.ry)} "
            f"{format_number(seg.x_axis_rotation)} "
            f"{int(seg.large_arc_flag)},{int(seg.sweep_flag)} {_fmt_point(seg.end)}"
        )
    return letter  # ClosePath


def create_path_string(segments: Iterable[Segment]) -> str:
    """Render segments as path data.

    Absolute moveto and cubic segments are the core case; every other kind
    is written with its own stored letter too, so the output always parses
    back to an equal list of segments.
    """
    return " ".join(_render(seg) for seg in segments)


@dataclass
class _Subpath:
    start: Point
    segments: list[Segment] = field(default_factory=list)
    closed: bool = False

    def reversed(self) -> list[Segment]:
        ends = [self.start]
        for seg in self.segments:
            ends.append(seg.end)

        out: list[Segment] = [MoveTo(command_letter="M", point=ends[-1])]
        for i in range(len(self.segments) - 1, -1, -1):
            seg = self.segments[i]
            target = ends[i]
            if isinstance(seg, CubicBezier):
                out.append(
                    CubicBezier(
                        command_letter="C",
                        control1=seg.control2,
                        control2=seg.control1,
                        end=target,
                    )
                )
            else:
                out.append(LineTo(command_letter="L", end=target))
        if self.closed:
            out.append(ClosePath(command_letter="Z"))
        return out


def _split_subpaths(segments: list[Segment]) -> list[_Subpath]:
    """Split absolute segments at moveto boundaries."""
    subpaths: list[_Subpath] = []
    current: _Subpath | None = None
    state = PathState()

    for seg in segments:
        if isinstance(seg, MoveTo):
            current = _Subpath(start=seg.point)
            subpaths.append(current)
        elif isinstance(seg, (CubicBezier, LineTo, ClosePath)):
            # Drawing without a moveto, or after a close, starts at the cursor
            if current is None or (current.closed and not isinstance(seg, ClosePath)):
                current = _Subpath(start=state.current_point)
                subpaths.append(current)
            if isinstance(seg, ClosePath):
                current.closed = True
            else:
                current.segments.append(seg)
        else:
            raise UnsupportedForOperationError(
                f"reverse_path cannot reverse {seg.name} segments"
            )
        state.advance(seg)

    return subpaths


def reverse_path(path: str) -> str:
    """Path data drawing the same curves in the opposite order and direction.

    Works on moveto, cubic bezier (S is expanded first), line-to and
    closepath. Subpaths are reversed individually and written out last to
    first. Any other segment kind raises UnsupportedForOperationError.
    """
    segments = extract_path_info(path, ParseOptions(absolute=True, no_shortcuts=True))
    if not segments:
        return ""

    subpaths = _split_subpaths(segments)
    reversed_segments: list[Segment] = []
    for sp in reversed(subpaths):
        reversed_segments.extend(sp.reversed())

    logger.debug("Reversed %d subpaths (%d segments)", len(subpaths), len(reversed_segments))
    return create_path_string(reversed_segments)

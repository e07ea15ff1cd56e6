"""Segment interpreter — turns tokens into segments while tracking PathState.

Each token produces exactly one segment. The emitted segment keeps the
coordinates exactly as written (relative stays relative); PathState keeps
the absolute cursor so shortcut curves and H/V lines can be resolved later.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from svgpathinfo.engine.context import PathState
from svgpathinfo.engine.tokenizer import Token
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

logger = logging.getLogger(__name__)


def _pt(args: tuple[float, ...], i: int) -> Point:
    return (float(args[i]), float(args[i + 1]))


_BUILDERS: dict[str, Callable[[str, tuple[float, ...]], Segment]] = {
    "M": lambda c, a: MoveTo(command_letter=c, point=_pt(a, 0)),
    "L": lambda c, a: LineTo(command_letter=c, end=_pt(a, 0)),
    "H": lambda c, a: HorizontalLineTo(command_letter=c, x=a[0]),
    "V": lambda c, a: VerticalLineTo(command_letter=c, y=a[0]),
    "C": lambda c, a: CubicBezier(
        command_letter=c, control1=_pt(a, 0), control2=_pt(a, 2), end=_pt(a, 4)
    ),
    "S": lambda c, a: ShortcutCubicBezier(command_letter=c, control2=_pt(a, 0), end=_pt(a, 2)),
    "Q": lambda c, a: QuadraticBezier(command_letter=c, control=_pt(a, 0), end=_pt(a, 2)),
    "T": lambda c, a: ShortcutQuadraticBezier(command_letter=c, end=_pt(a, 0)),
    "A": lambda c, a: EllipticalArc(
        command_letter=c,
        rx=a[0],
        ry=a[1],
        x_axis_rotation=a[2],
        large_arc_flag=bool(a[3]),
        sweep_flag=bool(a[4]),
        end=_pt(a, 5),
    ),
    "Z": lambda c, a: ClosePath(command_letter=c),
}


def build_segment(token: Token) -> Segment:
    """Build the segment model for a single token."""
    return _BUILDERS[token.letter.upper()](token.letter, token.args)


def interpret(
    tokens: Iterable[Token],
    state: PathState | None = None,
    verbose: bool = False,
) -> list[Segment]:
    """Convert tokens to segments in order, advancing ``state`` as it goes."""
    state = state if state is not None else PathState()
    segments: list[Segment] = []

    for token in tokens:
        seg = build_segment(token)
        state.advance(seg)
        if verbose:
            logger.debug(
                "%r at %d → %s (%s), current point %s",
                token.letter,
                token.offset,
                seg.name,
                seg.position.value,
                state.current_point,
            )
        segments.append(seg)

    return segments


def trace_points(segments: Iterable[Segment]) -> list[Point]:
    """Absolute current point after each segment.

    Useful for reading the inherited axis of H/V segments, or the real end
    of a relative segment, without converting the whole sequence.
    """
    state = PathState()
    points: list[Point] = []
    for seg in segments:
        state.advance(seg)
        points.append(state.current_point)
    return points

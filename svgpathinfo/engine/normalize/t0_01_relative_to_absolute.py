"""T0.01 — Relative → Absolute Coordinate Resolution.

Replays the cursor over the segment list and rewrites every relative segment
with absolute coordinates. The letter is upper-cased and the position is
forced to absolute, including for closepath.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from svgpathinfo.engine.context import PathContext, PathState
from svgpathinfo.engine.registry import transform
from svgpathinfo.models.segments import (
    ClosePath,
    HorizontalLineTo,
    Position,
    Segment,
    VerticalLineTo,
)

# Point-valued fields, in the order they appear on any segment
_POINT_FIELDS = ("point", "control1", "control2", "control", "end")


@transform(
    id="T0.01",
    option="absolute",
    description="Resolve relative coordinates against the current point",
)
def relative_to_absolute(ctx: PathContext) -> None:
    ctx.segments = to_absolute(ctx.segments)


def to_absolute(segments: Iterable[Segment]) -> list[Segment]:
    """Return ``segments`` with every coordinate absolute. Idempotent."""
    state = PathState()
    out: list[Segment] = []
    for seg in segments:
        out.append(_absolute(seg, state))
        state.advance(seg)
    return out


def _absolute(seg: Segment, state: PathState) -> Segment:
    forced = {"command_letter": seg.command_letter.upper(), "position": Position.ABSOLUTE}

    if isinstance(seg, ClosePath):
        return seg.model_copy(update=forced)
    if not seg.is_relative:
        return seg

    cx, cy = state.current_point
    update: dict[str, Any] = dict(forced)
    if isinstance(seg, HorizontalLineTo):
        update["x"] = cx + seg.x
    elif isinstance(seg, VerticalLineTo):
        update["y"] = cy + seg.y
    else:
        for name in _POINT_FIELDS:
            value = getattr(seg, name, None)
            if value is not None:
                update[name] = state.resolve(value, relative=True)
    return seg.model_copy(update=update)

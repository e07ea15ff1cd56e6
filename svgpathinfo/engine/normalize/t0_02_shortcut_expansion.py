"""T0.02 — Shortcut Curve Expansion.

Rewrite S → C and T → Q with the implicit control point written out. The
implicit control is the reflection of the previous curve's last control
point through the current point, or the current point itself when the
previous segment is not a curve of the same family.

Only absolute shortcut segments are expanded, so this runs after T0.01;
relative ones are left as they are.
"""

from __future__ import annotations

from collections.abc import Iterable

from svgpathinfo.engine.context import PathContext, PathState
from svgpathinfo.engine.registry import transform
from svgpathinfo.models.segments import (
    CubicBezier,
    QuadraticBezier,
    Segment,
    ShortcutCubicBezier,
    ShortcutQuadraticBezier,
)


@transform(
    id="T0.02",
    option="no_shortcuts",
    dependencies=["T0.01"],
    description="Expand shortcut curves to explicit cubic/quadratic curves",
)
def shortcut_expansion(ctx: PathContext) -> None:
    ctx.segments = expand_shortcuts(ctx.segments)


def expand_shortcuts(segments: Iterable[Segment]) -> list[Segment]:
    """Return ``segments`` with absolute S/T replaced by C/Q. Idempotent."""
    state = PathState()
    out: list[Segment] = []
    for seg in segments:
        new = seg
        if isinstance(seg, ShortcutCubicBezier) and not seg.is_relative:
            new = CubicBezier(
                command_letter="C",
                control1=state.implicit_cubic_control(),
                control2=seg.control2,
                end=seg.end,
            )
        elif isinstance(seg, ShortcutQuadraticBezier) and not seg.is_relative:
            new = QuadraticBezier(
                command_letter="Q",
                control=state.implicit_quadratic_control(),
                end=seg.end,
            )
        state.advance(seg)
        out.append(new)
    return out

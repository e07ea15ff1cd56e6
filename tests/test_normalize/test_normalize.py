"""Tests for absolute conversion (T0.01) and shortcut expansion (T0.02)."""

import pytest

from svgpathinfo.engine.interpreter import trace_points
from svgpathinfo.engine.normalize import expand_shortcuts, to_absolute
from svgpathinfo.models.segments import (
    ClosePath,
    CubicBezier,
    EllipticalArc,
    HorizontalLineTo,
    LineTo,
    MoveTo,
    Position,
    QuadraticBezier,
    ShortcutCubicBezier,
    ShortcutQuadraticBezier,
    VerticalLineTo,
)
from svgpathinfo.svg.parser import extract_path_info
from tests.conftest import HV_PATH, MIXED_PATH, QUADRATIC_PATH


def _flat(points):
    return [c for p in points for c in p]


# ---------------------------------------------------------------------------
# Absolute conversion
# ---------------------------------------------------------------------------

class TestAbsolute:
    def test_every_segment_absolute(self, sample_path):
        segs = to_absolute(extract_path_info(sample_path))
        for seg in segs:
            assert seg.position == Position.ABSOLUTE
            assert seg.command_letter.isupper()

    def test_idempotent(self, sample_path):
        once = to_absolute(extract_path_info(sample_path))
        assert to_absolute(once) == once

    def test_end_points_unchanged(self, sample_path):
        segs = extract_path_info(sample_path)
        assert _flat(trace_points(to_absolute(segs))) == pytest.approx(_flat(trace_points(segs)))

    def test_relative_lines(self):
        segs = extract_path_info("m10,10 l5,5 h-3 v-2", {"absolute": True})
        assert segs[0] == MoveTo(command_letter="M", point=(10, 10))
        assert segs[1] == LineTo(command_letter="L", end=(15, 15))
        assert segs[2] == HorizontalLineTo(command_letter="H", x=12)
        assert segs[3] == VerticalLineTo(command_letter="V", y=13)

    def test_horizontal_keeps_only_x(self):
        segs = extract_path_info(HV_PATH, {"absolute": True})
        assert segs[1] == HorizontalLineTo(command_letter="H", x=150)
        assert segs[2] == VerticalLineTo(command_letter="V", y=100)
        assert segs[3].end == (200.0, 125.0)

    def test_relative_moveto_chain(self):
        segs = extract_path_info("m10,10 20,20 m5,5", {"absolute": True})
        assert [s.command_letter for s in segs] == ["M", "L", "M"]
        assert segs[1].end == (30.0, 30.0)
        assert segs[2].point == (35.0, 35.0)

    def test_relative_after_closepath(self):
        segs = extract_path_info("M10,10 l10,0 z l5,5", {"absolute": True})
        assert segs[3].end == (15.0, 15.0)

    def test_closepath_forced_absolute(self):
        segs = extract_path_info("M0,0 l1,1 z", {"absolute": True})
        assert segs[2] == ClosePath(command_letter="Z", position=Position.ABSOLUTE)

    def test_cubic_all_points_offset(self):
        (_, seg) = extract_path_info("M1,2 c1,1 2,2 3,3", {"absolute": True})
        assert seg == CubicBezier(
            command_letter="C", control1=(2, 3), control2=(3, 4), end=(4, 5)
        )

    def test_shortcut_kept_but_absolute(self):
        segs = extract_path_info("M1,1 s1,1 2,2 t3,3", {"absolute": True})
        assert segs[1] == ShortcutCubicBezier(command_letter="S", control2=(2, 2), end=(3, 3))
        assert segs[2] == ShortcutQuadraticBezier(command_letter="T", end=(6, 6))

    def test_arc_only_end_offset(self):
        segs = extract_path_info("M10,10 a25,25 -30 0,1 50,-25", {"absolute": True})
        assert segs[1] == EllipticalArc(
            command_letter="A",
            rx=25,
            ry=25,
            x_axis_rotation=-30,
            large_arc_flag=False,
            sweep_flag=True,
            end=(60, -15),
        )

    def test_absolute_input_untouched(self):
        segs = extract_path_info("M1,1 L2,2 C3,3 4,4 5,5")
        assert to_absolute(segs) == segs


# ---------------------------------------------------------------------------
# Shortcut expansion
# ---------------------------------------------------------------------------

class TestShortcutExpansion:
    def test_reflection_of_previous_control(self, shortcut_cubic_path):
        absolute = extract_path_info(shortcut_cubic_path, {"absolute": True})
        expanded = extract_path_info(
            shortcut_cubic_path, {"absolute": True, "no_shortcuts": True}
        )

        previous = absolute[2]
        assert isinstance(previous, CubicBezier)
        assert isinstance(expanded[3], CubicBezier)

        cx, cy = previous.end
        px, py = previous.control2
        assert expanded[3].control1 == pytest.approx((2 * cx - px, 2 * cy - py))
        assert expanded[3].control1 == pytest.approx((11.95, -6.32))
        assert expanded[3].control2 == absolute[3].control2
        assert expanded[3].end == absolute[3].end

    def test_no_previous_curve_uses_current_point(self):
        segs = extract_path_info("M1,1 L5,5 S10,10 20,20", {"absolute": True, "no_shortcuts": True})
        assert segs[2] == CubicBezier(
            command_letter="C", control1=(5, 5), control2=(10, 10), end=(20, 20)
        )

    def test_quadratic_chain(self):
        segs = extract_path_info(QUADRATIC_PATH, {"absolute": True, "no_shortcuts": True})
        assert segs[2] == QuadraticBezier(command_letter="Q", control=(15, -10), end=(20, 0))
        assert segs[3] == QuadraticBezier(command_letter="Q", control=(25, 10), end=(30, 0))

    def test_cubic_shortcut_after_quadratic_is_not_reflected(self):
        segs = extract_path_info(
            "M0,0 Q5,5 10,0 S15,5 20,0", {"absolute": True, "no_shortcuts": True}
        )
        assert segs[2].control1 == (10.0, 0.0)

    def test_no_shortcuts_remain(self, sample_path):
        segs = extract_path_info(sample_path, {"absolute": True, "no_shortcuts": True})
        assert not any(
            isinstance(s, (ShortcutCubicBezier, ShortcutQuadraticBezier)) for s in segs
        )

    def test_idempotent(self, sample_path):
        expanded = extract_path_info(sample_path, {"absolute": True, "no_shortcuts": True})
        assert expand_shortcuts(expanded) == expanded

    def test_requires_absolute(self):
        segs = extract_path_info("M0,0 c1,1 2,2 3,3 s5,5 6,6", {"no_shortcuts": True})
        assert isinstance(segs[2], ShortcutCubicBezier)
        assert segs[2].is_relative

    def test_relative_segments_left_alone(self):
        segs = extract_path_info(MIXED_PATH)
        expanded = expand_shortcuts(segs)
        assert expanded == segs

"""Path segment models — one frozen model per path command.

Every segment keeps the letter it was written with. ``position`` is derived
from that letter unless given explicitly (only the normalizer does that).
"""

from __future__ import annotations

import enum
from typing import Annotated, Any, ClassVar, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

Point = tuple[float, float]


class Position(str, enum.Enum):
    RELATIVE = "relative"
    ABSOLUTE = "absolute"


class _SegmentBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    # Uppercase command letter for this kind
    letter: ClassVar[str] = ""
    # Human-readable name
    name: ClassVar[str] = ""
    # Number of values per argument group
    arity: ClassVar[int] = 0

    command_letter: str = ""
    position: Position = Position.ABSOLUTE

    @model_validator(mode="before")
    @classmethod
    def _derive_position(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        if not data.get("command_letter"):
            data["command_letter"] = cls.letter
        if data.get("position") is None:
            data["position"] = cls._position_for(data["command_letter"])
        return data

    @classmethod
    def _position_for(cls, command_letter: str) -> Position:
        return Position.RELATIVE if command_letter.islower() else Position.ABSOLUTE

    @field_validator("command_letter")
    @classmethod
    def _check_letter(cls, v: str) -> str:
        if v.upper() != cls.letter:
            raise ValueError(f"{cls.__name__} cannot use command letter {v!r}")
        return v

    @property
    def is_relative(self) -> bool:
        return self.position == Position.RELATIVE


class MoveTo(_SegmentBase):
    letter: ClassVar[str] = "M"
    name: ClassVar[str] = "moveto"
    arity: ClassVar[int] = 2

    type: Literal["moveto"] = "moveto"
    point: Point


class LineTo(_SegmentBase):
    letter: ClassVar[str] = "L"
    name: ClassVar[str] = "line to"
    arity: ClassVar[int] = 2

    type: Literal["line-to"] = "line-to"
    end: Point


class HorizontalLineTo(_SegmentBase):
    """Line along the x axis; y is inherited from the current point."""

    letter: ClassVar[str] = "H"
    name: ClassVar[str] = "horizontal line to"
    arity: ClassVar[int] = 1

    type: Literal["horizontal-line-to"] = "horizontal-line-to"
    x: float


class VerticalLineTo(_SegmentBase):
    """Line along the y axis; x is inherited from the current point."""

    letter: ClassVar[str] = "V"
    name: ClassVar[str] = "vertical line to"
    arity: ClassVar[int] = 1

    type: Literal["vertical-line-to"] = "vertical-line-to"
    y: float


class CubicBezier(_SegmentBase):
    letter: ClassVar[str] = "C"
    name: ClassVar[str] = "cubic bezier"
    arity: ClassVar[int] = 6

    type: Literal["cubic-bezier"] = "cubic-bezier"
    control1: Point
    control2: Point
    end: Point


class ShortcutCubicBezier(_SegmentBase):
    """Cubic bezier whose first control point is reflected from the previous curve."""

    letter: ClassVar[str] = "S"
    name: ClassVar[str] = "shortcut cubic bezier"
    arity: ClassVar[int] = 4

    type: Literal["shortcut-cubic-bezier"] = "shortcut-cubic-bezier"
    control2: Point
    end: Point


class QuadraticBezier(_SegmentBase):
    letter: ClassVar[str] = "Q"
    name: ClassVar[str] = "quadratic bezier"
    arity: ClassVar[int] = 4

    type: Literal["quadratic-bezier"] = "quadratic-bezier"
    control: Point
    end: Point


class ShortcutQuadraticBezier(_SegmentBase):
    letter: ClassVar[str] = "T"
    name: ClassVar[str] = "shortcut quadratic bezier"
    arity: ClassVar[int] = 2

    type: Literal["shortcut-quadratic-bezier"] = "shortcut-quadratic-bezier"
    end: Point


class EllipticalArc(_SegmentBase):
    """Arc stored verbatim; radii are not corrected or validated."""

    letter: ClassVar[str] = "A"
    name: ClassVar[str] = "elliptical arc"
    arity: ClassVar[int] = 7

    type: Literal["arc"] = "arc"
    rx: float
    ry: float
    x_axis_rotation: float
    large_arc_flag: bool
    sweep_flag: bool
    end: Point


class ClosePath(_SegmentBase):
    letter: ClassVar[str] = "Z"
    name: ClassVar[str] = "closepath"
    arity: ClassVar[int] = 0

    type: Literal["closepath"] = "closepath"

    @classmethod
    def _position_for(cls, command_letter: str) -> Position:
        # Z and z close identically; parsing reports relative for both
        return Position.RELATIVE


Segment = Annotated[
    Union[
        MoveTo,
        LineTo,
        HorizontalLineTo,
        VerticalLineTo,
        CubicBezier,
        ShortcutCubicBezier,
        QuadraticBezier,
        ShortcutQuadraticBezier,
        EllipticalArc,
        ClosePath,
    ],
    Field(discriminator="type"),
]

SEGMENT_TYPES: dict[str, type[_SegmentBase]] = {
    cls.letter: cls
    for cls in (
        MoveTo,
        LineTo,
        HorizontalLineTo,
        VerticalLineTo,
        CubicBezier,
        ShortcutCubicBezier,
        QuadraticBezier,
        ShortcutQuadraticBezier,
        EllipticalArc,
        ClosePath,
    )
}

COMMAND_LETTERS = "".join(f"{k}{k.lower()}" for k in SEGMENT_TYPES)


def segment_class(command_letter: str) -> type[_SegmentBase]:
    """Look up the segment model for a command letter (either case)."""
    return SEGMENT_TYPES[command_letter.upper()]

"""svgpathinfo — parse SVG path data into typed segments and write it back out."""

__version__ = "0.1.0"

from svgpathinfo.engine.config import ParseOptions
from svgpathinfo.engine.interpreter import trace_points
from svgpathinfo.engine.normalize import expand_shortcuts, to_absolute
from svgpathinfo.errors import (
    ArityMismatchError,
    MalformedFlagError,
    MalformedNumberError,
    PathError,
    PathSyntaxError,
    UnknownCommandError,
    UnsupportedForOperationError,
)
from svgpathinfo.models.segments import (
    ClosePath,
    CubicBezier,
    EllipticalArc,
    HorizontalLineTo,
    LineTo,
    MoveTo,
    Point,
    Position,
    QuadraticBezier,
    Segment,
    ShortcutCubicBezier,
    ShortcutQuadraticBezier,
    VerticalLineTo,
)
from svgpathinfo.svg.parser import extract_path_info, parse_path
from svgpathinfo.svg.serializer import create_path_string, reverse_path

__all__ = [
    "__version__",
    "ParseOptions",
    "extract_path_info",
    "parse_path",
    "create_path_string",
    "reverse_path",
    "to_absolute",
    "expand_shortcuts",
    "trace_points",
    "PathError",
    "PathSyntaxError",
    "MalformedNumberError",
    "MalformedFlagError",
    "UnknownCommandError",
    "ArityMismatchError",
    "UnsupportedForOperationError",
    "Point",
    "Position",
    "Segment",
    "MoveTo",
    "LineTo",
    "HorizontalLineTo",
    "VerticalLineTo",
    "CubicBezier",
    "ShortcutCubicBezier",
    "QuadraticBezier",
    "ShortcutQuadraticBezier",
    "EllipticalArc",
    "ClosePath",
]

"""Errors raised while parsing, serializing or reversing path data."""

from __future__ import annotations


class PathError(ValueError):
    """Base class. ``offset`` is the index into the path string, when known."""

    kind = "PathError"

    def __init__(self, message: str, offset: int | None = None) -> None:
        self.message = message
        self.offset = offset
        if offset is not None:
            message = f"{message} (at offset {offset})"
        super().__init__(message)

    def to_dict(self) -> dict[str, object]:
        return {"error": self.kind, "message": self.message, "offset": self.offset}


class PathSyntaxError(PathError):
    """The path string does not follow the path grammar."""

    kind = "PathSyntaxError"


class MalformedNumberError(PathSyntaxError):
    kind = "MalformedNumber"


class MalformedFlagError(PathSyntaxError):
    kind = "MalformedFlag"


class UnknownCommandError(PathSyntaxError):
    kind = "UnknownCommand"


class ArityMismatchError(PathSyntaxError):
    kind = "ArityMismatch"


class UnsupportedForOperationError(PathError):
    """The segment kind cannot be handled by the requested operation."""

    kind = "UnsupportedForOperation"

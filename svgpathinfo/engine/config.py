"""Parse configuration — per-call switches for extract_path_info."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any


@dataclass
class ParseOptions:
    """Controls which normalization transforms run after parsing."""

    # Rewrite relative segments with absolute coordinates (T0.01)
    absolute: bool = False
    # Replace S/T with explicit C/Q; only effective together with absolute (T0.02)
    no_shortcuts: bool = False
    # Log every token and state transition at DEBUG
    verbose: bool = False

    @classmethod
    def coerce(cls, options: ParseOptions | Mapping[str, Any] | None) -> ParseOptions:
        """Accept an instance, a plain mapping with the same keys, or None."""
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(options) - known)
        if unknown:
            raise ValueError(f"Unknown parse option(s): {', '.join(unknown)}")
        for key, value in options.items():
            # bool or int only
            if not isinstance(value, (bool, int)):
                raise ValueError(f"Parse option {key!r} must be a boolean, not {value!r}")
        return cls(**{key: bool(value) for key, value in options.items()})

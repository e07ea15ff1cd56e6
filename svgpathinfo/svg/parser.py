"""Path parser — facade over the tokenizer, interpreter and normalization pipeline.

Converts a raw ``d`` attribute string → PathContext / list of Segment models.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from svgpathinfo.engine.config import ParseOptions
from svgpathinfo.engine.context import PathContext
from svgpathinfo.engine.interpreter import interpret
from svgpathinfo.engine.pipeline import create_pipeline
from svgpathinfo.engine.tokenizer import tokenize
from svgpathinfo.models.segments import Segment

logger = logging.getLogger(__name__)


def parse_path(
    path: str,
    options: ParseOptions | Mapping[str, Any] | None = None,
) -> PathContext:
    """Parse path data into a PathContext, running the enabled transforms."""
    if not isinstance(path, str):
        raise TypeError(f"path must be a string, not {type(path).__name__}")
    opts = ParseOptions.coerce(options)

    tokens = tokenize(path)
    segments = interpret(tokens, verbose=opts.verbose)

    ctx = PathContext(segments=segments, options=opts, source=path)
    create_pipeline().run(ctx)

    if opts.verbose:
        logger.debug(
            "Parsed path %r: %d segments, transforms %s",
            ctx.source,
            ctx.num_segments,
            sorted(ctx.completed_transforms) or "none",
        )
    return ctx


def extract_path_info(
    path: str,
    options: ParseOptions | Mapping[str, Any] | None = None,
) -> list[Segment]:
    """Parse path data into segments.

    ``options`` selects the normalization passes: ``absolute`` rewrites every
    segment with absolute coordinates, ``no_shortcuts`` (together with
    ``absolute``) expands S/T into C/Q, and ``verbose`` logs each step at
    DEBUG. Any syntax error aborts the whole parse with a PathSyntaxError
    subclass carrying the offending offset.
    """
    return parse_path(path, options).segments

"""Path data engine — scanners, tokenizer, interpreter and normalization pipeline."""

from svgpathinfo.engine.registry import transform, get_registry
from svgpathinfo.engine.context import PathContext, PathState
from svgpathinfo.engine.pipeline import Pipeline

__all__ = [
    "transform",
    "get_registry",
    "PathContext",
    "PathState",
    "Pipeline",
]

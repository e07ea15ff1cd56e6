"""Normalization transforms. Importing this package registers them."""

from svgpathinfo.engine.normalize.t0_01_relative_to_absolute import to_absolute
from svgpathinfo.engine.normalize.t0_02_shortcut_expansion import expand_shortcuts

__all__ = ["to_absolute", "expand_shortcuts"]

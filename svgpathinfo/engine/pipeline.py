"""Pipeline orchestrator — runs the enabled normalization transforms in dependency order."""

from __future__ import annotations

import logging
import time

from svgpathinfo.engine.context import PathContext
from svgpathinfo.engine.registry import TransformRegistry, get_registry

logger = logging.getLogger(__name__)


class Pipeline:
    """Orchestrates the transform pipeline."""

    def __init__(self, registry: TransformRegistry | None = None) -> None:
        self.registry = registry or get_registry()

    def run(self, ctx: PathContext) -> PathContext:
        """Run every transform enabled by ``ctx.options`` on the given context."""
        start = time.perf_counter()

        requested = self._gate(ctx)
        if not requested:
            return ctx
        ordered = self.registry.resolve_order(requested)

        logger.debug("Pipeline: %d transforms queued", len(ordered))

        for spec in ordered:
            t0 = time.perf_counter()
            spec.fn(ctx)
            ctx.completed_transforms.add(spec.id)
            elapsed = (time.perf_counter() - t0) * 1000
            logger.debug("  %s completed in %.2fms", spec.id, elapsed)

        total = (time.perf_counter() - start) * 1000
        logger.debug(
            "Pipeline complete: %d transforms on %d segments in %.2fms",
            len(ctx.completed_transforms),
            ctx.num_segments,
            total,
        )
        return ctx

    def _gate(self, ctx: PathContext) -> set[str]:
        """Pick the transforms to run from the options.

        A transform runs only when its option is set and all of its
        dependencies run too, so ``no_shortcuts`` alone does nothing.
        """
        enabled = {
            spec.id for spec in self.registry.all() if getattr(ctx.options, spec.option, False)
        }
        changed = True
        while changed:
            changed = False
            for tid in sorted(enabled):
                spec = self.registry.get(tid)
                missing = [dep for dep in spec.dependencies if dep not in enabled]
                if missing:
                    logger.debug("  %s skipped: requires %s", tid, ", ".join(missing))
                    enabled.discard(tid)
                    changed = True
        return enabled


def create_pipeline() -> Pipeline:
    """Factory function for creating a pipeline instance."""
    # Importing the package registers the normalization transforms
    import svgpathinfo.engine.normalize  # noqa: F401

    return Pipeline()

"""Transform registry — every normalization pass is a function registered via decorator.

Usage:
    @transform(id="T0.01", option="absolute", description="...")
    def relative_to_absolute(ctx: PathContext) -> None:
        ctx.segments = to_absolute(ctx.segments)

A transform is scheduled when the ParseOptions attribute named by ``option``
is true. Adding a new pass = creating one module with the decorator.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from svgpathinfo.engine.context import PathContext

logger = logging.getLogger(__name__)


@dataclass
class TransformSpec:
    id: str
    fn: Callable[["PathContext"], None]
    option: str = ""
    dependencies: list[str] = field(default_factory=list)
    description: str = ""


class TransformRegistry:
    """Singleton registry of all transforms."""

    def __init__(self) -> None:
        self._transforms: dict[str, TransformSpec] = {}

    def register(self, spec: TransformSpec) -> None:
        if spec.id in self._transforms:
            raise ValueError(f"Duplicate transform ID: {spec.id}")
        self._transforms[spec.id] = spec
        logger.debug("Registered transform %s (option %r)", spec.id, spec.option)

    def get(self, transform_id: str) -> TransformSpec:
        return self._transforms[transform_id]

    def all(self) -> list[TransformSpec]:
        return sorted(self._transforms.values(), key=lambda s: s.id)

    def resolve_order(self, requested_ids: set[str] | None = None) -> list[TransformSpec]:
        """Topological sort of the requested transforms (all when None).

        Dependencies outside the requested set are not pulled in; callers
        gate them beforehand.
        """
        pool = self._transforms
        if requested_ids is not None:
            pool = {k: v for k, v in pool.items() if k in requested_ids}

        # Kahn's algorithm
        in_degree: dict[str, int] = {tid: 0 for tid in pool}
        for tid, spec in pool.items():
            for dep in spec.dependencies:
                if dep in pool:
                    in_degree[tid] += 1

        queue = sorted([tid for tid, d in in_degree.items() if d == 0])
        ordered: list[TransformSpec] = []

        while queue:
            tid = queue.pop(0)
            ordered.append(pool[tid])
            for other_id, other_spec in pool.items():
                if tid in other_spec.dependencies:
                    in_degree[other_id] -= 1
                    if in_degree[other_id] == 0:
                        queue.append(other_id)
                        queue.sort()

        if len(ordered) != len(pool):
            missing = set(pool.keys()) - {s.id for s in ordered}
            raise ValueError(f"Circular dependency detected among: {missing}")

        return ordered

    @property
    def count(self) -> int:
        return len(self._transforms)


# Module-level singleton
_registry = TransformRegistry()


def get_registry() -> TransformRegistry:
    return _registry


def transform(
    *,
    id: str,
    option: str,
    dependencies: list[str] | None = None,
    description: str = "",
):
    """Decorator to register a transform function."""

    def decorator(fn: Callable[["PathContext"], None]):
        spec = TransformSpec(
            id=id,
            fn=fn,
            option=option,
            dependencies=dependencies or [],
            description=description,
        )
        _registry.register(spec)
        return fn

    return decorator

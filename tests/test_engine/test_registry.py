"""Tests for the transform registry."""

import pytest

from svgpathinfo.engine.context import PathContext
from svgpathinfo.engine.pipeline import create_pipeline
from svgpathinfo.engine.registry import TransformRegistry, TransformSpec, get_registry


def _noop(ctx: PathContext) -> None:
    pass


def test_register_and_get():
    reg = TransformRegistry()
    spec = TransformSpec(id="T0.01", fn=_noop, option="absolute")
    reg.register(spec)
    assert reg.get("T0.01") is spec
    assert reg.count == 1


def test_duplicate_id_rejected():
    reg = TransformRegistry()
    reg.register(TransformSpec(id="T0.01", fn=_noop))
    with pytest.raises(ValueError, match="Duplicate"):
        reg.register(TransformSpec(id="T0.01", fn=_noop))


def test_resolve_order_with_deps():
    reg = TransformRegistry()
    s1 = TransformSpec(id="T0.09", fn=_noop)
    s2 = TransformSpec(id="T0.02", fn=_noop, dependencies=["T0.09"])
    reg.register(s1)
    reg.register(s2)
    order = reg.resolve_order({"T0.02", "T0.09"})
    ids = [s.id for s in order]
    assert ids == ["T0.09", "T0.02"]


def test_resolve_order_does_not_pull_in_dependencies():
    reg = TransformRegistry()
    reg.register(TransformSpec(id="T0.01", fn=_noop))
    reg.register(TransformSpec(id="T0.02", fn=_noop, dependencies=["T0.01"]))
    assert [s.id for s in reg.resolve_order({"T0.02"})] == ["T0.02"]


def test_resolve_order_all():
    reg = TransformRegistry()
    for i in range(5):
        reg.register(TransformSpec(id=f"T0.0{i+1}", fn=_noop))
    order = reg.resolve_order(None)
    assert len(order) == 5


def test_circular_dependency():
    reg = TransformRegistry()
    reg.register(TransformSpec(id="A", fn=_noop, dependencies=["B"]))
    reg.register(TransformSpec(id="B", fn=_noop, dependencies=["A"]))
    with pytest.raises(ValueError, match="Circular"):
        reg.resolve_order(None)


def test_normalization_transforms_registered():
    create_pipeline()
    reg = get_registry()
    assert reg.get("T0.01").option == "absolute"
    assert reg.get("T0.02").option == "no_shortcuts"
    assert reg.get("T0.02").dependencies == ["T0.01"]

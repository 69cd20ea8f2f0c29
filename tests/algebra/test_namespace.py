"""Tests for extensible combinator namespaces."""

from __future__ import annotations

import pytest

from twozhakes.algebra.namespace import CombinatorNamespace


def _factory() -> object:
    return lambda instant, zone: instant


@pytest.fixture
def ns() -> CombinatorNamespace:
    return CombinatorNamespace("operator", {"add": _factory})


class TestCombinatorNamespace:
    def test_attribute_and_item_access(self, ns: CombinatorNamespace) -> None:
        assert ns.add is ns["add"] is _factory
        assert "add" in ns
        assert len(ns) == 1
        assert ns.kind == "operator"

    def test_register(self, ns: CombinatorNamespace) -> None:
        ns.register("nudge", _factory)
        assert ns.nudge is _factory
        assert "nudge" in dir(ns)
        assert not ns.is_builtin("nudge")

    @pytest.mark.parametrize("name", ["add", "not-an-identifier", "_private", "register", ""])
    def test_rejects_bad_names(self, ns: CombinatorNamespace, name: str) -> None:
        with pytest.raises(ValueError):
            ns.register(name, _factory)

    def test_rejects_non_callables(self, ns: CombinatorNamespace) -> None:
        with pytest.raises(TypeError):
            ns.register("nudge", 42)  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            ns.register(7, _factory)  # type: ignore[arg-type]

    def test_unregister(self, ns: CombinatorNamespace) -> None:
        ns.register("nudge", _factory)
        ns.unregister("nudge")
        assert "nudge" not in ns
        with pytest.raises(AttributeError):
            ns.nudge  # noqa: B018

    def test_builtins_cannot_be_unregistered(self, ns: CombinatorNamespace) -> None:
        with pytest.raises(ValueError, match="built-in"):
            ns.unregister("add")

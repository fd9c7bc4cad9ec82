"""Unit tests for TypeRegistry."""

from __future__ import annotations

import pytest

from doc_assoc.core.exceptions import UnresolvedTypeError
from doc_assoc.core.types import TypeRegistry


class Widget:
    pass


class Gadget:
    pass


class TestTypeRegistry:
    def test_register_and_resolve(self) -> None:
        registry = TypeRegistry()
        registry.register(Widget)
        assert registry.resolve("Widget") is Widget

    def test_register_under_explicit_name(self) -> None:
        registry = TypeRegistry()
        registry.register(Widget, name="Thing")
        assert registry.has("Thing")
        assert not registry.has("Widget")

    def test_unresolved_type_error(self) -> None:
        registry = TypeRegistry()
        with pytest.raises(UnresolvedTypeError, match="Ghost") as exc_info:
            registry.resolve("Ghost")
        assert exc_info.value.type_name == "Ghost"

    def test_reregistration_replaces(self) -> None:
        registry = TypeRegistry()
        registry.register(Widget, name="Thing")
        registry.register(Gadget, name="Thing")
        assert registry.resolve("Thing") is Gadget
        assert len(registry) == 1

    def test_names_sorted(self) -> None:
        registry = TypeRegistry()
        registry.register(Widget)
        registry.register(Gadget)
        assert registry.names == ["Gadget", "Widget"]

    def test_contains(self) -> None:
        registry = TypeRegistry()
        registry.register(Widget)
        assert "Widget" in registry
        assert "Gadget" not in registry

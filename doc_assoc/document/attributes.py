"""Plain document attributes with change tracking."""

from __future__ import annotations

from typing import Any


class Attribute:
    """A stored, non-association attribute."""

    def __init__(self, default: Any = None) -> None:
        self.default = default
        self.name: str | None = None

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        if instance is None:
            return self
        return instance._attributes.get(self.name, self.default)

    def __set__(self, instance: Any, value: Any) -> None:
        instance._attributes[self.name] = value
        instance.mark_changed(self.name)


def attribute(default: Any = None) -> Any:
    """Declare a stored attribute."""
    return Attribute(default)


class AttributeMixin:
    """Attribute bag and dirty tracking shared by every document."""

    _attributes: dict[str, Any]
    _changed: set[str]

    def mark_changed(self, name: str) -> None:
        self._changed.add(name)

    def clear_changes(self) -> None:
        self._changed.clear()

    @property
    def has_changes(self) -> bool:
        return bool(self._changed)

    @property
    def changed_names(self) -> list[str]:
        return sorted(self._changed)

    def attributes_for_persistence(self) -> dict[str, Any]:
        """The attributes to store for this document."""
        return dict(self._attributes)

"""Document type registry.

Resolves type names to document classes. Classes register themselves when
they are defined, so names used in association declarations may refer to
classes defined later in the same program (forward references) as long as
they exist by the time the association is first used.
"""

from __future__ import annotations

import logging

from doc_assoc.core.exceptions import UnresolvedTypeError

log = logging.getLogger(__name__)


class TypeRegistry:
    """Name -> document class lookup table."""

    def __init__(self) -> None:
        self._types: dict[str, type] = {}

    def register(self, cls: type, name: str | None = None) -> None:
        """Register ``cls`` under ``name`` (defaults to the class name).

        A later registration under the same name replaces the earlier one.
        """
        type_name = name or cls.__name__
        previous = self._types.get(type_name)
        if previous is not None and previous is not cls:
            log.debug("Replacing registered type %s (%r -> %r)", type_name, previous, cls)
        self._types[type_name] = cls

    def resolve(self, name: str) -> type:
        """Look up a registered class by name.

        Raises:
            UnresolvedTypeError: If no class is registered under ``name``.
        """
        try:
            return self._types[name]
        except KeyError:
            raise UnresolvedTypeError(name) from None

    def has(self, name: str) -> bool:
        """Check if a type name is registered."""
        return name in self._types

    @property
    def names(self) -> list[str]:
        """List all registered type names, sorted alphabetically."""
        return sorted(self._types)

    def __contains__(self, name: object) -> bool:
        return name in self._types

    def __len__(self) -> int:
        return len(self._types)


document_types = TypeRegistry()

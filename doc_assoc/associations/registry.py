"""Association registry - per-class, ordered, immutable.

Registries are produced by RegistryBuilder during class creation: seeded
from the parent class, extended with the class's own declarations, then
frozen. Read-time access never mutates a registry.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from doc_assoc.associations.metadata import Association
from doc_assoc.core.exceptions import UnknownAssociationError


class AssociationRegistry(Mapping[str, Association]):
    """Ordered name -> Association mapping for one document class."""

    def __init__(self, associations: Mapping[str, Association] | None = None) -> None:
        self._associations: Mapping[str, Association] = MappingProxyType(
            dict(associations or {})
        )

    def __getitem__(self, name: str) -> Association:
        return self._associations[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._associations)

    def __len__(self) -> int:
        return len(self._associations)

    def get_association(self, name: str) -> Association:
        """Look up an association by name.

        Raises:
            UnknownAssociationError: If ``name`` is not declared.
        """
        try:
            return self._associations[name]
        except KeyError:
            raise UnknownAssociationError(name) from None

    @property
    def names(self) -> list[str]:
        """Association names in declaration order."""
        return list(self._associations)

    def embedded(self) -> list[Association]:
        """Associations whose documents are stored inside the owner."""
        return [assoc for assoc in self._associations.values() if assoc.is_embedded]

    def linked(self) -> list[Association]:
        """Associations whose documents are stored separately."""
        return [assoc for assoc in self._associations.values() if assoc.is_linked]

    def __repr__(self) -> str:
        return f"AssociationRegistry({self.names!r})"


class RegistryBuilder:
    """Collects declarations for one class and builds its registry."""

    def __init__(self, parent: AssociationRegistry | None = None) -> None:
        self._associations: dict[str, Association] = dict(parent or {})

    def add(self, association: Association) -> RegistryBuilder:
        """Add a declaration; replaces an inherited one of the same name."""
        self._associations[association.name] = association
        return self

    def build(self) -> AssociationRegistry:
        return AssociationRegistry(self._associations)

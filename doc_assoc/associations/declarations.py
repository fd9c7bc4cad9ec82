"""Class-body association declarations.

    class Person(Document):
        name = attribute()
        addresses = many()                      # Address, embedded
        friends = many(class_name="Person")     # linked
        account = one()                         # Account

    person.addresses << Address(street="100 Main Street")
    person.has_account
"""

from __future__ import annotations

from typing import Any

from doc_assoc.associations.metadata import Association
from doc_assoc.core.config import AssociationOptions
from doc_assoc.core.enums import Cardinality
from doc_assoc.core.exceptions import AssociationOptionsError


class AssociationDescriptor:
    """Accessor pair for a declared association.

    Reading a ``one`` association returns the related document (or None);
    reading a ``many`` association returns its proxy, which acts as a
    sequence. Assignment always goes through the proxy's ``replace``.
    """

    def __init__(self, cardinality: Cardinality, options: dict[str, Any]) -> None:
        self.cardinality = cardinality
        self._raw_options = options
        self.name: str | None = None

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def bind(self, owner: type) -> Association:
        """Build the metadata for ``owner`` and install the presence accessor."""
        if self.name is None:
            raise AssociationOptionsError("<unnamed>", "declare associations in a class body")
        options = AssociationOptions.parse(self.name, self._raw_options)
        association = Association(
            self.cardinality,
            self.name,
            options,
            inflector=owner.inflector,  # type: ignore[attr-defined]
            type_registry=owner.type_registry,  # type: ignore[attr-defined]
        )
        if self.cardinality is Cardinality.ONE:
            setattr(owner, f"has_{self.name}", _presence_property(self.name))
        return association

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        if instance is None:
            return self
        proxy = instance.proxy_for(self.name)
        if self.cardinality is Cardinality.MANY:
            return proxy
        return proxy.get()

    def __set__(self, instance: Any, value: Any) -> None:
        instance.proxy_for(self.name).replace(value)


def _presence_property(name: str) -> property:
    def present(self: Any) -> bool:
        return bool(self.proxy_for(name).present())

    present.__name__ = f"has_{name}"
    present.__doc__ = f"True if '{name}' currently resolves to a document."
    return property(present)


def one(**options: Any) -> Any:
    """Declare a singular association.

    Options: ``class_name``, ``class_`` (or ``"class"``), ``using``
    (``"embedded"`` / ``"linked"``), ``extend`` (proxy mixins).
    """
    return AssociationDescriptor(Cardinality.ONE, options)


def many(**options: Any) -> Any:
    """Declare a plural association. Accepts the same options as ``one``."""
    return AssociationDescriptor(Cardinality.MANY, options)


class EmbeddedIn:
    """Back-reference from an embedded document to the document holding it."""

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        if instance is None:
            return self
        return instance._parent_document


def embedded_in() -> Any:
    """Declare the parent accessor on an embedded document."""
    return EmbeddedIn()

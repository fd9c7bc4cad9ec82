"""Association metadata.

An Association describes one declared relationship: its cardinality, how the
related documents are stored, which type they must have, and how linked
documents are addressed. It is shared by every owner instance of the
declaring class and is read-only once constructed.

Everything derived from the target type is resolved lazily and memoized, so
declarations may name types that are defined later.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import cached_property
from typing import Any

from doc_assoc.associations.proxy import AssociationProxy, ManyProxy
from doc_assoc.associations.selector import proxy_class_for
from doc_assoc.core.config import AssociationOptions
from doc_assoc.core.enums import Cardinality, ProxyKind, StorageStrategy
from doc_assoc.core.exceptions import AssociationTypeError
from doc_assoc.core.inflection import DEFAULT_INFLECTOR, Inflector
from doc_assoc.core.types import TypeRegistry, document_types
from doc_assoc.store.protocol import Link, LinkSpec


@dataclass(frozen=True, eq=False)
class Association:
    """Reflection of a single ``one`` or ``many`` declaration."""

    cardinality: Cardinality
    name: str
    options: AssociationOptions = field(default_factory=AssociationOptions)
    inflector: Inflector = field(default=DEFAULT_INFLECTOR, repr=False)
    type_registry: TypeRegistry = field(default=document_types, repr=False)

    @property
    def is_one(self) -> bool:
        return self.cardinality is Cardinality.ONE

    @property
    def is_many(self) -> bool:
        return self.cardinality is Cardinality.MANY

    @property
    def polymorphic(self) -> bool:
        # Associations always resolve to exactly one target type
        return False

    @cached_property
    def target_type_name(self) -> str:
        """Name of the associated type.

        ``class_name`` and ``class`` options win; otherwise ``many`` names are
        singularized and camelized (``addresses`` -> ``Address``) and ``one``
        names are camelized (``account`` -> ``Account``).
        """
        if self.options.class_name:
            return self.options.class_name
        if self.options.class_ is not None:
            return self.options.class_.__name__
        if self.is_many:
            return self.inflector.classify(self.name)
        return self.inflector.camelize(self.name)

    @cached_property
    def target_type(self) -> type:
        """The associated class.

        Raises:
            UnresolvedTypeError: If the target type name is not registered.
        """
        if self.options.class_ is not None:
            return self.options.class_
        return self.type_registry.resolve(self.target_type_name)

    @property
    def is_embeddable(self) -> bool:
        return bool(getattr(self.target_type, "embeddable", False))

    @cached_property
    def storage_strategy(self) -> StorageStrategy:
        """Embedded for embeddable targets unless ``using`` says otherwise."""
        if self.options.using is not None:
            return self.options.using
        return StorageStrategy.EMBEDDED if self.is_embeddable else StorageStrategy.LINKED

    @property
    def is_embedded(self) -> bool:
        return self.storage_strategy is StorageStrategy.EMBEDDED

    @property
    def is_linked(self) -> bool:
        return self.storage_strategy is StorageStrategy.LINKED

    @property
    def bucket_name(self) -> str:
        return self.target_type.bucket_name  # type: ignore[attr-defined, no-any-return]

    @property
    def link_tag(self) -> str | None:
        return self.name if self.is_linked else None

    @property
    def link_spec(self) -> LinkSpec | None:
        """Which outgoing links of the owner lead to the associated documents."""
        if not self.is_linked:
            return None
        return LinkSpec(tag=self.name, bucket=self.bucket_name)

    def link_filter(self, link: Link) -> bool:
        """True if ``link`` belongs to this association."""
        return self.is_linked and link.tag == self.link_tag

    @property
    def proxy_kind(self) -> ProxyKind:
        return ProxyKind.of(self.cardinality, self.storage_strategy)

    @cached_property
    def proxy_class(self) -> type[AssociationProxy]:
        return proxy_class_for(self.proxy_kind, self.options.extend)

    # --- Type checks ---

    def type_matches(self, value: Any) -> bool:
        """Check ``value`` against the association's cardinality and type."""
        if self.is_many:
            return isinstance(value, (list, tuple, ManyProxy)) and all(
                self.element_matches(item) for item in value
            )
        return value is None or self.element_matches(value)

    def element_matches(self, value: Any) -> bool:
        """Check a single embedded-attributes dict or target instance."""
        return (self.is_embeddable and isinstance(value, dict)) or isinstance(
            value, self.target_type
        )

    def verify_type(self, value: Any, owner: Any) -> None:
        """Raise AssociationTypeError unless ``value`` fits this association."""
        if not self.type_matches(value):
            self._type_error(value, owner)

    def verify_element(self, value: Any, owner: Any) -> None:
        """Raise AssociationTypeError unless ``value`` may join a ``many`` association."""
        if not self.element_matches(value):
            self._type_error(value, owner)

    def _type_error(self, value: Any, owner: Any) -> None:
        expected = "<polymorphic>" if self.polymorphic else self.target_type.__name__
        raise AssociationTypeError(self.name, repr(owner), expected, repr(value))

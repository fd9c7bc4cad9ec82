"""Document classes.

Document is a standalone record stored under its own key in a bucket;
EmbeddedDocument lives inside another document's attributes. Both accept
association declarations; embedded documents may only embed, never link.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable
from typing import Any, ClassVar

from doc_assoc.associations.mixin import AssociationsMixin
from doc_assoc.core.exceptions import DocumentNotFoundError, StoreNotConfiguredError
from doc_assoc.core.inflection import DEFAULT_INFLECTOR, Inflector
from doc_assoc.core.types import TypeRegistry, document_types
from doc_assoc.document.attributes import Attribute, AttributeMixin
from doc_assoc.store.protocol import Link, LinkStore, StoredObject

log = logging.getLogger(__name__)


class DocumentBase(AssociationsMixin, AttributeMixin):
    """Shared behaviour of stored and embedded documents.

    Class keywords:
        type_registry: Registry the class (and its subclasses) resolve and
            register type names in. Defaults to ``document_types``.
        inflector: Naming rules used for association target names.
    """

    embeddable: ClassVar[bool] = False
    type_registry: ClassVar[TypeRegistry] = document_types
    inflector: ClassVar[Inflector] = DEFAULT_INFLECTOR
    attribute_fields: ClassVar[dict[str, Attribute]] = {}

    def __init_subclass__(
        cls,
        type_registry: TypeRegistry | None = None,
        inflector: Inflector | None = None,
        **kwargs: Any,
    ) -> None:
        if type_registry is not None:
            cls.type_registry = type_registry
        if inflector is not None:
            cls.inflector = inflector
        super().__init_subclass__(**kwargs)

        fields = dict(cls.attribute_fields)
        for name, value in cls.__dict__.items():
            if isinstance(value, Attribute):
                fields[name] = value
        cls.attribute_fields = fields
        cls.type_registry.register(cls)

    def __init__(self, **values: Any) -> None:
        cls = type(self)
        self._attributes = {name: field.default for name, field in cls.attribute_fields.items()}
        self._changed = set()
        for name, value in values.items():
            if name not in cls.attribute_fields and name not in cls.associations:
                raise TypeError(f"{cls.__name__} has no attribute or association '{name}'")
            setattr(self, name, value)

    def _assign_stored(self, data: dict[str, Any]) -> None:
        cls = type(self)
        self._attributes = {name: field.default for name, field in cls.attribute_fields.items()}
        for name, value in data.items():
            if name in cls.associations:
                self.proxy_for(name).replace(value)
            elif name in cls.attribute_fields:
                self._attributes[name] = value
            else:
                log.debug("Ignoring unknown stored attribute %s on %s", name, cls.__name__)


class Document(DocumentBase):
    """A document stored under its own key.

    ``bucket_name`` defaults to the pluralized, underscored class name
    (``Person`` -> ``people``).
    """

    bucket_name: ClassVar[str] = "documents"
    _store: ClassVar[LinkStore | None] = None
    _before_save_hooks: ClassVar[tuple[Callable[[Any], Any], ...]] = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        if "bucket_name" not in cls.__dict__:
            cls.bucket_name = (kwargs.get("inflector") or cls.inflector).tableize(cls.__name__)
        super().__init_subclass__(**kwargs)

    def __init__(self, key: str | None = None, **values: Any) -> None:
        self.key = key or uuid.uuid4().hex
        self.links: list[Link] = []
        self._new = True
        super().__init__(**values)

    # --- Store binding ---

    @classmethod
    def use_store(cls, store: LinkStore | None) -> None:
        """Bind a store to this class and its subclasses."""
        cls._store = store

    @classmethod
    def get_store(cls) -> LinkStore:
        """Return the bound store.

        Raises:
            StoreNotConfiguredError: If no store is bound.
        """
        if cls._store is None:
            raise StoreNotConfiguredError(cls.__name__)
        return cls._store

    # --- Callbacks ---

    @classmethod
    def before_save(cls, hook: Callable[[Any], Any]) -> Callable[[Any], Any]:
        """Register ``hook(document)`` to run before every save of this class.

        Registering the same hook twice has no effect. Usable as a decorator.
        """
        if hook not in cls._before_save_hooks:
            cls._before_save_hooks = (*cls._before_save_hooks, hook)
        return hook

    # --- Lifecycle ---

    @property
    def is_new(self) -> bool:
        return self._new

    def save(self) -> bool:
        """Run before-save hooks, then store attributes and links."""
        for hook in type(self)._before_save_hooks:
            hook(self)
        store = self.get_store()
        store.store(
            StoredObject(
                bucket=self.bucket_name,
                key=self.key,
                data=self.attributes_for_persistence(),
                links=tuple(self.links),
            )
        )
        self._new = False
        self.clear_changes()
        return True

    def reload(self) -> Document:
        """Discard in-memory state and re-read the stored document.

        Raises:
            DocumentNotFoundError: If the document is no longer stored.
        """
        if self.is_new:
            return self
        stored = self.get_store().fetch(self.bucket_name, self.key)
        if stored is None:
            raise DocumentNotFoundError(self.bucket_name, self.key)
        self.reset_associations()
        self._load(stored)
        return self

    @classmethod
    def find(cls, key: str) -> Any:
        """Fetch a stored document by key.

        Raises:
            DocumentNotFoundError: If no document is stored under ``key``.
        """
        stored = cls.get_store().fetch(cls.bucket_name, key)
        if stored is None:
            raise DocumentNotFoundError(cls.bucket_name, key)
        return cls.instantiate(stored)

    @classmethod
    def instantiate(cls, stored: StoredObject) -> Any:
        """Build a persisted document from a stored object."""
        document = cls(key=stored.key)
        document._load(stored)
        return document

    def _load(self, stored: StoredObject) -> None:
        self.links = list(stored.links)
        self._assign_stored(stored.data)
        self._new = False
        self.clear_changes()

    def to_link(self, tag: str) -> Link:
        """A link pointing at this document."""
        return Link(bucket=self.bucket_name, key=self.key, tag=tag)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Document):
            return NotImplemented
        return type(self) is type(other) and self.key == other.key

    def __hash__(self) -> int:
        return hash((type(self), self.key))

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.bucket_name}/{self.key}>"


class EmbeddedDocument(DocumentBase):
    """A document stored inside its parent's attributes."""

    embeddable: ClassVar[bool] = True
    _parent_document: Any = None
    _parent_association: str | None = None

    @property
    def parent_document(self) -> Any:
        return self._parent_document

    @property
    def root_document(self) -> Any:
        """The outermost document holding this one, or None if detached."""
        document = self._parent_document
        while isinstance(document, EmbeddedDocument):
            document = document._parent_document
        return document

    @property
    def is_new(self) -> bool:
        root = self.root_document
        return True if root is None else bool(root.is_new)

    def mark_changed(self, name: str) -> None:
        super().mark_changed(name)
        if self._parent_document is not None and self._parent_association is not None:
            self._parent_document.mark_changed(self._parent_association)

    def save(self) -> bool:
        """Save the root document; False if this document is detached."""
        root = self.root_document
        if root is None:
            return False
        return bool(root.save())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EmbeddedDocument):
            return NotImplemented
        return (
            type(self) is type(other)
            and self.attributes_for_persistence() == other.attributes_for_persistence()
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        attrs = ", ".join(f"{k}={v!r}" for k, v in self._attributes.items())
        return f"<{type(self).__name__} {attrs}>"

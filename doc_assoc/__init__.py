"""DocAssoc - embedded and linked associations for document models."""

from __future__ import annotations

from doc_assoc.associations.declarations import embedded_in, many, one
from doc_assoc.associations.metadata import Association
from doc_assoc.associations.registry import AssociationRegistry
from doc_assoc.core.config import AssociationOptions, InflectionConfig
from doc_assoc.core.enums import Cardinality, ProxyKind, StorageStrategy
from doc_assoc.core.exceptions import (
    AssociationError,
    AssociationOptionsError,
    AssociationTypeError,
    DocAssocError,
    DocumentNotFoundError,
    StoreError,
    StoreNotConfiguredError,
    TypeResolutionError,
    UnknownAssociationError,
    UnresolvedTypeError,
)
from doc_assoc.core.inflection import DEFAULT_INFLECTOR, Inflector
from doc_assoc.core.types import TypeRegistry, document_types
from doc_assoc.document.attributes import attribute
from doc_assoc.document.base import Document, EmbeddedDocument
from doc_assoc.store.memory import MemoryStore
from doc_assoc.store.protocol import Link, LinkSpec, LinkStore, StoredObject

__all__ = [
    # Declarations
    "one",
    "many",
    "embedded_in",
    "attribute",
    # Documents
    "Document",
    "EmbeddedDocument",
    # Metadata
    "Association",
    "AssociationRegistry",
    "AssociationOptions",
    "Cardinality",
    "StorageStrategy",
    "ProxyKind",
    # Naming and types
    "Inflector",
    "InflectionConfig",
    "DEFAULT_INFLECTOR",
    "TypeRegistry",
    "document_types",
    # Store
    "Link",
    "LinkSpec",
    "LinkStore",
    "StoredObject",
    "MemoryStore",
    # Exceptions
    "DocAssocError",
    "TypeResolutionError",
    "UnresolvedTypeError",
    "AssociationError",
    "AssociationTypeError",
    "AssociationOptionsError",
    "UnknownAssociationError",
    "StoreError",
    "StoreNotConfiguredError",
    "DocumentNotFoundError",
]

"""Association layer - metadata, proxies, registries, and lifecycle hooks."""

from __future__ import annotations

from doc_assoc.associations.declarations import embedded_in, many, one
from doc_assoc.associations.embedded import ManyEmbeddedProxy, OneEmbeddedProxy
from doc_assoc.associations.linked import ManyLinkedProxy, OneLinkedProxy
from doc_assoc.associations.metadata import Association
from doc_assoc.associations.mixin import AssociationsMixin
from doc_assoc.associations.proxy import AssociationProxy, ManyProxy, OneProxy
from doc_assoc.associations.registry import AssociationRegistry, RegistryBuilder
from doc_assoc.associations.selector import build_proxy, proxy_class_for

__all__ = [
    "one",
    "many",
    "embedded_in",
    "Association",
    "AssociationRegistry",
    "RegistryBuilder",
    "AssociationsMixin",
    "AssociationProxy",
    "OneProxy",
    "ManyProxy",
    "OneEmbeddedProxy",
    "ManyEmbeddedProxy",
    "OneLinkedProxy",
    "ManyLinkedProxy",
    "proxy_class_for",
    "build_proxy",
]

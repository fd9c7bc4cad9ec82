"""Instance-side association support.

AssociationsMixin gives each document a lazily filled proxy cache, folds
embedded documents into the persisted attributes, and cascades saves to the
linked documents it has loaded.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any, ClassVar

from doc_assoc.associations.declarations import AssociationDescriptor
from doc_assoc.associations.metadata import Association
from doc_assoc.associations.proxy import AssociationProxy
from doc_assoc.associations.registry import AssociationRegistry, RegistryBuilder
from doc_assoc.associations.selector import build_proxy
from doc_assoc.core.exceptions import AssociationOptionsError

log = logging.getLogger(__name__)


class AssociationsMixin:
    """Association declarations, proxy cache, and persistence hooks."""

    associations: ClassVar[AssociationRegistry] = AssociationRegistry()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        builder = RegistryBuilder(cls.associations)
        declared = False
        for value in list(cls.__dict__.values()):
            if isinstance(value, AssociationDescriptor):
                association = value.bind(cls)
                # Inferred strategies need the target type, so they are checked on first use
                if association.options.using is not None:
                    cls._reject_linked(association)
                builder.add(association)
                declared = True
        cls.associations = builder.build()

        before_save = getattr(cls, "before_save", None)
        if declared and before_save is not None:
            before_save(AssociationsMixin.save_loaded_documents)

    @classmethod
    def _reject_linked(cls, association: Association) -> None:
        if getattr(cls, "embeddable", False) and association.is_linked:
            raise AssociationOptionsError(
                association.name,
                f"{cls.__name__} is embedded and cannot hold linked documents",
            )

    @classmethod
    def embedded_associations(cls) -> list[Association]:
        return cls.associations.embedded()

    @classmethod
    def linked_associations(cls) -> list[Association]:
        return cls.associations.linked()

    # --- Proxy cache ---

    @property
    def _association_proxies(self) -> dict[str, AssociationProxy]:
        return self.__dict__.setdefault("_proxies", {})  # type: ignore[no-any-return]

    def proxy_for(self, name: str) -> AssociationProxy:
        """Return this document's proxy for ``name``, creating it on first use.

        Raises:
            UnknownAssociationError: If ``name`` is not a declared association.
        """
        proxies = self._association_proxies
        proxy = proxies.get(name)
        if proxy is None:
            association = type(self).associations.get_association(name)
            type(self)._reject_linked(association)
            proxy = build_proxy(self, association)
            proxies[name] = proxy
        return proxy

    def reset_associations(self) -> None:
        """Forget every loaded association value."""
        for proxy in self._association_proxies.values():
            proxy.reset()

    # --- Persistence hooks ---

    def attributes_for_persistence(self) -> dict[str, Any]:
        attrs: dict[str, Any] = super().attributes_for_persistence()  # type: ignore[misc]
        proxies = self._association_proxies
        for association in type(self).embedded_associations():
            proxy = proxies.get(association.name)
            # Unloaded proxies hold nothing worth persisting
            if proxy is None or not proxy.loaded or proxy.target is None:
                continue
            if association.is_many:
                attrs[association.name] = [
                    document.attributes_for_persistence() for document in proxy.target
                ]
            else:
                attrs[association.name] = proxy.target.attributes_for_persistence()
        return attrs

    def clear_changes(self) -> None:
        """Clear this document's changes and those of its loaded embedded documents."""
        super().clear_changes()  # type: ignore[misc]
        proxies = self._association_proxies
        for association in type(self).embedded_associations():
            proxy = proxies.get(association.name)
            if proxy is None or not proxy.loaded or proxy.target is None:
                continue
            documents = proxy.target if association.is_many else [proxy.target]
            for document in documents:
                document.clear_changes()

    @contextmanager
    def _cascade_scope(self) -> Iterator[bool]:
        """Yield True for the outermost cascade on this document, False if nested."""
        if self.__dict__.get("_cascade_in_progress"):
            yield False
            return
        self.__dict__["_cascade_in_progress"] = True
        try:
            yield True
        finally:
            self.__dict__["_cascade_in_progress"] = False

    def save_loaded_documents(self) -> None:
        """Save loaded linked documents that are new or changed.

        Linked associations that were never read are not fetched. Runs at
        most once per save chain for this document.
        """
        with self._cascade_scope() as outermost:
            if not outermost:
                return
            proxies = self._association_proxies
            for association in type(self).linked_associations():
                proxy = proxies.get(association.name)
                if proxy is None:
                    continue
                for document in proxy.loaded_documents():  # type: ignore[attr-defined]
                    if document.is_new or document.has_changes:
                        log.debug(
                            "Cascading save from %r to %r via %s",
                            self,
                            document,
                            association.name,
                        )
                        document.save()

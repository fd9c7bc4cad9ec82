"""Proxies for associations stored as separate documents reached by links.

Reads follow the owner's outgoing links in the store the first time they are
needed. Writes only rewrite the owner's in-memory links; the related
documents are persisted by the owner's before-save cascade.
"""

from __future__ import annotations

import logging
from typing import Any

from doc_assoc.associations.proxy import ManyProxy, OneProxy

log = logging.getLogger(__name__)


class _LinkedMixin:
    owner: Any
    association: Any

    def _walk(self) -> list[Any]:
        """Fetch the documents linked from the stored owner."""
        if self.owner.is_new:
            return []
        spec = self.association.link_spec
        log.debug(
            "Walking %s/%s via tag=%s bucket=%s",
            self.owner.bucket_name,
            self.owner.key,
            spec.tag,
            spec.bucket,
        )
        store = self.owner.get_store()
        target_type = self.association.target_type
        return [
            target_type.instantiate(obj)
            for obj in store.walk(self.owner.bucket_name, self.owner.key, spec)
        ]

    def _relink(self, documents: list[Any]) -> None:
        kept = [link for link in self.owner.links if not self.association.link_filter(link)]
        tag = self.association.link_tag
        self.owner.links[:] = kept + [document.to_link(tag) for document in documents]


class OneLinkedProxy(_LinkedMixin, OneProxy):
    def _find_target(self) -> Any:
        documents = self._walk()
        return documents[0] if documents else None

    def replace(self, value: Any) -> None:
        self.association.verify_type(value, self.owner)
        document = self._instantiate(value)
        self._relink([] if document is None else [document])
        self._target = document
        self._loaded = True
        self._changed()

    def loaded_documents(self) -> list[Any]:
        """The cached document, if loaded; never fetches."""
        if not self._loaded or self._target is None:
            return []
        return [self._target]


class ManyLinkedProxy(_LinkedMixin, ManyProxy):
    def _find_target(self) -> list[Any]:
        return self._walk()

    def replace(self, value: Any) -> None:
        self.association.verify_type(value, self.owner)
        documents = [self._instantiate(item) for item in value]
        self._relink(documents)
        self._target = documents
        self._loaded = True
        self._changed()

    def append(self, value: Any) -> None:
        self.association.verify_element(value, self.owner)
        document = self._instantiate(value)
        documents = self.get()
        self.owner.links.append(document.to_link(self.association.link_tag))
        documents.append(document)
        self._changed()

    def loaded_documents(self) -> list[Any]:
        """The cached documents, if loaded; never fetches."""
        if not self._loaded:
            return []
        return list(self._target)

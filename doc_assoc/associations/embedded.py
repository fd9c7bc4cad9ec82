"""Proxies for associations stored inside the owner's own attributes.

Embedded documents have no source of truth besides the owner, so nothing is
ever fetched: a fresh or reset proxy holds ``None`` (one) or ``[]`` (many).
"""

from __future__ import annotations

from typing import Any

from doc_assoc.associations.proxy import ManyProxy, OneProxy


def _assign_parent(document: Any, owner: Any, name: str) -> None:
    document._parent_document = owner
    document._parent_association = name


class OneEmbeddedProxy(OneProxy):
    def _find_target(self) -> Any:
        return None

    def replace(self, value: Any) -> None:
        self.association.verify_type(value, self.owner)
        document = self._instantiate(value)
        if document is not None:
            _assign_parent(document, self.owner, self.association.name)
        self._target = document
        self._loaded = True
        self._changed()


class ManyEmbeddedProxy(ManyProxy):
    def _find_target(self) -> list[Any]:
        return []

    def replace(self, value: Any) -> None:
        self.association.verify_type(value, self.owner)
        documents = [self._instantiate(item) for item in value]
        for document in documents:
            _assign_parent(document, self.owner, self.association.name)
        self._target = documents
        self._loaded = True
        self._changed()

    def append(self, value: Any) -> None:
        self.association.verify_element(value, self.owner)
        document = self._instantiate(value)
        _assign_parent(document, self.owner, self.association.name)
        self.get().append(document)
        self._changed()

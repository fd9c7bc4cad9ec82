"""Document host classes."""

from __future__ import annotations

from doc_assoc.document.attributes import Attribute, attribute
from doc_assoc.document.base import Document, DocumentBase, EmbeddedDocument

__all__ = [
    "attribute",
    "Attribute",
    "Document",
    "DocumentBase",
    "EmbeddedDocument",
]

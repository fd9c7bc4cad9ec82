"""Document store collaborators."""

from __future__ import annotations

from doc_assoc.store.memory import MemoryStore
from doc_assoc.store.protocol import Link, LinkSpec, LinkStore, StoredObject

__all__ = [
    "Link",
    "LinkSpec",
    "LinkStore",
    "StoredObject",
    "MemoryStore",
]

"""Document store protocol.

A store keeps documents as attribute mappings grouped into buckets, each
with a list of outgoing tagged links. Associations only need to fetch,
store, and follow links; any store offering these operations can back them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

WILDCARD = "_"


@dataclass(frozen=True)
class Link:
    """An outgoing reference from one stored document to another."""

    bucket: str
    key: str
    tag: str


@dataclass(frozen=True)
class LinkSpec:
    """Which outgoing links to follow: by tag and target bucket.

    ``"_"`` matches any tag or bucket.
    """

    tag: str = WILDCARD
    bucket: str = WILDCARD

    def matches(self, link: Link) -> bool:
        return (self.tag in (WILDCARD, link.tag)) and (self.bucket in (WILDCARD, link.bucket))


@dataclass(frozen=True)
class StoredObject:
    """A document as the store sees it."""

    bucket: str
    key: str
    data: dict[str, Any] = field(default_factory=dict)
    links: tuple[Link, ...] = ()


@runtime_checkable
class LinkStore(Protocol):
    """Storage backend protocol."""

    def fetch(self, bucket: str, key: str) -> StoredObject | None:
        """Return the stored document, or None if the key is absent."""
        ...

    def store(self, obj: StoredObject) -> None:
        """Create or overwrite a document."""
        ...

    def delete(self, bucket: str, key: str) -> None:
        """Remove a document if present."""
        ...

    def walk(self, bucket: str, key: str, spec: LinkSpec) -> list[StoredObject]:
        """Follow the document's outgoing links matching ``spec``.

        Returns the linked documents in link order. Links pointing to missing
        documents are skipped.
        """
        ...

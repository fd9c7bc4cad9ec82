"""Association enumerations."""

from __future__ import annotations

from enum import Enum


class Cardinality(Enum):
    """How many related documents an association holds."""

    ONE = "one"
    MANY = "many"


class StorageStrategy(Enum):
    """How related documents are represented relative to their owner."""

    EMBEDDED = "embedded"
    LINKED = "linked"


class ProxyKind(Enum):
    """The four proxy variants, one per cardinality x storage strategy."""

    ONE_EMBEDDED = "one_embedded"
    MANY_EMBEDDED = "many_embedded"
    ONE_LINKED = "one_linked"
    MANY_LINKED = "many_linked"

    @classmethod
    def of(cls, cardinality: Cardinality, strategy: StorageStrategy) -> ProxyKind:
        """Derive the proxy kind from cardinality and storage strategy."""
        return _PROXY_KINDS[(cardinality, strategy)]


_PROXY_KINDS: dict[tuple[Cardinality, StorageStrategy], ProxyKind] = {
    (Cardinality.ONE, StorageStrategy.EMBEDDED): ProxyKind.ONE_EMBEDDED,
    (Cardinality.MANY, StorageStrategy.EMBEDDED): ProxyKind.MANY_EMBEDDED,
    (Cardinality.ONE, StorageStrategy.LINKED): ProxyKind.ONE_LINKED,
    (Cardinality.MANY, StorageStrategy.LINKED): ProxyKind.MANY_LINKED,
}

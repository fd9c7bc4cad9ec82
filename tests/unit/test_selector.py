"""Unit tests for proxy selection."""

from __future__ import annotations

import pytest

from doc_assoc.associations.embedded import ManyEmbeddedProxy, OneEmbeddedProxy
from doc_assoc.associations.linked import ManyLinkedProxy, OneLinkedProxy
from doc_assoc.associations.proxy import ManyProxy, OneProxy
from doc_assoc.associations.selector import proxy_class_for
from doc_assoc.core.enums import Cardinality, ProxyKind, StorageStrategy


class Searchable:
    def search(self, **criteria: object) -> list:
        return [
            doc
            for doc in self  # type: ignore[attr-defined]
            if all(getattr(doc, k) == v for k, v in criteria.items())
        ]


class Auditable:
    pass


class TestProxySelector:
    @pytest.mark.parametrize(
        ("kind", "proxy_class"),
        [
            (ProxyKind.ONE_EMBEDDED, OneEmbeddedProxy),
            (ProxyKind.MANY_EMBEDDED, ManyEmbeddedProxy),
            (ProxyKind.ONE_LINKED, OneLinkedProxy),
            (ProxyKind.MANY_LINKED, ManyLinkedProxy),
        ],
    )
    def test_kind_to_class(self, kind: ProxyKind, proxy_class: type) -> None:
        assert proxy_class_for(kind) is proxy_class

    def test_every_kind_is_covered(self) -> None:
        for kind in ProxyKind:
            assert proxy_class_for(kind) is not None

    def test_cardinality_families(self) -> None:
        assert issubclass(proxy_class_for(ProxyKind.ONE_LINKED), OneProxy)
        assert issubclass(proxy_class_for(ProxyKind.MANY_EMBEDDED), ManyProxy)

    def test_kind_of(self) -> None:
        assert ProxyKind.of(Cardinality.MANY, StorageStrategy.LINKED) is ProxyKind.MANY_LINKED
        assert ProxyKind.of(Cardinality.ONE, StorageStrategy.EMBEDDED) is ProxyKind.ONE_EMBEDDED


class TestExtendedProxies:
    def test_mixins_applied(self) -> None:
        cls = proxy_class_for(ProxyKind.MANY_LINKED, (Searchable, Auditable))
        assert issubclass(cls, ManyLinkedProxy)
        assert issubclass(cls, Searchable)
        assert issubclass(cls, Auditable)
        assert cls.__name__ == "ManyLinkedProxySearchableAuditable"

    def test_extended_class_is_reused(self) -> None:
        first = proxy_class_for(ProxyKind.MANY_EMBEDDED, (Searchable,))
        second = proxy_class_for(ProxyKind.MANY_EMBEDDED, (Searchable,))
        assert first is second

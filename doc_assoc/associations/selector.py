"""Proxy selection by association kind."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from doc_assoc.associations.embedded import ManyEmbeddedProxy, OneEmbeddedProxy
from doc_assoc.associations.linked import ManyLinkedProxy, OneLinkedProxy
from doc_assoc.associations.proxy import AssociationProxy
from doc_assoc.core.enums import ProxyKind

if TYPE_CHECKING:
    from doc_assoc.associations.metadata import Association

# Every ProxyKind must appear here
_PROXY_CLASSES: dict[ProxyKind, type[AssociationProxy]] = {
    ProxyKind.ONE_EMBEDDED: OneEmbeddedProxy,
    ProxyKind.MANY_EMBEDDED: ManyEmbeddedProxy,
    ProxyKind.ONE_LINKED: OneLinkedProxy,
    ProxyKind.MANY_LINKED: ManyLinkedProxy,
}

_EXTENDED: dict[tuple[ProxyKind, tuple[type, ...]], type[AssociationProxy]] = {}


def proxy_class_for(
    kind: ProxyKind, extend: tuple[type, ...] = ()
) -> type[AssociationProxy]:
    """Return the proxy class for ``kind``.

    When ``extend`` is given, a subclass mixing those classes into the proxy
    is built once and reused.
    """
    base = _PROXY_CLASSES[kind]
    if not extend:
        return base
    key = (kind, extend)
    if key not in _EXTENDED:
        name = base.__name__ + "".join(mixin.__name__ for mixin in extend)
        _EXTENDED[key] = type(name, (*extend, base), {})
    return _EXTENDED[key]


def build_proxy(owner: Any, association: Association) -> AssociationProxy:
    """Create a proxy binding ``owner`` to the shared ``association``."""
    return association.proxy_class(owner, association)

"""Association proxy base classes.

A proxy is created lazily, once per (owner, association), and mediates all
access to the related document(s): it caches what has been loaded, checks
assignments against the association's metadata, and can be reset so the
next read resolves again.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import TYPE_CHECKING, Any, overload

if TYPE_CHECKING:
    from doc_assoc.associations.metadata import Association


class AssociationProxy:
    """Owner-bound access object for one association.

    Subclasses implement ``_find_target`` (what a first read resolves to)
    and ``replace``.
    """

    def __init__(self, owner: Any, association: Association) -> None:
        self.owner = owner
        self.association = association
        self._target: Any = self._empty()
        self._loaded = False

    @property
    def loaded(self) -> bool:
        return self._loaded

    @property
    def target(self) -> Any:
        """The cached value, without resolving it."""
        return self._target

    def get(self) -> Any:
        """Return the related value(s), resolving them on first access."""
        if not self._loaded:
            self._target = self._find_target()
            self._loaded = True
        return self._target

    def replace(self, value: Any) -> None:
        raise NotImplementedError

    def reset(self) -> None:
        """Drop the cached value; the next ``get()`` resolves again."""
        self._target = self._empty()
        self._loaded = False

    def _empty(self) -> Any:
        return None

    def _find_target(self) -> Any:
        raise NotImplementedError

    def _instantiate(self, value: Any) -> Any:
        """Build a target instance from an attributes dict."""
        if isinstance(value, dict):
            return self.association.target_type(**value)
        return value

    def _changed(self) -> None:
        self.owner.mark_changed(self.association.name)

    def __repr__(self) -> str:
        return (
            f"<{type(self).__name__} {self.association.name} "
            f"loaded={self._loaded} target={self._target!r}>"
        )


class OneProxy(AssociationProxy):
    """Proxy for a ``one`` association."""

    def present(self) -> bool:
        """True if the association currently resolves to a document."""
        return self.get() is not None


class ManyProxy(AssociationProxy, Sequence):
    """Proxy for a ``many`` association; behaves as a read-only sequence
    with ``append``/``extend``/``<<`` mutations."""

    def _empty(self) -> list[Any]:
        return []

    def append(self, value: Any) -> None:
        raise NotImplementedError

    def extend(self, values: Iterable[Any]) -> None:
        """Append each value in turn."""
        for value in values:
            self.append(value)

    def to_list(self) -> list[Any]:
        """A copy of the current documents."""
        return list(self.get())

    def __lshift__(self, value: Any) -> ManyProxy:
        self.append(value)
        return self

    def __len__(self) -> int:
        return len(self.get())

    def __iter__(self) -> Iterator[Any]:
        return iter(self.get())

    @overload
    def __getitem__(self, index: int) -> Any: ...

    @overload
    def __getitem__(self, index: slice) -> list[Any]: ...

    def __getitem__(self, index: int | slice) -> Any:
        return self.get()[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ManyProxy):
            return self.get() == other.get()
        if isinstance(other, (list, tuple)):
            return self.get() == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

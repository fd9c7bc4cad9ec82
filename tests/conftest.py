"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import Iterator
from unittest.mock import MagicMock

import pytest

from doc_assoc.document.base import Document
from doc_assoc.store.memory import MemoryStore


@pytest.fixture
def store() -> MemoryStore:
    """Empty in-memory store."""
    return MemoryStore()


@pytest.fixture(autouse=True)
def bound_store(store: MemoryStore) -> Iterator[MemoryStore]:
    """Bind the test's store to every Document class for the test's duration."""
    Document.use_store(store)
    yield store
    Document.use_store(None)


@pytest.fixture
def spy_store(store: MemoryStore) -> MemoryStore:
    """The bound store with ``walk`` and ``store`` wrapped in mocks.

    Usage:
        spy_store.walk.assert_not_called()
    """
    store.walk = MagicMock(wraps=store.walk)  # type: ignore[method-assign]
    store.store = MagicMock(wraps=store.store)  # type: ignore[method-assign]
    return store

"""In-memory store - dict-backed LinkStore implementation."""

from __future__ import annotations

import copy
import logging

from doc_assoc.store.protocol import LinkSpec, StoredObject

log = logging.getLogger(__name__)


class MemoryStore:
    """LinkStore holding documents in process memory.

    Data is deep-copied on the way in and out, so callers never share
    mutable state with the store.
    """

    def __init__(self) -> None:
        self._buckets: dict[str, dict[str, StoredObject]] = {}

    def fetch(self, bucket: str, key: str) -> StoredObject | None:
        obj = self._buckets.get(bucket, {}).get(key)
        if obj is None:
            return None
        return copy.deepcopy(obj)

    def store(self, obj: StoredObject) -> None:
        log.debug("Storing %s/%s (%d links)", obj.bucket, obj.key, len(obj.links))
        self._buckets.setdefault(obj.bucket, {})[obj.key] = copy.deepcopy(obj)

    def delete(self, bucket: str, key: str) -> None:
        self._buckets.get(bucket, {}).pop(key, None)

    def walk(self, bucket: str, key: str, spec: LinkSpec) -> list[StoredObject]:
        source = self._buckets.get(bucket, {}).get(key)
        if source is None:
            return []
        results: list[StoredObject] = []
        for link in source.links:
            if not spec.matches(link):
                continue
            target = self.fetch(link.bucket, link.key)
            if target is not None:
                results.append(target)
        return results

    def keys(self, bucket: str) -> list[str]:
        """List stored keys in a bucket, sorted."""
        return sorted(self._buckets.get(bucket, {}))

    def __len__(self) -> int:
        return sum(len(objs) for objs in self._buckets.values())

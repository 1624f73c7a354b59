"""
In-process result cache.

A bounded, time-evicted map from request fingerprint to ClassificationResult.
Entries are never updated in place: a stale entry is replaced wholesale by the
next successful run. Safe to share between threads and asyncio tasks.
"""

from __future__ import annotations

import hashlib
import json
import threading
import time
from collections import OrderedDict
from typing import Callable, Optional

from fsc_classifier.schemas.contracts import ClassificationRequest, ClassificationResult


def fingerprint(request: ClassificationRequest) -> str:
    """Case-insensitive, whitespace-trimmed request identity; attachment order is ignored."""
    normalized = json.dumps(
        {
            "name": request.company_name.strip().lower(),
            "websiteUrl": (request.website_url or "").strip().lower(),
            "emailDomain": (request.email_domain or "").strip().lower(),
            "fileIds": sorted(request.attachment_refs),
        },
        sort_keys=True,
        separators=(",", ":"),
    )
    return hashlib.sha256(normalized.encode("utf-8")).hexdigest()


class ResultCache:
    def __init__(
        self,
        ttl_seconds: float = 3600.0,
        max_entries: int = 1024,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive")
        if max_entries <= 0:
            raise ValueError("max_entries must be positive")
        self.ttl_seconds = ttl_seconds
        self.max_entries = max_entries
        self._clock = clock
        self._lock = threading.Lock()
        # fingerprint -> (created_at, result), oldest insert first
        self._entries: OrderedDict[str, tuple[float, ClassificationResult]] = OrderedDict()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def get(self, key: str) -> Optional[ClassificationResult]:
        now = self._clock()
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            created_at, result = entry
            if now - created_at >= self.ttl_seconds:
                del self._entries[key]
                return None
            return result

    def put(self, key: str, result: ClassificationResult) -> None:
        now = self._clock()
        with self._lock:
            self._entries.pop(key, None)
            self._entries[key] = (now, result)
            self._evict(now)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def _evict(self, now: float) -> None:
        expired = [k for k, (created_at, _) in self._entries.items() if now - created_at >= self.ttl_seconds]
        for k in expired:
            del self._entries[k]
        while len(self._entries) > self.max_entries:
            self._entries.popitem(last=False)

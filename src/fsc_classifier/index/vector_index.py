"""
Group vector index.

Two implementations share one contract:
- PineconeGroupIndex: the hosted index ("codes" by default), cosine metric
- InMemoryGroupIndex: numpy cosine similarity, for tests and offline runs

query(vector, top_k) returns IndexMatch rows ranked by similarity.
upsert(records) is an offline operation (see seed_groups).
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, Optional

import numpy as np
from pinecone import Pinecone
from pinecone.exceptions import PineconeApiException, PineconeException

from fsc_classifier.config import Settings
from fsc_classifier.errors import ConfigurationError, TransportError

logger = logging.getLogger(__name__)

UPSERT_BATCH_SIZE = 100


@dataclass(frozen=True)
class IndexMatch:
    id: str
    score: float
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class IndexRecord:
    id: str
    values: list[float]
    metadata: dict[str, Any] = field(default_factory=dict)


class PineconeGroupIndex:
    def __init__(self, settings: Settings, index: Any = None) -> None:
        if index is None:
            if not settings.pinecone_api_key:
                raise ConfigurationError("PINECONE_API_KEY is not set; group retrieval is unavailable")
            pc = Pinecone(api_key=settings.pinecone_api_key)
            if settings.pinecone_host:
                index = pc.Index(host=settings.pinecone_host)
            else:
                index = pc.Index(settings.pinecone_index)
        self._index = index
        self.name = settings.pinecone_index

    def _query_sync(self, vector: list[float], top_k: int) -> list[IndexMatch]:
        try:
            results = self._index.query(vector=vector, top_k=top_k, include_metadata=True)
        except PineconeApiException as e:
            raise TransportError(
                f"Vector index query failed on {self.name}",
                status=getattr(e, "status", None),
                body=str(getattr(e, "body", "") or ""),
            ) from e
        except PineconeException as e:
            raise TransportError(f"Vector index query failed on {self.name}: {e}") from e

        return [
            IndexMatch(id=m.id, score=float(m.score or 0.0), metadata=dict(m.metadata or {}))
            for m in results.matches or []
        ]

    async def query(self, vector: list[float], top_k: int) -> list[IndexMatch]:
        # The Pinecone client is blocking
        return await asyncio.to_thread(self._query_sync, vector, top_k)

    def upsert(self, records: Iterable[IndexRecord]) -> int:
        vectors = [{"id": r.id, "values": r.values, "metadata": r.metadata} for r in records]
        for start in range(0, len(vectors), UPSERT_BATCH_SIZE):
            batch = vectors[start : start + UPSERT_BATCH_SIZE]
            try:
                self._index.upsert(vectors=batch)
            except PineconeException as e:
                raise TransportError(f"Vector index upsert failed on {self.name}: {e}") from e
            logger.info(f"Upserted {len(batch)} vectors into {self.name}")
        return len(vectors)


class InMemoryGroupIndex:
    """Cosine-similarity index held in a numpy matrix."""

    def __init__(self, records: Optional[Iterable[IndexRecord]] = None) -> None:
        self._ids: list[str] = []
        self._metadata: list[dict[str, Any]] = []
        self._matrix = np.zeros((0, 0), dtype=np.float32)
        if records is not None:
            self.upsert(records)

    def __len__(self) -> int:
        return len(self._ids)

    def upsert(self, records: Iterable[IndexRecord]) -> int:
        rows = {rid: (vec, meta) for rid, vec, meta in zip(self._ids, self._matrix, self._metadata)}
        count = 0
        for r in records:
            rows[r.id] = (np.asarray(r.values, dtype=np.float32), dict(r.metadata))
            count += 1

        self._ids = list(rows)
        self._metadata = [meta for _, meta in rows.values()]
        if rows:
            matrix = np.vstack([vec for vec, _ in rows.values()])
            norms = np.linalg.norm(matrix, axis=1, keepdims=True)
            norms[norms == 0] = 1.0
            self._matrix = matrix / norms
        else:
            self._matrix = np.zeros((0, 0), dtype=np.float32)
        return count

    async def query(self, vector: list[float], top_k: int) -> list[IndexMatch]:
        if not self._ids or top_k <= 0:
            return []

        query = np.asarray(vector, dtype=np.float32)
        norm = np.linalg.norm(query)
        if norm == 0:
            return []
        similarities = self._matrix @ (query / norm)

        # Stable so equal scores keep insertion order
        order = np.argsort(-similarities, kind="stable")[:top_k]
        return [
            IndexMatch(id=self._ids[i], score=float(similarities[i]), metadata=self._metadata[i])
            for i in order
        ]

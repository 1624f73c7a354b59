"""
Group retrieval: narrow the FSC taxonomy to the groups closest to a company summary.

The summary is embedded and compared against the pre-seeded group vectors.
Only the top-k groups (and their classes) are shown to the selection model.
"""

from __future__ import annotations

import logging
from typing import Optional, Protocol

from fsc_classifier.index.vector_index import IndexMatch
from fsc_classifier.schemas.contracts import GroupMatch
from fsc_classifier.taxonomy.fsc import TaxonomyStore

logger = logging.getLogger(__name__)


class Embedder(Protocol):
    async def embed(self, text: str) -> list[float]: ...


class GroupIndex(Protocol):
    async def query(self, vector: list[float], top_k: int) -> list[IndexMatch]: ...


class GroupRetriever:
    def __init__(
        self,
        embedder: Embedder,
        index: GroupIndex,
        taxonomy: Optional[TaxonomyStore] = None,
    ) -> None:
        self._embedder = embedder
        self._index = index
        self._taxonomy = taxonomy

    async def top_groups(self, query_text: str, k: int = 10) -> list[GroupMatch]:
        vector = await self._embedder.embed(query_text)
        matches = await self._index.query(vector, k)

        groups: list[GroupMatch] = []
        for m in matches:
            name = str(m.metadata.get("name") or "")
            if not name and self._taxonomy is not None:
                group = self._taxonomy.group_by_prefix(m.id)
                name = group.name if group else ""
            groups.append(GroupMatch(prefix=m.id, score=m.score, name=name))

        if groups:
            logger.info("Retrieved groups: " + ", ".join(f"{g.prefix} ({g.score:.3f})" for g in groups))
        else:
            logger.warning("Group retrieval returned no groups")
        return groups

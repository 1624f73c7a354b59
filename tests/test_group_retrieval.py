"""Tests for the group vector indexes and the group retriever."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from pinecone.exceptions import PineconeException

from fsc_classifier.config import Settings
from fsc_classifier.errors import ConfigurationError, TransportError
from fsc_classifier.index.vector_index import (
    IndexMatch,
    IndexRecord,
    InMemoryGroupIndex,
    PineconeGroupIndex,
)
from fsc_classifier.inference.group_retrieval import GroupRetriever
from fsc_classifier.taxonomy.fsc import TaxonomyStore


@pytest.fixture
def memory_index() -> InMemoryGroupIndex:
    return InMemoryGroupIndex([
        IndexRecord(id="56", values=[1.0, 0.0, 0.0], metadata={"name": "Construction Materials"}),
        IndexRecord(id="81", values=[0.6, 0.8, 0.0], metadata={"name": "Containers & Packaging"}),
        IndexRecord(id="62", values=[0.0, 0.0, 2.0], metadata={}),
    ])


class TestInMemoryGroupIndex:
    async def test_ranked_by_cosine(self, memory_index: InMemoryGroupIndex) -> None:
        matches = await memory_index.query([2.0, 0.0, 0.0], top_k=3)

        assert [m.id for m in matches] == ["56", "81", "62"]
        assert matches[0].score == pytest.approx(1.0)
        assert matches[1].score == pytest.approx(0.6)
        assert matches[2].score == pytest.approx(0.0)

    async def test_top_k(self, memory_index: InMemoryGroupIndex) -> None:
        matches = await memory_index.query([0.0, 1.0, 0.0], top_k=1)

        assert [m.id for m in matches] == ["81"]

    async def test_empty_index(self) -> None:
        assert await InMemoryGroupIndex().query([1.0, 0.0], top_k=10) == []

    async def test_upsert_replaces_by_id(self, memory_index: InMemoryGroupIndex) -> None:
        memory_index.upsert([IndexRecord(id="62", values=[1.0, 0.0, 0.0], metadata={"name": "Lighting"})])

        matches = await memory_index.query([1.0, 0.0, 0.0], top_k=2)

        assert len(memory_index) == 3
        assert {m.id for m in matches} == {"56", "62"}


class TestPineconeGroupIndex:
    def test_requires_api_key(self, settings: Settings) -> None:
        with pytest.raises(ConfigurationError, match="PINECONE_API_KEY"):
            PineconeGroupIndex(settings)

    async def test_query_maps_matches(self, settings: Settings) -> None:
        index = MagicMock()
        index.query.return_value = SimpleNamespace(matches=[
            SimpleNamespace(id="59", score=0.71, metadata={"name": "Electrical & Electronic Components"}),
            SimpleNamespace(id="61", score=None, metadata=None),
        ])

        matches = await PineconeGroupIndex(settings, index=index).query([0.1, 0.2], top_k=2)

        index.query.assert_called_once_with(vector=[0.1, 0.2], top_k=2, include_metadata=True)
        assert matches == [
            IndexMatch(id="59", score=0.71, metadata={"name": "Electrical & Electronic Components"}),
            IndexMatch(id="61", score=0.0, metadata={}),
        ]

    async def test_client_error_is_transport_error(self, settings: Settings) -> None:
        index = MagicMock()
        index.query.side_effect = PineconeException("Service Unavailable")

        with pytest.raises(TransportError):
            await PineconeGroupIndex(settings, index=index).query([0.1], top_k=1)

    def test_upsert_batches(self, settings: Settings) -> None:
        index = MagicMock()
        records = [IndexRecord(id=str(i), values=[0.0]) for i in range(250)]

        count = PineconeGroupIndex(settings, index=index).upsert(records)

        assert count == 250
        assert index.upsert.call_count == 3


class TestGroupRetriever:
    async def test_top_groups(self, memory_index: InMemoryGroupIndex, taxonomy: TaxonomyStore) -> None:
        embedder = MagicMock()
        embedder.embed = AsyncMock(return_value=[1.0, 0.1, 0.9])
        retriever = GroupRetriever(embedder, memory_index, taxonomy)

        groups = await retriever.top_groups("We make light bulbs and concrete", k=2)

        embedder.embed.assert_awaited_once_with("We make light bulbs and concrete")
        assert [g.prefix for g in groups] == ["56", "62"]
        assert groups[0].name == "Construction Materials"
        assert all(-1.0 <= g.score <= 1.0 for g in groups)

    async def test_name_falls_back_to_taxonomy(self, memory_index: InMemoryGroupIndex, taxonomy: TaxonomyStore) -> None:
        embedder = MagicMock()
        embedder.embed = AsyncMock(return_value=[0.0, 0.0, 1.0])
        retriever = GroupRetriever(embedder, memory_index, taxonomy)

        groups = await retriever.top_groups("lamps", k=1)

        assert groups[0].prefix == "62"
        assert groups[0].name == "Lighting Equipment"

    async def test_empty_index_returns_no_groups(self) -> None:
        embedder = MagicMock()
        embedder.embed = AsyncMock(return_value=[1.0, 0.0])
        retriever = GroupRetriever(embedder, InMemoryGroupIndex())

        assert await retriever.top_groups("anything", k=10) == []

"""Test fixtures for the FSC classifier."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

from fsc_classifier.config import Settings
from fsc_classifier.inference.keyword_match import KeywordMatcher
from fsc_classifier.pipeline.cache import ResultCache
from fsc_classifier.schemas.contracts import Category, Group
from fsc_classifier.taxonomy.fsc import TaxonomyStore


@pytest.fixture
def categories() -> list[Category]:
    return [
        Category(code="5305", title="Screws", keywords=("screw", "machine screw")),
        Category(code="5610", title="Adhesives", keywords=("adhesive", "glue", "sealant")),
        Category(code="5620", title="Tile, Brick and Block", keywords=("brick", "tile", "masonry")),
        Category(code="6240", title="Electric Lamps", keywords=("light bulb", "lamp")),
        Category(code="8115", title="Boxes, Cartons, and Crates", keywords=("box", "carton", "crate")),
        Category(code="8125", title="Bottles and Jars", keywords=("bottle", "jar")),
    ]


@pytest.fixture
def groups() -> list[Group]:
    return [
        Group(prefix="53", name="Hardware & Abrasives", keywords=("fasteners",)),
        Group(prefix="56", name="Construction Materials", keywords=("building materials",)),
        Group(prefix="62", name="Lighting Equipment", keywords=("lighting",)),
        Group(prefix="81", name="Containers & Packaging", keywords=("packaging",)),
    ]


@pytest.fixture
def taxonomy(categories: list[Category], groups: list[Group]) -> TaxonomyStore:
    return TaxonomyStore(categories, groups)


@pytest.fixture
def matcher(taxonomy: TaxonomyStore) -> KeywordMatcher:
    return KeywordMatcher(taxonomy)


@pytest.fixture
def settings() -> Settings:
    """Settings with no provider credentials."""
    return Settings(
        anthropic_api_key=None,
        openai_api_key=None,
        pinecone_api_key=None,
        pipeline_mode="auto",
        keywords_path=None,
    )


@pytest.fixture
def cache() -> ResultCache:
    return ResultCache(ttl_seconds=3600.0, max_entries=16)


@pytest.fixture
def mock_anthropic() -> MagicMock:
    """AsyncAnthropic stand-in; set messages.create.return_value per test."""
    client = MagicMock()
    client.messages.create = AsyncMock()
    client.beta.files.upload = AsyncMock()
    return client


def text_block(text: str) -> SimpleNamespace:
    return SimpleNamespace(type="text", text=text)


def message(*blocks: SimpleNamespace) -> SimpleNamespace:
    return SimpleNamespace(content=list(blocks))

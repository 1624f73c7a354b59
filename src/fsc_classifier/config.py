"""Runtime settings, read from environment variables.

Every knob has a default so the lexical pipeline works with no configuration at
all. The retrieval pipeline needs ANTHROPIC_API_KEY, OPENAI_API_KEY and
PINECONE_API_KEY.
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Optional

from fsc_classifier.errors import ConfigurationError


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw in (None, ""):
        return default
    try:
        return float(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from e


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw in (None, ""):
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from e


@dataclass(frozen=True)
class Settings:
    # Generative model (research + selection)
    anthropic_api_key: Optional[str] = field(default_factory=lambda: os.getenv("ANTHROPIC_API_KEY"))
    model: str = field(default_factory=lambda: os.getenv("ANTHROPIC_MODEL", "claude-sonnet-4-5-20250929"))
    research_max_tokens: int = 2048
    selection_max_tokens: int = 4096
    web_search_max_uses: int = 5

    # Embeddings
    openai_api_key: Optional[str] = field(default_factory=lambda: os.getenv("OPENAI_API_KEY"))
    embedding_model: str = field(
        default_factory=lambda: os.getenv("FSC_EMBEDDING_MODEL", "text-embedding-3-small")
    )
    embedding_dimensions: int = field(default_factory=lambda: _env_int("FSC_EMBEDDING_DIMENSIONS", 1024))
    embedding_max_chars: int = 32_000

    # Vector index
    pinecone_api_key: Optional[str] = field(default_factory=lambda: os.getenv("PINECONE_API_KEY"))
    pinecone_index: str = field(default_factory=lambda: os.getenv("FSC_PINECONE_INDEX", "codes"))
    pinecone_host: Optional[str] = field(default_factory=lambda: os.getenv("FSC_PINECONE_HOST"))

    # Narrowing + confidence
    top_k_groups: int = field(default_factory=lambda: _env_int("FSC_TOP_K_GROUPS", 10))
    high_threshold: float = field(default_factory=lambda: _env_float("FSC_HIGH_THRESHOLD", 0.5))
    medium_threshold: float = field(default_factory=lambda: _env_float("FSC_MEDIUM_THRESHOLD", 0.3))
    min_picks: int = 5
    max_picks: int = 15

    # Result cache
    cache_ttl_seconds: float = field(default_factory=lambda: _env_float("FSC_CACHE_TTL_SECONDS", 3600.0))
    cache_max_entries: int = field(default_factory=lambda: _env_int("FSC_CACHE_MAX_ENTRIES", 1024))

    # "auto" picks retrieval when an Anthropic key is present, lexical otherwise
    pipeline_mode: str = field(default_factory=lambda: os.getenv("FSC_PIPELINE_MODE", "auto"))
    keywords_path: Optional[str] = field(default_factory=lambda: os.getenv("FSC_KEYWORDS_PATH"))

    # Page scraping
    scrape_timeout_seconds: float = 15.0
    scrape_max_chars: int = 20_000

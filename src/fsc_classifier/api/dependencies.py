"""FastAPI dependencies: API key check and process-wide pipeline objects.

Pipeline objects are built lazily on first use and shared by every request,
so the result cache lives as long as the process. Tests replace them through
app.dependency_overrides.
"""
from __future__ import annotations

import os
from functools import lru_cache, partial
from typing import Awaitable, Callable, Optional

from anthropic import AsyncAnthropic
from fastapi import Header, HTTPException

from fsc_classifier.ai.anthropic_client import build_async_client
from fsc_classifier.ai.scrape import scrape_page_text
from fsc_classifier.config import Settings
from fsc_classifier.inference.keyword_match import KeywordMatcher
from fsc_classifier.pipeline.orchestrator import ClassificationOrchestrator, build_orchestrator
from fsc_classifier.taxonomy.fsc import TaxonomyStore, load_taxonomy

PageFetcher = Callable[[str], Awaitable[str]]


async def verify_api_key(x_api_key: Optional[str] = Header(None)) -> None:
    """Verify API key from header against environment variable.

    If PLATFORM_API_KEY is not set, all requests are allowed (dev mode).
    """
    expected_key = os.environ.get("PLATFORM_API_KEY")
    if expected_key is None:
        # Dev mode - no auth required
        return
    if x_api_key != expected_key:
        raise HTTPException(status_code=401, detail="Invalid or missing API key")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


@lru_cache(maxsize=1)
def get_taxonomy() -> TaxonomyStore:
    return load_taxonomy(get_settings().keywords_path)


@lru_cache(maxsize=1)
def get_keyword_matcher() -> KeywordMatcher:
    return KeywordMatcher(get_taxonomy())


@lru_cache(maxsize=1)
def get_orchestrator() -> ClassificationOrchestrator:
    return build_orchestrator(get_settings(), taxonomy=get_taxonomy())


@lru_cache(maxsize=1)
def get_anthropic_client() -> AsyncAnthropic:
    return build_async_client(get_settings())


def get_page_fetcher() -> PageFetcher:
    return partial(scrape_page_text, timeout=get_settings().scrape_timeout_seconds)

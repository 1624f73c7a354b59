"""
Company -> FSC codes classification pipeline.

Retrieval pipeline (generative model configured):
  1. cache check on the request fingerprint
  2. research: company description from web presence + attachments
  3. narrowing: embed description, retrieve top-k FSC groups
  4. selection: model picks codes from the narrowed candidates
  5. assembly: confidence from group similarity, sort, cache

Lexical pipeline (no generative model): research text goes straight through
the keyword matcher and stages 3-4 are skipped.

Errors from any stage abort the request. Codes the selection model returns
outside the candidate set are dropped; nothing else is swallowed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import partial
from typing import Optional, Protocol

from fsc_classifier.ai.anthropic_client import build_async_client
from fsc_classifier.ai.embeddings import OpenAIEmbedder
from fsc_classifier.ai.research import AnthropicResearcher, ScrapeResearcher
from fsc_classifier.ai.scrape import normalize_url, scrape_page_text
from fsc_classifier.ai.select_codes import AnthropicSelector, SelectionPick
from fsc_classifier.config import Settings
from fsc_classifier.errors import ConfigurationError, InputValidationError
from fsc_classifier.index.vector_index import PineconeGroupIndex
from fsc_classifier.inference.confidence import ConfidenceDeriver
from fsc_classifier.inference.group_retrieval import GroupRetriever
from fsc_classifier.inference.keyword_match import (
    KeywordMatcher,
    confidence_for_keyword_score,
    keyword_reason,
)
from fsc_classifier.pipeline.cache import ResultCache, fingerprint
from fsc_classifier.schemas.contracts import (
    CONFIDENCE_RANK,
    Category,
    CategoryMatch,
    ClassificationRequest,
    ClassificationResult,
    GroupMatch,
)
from fsc_classifier.taxonomy.fsc import TaxonomyStore, load_taxonomy

logger = logging.getLogger(__name__)


class Researcher(Protocol):
    async def research(self, request: ClassificationRequest) -> str: ...


class Selector(Protocol):
    async def select(self, description: str, candidates: list[Category]) -> list[SelectionPick]: ...


@dataclass(frozen=True)
class _RankedMatch:
    rank: int
    group_score: float
    order: int
    match: CategoryMatch

    @property
    def sort_key(self) -> tuple[int, float, int]:
        return (self.rank, -self.group_score, self.order)


def validate_request(request: ClassificationRequest) -> None:
    if not request.company_name or not request.company_name.strip():
        raise InputValidationError("Company name is required.")
    if request.website_url:
        normalize_url(request.website_url)
    if request.email_domain and request.email_domain.lstrip("@").strip():
        normalize_url(request.email_domain.lstrip("@"))


class ClassificationOrchestrator:
    def __init__(
        self,
        taxonomy: TaxonomyStore,
        researcher: Researcher,
        cache: ResultCache,
        retriever: Optional[GroupRetriever] = None,
        selector: Optional[Selector] = None,
        confidence: Optional[ConfidenceDeriver] = None,
        keyword_matcher: Optional[KeywordMatcher] = None,
        top_k: int = 10,
        lexical_max_results: int = 20,
        max_picks: int = 15,
    ) -> None:
        if (retriever is None) != (selector is None):
            raise ConfigurationError("Retrieval pipeline needs both a group retriever and a selector")
        self.taxonomy = taxonomy
        self.cache = cache
        self._researcher = researcher
        self._retriever = retriever
        self._selector = selector
        self._confidence = confidence or ConfidenceDeriver()
        self._matcher = keyword_matcher or KeywordMatcher(taxonomy)
        self.top_k = top_k
        self.lexical_max_results = lexical_max_results
        self.max_picks = max_picks

    @property
    def mode(self) -> str:
        return "retrieval" if self._selector is not None else "lexical"

    async def classify(self, request: ClassificationRequest) -> ClassificationResult:
        validate_request(request)

        key = fingerprint(request)
        cached = self.cache.get(key)
        if cached is not None:
            logger.info(f"Cache hit for {request.company_name}")
            return cached

        if self._selector is None:
            result = await self._classify_lexical(request)
        else:
            result = await self._classify_retrieval(request)

        self.cache.put(key, result)
        return result

    # ----------------------------
    # Retrieval pipeline
    # ----------------------------
    async def _classify_retrieval(self, request: ClassificationRequest) -> ClassificationResult:
        description = await self._researcher.research(request)

        groups = await self._retriever.top_groups(description, self.top_k)
        group_scores = {g.prefix: g.score for g in groups}
        candidates = self.candidates_for(groups)

        picks = await self._selector.select(description, candidates)
        matches = self.assemble(picks, candidates, group_scores)

        logger.info(
            f"Classified {request.company_name}: {len(matches)} codes "
            f"({len(picks)} picked, {len(candidates)} candidates, {len(groups)} groups)"
        )
        return ClassificationResult(company_description=description, matches=tuple(matches))

    def candidates_for(self, groups: list[GroupMatch]) -> list[Category]:
        """Classes in the retrieved groups; the full taxonomy when nothing was retrieved."""
        candidates = self.taxonomy.categories_in_groups(g.prefix for g in groups)
        if not candidates:
            logger.warning("Empty candidate set after narrowing; falling back to the full taxonomy")
            return self.taxonomy.all_categories()
        return candidates

    def assemble(
        self,
        picks: list[SelectionPick],
        candidates: list[Category],
        group_scores: dict[str, float],
    ) -> list[CategoryMatch]:
        allowed = {c.code: c for c in candidates}
        seen: set[str] = set()
        ranked: list[_RankedMatch] = []

        for order, pick in enumerate(picks):
            code = pick.code.strip()
            category = allowed.get(code)
            if category is None:
                logger.debug(f"Dropping code outside the candidate set: {code}")
                continue
            if code in seen:
                continue
            if len(seen) >= self.max_picks:
                logger.debug(f"Dropping picks beyond the first {self.max_picks}")
                break
            seen.add(code)

            tier, score = self._confidence.for_category(category, group_scores)
            ranked.append(
                _RankedMatch(
                    rank=CONFIDENCE_RANK[tier],
                    group_score=score,
                    order=order,
                    match=CategoryMatch(
                        code=category.code,
                        title=category.title,
                        reason=pick.reason.strip(),
                        confidence=tier,
                    ),
                )
            )

        ranked.sort(key=lambda r: r.sort_key)
        return [r.match for r in ranked]

    # ----------------------------
    # Lexical pipeline
    # ----------------------------
    async def _classify_lexical(self, request: ClassificationRequest) -> ClassificationResult:
        text = await self._researcher.research(request)
        keyword_matches = self._matcher.score(text, max_results=self.lexical_max_results)

        matches = [
            CategoryMatch(
                code=m.code,
                title=m.title,
                reason=keyword_reason(m),
                confidence=confidence_for_keyword_score(m.score),
            )
            for m in keyword_matches
        ]
        # Stable: keeps the matcher's score order inside each tier
        matches.sort(key=lambda m: CONFIDENCE_RANK[m.confidence])

        logger.info(f"Classified {request.company_name} lexically: {len(matches)} codes")
        return ClassificationResult(company_description=text, matches=tuple(matches))


def resolve_mode(settings: Settings) -> str:
    mode = (settings.pipeline_mode or "auto").strip().lower()
    if mode == "auto":
        return "retrieval" if settings.anthropic_api_key else "lexical"
    if mode not in ("retrieval", "lexical"):
        raise ConfigurationError(f"Unknown FSC_PIPELINE_MODE: {settings.pipeline_mode}")
    return mode


def build_orchestrator(
    settings: Settings,
    taxonomy: Optional[TaxonomyStore] = None,
    cache: Optional[ResultCache] = None,
    mode: Optional[str] = None,
) -> ClassificationOrchestrator:
    """Wire the pipeline from settings. Raises ConfigurationError when a required key is missing."""
    taxonomy = taxonomy or load_taxonomy(settings.keywords_path)
    cache = cache or ResultCache(settings.cache_ttl_seconds, settings.cache_max_entries)
    confidence = ConfidenceDeriver(settings.high_threshold, settings.medium_threshold)
    mode = mode or resolve_mode(settings)

    if mode == "lexical":
        logger.info("Using lexical FSC pipeline")
        return ClassificationOrchestrator(
            taxonomy=taxonomy,
            researcher=ScrapeResearcher(settings),
            cache=cache,
            confidence=confidence,
        )

    client = build_async_client(settings)
    retriever = GroupRetriever(OpenAIEmbedder(settings), PineconeGroupIndex(settings), taxonomy)
    fetch_page = partial(scrape_page_text, timeout=settings.scrape_timeout_seconds)

    logger.info(f"Using retrieval FSC pipeline (model={settings.model}, top_k={settings.top_k_groups})")
    return ClassificationOrchestrator(
        taxonomy=taxonomy,
        researcher=AnthropicResearcher(client, settings, fetch_page=fetch_page),
        cache=cache,
        retriever=retriever,
        selector=AnthropicSelector(client, settings),
        confidence=confidence,
        top_k=settings.top_k_groups,
        max_picks=settings.max_picks,
    )

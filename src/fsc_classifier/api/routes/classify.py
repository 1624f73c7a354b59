"""Classification endpoints: full pipeline (/analyze) and lexical scrape-and-match (/scrape)."""
from __future__ import annotations

import logging
from typing import Literal, Optional

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel, Field

from fsc_classifier.api.dependencies import (
    PageFetcher,
    get_keyword_matcher,
    get_orchestrator,
    get_page_fetcher,
    verify_api_key,
)
from fsc_classifier.errors import InputValidationError
from fsc_classifier.inference.keyword_match import (
    KeywordMatcher,
    confidence_for_keyword_score,
    keyword_reason,
)
from fsc_classifier.pipeline.orchestrator import ClassificationOrchestrator
from fsc_classifier.schemas.contracts import ClassificationRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["classify"])

SCRAPE_MAX_RESULTS = 25


# ----------------------------------------------------------------------------
# Request/Response Models
# ----------------------------------------------------------------------------

class CompanyIn(BaseModel):
    name: str = ""
    websiteUrl: Optional[str] = None
    emailDomain: Optional[str] = None


class AnalyzeRequest(BaseModel):
    company: CompanyIn
    fileIds: list[str] = Field(default_factory=list)


class FscCodeOut(BaseModel):
    code: str
    title: str
    reason: str
    confidence: Literal["high", "medium", "low"]


class AnalyzeResponse(BaseModel):
    companyDescription: str
    fscCodes: list[FscCodeOut]


class ScrapeRequest(BaseModel):
    url: Optional[str] = None


class ScrapeMatchOut(FscCodeOut):
    score: int


class ScrapeResponse(BaseModel):
    text: str
    matches: list[ScrapeMatchOut]


# ----------------------------------------------------------------------------
# Endpoints
# ----------------------------------------------------------------------------

@router.post("/analyze", response_model=AnalyzeResponse)
async def analyze(
    body: AnalyzeRequest,
    _: None = Depends(verify_api_key),
    orchestrator: ClassificationOrchestrator = Depends(get_orchestrator),
) -> dict:
    """Classify a company into FSC codes.

    Errors are mapped by the app-level handler: bad input 400, missing
    configuration 500, upstream failures 502.
    """
    request = ClassificationRequest(
        company_name=body.company.name,
        website_url=body.company.websiteUrl or None,
        email_domain=body.company.emailDomain or None,
        attachment_refs=tuple(body.fileIds),
    )
    result = await orchestrator.classify(request)
    return {
        "companyDescription": result.company_description,
        "fscCodes": [m.model_dump() for m in result.matches],
    }


@router.post("/scrape", response_model=ScrapeResponse)
async def scrape(
    body: Optional[ScrapeRequest] = None,
    url: Optional[str] = Query(None),
    matcher: KeywordMatcher = Depends(get_keyword_matcher),
    fetch_page: PageFetcher = Depends(get_page_fetcher),
    _: None = Depends(verify_api_key),
) -> dict:
    """Scrape a page and match its text against FSC keywords (no LLM)."""
    target = (body.url if body is not None else None) or url
    if not target:
        raise InputValidationError("Missing url in body or query")

    text = await fetch_page(target)
    matches = matcher.score(text, min_score=1, max_results=SCRAPE_MAX_RESULTS)
    return {
        "text": text,
        "matches": [
            {
                "code": m.code,
                "title": m.title,
                "score": m.score,
                "reason": keyword_reason(m),
                "confidence": confidence_for_keyword_score(m.score),
            }
            for m in matches
        ],
    }

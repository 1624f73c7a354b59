"""
Company research: produce a short description of what a company makes or sells.

AnthropicResearcher lets Claude browse the web (server-side web_search tool),
read any attached documents (Files API ids), and a pre-fetched copy of the
company's home page. The answer must be a JSON object with a
"company_description" field.

ScrapeResearcher is the no-LLM variant used by the lexical pipeline: the
"description" is the raw visible text of the company website.
"""

from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable, Optional

from anthropic import AsyncAnthropic
from pydantic import BaseModel, Field, ValidationError

from fsc_classifier.ai.anthropic_client import FILES_API_BETA, create_message
from fsc_classifier.ai.scrape import scrape_page_text
from fsc_classifier.config import Settings
from fsc_classifier.errors import SchemaError, TransportError
from fsc_classifier.schemas.contracts import ClassificationRequest

logger = logging.getLogger(__name__)

PageFetcher = Callable[[str], Awaitable[str]]

TOOL_RESULT_BLOCK_TYPES = {"web_search_tool_result", "server_tool_use"}


# ----------------------------
# Schema for structured output
# ----------------------------
class ResearchOut(BaseModel):
    company_description: str = Field(
        ...,
        min_length=1,
        description="2-4 sentences on what the company manufactures, sells, or provides",
    )


SYSTEM_PROMPT = """You are a federal procurement research analyst. Your task is to find out what a company manufactures, sells, or provides, so that its offerings can later be matched to Federal Supply Classification (FSC) codes.

INSTRUCTIONS:
1. Use web_search to look at the company's website: product pages, services, about pages, and capability statements.
2. If documents are attached, read them for product catalogs, capability statements, or other relevant detail.
3. Focus on concrete products, materials, equipment, and services. Ignore marketing language.
4. If you cannot find anything about the company, say what little is known and keep the description short.

Return ONLY a JSON object of the form:
{"company_description": "<2-4 sentences describing the company's products and services>"}"""


def _company_lines(request: ClassificationRequest) -> str:
    lines = [f"Company Name: {request.company_name}"]
    if request.email_domain:
        lines.append(f"Email Domain: {request.email_domain}")
    if request.website_url:
        lines.append(f"Website: {request.website_url}")
    return "\n".join(lines)


def _website_for(request: ClassificationRequest) -> Optional[str]:
    """Site to fetch: the website, else the email domain without a leading "@"."""
    if request.website_url:
        return request.website_url
    if request.email_domain:
        return request.email_domain.lstrip("@").strip() or None
    return None


def _build_user_content(
    request: ClassificationRequest,
    page_text: Optional[str],
) -> list[dict[str, Any]]:
    text = f"Research this company:\n\n{_company_lines(request)}"
    if request.website_url:
        text += f"\n\nPlease browse their website at {request.website_url} to understand their products and services."
    if page_text:
        text += f"\n\n## Home page text\n{page_text}"

    content: list[dict[str, Any]] = [{"type": "text", "text": text}]
    for file_id in request.attachment_refs:
        content.append({"type": "document", "source": {"type": "file", "file_id": file_id}})
    return content


def _final_text(response: Any) -> str:
    """Concatenate the text blocks after the last tool call/result."""
    blocks = list(response.content or [])
    last_tool = -1
    for i, block in enumerate(blocks):
        if getattr(block, "type", None) in TOOL_RESULT_BLOCK_TYPES:
            last_tool = i
    return "".join(
        block.text for block in blocks[last_tool + 1 :] if getattr(block, "type", None) == "text"
    ).strip()


def parse_research_output(raw: str) -> str:
    if not raw:
        raise SchemaError("Research model returned no text")

    # Tolerate prose or code fences around the JSON object
    start, end = raw.find("{"), raw.rfind("}")
    if start == -1 or end <= start:
        raise SchemaError(f"Research output is not a JSON object: {raw[:200]}")
    try:
        parsed = ResearchOut.model_validate_json(raw[start : end + 1])
    except ValidationError as e:
        raise SchemaError(f"Research output failed validation: {str(e)[:200]}") from e

    description = parsed.company_description.strip()
    if not description:
        raise SchemaError("Research model returned an empty company description")
    return description


class AnthropicResearcher:
    def __init__(
        self,
        client: AsyncAnthropic,
        settings: Settings,
        fetch_page: Optional[PageFetcher] = None,
    ) -> None:
        self._client = client
        self._settings = settings
        self._fetch_page = fetch_page

    async def _page_text(self, request: ClassificationRequest) -> Optional[str]:
        site = _website_for(request)
        if site is None or self._fetch_page is None:
            return None
        try:
            text = await self._fetch_page(site)
        except TransportError as e:
            # The model can still browse on its own
            logger.warning(f"Could not pre-fetch {site}: {e}")
            return None
        return text[: self._settings.scrape_max_chars]

    async def research(self, request: ClassificationRequest) -> str:
        page_text = await self._page_text(request)

        kwargs: dict[str, Any] = dict(
            model=self._settings.model,
            max_tokens=self._settings.research_max_tokens,
            system=SYSTEM_PROMPT,
            messages=[{"role": "user", "content": _build_user_content(request, page_text)}],
            tools=[
                {
                    "type": "web_search_20250305",
                    "name": "web_search",
                    "max_uses": self._settings.web_search_max_uses,
                }
            ],
        )
        if request.attachment_refs:
            kwargs["extra_headers"] = {"anthropic-beta": FILES_API_BETA}

        response = await create_message(self._client, **kwargs)
        description = parse_research_output(_final_text(response))
        logger.info(f"Researched {request.company_name}: {len(description)} characters")
        return description


class ScrapeResearcher:
    """Company text for the lexical pipeline: name plus scraped website text."""

    def __init__(self, settings: Settings, fetch_page: Optional[PageFetcher] = None) -> None:
        self._settings = settings
        self._fetch_page = fetch_page or (
            lambda url: scrape_page_text(url, timeout=settings.scrape_timeout_seconds)
        )

    async def research(self, request: ClassificationRequest) -> str:
        site = _website_for(request)
        if site is None:
            return request.company_name
        text = await self._fetch_page(site)
        return f"{request.company_name}\n{text[: self._settings.scrape_max_chars]}"

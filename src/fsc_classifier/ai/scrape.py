"""
Fetch a company web page and reduce it to visible text.

Used by the lexical pipeline, the /scrape endpoint, and as extra context
for LLM research.
"""

from __future__ import annotations

import logging
import warnings
from typing import Optional

import httpx
from bs4 import BeautifulSoup

from fsc_classifier.errors import InputValidationError, TransportError

logger = logging.getLogger(__name__)

warnings.filterwarnings("ignore", category=UserWarning, module="bs4")

USER_AGENT = "Mozilla/5.0 (compatible; fsc-classifier/0.1)"
STRIPPED_TAGS = ["script", "style", "noscript"]


def normalize_url(url: str) -> str:
    """Prefix bare domains with https:// and reject other schemes."""
    url = url.strip()
    if not url:
        raise InputValidationError("URL is empty")
    if "://" not in url:
        url = f"https://{url}"
    scheme = url.split("://", 1)[0].lower()
    if scheme not in ("http", "https"):
        raise InputValidationError(f"Unsupported URL scheme: {scheme}")
    return url


def html_to_text(html: str) -> str:
    soup = BeautifulSoup(html, "lxml")
    for tag in soup(STRIPPED_TAGS):
        tag.decompose()
    body = soup.body or soup
    return " ".join(body.get_text(separator=" ").split())


async def scrape_page_text(
    url: str,
    timeout: float = 15.0,
    client: Optional[httpx.AsyncClient] = None,
) -> str:
    url = normalize_url(url)
    owns_client = client is None
    if client is None:
        client = httpx.AsyncClient(
            timeout=timeout,
            follow_redirects=True,
            headers={"User-Agent": USER_AGENT},
        )

    try:
        response = await client.get(url)
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        raise TransportError(
            f"Fetching {url} failed",
            status=e.response.status_code,
            body=e.response.text,
        ) from e
    except httpx.RequestError as e:
        raise TransportError(f"Could not fetch {url}: {e}") from e
    finally:
        if owns_client:
            await client.aclose()

    text = html_to_text(response.text)
    logger.info(f"Scraped {len(text)} characters from {url}")
    return text

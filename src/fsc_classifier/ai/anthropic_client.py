"""Shared Anthropic client construction and error translation."""

from __future__ import annotations

from typing import Any

import anthropic
from anthropic import AsyncAnthropic

from fsc_classifier.config import Settings
from fsc_classifier.errors import ConfigurationError, TransportError

FILES_API_BETA = "files-api-2025-04-14"


def build_async_client(settings: Settings) -> AsyncAnthropic:
    if not settings.anthropic_api_key:
        raise ConfigurationError("ANTHROPIC_API_KEY is not set; the generative pipeline is unavailable")
    return AsyncAnthropic(api_key=settings.anthropic_api_key)


async def create_message(client: AsyncAnthropic, **kwargs: Any) -> Any:
    """client.messages.create with SDK errors mapped to TransportError."""
    try:
        return await client.messages.create(**kwargs)
    except anthropic.APIStatusError as e:
        raise TransportError(
            "Anthropic API error",
            status=e.status_code,
            body=e.response.text if e.response is not None else None,
        ) from e
    except anthropic.APIConnectionError as e:
        raise TransportError(f"Could not reach Anthropic API: {e}") from e

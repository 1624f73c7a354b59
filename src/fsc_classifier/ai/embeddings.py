"""
Text embeddings for group retrieval.

Uses OpenAI's embeddings endpoint. The same model and dimensionality must be
used for seeding the group index and for querying it.
"""

from __future__ import annotations

import logging
from typing import Optional

import openai
from openai import AsyncOpenAI

from fsc_classifier.config import Settings
from fsc_classifier.errors import ConfigurationError, SchemaError, TransportError

logger = logging.getLogger(__name__)


class OpenAIEmbedder:
    def __init__(
        self,
        settings: Settings,
        client: Optional[AsyncOpenAI] = None,
    ) -> None:
        if client is None:
            if not settings.openai_api_key:
                raise ConfigurationError("OPENAI_API_KEY is not set; embeddings are unavailable")
            client = AsyncOpenAI(api_key=settings.openai_api_key)
        self._client = client
        self.model = settings.embedding_model
        self.dimensions = settings.embedding_dimensions
        self.max_chars = settings.embedding_max_chars

    async def embed(self, text: str) -> list[float]:
        vectors = await self.embed_many([text])
        return vectors[0]

    async def embed_many(self, texts: list[str]) -> list[list[float]]:
        inputs = [t[: self.max_chars] for t in texts]
        try:
            response = await self._client.embeddings.create(
                model=self.model,
                input=inputs,
                dimensions=self.dimensions,
            )
        except openai.APIStatusError as e:
            raise TransportError("Embedding request failed", status=e.status_code, body=str(e.body)) from e
        except openai.APIConnectionError as e:
            raise TransportError(f"Could not reach embedding service: {e}") from e

        data = sorted(response.data, key=lambda d: d.index)
        if len(data) != len(inputs) or any(not d.embedding for d in data):
            raise SchemaError(f"Embedding service returned {len(data)} vectors for {len(inputs)} inputs")

        logger.debug(f"Embedded {len(inputs)} text(s) with {self.model}")
        return [list(d.embedding) for d in data]

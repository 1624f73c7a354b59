"""
Choose FSC codes for a company from a narrowed candidate list using Claude.

The model only sees the candidate classes (usually the classes of the top
retrieved groups). Its answer is untrusted: the orchestrator re-checks every
returned code against the candidate set.
"""

from __future__ import annotations

import json
import logging
from typing import Iterable

from anthropic import AsyncAnthropic, transform_schema
from pydantic import BaseModel, Field, ValidationError

from fsc_classifier.ai.anthropic_client import create_message
from fsc_classifier.config import Settings
from fsc_classifier.errors import SchemaError
from fsc_classifier.schemas.contracts import Category

logger = logging.getLogger(__name__)


# ----------------------------
# Schema for structured output
# ----------------------------
class SelectionPick(BaseModel):
    """Single FSC code chosen for the company."""

    code: str = Field(..., description="4-character FSC code from the candidate list")
    title: str = Field(..., description="Exact title from the candidate list")
    reason: str = Field(..., description="One sentence on why this code fits the company")


class SelectionOut(BaseModel):
    """Codes chosen for one company, most relevant first."""

    fsc_codes: list[SelectionPick] = Field(
        ...,
        description="FSC codes ranked by relevance",
    )


def _build_candidate_reference(candidates: Iterable[Category]) -> str:
    return "\n".join(f"{c.code} - {c.title}" for c in candidates)


def _build_prompt(description: str, candidate_reference: str, min_picks: int, max_picks: int) -> str:
    return f"""You are a federal procurement classification expert.

Federal Supply Classification (FSC) codes are 4-character codes the U.S. government uses to categorize every product it buys. If we know which FSC codes apply to a company, we can connect it to the solicitations that matter to it and filter away the noise.

## Company
{description}

## Candidate FSC Codes
{candidate_reference}

## Instructions

Choose the {min_picks}-{max_picks} FSC codes that best describe what the company manufactures, sells, or provides.
- Choose ONLY from the candidate list above. Do NOT invent codes.
- Rank codes from most to least relevant.
- Prefer specific product classes over "Miscellaneous" classes.
- If fewer than {min_picks} codes genuinely apply, return only those.

Return a JSON object with an "fsc_codes" array. Each entry must include:
- code: The 4-character FSC code
- title: The exact title from the candidate list
- reason: One sentence explaining the match"""


def parse_selection_output(raw: str) -> list[SelectionPick]:
    if not raw or not raw.strip():
        raise SchemaError("Selection model returned no text")
    try:
        parsed = SelectionOut.model_validate_json(raw)
    except ValidationError as e:
        raise SchemaError(f"Selection output failed validation: {str(e)[:200]}") from e
    return parsed.fsc_codes


class AnthropicSelector:
    def __init__(self, client: AsyncAnthropic, settings: Settings) -> None:
        self._client = client
        self._settings = settings

    async def select(self, description: str, candidates: list[Category]) -> list[SelectionPick]:
        prompt = _build_prompt(
            description,
            _build_candidate_reference(candidates),
            self._settings.min_picks,
            self._settings.max_picks,
        )

        response = await create_message(
            self._client,
            model=self._settings.model,
            max_tokens=self._settings.selection_max_tokens,
            messages=[{"role": "user", "content": prompt}],
            output_config={
                "format": {
                    "type": "json_schema",
                    "schema": transform_schema(SelectionOut),
                }
            },
        )

        if not response.content:
            raise SchemaError("Selection model returned an empty response")
        picks = parse_selection_output(response.content[0].text)
        logger.info(f"Selection returned {len(picks)} codes from {len(candidates)} candidates")
        logger.debug(json.dumps([p.model_dump() for p in picks], ensure_ascii=False))
        return picks

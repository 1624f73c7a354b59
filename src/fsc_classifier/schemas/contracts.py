"""Pydantic models shared across the classification pipeline.

All models are frozen: taxonomy records are loaded once, and results are
cached and handed out to several callers.
"""
from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

Confidence = Literal["high", "medium", "low"]

CONFIDENCE_RANK: dict[str, int] = {"high": 0, "medium": 1, "low": 2}


class Category(BaseModel):
    """A single FSC code."""

    model_config = ConfigDict(frozen=True)

    code: str
    title: str
    keywords: tuple[str, ...] = ()

    @computed_field  # type: ignore[prop-decorator]
    @property
    def group_prefix(self) -> str:
        return self.code[:2]


class Group(BaseModel):
    """A 2-character FSC group; the unit of retrieval narrowing."""

    model_config = ConfigDict(frozen=True)

    prefix: str
    name: str
    keywords: tuple[str, ...] = ()


class ClassificationRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    company_name: str
    website_url: Optional[str] = None
    email_domain: Optional[str] = None
    attachment_refs: tuple[str, ...] = ()

    @field_validator("website_url", "email_domain")
    @classmethod
    def _blank_is_none(cls, value: Optional[str]) -> Optional[str]:
        if value is None or not value.strip():
            return None
        return value.strip()


class CategoryMatch(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: str
    title: str
    reason: str
    confidence: Confidence


class ClassificationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    company_description: str
    matches: tuple[CategoryMatch, ...] = ()


class KeywordMatch(BaseModel):
    """One row of lexical matcher output."""

    model_config = ConfigDict(frozen=True)

    code: str
    title: str
    score: int = Field(ge=0)
    matched_keywords: tuple[str, ...]


class GroupMatch(BaseModel):
    """One row of group retrieval output; score is cosine similarity."""

    model_config = ConfigDict(frozen=True)

    prefix: str
    score: float
    name: str = ""

"""
Lexical FSC matcher.

Scores every FSC code by how many of its keywords occur in a block of text.
Deterministic and offline: this is the fallback classifier when no generative
model is configured, and the engine behind the /scrape endpoint.

Matching rules:
- text and keywords are lower-cased and whitespace runs collapse to one space
- a keyword matches when it is a substring of the text (counted once)
- codes are ranked by score, then by number of matched keywords
"""

from __future__ import annotations

import re

from fsc_classifier.schemas.contracts import Category, Confidence, KeywordMatch
from fsc_classifier.taxonomy.fsc import TaxonomyStore

_WHITESPACE = re.compile(r"\s+")


def normalize_text(text: str) -> str:
    return _WHITESPACE.sub(" ", text.lower())


def confidence_for_keyword_score(score: int) -> Confidence:
    """Matcher-local confidence rule used by the lexical pipeline."""
    if score >= 2:
        return "high"
    if score >= 1:
        return "medium"
    return "low"


def keyword_reason(match: KeywordMatch) -> str:
    return f"Matched keywords: {', '.join(match.matched_keywords)}"


class KeywordMatcher:
    def __init__(self, taxonomy: TaxonomyStore) -> None:
        self._categories = taxonomy.all_categories()
        # Normalize keywords once; matching runs per request
        self._normalized: list[tuple[Category, list[tuple[str, str]]]] = [
            (c, [(kw, normalize_text(kw)) for kw in c.keywords if kw.strip()])
            for c in self._categories
        ]

    def score(self, text: str, min_score: int = 1, max_results: int = 20) -> list[KeywordMatch]:
        normalized = normalize_text(text)
        results: list[KeywordMatch] = []

        for category, keywords in self._normalized:
            matched = [kw for kw, norm_kw in keywords if norm_kw in normalized]
            score = len(matched)
            if score >= min_score and matched:
                results.append(
                    KeywordMatch(
                        code=category.code,
                        title=category.title,
                        score=score,
                        matched_keywords=tuple(matched),
                    )
                )

        # Stable sort: taxonomy order breaks remaining ties
        results.sort(key=lambda m: (-m.score, -len(m.matched_keywords)))
        return results[:max_results]

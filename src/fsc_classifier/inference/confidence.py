"""Map group retrieval similarity to a confidence tier."""

from __future__ import annotations

from typing import Mapping

from fsc_classifier.errors import ConfigurationError
from fsc_classifier.schemas.contracts import Category, Confidence


class ConfidenceDeriver:
    def __init__(self, high_threshold: float = 0.5, medium_threshold: float = 0.3) -> None:
        if medium_threshold > high_threshold:
            raise ConfigurationError(
                f"FSC_MEDIUM_THRESHOLD ({medium_threshold}) must not exceed FSC_HIGH_THRESHOLD ({high_threshold})"
            )
        self.high_threshold = high_threshold
        self.medium_threshold = medium_threshold

    def confidence_for(self, group_score: float) -> Confidence:
        if group_score >= self.high_threshold:
            return "high"
        if group_score >= self.medium_threshold:
            return "medium"
        return "low"

    def for_category(self, category: Category, group_scores: Mapping[str, float]) -> tuple[Confidence, float]:
        """Tier and raw score for a category; groups missing from the shortlist score 0."""
        score = group_scores.get(category.group_prefix, 0.0)
        return self.confidence_for(score), score

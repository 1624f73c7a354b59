"""Tests for the group-score confidence deriver."""

import pytest

from fsc_classifier.errors import ConfigurationError
from fsc_classifier.inference.confidence import ConfidenceDeriver
from fsc_classifier.schemas.contracts import CONFIDENCE_RANK, Category


@pytest.fixture
def deriver() -> ConfidenceDeriver:
    return ConfidenceDeriver()


class TestConfidenceDeriver:
    @pytest.mark.parametrize(
        ("score", "expected"),
        [
            (0.62, "high"),
            (0.5, "high"),
            (0.49, "medium"),
            (0.35, "medium"),
            (0.3, "medium"),
            (0.29, "low"),
            (0.0, "low"),
            (-0.4, "low"),
        ],
    )
    def test_default_thresholds(self, deriver: ConfidenceDeriver, score: float, expected: str) -> None:
        assert deriver.confidence_for(score) == expected

    def test_monotonic(self, deriver: ConfidenceDeriver) -> None:
        scores = [i / 100 for i in range(-100, 101)]
        ranks = [CONFIDENCE_RANK[deriver.confidence_for(s)] for s in scores]

        # Higher score never yields a worse (higher-rank) tier
        assert all(a >= b for a, b in zip(ranks, ranks[1:]))

    def test_custom_thresholds(self) -> None:
        deriver = ConfidenceDeriver(high_threshold=0.8, medium_threshold=0.6)

        assert deriver.confidence_for(0.62) == "medium"
        assert deriver.confidence_for(0.5) == "low"

    def test_inverted_thresholds_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="FSC_MEDIUM_THRESHOLD"):
            ConfidenceDeriver(high_threshold=0.3, medium_threshold=0.5)

    def test_category_uses_its_group_score(self, deriver: ConfidenceDeriver) -> None:
        scores = {"56": 0.62, "81": 0.35}

        assert deriver.for_category(Category(code="5610", title="Adhesives"), scores) == ("high", 0.62)
        assert deriver.for_category(Category(code="8115", title="Boxes"), scores) == ("medium", 0.35)

    def test_unretrieved_group_scores_zero(self, deriver: ConfidenceDeriver) -> None:
        tier, score = deriver.for_category(Category(code="6240", title="Electric Lamps"), {"56": 0.62})

        assert tier == "low"
        assert score == 0.0

"""Tests for the lexical FSC matcher."""

from fsc_classifier.inference.keyword_match import (
    KeywordMatcher,
    confidence_for_keyword_score,
    keyword_reason,
    normalize_text,
)
from fsc_classifier.schemas.contracts import Category
from fsc_classifier.taxonomy.fsc import TaxonomyStore


class TestNormalizeText:
    def test_lowercases_and_collapses_whitespace(self) -> None:
        assert normalize_text("Light \n\t  BULB") == "light bulb"


class TestKeywordMatcher:
    def test_glue_and_sealants(self, matcher: KeywordMatcher) -> None:
        result = matcher.score("We manufacture industrial Glue and Sealants for aerospace.")

        assert len(result) == 1
        assert result[0].code == "5610"
        assert result[0].title == "Adhesives"
        assert result[0].score == 2
        assert result[0].matched_keywords == ("glue", "sealant")

    def test_keyword_counts_once(self, matcher: KeywordMatcher) -> None:
        result = matcher.score("glue glue glue")

        assert result[0].score == 1

    def test_multi_word_keyword_across_line_break(self, matcher: KeywordMatcher) -> None:
        result = matcher.score("Every LIGHT\n   bulb we sell")

        assert [m.code for m in result] == ["6240"]
        assert result[0].matched_keywords == ("light bulb",)

    def test_ranked_by_score(self, matcher: KeywordMatcher) -> None:
        result = matcher.score("Cartons, crates and bottles; also some glue.")

        assert [m.code for m in result] == ["8115", "5610", "8125"]
        assert [m.score for m in result] == [2, 1, 1]

    def test_ties_keep_taxonomy_order(self, matcher: KeywordMatcher) -> None:
        result = matcher.score("lamp jar screw")

        assert [m.code for m in result] == ["5305", "6240", "8125"]

    def test_min_score_filters(self, matcher: KeywordMatcher) -> None:
        result = matcher.score("Cartons, crates and a bottle", min_score=2)

        assert [m.code for m in result] == ["8115"]

    def test_max_results_truncates(self, matcher: KeywordMatcher) -> None:
        result = matcher.score("lamp jar screw glue brick", max_results=2)

        assert len(result) == 2

    def test_no_match(self, matcher: KeywordMatcher) -> None:
        assert matcher.score("software consulting") == []

    def test_min_score_zero_still_requires_a_match(self, matcher: KeywordMatcher) -> None:
        assert matcher.score("software consulting", min_score=0) == []

    def test_every_present_keyword_is_reported(self, matcher: KeywordMatcher, categories: list[Category]) -> None:
        for category in categories:
            for keyword in category.keywords:
                text = f"Intro text. {keyword.upper()} and more."
                result = {m.code: m for m in matcher.score(text, min_score=1, max_results=100)}

                assert category.code in result
                assert keyword in result[category.code].matched_keywords

    def test_deterministic(self, taxonomy: TaxonomyStore) -> None:
        text = "Boxes, bottles, jars, glue, tile, masonry and lamps"

        first = KeywordMatcher(taxonomy).score(text)
        second = KeywordMatcher(taxonomy).score(text)

        assert first == second


class TestKeywordConfidence:
    def test_thresholds(self) -> None:
        assert confidence_for_keyword_score(3) == "high"
        assert confidence_for_keyword_score(2) == "high"
        assert confidence_for_keyword_score(1) == "medium"
        assert confidence_for_keyword_score(0) == "low"

    def test_reason(self, matcher: KeywordMatcher) -> None:
        match = matcher.score("glue and sealant")[0]

        assert keyword_reason(match) == "Matched keywords: glue, sealant"

"""Tests for on-page rules, grading and the heuristic score."""

import pytest

from seo_auditor.core.schemas import Headings, KeywordReport, PhraseMetric, Suggestion
from seo_auditor.modules.demo_data import get_demo_ai_result, get_demo_result
from seo_auditor.modules.seo_rules import (
    SEOScoringEngine,
    build_meta,
    evaluate_page,
    grade_load_time,
    length_status,
)

GOOD_TITLE = "T" * 55
GOOD_DESCRIPTION = "D" * 155


class TestLengthStatus:

    @pytest.mark.parametrize("length,expected", [
        (0, "bad"),
        (1, "warning"),
        (49, "warning"),
        (50, "good"),
        (60, "good"),
        (61, "warning"),
    ])
    def test_title_range(self, length, expected):
        assert length_status(length, 50, 60) == expected


class TestGradeLoadTime:

    @pytest.mark.parametrize("ms,grade", [
        (0, "Fast"),
        (800, "Fast"),
        (801, "Average"),
        (1500, "Average"),
        (1501, "Slow"),
    ])
    def test_thresholds(self, ms, grade):
        assert grade_load_time(ms) == grade


class TestEvaluatePage:

    def test_well_formed_page_scores_full_marks(self):
        meta = build_meta(GOOD_TITLE, GOOD_DESCRIPTION, Headings(h1=["Main"]))
        density = KeywordReport(single=[PhraseMetric(phrase="shoes", count=3, density=2.5)])

        suggestions = evaluate_page(meta, density)

        assert {s.type for s in suggestions} == {"good"}
        assert SEOScoringEngine(suggestions).score() == 100

    def test_empty_page(self):
        meta = build_meta("", "", Headings())
        suggestions = evaluate_page(meta, KeywordReport())

        assert [s.type for s in suggestions] == ["bad", "bad", "bad"]
        assert meta.title_status == "bad"
        assert meta.description_status == "bad"
        assert SEOScoringEngine(suggestions).score() == 55

    def test_multiple_h1_and_short_title(self):
        meta = build_meta("Short", GOOD_DESCRIPTION, Headings(h1=["One", "Two"]))
        suggestions = evaluate_page(meta, KeywordReport())

        messages = [s.message for s in suggestions if s.type == "warning"]
        assert any("5 characters" in m for m in messages)
        assert any("2 H1 tags" in m for m in messages)
        assert SEOScoringEngine(suggestions).score() == 90

    def test_keyword_stuffing_warning(self):
        meta = build_meta(GOOD_TITLE, GOOD_DESCRIPTION, Headings(h1=["Main"]))
        density = KeywordReport(single=[PhraseMetric(phrase="shoes", count=9, density=7.5)])

        suggestions = evaluate_page(meta, density)

        assert suggestions[-1].type == "warning"
        assert "'shoes'" in suggestions[-1].message


class TestScoringEngine:

    def test_score_is_clamped(self):
        suggestions = [Suggestion(type="bad", message="x")] * 10
        assert SEOScoringEngine(suggestions).score() == 0

    def test_severity_count(self):
        suggestions = [
            Suggestion(type="good", message="a"),
            Suggestion(type="warning", message="b"),
            Suggestion(type="warning", message="c"),
        ]
        assert SEOScoringEngine(suggestions).severity_count() == {"good": 1, "warning": 2, "bad": 0}


class TestDemoData:

    def test_demo_result_goes_through_the_rules(self):
        result = get_demo_result()

        assert result.url == "https://example.com"
        assert result.load_time == 125
        assert result.load_grade == "Fast"
        assert result.density.single[0].phrase == "domain"
        assert result.meta.title_status == "warning"
        assert any("'domain'" in s.message for s in result.suggestions)
        assert 0 <= result.score <= 100
        assert result.timestamp

    def test_demo_ai_result(self):
        result = get_demo_ai_result()

        assert result.score == 78
        assert len(result.keywords) == 8
        assert result.meta.description_length == 156
        assert result.timestamp

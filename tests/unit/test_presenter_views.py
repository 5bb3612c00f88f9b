import copy
from typing import Any

import pytest

from deepread.extraction.models import AnalysisResult
from deepread.extraction.validator import validate_and_build
from deepread.presenter.views import (
    AnalyticsView,
    ChapterRow,
    analytics_view,
    clamp_percent,
    concepts_view,
    document_header,
    full_report_view,
    is_high_impact,
    overview_view,
)


def _result(payload: dict[str, Any]) -> AnalysisResult:
    return validate_and_build(payload)


class TestDocumentHeader:
    def test_projects_metadata_and_summary(self, analysis_payload: dict[str, Any]) -> None:
        header = document_header(_result(analysis_payload))
        assert header.title == "My Book: Part One"
        assert header.author == "A. Writer"
        assert header.genre == "Physics"
        assert header.reading_time == "2 hours"
        assert header.executive_summary == "An accessible tour of thermodynamics."


class TestOverviewView:
    def test_rows_keep_document_order(self, analysis_payload: dict[str, Any]) -> None:
        rows = overview_view(_result(analysis_payload))
        assert rows == [
            ChapterRow("Section 1", "Heat", "What heat is.", "Heat is energy in transit."),
            ChapterRow(
                "Section 2", "Work", "How work is done.", "Work and heat are interchangeable."
            ),
        ]


class TestConceptsView:
    def test_entropy_at_92_is_high_impact(self, analysis_payload: dict[str, Any]) -> None:
        analysis_payload["keyConcepts"] = [
            {"term": "Entropy", "definition": "...", "importance": 92}
        ]
        (card,) = concepts_view(_result(analysis_payload))
        assert card.term == "Entropy"
        assert card.importance == 92
        assert card.high_impact is True

    @pytest.mark.parametrize(("importance", "expected"), [(80, False), (81, True), (5, False)])
    def test_high_impact_threshold(self, importance: int, expected: bool) -> None:
        assert is_high_impact(importance) is expected


class TestAnalyticsView:
    def test_topic_widths_relative_to_max(self, analysis_payload: dict[str, Any]) -> None:
        view = analytics_view(_result(analysis_payload))
        assert isinstance(view, AnalyticsView)
        assert [(b.label, b.value, b.width_percent) for b in view.topic_bars] == [
            ("Thermodynamics", 80, 100.0),
            ("History", 40, 50.0),
        ]

    def test_all_zero_topics_do_not_divide_by_zero(
        self, analysis_payload: dict[str, Any]
    ) -> None:
        analysis_payload["topicStats"] = [{"topic": "Nothing", "relevance": 0}]
        view = analytics_view(_result(analysis_payload))
        assert view.topic_bars[0].width_percent == 0.0

    def test_concept_impact_limited_to_first_five(
        self, analysis_payload: dict[str, Any]
    ) -> None:
        analysis_payload["keyConcepts"] = [
            {"term": f"T{i}", "definition": "d", "importance": 10 * i} for i in range(1, 8)
        ]
        view = analytics_view(_result(analysis_payload))
        assert [b.label for b in view.concept_impact_bars] == ["T1", "T2", "T3", "T4", "T5"]
        assert view.concept_impact_bars[2].width_percent == 30.0

    def test_out_of_range_values_are_verbatim_but_widths_clamped(
        self, analysis_payload: dict[str, Any]
    ) -> None:
        analysis_payload["keyConcepts"][0]["importance"] = 150
        analysis_payload["keyConcepts"][1]["importance"] = -20
        view = analytics_view(_result(analysis_payload))
        first, second = view.concept_impact_bars
        assert (first.value, first.width_percent) == (150, 100.0)
        assert (second.value, second.width_percent) == (-20, 0.0)

    def test_negative_topic_width_is_clamped(self, analysis_payload: dict[str, Any]) -> None:
        analysis_payload["topicStats"][1]["relevance"] = -10
        view = analytics_view(_result(analysis_payload))
        assert view.topic_bars[1].width_percent == 0.0


class TestFullReportView:
    def test_returns_markdown_verbatim(self, analysis_payload: dict[str, Any]) -> None:
        assert full_report_view(_result(analysis_payload)) == analysis_payload["fullMarkdownReport"]


class TestPurity:
    def test_views_do_not_mutate_result(self, analysis_payload: dict[str, Any]) -> None:
        result = _result(analysis_payload)
        snapshot = copy.deepcopy(result)
        document_header(result)
        overview_view(result)
        concepts_view(result)
        analytics_view(result)
        full_report_view(result)
        assert result == snapshot


class TestClampPercent:
    @pytest.mark.parametrize(("value", "expected"), [(-1, 0.0), (55.5, 55.5), (101, 100.0)])
    def test_clamps(self, value: float, expected: float) -> None:
        assert clamp_percent(value) == expected

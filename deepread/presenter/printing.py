"""Plain-text print rendering of the dashboard header and one tab."""

from collections.abc import Callable

from deepread.extraction.models import AnalysisResult
from deepread.presenter.views import (
    Bar,
    analytics_view,
    concepts_view,
    document_header,
    full_report_view,
    overview_view,
)

_BAR_WIDTH = 30


def render_print(result: AnalysisResult, tab: str = "full-report") -> str:
    """Render the header followed by the selected tab.

    Raises:
        ValueError: if ``tab`` is not one of PRINT_TABS.
    """
    renderer = _TAB_RENDERERS.get(tab)
    if renderer is None:
        raise ValueError(f"Unknown tab '{tab}'. Choose from: {list(_TAB_RENDERERS)}")
    return "\n".join([*_render_header(result), "", *renderer(result)]) + "\n"


def _render_header(result: AnalysisResult) -> list[str]:
    header = document_header(result)
    return [
        header.title,
        f"by {header.author}",
        f"{header.genre.upper()} | {header.reading_time} read",
        "",
        "EXECUTIVE SUMMARY",
        header.executive_summary,
    ]


def _render_overview(result: AnalysisResult) -> list[str]:
    lines = ["STRUCTURAL BREAKDOWN"]
    for row in overview_view(result):
        lines += [
            "",
            row.section_label.upper(),
            row.title,
            row.summary,
            f"Key Insight: {row.insight}",
        ]
    return lines


def _render_concepts(result: AnalysisResult) -> list[str]:
    lines = ["CORE CONCEPTS"]
    for card in concepts_view(result):
        marker = " *" if card.high_impact else ""
        lines += ["", f"{card.term} ({card.importance} Impact){marker}", card.definition]
    return lines


def _render_analytics(result: AnalysisResult) -> list[str]:
    view = analytics_view(result)
    lines = ["TOP THEMES"]
    lines += [_render_bar(bar, suffix="%") for bar in view.topic_bars]
    lines += ["", "CONCEPT IMPACT DISTRIBUTION"]
    lines += [_render_bar(bar) for bar in view.concept_impact_bars]
    return lines


def _render_full_report(result: AnalysisResult) -> list[str]:
    return [full_report_view(result)]


def _render_bar(bar: Bar, suffix: str = "") -> str:
    filled = round(bar.width_percent / 100 * _BAR_WIDTH)
    return f"{bar.label:<24} {'#' * filled:<{_BAR_WIDTH}} {bar.value}{suffix}"


_TAB_RENDERERS: dict[str, Callable[[AnalysisResult], list[str]]] = {
    "overview": _render_overview,
    "concepts": _render_concepts,
    "visuals": _render_analytics,
    "full-report": _render_full_report,
}

PRINT_TABS = tuple(_TAB_RENDERERS)

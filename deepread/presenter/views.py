"""Read-only projections of an AnalysisResult into dashboard views."""

from dataclasses import dataclass

from deepread.extraction.models import AnalysisResult

HIGH_IMPACT_THRESHOLD = 80
IMPACT_DISTRIBUTION_LIMIT = 5


@dataclass(frozen=True)
class DocumentHeader:
    title: str
    author: str
    genre: str
    reading_time: str
    executive_summary: str


@dataclass(frozen=True)
class ChapterRow:
    """A chapter as shown in the overview timeline."""

    section_label: str
    title: str
    summary: str
    insight: str


@dataclass(frozen=True)
class ConceptCard:
    term: str
    definition: str
    importance: int
    high_impact: bool


@dataclass(frozen=True)
class Bar:
    """One labelled bar; ``value`` is verbatim, ``width_percent`` is display-only."""

    label: str
    value: int
    width_percent: float


@dataclass(frozen=True)
class AnalyticsView:
    topic_bars: list[Bar]
    concept_impact_bars: list[Bar]


def document_header(result: AnalysisResult) -> DocumentHeader:
    metadata = result.metadata
    return DocumentHeader(
        title=metadata.title,
        author=metadata.author,
        genre=metadata.genre,
        reading_time=metadata.reading_time,
        executive_summary=result.executive_summary,
    )


def overview_view(result: AnalysisResult) -> list[ChapterRow]:
    """Chapters in document order, labelled from Section 1."""
    return [
        ChapterRow(
            section_label=f"Section {index}",
            title=chapter.title,
            summary=chapter.summary,
            insight=chapter.insight,
        )
        for index, chapter in enumerate(result.chapter_breakdown, start=1)
    ]


def concepts_view(result: AnalysisResult) -> list[ConceptCard]:
    return [
        ConceptCard(
            term=concept.term,
            definition=concept.definition,
            importance=concept.importance,
            high_impact=is_high_impact(concept.importance),
        )
        for concept in result.key_concepts
    ]


def analytics_view(result: AnalysisResult) -> AnalyticsView:
    """Topic relevance scaled to the largest value; concept impact on a 0-100 scale."""
    topic_values = [stat.relevance for stat in result.topic_stats]
    largest = max([*topic_values, 1])
    topic_bars = [
        Bar(
            label=stat.topic,
            value=stat.relevance,
            width_percent=clamp_percent(stat.relevance / largest * 100),
        )
        for stat in result.topic_stats
    ]
    concept_impact_bars = [
        Bar(
            label=concept.term,
            value=concept.importance,
            width_percent=clamp_percent(concept.importance),
        )
        for concept in result.key_concepts[:IMPACT_DISTRIBUTION_LIMIT]
    ]
    return AnalyticsView(topic_bars=topic_bars, concept_impact_bars=concept_impact_bars)


def full_report_view(result: AnalysisResult) -> str:
    return result.full_markdown_report


def is_high_impact(importance: int) -> bool:
    return importance > HIGH_IMPACT_THRESHOLD


def clamp_percent(value: float) -> float:
    return max(0.0, min(100.0, float(value)))

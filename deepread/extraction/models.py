from dataclasses import dataclass


@dataclass(frozen=True)
class DocumentMetadata:
    """Bibliographic details of the analyzed document."""

    title: str
    author: str
    genre: str
    reading_time: str


@dataclass(frozen=True)
class KeyConcept:
    """A term with its definition; importance is nominally 1-100."""

    term: str
    definition: str
    importance: int


@dataclass(frozen=True)
class Chapter:
    """One section of the document, in document order."""

    title: str
    summary: str
    insight: str


@dataclass(frozen=True)
class TopicStat:
    """A theme with its relevance; relevance is nominally 1-100."""

    topic: str
    relevance: int


@dataclass(frozen=True)
class AnalysisResult:
    """Output of the extraction step."""

    metadata: DocumentMetadata
    executive_summary: str
    key_concepts: list[KeyConcept]
    chapter_breakdown: list[Chapter]
    topic_stats: list[TopicStat]
    full_markdown_report: str

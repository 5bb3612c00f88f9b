"""Validates parsed JSON against the analysis schema shape and builds an AnalysisResult."""

from typing import Any

from deepread.extraction.exceptions import MalformedResponseError
from deepread.extraction.models import (
    AnalysisResult,
    Chapter,
    DocumentMetadata,
    KeyConcept,
    TopicStat,
)

_TOP_LEVEL_FIELDS = (
    "metadata",
    "executiveSummary",
    "keyConcepts",
    "chapterBreakdown",
    "topicStats",
    "fullMarkdownReport",
)
_METADATA_FIELDS = ("title", "author", "genre", "readingTime")
_CONCEPT_FIELDS = ("term", "definition", "importance")
_CHAPTER_FIELDS = ("title", "summary", "insight")
_TOPIC_FIELDS = ("topic", "relevance")


def validate_and_build(data: dict[str, Any]) -> AnalysisResult:
    """Validate raw parsed JSON and build an AnalysisResult.

    Numeric scores are type-checked only; their range is left to the presenter.

    Raises:
        MalformedResponseError: on any shape mismatch.
    """
    _require_exact_fields(data, _TOP_LEVEL_FIELDS, "response")
    return AnalysisResult(
        metadata=_build_metadata(data["metadata"]),
        executive_summary=_require_str(data["executiveSummary"], "executiveSummary"),
        key_concepts=[
            _build_concept(item, i)
            for i, item in enumerate(_require_list(data["keyConcepts"], "keyConcepts"))
        ],
        chapter_breakdown=[
            _build_chapter(item, i)
            for i, item in enumerate(
                _require_list(data["chapterBreakdown"], "chapterBreakdown")
            )
        ],
        topic_stats=[
            _build_topic(item, i)
            for i, item in enumerate(_require_list(data["topicStats"], "topicStats"))
        ],
        full_markdown_report=_require_str(data["fullMarkdownReport"], "fullMarkdownReport"),
    )


def _require_exact_fields(raw: Any, fields: tuple[str, ...], where: str) -> None:
    if not isinstance(raw, dict):
        raise MalformedResponseError(f"{where} must be an object")
    for field in fields:
        if field not in raw:
            raise MalformedResponseError(f"Missing required field: {where}.{field}")
    unexpected = sorted(set(raw) - set(fields))
    if unexpected:
        raise MalformedResponseError(f"Unexpected fields in {where}: {unexpected}")


def _require_str(raw: Any, where: str) -> str:
    if not isinstance(raw, str):
        raise MalformedResponseError(f"'{where}' must be a string")
    return raw


def _require_int(raw: Any, where: str) -> int:
    # bool is a subclass of int
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise MalformedResponseError(f"'{where}' must be an integer")
    return raw


def _require_list(raw: Any, where: str) -> list[Any]:
    if not isinstance(raw, list):
        raise MalformedResponseError(f"'{where}' must be a list")
    return raw


def _build_metadata(raw: Any) -> DocumentMetadata:
    _require_exact_fields(raw, _METADATA_FIELDS, "metadata")
    return DocumentMetadata(
        title=_require_str(raw["title"], "metadata.title"),
        author=_require_str(raw["author"], "metadata.author"),
        genre=_require_str(raw["genre"], "metadata.genre"),
        reading_time=_require_str(raw["readingTime"], "metadata.readingTime"),
    )


def _build_concept(raw: Any, index: int) -> KeyConcept:
    where = f"keyConcepts[{index}]"
    _require_exact_fields(raw, _CONCEPT_FIELDS, where)
    return KeyConcept(
        term=_require_str(raw["term"], f"{where}.term"),
        definition=_require_str(raw["definition"], f"{where}.definition"),
        importance=_require_int(raw["importance"], f"{where}.importance"),
    )


def _build_chapter(raw: Any, index: int) -> Chapter:
    where = f"chapterBreakdown[{index}]"
    _require_exact_fields(raw, _CHAPTER_FIELDS, where)
    return Chapter(
        title=_require_str(raw["title"], f"{where}.title"),
        summary=_require_str(raw["summary"], f"{where}.summary"),
        insight=_require_str(raw["insight"], f"{where}.insight"),
    )


def _build_topic(raw: Any, index: int) -> TopicStat:
    where = f"topicStats[{index}]"
    _require_exact_fields(raw, _TOPIC_FIELDS, where)
    return TopicStat(
        topic=_require_str(raw["topic"], f"{where}.topic"),
        relevance=_require_int(raw["relevance"], f"{where}.relevance"),
    )

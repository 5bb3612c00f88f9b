"""Accepts or rejects upload candidates by extension and declared media type."""

from deepread.intake.exceptions import UnsupportedFormatError
from deepread.intake.models import (
    MARKDOWN_EXTENSIONS,
    MARKDOWN_MEDIA_TYPE,
    PDF_EXTENSION,
    PDF_MEDIA_TYPE,
    PLAIN_TEXT_MEDIA_TYPE,
    Accepted,
    Rejected,
    UploadCandidate,
    ValidationOutcome,
)

UNSUPPORTED_FORMAT_MESSAGE = "Please upload a PDF or Markdown file."

_ALLOWED_MEDIA_TYPES = frozenset({MARKDOWN_MEDIA_TYPE, PLAIN_TEXT_MEDIA_TYPE, PDF_MEDIA_TYPE})


def validate(candidate: UploadCandidate) -> ValidationOutcome:
    """Classify a candidate; the first matching rule wins.

    Browsers often report an empty type for Markdown, so the extension is
    checked before the declared type.
    """
    if candidate.has_extension(*MARKDOWN_EXTENSIONS):
        return Accepted(candidate)
    if candidate.media_type == PDF_MEDIA_TYPE or candidate.has_extension(PDF_EXTENSION):
        return Accepted(candidate)
    if candidate.media_type in _ALLOWED_MEDIA_TYPES:
        return Accepted(candidate)
    return Rejected(candidate, UnsupportedFormatError(UNSUPPORTED_FORMAT_MESSAGE))


def validate_or_raise(candidate: UploadCandidate) -> UploadCandidate:
    """Return the candidate if accepted.

    Raises:
        UnsupportedFormatError: if the candidate is rejected.
    """
    outcome = validate(candidate)
    if isinstance(outcome, Rejected):
        raise outcome.error
    return outcome.candidate

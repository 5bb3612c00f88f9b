from deepread.extraction.exceptions import (
    EmptyResponseError,
    ExtractionNetworkError,
    MalformedResponseError,
)
from deepread.intake.exceptions import FileReadError, UnsupportedFormatError

GENERIC_FAILURE_MESSAGE = "Failed to process file."


def describe_error(exc: BaseException) -> str:
    """Map a submission failure to the single message shown while idle."""
    if isinstance(exc, (UnsupportedFormatError, FileReadError, EmptyResponseError)):
        return str(exc) or GENERIC_FAILURE_MESSAGE
    if isinstance(exc, MalformedResponseError):
        return f"The analysis response was malformed: {exc}"
    if isinstance(exc, ExtractionNetworkError):
        return f"The analysis service could not be reached: {exc}"
    return GENERIC_FAILURE_MESSAGE

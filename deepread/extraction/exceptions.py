from deepread.exceptions import DeepReadError


class ExtractionError(DeepReadError):
    """Raised when extraction fails."""


class EmptyResponseError(ExtractionError):
    """Raised when the AI provider returns no content."""


class MalformedResponseError(ExtractionError):
    """Raised when the response is not JSON matching the analysis schema."""


class ExtractionNetworkError(ExtractionError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""

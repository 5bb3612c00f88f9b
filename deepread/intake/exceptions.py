from deepread.exceptions import DeepReadError


class IntakeError(DeepReadError):
    """Base exception for file intake errors."""


class UnsupportedFormatError(IntakeError):
    """Raised when a file is neither a PDF nor Markdown/plain text."""


class FileReadError(IntakeError):
    """Raised when a file's bytes cannot be read."""

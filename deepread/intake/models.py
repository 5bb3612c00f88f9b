import mimetypes
from dataclasses import dataclass, field
from pathlib import Path

from deepread.intake.exceptions import UnsupportedFormatError

PDF_MEDIA_TYPE = "application/pdf"
PLAIN_TEXT_MEDIA_TYPE = "text/plain"
MARKDOWN_MEDIA_TYPE = "text/markdown"

MARKDOWN_ALIASES = frozenset({MARKDOWN_MEDIA_TYPE, "text/x-markdown"})
MARKDOWN_EXTENSIONS = (".md", ".markdown")
PDF_EXTENSION = ".pdf"


@dataclass(frozen=True)
class UploadCandidate:
    """A user-supplied file awaiting validation and encoding.

    ``media_type`` is whatever the uploader declared and may be empty.
    ``source`` is either the content itself or a path read on demand.
    """

    name: str
    media_type: str
    source: bytes | Path = field(repr=False)

    @classmethod
    def from_path(cls, path: Path) -> "UploadCandidate":
        """Build a candidate from a local file, guessing the declared type from its name."""
        guessed, _ = mimetypes.guess_type(path.name)
        return cls(name=path.name, media_type=guessed or "", source=path)

    @classmethod
    def from_bytes(cls, name: str, content: bytes, media_type: str = "") -> "UploadCandidate":
        return cls(name=name, media_type=media_type, source=content)

    def has_extension(self, *extensions: str) -> bool:
        return self.name.endswith(extensions)


@dataclass(frozen=True)
class EncodedDocument:
    """Transport-safe form of a file: base-64 text plus its resolved media type."""

    media_type: str
    data: str = field(repr=False)
    name: str = ""
    size_bytes: int = 0


@dataclass(frozen=True)
class Accepted:
    candidate: UploadCandidate


@dataclass(frozen=True)
class Rejected:
    candidate: UploadCandidate
    error: UnsupportedFormatError

    @property
    def reason(self) -> str:
        return str(self.error)


ValidationOutcome = Accepted | Rejected

import asyncio
import base64
from pathlib import Path

from deepread.intake.exceptions import FileReadError
from deepread.intake.models import (
    MARKDOWN_ALIASES,
    MARKDOWN_EXTENSIONS,
    PDF_MEDIA_TYPE,
    PLAIN_TEXT_MEDIA_TYPE,
    EncodedDocument,
    UploadCandidate,
)
from deepread.logging.logger import Log


async def encode(candidate: UploadCandidate) -> EncodedDocument:
    """Read the candidate's full content and encode it as base-64 text.

    Raises:
        FileReadError: if the content cannot be read.
    """
    content = await read_content(candidate)
    document = EncodedDocument(
        media_type=resolve_media_type(candidate),
        data=base64.b64encode(content).decode("ascii"),
        name=candidate.name,
        size_bytes=len(content),
    )
    Log.info(
        f"Encoded {candidate.name}: {document.size_bytes} bytes as {document.media_type}"
    )
    return document


def decode(document: EncodedDocument) -> bytes:
    return base64.b64decode(document.data, validate=True)


async def read_content(candidate: UploadCandidate) -> bytes:
    """Return the candidate bytes, reading path sources off the event loop."""
    if isinstance(candidate.source, bytes):
        return candidate.source
    try:
        return await asyncio.to_thread(_read_path, candidate.source)
    except OSError as exc:
        raise FileReadError(f"Could not read the file: {candidate.name}") from exc


def resolve_media_type(candidate: UploadCandidate) -> str:
    """Map the declared type onto the tags the extraction service accepts.

    Markdown aliases become plain text; any other declaration falls back to
    the file extension.
    """
    declared = candidate.media_type.strip().lower()
    if declared in MARKDOWN_ALIASES or declared == PLAIN_TEXT_MEDIA_TYPE:
        return PLAIN_TEXT_MEDIA_TYPE
    if declared == PDF_MEDIA_TYPE:
        return PDF_MEDIA_TYPE
    if candidate.has_extension(*MARKDOWN_EXTENSIONS):
        return PLAIN_TEXT_MEDIA_TYPE
    return PDF_MEDIA_TYPE


def _read_path(path: Path) -> bytes:
    return path.read_bytes()

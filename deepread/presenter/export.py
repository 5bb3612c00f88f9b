import re
from dataclasses import dataclass
from pathlib import Path

from deepread.extraction.models import AnalysisResult
from deepread.logging.logger import Log

MARKDOWN_MEDIA_TYPE = "text/markdown"

_WHITESPACE_RUN = re.compile(r"\s+")
_UNSAFE_PATH_CHARS = re.compile(r"[/\\\x00]")


@dataclass(frozen=True)
class MarkdownExport:
    """Downloadable study notes: the full report under a title-derived file name."""

    filename: str
    content: str
    media_type: str = MARKDOWN_MEDIA_TYPE


def export_filename(title: str) -> str:
    """Replace each whitespace run in the title with ``_`` and append ``_Notes.md``."""
    return f"{_WHITESPACE_RUN.sub('_', title)}_Notes.md"


def disk_filename(filename: str) -> str:
    """Make an export file name safe to join onto a directory.

    Path separators and NUL become ``_`` and leading dots are dropped, so the
    name can neither climb out of the directory nor become hidden.
    """
    return _UNSAFE_PATH_CHARS.sub("_", filename).lstrip(".")


def build_markdown_export(result: AnalysisResult) -> MarkdownExport:
    return MarkdownExport(
        filename=export_filename(result.metadata.title),
        content=result.full_markdown_report,
    )


def write_markdown_export(result: AnalysisResult, directory: Path) -> Path:
    """Write the export into ``directory`` and return the file path.

    The file always lands directly inside ``directory``, whatever the title.

    Raises:
        OSError: if the directory cannot be created or the file written.
    """
    export = build_markdown_export(result)
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / disk_filename(export.filename)
    path.write_text(export.content, encoding="utf-8")
    Log.info(f"Exported {len(export.content)} chars to {path}")
    return path

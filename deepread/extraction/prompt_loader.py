import json
from pathlib import Path

from deepread.extraction.exceptions import ExtractionError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_instruction(path: Path | None = None) -> str:
    """Load the analysis instruction sent alongside the document.

    Args:
        path: Path to the instruction file.
              Defaults to the bundled analysis_instruction.txt.

    Returns:
        The instruction text with surrounding whitespace removed.

    Raises:
        ExtractionError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "analysis_instruction.txt"
    try:
        return path.read_text(encoding="utf-8").strip()
    except OSError as exc:
        raise ExtractionError(f"Failed to load instruction: {exc}") from exc


def load_json_schema(path: Path | None = None) -> dict[str, object]:
    """Load the analysis JSON schema.

    Args:
        path: Path to the JSON schema file.
              Defaults to the bundled analysis_schema.json.

    Raises:
        ExtractionError: if the file cannot be read or is not a JSON object.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "analysis_schema.json"
    try:
        schema = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ExtractionError(f"Failed to load JSON schema: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ExtractionError(f"Invalid JSON schema: {exc}") from exc
    if not isinstance(schema, dict):
        raise ExtractionError("JSON schema must be an object")
    return schema

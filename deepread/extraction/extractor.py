"""AI-powered document analysis extractor."""

import json
from pathlib import Path
from typing import Any

from deepread.extraction.base import BaseExtractor
from deepread.extraction.client_base import BaseExtractionClient
from deepread.extraction.exceptions import EmptyResponseError, MalformedResponseError
from deepread.extraction.models import AnalysisResult
from deepread.extraction.prompt_loader import load_instruction, load_json_schema
from deepread.extraction.validator import validate_and_build
from deepread.intake.models import EncodedDocument
from deepread.logging.logger import Log


class Extractor(BaseExtractor):
    """Analyzes a document in a single structured-output request to an AI provider.

    One call per document: no retry, no streaming.
    """

    def __init__(
        self,
        *,
        client: BaseExtractionClient,
        model: str,
        instruction_path: Path | None = None,
        json_schema_path: Path | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._instruction = load_instruction(instruction_path)
        self._json_schema = load_json_schema(json_schema_path)

    @property
    def json_schema(self) -> dict[str, object]:
        return self._json_schema

    async def extract(self, document: EncodedDocument) -> AnalysisResult:
        Log.debug(
            f"Extraction request: model={self._model} media_type={document.media_type} "
            f"size={document.size_bytes} instruction:\n{self._instruction}"
        )
        raw_response = await self._client.generate_structured(
            model=self._model,
            document=document,
            instruction=self._instruction,
            json_schema=self._json_schema,
        )
        Log.debug(f"AI raw response:\n{raw_response}")

        parsed = self._parse_json(raw_response)
        result = validate_and_build(parsed)

        Log.info(
            f"Extraction complete: {len(result.key_concepts)} concepts, "
            f"{len(result.chapter_breakdown)} chapters, {len(result.topic_stats)} topics"
        )
        return result

    @staticmethod
    def _parse_json(raw: str | None) -> dict[str, Any]:
        if raw is None or not raw.strip():
            raise EmptyResponseError("No content generated")
        try:
            parsed = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise MalformedResponseError(f"Invalid JSON response: {exc}") from exc

        if not isinstance(parsed, dict):
            raise MalformedResponseError("JSON response must be an object")
        return parsed

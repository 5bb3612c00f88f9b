import base64

import httpx
import openai

from deepread.extraction.client_base import BaseExtractionClient
from deepread.extraction.exceptions import EmptyResponseError, ExtractionNetworkError
from deepread.intake.exceptions import FileReadError
from deepread.intake.models import PDF_MEDIA_TYPE, EncodedDocument


class OpenAIClientAdapter(BaseExtractionClient):
    """Extraction client adapter built on the OpenAI-compatible chat API."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int | None = None,
        base_url: str | None = None,
    ) -> None:
        if timeout_seconds is None:
            self._client = openai.AsyncOpenAI(api_key=api_key, base_url=base_url)
        else:
            self._client = openai.AsyncOpenAI(
                api_key=api_key,
                timeout=timeout_seconds,
                base_url=base_url,
            )

    async def generate_structured(
        self,
        *,
        model: str,
        document: EncodedDocument,
        instruction: str,
        json_schema: dict[str, object],
    ) -> str:
        try:
            response = await self._client.chat.completions.create(
                model=model,
                response_format={
                    "type": "json_schema",
                    "json_schema": {
                        "name": "analysis_result",
                        "strict": True,
                        "schema": json_schema,
                    },
                },
                messages=[
                    {
                        "role": "user",
                        "content": [
                            self._document_part(document),
                            {"type": "text", "text": instruction},
                        ],
                    },
                ],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise ExtractionNetworkError(
                f"AI provider network error: {exc}"
            ) from exc
        except openai.APIError as exc:
            raise ExtractionNetworkError(
                f"AI provider API error: {exc}"
            ) from exc

        if not response.choices:
            raise EmptyResponseError("AI returned no choices")
        content = response.choices[0].message.content
        if not content:
            raise EmptyResponseError("No content generated")
        return content

    @staticmethod
    def _document_part(document: EncodedDocument) -> dict[str, object]:
        # Chat file parts only take PDFs; plain text travels as a text part.
        if document.media_type == PDF_MEDIA_TYPE:
            return {
                "type": "file",
                "file": {
                    "filename": document.name or "document.pdf",
                    "file_data": f"data:{PDF_MEDIA_TYPE};base64,{document.data}",
                },
            }
        try:
            text = base64.b64decode(document.data).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise FileReadError(f"File is not valid UTF-8 text: {document.name}") from exc
        return {"type": "text", "text": text}

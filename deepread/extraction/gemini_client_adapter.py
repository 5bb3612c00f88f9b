import base64

import httpx
from google import genai
from google.genai import errors, types

from deepread.extraction.client_base import BaseExtractionClient
from deepread.extraction.exceptions import EmptyResponseError, ExtractionNetworkError
from deepread.intake.models import EncodedDocument


class GeminiClientAdapter(BaseExtractionClient):
    """Extraction client adapter built on the Google GenAI SDK."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int | None = None,
    ) -> None:
        http_options = None
        if timeout_seconds is not None:
            http_options = types.HttpOptions(timeout=timeout_seconds * 1000)
        self._client = genai.Client(api_key=api_key, http_options=http_options)

    async def generate_structured(
        self,
        *,
        model: str,
        document: EncodedDocument,
        instruction: str,
        json_schema: dict[str, object],
    ) -> str:
        parts = [
            types.Part.from_bytes(
                data=base64.b64decode(document.data),
                mime_type=document.media_type,
            ),
            types.Part.from_text(text=instruction),
        ]
        try:
            response = await self._client.aio.models.generate_content(
                model=model,
                contents=[types.Content(role="user", parts=parts)],
                config=types.GenerateContentConfig(
                    response_mime_type="application/json",
                    response_json_schema=json_schema,
                ),
            )
        except (httpx.ConnectError, httpx.TimeoutException) as exc:
            raise ExtractionNetworkError(f"AI provider network error: {exc}") from exc
        except errors.APIError as exc:
            raise ExtractionNetworkError(f"AI provider API error: {exc}") from exc

        if not response.text:
            raise EmptyResponseError("No content generated")
        return response.text

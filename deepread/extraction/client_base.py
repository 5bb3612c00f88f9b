from abc import ABC, abstractmethod

from deepread.intake.models import EncodedDocument


class BaseExtractionClient(ABC):
    """Contract for provider-specific structured-output AI clients."""

    @abstractmethod
    async def generate_structured(
        self,
        *,
        model: str,
        document: EncodedDocument,
        instruction: str,
        json_schema: dict[str, object],
    ) -> str:
        """Send the document and instruction as one request; return the raw JSON text.

        Raises:
            EmptyResponseError: if the provider returns no content.
            ExtractionNetworkError: on transport or API failures.
        """

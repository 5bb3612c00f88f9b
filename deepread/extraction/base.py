from abc import ABC, abstractmethod

from deepread.extraction.models import AnalysisResult
from deepread.intake.models import EncodedDocument


class BaseExtractor(ABC):
    """Contract for all extraction adapters."""

    @abstractmethod
    async def extract(self, document: EncodedDocument) -> AnalysisResult:
        """Turn an encoded document into a typed analysis.

        Args:
            document: Base-64 document tagged with its resolved media type.

        Returns:
            AnalysisResult with metadata, concepts, chapters, topics and report.

        Raises:
            ExtractionError: on any failure.
        """

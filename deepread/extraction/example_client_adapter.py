"""Example extraction client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseExtractionClient and register the provider in ExtractorFactory.
"""

import json
from typing import ClassVar

from deepread.extraction.client_base import BaseExtractionClient
from deepread.intake.models import EncodedDocument


class ExampleClientAdapter(BaseExtractionClient):
    """Example adapter that returns a fixed valid analysis JSON.

    No network calls. Useful for local development, tests, and as a template
    for building real provider adapters.
    """

    DEFAULT_RESPONSE: ClassVar[dict[str, object]] = {
        "metadata": {
            "title": "Example Document",
            "author": "Unknown",
            "genre": "Reference",
            "readingTime": "5 min",
        },
        "executiveSummary": "A placeholder analysis produced without calling a provider.",
        "keyConcepts": [
            {
                "term": "Structured output",
                "definition": "A response constrained to a fixed JSON schema.",
                "importance": 85,
            },
        ],
        "chapterBreakdown": [
            {
                "title": "Introduction",
                "summary": "Describes what the document is about.",
                "insight": "Every analysis starts from the same schema.",
            },
        ],
        "topicStats": [{"topic": "Documentation", "relevance": 70}],
        "fullMarkdownReport": "# Example Document\n\n- **Structured output** keeps notes consistent.\n",
    }

    def __init__(self) -> None:
        pass

    async def generate_structured(
        self,
        *,
        model: str,
        document: EncodedDocument,
        instruction: str,
        json_schema: dict[str, object],
    ) -> str:
        _ = model, document, instruction, json_schema
        return json.dumps(self.DEFAULT_RESPONSE)

"""Tests for ExampleClientAdapter (template/reference adapter)."""

import json

import pytest

from deepread.extraction.example_client_adapter import ExampleClientAdapter
from deepread.extraction.validator import validate_and_build
from deepread.intake.models import EncodedDocument


def _document(media_type: str = "application/pdf") -> EncodedDocument:
    return EncodedDocument(media_type=media_type, data="")


class TestExampleClientAdapter:
    @pytest.mark.asyncio
    async def test_returns_schema_valid_json(self) -> None:
        adapter = ExampleClientAdapter()
        result = await adapter.generate_structured(
            model="any",
            document=_document(),
            instruction="",
            json_schema={"type": "object"},
        )
        parsed = json.loads(result)
        analysis = validate_and_build(parsed)
        assert analysis.metadata.title == "Example Document"
        assert analysis.key_concepts[0].importance == 85

    @pytest.mark.asyncio
    async def test_ignores_input_parameters(self) -> None:
        adapter = ExampleClientAdapter()
        r1 = await adapter.generate_structured(
            model="a", document=_document(), instruction="i1", json_schema={"k": "v"}
        )
        r2 = await adapter.generate_structured(
            model="b", document=_document("text/plain"), instruction="i2", json_schema={}
        )
        assert r1 == r2

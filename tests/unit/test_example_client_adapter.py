"""Tests for ExampleClientAdapter (template/reference adapter)."""

import json

import pytest

from passport_reader.extraction.example_client_adapter import ExampleClientAdapter
from passport_reader.extraction.validator import validate_and_build


async def _complete(adapter: ExampleClientAdapter, model: str = "any") -> str:
    return await adapter.create_vision_completion(
        model=model,
        temperature=0.0,
        system_prompt="sys",
        user_prompt="user",
        image_data_url="data:image/png;base64,AAAA",
        json_schema={"type": "object"},
    )


class TestExampleClientAdapter:
    @pytest.mark.asyncio
    async def test_returns_schema_complete_json(self) -> None:
        result = await _complete(ExampleClientAdapter())
        record = validate_and_build(json.loads(result))
        assert record.name == "ERIKA MUSTERMANN"

    @pytest.mark.asyncio
    async def test_ignores_input_parameters(self) -> None:
        adapter = ExampleClientAdapter()
        assert await _complete(adapter, "a") == await _complete(adapter, "b")

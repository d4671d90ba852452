"""Tests for ExtractorFactory."""

from unittest.mock import patch

import pytest

from passport_reader.config.settings import Settings
from passport_reader.extraction.base import BaseExtractor
from passport_reader.extraction.extractor import PassportExtractor
from passport_reader.extraction.factory import ExtractorFactory
from passport_reader.ingestion.models import EncodedImage


class TestExtractorFactory:
    @pytest.mark.asyncio
    async def test_example_provider_needs_no_network(self, encoded_image: EncodedImage) -> None:
        extractor = ExtractorFactory.create(Settings(extraction_provider="example"))
        assert isinstance(extractor, PassportExtractor)
        record = await extractor.extract(encoded_image)
        assert record.passport_number == "C01X00T47"

    def test_creates_extractor(self) -> None:
        settings = Settings(extraction_provider="openai", extraction_openai_api_key="k")
        with patch("passport_reader.extraction.factory.OpenAIClientAdapter"):
            extractor = ExtractorFactory.create(settings)
        assert isinstance(extractor, BaseExtractor)

    def test_uses_openai_settings(self) -> None:
        settings = Settings(
            extraction_provider="openai",
            extraction_openai_api_key="openai-key",
            extraction_openai_timeout_seconds=42,
        )
        with patch("passport_reader.extraction.factory.OpenAIClientAdapter") as mock_adapter:
            ExtractorFactory.create(settings)
        mock_adapter.assert_called_once_with(
            api_key="openai-key",
            timeout_seconds=42,
            base_url=None,
        )

    def test_uses_gemini_base_url(self) -> None:
        settings = Settings(extraction_provider="Gemini", extraction_gemini_api_key="g")
        with patch("passport_reader.extraction.factory.OpenAIClientAdapter") as mock_adapter:
            ExtractorFactory.create(settings)
        mock_adapter.assert_called_once_with(
            api_key="g",
            timeout_seconds=30,
            base_url="https://generativelanguage.googleapis.com/v1beta/openai/",
        )

    def test_uses_custom_base_url_for_openai_compatible(self) -> None:
        settings = Settings(
            extraction_provider="openai_compatible",
            extraction_openai_compatible_api_key="k",
            extraction_openai_compatible_model_name="m",
            extraction_openai_compatible_base_url="https://example.com/v1",
        )
        with patch("passport_reader.extraction.factory.OpenAIClientAdapter") as mock_adapter:
            ExtractorFactory.create(settings)
        mock_adapter.assert_called_once_with(
            api_key="k",
            timeout_seconds=30,
            base_url="https://example.com/v1",
        )

    def test_openai_compatible_requires_base_url(self) -> None:
        settings = Settings(extraction_provider="openai_compatible")
        with pytest.raises(ValueError, match="extraction_openai_compatible_base_url"):
            ExtractorFactory.create(settings)

    def test_unknown_provider_raises_value_error(self) -> None:
        settings = Settings(extraction_provider="unknown")
        with pytest.raises(ValueError, match="Unknown extraction provider"):
            ExtractorFactory.create(settings)

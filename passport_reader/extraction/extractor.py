"""AI-powered passport field extractor."""

import json
from pathlib import Path

from passport_reader.extraction.base import BaseExtractor
from passport_reader.extraction.client_base import BaseExtractionClient
from passport_reader.extraction.exceptions import SchemaError
from passport_reader.extraction.models import PassportData
from passport_reader.extraction.prompt_loader import load_json_schema, load_prompt_template
from passport_reader.extraction.validator import validate_and_build
from passport_reader.ingestion.models import EncodedImage
from passport_reader.logging.logger import Log

DEFAULT_SYSTEM_PROMPT = (
    "You are a document reader that extracts passport fields into strict JSON."
)


class PassportExtractor(BaseExtractor):
    """Extracts passport fields from an encoded image using a multimodal AI provider."""

    def __init__(
        self,
        *,
        client: BaseExtractionClient,
        model: str,
        temperature: float = 0.0,
        prompt_template_path: Path | None = None,
        json_schema_path: Path | None = None,
        system_prompt: str = DEFAULT_SYSTEM_PROMPT,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(0.2, temperature))
        self._system_prompt = system_prompt
        self._prompt_template = load_prompt_template(prompt_template_path)
        schema_str = load_json_schema(json_schema_path)
        self._json_schema = schema_str
        self._json_schema_dict = json.loads(schema_str)

    async def extract(self, image: EncodedImage) -> PassportData:
        """Issue a single provider call and validate the reply."""
        prompt = self._prompt_template.format(json_schema=self._json_schema)
        Log.debug(f"Extraction prompt:\n{prompt}")

        raw_response = await self._client.create_vision_completion(
            model=self._model,
            temperature=self._temperature,
            system_prompt=self._system_prompt,
            user_prompt=prompt,
            image_data_url=image.data_url,
            json_schema=self._json_schema_dict,
        )
        Log.debug(f"AI raw response:\n{raw_response}")

        record = validate_and_build(self._parse_json(raw_response))
        Log.info(f"Extraction complete for passport {record.passport_number or '(no number)'}")
        return record

    @staticmethod
    def _parse_json(raw: str) -> object:
        cleaned = raw.strip()
        if cleaned.startswith("```"):
            lines = cleaned.splitlines()
            if lines and lines[0].startswith("```"):
                lines = lines[1:]
            if lines and lines[-1].strip() == "```":
                lines = lines[:-1]
            cleaned = "\n".join(lines)

        try:
            return json.loads(cleaned)
        except json.JSONDecodeError as exc:
            raise SchemaError(f"Invalid JSON response: {exc}") from exc

"""Example extraction client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseExtractionClient and register the provider in ExtractorFactory.
"""

import json
from typing import ClassVar

from passport_reader.extraction.client_base import BaseExtractionClient


class ExampleClientAdapter(BaseExtractionClient):
    """Example adapter that returns a fixed specimen passport record.

    No network calls. Useful for local development and tests.
    """

    DEFAULT_RESPONSE: ClassVar[dict[str, str]] = {
        "name": "ERIKA MUSTERMANN",
        "passportNumber": "C01X00T47",
        "nationality": "DEUTSCH",
        "dateOfBirth": "1964-08-12",
        "dateOfIssue": "2017-11-01",
        "dateOfExpiry": "2027-10-31",
        "sex": "F",
        "issuingCountry": "D",
    }

    def __init__(self) -> None:
        pass

    async def create_vision_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
        image_data_url: str,
        json_schema: dict[str, object],
    ) -> str:
        _ = model, temperature, system_prompt, user_prompt, image_data_url, json_schema
        return json.dumps(self.DEFAULT_RESPONSE)

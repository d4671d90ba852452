import httpx
import openai

from passport_reader.extraction.client_base import BaseExtractionClient
from passport_reader.extraction.exceptions import (
    ServiceError,
    ServiceInputError,
    ServiceNetworkError,
    ServiceRateLimitError,
)


class OpenAIClientAdapter(BaseExtractionClient):
    """Extraction client built on the OpenAI-compatible chat API.

    Works against any endpoint that accepts image parts in chat messages,
    including Gemini's OpenAI-compatible endpoint.
    """

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.AsyncOpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
            max_retries=0,
        )

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
        try:
            response = await self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                response_format={
                    "type": "json_schema",
                    "json_schema": {
                        "name": "passport_data",
                        "strict": True,
                        "schema": json_schema,
                    },
                },
                messages=[
                    {"role": "system", "content": system_prompt},
                    {
                        "role": "user",
                        "content": [
                            {"type": "text", "text": user_prompt},
                            {"type": "image_url", "image_url": {"url": image_data_url}},
                        ],
                    },
                ],
            )
        except openai.RateLimitError as exc:
            raise ServiceRateLimitError(f"rate limit exceeded: {exc}") from exc
        except openai.BadRequestError as exc:
            raise ServiceInputError(f"AI provider rejected the request: {exc}") from exc
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise ServiceNetworkError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise ServiceError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise ServiceError("AI returned no choices")
        content = response.choices[0].message.content
        if content is None:
            raise ServiceError("AI returned empty response")
        return content

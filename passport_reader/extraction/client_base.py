from abc import ABC, abstractmethod


class BaseExtractionClient(ABC):
    """Contract for provider-specific multimodal AI clients."""

    @abstractmethod
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
        """Send one prompt with one image and return the reply as plain text.

        Raises:
            ServiceError: on any provider failure.
        """

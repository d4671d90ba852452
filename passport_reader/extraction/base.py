from abc import ABC, abstractmethod

from passport_reader.extraction.models import PassportData
from passport_reader.ingestion.models import EncodedImage


class BaseExtractor(ABC):
    """Contract for the passport extraction service."""

    @abstractmethod
    async def extract(self, image: EncodedImage) -> PassportData:
        """Read passport fields from an encoded image.

        Args:
            image: Data URL produced by ingestion.

        Returns:
            A schema-complete PassportData.

        Raises:
            ServiceError: if the remote call fails.
            SchemaError: if the reply does not match the passport schema.
        """

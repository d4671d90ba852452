from passport_reader.ingestion.exceptions import (
    ImageReadError,
    IngestionError,
    UnsupportedMediaTypeError,
)
from passport_reader.ingestion.ingestor import ingest
from passport_reader.ingestion.models import EncodedImage, RawImage

__all__ = [
    "EncodedImage",
    "ImageReadError",
    "IngestionError",
    "RawImage",
    "UnsupportedMediaTypeError",
    "ingest",
]

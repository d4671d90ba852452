"""Turns a selected file into a transmittable data URL."""

from passport_reader.ingestion.exceptions import ImageReadError, UnsupportedMediaTypeError
from passport_reader.ingestion.models import EncodedImage, RawImage
from passport_reader.logging.logger import Log


def normalize_media_type(media_type: str) -> str:
    """Lower-case the type and drop any ``;`` parameters."""
    return media_type.split(";", 1)[0].strip().lower()


async def ingest(file: RawImage) -> EncodedImage:
    """Read the whole file and encode it as a data URL.

    No size ceiling is applied here.

    Raises:
        UnsupportedMediaTypeError: if the declared type is not ``image/*``.
        ImageReadError: if the underlying handle fails to read.
    """
    media_type = normalize_media_type(file.media_type)
    if not media_type.startswith("image/") or media_type == "image/":
        raise UnsupportedMediaTypeError(
            f"'{file.media_type}' is not an image media type"
        )

    try:
        data = await file.read()
    except OSError as exc:
        raise ImageReadError(f"Failed to read {file.name or 'file'}: {exc}") from exc

    Log.info(f"Ingested {file.name or 'image'}: {len(data)} bytes of {media_type}")
    return EncodedImage.from_bytes(data, media_type)

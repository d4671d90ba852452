import base64
import binascii
import mimetypes
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from pathlib import Path

import aiofiles

_DATA_URL_PREFIX = "data:"
_BASE64_MARKER = ";base64,"


@dataclass(frozen=True)
class RawImage:
    """A user-selected file: declared media type plus a handle to its bytes.

    The content is not held in memory; ``read`` is awaited once during
    ingestion and the result is dropped after encoding.
    """

    media_type: str
    read: Callable[[], Awaitable[bytes]] = field(repr=False)
    name: str = ""

    @classmethod
    def from_path(cls, path: Path, media_type: str | None = None) -> "RawImage":
        """Wrap a file on disk. The media type is guessed from the name if absent."""
        if media_type is None:
            media_type = mimetypes.guess_type(path.name)[0] or "application/octet-stream"

        async def read() -> bytes:
            async with aiofiles.open(path, "rb") as f:
                return await f.read()

        return cls(media_type=media_type, read=read, name=path.name)

    @classmethod
    def from_bytes(cls, data: bytes, media_type: str, name: str = "") -> "RawImage":
        async def read() -> bytes:
            return data

        return cls(media_type=media_type, read=read, name=name)


@dataclass(frozen=True)
class EncodedImage:
    """A ``data:<media type>;base64,<payload>`` string.

    Used both as the request payload for extraction and as the preview source.
    """

    data_url: str

    def __post_init__(self) -> None:
        if not self.data_url.startswith(_DATA_URL_PREFIX) or _BASE64_MARKER not in self.data_url:
            raise ValueError("data_url must be a base64 data URL")

    @classmethod
    def from_bytes(cls, data: bytes, media_type: str) -> "EncodedImage":
        payload = base64.b64encode(data).decode("ascii")
        return cls(data_url=f"{_DATA_URL_PREFIX}{media_type}{_BASE64_MARKER}{payload}")

    @property
    def media_type(self) -> str:
        header, _ = self.data_url.split(_BASE64_MARKER, 1)
        return header[len(_DATA_URL_PREFIX):]

    @property
    def payload(self) -> str:
        return self.data_url.split(_BASE64_MARKER, 1)[1]

    def decode(self) -> bytes:
        """Return the original bytes.

        Raises:
            ValueError: if the payload is not valid base64.
        """
        try:
            return base64.b64decode(self.payload, validate=True)
        except binascii.Error as exc:
            raise ValueError(f"Invalid base64 payload: {exc}") from exc

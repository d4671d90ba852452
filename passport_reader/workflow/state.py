from dataclasses import dataclass
from typing import ClassVar

from passport_reader.extraction.models import PassportData
from passport_reader.ingestion.models import EncodedImage


@dataclass(frozen=True)
class Idle:
    """No image selected."""

    name: ClassVar[str] = "idle"

    generation: int = 0


@dataclass(frozen=True)
class Ready:
    """Image selected, not yet extracted."""

    name: ClassVar[str] = "ready"

    image: EncodedImage
    generation: int = 0


@dataclass(frozen=True)
class Extracting:
    """Extraction request in flight."""

    name: ClassVar[str] = "extracting"

    image: EncodedImage
    generation: int = 0


@dataclass(frozen=True)
class Succeeded:
    """Extraction finished with a validated record."""

    name: ClassVar[str] = "succeeded"

    image: EncodedImage
    record: PassportData
    generation: int = 0


@dataclass(frozen=True)
class Failed:
    """Ingestion or extraction failed."""

    name: ClassVar[str] = "failed"

    error: str
    generation: int = 0


WorkflowState = Idle | Ready | Extracting | Succeeded | Failed

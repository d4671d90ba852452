import pytest

from passport_reader.extraction.models import PassportData
from passport_reader.ingestion.models import EncodedImage


@pytest.fixture()
def png_bytes() -> bytes:
    """PNG signature followed by an arbitrary body; enough for ingestion."""
    return b"\x89PNG\r\n\x1a\n" + bytes(range(256))


@pytest.fixture()
def encoded_image(png_bytes: bytes) -> EncodedImage:
    return EncodedImage.from_bytes(png_bytes, "image/png")


@pytest.fixture()
def passport_payload() -> dict[str, str]:
    return {
        "name": "JANE DOE",
        "passportNumber": "X1234567",
        "nationality": "CANADIAN",
        "dateOfBirth": "1985-03-14",
        "dateOfIssue": "2019-06-01",
        "dateOfExpiry": "2029-06-01",
        "sex": "F",
        "issuingCountry": "CAN",
    }


@pytest.fixture()
def passport_record(passport_payload: dict[str, str]) -> PassportData:
    return PassportData.from_dict(passport_payload)

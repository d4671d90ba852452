from dataclasses import dataclass, fields
from typing import ClassVar

from passport_reader.extraction.exceptions import SchemaError


@dataclass(frozen=True)
class PassportData:
    """Fields read from a passport data page.

    Every field is always present; an empty string means the service could
    not determine the value.
    """

    name: str = ""
    passport_number: str = ""
    nationality: str = ""
    date_of_birth: str = ""
    date_of_issue: str = ""
    date_of_expiry: str = ""
    sex: str = ""
    issuing_country: str = ""

    WIRE_KEYS: ClassVar[dict[str, str]] = {
        "name": "name",
        "passport_number": "passportNumber",
        "nationality": "nationality",
        "date_of_birth": "dateOfBirth",
        "date_of_issue": "dateOfIssue",
        "date_of_expiry": "dateOfExpiry",
        "sex": "sex",
        "issuing_country": "issuingCountry",
    }

    @classmethod
    def from_dict(cls, data: dict[str, str]) -> "PassportData":
        """Build from a wire mapping that carries every field key.

        Raises:
            SchemaError: if any field key is missing.
        """
        missing = [key for key in cls.WIRE_KEYS.values() if key not in data]
        if missing:
            raise SchemaError(f"Missing required field(s): {', '.join(missing)}")
        return cls(**{attr: data[key] for attr, key in cls.WIRE_KEYS.items()})

    def to_dict(self) -> dict[str, str]:
        return {self.WIRE_KEYS[f.name]: getattr(self, f.name) for f in fields(self)}


PASSPORT_FIELDS: tuple[str, ...] = tuple(PassportData.WIRE_KEYS.values())

import pytest

from passport_reader.extraction.exceptions import SchemaError
from passport_reader.extraction.models import PASSPORT_FIELDS, PassportData


class TestPassportData:
    def test_to_dict_uses_wire_keys(self, passport_record: PassportData) -> None:
        data = passport_record.to_dict()
        assert list(data) == list(PASSPORT_FIELDS)
        assert data["passportNumber"] == "X1234567"
        assert data["dateOfExpiry"] == "2029-06-01"

    def test_from_dict_matches_payload(self, passport_payload: dict[str, str]) -> None:
        assert PassportData.from_dict(passport_payload).to_dict() == passport_payload

    def test_default_record_is_schema_complete(self) -> None:
        data = PassportData().to_dict()
        assert set(data) == set(PASSPORT_FIELDS)
        assert all(value == "" for value in data.values())

    def test_records_compare_by_value(self, passport_payload: dict[str, str]) -> None:
        assert PassportData.from_dict(passport_payload) == PassportData.from_dict(
            dict(passport_payload)
        )

    def test_from_dict_rejects_missing_key(self, passport_payload: dict[str, str]) -> None:
        del passport_payload["issuingCountry"]
        with pytest.raises(SchemaError, match="issuingCountry"):
            PassportData.from_dict(passport_payload)

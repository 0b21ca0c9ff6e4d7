"""EndorsementRecordConverter のテスト."""

import logging

import pytest

from parrainages.domain.exceptions import DecodeError
from parrainages.domain.value_objects.endorsement_record import EndorsementRecord
from parrainages.infrastructure.external.parrainages_tracker.converter import (
    EndorsementRecordConverter,
)
from tests.fixtures.endorsement_record_factories import make_endorsement_dict


class TestToRecords:
    """to_records メソッドのテスト."""

    def test_convert_full_record(self) -> None:
        payload = [make_endorsement_dict(name="A", candidate="zemmour")]

        result = EndorsementRecordConverter.to_records(payload)

        assert result == [
            EndorsementRecord(
                name="A",
                constituency="Yvelines",
                candidate="zemmour",
                civility="M.",
                mandate="Maire de Villeneuve",
            )
        ]

    def test_optional_fields_may_be_missing(self) -> None:
        payload = [{"name": "A", "constituency": "X1", "candidate": "fillon"}]

        result = EndorsementRecordConverter.to_records(payload)

        assert result[0].civility is None
        assert result[0].mandate is None

    def test_optional_fields_may_be_null(self) -> None:
        payload = [make_endorsement_dict() | {"civility": None, "mandate": None}]

        result = EndorsementRecordConverter.to_records(payload)

        assert result[0].civility is None

    def test_extra_fields_are_ignored(self) -> None:
        payload = [make_endorsement_dict() | {"date": "2022-02-22", "id": 12}]

        result = EndorsementRecordConverter.to_records(payload)

        assert len(result) == 1

    def test_empty_array(self) -> None:
        assert EndorsementRecordConverter.to_records([]) == []

    def test_top_level_object_is_rejected(self) -> None:
        with pytest.raises(DecodeError, match="配列"):
            EndorsementRecordConverter.to_records({"data": []}, source="x.json")

    def test_non_object_element_is_rejected(self) -> None:
        with pytest.raises(DecodeError, match="要素 1"):
            EndorsementRecordConverter.to_records([make_endorsement_dict(), "oops"])

    @pytest.mark.parametrize("field_name", ["name", "constituency", "candidate"])
    def test_missing_required_field_is_rejected(self, field_name: str) -> None:
        item = make_endorsement_dict()
        del item[field_name]

        with pytest.raises(DecodeError, match=field_name):
            EndorsementRecordConverter.to_records([item])

    def test_non_string_optional_field_is_rejected(self) -> None:
        item = make_endorsement_dict() | {"mandate": 42}

        with pytest.raises(DecodeError, match="mandate"):
            EndorsementRecordConverter.to_records([item])

    def test_unknown_civility_is_kept_and_logged(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        payload = [make_endorsement_dict(civility="Dr")]

        with caplog.at_level(logging.WARNING):
            result = EndorsementRecordConverter.to_records(payload)

        assert result[0].civility == "Dr"
        assert "Dr" in caplog.text

    def test_error_carries_source(self) -> None:
        with pytest.raises(DecodeError) as exc_info:
            EndorsementRecordConverter.to_records("nope", source="data-2017.json")

        assert exc_info.value.source == "data-2017.json"

"""LocalEndorsementDataSourceのテスト."""

import json

from pathlib import Path

import pytest

from parrainages.domain.exceptions import DecodeError, FileAccessError
from parrainages.infrastructure.importers.local_endorsement_data_source import (
    LocalEndorsementDataSource,
)
from tests.fixtures.endorsement_record_factories import make_endorsement_dict


@pytest.fixture
def data_source() -> LocalEndorsementDataSource:
    return LocalEndorsementDataSource()


def _write_json(path: Path, data: object) -> Path:
    path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
    return path


class TestLoad:
    def test_load_records(self, data_source, tmp_path: Path) -> None:
        file_path = _write_json(
            tmp_path / "data-2017.json",
            [
                {"name": "Élise Lucet", "constituency": "Côte-d'Or", "candidate": "fillon"},
                make_endorsement_dict(name="B", candidate="macron"),
            ],
        )

        records = data_source.load(file_path)

        assert len(records) == 2
        assert records[0].name == "Élise Lucet"
        assert records[0].mandate is None
        assert records[1].candidate == "macron"

    def test_relative_path_resolved_from_cwd(
        self, data_source, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        _write_json(tmp_path / "data-2017.json", [make_endorsement_dict()])
        monkeypatch.chdir(tmp_path)

        records = data_source.load(Path("data-2017.json"))

        assert len(records) == 1

    def test_missing_file(self, data_source, tmp_path: Path) -> None:
        missing = tmp_path / "nope.json"

        with pytest.raises(FileAccessError) as exc_info:
            data_source.load(missing)

        assert exc_info.value.path == missing

    def test_directory_is_unreadable(self, data_source, tmp_path: Path) -> None:
        with pytest.raises(FileAccessError):
            data_source.load(tmp_path)

    def test_malformed_json(self, data_source, tmp_path: Path) -> None:
        file_path = tmp_path / "broken.json"
        file_path.write_text("[{", encoding="utf-8")

        with pytest.raises(DecodeError):
            data_source.load(file_path)

    def test_invalid_utf8(self, data_source, tmp_path: Path) -> None:
        file_path = tmp_path / "latin1.json"
        file_path.write_bytes('[{"name": "Hélène"}]'.encode("latin-1"))

        with pytest.raises(DecodeError, match="UTF-8"):
            data_source.load(file_path)

    def test_wrong_shape(self, data_source, tmp_path: Path) -> None:
        file_path = _write_json(tmp_path / "object.json", {"records": []})

        with pytest.raises(DecodeError) as exc_info:
            data_source.load(file_path)

        assert exc_info.value.source == str(file_path)

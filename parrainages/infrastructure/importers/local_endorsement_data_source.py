"""ローカルJSONファイルからの推薦署名データソース.

前回選挙（例: data-2017.json）の推薦署名をファイルから同期的に読み込む。
"""

import json
import logging

from pathlib import Path

from parrainages.domain.exceptions import DecodeError, FileAccessError
from parrainages.domain.value_objects.endorsement_record import EndorsementRecord
from parrainages.infrastructure.external.parrainages_tracker.converter import (
    EndorsementRecordConverter,
)


logger = logging.getLogger(__name__)


class LocalEndorsementDataSource:
    """JSON配列ファイルから推薦署名を読み込むデータソース."""

    def load(self, file_path: Path) -> list[EndorsementRecord]:
        """ファイル全体を読み込み、推薦署名のリストを返す.

        Args:
            file_path: JSONファイルのパス（相対パスはカレントディレクトリ基準）

        Raises:
            FileAccessError: ファイルが存在しない、または読み込めない場合
            DecodeError: UTF-8/JSONとして不正、または配列の形状でない場合
        """
        raw = self._read_bytes(file_path)
        source = str(file_path)

        try:
            payload = json.loads(raw.decode("utf-8"))
        except UnicodeDecodeError as e:
            raise DecodeError(
                f"UTF-8として解釈できません: {file_path}", source=source
            ) from e
        except json.JSONDecodeError as e:
            raise DecodeError(
                f"不正なJSONです: {file_path} ({e})", source=source
            ) from e

        records = EndorsementRecordConverter.to_records(payload, source=source)
        logger.info("%s から %d 件の推薦署名を読み込みました", file_path, len(records))
        return records

    def _read_bytes(self, file_path: Path) -> bytes:
        try:
            return Path(file_path).read_bytes()
        except FileNotFoundError as e:
            raise FileAccessError(
                f"ファイルが見つかりません: {file_path}", path=Path(file_path)
            ) from e
        except OSError as e:
            raise FileAccessError(
                f"ファイルを読み込めません: {file_path} ({e})", path=Path(file_path)
            ) from e

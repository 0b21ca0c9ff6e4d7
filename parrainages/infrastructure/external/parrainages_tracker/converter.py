"""推薦署名JSONをドメインの値オブジェクトに変換するコンバーター.

純粋な変換ロジックのみ担当。取得元（リモート/ローカル）には依存しない。
"""

from __future__ import annotations

import logging

from typing import Any

from parrainages.domain.exceptions import DecodeError
from parrainages.domain.value_objects.endorsement_record import (
    KNOWN_CIVILITIES,
    EndorsementRecord,
)


logger = logging.getLogger(__name__)

_REQUIRED_FIELDS = ("name", "constituency", "candidate")
_OPTIONAL_FIELDS = ("civility", "mandate")


class EndorsementRecordConverter:
    """推薦署名JSONの純粋変換ロジック."""

    @staticmethod
    def to_records(payload: Any, source: str | None = None) -> list[EndorsementRecord]:
        """JSON配列 → EndorsementRecord のリストに変換する.

        Args:
            payload: json.loads 済みのデータ
            source: エラーメッセージ用の取得元（URLやファイルパス）

        Raises:
            DecodeError: 配列でない、または要素が不正な場合
        """
        if not isinstance(payload, list):
            raise DecodeError(
                f"JSONの最上位が配列ではありません: {type(payload).__name__}",
                source=source,
            )

        records = [
            EndorsementRecordConverter.to_record(item, index, source)
            for index, item in enumerate(payload)
        ]

        unknown = {
            r.civility
            for r in records
            if r.civility is not None and r.civility not in KNOWN_CIVILITIES
        }
        if unknown:
            logger.warning(
                "未知のcivility値を独立したカテゴリとして扱います: %s",
                sorted(unknown),
            )
        return records

    @staticmethod
    def to_record(
        item: Any, index: int = 0, source: str | None = None
    ) -> EndorsementRecord:
        """JSONオブジェクト1件 → EndorsementRecord に変換する."""
        if not isinstance(item, dict):
            raise DecodeError(
                f"要素 {index} がオブジェクトではありません: {type(item).__name__}",
                source=source,
            )

        values: dict[str, str | None] = {}
        for field_name in _REQUIRED_FIELDS:
            value = item.get(field_name)
            if not isinstance(value, str):
                raise DecodeError(
                    f"要素 {index} の必須フィールド '{field_name}' が不正です: {value!r}",
                    source=source,
                )
            values[field_name] = value

        for field_name in _OPTIONAL_FIELDS:
            value = item.get(field_name)
            if value is not None and not isinstance(value, str):
                raise DecodeError(
                    f"要素 {index} のフィールド '{field_name}' が文字列ではありません: "
                    f"{value!r}",
                    source=source,
                )
            values[field_name] = value

        return EndorsementRecord(**values)

"""推薦署名の集計ドメインサービス."""

from __future__ import annotations

import math

from collections.abc import Sequence

from parrainages.domain.value_objects.endorsement_record import EndorsementRecord


class EndorsementStatisticsService:
    """1年分の推薦署名コレクションに対する集計クエリ.

    いずれのメソッドもI/Oを行わず、入力を変更しない。
    """

    def percentage_with_civility(
        self, records: Sequence[EndorsementRecord], value: str
    ) -> float:
        """civility が value に一致するレコードの割合（%）を返す.

        Args:
            records: 集計対象のレコード
            value: 比較する敬称（"M." / "Mme" など）

        Returns:
            0〜100の割合。records が空の場合は割合が定義できないため nan を返す。
        """
        if not records:
            return math.nan
        matched = sum(1 for r in records if r.civility == value)
        return matched / len(records) * 100

    def count_by_mandate_substring(
        self, records: Sequence[EndorsementRecord], substring: str
    ) -> int:
        """mandate に substring を含むレコード数（正規化なしの完全一致部分文字列）."""
        return sum(1 for r in records if r.has_mandate_containing(substring))

    def count_by_candidate_and_civility_and_mandate(
        self,
        records: Sequence[EndorsementRecord],
        candidate: str,
        civility: str,
        substring: str,
    ) -> int:
        """候補者・敬称・mandate部分文字列の3条件をすべて満たすレコード数."""
        return sum(
            1
            for r in records
            if r.candidate == candidate
            and r.civility == civility
            and r.has_mandate_containing(substring)
        )

    def distinct_candidates(self, records: Sequence[EndorsementRecord]) -> list[str]:
        """推薦を受けた候補者の一覧（重複なし、初出順）."""
        return list(dict.fromkeys(r.candidate for r in records))

    def filter_by_candidate(
        self, records: Sequence[EndorsementRecord], candidate: str
    ) -> list[EndorsementRecord]:
        """指定候補者への推薦のみを返す."""
        return [r for r in records if r.candidate == candidate]

    def count_by_candidate(self, records: Sequence[EndorsementRecord]) -> dict[str, int]:
        """候補者ごとの推薦数（件数の降順、同数は初出順）."""
        counts: dict[str, int] = {}
        for r in records:
            counts[r.candidate] = counts.get(r.candidate, 0) + 1
        return dict(sorted(counts.items(), key=lambda item: item[1], reverse=True))

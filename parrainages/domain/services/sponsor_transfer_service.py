"""年度間の推薦先の移り変わりを集計するドメインサービス."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from parrainages.domain.value_objects.endorsement_record import EndorsementRecord


class SponsorTransferService:
    """今回の推薦者が前回どの候補者を推薦していたかを集計する.

    同一人物の判定は (name, constituency) の一致で行う。
    データ量が小さいため前回データは線形探索する。
    """

    def find_prior_record(
        self,
        record: EndorsementRecord,
        prior_records: Iterable[EndorsementRecord],
    ) -> EndorsementRecord | None:
        """record と同一人物の前回レコードを返す（複数ある場合は最初の1件）."""
        key = record.identity_key
        return next((p for p in prior_records if p.identity_key == key), None)

    def tally_prior_candidates(
        self,
        current_records: Sequence[EndorsementRecord],
        prior_records: Sequence[EndorsementRecord],
    ) -> dict[str, int]:
        """前回の推薦先候補者ごとの人数を返す.

        Args:
            current_records: 今回のレコード（通常は1候補者で絞り込み済み）
            prior_records: 前回の全レコード

        Returns:
            前回候補者 → 人数。前回データに見つからない推薦者は数えない。
        """
        tally: dict[str, int] = {}
        for record in current_records:
            prior = self.find_prior_record(record, prior_records)
            if prior is None:
                continue
            tally[prior.candidate] = tally.get(prior.candidate, 0) + 1
        return tally

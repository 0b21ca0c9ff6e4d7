"""推薦署名の取得・集計UseCase.

今回の推薦署名をリモートから取得して集計し、前回データが指定されていれば
注目候補者の推薦者が前回どの候補者を推薦していたかを突き合わせる。
"""

from parrainages.application.dtos.endorsement_analysis_dto import (
    AnalyzeEndorsementsInputDto,
    AnalyzeEndorsementsOutputDto,
)
from parrainages.common.logging import get_logger
from parrainages.domain.services.endorsement_statistics_service import (
    EndorsementStatisticsService,
)
from parrainages.domain.services.sponsor_transfer_service import SponsorTransferService
from parrainages.infrastructure.external.parrainages_tracker.client import (
    ParrainagesTrackerClient,
)
from parrainages.infrastructure.importers.local_endorsement_data_source import (
    LocalEndorsementDataSource,
)


class AnalyzeEndorsementsUseCase:
    """推薦署名の取得・集計UseCase.

    取得・パースのエラー（RetrievalError / FileAccessError / DecodeError）は
    捕捉せず呼び出し元に伝播させる。
    """

    def __init__(
        self,
        tracker_client: ParrainagesTrackerClient,
        local_data_source: LocalEndorsementDataSource | None = None,
        statistics_service: EndorsementStatisticsService | None = None,
        transfer_service: SponsorTransferService | None = None,
    ) -> None:
        self._tracker_client = tracker_client
        self._local_data_source = local_data_source or LocalEndorsementDataSource()
        self._statistics = statistics_service or EndorsementStatisticsService()
        self._transfers = transfer_service or SponsorTransferService()
        self._logger = get_logger(self.__class__.__name__)

    async def execute(
        self, input_dto: AnalyzeEndorsementsInputDto
    ) -> AnalyzeEndorsementsOutputDto:
        """推薦署名を取得して集計する.

        Args:
            input_dto: 対象年・注目候補者・集計条件

        Returns:
            集計結果DTO
        """
        records = await self._tracker_client.fetch_endorsements(input_dto.year)
        if not records:
            self._logger.warning(f"{input_dto.year}年の推薦署名が0件です")

        output = AnalyzeEndorsementsOutputDto(
            year=input_dto.year,
            total_records=len(records),
            civility_percentage=self._statistics.percentage_with_civility(
                records, input_dto.share_civility
            ),
            mandate_count=self._statistics.count_by_mandate_substring(
                records, input_dto.mandate_substring
            ),
            focused_count=self._statistics.count_by_candidate_and_civility_and_mandate(
                records,
                input_dto.candidate,
                input_dto.civility,
                input_dto.mandate_substring,
            ),
            distinct_candidates=self._statistics.distinct_candidates(records),
            endorsements_by_candidate=self._statistics.count_by_candidate(records),
        )

        if input_dto.prior_year_file is not None:
            prior_records = self._local_data_source.load(input_dto.prior_year_file)
            focused = self._statistics.filter_by_candidate(records, input_dto.candidate)
            output.transfers = self._transfers.tally_prior_candidates(
                focused, prior_records
            )
            self._logger.info(
                f"{input_dto.candidate} の推薦者 {len(focused)} 名のうち "
                f"{sum(output.transfers.values())} 名が前回も推薦"
            )

        return output

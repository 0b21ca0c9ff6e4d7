"""Les Echos 推薦署名トラッカーのデータ取得クライアント."""

from __future__ import annotations

import logging

from parrainages.domain.value_objects.endorsement_record import EndorsementRecord
from parrainages.infrastructure.config.settings import DEFAULT_DATA_URL_TEMPLATE
from parrainages.infrastructure.external.http_fetcher import HttpFetcher
from parrainages.infrastructure.external.parrainages_tracker.converter import (
    EndorsementRecordConverter,
)


logger = logging.getLogger(__name__)


class ParrainagesTrackerClient:
    """年ごとの推薦署名JSONを取得するクライアント."""

    def __init__(
        self,
        fetcher: HttpFetcher | None = None,
        url_template: str = DEFAULT_DATA_URL_TEMPLATE,
    ) -> None:
        self._fetcher = fetcher or HttpFetcher()
        self._url_template = url_template

    def build_url(self, year: int) -> str:
        """年からデータURLを組み立てる."""
        return self._url_template.format(year=year)

    async def fetch_endorsements(self, year: int) -> list[EndorsementRecord]:
        """指定年の推薦署名を全件取得する."""
        url = self.build_url(year)
        logger.info("推薦署名データを取得中: %s", url)

        payload = await self._fetcher.get_json(url)
        records = EndorsementRecordConverter.to_records(payload, source=url)

        logger.info("%d年の推薦署名: %d件", year, len(records))
        return records

"""複数Webページの逐次取得・同時取得.

同時取得は全リクエストを一度に発行し、入力順のまま結果を返す。
逐次取得は前のページ（待機時間を含む）が完了してから次を発行する。
"""

from __future__ import annotations

import asyncio
import logging

from collections.abc import Sequence

from parrainages.domain.value_objects.web_page_content import WebPageContent
from parrainages.infrastructure.external.http_fetcher import HttpFetcher


logger = logging.getLogger(__name__)


class WebPageFetcher:
    """ページ本文を取得し、1件ごとに固定時間待機するフェッチャー."""

    def __init__(self, fetcher: HttpFetcher | None = None) -> None:
        self._fetcher = fetcher or HttpFetcher()

    async def fetch_page(self, url: str, delay_seconds: float = 0.0) -> WebPageContent:
        """1ページを取得し、delay_seconds 待機してから返す."""
        logger.info("スクレイピング中: %s", url)
        body = await self._fetcher.get_text(url)
        if delay_seconds > 0:
            await asyncio.sleep(delay_seconds)
        return WebPageContent(url=url, body=body)

    async def fetch_concurrently(
        self, urls: Sequence[str], delay_seconds: float = 0.0
    ) -> list[WebPageContent]:
        """全ページを同時に取得する.

        所要時間はおおよそ1件あたりの最大所要時間。結果は完了順ではなく入力順。
        """
        return list(
            await asyncio.gather(*(self.fetch_page(url, delay_seconds) for url in urls))
        )

    async def fetch_sequentially(
        self, urls: Sequence[str], delay_seconds: float = 0.0
    ) -> list[WebPageContent]:
        """1ページずつ順に取得する.

        所要時間はおおよそ1件あたりの所要時間の合計。
        """
        pages: list[WebPageContent] = []
        for url in urls:
            pages.append(await self.fetch_page(url, delay_seconds))
        return pages

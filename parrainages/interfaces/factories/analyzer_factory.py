"""推薦署名分析コンポーネントのファクトリー

設定値からHTTPクライアント・UseCaseを組み立てます。
インフラ層の実装はテストで差し替えられるよう呼び出し時にimportします。
"""

from parrainages.application.usecases.analyze_endorsements_usecase import (
    AnalyzeEndorsementsUseCase,
)
from parrainages.infrastructure.config.settings import Settings
from parrainages.infrastructure.external.web_page.fetcher import WebPageFetcher


class AnalyzerFactory:
    """推薦署名分析コンポーネントのファクトリー"""

    @staticmethod
    def create_use_case(settings: Settings) -> AnalyzeEndorsementsUseCase:
        """設定に従ってAnalyzeEndorsementsUseCaseを作成"""
        from parrainages.infrastructure.external.http_fetcher import HttpFetcher
        from parrainages.infrastructure.external.parrainages_tracker.client import (
            ParrainagesTrackerClient,
        )

        fetcher = HttpFetcher(timeout=settings.http_timeout_seconds)
        client = ParrainagesTrackerClient(
            fetcher=fetcher, url_template=settings.data_url_template
        )
        return AnalyzeEndorsementsUseCase(tracker_client=client)

    @staticmethod
    def create_web_page_fetcher(settings: Settings) -> WebPageFetcher:
        """設定に従ってWebPageFetcherを作成"""
        from parrainages.infrastructure.external.http_fetcher import HttpFetcher

        return WebPageFetcher(HttpFetcher(timeout=settings.http_timeout_seconds))

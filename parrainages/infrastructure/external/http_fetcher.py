"""httpx asyncベースのHTTP取得クライアント.

本文をテキストまたはJSONとして返す。キャッシュは持たず、呼び出しごとに取得する。
"""

from __future__ import annotations

import json
import logging

from typing import Any

import httpx

from parrainages.domain.exceptions import DecodeError, RetrievalError


logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 30.0


class HttpFetcher:
    """GETリクエストで本文を取得するクライアント (httpx async)."""

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        timeout: float | None = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self._external_client = client
        self._owns_client = client is None
        self._timeout = timeout

    async def _get_client(self) -> httpx.AsyncClient:
        """HTTPクライアントを取得（外部注入 or 自動生成）."""
        if self._external_client is not None:
            return self._external_client
        return httpx.AsyncClient(timeout=self._timeout, follow_redirects=True)

    async def get_text(self, url: str) -> str:
        """URLの本文をUTF-8テキストとして返す."""
        response = await self._request(url)
        try:
            return response.content.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecodeError(f"UTF-8として解釈できません: {url}", source=url) from e

    async def get_json(self, url: str) -> Any:
        """URLの本文をJSONとしてパースして返す."""
        response = await self._request(url)
        try:
            return json.loads(response.content.decode("utf-8"))
        except UnicodeDecodeError as e:
            raise DecodeError(f"UTF-8として解釈できません: {url}", source=url) from e
        except json.JSONDecodeError as e:
            raise DecodeError(f"不正なJSONです: {url} ({e})", source=url) from e

    async def _request(self, url: str) -> httpx.Response:
        """GETリクエスト実行."""
        client = await self._get_client()
        logger.debug("GET %s", url)

        try:
            response = await client.get(url)
            response.raise_for_status()
            return response
        except httpx.HTTPStatusError as e:
            raise RetrievalError(
                f"HTTPステータスエラー: {e.response.status_code} ({url})",
                url=url,
                status_code=e.response.status_code,
            ) from e
        except httpx.TimeoutException as e:
            raise RetrievalError(f"リクエストタイムアウト: {url}", url=url) from e
        except httpx.HTTPError as e:
            raise RetrievalError(f"HTTPエラー: {e} ({url})", url=url) from e
        finally:
            if self._owns_client:
                await client.aclose()

"""ドメイン共通の例外定義."""

from pathlib import Path


class ParrainagesError(Exception):
    """parrainages の基底例外."""


class RetrievalError(ParrainagesError):
    """リモート取得の失敗（非2xxステータス、通信エラー）."""

    def __init__(
        self,
        message: str,
        url: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class FileAccessError(ParrainagesError):
    """ローカルファイルが存在しない、または読み込めない."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class DecodeError(ParrainagesError):
    """本文が不正なJSON、または期待する形状（オブジェクトの配列）でない."""

    def __init__(self, message: str, source: str | None = None) -> None:
        super().__init__(message)
        self.source = source

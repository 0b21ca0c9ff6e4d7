"""取得したWebページ本文の値オブジェクト."""

from dataclasses import dataclass


@dataclass(frozen=True)
class WebPageContent:
    """URLとその本文."""

    url: str
    body: str

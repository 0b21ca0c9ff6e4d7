"""Webページ取得パッケージ."""

from .fetcher import WebPageFetcher


__all__ = ["WebPageFetcher"]

"""Webページの逐次取得・同時取得の比較コマンド."""

from __future__ import annotations

import asyncio
import time

from collections.abc import Sequence
from typing import TYPE_CHECKING

import click

from parrainages.interfaces.cli.base import with_error_handling


if TYPE_CHECKING:
    from parrainages.domain.value_objects.web_page_content import WebPageContent
    from parrainages.infrastructure.external.web_page.fetcher import WebPageFetcher

MODE_CONCURRENT = "concurrent"
MODE_SEQUENTIAL = "sequential"
MODE_BOTH = "both"


async def run_page_demo(
    fetcher: WebPageFetcher,
    urls: Sequence[str],
    delay_seconds: float,
    mode: str = MODE_BOTH,
) -> dict[str, list[WebPageContent]]:
    """指定モードでページを取得し、所要時間と本文サイズを表示する."""
    click.echo(f"対象URL: {len(urls)}件 / 1件ごとの待機: {delay_seconds:.1f}s")

    modes = [MODE_CONCURRENT, MODE_SEQUENTIAL] if mode == MODE_BOTH else [mode]
    results: dict[str, list[WebPageContent]] = {}
    for current in modes:
        start_time = time.monotonic()
        if current == MODE_CONCURRENT:
            pages = await fetcher.fetch_concurrently(urls, delay_seconds)
        else:
            pages = await fetcher.fetch_sequentially(urls, delay_seconds)
        elapsed = time.monotonic() - start_time

        click.echo(f"\n=== {current} ({elapsed:.1f}s) ===")
        for i, page in enumerate(pages, 1):
            click.echo(f"  {i:>2}. {page.url} ({len(page.body):,}文字)")
        results[current] = pages

    if len(results) == 2:
        same = results[MODE_CONCURRENT] == results[MODE_SEQUENTIAL]
        click.echo(f"\n結果の一致: {'はい' if same else 'いいえ'}")
    return results


@click.command()
@click.argument("urls", nargs=-1)
@click.option(
    "--delay",
    "delay_seconds",
    type=click.FloatRange(min=0),
    default=None,
    help="1件ごとの待機秒数（デフォルト: 設定値）",
)
@click.option(
    "--mode",
    type=click.Choice([MODE_CONCURRENT, MODE_SEQUENTIAL, MODE_BOTH]),
    default=MODE_BOTH,
    help="取得モード",
)
@with_error_handling
def pages(urls: tuple[str, ...], delay_seconds: float | None, mode: str):
    """複数ページを同時取得・逐次取得して所要時間を比較する."""
    asyncio.run(_run_pages(list(urls), delay_seconds, mode))


async def _run_pages(urls: list[str], delay_seconds: float | None, mode: str) -> None:
    from parrainages.infrastructure.config.settings import get_settings
    from parrainages.interfaces.factories.analyzer_factory import AnalyzerFactory

    settings = get_settings()
    fetcher = AnalyzerFactory.create_web_page_fetcher(settings)
    await run_page_demo(
        fetcher,
        urls or settings.demo_urls,
        settings.demo_delay_seconds if delay_seconds is None else delay_seconds,
        mode,
    )

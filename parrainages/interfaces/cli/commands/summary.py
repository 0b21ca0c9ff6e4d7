"""推薦署名データの一連の分析をまとめて実行するコマンド."""

from __future__ import annotations

import asyncio

from pathlib import Path

import click

from parrainages.application.dtos.endorsement_analysis_dto import (
    AnalyzeEndorsementsInputDto,
)
from parrainages.interfaces.cli.base import with_error_handling
from parrainages.interfaces.cli.commands.pages import run_page_demo
from parrainages.interfaces.cli.commands.stats import echo_statistics
from parrainages.interfaces.cli.commands.transfers import echo_transfers


@click.command()
@click.option("--year", type=int, default=None, help="対象年（デフォルト: 設定値）")
@click.option("--candidate", type=str, default=None, help="注目する候補者")
@click.option(
    "--prior-file",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="前回選挙の推薦署名JSON（デフォルト: 設定値）",
)
@click.option("--skip-pages", is_flag=True, help="Webページ取得の比較を省略する")
@with_error_handling
def summary(
    year: int | None,
    candidate: str | None,
    prior_file: Path | None,
    skip_pages: bool,
):
    """集計・ページ取得比較・前回との突き合わせを順に実行する."""
    asyncio.run(_run_summary(year, candidate, prior_file, skip_pages))


async def _run_summary(
    year: int | None,
    candidate: str | None,
    prior_file: Path | None,
    skip_pages: bool,
) -> None:
    from parrainages.infrastructure.config.settings import get_settings
    from parrainages.interfaces.factories.analyzer_factory import AnalyzerFactory

    settings = get_settings()
    input_dto = AnalyzeEndorsementsInputDto(
        year=year or settings.current_year,
        candidate=candidate or settings.focus_candidate,
        prior_year_file=prior_file or settings.prior_year_file,
    )

    use_case = AnalyzerFactory.create_use_case(settings)
    output = await use_case.execute(input_dto)
    echo_statistics(output, input_dto)

    if not skip_pages:
        click.echo()
        fetcher = AnalyzerFactory.create_web_page_fetcher(settings)
        await run_page_demo(fetcher, settings.demo_urls, settings.demo_delay_seconds)

    click.echo()
    echo_transfers(input_dto.candidate, output.transfers or {})

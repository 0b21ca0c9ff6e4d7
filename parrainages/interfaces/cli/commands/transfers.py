"""前回選挙との推薦先突き合わせコマンド."""

from __future__ import annotations

import asyncio

from pathlib import Path

import click

from parrainages.application.dtos.endorsement_analysis_dto import (
    AnalyzeEndorsementsInputDto,
)
from parrainages.interfaces.cli.base import with_error_handling


def echo_transfers(candidate: str, transfers: dict[str, int]) -> None:
    """前回の推薦先ごとの人数を表示する."""
    total = sum(transfers.values())
    click.echo(f"=== {candidate} の推薦者の前回の推薦先 (計{total}名) ===")
    if not transfers:
        click.echo("  前回データに一致する推薦者はいません。")
        return
    for prior_candidate, count in sorted(
        transfers.items(), key=lambda item: item[1], reverse=True
    ):
        click.echo(f"  {prior_candidate:<20} {count:>6,}名")


@click.command()
@click.option("--year", type=int, default=None, help="対象年（デフォルト: 設定値）")
@click.option("--candidate", type=str, default=None, help="注目する候補者")
@click.option(
    "--prior-file",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="前回選挙の推薦署名JSON（デフォルト: 設定値）",
)
@with_error_handling
def transfers(year: int | None, candidate: str | None, prior_file: Path | None):
    """注目候補者の推薦者が前回どの候補者を推薦していたかを集計する."""
    asyncio.run(_run_transfers(year, candidate, prior_file))


async def _run_transfers(
    year: int | None, candidate: str | None, prior_file: Path | None
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
    echo_transfers(input_dto.candidate, output.transfers or {})

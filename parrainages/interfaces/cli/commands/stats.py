"""推薦署名の集計コマンド."""

from __future__ import annotations

import asyncio
import math

import click

from parrainages.application.dtos.endorsement_analysis_dto import (
    AnalyzeEndorsementsInputDto,
    AnalyzeEndorsementsOutputDto,
)
from parrainages.domain.value_objects.endorsement_record import (
    CIVILITY_FEMALE,
    CIVILITY_MALE,
)
from parrainages.interfaces.cli.base import with_error_handling


def format_percentage(value: float) -> str:
    """割合を表示用に整形する（nanは N/A）."""
    if math.isnan(value):
        return "N/A"
    return f"{value:.1f}%"


def echo_statistics(
    output: AnalyzeEndorsementsOutputDto, input_dto: AnalyzeEndorsementsInputDto
) -> None:
    """集計結果を表示する."""
    click.echo(f"=== {output.year}年 推薦署名統計 ===")
    click.echo(f"  推薦署名総数:   {output.total_records:,}")
    click.echo(
        f"  civility='{input_dto.share_civility}' の割合: "
        f"{format_percentage(output.civility_percentage)}"
    )
    click.echo(
        f"  mandateに'{input_dto.mandate_substring}'を含む: {output.mandate_count:,}"
    )
    click.echo(
        f"  {input_dto.candidate} × '{input_dto.civility}' × "
        f"'{input_dto.mandate_substring}': {output.focused_count:,}"
    )

    click.echo(f"\n=== 推薦を受けた候補者 (全{len(output.distinct_candidates)}名) ===")
    for candidate, count in output.endorsements_by_candidate.items():
        click.echo(f"  {candidate:<20} {count:>6,}件")


@click.command()
@click.option("--year", type=int, default=None, help="対象年（デフォルト: 設定値）")
@click.option("--candidate", type=str, default=None, help="注目する候補者")
@click.option(
    "--civility",
    type=str,
    default=CIVILITY_FEMALE,
    help=f"候補者別集計に使う敬称（デフォルト: {CIVILITY_FEMALE}）",
)
@click.option(
    "--share-civility",
    type=str,
    default=CIVILITY_MALE,
    help=f"割合を表示する敬称（デフォルト: {CIVILITY_MALE}）",
)
@click.option(
    "--mandate",
    "mandate_substring",
    type=str,
    default="Maire",
    help="mandateの部分文字列（大文字小文字を区別）",
)
@with_error_handling
def stats(
    year: int | None,
    candidate: str | None,
    civility: str,
    share_civility: str,
    mandate_substring: str,
):
    """推薦署名の件数・割合・候補者一覧を表示する."""
    asyncio.run(
        _run_stats(year, candidate, civility, share_civility, mandate_substring)
    )


async def _run_stats(
    year: int | None,
    candidate: str | None,
    civility: str,
    share_civility: str,
    mandate_substring: str,
) -> None:
    from parrainages.infrastructure.config.settings import get_settings
    from parrainages.interfaces.factories.analyzer_factory import AnalyzerFactory

    settings = get_settings()
    input_dto = AnalyzeEndorsementsInputDto(
        year=year or settings.current_year,
        candidate=candidate or settings.focus_candidate,
        civility=civility,
        share_civility=share_civility,
        mandate_substring=mandate_substring,
    )
    use_case = AnalyzerFactory.create_use_case(settings)
    output = await use_case.execute(input_dto)
    echo_statistics(output, input_dto)

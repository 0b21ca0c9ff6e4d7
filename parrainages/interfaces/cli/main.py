"""parrainages CLI エントリーポイント."""

import click

from parrainages import __version__
from parrainages.common.logging import setup_logging
from parrainages.interfaces.cli.commands import pages, stats, summary, transfers


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="ログレベル（デフォルト: 設定値）",
)
@click.version_option(__version__, prog_name="parrainages")
def cli(log_level: str | None):
    """大統領選挙の推薦署名データを取得・集計する."""
    from parrainages.infrastructure.config.settings import get_settings

    setup_logging(log_level or get_settings().log_level)


cli.add_command(stats)
cli.add_command(transfers)
cli.add_command(pages)
cli.add_command(summary)


if __name__ == "__main__":
    cli()

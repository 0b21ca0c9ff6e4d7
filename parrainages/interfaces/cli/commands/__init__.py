"""推薦署名 CLI コマンド."""

from parrainages.interfaces.cli.commands.pages import pages
from parrainages.interfaces.cli.commands.stats import stats
from parrainages.interfaces.cli.commands.summary import summary
from parrainages.interfaces.cli.commands.transfers import transfers


__all__ = [
    "pages",
    "stats",
    "summary",
    "transfers",
]

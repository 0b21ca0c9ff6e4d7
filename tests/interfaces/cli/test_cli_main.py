"""parrainages CLI グループのテスト."""

from unittest.mock import MagicMock, patch

from click.testing import CliRunner

from parrainages import __version__
from parrainages.interfaces.cli.main import cli


class TestCliGroup:
    def test_lists_commands(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])

        assert result.exit_code == 0
        for name in ("stats", "transfers", "pages", "summary"):
            assert name in result.output

    def test_version(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output

    @patch("parrainages.interfaces.cli.main.setup_logging")
    def test_log_level_option(self, mock_setup_logging: MagicMock) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--log-level", "debug", "stats", "--help"])

        assert result.exit_code == 0
        mock_setup_logging.assert_called_once_with("DEBUG")

"""CLIコマンド共通のデコレーター."""

import functools
import logging
import sys

from collections.abc import Callable
from typing import Any

import click

from parrainages.domain.exceptions import ParrainagesError


logger = logging.getLogger(__name__)


def with_error_handling(func: Callable[..., Any]) -> Callable[..., Any]:
    """取得・パースエラーをメッセージ表示と終了コード1に変換する."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except ParrainagesError as e:
            logger.debug("コマンド実行エラー", exc_info=True)
            click.echo(f"エラー: {e}", err=True)
            sys.exit(1)

    return wrapper

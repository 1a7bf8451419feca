"""CLIコマンドの共通基盤."""

import functools
import logging
import sys

from collections.abc import Callable
from typing import Any

import click

from src.infrastructure.exceptions import InfrastructureError


logger = logging.getLogger(__name__)


class BaseCommand:
    """CLI出力の共通メソッド."""

    @staticmethod
    def success(message: str) -> None:
        """成功メッセージを表示する."""
        click.echo(click.style(message, fg="green"))

    @staticmethod
    def warning(message: str) -> None:
        """警告メッセージを表示する."""
        click.echo(click.style(message, fg="yellow"))

    @staticmethod
    def error(message: str, exit_code: int | None = None) -> None:
        """エラーメッセージを標準エラーに表示する. exit_code指定時は終了する."""
        click.echo(click.style(message, fg="red"), err=True)
        if exit_code is not None:
            sys.exit(exit_code)


def with_error_handling(func: Callable[..., Any]) -> Callable[..., Any]:
    """コマンドの例外を赤字のエラーメッセージと終了コード1に変換する."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except click.ClickException:
            raise
        except InfrastructureError as e:
            logger.error("Command failed: %s", e)
            BaseCommand.error(f"エラー: {e}", exit_code=1)
        except KeyboardInterrupt:
            BaseCommand.error("中断しました", exit_code=130)
        except Exception as e:
            logger.exception("Unexpected error in command")
            BaseCommand.error(f"予期しないエラー: {e}", exit_code=1)

    return wrapper

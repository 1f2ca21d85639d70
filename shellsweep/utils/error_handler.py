"""Centralized error handler for shellsweep commands."""

from collections.abc import Callable
from functools import wraps
from typing import Any

import click

from shellsweep.errors import ToolNotFoundError
from shellsweep.utils.exit_codes import ExitCodes
from shellsweep.utils.logging import logger


class ToolMissing(click.ClickException):
    """ClickException that exits with the shell's command-not-found status."""

    exit_code = ExitCodes.TOOL_MISSING


def handle_exceptions(func: Callable[..., Any]) -> Callable[..., Any]:
    """Decorator that logs command failures and converts them to Click errors."""

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except (click.ClickException, click.exceptions.Exit, click.Abort):
            raise
        except ToolNotFoundError as e:
            logger.error("Command '{cmd}' failed: {err}", cmd=func.__name__, err=str(e))
            raise ToolMissing(
                f"{e}\n\nInstall shellcheck (https://www.shellcheck.net) and retry."
            ) from e
        except Exception as e:
            logger.opt(exception=True).error(
                "Command '{cmd}' failed: {err}",
                cmd=func.__name__,
                err=str(e),
            )
            raise click.ClickException(f"{type(e).__name__}: {e}") from e

    return wrapper

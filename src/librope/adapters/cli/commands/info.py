"""Metadata and greeting commands.

Contents:
    * :func:`cli_info` - Display package metadata.
    * :func:`cli_hello` - Greet a name on standard output.
"""

from __future__ import annotations

import logging
import sys

import lib_log_rich.runtime
import rich_click as click

from librope import __init__conf__
from librope.domain.behaviors import greet
from librope.domain.errors import InvalidArgumentError

from ..constants import CLICK_CONTEXT_SETTINGS
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)


@click.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print resolved metadata so users can inspect installation details.

    Example:
        >>> from click.testing import CliRunner
        >>> runner = CliRunner()
        >>> result = runner.invoke(cli_info)
        >>> result.exit_code == 0
        True
    """
    with lib_log_rich.runtime.bind(job_id="cli-info", extra={"command": "info"}):
        logger.info("Displaying package information")
        __init__conf__.print_info()


@click.command("hello", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("name")
def cli_hello(name: str) -> None:
    """Write the greeting for NAME to standard output.

    An empty NAME is rejected with exit code 22 and nothing is printed to
    standard output.

    Example:
        >>> from click.testing import CliRunner
        >>> runner = CliRunner()
        >>> result = runner.invoke(cli_hello, ["World"])
        >>> result.output
        'Hello, World!\\n'
    """
    with lib_log_rich.runtime.bind(job_id="cli-hello", extra={"command": "hello"}):
        logger.info("Greeting", extra={"name_length": len(name)})
        try:
            greet(name, sys.stdout)
        except InvalidArgumentError as exc:
            logger.warning("Greeting rejected", extra={"error": str(exc)})
            click.echo(f"\nError: {exc}", err=True)
            raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc


__all__ = ["cli_hello", "cli_info"]

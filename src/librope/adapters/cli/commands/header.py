"""Export header generation command.

Contents:
    * :func:`cli_export_header` - Write or check the generated export header.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from librope.adapters.header.writer import HeaderWriteResult, resolve_header_path
from librope.domain.enums import HeaderAction
from librope.domain.errors import InvalidArgumentError

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import CLIContext, get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)

_ACTION_MESSAGES: dict[HeaderAction, str] = {
    HeaderAction.CREATED: "Export header created",
    HeaderAction.OVERWRITTEN: "Export header overwritten",
    HeaderAction.UNCHANGED: "Export header is up to date",
    HeaderAction.SKIPPED: "Export header differs and was left untouched (use --force to overwrite)",
    HeaderAction.DRIFT: "Export header is out of date",
}


def _resolve_prefix(cli_ctx: CLIContext, prefix: str | None) -> str:
    """Return ``--prefix`` or fall back to ``[build].macro_prefix``."""
    if prefix is not None:
        return prefix
    return cli_ctx.build_settings().macro_prefix


def _report(result: HeaderWriteResult) -> None:
    click.echo(f"{_ACTION_MESSAGES[result.action]}: {result.destination}")
    if result.action in (HeaderAction.SKIPPED, HeaderAction.DRIFT) and result.diff:
        click.echo(result.diff)


@click.command("export-header", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--destination",
    type=click.Path(),
    required=True,
    help="Header file to write, or a directory (existing or ending in a separator) to place export.hxx into",
)
@click.option(
    "--prefix",
    type=str,
    default=None,
    help="Upper-case library macro prefix (default: [build].macro_prefix)",
)
@click.option("--force", is_flag=True, default=False, help="Overwrite an existing header that differs")
@click.option(
    "--check",
    is_flag=True,
    default=False,
    help="Only compare with the generated header; exit 3 when it differs",
)
@click.pass_context
def cli_export_header(ctx: click.Context, destination: str, prefix: str | None, force: bool, check: bool) -> None:
    r"""Generate the C/C++ export header defining <PREFIX>_SYMEXPORT.

    The header encodes the visibility decision table as a preprocessor
    chain over <PREFIX>_STATIC, <PREFIX>_STATIC_BUILD, <PREFIX>_SHARED and
    <PREFIX>_SHARED_BUILD.

    \b
    Exit codes:
    - 0: header written or already up to date
    - 3: --check found a missing or outdated header
    - 22: invalid --prefix
    - 13: permission denied

    Example:
        >>> from click.testing import CliRunner
        >>> runner = CliRunner()
        >>> # Real invocation tested in test_cli_export_header.py
    """
    cli_ctx = get_cli_context(ctx)
    effective_prefix = _resolve_prefix(cli_ctx, prefix)
    target = resolve_header_path(destination)

    extra = {"command": "export-header", "destination": str(target), "force": force, "check": check}
    with lib_log_rich.runtime.bind(job_id="cli-export-header", extra=extra):
        logger.info("Generating export header", extra={"prefix": effective_prefix})
        try:
            result = cli_ctx.services.write_export_header(target, prefix=effective_prefix, force=force, check=check)
        except InvalidArgumentError as exc:
            click.echo(f"\nError: {exc}", err=True)
            raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc
        except PermissionError as exc:
            logger.error("Permission denied when writing export header", extra={"error": str(exc)})
            click.echo(f"\nError: Permission denied. {exc}", err=True)
            raise SystemExit(ExitCode.PERMISSION_DENIED) from exc
        except OSError as exc:
            logger.error("Failed to write export header", extra={"error": str(exc), "error_type": type(exc).__name__})
            click.echo(f"\nError: Failed to write export header: {exc}", err=True)
            raise SystemExit(ExitCode.GENERAL_ERROR) from exc

        logger.info("Export header result", extra={"action": result.action.value, "path": str(result.destination)})
        _report(result)
        if result.action is HeaderAction.DRIFT:
            raise SystemExit(ExitCode.HEADER_DRIFT)


__all__ = ["cli_export_header"]

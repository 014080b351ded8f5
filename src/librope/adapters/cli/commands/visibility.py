"""Visibility policy command.

Resolves which symbol annotation a build configuration needs, either for a
single configuration or as the full decision table.

Contents:
    * :func:`cli_visibility` - Resolve and print the annotation.
"""

from __future__ import annotations

import logging
from typing import Any

import lib_log_rich.runtime
import orjson
import rich_click as click

from librope.adapters.config.build import BuildSettings
from librope.domain.enums import Annotation, BuildSignal, OutputFormat, PlatformSelection
from librope.domain.visibility import (
    BuildConfiguration,
    decision_table,
    resolve_annotation,
    resolve_platform,
    signal_from_defines,
)

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context

logger = logging.getLogger(__name__)

_ROW_LABEL_WIDTH = 14


def _row_payload(configuration: BuildConfiguration, annotation: Annotation) -> dict[str, Any]:
    return {
        "linkage": configuration.linkage.value if configuration.linkage else None,
        "role": configuration.role.value if configuration.role else None,
        "platform": configuration.platform.value,
        "annotation": annotation.value,
        "spelling": annotation.declspec,
    }


def _echo_json(payload: object) -> None:
    click.echo(orjson.dumps(payload, option=orjson.OPT_INDENT_2).decode())


def _echo_single(configuration: BuildConfiguration, annotation: Annotation, signal: BuildSignal | None) -> None:
    fields = (
        ("signal", signal.value if signal else "(none)"),
        ("configuration", configuration.describe()),
        ("annotation", annotation.value),
        ("spelling", annotation.declspec or "(empty)"),
    )
    for label, value in fields:
        click.echo(f"{label.ljust(_ROW_LABEL_WIDTH)} = {value}")


def _echo_table(rows: list[tuple[BuildConfiguration, Annotation]]) -> None:
    width = max(len(configuration.describe()) for configuration, _ in rows)
    click.echo(f"{'configuration'.ljust(width)}  annotation")
    click.echo(f"{'-' * width}  ----------")
    for configuration, annotation in rows:
        click.echo(f"{configuration.describe().ljust(width)}  {annotation.value}")


def _choose_signal(
    settings: BuildSettings, signal: str | None, defines: tuple[str, ...], prefix: str
) -> BuildSignal | None:
    """Pick the signal from ``--signal``, then ``--define``, then ``[build].signal``."""
    if signal is not None and defines:
        raise click.UsageError("--signal and --define are mutually exclusive")
    if signal is not None:
        return BuildSignal(signal.lower())
    if defines:
        return signal_from_defines(defines, prefix)
    return settings.signal


def _reject_table_with_selection(signal: str | None, defines: tuple[str, ...], platform: str | None) -> None:
    if signal is not None or defines or platform is not None:
        raise click.UsageError("--table cannot be combined with --signal, --define or --platform")


@click.command("visibility", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--signal",
    type=click.Choice([s.value for s in BuildSignal], case_sensitive=False),
    default=None,
    help="Build signal to resolve (default: [build].signal, empty means unconfigured)",
)
@click.option(
    "--define",
    "defines",
    multiple=True,
    metavar="MACRO",
    help="Macro defined for the compilation, e.g. LIBROPE_SHARED (repeatable)",
)
@click.option(
    "--platform",
    type=click.Choice([p.value for p in PlatformSelection], case_sensitive=False),
    default=None,
    help="Target platform (default: [build].platform)",
)
@click.option(
    "--table",
    "show_table",
    is_flag=True,
    default=False,
    help="Print the complete decision table instead of a single result",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    default=OutputFormat.HUMAN.value,
    help="Output format (human-readable or JSON)",
)
@click.pass_context
def cli_visibility(
    ctx: click.Context,
    signal: str | None,
    defines: tuple[str, ...],
    platform: str | None,
    show_table: bool,
    output_format: str,
) -> None:
    r"""Resolve the symbol annotation for a build configuration.

    \b
    Rules, first match wins:
    - static, using or building: none
    - shared, using: import on Windows, otherwise none
    - shared, building: export on Windows, otherwise none
    - no signal: none

    Example:
        >>> from click.testing import CliRunner
        >>> runner = CliRunner()
        >>> # Real invocation tested in test_cli_visibility.py
    """
    cli_ctx = get_cli_context(ctx)
    fmt = OutputFormat(output_format.lower())
    if show_table:
        _reject_table_with_selection(signal, defines, platform)

    extra = {"command": "visibility", "format": fmt.value, "table": show_table}
    with lib_log_rich.runtime.bind(job_id="cli-visibility", extra=extra):
        settings = cli_ctx.build_settings()
        if show_table:
            rows = decision_table()
            logger.info("Displaying decision table", extra={"rows": len(rows)})
            if fmt is OutputFormat.JSON:
                _echo_json([_row_payload(configuration, annotation) for configuration, annotation in rows])
            else:
                _echo_table(rows)
            return

        chosen = _choose_signal(settings, signal, defines, settings.macro_prefix)
        selection = PlatformSelection(platform.lower()) if platform else settings.platform
        configuration = BuildConfiguration.from_signal(chosen, resolve_platform(selection))
        annotation = resolve_annotation(configuration)
        logger.info(
            "Resolved annotation",
            extra={"configuration": configuration.describe(), "annotation": annotation.value},
        )
        if fmt is OutputFormat.JSON:
            payload = _row_payload(configuration, annotation)
            payload["signal"] = chosen.value if chosen else None
            _echo_json(payload)
        else:
            _echo_single(configuration, annotation, chosen)


__all__ = ["cli_visibility"]

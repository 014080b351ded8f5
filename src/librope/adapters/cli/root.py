"""The ``librope`` command group.

Global options are resolved here before any subcommand runs: the
``--profile`` layers are loaded, ``--set`` overrides are applied on top and
logging is started from the result.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import rich_click as click
from lib_layered_config import Config

from librope import __init__conf__
from librope.adapters.config.overrides import apply_overrides

from .constants import CLICK_CONTEXT_SETTINGS
from .context import apply_traceback_preferences, store_cli_context

if TYPE_CHECKING:
    from librope.composition import AppServices


def _load_configuration(services: AppServices, profile: str | None, set_overrides: tuple[str, ...]) -> Config:
    """Return the layered config for ``profile`` with ``--set`` values merged in.

    Raises:
        click.UsageError: If an override is malformed or targets a non-table.
    """
    config = services.get_config(profile=profile)
    try:
        return apply_overrides(config, set_overrides)
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc


def _services_from(ctx: click.Context) -> AppServices:
    factory = ctx.obj
    if not callable(factory):
        raise RuntimeError("Services factory not provided. This is a bug.")
    return factory()  # type: ignore[no-any-return]  # Click's obj is typed as Any


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.option(
    "--profile",
    type=str,
    default=None,
    help="Configuration profile to load, e.g. 'windows-dll' or 'ci'",
)
@click.option(
    "--set",
    "set_overrides",
    multiple=True,
    default=(),
    metavar="SECTION.KEY=VALUE",
    help="Override a configuration setting, e.g. build.signal=shared (repeatable).",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, profile: str | None, set_overrides: tuple[str, ...]) -> None:
    """Resolve global options, then hand a :class:`~.context.CLIContext` to the subcommand.

    Example:
        >>> from click.testing import CliRunner
        >>> from librope.composition import build_production
        >>> CliRunner().invoke(cli, ["hello", "World"], obj=build_production).exit_code
        0
    """
    services = _services_from(ctx)
    config = _load_configuration(services, profile, set_overrides)
    services.init_logging(config)
    apply_traceback_preferences(traceback)
    store_cli_context(
        ctx,
        traceback=traceback,
        config=config,
        services=services,
        profile=profile,
        set_overrides=set_overrides,
    )

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


def _register_commands() -> None:
    # The command modules import this package, so they load once ``cli`` exists.
    from . import commands

    for name in commands.__all__:
        cli.add_command(getattr(commands, name))


_register_commands()


__all__ = ["cli"]

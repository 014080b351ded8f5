"""Configuration commands: show, deploy and generate examples.

Contents:
    * :func:`cli_config` - Display the merged configuration.
    * :func:`cli_config_deploy` - Copy the bundled defaults into a config layer.
    * :func:`cli_config_generate_examples` - Write commented example files.
"""

from __future__ import annotations

import logging
from pathlib import Path

import lib_log_rich.runtime
import rich_click as click
from lib_layered_config import generate_examples

from librope import __init__conf__
from librope.adapters.config.permissions import get_permission_defaults
from librope.domain.enums import DeployTarget, OutputFormat

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)

_PROFILE_HELP = "Override profile from root command (e.g., 'production', 'test')"


def _parse_octal_mode(ctx: click.Context, param: click.Parameter, value: str | None) -> int | None:
    """Click callback turning ``750`` or ``0o750`` into an int mode."""
    if value is None:
        return None
    try:
        return int(value, 0) if value.startswith("0o") else int(value, 8)
    except ValueError as exc:
        raise click.BadParameter(f"Invalid octal mode: {value}") from exc


@click.command("config", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    default=OutputFormat.HUMAN.value,
    help="Output format (human-readable or JSON)",
)
@click.option("--section", type=str, default=None, help="Show only one section (e.g., 'build' or 'lib_log_rich')")
@click.option("--profile", type=str, default=None, help=_PROFILE_HELP)
@click.pass_context
def cli_config(ctx: click.Context, output_format: str, section: str | None, profile: str | None) -> None:
    """Display the merged configuration.

    Precedence: defaults -> app -> host -> user -> dotenv -> env.
    Environment variables use the LIBROPE___ prefix, e.g.
    LIBROPE___BUILD__SIGNAL=shared.
    """
    cli_ctx = get_cli_context(ctx)
    config, effective_profile = cli_ctx.config_for_profile(profile)
    fmt = OutputFormat(output_format.lower())

    extra = {"command": "config", "format": fmt.value, "profile": effective_profile}
    with lib_log_rich.runtime.bind(job_id="cli-config", extra=extra):
        logger.info("Displaying configuration", extra={"section": section})
        click.echo()
        try:
            cli_ctx.services.display_config(config, output_format=fmt, section=section, profile=effective_profile)
        except ValueError as exc:
            click.echo(f"\nError: {exc}", err=True)
            raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc


@click.command("config-deploy", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--target",
    "targets",
    type=click.Choice([t.value for t in DeployTarget], case_sensitive=False),
    multiple=True,
    required=True,
    help="Configuration layer(s) to deploy to (repeatable)",
)
@click.option("--force", is_flag=True, default=False, help="Overwrite existing configuration files")
@click.option("--profile", type=str, default=None, help=_PROFILE_HELP)
@click.option(
    "--permissions/--no-permissions",
    "set_permissions",
    default=None,
    help="Set Unix permissions (755/644 for app/host, 700/600 for user). Default: enabled.",
)
@click.option("--dir-mode", type=str, default=None, callback=_parse_octal_mode, help="Directory mode (octal, e.g. 750)")
@click.option("--file-mode", type=str, default=None, callback=_parse_octal_mode, help="File mode (octal, e.g. 640)")
@click.pass_context
def cli_config_deploy(
    ctx: click.Context,
    targets: tuple[str, ...],
    force: bool,
    profile: str | None,
    set_permissions: bool | None,
    dir_mode: int | None,
    file_mode: int | None,
) -> None:
    r"""Deploy the bundled default configuration.

    \b
    - app:  system-wide application config (requires privileges)
    - host: system-wide host config (requires privileges)
    - user: per-user config (~/.config/librope on Linux)

    Existing files are kept unless --force is given. Permission options are
    ignored on Windows.
    """
    cli_ctx = get_cli_context(ctx)
    effective_profile = profile or cli_ctx.profile
    deploy_targets = tuple(DeployTarget(t.lower()) for t in targets)
    perm_defaults = get_permission_defaults(cli_ctx.config)
    apply_permissions = bool(perm_defaults["enabled"]) if set_permissions is None else set_permissions

    extra = {
        "command": "config-deploy",
        "targets": [t.value for t in deploy_targets],
        "force": force,
        "profile": effective_profile,
    }
    with lib_log_rich.runtime.bind(job_id="cli-config-deploy", extra=extra):
        logger.info("Deploying configuration")
        try:
            deployed = cli_ctx.services.deploy_configuration(
                targets=deploy_targets,
                force=force,
                profile=effective_profile,
                set_permissions=apply_permissions,
                dir_mode=dir_mode,
                file_mode=file_mode,
            )
        except PermissionError as exc:
            logger.error("Permission denied when deploying configuration", extra={"error": str(exc)})
            click.echo(f"\nError: Permission denied. {exc}", err=True)
            click.echo("Hint: --target app/host usually needs sudo.", err=True)
            raise SystemExit(ExitCode.PERMISSION_DENIED) from exc
        except Exception as exc:
            logger.error("Failed to deploy configuration", extra={"error": str(exc), "error_type": type(exc).__name__})
            click.echo(f"\nError: Failed to deploy configuration: {exc}", err=True)
            raise SystemExit(ExitCode.GENERAL_ERROR) from exc
        _report_deployment(deployed, effective_profile, apply_permissions)


def _report_deployment(deployed: list[Path], profile: str | None, permissions_set: bool) -> None:
    if not deployed:
        click.echo("\nNo files were created (all target files already exist).")
        click.echo("Use --force to overwrite existing configuration files.")
        return
    profile_note = f" (profile: {profile})" if profile else ""
    permission_note = "" if permissions_set else " (permissions not set)"
    click.echo(f"\nConfiguration deployed successfully{profile_note}{permission_note}:")
    for path in deployed:
        click.echo(f"  ✓ {path}")


@click.command("config-generate-examples", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--destination", type=click.Path(file_okay=False), required=True, help="Directory to write example files")
@click.option("--force", is_flag=True, default=False, help="Overwrite existing files")
def cli_config_generate_examples(destination: str, force: bool) -> None:
    """Write example configuration files with every option documented."""
    extra = {"command": "config-generate-examples", "destination": destination, "force": force}
    with lib_log_rich.runtime.bind(job_id="cli-config-generate-examples", extra=extra):
        logger.info("Generating example configuration files")
        try:
            paths = generate_examples(
                destination=destination,
                slug=__init__conf__.LAYEREDCONF_SLUG,
                vendor=__init__conf__.LAYEREDCONF_VENDOR,
                app=__init__conf__.LAYEREDCONF_APP,
                force=force,
            )
        except Exception as exc:
            logger.error("Failed to generate examples", extra={"error": str(exc)})
            click.echo(f"\nError: {exc}", err=True)
            raise SystemExit(ExitCode.GENERAL_ERROR) from exc
        if not paths:
            click.echo("\nNo files generated (all already exist). Use --force to overwrite.")
            return
        click.echo(f"\nGenerated {len(paths)} example file(s):")
        for path in paths:
            click.echo(f"  {path}")


__all__ = ["cli_config", "cli_config_deploy", "cli_config_generate_examples"]

"""State shared by the root group and the librope subcommands.

The root group loads configuration once; subcommands reach it, the wired
services and the parsed ``[build]`` section through :class:`CLIContext`.
Traceback flags live in ``lib_cli_exit_tools.config`` and are mirrored here
so :func:`~.main.main` can put them back after a run.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import lib_cli_exit_tools
import rich_click as click
from lib_layered_config import Config

from librope.adapters.config.overrides import apply_overrides
from librope.domain.errors import ConfigurationError

from .exit_codes import ExitCode

if TYPE_CHECKING:
    from librope.adapters.config.build import BuildSettings
    from librope.composition import AppServices

logger = logging.getLogger(__name__)

TracebackState = tuple[bool, bool]
"""Captured traceback configuration: (traceback_enabled, force_color)."""


@dataclass(slots=True)
class CLIContext:
    """Per-invocation state handed from the root group to subcommands.

    Attributes:
        traceback: Whether ``--traceback`` was given.
        config: Configuration after ``--set`` overrides.
        services: Port implementations from the composition root.
        profile: Root ``--profile`` value.
        set_overrides: Raw ``--set`` strings, reapplied by
            :meth:`config_for_profile`.
    """

    traceback: bool
    config: Config
    services: AppServices
    profile: str | None = None
    set_overrides: tuple[str, ...] = ()
    _build_settings: BuildSettings | None = field(default=None, repr=False)

    def config_for_profile(self, profile: str | None) -> tuple[Config, str | None]:
        """Return the config for ``profile`` and the profile it belongs to.

        Without a profile the root config is reused. Otherwise the layers are
        reloaded for that profile and the root ``--set`` overrides reapplied.
        """
        if not profile:
            return self.config, self.profile
        reloaded = self.services.get_config(profile=profile)
        return apply_overrides(reloaded, self.set_overrides), profile

    def build_settings(self) -> BuildSettings:
        """Parse ``[build]`` once per invocation.

        An unusable section ends the command with ``CONFIG_ERROR``.

        Example:
            >>> from librope.composition import build_testing
            >>> cli_ctx = CLIContext(traceback=False, config=Config({}, {}), services=build_testing())
            >>> cli_ctx.build_settings().macro_prefix
            'LIBROPE'
        """
        if self._build_settings is None:
            try:
                self._build_settings = self.services.load_build_settings(self.config)
            except ConfigurationError as exc:
                logger.error("Invalid build configuration", extra={"error": str(exc)})
                click.echo(f"\nError: {exc}", err=True)
                raise SystemExit(ExitCode.CONFIG_ERROR) from exc
        return self._build_settings


def store_cli_context(
    ctx: click.Context,
    *,
    traceback: bool,
    config: Config,
    services: AppServices,
    profile: str | None = None,
    set_overrides: tuple[str, ...] = (),
) -> CLIContext:
    """Install a fresh :class:`CLIContext` as ``ctx.obj`` and return it.

    Example:
        >>> from unittest.mock import MagicMock
        >>> from librope.composition import build_testing
        >>> ctx = MagicMock()
        >>> store_cli_context(ctx, traceback=True, config=MagicMock(), services=build_testing(), profile="test").profile
        'test'
    """
    ctx.obj = CLIContext(
        traceback=traceback,
        config=config,
        services=services,
        profile=profile,
        set_overrides=set_overrides,
    )
    return ctx.obj


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Return the state stored by the root group.

    Raises:
        RuntimeError: If a subcommand runs without the root group.
    """
    if not isinstance(ctx.obj, CLIContext):
        raise RuntimeError("CLI context not initialized. Call store_cli_context first.")
    return ctx.obj


def apply_traceback_preferences(enabled: bool) -> None:
    """Switch full tracebacks (and forced colour) on or off for the process."""
    lib_cli_exit_tools.config.traceback = bool(enabled)
    lib_cli_exit_tools.config.traceback_force_color = bool(enabled)


def snapshot_traceback_state() -> TracebackState:
    return (
        bool(getattr(lib_cli_exit_tools.config, "traceback", False)),
        bool(getattr(lib_cli_exit_tools.config, "traceback_force_color", False)),
    )


def restore_traceback_state(state: TracebackState) -> None:
    """Reapply flags captured by :func:`snapshot_traceback_state`.

    Example:
        >>> original = snapshot_traceback_state()
        >>> apply_traceback_preferences(not original[0])
        >>> restore_traceback_state(original)
        >>> snapshot_traceback_state() == original
        True
    """
    lib_cli_exit_tools.config.traceback, lib_cli_exit_tools.config.traceback_force_color = state


__all__ = [
    "CLIContext",
    "TracebackState",
    "apply_traceback_preferences",
    "get_cli_context",
    "restore_traceback_state",
    "snapshot_traceback_state",
    "store_cli_context",
]

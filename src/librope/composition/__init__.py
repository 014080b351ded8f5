"""Composition root wiring adapters to application ports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..adapters.config.build import load_build_settings
from ..adapters.config.deploy import deploy_configuration
from ..adapters.config.display import display_config

# Configuration services
from ..adapters.config.loader import get_config, get_default_config_path

# Header services
from ..adapters.header.writer import write_export_header

# Logging services
from ..adapters.logging.setup import init_logging

# Pyright checks each adapter against its Protocol here.
if TYPE_CHECKING:
    from ..adapters.memory.header import HeaderWriterSpy
    from ..application.ports import (
        DeployConfiguration,
        DisplayConfig,
        GetConfig,
        GetDefaultConfigPath,
        InitLogging,
        LoadBuildSettings,
        WriteExportHeader,
    )

    _assert_get_config: GetConfig = get_config
    _assert_get_default_config_path: GetDefaultConfigPath = get_default_config_path
    _assert_deploy_configuration: DeployConfiguration = deploy_configuration
    _assert_display_config: DisplayConfig = display_config
    _assert_load_build_settings: LoadBuildSettings = load_build_settings
    _assert_write_export_header: WriteExportHeader = write_export_header
    _assert_init_logging: InitLogging = init_logging


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding all application port implementations."""

    get_config: GetConfig
    get_default_config_path: GetDefaultConfigPath
    deploy_configuration: DeployConfiguration
    display_config: DisplayConfig
    load_build_settings: LoadBuildSettings
    write_export_header: WriteExportHeader
    init_logging: InitLogging


def build_production() -> AppServices:
    """Wire production adapters into an AppServices container."""
    return AppServices(
        get_config=get_config,
        get_default_config_path=get_default_config_path,
        deploy_configuration=deploy_configuration,
        display_config=display_config,
        load_build_settings=load_build_settings,
        write_export_header=write_export_header,
        init_logging=init_logging,
    )


def build_testing(*, spy: HeaderWriterSpy | None = None) -> AppServices:
    """Wire in-memory adapters into an AppServices container.

    Args:
        spy: Optional HeaderWriterSpy capturing export-header writes. A fresh
            one is created when None; pass your own to assert on it.

    Returns:
        AppServices container with in-memory adapters.
    """
    from ..adapters.memory import (
        HeaderWriterSpy,
        deploy_configuration_in_memory,
        display_config_in_memory,
        get_config_in_memory,
        get_default_config_path_in_memory,
        init_logging_in_memory,
        load_build_settings_in_memory,
    )

    header_spy = spy if spy is not None else HeaderWriterSpy()

    return AppServices(
        get_config=get_config_in_memory,
        get_default_config_path=get_default_config_path_in_memory,
        deploy_configuration=deploy_configuration_in_memory,
        display_config=display_config_in_memory,
        load_build_settings=load_build_settings_in_memory,
        write_export_header=header_spy.write_export_header,
        init_logging=init_logging_in_memory,
    )


__all__ = [
    # Configuration
    "get_config",
    "get_default_config_path",
    "deploy_configuration",
    "display_config",
    "load_build_settings",
    # Header
    "write_export_header",
    # Logging
    "init_logging",
    # Composition
    "AppServices",
    "build_production",
    "build_testing",
]

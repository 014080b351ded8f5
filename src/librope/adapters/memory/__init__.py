"""In-memory adapter implementations for testing.

Lightweight implementations of every application port that stay entirely in
memory: no filesystem, no header files on disk, no logging runtime.

Contents:
    * :mod:`.config` - In-memory configuration adapters
    * :mod:`.build` - In-memory ``[build]`` settings loader
    * :mod:`.header` - In-memory export header writer (HeaderWriterSpy class)
    * :mod:`.logging` - In-memory logging adapter
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .build import load_build_settings_in_memory
from .config import (
    DEFAULT_BUILD_SECTION,
    deploy_configuration_in_memory,
    display_config_in_memory,
    get_config_in_memory,
    get_default_config_path_in_memory,
)
from .header import HeaderWriterSpy
from .logging import init_logging_in_memory

# Static conformance assertions
if TYPE_CHECKING:
    from librope.application.ports import (
        GetConfig,
        GetDefaultConfigPath,
        InitLogging,
        LoadBuildSettings,
        WriteExportHeader,
    )

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_get_default_config_path: GetDefaultConfigPath = get_default_config_path_in_memory
    _assert_load_build_settings: LoadBuildSettings = load_build_settings_in_memory
    _assert_write_export_header: WriteExportHeader = HeaderWriterSpy().write_export_header
    _assert_init_logging: InitLogging = init_logging_in_memory

__all__ = [
    "DEFAULT_BUILD_SECTION",
    "HeaderWriterSpy",
    "deploy_configuration_in_memory",
    "display_config_in_memory",
    "get_config_in_memory",
    "get_default_config_path_in_memory",
    "init_logging_in_memory",
    "load_build_settings_in_memory",
]

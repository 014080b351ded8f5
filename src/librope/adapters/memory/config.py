"""In-memory configuration adapters for testing.

The functions here satisfy the same Protocols as the production config
adapters. Nothing is read from or written to disk, and lib_layered_config is
used only for its ``Config`` value type.
"""

from __future__ import annotations

import tempfile
from collections.abc import Sequence
from pathlib import Path

from lib_layered_config import Config

from ...domain.enums import DeployTarget, OutputFormat
from ...domain.visibility import DEFAULT_MACRO_PREFIX

#: The bundled ``[build]`` defaults: unconfigured, host platform.
DEFAULT_BUILD_SECTION: dict[str, str] = {
    "signal": "",
    "platform": "auto",
    "macro_prefix": DEFAULT_MACRO_PREFIX,
}


def get_config_in_memory(
    *,
    profile: str | None = None,
    start_dir: str | None = None,
) -> Config:
    """Return a Config holding only the bundled ``[build]`` defaults."""
    return Config({"build": dict(DEFAULT_BUILD_SECTION)}, {})


def get_default_config_path_in_memory() -> Path:
    """Return a synthetic path; no file exists there."""
    return Path(tempfile.gettempdir()) / "librope" / "defaultconfig.toml"


def deploy_configuration_in_memory(
    *,
    targets: Sequence[DeployTarget],
    force: bool = False,
    profile: str | None = None,
    set_permissions: bool = True,
    dir_mode: int | None = None,
    file_mode: int | None = None,
) -> list[Path]:
    """Pretend to deploy; nothing is written and no paths are returned."""
    return []


def display_config_in_memory(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    profile: str | None = None,
) -> None:
    """Discard the display request."""


__all__ = [
    "DEFAULT_BUILD_SECTION",
    "deploy_configuration_in_memory",
    "display_config_in_memory",
    "get_config_in_memory",
    "get_default_config_path_in_memory",
]

"""CLI command implementations.

Collects all subcommand functions for registration with the root group.

Contents:
    * Info and greeting commands from :mod:`.info`
    * Visibility policy command from :mod:`.visibility`
    * Export header command from :mod:`.header`
    * Config commands from :mod:`.config`
"""

from __future__ import annotations

from .config import cli_config, cli_config_deploy, cli_config_generate_examples
from .header import cli_export_header
from .info import cli_hello, cli_info
from .visibility import cli_visibility

__all__ = [
    "cli_config",
    "cli_config_deploy",
    "cli_config_generate_examples",
    "cli_export_header",
    "cli_hello",
    "cli_info",
    "cli_visibility",
]

"""Configuration adapter - loading, build settings, deployment, display, overrides.

Contents:
    * :mod:`.loader` - Layered configuration loading with caching
    * :mod:`.build` - ``[build]`` section model feeding the visibility policy
    * :mod:`.deploy` - Configuration deployment to target layers
    * :mod:`.display` - Configuration display in human/JSON formats
    * :mod:`.overrides` - CLI ``--set`` override parsing and application
    * :mod:`.permissions` - Deployment permission defaults
"""

from __future__ import annotations

from .build import BuildSettings, load_build_settings
from .deploy import deploy_configuration
from .display import display_config
from .loader import get_config, get_default_config_path
from .overrides import apply_overrides

__all__ = [
    "BuildSettings",
    "apply_overrides",
    "deploy_configuration",
    "display_config",
    "get_config",
    "get_default_config_path",
    "load_build_settings",
]

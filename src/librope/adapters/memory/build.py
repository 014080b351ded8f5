"""In-memory build settings loader for testing."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from lib_layered_config import Config
from pydantic import ValidationError

from ...domain.errors import ConfigurationError
from ..config.build import BuildSettings


def load_build_settings_in_memory(config: Config | Mapping[str, Any]) -> BuildSettings:
    """Parse the ``[build]`` section using the real Pydantic model.

    Only ``Config.as_dict()`` is consulted, so tests may pass either a Config
    or a plain mapping.
    """
    data = config.as_dict() if isinstance(config, Config) else config
    build_raw = data.get("build", {})
    try:
        return BuildSettings.model_validate(build_raw if build_raw else {})
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid [build] configuration: {exc.error_count()} error(s)") from exc


__all__ = ["load_build_settings_in_memory"]

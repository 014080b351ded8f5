"""Build settings model and loader for the ``[build]`` configuration section.

Bridges lib_layered_config's dictionary output with the typed domain values
the visibility policy consumes. Single-parse validation at the boundary.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, cast

from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from librope.domain.enums import BuildSignal, PlatformSelection, TargetPlatform
from librope.domain.errors import ConfigurationError
from librope.domain.header import validate_macro_prefix
from librope.domain.visibility import (
    DEFAULT_MACRO_PREFIX,
    BuildConfiguration,
    resolve_platform,
)


class BuildSettings(BaseModel):
    """Validated, immutable ``[build]`` settings.

    Example:
        >>> settings = BuildSettings(signal="shared", platform="windows")
        >>> settings.signal
        <BuildSignal.SHARED: 'shared'>
        >>> BuildSettings().signal is None
        True
    """

    model_config = ConfigDict(frozen=True)

    signal: BuildSignal | None = None
    platform: PlatformSelection = PlatformSelection.AUTO
    macro_prefix: str = DEFAULT_MACRO_PREFIX

    @field_validator("signal", mode="before")
    @classmethod
    def _coerce_empty_signal_to_none(cls, v: Any) -> Any:
        """Treat an empty or ``none`` signal as "not signalled".

        Examples:
            >>> BuildSettings._coerce_empty_signal_to_none("")
            >>> BuildSettings._coerce_empty_signal_to_none(" Shared_Build ")
            'shared-build'
        """
        if v is None:
            return None
        if isinstance(v, str):
            normalized = v.strip().lower().replace("_", "-")
            return None if normalized in ("", "none") else normalized
        return v

    @field_validator("platform", mode="before")
    @classmethod
    def _normalize_platform(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("macro_prefix")
    @classmethod
    def _validate_prefix(cls, v: str) -> str:
        validate_macro_prefix(v)
        return v

    def target_platform(self) -> TargetPlatform:
        """Concrete platform, detecting the host when set to ``auto``."""
        return resolve_platform(self.platform)

    def build_configuration(self) -> BuildConfiguration:
        """Configuration the visibility policy decides on."""
        return BuildConfiguration.from_signal(self.signal, self.target_platform())


def load_build_settings(config: Config | Mapping[str, Any]) -> BuildSettings:
    """Load BuildSettings from a Config or configuration dictionary.

    Args:
        config: Layered configuration (or its ``as_dict()`` form) with an
            optional ``[build]`` section.

    Returns:
        Validated settings; defaults when the section is absent.

    Raises:
        ConfigurationError: When the section holds values that cannot be
            interpreted (unknown signal or platform, malformed prefix).

    Example:
        >>> load_build_settings({"build": {"signal": "static"}}).signal
        <BuildSignal.STATIC: 'static'>
        >>> load_build_settings({}).macro_prefix
        'LIBROPE'
    """
    raw: object = config.get("build", default={}) if isinstance(config, Config) else config.get("build", {})
    if raw and not isinstance(raw, Mapping):
        raise ConfigurationError(f"[build] must be a table, got {type(raw).__name__}")
    try:
        return BuildSettings.model_validate(dict(cast("Mapping[str, Any]", raw)) if raw else {})
    except ValidationError as exc:
        details = "; ".join(f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors())
        raise ConfigurationError(f"Invalid [build] configuration: {details}") from exc


__all__ = [
    "BuildSettings",
    "load_build_settings",
]

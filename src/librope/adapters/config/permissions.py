"""Permission defaults for configuration deployment.

Reads ``[lib_layered_config.default_permissions]`` and falls back to the
library's own modes (755/644 for app and host, 700/600 for user).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from lib_layered_config import (
    DEFAULT_APP_DIR_MODE,
    DEFAULT_APP_FILE_MODE,
    DEFAULT_USER_DIR_MODE,
    DEFAULT_USER_FILE_MODE,
)

if TYPE_CHECKING:
    from lib_layered_config import Config

logger = logging.getLogger(__name__)


def parse_mode(value: int | str, default: int) -> int:
    """Parse a permission mode given as integer or octal string.

    Example:
        >>> parse_mode(493, 0o755)
        493
        >>> parse_mode("0o755", 0o644)
        493
        >>> parse_mode("755", 0o644)
        493
    """
    if isinstance(value, int):
        return value
    try:
        if value.startswith("0o"):
            return int(value, 0)
        return int(value, 8)
    except ValueError:
        logger.warning("Invalid permission mode '%s', falling back to default %o", value, default)
        return default


def _get_mode(section: dict[str, int | str | bool], key: str, default: int) -> int:
    raw = section.get(key, default)
    if isinstance(raw, bool):
        return default
    return parse_mode(raw, default)


def get_permission_defaults(config: Config) -> dict[str, int | bool]:
    """Return directory/file modes per deploy layer plus the ``enabled`` switch.

    Example:
        >>> from lib_layered_config import Config
        >>> defaults = get_permission_defaults(Config({}, {}))
        >>> defaults["user_directory"] == 0o700
        True
        >>> defaults["enabled"]
        True
    """
    section = config.get("lib_layered_config", default={}).get("default_permissions", {})
    # Host shares the app layer defaults; lib_layered_config has no HOST_* constants.
    return {
        "app_directory": _get_mode(section, "app_directory", DEFAULT_APP_DIR_MODE),
        "app_file": _get_mode(section, "app_file", DEFAULT_APP_FILE_MODE),
        "host_directory": _get_mode(section, "host_directory", DEFAULT_APP_DIR_MODE),
        "host_file": _get_mode(section, "host_file", DEFAULT_APP_FILE_MODE),
        "user_directory": _get_mode(section, "user_directory", DEFAULT_USER_DIR_MODE),
        "user_file": _get_mode(section, "user_file", DEFAULT_USER_FILE_MODE),
        "enabled": section.get("enabled", True),
    }


__all__ = [
    "get_permission_defaults",
    "parse_mode",
]

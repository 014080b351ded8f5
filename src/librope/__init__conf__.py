"""Static package metadata surfaced to CLI commands and configuration paths.

Keep these values in sync with ``pyproject.toml``; ``tests/test_metadata_sync.py``
fails when they drift.
"""

from __future__ import annotations

#: Distribution name declared in ``pyproject.toml``.
name = "librope"
#: Human-readable summary shown in CLI help output.
title = "Symbol visibility policy and greeting scaffold for the librope library"
#: Current release version.
version = "0.1.0"
#: Author attribution surfaced in CLI output.
author = "librope developers"
#: Console-script name published by the package.
shell_command = "librope"

#: Vendor identifier for lib_layered_config paths (macOS/Windows).
LAYEREDCONF_VENDOR: str = "librope"
#: Application name for lib_layered_config paths (macOS/Windows).
LAYEREDCONF_APP: str = "librope"
#: Slug for Linux config paths and the environment variable prefix.
LAYEREDCONF_SLUG: str = "librope"


def print_info() -> None:
    """Print the summarised metadata block used by the ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for librope:
        ...
    """
    fields = (
        ("name", name),
        ("title", title),
        ("version", version),
        ("author", author),
        ("shell_command", shell_command),
    )
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))


__all__ = [
    "LAYEREDCONF_APP",
    "LAYEREDCONF_SLUG",
    "LAYEREDCONF_VENDOR",
    "author",
    "name",
    "print_info",
    "shell_command",
    "title",
    "version",
]

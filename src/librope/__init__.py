"""Public package surface exposing the visibility policy, greeting, and configuration.

This module provides the stable public API for the package, routing imports
through the proper architectural layers:
- Domain exports: visibility policy, export header rendering, greeting
- Composition exports: Wired adapter services (configuration)
- Metadata: Package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Composition exports (wired adapters)
from .composition import get_config

# Domain exports
from .domain.behaviors import build_greeting, greet
from .domain.enums import Annotation, BuildRole, BuildSignal, LinkageMode, TargetPlatform
from .domain.errors import ConfigurationError, InvalidArgumentError
from .domain.header import render_export_header
from .domain.visibility import (
    BuildConfiguration,
    decision_table,
    detect_platform,
    resolve_annotation,
    signal_from_defines,
)

__all__ = [
    "Annotation",
    "BuildConfiguration",
    "BuildRole",
    "BuildSignal",
    "ConfigurationError",
    "InvalidArgumentError",
    "LinkageMode",
    "TargetPlatform",
    "build_greeting",
    "decision_table",
    "detect_platform",
    "get_config",
    "greet",
    "print_info",
    "render_export_header",
    "resolve_annotation",
    "signal_from_defines",
]

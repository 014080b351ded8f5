"""Domain layer - pure business logic with no I/O or framework dependencies.

Contents:
    * :mod:`.behaviors` - Greeting service
    * :mod:`.visibility` - Symbol visibility policy (decision table)
    * :mod:`.header` - Export header rendering driven by the policy
    * :mod:`.enums` - Domain enumerations
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .behaviors import (
    GREETING_TEMPLATE,
    TextSink,
    build_greeting,
    greet,
)
from .enums import (
    Annotation,
    BuildRole,
    BuildSignal,
    DeployTarget,
    HeaderAction,
    LinkageMode,
    OutputFormat,
    PlatformSelection,
    TargetPlatform,
)
from .errors import ConfigurationError, InvalidArgumentError
from .header import render_export_header, symexport_macro, validate_macro_prefix
from .visibility import (
    DEFAULT_MACRO_PREFIX,
    BuildConfiguration,
    decision_table,
    detect_platform,
    macro_name,
    resolve_annotation,
    resolve_platform,
    resolve_signal,
    signal_from_defines,
)

__all__ = [
    # Behaviors
    "GREETING_TEMPLATE",
    "TextSink",
    "build_greeting",
    "greet",
    # Visibility
    "DEFAULT_MACRO_PREFIX",
    "BuildConfiguration",
    "decision_table",
    "detect_platform",
    "macro_name",
    "resolve_annotation",
    "resolve_platform",
    "resolve_signal",
    "signal_from_defines",
    # Header
    "render_export_header",
    "symexport_macro",
    "validate_macro_prefix",
    # Enums
    "Annotation",
    "BuildRole",
    "BuildSignal",
    "DeployTarget",
    "HeaderAction",
    "LinkageMode",
    "OutputFormat",
    "PlatformSelection",
    "TargetPlatform",
    # Errors
    "ConfigurationError",
    "InvalidArgumentError",
]

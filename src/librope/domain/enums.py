"""Type-safe domain enums for build configuration, output formats, and deployment."""

from __future__ import annotations

from enum import Enum


class LinkageMode(str, Enum):
    """How the library artifact is linked into its consumer.

    Example:
        >>> LinkageMode.SHARED.value
        'shared'
    """

    STATIC = "static"
    SHARED = "shared"


class BuildRole(str, Enum):
    """Whether the current compilation produces or consumes the library.

    Example:
        >>> BuildRole.BUILDING == "building"
        True
    """

    BUILDING = "building"
    CONSUMING = "consuming"


class TargetPlatform(str, Enum):
    """Platform ABI family relevant to symbol annotations.

    Only Windows-like targets (where compilers define ``_WIN32``) need
    ``__declspec`` annotations; every other platform is treated alike.

    Example:
        >>> TargetPlatform.WINDOWS.value
        'windows'
    """

    WINDOWS = "windows"
    OTHER = "other"


class PlatformSelection(str, Enum):
    """Platform choice accepted from configuration and the CLI.

    ``AUTO`` defers to the interpreter's host platform.

    Example:
        >>> PlatformSelection.AUTO.value
        'auto'
    """

    AUTO = "auto"
    WINDOWS = "windows"
    OTHER = "other"


class Annotation(str, Enum):
    """Symbol annotation selected by the visibility policy.

    Attributes:
        NONE: No annotation at all.
        IMPORT: Consumer-side declaration of a shared-library symbol.
        EXPORT: Producer-side definition of a shared-library symbol.

    Example:
        >>> Annotation.IMPORT.declspec
        '__declspec(dllimport)'
        >>> Annotation.NONE.declspec
        ''
    """

    NONE = "none"
    IMPORT = "import"
    EXPORT = "export"

    @property
    def declspec(self) -> str:
        """C spelling of the annotation (empty for ``NONE``)."""
        if self is Annotation.IMPORT:
            return "__declspec(dllimport)"
        if self is Annotation.EXPORT:
            return "__declspec(dllexport)"
        return ""


class BuildSignal(str, Enum):
    """The four mutually exclusive flags a build system sends about the library.

    Declared in the priority order the policy checks them.

    Example:
        >>> BuildSignal.SHARED_BUILD.linkage
        <LinkageMode.SHARED: 'shared'>
        >>> BuildSignal.STATIC.role
        <BuildRole.CONSUMING: 'consuming'>
        >>> BuildSignal.SHARED_BUILD.macro_suffix
        'SHARED_BUILD'
    """

    STATIC = "static"
    STATIC_BUILD = "static-build"
    SHARED = "shared"
    SHARED_BUILD = "shared-build"

    @property
    def linkage(self) -> LinkageMode:
        """Linking mode communicated by this signal."""
        if self in (BuildSignal.STATIC, BuildSignal.STATIC_BUILD):
            return LinkageMode.STATIC
        return LinkageMode.SHARED

    @property
    def role(self) -> BuildRole:
        """Build role communicated by this signal."""
        if self in (BuildSignal.STATIC_BUILD, BuildSignal.SHARED_BUILD):
            return BuildRole.BUILDING
        return BuildRole.CONSUMING

    @property
    def macro_suffix(self) -> str:
        """Preprocessor macro suffix, appended to the library prefix with ``_``."""
        return self.value.upper().replace("-", "_")


class HeaderAction(str, Enum):
    """Outcome of writing a generated export header.

    Example:
        >>> HeaderAction.DRIFT.value
        'drift'
    """

    CREATED = "created"
    OVERWRITTEN = "overwritten"
    UNCHANGED = "unchanged"
    SKIPPED = "skipped"
    DRIFT = "drift"


class OutputFormat(str, Enum):
    """Output format options for configuration and policy display.

    Inherits from str to allow direct string comparison and Click integration.

    Attributes:
        HUMAN: Human-readable output format.
        JSON: Machine-readable JSON output format.

    Example:
        >>> OutputFormat.HUMAN.value
        'human'
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


class DeployTarget(str, Enum):
    """Configuration deployment target layers.

    Attributes:
        APP: System-wide application configuration (requires privileges).
        HOST: System-wide host-specific configuration (requires privileges).
        USER: User-specific configuration (~/.config on Linux).

    Example:
        >>> DeployTarget.USER.value
        'user'
        >>> DeployTarget.APP == "app"
        True
    """

    APP = "app"
    HOST = "host"
    USER = "user"


__all__ = [
    "Annotation",
    "BuildRole",
    "BuildSignal",
    "DeployTarget",
    "HeaderAction",
    "LinkageMode",
    "OutputFormat",
    "PlatformSelection",
    "TargetPlatform",
]

"""Symbol visibility policy: map a build configuration to an annotation.

Shared libraries on Windows-like ABIs need a distinct annotation for the
consumer's declaration (``dllimport``) and the producer's definition
(``dllexport``). Static linking and every other ABI need none. When the build
system signals nothing, the policy falls back to no annotation, which links
correctly for both static and shared builds as long as the library exports
only functions and no mutable global data.

Everything here is pure: the decision is resolved once per build from its
configuration and carries no runtime state.

Contents:
    * :class:`BuildConfiguration` - immutable (linkage, role, platform) value.
    * :func:`resolve_annotation` - the decision table.
    * :func:`signal_from_defines` - interpret preprocessor-style macro names.
    * :func:`detect_platform` / :func:`resolve_platform` - platform lookup.
    * :func:`decision_table` - every row of the table, in priority order.
"""

from __future__ import annotations

import sys
from collections.abc import Iterable
from dataclasses import dataclass

from .enums import (
    Annotation,
    BuildRole,
    BuildSignal,
    LinkageMode,
    PlatformSelection,
    TargetPlatform,
)
from .errors import InvalidArgumentError

DEFAULT_MACRO_PREFIX = "LIBROPE"


@dataclass(frozen=True, slots=True)
class BuildConfiguration:
    """Build configuration the visibility policy decides on.

    ``linkage`` and ``role`` are either both set or both ``None``; the latter
    is the unconfigured case of a build system that signals nothing.

    Example:
        >>> config = BuildConfiguration(LinkageMode.SHARED, BuildRole.CONSUMING, TargetPlatform.WINDOWS)
        >>> config.is_configured
        True
        >>> BuildConfiguration.unconfigured(TargetPlatform.OTHER).is_configured
        False
    """

    linkage: LinkageMode | None
    role: BuildRole | None
    platform: TargetPlatform

    def __post_init__(self) -> None:
        if (self.linkage is None) != (self.role is None):
            raise InvalidArgumentError("linkage and role must both be set or both be omitted")

    @property
    def is_configured(self) -> bool:
        return self.linkage is not None

    @classmethod
    def unconfigured(cls, platform: TargetPlatform) -> BuildConfiguration:
        return cls(None, None, platform)

    @classmethod
    def from_signal(cls, signal: BuildSignal | None, platform: TargetPlatform) -> BuildConfiguration:
        """Build the configuration a build signal communicates.

        Example:
            >>> BuildConfiguration.from_signal(BuildSignal.STATIC_BUILD, TargetPlatform.OTHER).role
            <BuildRole.BUILDING: 'building'>
            >>> BuildConfiguration.from_signal(None, TargetPlatform.OTHER).is_configured
            False
        """
        if signal is None:
            return cls.unconfigured(platform)
        return cls(signal.linkage, signal.role, platform)

    def describe(self) -> str:
        """Short human-readable label, e.g. ``shared/consuming/windows``."""
        if self.linkage is None or self.role is None:
            return f"unconfigured/{self.platform.value}"
        return f"{self.linkage.value}/{self.role.value}/{self.platform.value}"


def resolve_annotation(configuration: BuildConfiguration) -> Annotation:
    """Select the symbol annotation for ``configuration``.

    Rules, first match wins:

    1. static, consuming: none
    2. static, building: none
    3. shared, consuming: import on Windows, otherwise none
    4. shared, building: export on Windows, otherwise none
    5. unconfigured: none

    Args:
        configuration: The build configuration to decide on.

    Returns:
        The single annotation applied to every exported symbol of the build.

    Example:
        >>> resolve_annotation(BuildConfiguration(LinkageMode.SHARED, BuildRole.CONSUMING, TargetPlatform.WINDOWS))
        <Annotation.IMPORT: 'import'>
        >>> resolve_annotation(BuildConfiguration(LinkageMode.SHARED, BuildRole.BUILDING, TargetPlatform.OTHER))
        <Annotation.NONE: 'none'>
    """
    if configuration.linkage is LinkageMode.STATIC:
        return Annotation.NONE
    if configuration.linkage is LinkageMode.SHARED:
        if configuration.platform is not TargetPlatform.WINDOWS:
            return Annotation.NONE
        if configuration.role is BuildRole.CONSUMING:
            return Annotation.IMPORT
        return Annotation.EXPORT
    return Annotation.NONE


def resolve_signal(signal: BuildSignal | None, platform: TargetPlatform) -> Annotation:
    """Shortcut for resolving the annotation of a build signal.

    Example:
        >>> resolve_signal(BuildSignal.SHARED_BUILD, TargetPlatform.WINDOWS)
        <Annotation.EXPORT: 'export'>
    """
    return resolve_annotation(BuildConfiguration.from_signal(signal, platform))


def macro_name(prefix: str, signal: BuildSignal) -> str:
    """Return the macro a build system defines to send ``signal``.

    Example:
        >>> macro_name("LIBROPE", BuildSignal.SHARED_BUILD)
        'LIBROPE_SHARED_BUILD'
    """
    return f"{prefix}_{signal.macro_suffix}"


def signal_from_defines(defines: Iterable[str], prefix: str = DEFAULT_MACRO_PREFIX) -> BuildSignal | None:
    """Interpret defined macro names the way the preprocessor chain does.

    Signals are checked in priority order (``STATIC``, ``STATIC_BUILD``,
    ``SHARED``, ``SHARED_BUILD``); the first defined one wins even when a
    misbehaving build defines several. Unrelated names are ignored.

    Args:
        defines: Macro names defined for the compilation.
        prefix: Library macro prefix.

    Returns:
        The winning signal, or ``None`` when no signal is defined.

    Example:
        >>> signal_from_defines(["NDEBUG", "LIBROPE_SHARED"])
        <BuildSignal.SHARED: 'shared'>
        >>> signal_from_defines(["LIBROPE_SHARED_BUILD", "LIBROPE_STATIC"])
        <BuildSignal.STATIC: 'static'>
        >>> signal_from_defines([]) is None
        True
    """
    defined = frozenset(defines)
    for signal in BuildSignal:
        if macro_name(prefix, signal) in defined:
            return signal
    return None


def detect_platform(system: str | None = None) -> TargetPlatform:
    """Classify a ``sys.platform`` string.

    Only native Windows (``win32``, where compilers define ``_WIN32``) counts
    as Windows-like; Cygwin does not define ``_WIN32``.

    Example:
        >>> detect_platform("win32")
        <TargetPlatform.WINDOWS: 'windows'>
        >>> detect_platform("cygwin")
        <TargetPlatform.OTHER: 'other'>
    """
    value = sys.platform if system is None else system
    return TargetPlatform.WINDOWS if value == "win32" else TargetPlatform.OTHER


def resolve_platform(selection: PlatformSelection) -> TargetPlatform:
    """Turn a configured platform selection into a concrete platform.

    Example:
        >>> resolve_platform(PlatformSelection.WINDOWS)
        <TargetPlatform.WINDOWS: 'windows'>
    """
    if selection is PlatformSelection.AUTO:
        return detect_platform()
    return TargetPlatform(selection.value)


def decision_table() -> list[tuple[BuildConfiguration, Annotation]]:
    """Return every row of the decision table in priority order.

    Covers all linkage/role/platform combinations followed by the
    unconfigured fallback on each platform.

    Example:
        >>> rows = decision_table()
        >>> len(rows)
        10
        >>> rows[4][0].describe(), rows[4][1].value
        ('shared/consuming/windows', 'import')
    """
    configurations = [
        BuildConfiguration.from_signal(signal, platform) for signal in BuildSignal for platform in TargetPlatform
    ]
    configurations.extend(BuildConfiguration.unconfigured(platform) for platform in TargetPlatform)
    return [(configuration, resolve_annotation(configuration)) for configuration in configurations]


__all__ = [
    "DEFAULT_MACRO_PREFIX",
    "BuildConfiguration",
    "decision_table",
    "detect_platform",
    "macro_name",
    "resolve_annotation",
    "resolve_platform",
    "resolve_signal",
    "signal_from_defines",
]

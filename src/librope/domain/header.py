"""Render the C/C++ export header that applies the visibility policy at compile time.

The header is generated from :func:`~librope.domain.visibility.resolve_annotation`
rather than written by hand, so the preprocessor chain always agrees with the
decision table.
"""

from __future__ import annotations

import re

from .enums import BuildRole, BuildSignal, TargetPlatform
from .errors import InvalidArgumentError
from .visibility import DEFAULT_MACRO_PREFIX, macro_name, resolve_signal

_PREFIX_PATTERN = re.compile(r"^[A-Z_][A-Z0-9_]*$")

_PREAMBLE = (
    "#pragma once",
    "",
    "// Generated by librope. Do not edit manually.",
    "//",
    "// Exporting classes that inherit from non-exported/imported bases (e.g.,",
    "// std::string) does not work; neither do exported class templates or",
    "// inline-only classes. Export functions and complete specializations.",
    "",
)

_FALLBACK_COMMENT = (
    "// None of the above macros are defined: some third-party build system",
    "// cannot or does not signal the library type. No annotation works for both",
    "// static and shared libraries as long as the library exports only functions",
    "// (no global exported data); for the shared case it is merely sub-optimal",
    "// compared to dllimport.",
)


def validate_macro_prefix(prefix: str) -> None:
    """Reject prefixes that are not upper-case C identifiers.

    Raises:
        InvalidArgumentError: If ``prefix`` is empty or malformed.

    Example:
        >>> validate_macro_prefix("LIBROPE")
        >>> validate_macro_prefix("lib-rope")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        InvalidArgumentError: invalid macro prefix 'lib-rope'
    """
    if not _PREFIX_PATTERN.fullmatch(prefix):
        raise InvalidArgumentError(f"invalid macro prefix {prefix!r}: expected an upper-case C identifier")


def symexport_macro(prefix: str) -> str:
    """Name of the annotation macro placed in front of exported declarations.

    Example:
        >>> symexport_macro("LIBROPE")
        'LIBROPE_SYMEXPORT'
    """
    return f"{prefix}_SYMEXPORT"


def _describe_signal(signal: BuildSignal) -> str:
    verb = "Building" if signal.role is BuildRole.BUILDING else "Using"
    return f"{verb} {signal.linkage.value}."


def _define(symbol: str, spelling: str, indent: str) -> str:
    return f"#{indent}define {symbol} {spelling}".rstrip()


def _signal_branch(signal: BuildSignal, symbol: str) -> list[str]:
    on_windows = resolve_signal(signal, TargetPlatform.WINDOWS)
    elsewhere = resolve_signal(signal, TargetPlatform.OTHER)
    if on_windows is elsewhere:
        return [_define(symbol, on_windows.declspec, "  ")]
    return [
        "#  ifdef _WIN32",
        _define(symbol, on_windows.declspec, "    "),
        "#  else",
        _define(symbol, elsewhere.declspec, "    "),
        "#  endif",
    ]


def render_export_header(prefix: str = DEFAULT_MACRO_PREFIX) -> str:
    """Render the export header for a library macro prefix.

    Args:
        prefix: Upper-case macro prefix of the library (``LIBROPE``).

    Returns:
        Header text ending with a newline. Identical for identical prefixes.

    Raises:
        InvalidArgumentError: If ``prefix`` is not an upper-case C identifier.

    Example:
        >>> text = render_export_header("LIBROPE")
        >>> "#elif defined(LIBROPE_SHARED)" in text
        True
        >>> "#    define LIBROPE_SYMEXPORT __declspec(dllimport)" in text
        True
    """
    validate_macro_prefix(prefix)
    symbol = symexport_macro(prefix)

    conditions = [
        ("#if" if index == 0 else "#elif", f"defined({macro_name(prefix, signal)})", signal)
        for index, signal in enumerate(BuildSignal)
    ]
    width = max(len(f"{directive} {test}") for directive, test, _ in conditions)

    lines = list(_PREAMBLE)
    for directive, test, signal in conditions:
        lines.append(f"{directive} {test}".ljust(width) + f" // {_describe_signal(signal)}")
        lines.extend(_signal_branch(signal, symbol))
    lines.append("#else")
    lines.extend(_FALLBACK_COMMENT)
    lines.append(f"#  define {symbol}".ljust(width) + " // Using static or shared.")
    lines.append("#endif")
    return "\n".join(lines) + "\n"


__all__ = [
    "render_export_header",
    "symexport_macro",
    "validate_macro_prefix",
]

"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class InvalidArgumentError(ValueError):
    """A caller supplied a value that violates an operation's contract.

    Raised synchronously to the immediate caller (empty greeting name,
    half-specified build configuration, malformed macro prefix). It is a
    contract violation, never a transient condition, so nothing retries it.
    Inherits from ValueError so generic ``except ValueError`` handlers
    still catch it.

    Example:
        >>> from librope.domain.errors import InvalidArgumentError
        >>> err = InvalidArgumentError("name must not be empty")
        >>> str(err)
        'name must not be empty'
        >>> isinstance(err, ValueError)
        True
    """


class ConfigurationError(Exception):
    """Missing, invalid, or incomplete configuration.

    Raised when values in the ``[build]`` configuration section cannot be
    interpreted (unknown build signal or platform, malformed macro prefix).
    Caught at CLI boundaries and mapped to ``ExitCode.CONFIG_ERROR``.

    Example:
        >>> from librope.domain.errors import ConfigurationError
        >>> err = ConfigurationError("Unknown build signal: 'dynamic'")
        >>> str(err)
        "Unknown build signal: 'dynamic'"
    """


__all__ = [
    "ConfigurationError",
    "InvalidArgumentError",
]

"""Pure domain functions for the greeting service."""

from __future__ import annotations

from typing import Protocol

from .errors import InvalidArgumentError

GREETING_TEMPLATE = "Hello, {name}!"


class TextSink(Protocol):
    """Anything accepting text through ``write`` (streams, files, StringIO)."""

    def write(self, text: str, /) -> object: ...


def build_greeting(name: str) -> str:
    r"""Return the greeting for ``name``.

    The name is checked exactly as given; whitespace is not trimmed, so
    ``" "`` is a valid name.

    Args:
        name: Non-empty text to embed in the greeting.

    Returns:
        The formatted greeting without a trailing newline.

    Raises:
        InvalidArgumentError: If ``name`` is empty.

    Example:
        >>> build_greeting("World")
        'Hello, World!'
        >>> build_greeting("")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        InvalidArgumentError: name must not be empty
    """
    if not name:
        raise InvalidArgumentError("name must not be empty")
    return GREETING_TEMPLATE.format(name=name)


def greet(name: str, sink: TextSink) -> None:
    r"""Write the greeting for ``name`` into ``sink``.

    Validation happens before any output, and the full line goes out in a
    single ``write`` call: either the whole message lands in the sink or
    nothing does. The function holds no state, so concurrent callers with
    independent sinks need no coordination.

    Args:
        name: Non-empty text to greet.
        sink: Writable text sink receiving one line.

    Raises:
        InvalidArgumentError: If ``name`` is empty; ``sink`` is left untouched.

    Example:
        >>> import io
        >>> buffer = io.StringIO()
        >>> greet("I am a string!", buffer)
        >>> buffer.getvalue()
        'Hello, I am a string!!\n'
    """
    message = build_greeting(name) + "\n"
    sink.write(message)


__all__ = [
    "GREETING_TEMPLATE",
    "TextSink",
    "build_greeting",
    "greet",
]

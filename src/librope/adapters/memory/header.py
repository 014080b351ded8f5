"""In-memory export header writer for testing.

Provides a header writer that satisfies the WriteExportHeader Protocol but
keeps every "file" in a dictionary instead of touching the filesystem.

Contents:
    * :class:`HeaderWriterSpy` - Captures header writes for test assertions.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ...domain.enums import HeaderAction
from ...domain.header import render_export_header
from ...domain.visibility import DEFAULT_MACRO_PREFIX
from ..header.writer import HeaderWriteResult


def _empty_call_list() -> list[dict[str, Any]]:
    """Create an empty typed list for call records."""
    return []


def _empty_file_map() -> dict[Path, str]:
    """Create an empty typed mapping for simulated files."""
    return {}


@dataclass
class HeaderWriterSpy:
    """Captures export-header writes for test assertions.

    Each test should create its own HeaderWriterSpy instance. ``files`` acts as
    the simulated filesystem: seed it to model a header that already exists.

    Attributes:
        calls: Captured write_export_header calls.
        files: Simulated file contents keyed by destination path.
        raise_exception: When set, writes raise this exception.

    Example:
        >>> spy = HeaderWriterSpy()
        >>> spy.write_export_header(Path("export.hxx"), prefix="ROPE").action
        <HeaderAction.CREATED: 'created'>
        >>> spy.write_export_header(Path("export.hxx"), prefix="ROPE").action
        <HeaderAction.UNCHANGED: 'unchanged'>
        >>> len(spy.calls)
        2
    """

    calls: list[dict[str, Any]] = field(default_factory=_empty_call_list)
    files: dict[Path, str] = field(default_factory=_empty_file_map)
    raise_exception: Exception | None = None

    def clear(self) -> None:
        """Reset captured data for next test."""
        self.calls.clear()
        self.files.clear()
        self.raise_exception = None

    def write_export_header(
        self,
        destination: Path,
        *,
        prefix: str = DEFAULT_MACRO_PREFIX,
        force: bool = False,
        check: bool = False,
    ) -> HeaderWriteResult:
        """Record the call and apply the writer's action rules to ``files``.

        Raises:
            InvalidArgumentError: If ``prefix`` is not an upper-case C identifier.
            Exception: If raise_exception is set, raises that exception.
        """
        self.calls.append({"destination": destination, "prefix": prefix, "force": force, "check": check})
        if self.raise_exception is not None:
            raise self.raise_exception

        content = render_export_header(prefix)
        existing = self.files.get(destination)
        if existing == content:
            return HeaderWriteResult(destination, HeaderAction.UNCHANGED)
        if check:
            return HeaderWriteResult(destination, HeaderAction.DRIFT)
        if existing is not None and not force:
            return HeaderWriteResult(destination, HeaderAction.SKIPPED)
        self.files[destination] = content
        action = HeaderAction.CREATED if existing is None else HeaderAction.OVERWRITTEN
        return HeaderWriteResult(destination, action)


__all__ = ["HeaderWriterSpy"]

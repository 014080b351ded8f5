"""Write the generated export header to disk, reporting what changed."""

from __future__ import annotations

import difflib
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from librope.domain.enums import HeaderAction
from librope.domain.header import render_export_header
from librope.domain.visibility import DEFAULT_MACRO_PREFIX

logger = logging.getLogger(__name__)

#: File name used when the destination names a directory.
DEFAULT_HEADER_NAME = "export.hxx"

_DIRECTORY_SUFFIXES = tuple(sep for sep in (os.sep, os.altsep) if sep)


@dataclass(frozen=True, slots=True)
class HeaderWriteResult:
    """Where the header went, what happened, and the unified diff (if any)."""

    destination: Path
    action: HeaderAction
    diff: str = ""


def resolve_header_path(destination: str | os.PathLike[str]) -> Path:
    """Return the header file path for ``destination``.

    An existing directory, or any destination spelled with a trailing path
    separator, receives ``export.hxx``. Everything else is the file itself.

    Example:
        >>> import tempfile
        >>> with tempfile.TemporaryDirectory() as tmp:
        ...     resolve_header_path(Path(tmp)).name
        'export.hxx'
        >>> resolve_header_path("include/librope/").as_posix()
        'include/librope/export.hxx'
        >>> resolve_header_path(Path("include/librope/export.h")).name
        'export.h'
    """
    raw = os.fspath(destination)
    path = Path(raw)
    if raw.endswith(_DIRECTORY_SUFFIXES) or path.is_dir():
        return path / DEFAULT_HEADER_NAME
    return path


def _unified_diff(old: str, new: str, path: Path) -> str:
    lines = difflib.unified_diff(
        old.splitlines(),
        new.splitlines(),
        fromfile=f"a/{path.name}",
        tofile=f"b/{path.name}",
        lineterm="",
    )
    return "\n".join(lines)


def write_export_header(
    destination: str | os.PathLike[str],
    *,
    prefix: str = DEFAULT_MACRO_PREFIX,
    force: bool = False,
    check: bool = False,
) -> HeaderWriteResult:
    """Render the export header for ``prefix`` and write it to ``destination``.

    Args:
        destination: Header file path, or a directory (existing, or written
            with a trailing separator) to place ``export.hxx`` into.
        prefix: Upper-case library macro prefix.
        force: Overwrite an existing header whose content differs.
        check: Only compare; never write. Differences report ``DRIFT``.

    Returns:
        HeaderWriteResult with one of the HeaderAction outcomes:
        ``UNCHANGED`` (identical content), ``DRIFT`` (check mode, content
        differs or file missing), ``SKIPPED`` (differs, no force),
        ``CREATED`` or ``OVERWRITTEN``.

    Raises:
        InvalidArgumentError: If ``prefix`` is not an upper-case C identifier.
        OSError: If the file cannot be read or written.
    """
    content = render_export_header(prefix)
    path = resolve_header_path(destination)
    existing = path.read_text(encoding="utf-8") if path.is_file() else None

    if existing == content:
        return HeaderWriteResult(path, HeaderAction.UNCHANGED)
    diff = _unified_diff(existing or "", content, path)
    if check:
        return HeaderWriteResult(path, HeaderAction.DRIFT, diff)
    if existing is not None and not force:
        return HeaderWriteResult(path, HeaderAction.SKIPPED, diff)

    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8", newline="\n") as handle:
        handle.write(content)
    action = HeaderAction.CREATED if existing is None else HeaderAction.OVERWRITTEN
    logger.debug("Export header written", extra={"path": str(path), "action": action.value})
    return HeaderWriteResult(path, action, diff)


__all__ = [
    "DEFAULT_HEADER_NAME",
    "HeaderWriteResult",
    "resolve_header_path",
    "write_export_header",
]

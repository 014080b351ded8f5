"""Export header adapter - writes the generated header to the filesystem.

Contents:
    * :mod:`.writer` - Header writing with created/overwritten/unchanged/skipped/drift outcomes
"""

from __future__ import annotations

from .writer import DEFAULT_HEADER_NAME, HeaderWriteResult, resolve_header_path, write_export_header

__all__ = [
    "DEFAULT_HEADER_NAME",
    "HeaderWriteResult",
    "resolve_header_path",
    "write_export_header",
]

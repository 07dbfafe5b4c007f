"""Utility functions for paper-export."""

from __future__ import annotations

from pathlib import Path, PurePosixPath

from .config import CONTENT_BASE, EXPORT_FORMAT, OUTPUT_EXT, SOURCE_EXT
from .http import http_content

__all__ = [
    "export_file",
    "relative_to_root",
    "output_path_for",
]


def export_file(
    token: str,
    file_id: str,
    *,
    export_format: str = EXPORT_FORMAT,
    debug: bool = False,
) -> bytes:
    """Export a Paper doc through ``files/export`` and return the raw body.

    ``file_id`` is the ``id:...`` handle from the listing; ids survive renames
    between listing and export, unlike paths.
    """

    return http_content(
        f"{CONTENT_BASE}/files/export",
        token,
        {"path": file_id, "export_format": export_format},
        debug=debug,
    )


def relative_to_root(path: str, root: str) -> str:
    """Strip ``root`` from the front of a Dropbox ``path``.

    Dropbox paths are case-insensitive, so a root configured as
    ``/migrated paper docs`` still matches ``/Migrated Paper Docs/...``.
    """

    root = root.rstrip("/")
    if path.startswith(root):
        rel = path[len(root):]
    elif path.lower().startswith(root.lower()):
        rel = path[len(root):]
    else:
        rel = path
    return rel.lstrip("/")


def output_path_for(
    path: str,
    root: str,
    out_dir: Path,
    source_ext: str = SOURCE_EXT,
    output_ext: str = OUTPUT_EXT,
) -> Path:
    """Return the local file that mirrors the Dropbox file at ``path``.

    ``/Migrated Paper Docs/Team/Notes.paper`` under the root
    ``/Migrated Paper Docs`` becomes ``<out_dir>/Team/Notes.md``.
    """

    rel = relative_to_root(path, root)
    if rel.endswith(source_ext):
        rel = rel[: -len(source_ext)] + output_ext
    return Path(out_dir).joinpath(*PurePosixPath(rel).parts)

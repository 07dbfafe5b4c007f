"""Walk a Dropbox folder tree page by page.

``files/list_folder`` returns one page of entries plus an opaque ``cursor``.
While ``has_more`` is true the next page is requested from
``files/list_folder/continue`` with that cursor.  :func:`iter_pages` exposes
this as a lazy generator so only one page is held in memory at a time.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterator, Optional, Tuple, Union

from .config import API_BASE
from .errors import ApiError, ListingError
from .http import http_json

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FileRecord:
    path: str
    path_lower: str
    id: str
    name: str


@dataclass(frozen=True)
class FolderRecord:
    path: str
    id: str
    name: str


@dataclass(frozen=True)
class DeletedRecord:
    path: str
    name: str


Record = Union[FileRecord, FolderRecord, DeletedRecord]


@dataclass(frozen=True)
class Page:
    entries: Tuple[Record, ...]
    cursor: str
    has_more: bool

    def files(self) -> Iterator[FileRecord]:
        """Yield only the file entries, in listing order."""
        for entry in self.entries:
            if isinstance(entry, FileRecord):
                yield entry


def parse_entry(raw: Dict[str, Any]) -> Optional[Record]:
    """Turn one listing entry into a record, dispatching on its ``.tag``.

    Unknown tags return ``None`` so newer API entry kinds are ignored instead
    of breaking the walk.
    """

    tag = raw.get(".tag")
    path = raw.get("path_display") or raw.get("path_lower") or ""
    name = raw.get("name") or ""
    if tag == "file":
        return FileRecord(
            path=path,
            path_lower=raw.get("path_lower") or path.lower(),
            id=raw.get("id") or "",
            name=name,
        )
    if tag == "folder":
        return FolderRecord(path=path, id=raw.get("id") or "", name=name)
    if tag == "deleted":
        return DeletedRecord(path=path, name=name)
    logger.debug("Ignoring listing entry with tag %r: %s", tag, path)
    return None


def parse_page(data: Dict[str, Any]) -> Page:
    entries = []
    for raw in data.get("entries") or []:
        record = parse_entry(raw)
        if record is not None:
            entries.append(record)
    return Page(
        entries=tuple(entries),
        cursor=data.get("cursor") or "",
        has_more=bool(data.get("has_more")),
    )


def _list_path(root: str) -> str:
    # The API spells the account root as "" rather than "/".
    return "" if root in ("", "/") else root


def iter_pages(
    token: str,
    root: str,
    *,
    recursive: bool = True,
    debug: bool = False,
) -> Iterator[Page]:
    """Yield pages of the listing under ``root``.

    Raises :class:`ListingError` if the first request or any continuation
    fails; a partial tree is never returned silently.
    """

    path = _list_path(root)
    if debug:
        logger.debug("Listing files in Dropbox folder: %r (recursive=%s)", path, recursive)
    try:
        data = http_json(
            f"{API_BASE}/files/list_folder",
            token,
            {"path": path, "recursive": recursive},
            debug=debug,
        )
    except ApiError as e:
        raise ListingError(f"Failed to list folder {root!r}: {e}") from e
    page = parse_page(data)
    yield page

    while page.has_more:
        if not page.cursor:
            raise ListingError("Listing reported more pages but returned no cursor")
        if debug:
            logger.debug("Fetching next page of files...")
        try:
            data = http_json(
                f"{API_BASE}/files/list_folder/continue",
                token,
                {"cursor": page.cursor},
                debug=debug,
            )
        except ApiError as e:
            raise ListingError(f"Failed to get next page of files: {e}") from e
        page = parse_page(data)
        yield page

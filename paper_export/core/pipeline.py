"""Export every Paper doc under the source root to a mirrored Markdown tree."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Tuple

from tqdm import tqdm
from tqdm.contrib.logging import logging_redirect_tqdm

from .config import ExportConfig
from .errors import ApiError, OutputError
from .listing import FileRecord, iter_pages
from .utils import export_file, output_path_for

logger = logging.getLogger(__name__)


@dataclass
class ExportSummary:
    exported: List[Path] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)
    errors: List[Tuple[str, str]] = field(default_factory=list)

    @property
    def total(self) -> int:
        """Number of matching documents that were attempted."""
        return len(self.exported) + len(self.errors)


def prepare_output_dir(out_dir: Path) -> None:
    try:
        Path(out_dir).mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise OutputError(f"Failed to create output directory {out_dir}: {e}") from e


def export_record(
    record: FileRecord,
    config: ExportConfig,
    token: str,
    summary: ExportSummary,
    written: Dict[str, str],
) -> bool:
    """Export a single listing entry.  Returns ``True`` if a file was written.

    Failures are logged and recorded in ``summary``; they never propagate so
    one bad document cannot stop the migration.
    """

    if not record.name.endswith(config.source_ext):
        logger.debug("Skipping non-Paper file: %s", record.path)
        summary.skipped.append(record.path)
        return False

    logger.debug("Exporting Dropbox Paper doc: %s", record.path)
    try:
        content = export_file(
            token,
            record.id,
            export_format=config.export_format,
            debug=config.debug,
        )
    except ApiError as e:
        logger.error("Failed to export file %s: %s", record.path, e)
        summary.errors.append((record.path, str(e)))
        return False

    out_path = output_path_for(
        record.path,
        config.source_root,
        config.out_dir,
        config.source_ext,
        config.output_ext,
    )
    if config.debug:
        logger.debug("Writing exported content to %s", out_path)

    try:
        out_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.error("Failed to create directory for %s: %s", out_path, e)
        summary.errors.append((record.path, str(e)))
        return False

    # Case-insensitive filesystems fold these together; last write wins.
    key = str(out_path).casefold()
    if key in written:
        logger.warning(
            "%s overwrites %s exported from %s", record.path, out_path, written[key]
        )

    try:
        out_path.write_bytes(content)
    except OSError as e:
        logger.error("Failed to write file %s: %s", out_path, e)
        summary.errors.append((record.path, str(e)))
        return False

    written[key] = record.path
    summary.exported.append(out_path)
    logger.info("Exported %s -> %s", record.path, out_path)
    return True


def run_export(config: ExportConfig, token: str) -> ExportSummary:
    """Walk the listing under ``config.source_root`` and export each Paper doc.

    Raises :class:`~paper_export.core.errors.OutputError` if the output root
    cannot be created and :class:`~paper_export.core.errors.ListingError` if
    any listing request fails.  Per-document failures end up in the returned
    summary.
    """

    prepare_output_dir(config.out_dir)

    summary = ExportSummary()
    written: Dict[str, str] = {}
    pages = iter_pages(
        token,
        config.source_root,
        recursive=config.recursive,
        debug=config.debug,
    )
    with logging_redirect_tqdm(), tqdm(unit="doc", desc="Exporting", disable=None) as bar:
        for page in pages:
            for record in page.files():
                if export_record(record, config, token, summary, written):
                    bar.update(1)
    return summary

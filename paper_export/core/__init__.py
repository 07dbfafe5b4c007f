"""Core utilities for paper-export."""

from .config import (
    API_BASE,
    CONTENT_BASE,
    DEFAULT_OUT_DIR,
    DEFAULT_SOURCE_ROOT,
    TOKEN_ENV,
    ExportConfig,
    get_token,
    load_config,
)
from .errors import ApiError, ConfigError, ListingError, OutputError, PaperExportError
from .http import http_content, http_json
from .listing import DeletedRecord, FileRecord, FolderRecord, Page, iter_pages, parse_entry
from .log import setup_logging
from .pipeline import ExportSummary, export_record, run_export
from .utils import export_file, output_path_for, relative_to_root

__all__ = [
    "API_BASE", "CONTENT_BASE", "DEFAULT_OUT_DIR", "DEFAULT_SOURCE_ROOT", "TOKEN_ENV",
    "ExportConfig", "get_token", "load_config",
    "ApiError", "ConfigError", "ListingError", "OutputError", "PaperExportError",
    "http_content", "http_json",
    "DeletedRecord", "FileRecord", "FolderRecord", "Page", "iter_pages", "parse_entry",
    "setup_logging",
    "ExportSummary", "export_record", "run_export",
    "export_file", "output_path_for", "relative_to_root",
]
